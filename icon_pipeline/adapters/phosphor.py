"""
Phosphor Icons — ``@phosphor-icons/core``.

Layout:
    assets/regular/<name>.svg
    assets/bold/<name>-bold.svg
    assets/fill/<name>-fill.svg
    dist/index.umd.js          exports ``icons``: [{name, categories, tags}, ...]

The metadata only ships as a JavaScript bundle, so it is exported to JSON by
running ``node`` once per pipeline run. Without node the icons are still
processed and fall back to keyword categorization.
"""

from __future__ import annotations

import json
import shutil
import subprocess
from collections.abc import Iterator
from pathlib import Path

from ..categorizer import categorize, map_vendor_category
from ..constants import DEFAULT_CATEGORY, PHOSPHOR_CATEGORY_MAP
from ..exceptions import AdapterError
from ..models import IconType, LibraryInfo
from ..utils import list_svgs
from .base import IconSource, LibraryAdapter, StyleVariant, as_tags

# thin, light and duotone are left out to keep the manifest size manageable
STYLES: tuple[StyleVariant, ...] = (
    StyleVariant("regular", IconType.OUTLINE),
    StyleVariant("bold", IconType.BOLD, suffix="-bold"),
    StyleVariant("fill", IconType.FILLED, suffix="-fill"),
)

_NEW_TAG_MARKER = "*new*"
_EXPORT_SCRIPT = "process.stdout.write(JSON.stringify(require(process.argv[1]).icons))"


def export_umd_icons(bundle: Path) -> list[dict]:
    """Run ``node`` to dump the ``icons`` export of *bundle* as JSON.

    Raises:
        AdapterError: If node is missing or the export fails.
    """
    node = shutil.which("node")
    if node is None:
        raise AdapterError("node executable not found on PATH")
    result = subprocess.run(
        [node, "-e", _EXPORT_SCRIPT, str(bundle)],
        capture_output=True,
        text=True,
        check=False,
    )
    if result.returncode != 0:
        raise AdapterError(f"metadata export failed: {result.stderr.strip()}")
    try:
        icons = json.loads(result.stdout)
    except json.JSONDecodeError as exc:
        raise AdapterError(f"metadata export is not JSON: {exc}") from exc
    if not isinstance(icons, list):
        raise AdapterError(f"metadata export: expected a list, got {type(icons).__name__}")
    return icons


class PhosphorAdapter(LibraryAdapter):
    package = "@phosphor-icons/core"
    category_map = PHOSPHOR_CATEGORY_MAP
    info = LibraryInfo(
        id="phosphor",
        name="Phosphor Icons",
        version="2.1.1",
        url="https://phosphoricons.com",
        license="MIT",
        license_url="https://github.com/phosphor-icons/core/blob/main/LICENSE",
        attribution="Phosphor Icons Contributors",
        description="A flexible icon family for interfaces, diagrams, and presentations",
    )

    @property
    def source_dir(self) -> Path:
        return self.package_dir / "assets"

    def _load_metadata(self) -> dict[str, dict]:
        bundle = self.package_dir / "dist" / "index.umd.js"
        if not bundle.is_file():
            return {}
        try:
            entries = export_umd_icons(bundle)
        except AdapterError as exc:
            print(f"  [WARN] {exc}; using keyword categories only")
            return {}
        print(f"  Loaded metadata for {len(entries)} icons")
        return {
            entry["name"]: entry
            for entry in entries
            if isinstance(entry, dict) and "name" in entry
        }

    def resolve_category(self, source: IconSource) -> str:
        """First mapped Phosphor category; keywords only for icons with none."""
        mapped = map_vendor_category(source.vendor_categories, self.category_map)
        if mapped:
            return mapped
        if source.vendor_categories:
            return DEFAULT_CATEGORY
        return categorize(source.name, source.tags)

    def iter_sources(self) -> Iterator[IconSource]:
        meta_by_name = self._load_metadata()

        for style in STYLES:
            style_dir = self.source_dir / style.directory
            if not style_dir.is_dir():
                continue
            for svg_path in list_svgs(style_dir):
                # "acorn-bold.svg" → "acorn"
                name = svg_path.stem.removesuffix(style.suffix)
                meta = meta_by_name.get(name) or {}
                tags = [t for t in as_tags(meta.get("tags")) if t != _NEW_TAG_MARKER]
                yield IconSource(
                    name=name,
                    style=style,
                    path=svg_path,
                    tags=tuple(tags),
                    vendor_categories=as_tags(meta.get("categories")),
                )
