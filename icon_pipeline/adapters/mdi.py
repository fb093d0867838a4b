"""
Material Design Icons — ``@mdi/svg``.

Layout:
    svg/<name>.svg           filled by default, ``-outline`` suffix for outline
    meta.json                [{name, tags, aliases, deprecated}, ...]

Deprecated entries and ``Brand / Logo`` entries are skipped. MDI's own tag
taxonomy ("Arrow", "Date / Time", ...) is treated as the vendor category;
aliases become the icon's tags.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from ..constants import MDI_BRAND_TAG, MDI_TAG_MAP
from ..models import IconType, LibraryInfo
from ..utils import list_svgs, strip_style_suffix
from .base import IconSource, LibraryAdapter, StyleVariant, as_tags, load_json

OUTLINE = StyleVariant("outline", IconType.OUTLINE, suffix="-outline")
FILLED = StyleVariant("filled", IconType.FILLED)


class MdiAdapter(LibraryAdapter):
    package = "@mdi/svg"
    category_map = MDI_TAG_MAP
    info = LibraryInfo(
        id="mdi",
        name="Material Design Icons",
        version="7.4.47",
        url="https://pictogrammers.com/library/mdi/",
        license="Apache-2.0",
        license_url="https://github.com/Templarian/MaterialDesign/blob/master/LICENSE",
        attribution="Pictogrammers",
        description="Community-led icon set following Google's Material Design guidelines",
    )

    @property
    def source_dir(self) -> Path:
        return self.package_dir / "svg"

    def _load_metadata(self) -> dict[str, dict]:
        meta_file = self.package_dir / "meta.json"
        if not meta_file.is_file():
            return {}
        entries = load_json(meta_file, list)
        print(f"  Loaded metadata for {len(entries)} icons")
        return {
            entry["name"]: entry
            for entry in entries
            if isinstance(entry, dict) and "name" in entry
        }

    @staticmethod
    def _is_skipped(meta: dict) -> bool:
        return bool(meta.get("deprecated")) or MDI_BRAND_TAG in as_tags(meta.get("tags"))

    def iter_sources(self) -> Iterator[IconSource]:
        meta_by_name = self._load_metadata()
        svg_files = list_svgs(self.source_dir)
        print(f"  Found {len(svg_files)} SVG files")

        skipped = 0
        for svg_path in svg_files:
            meta = meta_by_name.get(svg_path.stem) or {}
            if self._is_skipped(meta):
                skipped += 1
                continue
            name = strip_style_suffix(svg_path.stem, (OUTLINE.suffix,))
            style = FILLED if name == svg_path.stem else OUTLINE
            yield IconSource(
                name=name,
                style=style,
                path=svg_path,
                tags=as_tags(meta.get("aliases")),
                vendor_categories=as_tags(meta.get("tags")),
            )
        if skipped:
            print(f"  Skipped {skipped} deprecated or brand icons")
