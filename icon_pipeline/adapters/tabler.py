"""
Tabler Icons — ``@tabler/icons``.

Layout:
    icons/outline/<name>.svg
    icons/filled/<name>.svg
    icons.json                              {name: {category, tags}}
    categories/outline/<Category>/<name>.svg

The categories/ folder is the authoritative vendor category; the inline
``category`` in icons.json is used only when the folder lookup misses.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from ..constants import TABLER_CATEGORY_MAP
from ..models import IconType, LibraryInfo
from ..utils import list_svgs
from .base import IconSource, LibraryAdapter, StyleVariant, as_tags, load_json

STYLES: tuple[StyleVariant, ...] = (
    StyleVariant("outline", IconType.OUTLINE),
    StyleVariant("filled", IconType.FILLED),
)


class TablerAdapter(LibraryAdapter):
    package = "@tabler/icons"
    category_map = TABLER_CATEGORY_MAP
    info = LibraryInfo(
        id="tabler",
        name="Tabler Icons",
        version="3.36.1",
        url="https://tabler.io/icons",
        license="MIT",
        license_url="https://github.com/tabler/tabler-icons/blob/main/LICENSE",
        attribution="Tabler Icons Contributors",
        description="Free and open source icons designed for everyday use",
    )

    @property
    def source_dir(self) -> Path:
        return self.package_dir / "icons" / "outline"

    def _load_metadata(self) -> dict[str, dict]:
        meta_file = self.package_dir / "icons.json"
        if not meta_file.is_file():
            return {}
        meta = load_json(meta_file, dict)
        print(f"  Loaded metadata for {len(meta)} icons")
        return meta

    def _build_category_lookup(self) -> dict[str, str]:
        """Reverse lookup icon name → category folder name."""
        categories_dir = self.package_dir / "categories" / "outline"
        lookup: dict[str, str] = {}
        if not categories_dir.is_dir():
            return lookup
        folders = sorted(p for p in categories_dir.iterdir() if p.is_dir())
        for folder in folders:
            for svg_path in list_svgs(folder):
                lookup[svg_path.stem] = folder.name
        print(f"  Built category lookup from {len(folders)} category folders")
        return lookup

    def iter_sources(self) -> Iterator[IconSource]:
        meta_by_name = self._load_metadata()
        folder_category = self._build_category_lookup()

        for style in STYLES:
            style_dir = self.package_dir / "icons" / style.directory
            if not style_dir.is_dir():
                continue
            for svg_path in list_svgs(style_dir):
                name = svg_path.stem
                meta = meta_by_name.get(name)
                if not isinstance(meta, dict):
                    meta = {}
                vendor = folder_category.get(name) or str(meta.get("category") or "")
                yield IconSource(
                    name=name,
                    style=style,
                    path=svg_path,
                    tags=as_tags(meta.get("tags")),
                    vendor_categories=(vendor,) if vendor else (),
                )
