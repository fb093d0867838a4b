"""
Remix Icon — ``remixicon``.

Layout:
    icons/<Category>/<name>-line.svg
    icons/<Category>/<name>-fill.svg
    icons/Editor/<name>.svg            (single-style editor glyphs)
    tags.json                          {Category: {name: "tag, tag, ..."}}

The directory is the vendor category. ``Logos`` holds brand marks and is skipped.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from ..constants import REMIX_BRAND_CATEGORY, REMIX_CATEGORY_MAP
from ..models import IconType, LibraryInfo
from ..utils import list_svgs
from .base import IconSource, LibraryAdapter, StyleVariant, load_json

OUTLINE = StyleVariant("outline", IconType.OUTLINE, suffix="-line")
FILLED = StyleVariant("filled", IconType.FILLED, suffix="-fill")


def _split_tags(raw: object) -> tuple[str, ...]:
    if isinstance(raw, list):
        return tuple(str(t).strip() for t in raw if str(t).strip())
    return tuple(t.strip() for t in str(raw).split(",") if t.strip())


class RemixAdapter(LibraryAdapter):
    package = "remixicon"
    category_map = REMIX_CATEGORY_MAP
    info = LibraryInfo(
        id="remix",
        name="Remix Icon",
        version="4.6.0",
        url="https://remixicon.com",
        license="Apache-2.0",
        license_url="https://github.com/Remix-Design/RemixIcon/blob/master/License",
        attribution="Remix Design",
        description="Open source neutral style system symbols for designers and developers",
    )

    @property
    def source_dir(self) -> Path:
        return self.package_dir / "icons"

    def _load_tags(self) -> dict[str, tuple[str, ...]]:
        tags_file = self.package_dir / "tags.json"
        if not tags_file.is_file():
            return {}
        data = load_json(tags_file, dict)
        tags: dict[str, tuple[str, ...]] = {}
        for category, entries in data.items():
            if category.startswith("_") or not isinstance(entries, dict):
                continue
            for name, raw in entries.items():
                tags[name] = _split_tags(raw)
        return tags

    def _split_style(self, stem: str) -> tuple[str, StyleVariant]:
        for style in (OUTLINE, FILLED):
            if stem.endswith(style.suffix):
                return stem.removesuffix(style.suffix), style
        return stem, OUTLINE

    def iter_sources(self) -> Iterator[IconSource]:
        tags_by_name = self._load_tags()
        category_dirs = sorted(p for p in self.source_dir.iterdir() if p.is_dir())

        skipped = 0
        for category_dir in category_dirs:
            svg_files = list_svgs(category_dir)
            if category_dir.name == REMIX_BRAND_CATEGORY:
                skipped += len(svg_files)
                continue
            for svg_path in svg_files:
                name, style = self._split_style(svg_path.stem)
                yield IconSource(
                    name=name,
                    style=style,
                    path=svg_path,
                    tags=tags_by_name.get(name, ()),
                    vendor_categories=(category_dir.name,),
                )
        if skipped:
            print(f"  Skipped {skipped} brand icons")
