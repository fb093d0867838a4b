"""Lucide — ``lucide-static/icons/*.svg`` with tags from ``lucide-static/tags.json``."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from ..models import IconType, LibraryInfo
from ..utils import list_svgs
from .base import IconSource, LibraryAdapter, StyleVariant, as_tags, load_json

OUTLINE = StyleVariant("outline", IconType.OUTLINE)


class LucideAdapter(LibraryAdapter):
    package = "lucide-static"
    info = LibraryInfo(
        id="lucide",
        name="Lucide",
        version="0.574.0",
        url="https://lucide.dev",
        license="ISC",
        license_url="https://github.com/lucide-icons/lucide/blob/main/LICENSE",
        attribution="Lucide Contributors",
        description="Beautiful & consistent icon toolkit made by the community",
    )

    @property
    def source_dir(self) -> Path:
        return self.package_dir / "icons"

    def _load_tags(self) -> dict[str, list[str]]:
        tags_file = self.package_dir / "tags.json"
        if not tags_file.is_file():
            return {}
        return load_json(tags_file, dict)

    def iter_sources(self) -> Iterator[IconSource]:
        tags_by_name = self._load_tags()
        svg_files = list_svgs(self.source_dir)
        print(f"  Found {len(svg_files)} SVG files")
        for svg_path in svg_files:
            name = svg_path.stem
            yield IconSource(
                name=name,
                style=OUTLINE,
                path=svg_path,
                tags=as_tags(tags_by_name.get(name)),
            )
