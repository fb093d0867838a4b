"""Heroicons — ``heroicons/24/{outline,solid}/*.svg``; no metadata."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from ..models import IconType, LibraryInfo
from ..utils import list_svgs
from .base import IconSource, LibraryAdapter, StyleVariant

STYLES: tuple[StyleVariant, ...] = (
    StyleVariant("outline", IconType.OUTLINE),
    StyleVariant("solid", IconType.SOLID),
)


class HeroiconsAdapter(LibraryAdapter):
    package = "heroicons"
    info = LibraryInfo(
        id="heroicons",
        name="Heroicons",
        version="2.2.0",
        url="https://heroicons.com",
        license="MIT",
        license_url="https://github.com/tailwindlabs/heroicons/blob/master/LICENSE",
        attribution="Tailwind Labs",
        description="Beautiful hand-crafted SVG icons by the makers of Tailwind CSS",
    )

    @property
    def source_dir(self) -> Path:
        return self.package_dir / "24" / "outline"

    def iter_sources(self) -> Iterator[IconSource]:
        for style in STYLES:
            style_dir = self.package_dir / "24" / style.directory
            if not style_dir.is_dir():
                continue
            for svg_path in list_svgs(style_dir):
                yield IconSource(name=svg_path.stem, style=style, path=svg_path)
