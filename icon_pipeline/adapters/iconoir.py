"""Iconoir — ``iconoir/icons/{regular,solid}/*.svg``; no metadata."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from ..models import IconType, LibraryInfo
from ..utils import list_svgs
from .base import IconSource, LibraryAdapter, StyleVariant

STYLES: tuple[StyleVariant, ...] = (
    StyleVariant("regular", IconType.OUTLINE),
    StyleVariant("solid", IconType.SOLID),
)


class IconoirAdapter(LibraryAdapter):
    package = "iconoir"
    info = LibraryInfo(
        id="iconoir",
        name="Iconoir",
        version="7.11.0",
        url="https://iconoir.com",
        license="MIT",
        license_url="https://github.com/iconoir-icons/iconoir/blob/main/LICENSE",
        attribution="Luca Burgio",
        description="A high-quality selection of free icons with no premium options",
    )

    @property
    def source_dir(self) -> Path:
        return self.package_dir / "icons" / "regular"

    def iter_sources(self) -> Iterator[IconSource]:
        for style in STYLES:
            style_dir = self.package_dir / "icons" / style.directory
            if not style_dir.is_dir():
                continue
            for svg_path in list_svgs(style_dir):
                yield IconSource(name=svg_path.stem, style=style, path=svg_path)
