"""
Fluent UI System Icons — ``@fluentui/svg-icons/icons/``.

Files are named ``<snake_name>_<size>_<style>.svg``; only the 24px regular
and filled variants are taken. Names are normalised to kebab-case so they
match the other libraries (``arrow_left_24_regular`` → ``arrow-left``).
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from ..models import IconType, LibraryInfo
from ..utils import kebab_case, list_svgs, strip_style_suffix
from .base import IconSource, LibraryAdapter, StyleVariant

STYLES: tuple[StyleVariant, ...] = (
    StyleVariant("outline", IconType.OUTLINE, suffix="_24_regular"),
    StyleVariant("filled", IconType.FILLED, suffix="_24_filled"),
)


class FluentAdapter(LibraryAdapter):
    package = "@fluentui/svg-icons"
    info = LibraryInfo(
        id="fluent",
        name="Fluent UI System Icons",
        version="1.1.292",
        url="https://github.com/microsoft/fluentui-system-icons",
        license="MIT",
        license_url="https://github.com/microsoft/fluentui-system-icons/blob/main/LICENSE",
        attribution="Microsoft Corporation",
        description="Familiar, friendly and modern icons from Microsoft",
    )

    @property
    def source_dir(self) -> Path:
        return self.package_dir / "icons"

    def iter_sources(self) -> Iterator[IconSource]:
        svg_files = list_svgs(self.source_dir)
        print(f"  Found {len(svg_files)} SVG files")
        for style in STYLES:
            for svg_path in svg_files:
                if not svg_path.stem.endswith(style.suffix):
                    continue
                name = kebab_case(strip_style_suffix(svg_path.stem, (style.suffix,)))
                yield IconSource(name=name, style=style, path=svg_path)
