"""
Ionicons — ``ionicons/dist/svg/*.svg``.

One flat directory with three styles told apart by suffix:
``<name>.svg`` (filled), ``<name>-outline.svg``, ``<name>-sharp.svg``.
``logo-*`` brand marks are skipped.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from ..models import IconType, LibraryInfo
from ..utils import list_svgs
from .base import IconSource, LibraryAdapter, StyleVariant

OUTLINE = StyleVariant("outline", IconType.OUTLINE, suffix="-outline")
SHARP = StyleVariant("sharp", IconType.SHARP, suffix="-sharp")
FILLED = StyleVariant("filled", IconType.FILLED)

_BRAND_PREFIX = "logo-"


class IoniconsAdapter(LibraryAdapter):
    package = "ionicons"
    info = LibraryInfo(
        id="ionicons",
        name="Ionicons",
        version="7.4.0",
        url="https://ionic.io/ionicons",
        license="MIT",
        license_url="https://github.com/ionic-team/ionicons/blob/main/LICENSE",
        attribution="Ionic",
        description="Premium designed icons for use in web, iOS, Android, and desktop apps",
    )

    @property
    def source_dir(self) -> Path:
        return self.package_dir / "dist" / "svg"

    def _split_style(self, stem: str) -> tuple[str, StyleVariant]:
        for style in (OUTLINE, SHARP):
            if stem.endswith(style.suffix):
                return stem.removesuffix(style.suffix), style
        return stem, FILLED

    def iter_sources(self) -> Iterator[IconSource]:
        svg_files = list_svgs(self.source_dir)
        print(f"  Found {len(svg_files)} SVG files")
        skipped = 0
        for svg_path in svg_files:
            if svg_path.stem.startswith(_BRAND_PREFIX):
                skipped += 1
                continue
            name, style = self._split_style(svg_path.stem)
            yield IconSource(name=name, style=style, path=svg_path)
        if skipped:
            print(f"  Skipped {skipped} brand icons")
