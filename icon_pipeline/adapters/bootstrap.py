"""Bootstrap Icons — one flat ``bootstrap-icons/icons/`` directory.

Filled variants carry a ``-fill`` suffix; it is stripped so that
``alarm-fill.svg`` becomes ``bootstrap/filled/alarm``.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from ..models import IconType, LibraryInfo
from ..utils import list_svgs, strip_style_suffix
from .base import IconSource, LibraryAdapter, StyleVariant

OUTLINE = StyleVariant("outline", IconType.OUTLINE)
FILLED = StyleVariant("filled", IconType.FILLED, suffix="-fill")


class BootstrapAdapter(LibraryAdapter):
    package = "bootstrap-icons"
    info = LibraryInfo(
        id="bootstrap",
        name="Bootstrap Icons",
        version="1.13.1",
        url="https://icons.getbootstrap.com",
        license="MIT",
        license_url="https://github.com/twbs/icons/blob/main/LICENSE",
        attribution="The Bootstrap Authors",
        description="Official open source SVG icon library for Bootstrap",
    )

    @property
    def source_dir(self) -> Path:
        return self.package_dir / "icons"

    def iter_sources(self) -> Iterator[IconSource]:
        svg_files = list_svgs(self.source_dir)
        print(f"  Found {len(svg_files)} SVG files")
        # outline first, then filled
        outline = [p for p in svg_files if not p.stem.endswith(FILLED.suffix)]
        filled = [p for p in svg_files if p.stem.endswith(FILLED.suffix)]
        for svg_path in outline:
            yield IconSource(name=svg_path.stem, style=OUTLINE, path=svg_path)
        for svg_path in filled:
            name = strip_style_suffix(svg_path.stem, (FILLED.suffix,))
            yield IconSource(name=name, style=FILLED, path=svg_path)
