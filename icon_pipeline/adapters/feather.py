"""
Feather — ``feather-icons``.

Feather ships inner markup per icon rather than standalone files
(``dist/icons.json``: {name: "<circle .../><path .../>"}), so every icon is
rendered into a full SVG document once per theme. Broken markup for one
icon/theme is skipped.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from ..models import IconType, LibraryInfo
from .base import IconSource, LibraryAdapter, StyleVariant, as_tags, load_json

# Attributes feather's own toSvg() applies
DEFAULT_ATTRIBUTES: dict[str, str] = {
    "width": "24",
    "height": "24",
    "viewBox": "0 0 24 24",
    "fill": "none",
    "stroke": "currentColor",
    "stroke-width": "2",
    "stroke-linecap": "round",
    "stroke-linejoin": "round",
}

# (style, stroke width) per rendered theme
THEMES: tuple[tuple[StyleVariant, str], ...] = (
    (StyleVariant("outline", IconType.OUTLINE), "2"),
    (StyleVariant("bold", IconType.BOLD), "2.5"),
)

_TAG_FILES = ("dist/tags.json", "src/tags.json")


class FeatherAdapter(LibraryAdapter):
    package = "feather-icons"
    info = LibraryInfo(
        id="feather",
        name="Feather",
        version="4.29.2",
        url="https://feathericons.com",
        license="MIT",
        license_url="https://github.com/feathericons/feather/blob/main/LICENSE",
        attribution="Cole Bemis",
        description="Simply beautiful open source icons",
    )

    @property
    def source_dir(self) -> Path:
        return self.package_dir / "dist"

    def _load_icons(self) -> dict[str, str]:
        icons = load_json(self.source_dir / "icons.json", dict)
        print(f"  Loaded {len(icons)} icon definitions")
        return icons

    def _load_tags(self) -> dict[str, list[str]]:
        for rel in _TAG_FILES:
            tags_file = self.package_dir / rel
            if tags_file.is_file():
                return load_json(tags_file, dict)
        return {}

    def iter_sources(self) -> Iterator[IconSource]:
        icons = self._load_icons()
        tags_by_name = self._load_tags()

        for style, stroke_width in THEMES:
            attributes = {**DEFAULT_ATTRIBUTES, "stroke-width": stroke_width}
            for name in sorted(icons):
                yield IconSource(
                    name=name,
                    style=style,
                    contents=str(icons[name] or ""),
                    tags=as_tags(tags_by_name.get(name)),
                    render_attributes=attributes,
                )
