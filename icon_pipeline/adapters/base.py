"""
Shared adapter machinery.

Each library adapter only knows its vendor layout: it yields IconSource
entries (logical name, style, tags, vendor categories, where to read the SVG).
LibraryAdapter.process() does the rest for every library the same way:
categorize, write the cleaned SVG, and build the IconRecord.
"""

from __future__ import annotations

import json
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, ClassVar

from ..categorizer import categorize, map_vendor_category
from ..exceptions import AdapterError, IconPipelineError, SVGRenderError
from ..models import IconRecord, IconType, LibraryInfo
from ..svg_utils import clean_svg, render_svg, write_svg
from ..utils import icon_id, to_display_name

_HEADER_WIDTH = 44


def load_json(path: Path, expected: type) -> Any:
    """Parse a vendor metadata file whose top level must be *expected* (dict or list).

    Raises:
        AdapterError: If the document has a different shape.
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, expected):
        raise AdapterError(
            f"{path.name}: expected a JSON {expected.__name__}, got {type(data).__name__}"
        )
    return data


def as_tags(raw: object) -> tuple[str, ...]:
    """Vendor tag list as strings; anything but a JSON list yields no tags."""
    if not isinstance(raw, list):
        return ()
    return tuple(str(t) for t in raw)


@dataclass(frozen=True, slots=True)
class StyleVariant:
    """One style of a library: output directory, icon type, filename suffix."""

    directory: str
    type: IconType
    suffix: str = ""


@dataclass(frozen=True, slots=True)
class IconSource:
    """A vendor icon before categorization.

    Exactly one of ``path`` (copy a file) or ``contents`` (render inner
    markup) is set.
    """

    name: str
    style: StyleVariant
    path: Path | None = None
    contents: str | None = None
    tags: tuple[str, ...] = ()
    vendor_categories: tuple[str, ...] = ()
    render_attributes: Mapping[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class _AdapterCounters:
    """Mutable tally accumulated while processing one library."""

    processed: int = 0
    errors: int = 0
    by_style: dict[str, int] = field(default_factory=dict)


class LibraryAdapter:
    """Reads one installed icon package and emits normalized IconRecords.

    Args:
        node_modules: Directory the vendor package is installed under.
        output_dir:   Build root; SVGs land in ``{library}/{style}/{name}.svg``.
    """

    info: ClassVar[LibraryInfo]
    package: ClassVar[str]
    category_map: ClassVar[Mapping[str, str]] = {}

    def __init__(self, node_modules: Path, output_dir: Path) -> None:
        self.node_modules = node_modules
        self.output_dir = output_dir

    @property
    def library_id(self) -> str:
        return self.info.id

    @property
    def package_dir(self) -> Path:
        return self.node_modules / self.package

    @property
    def source_dir(self) -> Path:
        """Directory whose absence means the library is not installed."""
        return self.package_dir

    # ── Hooks for subclasses ─────────────────────────────────────────────────

    def iter_sources(self) -> Iterator[IconSource]:
        raise NotImplementedError

    def resolve_category(self, source: IconSource) -> str:
        """Vendor taxonomy first, keyword categorizer as fallback."""
        mapped = map_vendor_category(source.vendor_categories, self.category_map)
        if mapped:
            return mapped
        return categorize(source.name, source.tags)

    def load_svg(self, source: IconSource) -> str:
        if source.path is not None:
            return clean_svg(source.path.read_text(encoding="utf-8"))
        if source.contents is not None:
            return render_svg(source.contents, dict(source.render_attributes))
        raise SVGRenderError(f"{source.name}: no SVG source")

    # ── Driver ───────────────────────────────────────────────────────────────

    def process(self) -> list[IconRecord]:
        """Process every icon of the library.

        A missing package yields an empty list. Metadata failures abort this
        library only; per-icon failures skip that icon only.
        """
        title = f"── {self.info.name} "
        print(f"\n{title}{'─' * max(_HEADER_WIDTH - len(title), 3)}")

        if not self.source_dir.is_dir():
            print(f"  SKIPPED: {self.package} not installed")
            return []

        icons: list[IconRecord] = []
        counters = _AdapterCounters()
        try:
            for source in self.iter_sources():
                record = self._process_one(source, counters)
                if record is not None:
                    icons.append(record)
        except (OSError, ValueError, IconPipelineError) as exc:
            print(f"  [ERROR] {self.library_id}: {exc}")
            return []

        for style, count in counters.by_style.items():
            print(f"  Processed {count} {style} icons")
        if counters.errors:
            print(f"  Errors: {counters.errors}")
        print(f"  Total: {len(icons)} icons")
        return icons

    def _process_one(
        self, source: IconSource, counters: _AdapterCounters
    ) -> IconRecord | None:
        style = source.style
        try:
            svg = self.load_svg(source)
        except SVGRenderError:
            # Render failures are dropped without noise; they only lower the total.
            return None
        except (OSError, ValueError) as exc:
            print(f"  [ERROR] {self.library_id}/{style.directory}/{source.name}: {exc}")
            counters.errors += 1
            return None

        try:
            record = IconRecord(
                id=icon_id(self.library_id, style.directory, source.name),
                name=to_display_name(source.name),
                library=self.library_id,
                category=self.resolve_category(source),
                type=style.type,
                tags=source.tags,
            )
            write_svg(self.output_dir / self.library_id / style.directory / f"{source.name}.svg", svg)
        except (OSError, ValueError) as exc:
            print(f"  [ERROR] {self.library_id}/{style.directory}/{source.name}: {exc}")
            counters.errors += 1
            return None

        counters.processed += 1
        counters.by_style[style.directory] = counters.by_style.get(style.directory, 0) + 1
        return record
