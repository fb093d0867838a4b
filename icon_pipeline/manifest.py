"""
manifest.py
--------------------
Manifest assembly from the concatenated output of every adapter:
  - compute_stats: per-category / per-library / per-type counts + misc subset
  - build_manifest: the full Manifest (all categories, all libraries)
  - build_libraries_document: the reduced {"libraries": [...]} document
  - build_report: derived stats for manual review of uncategorized icons
  - write_outputs: manifest.json, libraries.json, report.json
"""

from __future__ import annotations

import json
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

from pydantic import ValidationError

from .constants import (
    CATEGORIES,
    DEFAULT_CATEGORY,
    LIBRARIES_FILENAME,
    MANIFEST_FILENAME,
    MANIFEST_VERSION,
    REPORT_FILENAME,
)
from .exceptions import ManifestError
from .models import (
    CategoryCount,
    CategoryDefinition,
    IconRecord,
    LibraryCount,
    LibraryInfo,
    Manifest,
    Report,
    TypeCount,
    UncategorizedIcon,
)


@dataclass(slots=True)
class ManifestStats:
    """Counts derived from one build's icons; Counters keep first-seen order."""

    total: int = 0
    category_counts: Counter[str] = field(default_factory=Counter)
    library_counts: Counter[str] = field(default_factory=Counter)
    type_counts: Counter[str] = field(default_factory=Counter)
    uncategorized: list[IconRecord] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class OutputPaths:
    manifest: Path
    libraries: Path
    report: Path


def compute_stats(icons: Iterable[IconRecord]) -> ManifestStats:
    stats = ManifestStats()
    for icon in icons:
        stats.total += 1
        stats.category_counts[icon.category] += 1
        stats.library_counts[icon.library] += 1
        stats.type_counts[icon.type.value] += 1
        if icon.category == DEFAULT_CATEGORY:
            stats.uncategorized.append(icon)
    return stats


def _by_count_desc(counts: Counter[str]) -> list[tuple[str, int]]:
    # sorted() is stable: ties keep first-seen order
    return sorted(counts.items(), key=lambda item: -item[1])


def build_manifest(
    icons: Sequence[IconRecord],
    libraries: Sequence[LibraryInfo],
    generated: datetime | None = None,
    stats: ManifestStats | None = None,
) -> Manifest:
    """Assemble the Manifest; every category and library is listed, even at count 0.

    Raises:
        ManifestError: If an icon references a category or library that is
            not part of the manifest.
    """
    stats = stats or compute_stats(icons)
    try:
        return Manifest(
            version=MANIFEST_VERSION,
            generated=generated or datetime.now(timezone.utc),
            icons=tuple(icons),
            categories=tuple(
                CategoryDefinition(id=cat_id, label=label, count=stats.category_counts.get(cat_id, 0))
                for cat_id, label in CATEGORIES
            ),
            libraries=tuple(
                info.with_count(stats.library_counts.get(info.id, 0)) for info in libraries
            ),
        )
    except ValidationError as exc:
        raise ManifestError(str(exc)) from exc


def build_libraries_document(manifest: Manifest) -> dict:
    return {"libraries": [lib.to_json_dict() for lib in manifest.libraries]}


def build_report(stats: ManifestStats) -> Report:
    uncategorized = len(stats.uncategorized)
    return Report(
        total_icons=stats.total,
        categorized=stats.total - uncategorized,
        uncategorized=uncategorized,
        library_breakdown=tuple(
            LibraryCount(library=lib, count=n) for lib, n in _by_count_desc(stats.library_counts)
        ),
        type_breakdown=tuple(
            TypeCount(type=icon_type, count=n) for icon_type, n in _by_count_desc(stats.type_counts)
        ),
        category_breakdown=tuple(
            CategoryCount(category=cat, count=n) for cat, n in _by_count_desc(stats.category_counts)
        ),
        uncategorized_icons=tuple(
            UncategorizedIcon(id=icon.id, name=icon.name, tags=icon.tags)
            for icon in stats.uncategorized
        ),
    )


def _write_json(path: Path, payload: dict) -> None:
    with open(path, "w", encoding="utf-8") as fh:
        json.dump(payload, fh, indent=2, ensure_ascii=False)


def write_outputs(output_dir: Path, manifest: Manifest, report: Report) -> OutputPaths:
    """Write the three JSON documents; a missing output directory is created.

    Any other filesystem error propagates and aborts the run.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    paths = OutputPaths(
        manifest=output_dir / MANIFEST_FILENAME,
        libraries=output_dir / LIBRARIES_FILENAME,
        report=output_dir / REPORT_FILENAME,
    )
    _write_json(paths.manifest, manifest.to_json_dict())
    _write_json(paths.libraries, build_libraries_document(manifest))
    _write_json(paths.report, report.to_json_dict())
    return paths
