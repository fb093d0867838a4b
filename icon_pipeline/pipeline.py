"""
pipeline.py
--------------------
Full icon build: every adapter in order → manifest, libraries, report → summary.

Always a full run; prior output is overwritten, never merged.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from .adapters import LibraryAdapter, default_adapters
from .constants import CATEGORY_LABELS
from .manifest import (
    OutputPaths,
    build_manifest,
    build_report,
    compute_stats,
    write_outputs,
)
from .models import IconRecord, Manifest, Report

_RULE = "─" * 40
_BANNER = "═" * 44


@dataclass(frozen=True, slots=True)
class PipelineResult:
    manifest: Manifest
    report: Report
    outputs: OutputPaths


def collect_icons(adapters: Sequence[LibraryAdapter]) -> list[IconRecord]:
    icons: list[IconRecord] = []
    for adapter in adapters:
        icons.extend(adapter.process())
    return icons


def run_pipeline(
    node_modules: Path,
    output_dir: Path,
    adapters: Sequence[LibraryAdapter] | None = None,
) -> PipelineResult:
    """Process every library, write the JSON documents, print the summary."""
    print("Icon Processing Pipeline")
    print("========================")
    print(f"Reading packages from {node_modules}")

    output_dir.mkdir(parents=True, exist_ok=True)
    if adapters is None:
        adapters = default_adapters(node_modules, output_dir)

    icons = collect_icons(adapters)
    stats = compute_stats(icons)
    manifest = build_manifest(icons, [a.info for a in adapters], stats=stats)
    report = build_report(stats)
    outputs = write_outputs(output_dir, manifest, report)

    print_summary(report, outputs)
    return PipelineResult(manifest=manifest, report=report, outputs=outputs)


def print_summary(report: Report, outputs: OutputPaths) -> None:
    print(f"\n\n{_BANNER}")
    print("  SUMMARY")
    print(f"{_BANNER}\n")

    print("Libraries:")
    print(_RULE)
    for entry in report.library_breakdown:
        print(f"  {entry.library:<20} {entry.count:>6}")
    print(_RULE)
    print(f"  {'TOTAL':<20} {report.total_icons:>6}")

    print("\nTypes:")
    print(_RULE)
    for entry in report.type_breakdown:
        print(f"  {entry.type:<20} {entry.count:>6}")

    print("\nCategories:")
    print(_RULE)
    for entry in report.category_breakdown:
        label = CATEGORY_LABELS.get(entry.category, entry.category)
        bar = "█" * math.ceil(entry.count / 50)
        print(f"  {label:<25} {entry.count:>5}  {bar}")
    print(_RULE)

    print(f"\nUncategorized (misc): {report.uncategorized}")
    print("\nOutput:")
    print(f"  Manifest:  {outputs.manifest}")
    print(f"  Libraries: {outputs.libraries}")
    print(f"  Report:    {outputs.report}")
