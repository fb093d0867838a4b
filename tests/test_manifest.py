"""Tests for icon_pipeline/manifest module."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

import pytest

from icon_pipeline.constants import CATEGORIES, MANIFEST_VERSION
from icon_pipeline.exceptions import ManifestError
from icon_pipeline.manifest import (
    build_libraries_document,
    build_manifest,
    build_report,
    compute_stats,
    write_outputs,
)
from icon_pipeline.models import IconRecord, IconType, LibraryInfo

GENERATED = datetime(2025, 1, 1, tzinfo=timezone.utc)


class TestBuildManifest:
    """Test cases for build_manifest."""

    def test_counts(self, sample_icons: list[IconRecord], library_infos: list[LibraryInfo]) -> None:
        manifest = build_manifest(sample_icons, library_infos, generated=GENERATED)

        assert manifest.version == MANIFEST_VERSION
        assert manifest.generated == GENERATED
        assert len(manifest.icons) == 3
        assert [(lib.id, lib.icon_count) for lib in manifest.libraries] == [("alpha", 2), ("beta", 1)]
        assert sum(cat.count for cat in manifest.categories) == len(manifest.icons)
        assert sum(lib.icon_count for lib in manifest.libraries) == len(manifest.icons)

    def test_lists_every_category_in_declaration_order(
        self, sample_icons: list[IconRecord], library_infos: list[LibraryInfo]
    ) -> None:
        manifest = build_manifest(sample_icons, library_infos)
        counts = {cat.id: cat.count for cat in manifest.categories}

        assert [cat.id for cat in manifest.categories] == [cat_id for cat_id, _ in CATEGORIES]
        assert counts["arrows"] == 2
        assert counts["misc"] == 1
        assert counts["weather"] == 0

    def test_library_without_icons_is_listed(
        self, sample_icons: list[IconRecord], library_infos: list[LibraryInfo]
    ) -> None:
        manifest = build_manifest(sample_icons[:2], library_infos)

        assert [(lib.id, lib.icon_count) for lib in manifest.libraries] == [("alpha", 2), ("beta", 0)]

    def test_empty_build(self, library_infos: list[LibraryInfo]) -> None:
        manifest = build_manifest([], library_infos)

        assert manifest.icons == ()
        assert all(cat.count == 0 for cat in manifest.categories)

    def test_unknown_library_rejected(
        self, sample_icons: list[IconRecord], library_infos: list[LibraryInfo]
    ) -> None:
        with pytest.raises(ManifestError, match="beta"):
            build_manifest(sample_icons, library_infos[:1])

    def test_unknown_category_rejected(self, library_infos: list[LibraryInfo]) -> None:
        # bypass IconRecord's own validation to reach the manifest check
        stray = IconRecord.model_construct(
            id="alpha/outline/x",
            name="X",
            library="alpha",
            category="bogus",
            type=IconType.OUTLINE,
            tags=(),
        )
        with pytest.raises(ManifestError, match="bogus"):
            build_manifest([stray], library_infos)


class TestBuildReport:
    """Test cases for compute_stats / build_report."""

    def test_report(self, sample_icons: list[IconRecord]) -> None:
        report = build_report(compute_stats(sample_icons))

        assert report.total_icons == 3
        assert report.categorized == 2
        assert report.uncategorized == 1
        assert [(e.library, e.count) for e in report.library_breakdown] == [("alpha", 2), ("beta", 1)]
        assert [(e.category, e.count) for e in report.category_breakdown] == [("arrows", 2), ("misc", 1)]
        assert [e.id for e in report.uncategorized_icons] == ["beta/outline/blob"]
        assert report.uncategorized_icons[0].tags == ("shape",)

    def test_breakdown_sorted_by_count_descending(self) -> None:
        icons = [
            IconRecord(id=f"lib/{kind}/i{n}", name="I", library="lib", category="misc", type=kind)
            for n, kind in enumerate(["outline", "filled", "filled", "solid", "filled", "solid"])
        ]

        report = build_report(compute_stats(icons))

        assert [(e.type, e.count) for e in report.type_breakdown] == [
            ("filled", 3),
            ("solid", 2),
            ("outline", 1),
        ]


class TestWriteOutputs:
    """Test cases for write_outputs."""

    def test_writes_three_documents(
        self,
        tmp_path: Path,
        sample_icons: list[IconRecord],
        library_infos: list[LibraryInfo],
    ) -> None:
        output_dir = tmp_path / "not" / "yet" / "there"
        stats = compute_stats(sample_icons)
        manifest = build_manifest(sample_icons, library_infos, generated=GENERATED, stats=stats)

        paths = write_outputs(output_dir, manifest, build_report(stats))

        manifest_doc = json.loads(paths.manifest.read_text(encoding="utf-8"))
        assert manifest_doc["version"] == MANIFEST_VERSION
        assert manifest_doc["icons"][0]["id"] == "alpha/outline/arrow-up"
        assert manifest_doc["libraries"][0]["licenseUrl"] == "https://alpha.example/LICENSE"
        assert manifest_doc["libraries"][0]["iconCount"] == 2

        libraries_doc = json.loads(paths.libraries.read_text(encoding="utf-8"))
        assert libraries_doc == build_libraries_document(manifest)
        assert [lib["id"] for lib in libraries_doc["libraries"]] == ["alpha", "beta"]

        report_doc = json.loads(paths.report.read_text(encoding="utf-8"))
        assert report_doc["totalIcons"] == 3
        assert report_doc["uncategorizedIcons"][0]["id"] == "beta/outline/blob"

    def test_overwrites_previous_build(
        self,
        output_dir: Path,
        sample_icons: list[IconRecord],
        library_infos: list[LibraryInfo],
    ) -> None:
        for icons in (sample_icons, sample_icons[:1]):
            stats = compute_stats(icons)
            paths = write_outputs(output_dir, build_manifest(icons, library_infos), build_report(stats))

        manifest_doc = json.loads(paths.manifest.read_text(encoding="utf-8"))
        assert len(manifest_doc["icons"]) == 1
