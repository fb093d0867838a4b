"""Tests for icon_pipeline/pipeline module."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from icon_pipeline.adapters import ADAPTER_CLASSES, BootstrapAdapter, LucideAdapter
from icon_pipeline.pipeline import run_pipeline


class TestRunPipeline:
    """Test cases for the full processing run."""

    def test_installed_and_missing_libraries(
        self,
        node_modules: Path,
        output_dir: Path,
        make_svg: Callable,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        make_svg(node_modules / "lucide-static" / "icons" / "arrow-up.svg")
        make_svg(node_modules / "bootstrap-icons" / "icons" / "alarm.svg")
        make_svg(node_modules / "bootstrap-icons" / "icons" / "alarm-fill.svg")

        result = run_pipeline(node_modules, output_dir)

        assert [icon.id for icon in result.manifest.icons] == [
            "lucide/outline/arrow-up",
            "bootstrap/outline/alarm",
            "bootstrap/filled/alarm",
        ]
        # every library is listed, installed or not
        assert len(result.manifest.libraries) == len(ADAPTER_CLASSES)
        counts = {lib.id: lib.icon_count for lib in result.manifest.libraries}
        assert counts["lucide"] == 1
        assert counts["bootstrap"] == 2
        assert counts["tabler"] == 0

        assert result.report.total_icons == 3
        assert result.outputs.manifest.is_file()
        assert (output_dir / "bootstrap" / "filled" / "alarm.svg").is_file()

        out = capsys.readouterr().out
        assert "SUMMARY" in out
        assert "SKIPPED: @tabler/icons not installed" in out

    def test_malformed_vendor_metadata_skips_that_library(
        self,
        node_modules: Path,
        output_dir: Path,
        make_svg: Callable,
        write_json: Callable,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        make_svg(node_modules / "lucide-static" / "icons" / "arrow-up.svg")
        make_svg(node_modules / "@tabler" / "icons" / "icons" / "outline" / "sun.svg")
        write_json(node_modules / "@tabler" / "icons" / "icons.json", [])

        result = run_pipeline(node_modules, output_dir)

        assert [icon.id for icon in result.manifest.icons] == ["lucide/outline/arrow-up"]
        counts = {lib.id: lib.icon_count for lib in result.manifest.libraries}
        assert counts["tabler"] == 0
        assert result.outputs.manifest.is_file()
        assert "[ERROR] tabler" in capsys.readouterr().out

    def test_explicit_adapters(
        self, node_modules: Path, output_dir: Path, make_svg: Callable
    ) -> None:
        make_svg(node_modules / "lucide-static" / "icons" / "arrow-up.svg")
        adapters = [LucideAdapter(node_modules, output_dir), BootstrapAdapter(node_modules, output_dir)]

        result = run_pipeline(node_modules, output_dir, adapters=adapters)

        assert [lib.id for lib in result.manifest.libraries] == ["lucide", "bootstrap"]
        libraries_doc = json.loads(result.outputs.libraries.read_text(encoding="utf-8"))
        assert [lib["iconCount"] for lib in libraries_doc["libraries"]] == [1, 0]

    def test_nothing_installed(self, node_modules: Path, output_dir: Path) -> None:
        result = run_pipeline(node_modules, output_dir)

        assert result.manifest.icons == ()
        assert result.report.uncategorized == 0
        assert result.outputs.report.is_file()
