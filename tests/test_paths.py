"""Tests for icon_pipeline/paths module."""

from __future__ import annotations

from pathlib import Path

import pytest

from icon_pipeline.paths import PathConfig, Paths


class TestPaths:
    """Test cases for the Paths class."""

    def test_repo_root_exists(self, repo_root: Path) -> None:
        """Test that repo root is the directory holding the package."""
        assert Paths.repo_root() == repo_root
        assert (Paths.repo_root() / "icon_pipeline").is_dir()

    def test_defaults(self, repo_root: Path) -> None:
        assert Paths.node_modules() == repo_root / "node_modules"
        assert Paths.output_dir() == repo_root / "build" / "icons"

    def test_configure_custom_paths(self, tmp_path: Path) -> None:
        """Test configuring custom paths."""
        Paths.configure(node_modules=tmp_path / "nm", output_dir=str(tmp_path / "out"))

        assert Paths.node_modules() == (tmp_path / "nm").resolve()
        assert Paths.output_dir() == (tmp_path / "out").resolve()

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("ICON_NODE_MODULES", str(tmp_path / "nm"))
        monkeypatch.setenv("ICON_OUTPUT_DIR", str(tmp_path / "out"))

        assert Paths.node_modules() == (tmp_path / "nm").resolve()
        assert Paths.output_dir() == (tmp_path / "out").resolve()

    def test_configure_beats_environment(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("ICON_OUTPUT_DIR", str(tmp_path / "env"))
        Paths.configure(output_dir=tmp_path / "explicit")

        assert Paths.output_dir() == (tmp_path / "explicit").resolve()

    def test_reset(self, repo_root: Path, tmp_path: Path) -> None:
        Paths.configure(output_dir=tmp_path)
        Paths.reset()

        assert Paths.output_dir() == repo_root / "build" / "icons"

    def test_get_config_is_immutable(self) -> None:
        """Test that the returned PathConfig is frozen."""
        config = Paths.get_config()

        assert isinstance(config, PathConfig)
        with pytest.raises(AttributeError):
            config.output_dir = Path("/tmp")
