"""
Repository-level path configuration.

Uses a class-based approach so tests and the CLI can redirect the vendor
package tree and the build output without touching module globals.

Usage:
    # Default paths
    from icon_pipeline.paths import Paths

    node_modules = Paths.node_modules()
    output_dir = Paths.output_dir()

    # Custom paths (for testing or alternative checkouts)
    Paths.configure(node_modules="/custom/node_modules", output_dir="/tmp/icons")

Environment:
    ICON_NODE_MODULES  Override the node_modules directory to read packages from.
    ICON_OUTPUT_DIR    Override the build output directory (build/icons).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

_NODE_MODULES_ENV_KEY = "ICON_NODE_MODULES"
_OUTPUT_DIR_ENV_KEY = "ICON_OUTPUT_DIR"


@dataclass(frozen=True, slots=True)
class PathConfig:
    """Immutable path configuration."""

    repo_root: Path
    node_modules: Path
    output_dir: Path


class Paths:
    """
    Path configuration manager.

    Explicit configure() values win over environment variables, which win
    over the repository defaults.
    """

    _repo_root: Path = Path(__file__).resolve().parent.parent
    _node_modules: Path | None = None
    _output_dir: Path | None = None

    @classmethod
    def configure(
        cls,
        node_modules: Path | str | None = None,
        output_dir: Path | str | None = None,
    ) -> None:
        """
        Configure custom paths.

        Args:
            node_modules: Directory holding the installed icon packages
            output_dir: Build output directory for manifest and SVG tree
        """
        if node_modules is not None:
            cls._node_modules = Path(node_modules).resolve()
        if output_dir is not None:
            cls._output_dir = Path(output_dir).resolve()

    @classmethod
    def reset(cls) -> None:
        """Reset to default paths."""
        cls._node_modules = None
        cls._output_dir = None

    @classmethod
    def repo_root(cls) -> Path:
        """Root directory of the repository."""
        return cls._repo_root

    @classmethod
    def node_modules(cls) -> Path:
        """Directory holding the installed third-party icon packages."""
        if cls._node_modules is not None:
            return cls._node_modules
        env = os.environ.get(_NODE_MODULES_ENV_KEY, "").strip()
        if env:
            return Path(env).resolve()
        return cls._repo_root / "node_modules"

    @classmethod
    def output_dir(cls) -> Path:
        """Build output directory (manifest, report, SVG tree)."""
        if cls._output_dir is not None:
            return cls._output_dir
        env = os.environ.get(_OUTPUT_DIR_ENV_KEY, "").strip()
        if env:
            return Path(env).resolve()
        return cls._repo_root / "build" / "icons"

    @classmethod
    def get_config(cls) -> PathConfig:
        """Get current path configuration as an immutable dataclass."""
        return PathConfig(
            repo_root=cls.repo_root(),
            node_modules=cls.node_modules(),
            output_dir=cls.output_dir(),
        )
