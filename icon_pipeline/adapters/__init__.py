"""
Library adapters — one per third-party icon package.

Processing order is fixed; it is also the order of ``libraries`` in the
manifest and of icons within it.
"""

from __future__ import annotations

from pathlib import Path

from .base import IconSource, LibraryAdapter, StyleVariant
from .bootstrap import BootstrapAdapter
from .feather import FeatherAdapter
from .fluent import FluentAdapter
from .heroicons import HeroiconsAdapter
from .iconoir import IconoirAdapter
from .ionicons import IoniconsAdapter
from .lucide import LucideAdapter
from .mdi import MdiAdapter
from .phosphor import PhosphorAdapter
from .remix import RemixAdapter
from .tabler import TablerAdapter

ADAPTER_CLASSES: tuple[type[LibraryAdapter], ...] = (
    LucideAdapter,
    TablerAdapter,
    HeroiconsAdapter,
    PhosphorAdapter,
    BootstrapAdapter,
    IconoirAdapter,
    RemixAdapter,
    IoniconsAdapter,
    FluentAdapter,
    MdiAdapter,
    FeatherAdapter,
)


def default_adapters(node_modules: Path, output_dir: Path) -> list[LibraryAdapter]:
    """Instantiate every adapter against one node_modules tree and build root."""
    return [cls(node_modules, output_dir) for cls in ADAPTER_CLASSES]


__all__ = [
    "ADAPTER_CLASSES",
    "BootstrapAdapter",
    "FeatherAdapter",
    "FluentAdapter",
    "HeroiconsAdapter",
    "IconSource",
    "IconoirAdapter",
    "IoniconsAdapter",
    "LibraryAdapter",
    "LucideAdapter",
    "MdiAdapter",
    "PhosphorAdapter",
    "RemixAdapter",
    "StyleVariant",
    "TablerAdapter",
    "default_adapters",
]
