"""
icon_pipeline package - unified icon library build.

Public API:
    adapters    - One adapter per third-party icon package
    categorizer - Keyword / vendor-taxonomy categorization
    config      - Publisher configuration from the environment
    constants   - Categories, keyword tables, vendor maps, wire keys
    manifest    - Manifest, libraries document and report assembly
    models      - Wire models (IconRecord, Manifest, Report, ...)
    paths       - Repository path configuration
    pipeline    - Full processing run
    publisher   - KV + object storage upload
    storage     - Wrangler / GCS store backends
    svg_utils   - SVG cleaning and rendering
    utils       - Naming helpers
"""

from . import (
    adapters,
    categorizer,
    config,
    constants,
    manifest,
    models,
    paths,
    pipeline,
    publisher,
    storage,
    svg_utils,
    utils,
)

__all__ = [
    "adapters",
    "categorizer",
    "config",
    "constants",
    "manifest",
    "models",
    "paths",
    "pipeline",
    "publisher",
    "storage",
    "svg_utils",
    "utils",
]
