"""Pytest configuration and shared fixtures for the icon pipeline."""

from __future__ import annotations

import json
import sys
from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Add the repository root to path for imports
REPO_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(REPO_ROOT))

from icon_pipeline.manifest import build_manifest, build_report, compute_stats, write_outputs  # noqa: E402
from icon_pipeline.models import IconRecord, IconType, LibraryInfo  # noqa: E402
from icon_pipeline.paths import Paths  # noqa: E402

SAMPLE_SVG = (
    "<!-- @license sample v1.0 -->\n"
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">'
    '<path d="M4 12h16"/></svg>\n'
)

_ENV_KEYS = (
    "ICON_NODE_MODULES",
    "ICON_OUTPUT_DIR",
    "ICON_KV_NAMESPACE_ID",
    "ICON_R2_BUCKET",
    "ICON_WORKER_DIR",
    "ICON_UPLOAD_CONCURRENCY",
    "ICON_OBJECT_STORE",
    "GCS_BUCKET_NAME",
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch):
    """Every test starts from default paths and an empty publisher environment."""
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    Paths.reset()
    yield
    Paths.reset()


@pytest.fixture
def repo_root() -> Path:
    """Return the repository root path."""
    return REPO_ROOT


@pytest.fixture
def node_modules(tmp_path: Path) -> Path:
    """Return an empty node_modules directory."""
    path = tmp_path / "node_modules"
    path.mkdir()
    return path


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Return a temporary build output directory (not yet created)."""
    return tmp_path / "build" / "icons"


@pytest.fixture
def make_svg() -> Callable[[Path], Path]:
    """Return a helper writing SAMPLE_SVG to a path, creating parents."""

    def _make(path: Path, content: str = SAMPLE_SVG) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _make


@pytest.fixture
def write_json() -> Callable[[Path, object], Path]:
    """Return a helper dumping a JSON document to a path, creating parents."""

    def _write(path: Path, payload: object) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def library_infos() -> list[LibraryInfo]:
    """Two small libraries for manifest tests."""
    return [
        LibraryInfo(
            id="alpha",
            name="Alpha Icons",
            version="1.0.0",
            url="https://alpha.example",
            license="MIT",
            license_url="https://alpha.example/LICENSE",
            attribution="Alpha Authors",
            description="First test library",
        ),
        LibraryInfo(
            id="beta",
            name="Beta Icons",
            version="2.0.0",
            url="https://beta.example",
            license="ISC",
            license_url="https://beta.example/LICENSE",
            attribution="Beta Authors",
            description="Second test library",
        ),
    ]


@pytest.fixture
def sample_icons() -> list[IconRecord]:
    """Three icons across the two libraries of ``library_infos``."""
    return [
        IconRecord(
            id="alpha/outline/arrow-up",
            name="Arrow Up",
            library="alpha",
            category="arrows",
            type=IconType.OUTLINE,
            tags=("direction",),
        ),
        IconRecord(
            id="alpha/filled/arrow-up",
            name="Arrow Up",
            library="alpha",
            category="arrows",
            type=IconType.FILLED,
        ),
        IconRecord(
            id="beta/outline/blob",
            name="Blob",
            library="beta",
            category="misc",
            type=IconType.OUTLINE,
            tags=("shape",),
        ),
    ]


@pytest.fixture
def built_output(
    output_dir: Path,
    sample_icons: list[IconRecord],
    library_infos: list[LibraryInfo],
    make_svg: Callable[[Path], Path],
) -> Path:
    """A finished build: the three JSON documents plus one SVG per icon."""
    stats = compute_stats(sample_icons)
    manifest = build_manifest(
        sample_icons,
        library_infos,
        generated=datetime(2025, 1, 1, tzinfo=timezone.utc),
        stats=stats,
    )
    write_outputs(output_dir, manifest, build_report(stats))
    for icon in sample_icons:
        make_svg(output_dir / f"{icon.id}.svg")
    return output_dir
