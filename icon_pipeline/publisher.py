"""Publish a finished build to the key-value store and object storage.

Two independent phases:
    manifest  manifest.json → ``icon-manifest``, libraries.json → ``icon-libraries``
    svgs      every ``*.svg`` under the build root → object key = relative path

The SVG phase runs a fixed pool of worker threads pulling from one shared
queue. Each file is attempted exactly once; failures are tallied and listed
at the end for a manual re-run (usually narrowed with ``--lib``).
"""

from __future__ import annotations

import json
import queue
import threading
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import ValidationError

from .constants import (
    DEFAULT_UPLOAD_CONCURRENCY,
    LIBRARIES_FILENAME,
    LIBRARIES_KV_KEY,
    MANIFEST_FILENAME,
    MANIFEST_KV_KEY,
    SVG_CONTENT_TYPE,
)
from .exceptions import ManifestError, ManifestNotFoundError, UploadError
from .manifest import build_libraries_document
from .models import Manifest
from .storage import KeyValueStore, ObjectStore
from .utils import _rel_posix

_PROGRESS_EVERY = 100
_BANNER = "═" * 50


@dataclass(frozen=True, slots=True)
class UploadItem:
    local_path: Path
    key: str


@dataclass(frozen=True, slots=True)
class UploadTally:
    completed: int
    failed: int
    total: int
    failures: tuple[str, ...] = ()


@dataclass(slots=True)
class _UploadCounters:
    """Shared tally; workers only ever increment it."""

    completed: int = 0
    failed: int = 0
    failures: list[str] = field(default_factory=list)
    _lock: threading.Lock = field(default_factory=threading.Lock)

    def record(self, key: str, error: str) -> int:
        """Count one finished item and return how many are done so far."""
        with self._lock:
            if error:
                self.failed += 1
                self.failures.append(key)
            else:
                self.completed += 1
            return self.completed + self.failed


# ── Build inspection ──────────────────────────────────────────────────────────


def load_manifest(build_dir: Path) -> Manifest:
    """Read and validate ``manifest.json`` from *build_dir*.

    Raises:
        ManifestNotFoundError: If the pipeline has not produced a manifest yet.
        ManifestError:         If the file is not a valid manifest.
    """
    manifest_path = build_dir / MANIFEST_FILENAME
    if not manifest_path.is_file():
        raise ManifestNotFoundError(manifest_path)
    try:
        data = json.loads(manifest_path.read_text(encoding="utf-8"))
        return Manifest.model_validate(data)
    except (json.JSONDecodeError, ValidationError) as exc:
        raise ManifestError(f"{manifest_path}: {exc}") from exc


def find_svgs(build_dir: Path) -> list[UploadItem]:
    """All SVG files below *build_dir*, keyed by their POSIX relative path."""
    return [
        UploadItem(local_path=svg_path, key=_rel_posix(svg_path, build_dir))
        for svg_path in sorted(build_dir.rglob("*.svg"))
        if svg_path.is_file()
    ]


def filter_library(items: Iterable[UploadItem], library: str) -> list[UploadItem]:
    prefix = library.strip("/") + "/"
    return [item for item in items if item.key.startswith(prefix)]


# ── Manifest phase ────────────────────────────────────────────────────────────


def _put_document(store: KeyValueStore, key: str, path: Path) -> bool:
    try:
        store.put(key, path)
    except UploadError as exc:
        print(f"  FAILED: {key}")
        print(f"  {exc.message}")
        return False
    except Exception as exc:  # noqa: BLE001
        print(f"  FAILED: {key}")
        print(f"  {type(exc).__name__}: {exc}")
        return False
    print(f"   ✓ {key} uploaded to KV")
    return True


def publish_manifest(build_dir: Path, manifest: Manifest, store: KeyValueStore) -> bool:
    """Upload manifest.json and a freshly derived libraries.json.

    Both keys are attempted even if the first fails.
    """
    libraries_path = build_dir / LIBRARIES_FILENAME
    with open(libraries_path, "w", encoding="utf-8") as fh:
        json.dump(build_libraries_document(manifest), fh, indent=2, ensure_ascii=False)

    manifest_ok = _put_document(store, MANIFEST_KV_KEY, build_dir / MANIFEST_FILENAME)
    libraries_ok = _put_document(store, LIBRARIES_KV_KEY, libraries_path)
    return manifest_ok and libraries_ok


# ── SVG phase ─────────────────────────────────────────────────────────────────


def _upload_one(store: ObjectStore, item: UploadItem) -> str:
    """Upload *item*.

    Returns:
        Empty string on success, or an error message string on failure.
    """
    try:
        store.put(item.key, item.local_path, SVG_CONTENT_TYPE)
        return ""
    except UploadError as exc:
        return exc.message
    except Exception as exc:  # noqa: BLE001
        return f"{type(exc).__name__}: {exc}"


def upload_all(
    items: Sequence[UploadItem],
    store: ObjectStore,
    concurrency: int = DEFAULT_UPLOAD_CONCURRENCY,
    progress_every: int = _PROGRESS_EVERY,
) -> UploadTally:
    """Upload *items* with *concurrency* workers sharing one queue.

    Order of completion is unspecified; every item is taken off the queue
    exactly once. No retries and no cancellation.
    """
    if concurrency < 1:
        raise ValueError("concurrency must be >= 1")

    total = len(items)
    pending: queue.SimpleQueue[UploadItem] = queue.SimpleQueue()
    for item in items:
        pending.put(item)

    counters = _UploadCounters()
    started = time.monotonic()

    def worker() -> None:
        while True:
            try:
                item = pending.get_nowait()
            except queue.Empty:
                return
            done = counters.record(item.key, _upload_one(store, item))
            if done % progress_every == 0 or done == total:
                elapsed = time.monotonic() - started
                rate = done / elapsed if elapsed > 0 else 0.0
                print(f"   ... {done}/{total} ({rate:.1f}/s, {elapsed:.0f}s elapsed)")

    workers = [
        threading.Thread(target=worker, name=f"svg-upload-{n}", daemon=True)
        for n in range(min(concurrency, total))
    ]
    for thread in workers:
        thread.start()
    for thread in workers:
        thread.join()

    return UploadTally(
        completed=counters.completed,
        failed=counters.failed,
        total=total,
        failures=tuple(sorted(counters.failures)),
    )


# ── Entry point ───────────────────────────────────────────────────────────────


def run_publish(
    build_dir: Path,
    *,
    kv_store: KeyValueStore,
    object_store: ObjectStore,
    manifest: bool = False,
    svgs: bool = False,
    library: str | None = None,
    concurrency: int = DEFAULT_UPLOAD_CONCURRENCY,
) -> int:
    """Run the selected phases and return a process exit code.

    No phase flag means both phases; ``library`` on its own implies the SVG
    phase only.

    Raises:
        ManifestNotFoundError: If ``manifest.json`` is absent.
    """
    loaded = load_manifest(build_dir)
    if not manifest and not svgs:
        manifest = library is None
        svgs = True

    print(f"Upload Pipeline — {len(loaded.icons)} icons, {len(loaded.libraries)} libraries")
    print(_BANNER)

    ok = True
    if manifest:
        print("\n1. Uploading manifest to KV...")
        ok = publish_manifest(build_dir, loaded, kv_store) and ok

    if svgs:
        print("\n2. Uploading SVGs to object storage...")
        items = find_svgs(build_dir)
        if library:
            items = filter_library(items, library)
            print(f"   Filtered to {library}/ — {len(items)} files")
        print(f"   Uploading {len(items)} SVG files ({concurrency} concurrent)...")

        tally = upload_all(items, object_store, concurrency=concurrency)
        print(f"\n   ✓ {tally.completed} SVGs uploaded")
        if tally.failed:
            print(f"   ✗ {tally.failed} failed")
            for key in tally.failures:
                print(f"     - {key}")
            ok = False
        unaccounted = tally.total - tally.completed - tally.failed
        if unaccounted:
            print(f"   ✗ {unaccounted} never finished")
            ok = False

    print(f"\n{_BANNER}")
    print("Done.")
    return 0 if ok else 1
