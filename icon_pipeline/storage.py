"""Remote stores the publisher pushes to.

Key-value:
    WranglerKVStore      Cloudflare KV through ``npx wrangler kv key put``.

Object storage:
    WranglerObjectStore  Cloudflare R2 through ``npx wrangler r2 object put``.
    GCSObjectStore       Google Cloud Storage through google-cloud-storage.

Every store assumes an already-authenticated session (``wrangler login`` /
Application Default Credentials). A failed put raises UploadError.
"""

from __future__ import annotations

import subprocess
import threading
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from google.api_core import exceptions as gcs_exceptions
from google.auth import exceptions as auth_exceptions
from google.cloud import storage as gcs_storage

from .config import ObjectStoreBackend, PublisherConfig
from .exceptions import UploadError

if TYPE_CHECKING:
    from google.cloud.storage import Bucket as GCSBucket
    from google.cloud.storage import Client as GCSClient

__all__ = [
    "GCSObjectStore",
    "KeyValueStore",
    "ObjectStore",
    "WranglerKVStore",
    "WranglerObjectStore",
    "get_kv_store",
    "get_object_store",
]

_WRANGLER: tuple[str, ...] = ("npx", "wrangler")


class KeyValueStore(Protocol):
    def put(self, key: str, path: Path) -> None: ...


class ObjectStore(Protocol):
    def put(self, key: str, path: Path, content_type: str) -> None: ...


def _run_wrangler(args: list[str], cwd: Path, key: str) -> None:
    """Run one wrangler command; raise UploadError on any failure."""
    try:
        result = subprocess.run(
            [*_WRANGLER, *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            errors="replace",
            check=False,
        )
    except OSError as exc:
        raise UploadError(key, f"could not run wrangler: {exc}") from exc
    if result.returncode != 0:
        message = (result.stderr or result.stdout or "").strip()
        raise UploadError(key, message or f"wrangler exited with {result.returncode}")


class WranglerKVStore:
    """Cloudflare KV namespace addressed by id, written with ``--remote``."""

    __slots__ = ("_namespace_id", "_worker_dir")

    def __init__(self, namespace_id: str, worker_dir: Path) -> None:
        self._namespace_id = namespace_id
        self._worker_dir = worker_dir

    def command(self, key: str, path: Path) -> list[str]:
        return [
            "kv", "key", "put",
            f"--namespace-id={self._namespace_id}",
            "--remote",
            key,
            "--path", str(path),
        ]

    def put(self, key: str, path: Path) -> None:
        _run_wrangler(self.command(key, path), self._worker_dir, key)


class WranglerObjectStore:
    """Cloudflare R2 bucket; one wrangler process per object."""

    __slots__ = ("_bucket", "_worker_dir")

    def __init__(self, bucket: str, worker_dir: Path) -> None:
        self._bucket = bucket
        self._worker_dir = worker_dir

    def command(self, key: str, path: Path, content_type: str) -> list[str]:
        return [
            "r2", "object", "put",
            f"{self._bucket}/{key}",
            "--file", str(path),
            "--remote",
            "--content-type", content_type,
        ]

    def put(self, key: str, path: Path, content_type: str) -> None:
        _run_wrangler(self.command(key, path, content_type), self._worker_dir, key)


class GCSObjectStore:
    """Google Cloud Storage bucket.

    Args:
        bucket_name: Target bucket.
        client:      Optional pre-configured client for dependency injection
                     and testing. When ``None``, a client is lazily created from
                     Application Default Credentials on first use.
    """

    __slots__ = ("_bucket_name", "_client", "_bucket", "_lock")

    def __init__(self, bucket_name: str, client: GCSClient | None = None) -> None:
        self._bucket_name = bucket_name
        self._client: GCSClient | None = client
        self._bucket: GCSBucket | None = None
        # workers share one store; the client is created once
        self._lock = threading.Lock()

    def _ensure_bucket(self) -> GCSBucket:
        with self._lock:
            if self._client is None:
                self._client = gcs_storage.Client()
            if self._bucket is None:
                self._bucket = self._client.bucket(self._bucket_name)
            return self._bucket

    def put(self, key: str, path: Path, content_type: str) -> None:
        try:
            blob = self._ensure_bucket().blob(key)
            blob.upload_from_filename(str(path), content_type=content_type)
        except (gcs_exceptions.GoogleAPIError, auth_exceptions.GoogleAuthError, OSError) as exc:
            raise UploadError(key, str(exc)) from exc


def get_kv_store(config: PublisherConfig) -> KeyValueStore:
    return WranglerKVStore(config.kv_namespace_id, config.worker_dir)


def get_object_store(config: PublisherConfig) -> ObjectStore:
    if config.object_store is ObjectStoreBackend.GCS:
        return GCSObjectStore(config.gcs_bucket)
    return WranglerObjectStore(config.r2_bucket, config.worker_dir)
