"""Publisher configuration read from the environment.

Environment:
    ICON_KV_NAMESPACE_ID     KV namespace receiving icon-manifest / icon-libraries.
    ICON_R2_BUCKET           R2 bucket for the SVG tree (default: elemental-icons).
    ICON_WORKER_DIR          Directory wrangler runs in (holds wrangler.toml).
    ICON_UPLOAD_CONCURRENCY  Parallel SVG uploads (default: 15).
    ICON_OBJECT_STORE        "wrangler" (R2, default) or "gcs".
    GCS_BUCKET_NAME          Bucket used when ICON_OBJECT_STORE=gcs.

Credentials are never read here: wrangler uses its own login session and
google-cloud-storage uses Application Default Credentials.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from .constants import DEFAULT_UPLOAD_CONCURRENCY
from .exceptions import ConfigurationError
from .paths import Paths

_DEFAULT_KV_NAMESPACE_ID = "6f0078578b6e45cd9fe6460d04dba158"
_DEFAULT_R2_BUCKET = "elemental-icons"
_DEFAULT_GCS_BUCKET = "elemental-icons"


class ObjectStoreBackend(StrEnum):
    WRANGLER = "wrangler"
    GCS = "gcs"


@dataclass(frozen=True, slots=True)
class PublisherConfig:
    kv_namespace_id: str
    r2_bucket: str
    worker_dir: Path
    concurrency: int
    object_store: ObjectStoreBackend
    gcs_bucket: str


def _env(key: str, default: str) -> str:
    return os.environ.get(key, "").strip() or default


def _parse_concurrency(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"ICON_UPLOAD_CONCURRENCY must be an integer, got {raw!r}") from None
    if value < 1:
        raise ConfigurationError("ICON_UPLOAD_CONCURRENCY must be >= 1")
    return value


def _parse_backend(raw: str) -> ObjectStoreBackend:
    try:
        return ObjectStoreBackend(raw.lower())
    except ValueError:
        choices = ", ".join(b.value for b in ObjectStoreBackend)
        raise ConfigurationError(f"ICON_OBJECT_STORE must be one of: {choices}") from None


def get_publisher_config() -> PublisherConfig:
    default_worker_dir = Paths.repo_root().parent / "cloudflare-worker"
    return PublisherConfig(
        kv_namespace_id=_env("ICON_KV_NAMESPACE_ID", _DEFAULT_KV_NAMESPACE_ID),
        r2_bucket=_env("ICON_R2_BUCKET", _DEFAULT_R2_BUCKET),
        worker_dir=Path(_env("ICON_WORKER_DIR", str(default_worker_dir))),
        concurrency=_parse_concurrency(
            _env("ICON_UPLOAD_CONCURRENCY", str(DEFAULT_UPLOAD_CONCURRENCY))
        ),
        object_store=_parse_backend(_env("ICON_OBJECT_STORE", ObjectStoreBackend.WRANGLER.value)),
        gcs_bucket=_env("GCS_BUCKET_NAME", _DEFAULT_GCS_BUCKET),
    )
