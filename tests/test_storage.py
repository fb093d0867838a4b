"""Tests for icon_pipeline/storage module."""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from google.api_core import exceptions as gcs_exceptions

from icon_pipeline import storage
from icon_pipeline.config import ObjectStoreBackend, PublisherConfig
from icon_pipeline.exceptions import UploadError
from icon_pipeline.storage import (
    GCSObjectStore,
    WranglerKVStore,
    WranglerObjectStore,
    get_kv_store,
    get_object_store,
)

WORKER_DIR = Path("/srv/cloudflare-worker")


def _config(backend: ObjectStoreBackend) -> PublisherConfig:
    return PublisherConfig(
        kv_namespace_id="ns123",
        r2_bucket="icons-r2",
        worker_dir=WORKER_DIR,
        concurrency=4,
        object_store=backend,
        gcs_bucket="icons-gcs",
    )


class TestWranglerCommands:
    """Test cases for wrangler command construction."""

    def test_kv_command(self) -> None:
        store = WranglerKVStore("ns123", WORKER_DIR)

        assert store.command("icon-manifest", Path("/build/manifest.json")) == [
            "kv", "key", "put",
            "--namespace-id=ns123",
            "--remote",
            "icon-manifest",
            "--path", "/build/manifest.json",
        ]

    def test_object_command(self) -> None:
        store = WranglerObjectStore("icons-r2", WORKER_DIR)

        assert store.command("lucide/outline/x.svg", Path("/build/lucide/outline/x.svg"), "image/svg+xml") == [
            "r2", "object", "put",
            "icons-r2/lucide/outline/x.svg",
            "--file", "/build/lucide/outline/x.svg",
            "--remote",
            "--content-type", "image/svg+xml",
        ]


class TestWranglerPut:
    """Test cases for running wrangler."""

    def test_success_runs_npx_in_worker_dir(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[tuple[list[str], dict]] = []

        def fake_run(args: list[str], **kwargs) -> subprocess.CompletedProcess:
            calls.append((args, kwargs))
            return subprocess.CompletedProcess(args, 0, stdout="ok", stderr="")

        monkeypatch.setattr(storage.subprocess, "run", fake_run)

        WranglerKVStore("ns123", WORKER_DIR).put("icon-libraries", Path("/build/libraries.json"))

        args, kwargs = calls[0]
        assert args[:5] == ["npx", "wrangler", "kv", "key", "put"]
        assert kwargs["cwd"] == WORKER_DIR
        assert kwargs["errors"] == "replace"

    def test_nonzero_exit_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def fake_run(args: list[str], **kwargs) -> subprocess.CompletedProcess:
            return subprocess.CompletedProcess(args, 1, stdout="", stderr="Authentication error\n")

        monkeypatch.setattr(storage.subprocess, "run", fake_run)

        with pytest.raises(UploadError) as excinfo:
            WranglerObjectStore("icons-r2", WORKER_DIR).put("a/b.svg", Path("b.svg"), "image/svg+xml")

        assert excinfo.value.key == "a/b.svg"
        assert excinfo.value.message == "Authentication error"

    def test_missing_npx_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def fake_run(args: list[str], **kwargs) -> subprocess.CompletedProcess:
            raise FileNotFoundError("npx")

        monkeypatch.setattr(storage.subprocess, "run", fake_run)

        with pytest.raises(UploadError, match="could not run wrangler"):
            WranglerKVStore("ns123", WORKER_DIR).put("icon-manifest", Path("manifest.json"))


class TestGCSObjectStore:
    """Test cases for the Google Cloud Storage backend."""

    def test_put_uploads_with_content_type(self) -> None:
        client = MagicMock()
        store = GCSObjectStore("icons-gcs", client=client)

        store.put("lucide/outline/x.svg", Path("/build/x.svg"), "image/svg+xml")
        store.put("lucide/outline/y.svg", Path("/build/y.svg"), "image/svg+xml")

        client.bucket.assert_called_once_with("icons-gcs")
        bucket = client.bucket.return_value
        bucket.blob.assert_any_call("lucide/outline/x.svg")
        bucket.blob.return_value.upload_from_filename.assert_any_call(
            "/build/x.svg", content_type="image/svg+xml"
        )

    def test_api_error_becomes_upload_error(self) -> None:
        client = MagicMock()
        blob = client.bucket.return_value.blob.return_value
        blob.upload_from_filename.side_effect = gcs_exceptions.Forbidden("access denied")

        with pytest.raises(UploadError) as excinfo:
            GCSObjectStore("icons-gcs", client=client).put("k.svg", Path("k.svg"), "image/svg+xml")

        assert excinfo.value.key == "k.svg"
        assert "access denied" in excinfo.value.message


class TestStoreFactories:
    """Test cases for get_kv_store / get_object_store."""

    def test_default_backend_is_wrangler(self) -> None:
        assert isinstance(get_object_store(_config(ObjectStoreBackend.WRANGLER)), WranglerObjectStore)
        assert isinstance(get_kv_store(_config(ObjectStoreBackend.WRANGLER)), WranglerKVStore)

    def test_gcs_backend(self) -> None:
        # no client is created until the first put
        assert isinstance(get_object_store(_config(ObjectStoreBackend.GCS)), GCSObjectStore)
