"""
Custom exceptions for the icon pipeline.
"""

from __future__ import annotations


class IconPipelineError(Exception):
    """Base exception for icon pipeline errors."""

    pass


class ConfigurationError(IconPipelineError):
    """Invalid path or publisher configuration."""

    pass


class AdapterError(IconPipelineError):
    """Error reading a vendor package layout or its metadata."""

    pass


class SVGRenderError(IconPipelineError):
    """Error rendering an SVG document from vendor path data."""

    pass


class ManifestError(IconPipelineError):
    """Error assembling or validating the manifest."""

    pass


class ManifestNotFoundError(ManifestError):
    """The publisher was started before the pipeline produced a manifest."""

    def __init__(self, path) -> None:
        self.path = path
        super().__init__(f"{path} not found. Run `python main.py process` first.")


class UploadError(IconPipelineError):
    """A single key-value or object-storage upload failed."""

    def __init__(self, key: str, message: str) -> None:
        self.key = key
        self.message = message
        super().__init__(f"{key}: {message}")
