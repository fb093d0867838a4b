"""
svg_utils.py
--------------------
SVG cleaning, writing, and rendering from vendor path data.
"""

import xml.etree.ElementTree as ET
from pathlib import Path

from .constants import _CLEAN_PATTERNS
from .exceptions import SVGRenderError

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def clean_svg(content: str) -> str:
    """Strip comments (license banners, editor notes) from an SVG document."""
    for pattern, replacement in _CLEAN_PATTERNS:
        content = pattern.sub(replacement, content)
    return content.strip()


def write_svg(dest: Path, content: str) -> None:
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_text(content, encoding="utf-8")


def render_svg(contents: str, attributes: dict[str, str]) -> str:
    """Wrap inner SVG markup in a root <svg> element with *attributes*.

    The document is parsed back before returning so that broken vendor
    markup surfaces here instead of in the editor.

    Raises:
        SVGRenderError: If *contents* is empty or the result is not valid XML.
    """
    if not contents or not contents.strip():
        raise SVGRenderError("empty icon contents")

    attrs = " ".join(f'{key}="{value}"' for key, value in attributes.items())
    document = f'<svg xmlns="{SVG_NAMESPACE}" {attrs}>{contents}</svg>'

    try:
        ET.fromstring(document)
    except ET.ParseError as exc:
        raise SVGRenderError(f"invalid SVG markup: {exc}") from exc
    return document
