"""
utils.py
--------------------
Pure helper utilities shared across modules.
No heavy dependencies — only stdlib + constants.
"""

import re
from pathlib import Path

from .constants import STYLE_SUFFIXES

_WORD_START_RE = re.compile(r"\b\w")


def to_display_name(name: str) -> str:
    """Convert a logical icon name to its display form.

    'arrow-up-right' → 'Arrow Up Right'
    """
    spaced = name.replace("-", " ")
    return _WORD_START_RE.sub(lambda m: m.group(0).upper(), spaced)


def strip_style_suffix(name: str, suffixes: tuple[str, ...] = STYLE_SUFFIXES) -> str:
    """Remove at most one trailing style suffix from *name*.

    Names without a known suffix are returned unchanged, so stripping twice
    is the same as stripping once for any suffix-free base name.
    """
    for suffix in suffixes:
        if name.endswith(suffix) and len(name) > len(suffix):
            return name[: -len(suffix)]
    return name


def kebab_case(name: str) -> str:
    """'arrow_left_up' → 'arrow-left-up'."""
    return re.sub(r"[_\s]+", "-", name.strip()).lower()


def icon_id(library: str, style: str, name: str) -> str:
    """Manifest id for an icon; also the object-storage key without '.svg'."""
    return f"{library}/{style}/{name}"


def list_svgs(directory: Path) -> list[Path]:
    """Sorted *.svg files directly inside *directory* (non-recursive)."""
    return sorted(p for p in directory.glob("*.svg") if p.is_file())


def _rel_posix(path: Path, base: Path) -> str:
    """Return path relative to base with forward slashes."""
    return path.relative_to(base).as_posix()
