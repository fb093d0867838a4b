"""
categorizer.py
--------------------
Keyword categorization for icon names.

Strategies applied in order by categorize():
  1. Exact-name override           (cloud-download → infrastructure)
  2. Name keyword scan             (ordered (category, keyword) pairs)
  3. Tag keyword scan              (same pairs, case-insensitive substring)
  4. misc                          (if nothing matches)

Vendor taxonomies (Tabler, Phosphor, ...) are resolved by the adapters with
map_vendor_category() before falling back to categorize().
"""

from collections.abc import Iterable, Mapping

from .constants import CATEGORY_KEYWORDS, DEFAULT_CATEGORY, NAME_OVERRIDES


def _clean_keyword(keyword: str) -> str:
    # "move-" also matches names that *are* "move..."; one trailing hyphen only
    return keyword[:-1] if keyword.endswith("-") else keyword


def _strategy_name_override(name: str) -> str | None:
    return NAME_OVERRIDES.get(name)


def _strategy_name_keywords(name: str) -> str | None:
    for category, keyword in CATEGORY_KEYWORDS:
        if keyword in name or name.startswith(_clean_keyword(keyword)):
            return category
    return None


def _strategy_tag_keywords(tags: Iterable[object]) -> str | None:
    lowered = [str(tag).lower() for tag in tags]
    if not lowered:
        return None
    for category, keyword in CATEGORY_KEYWORDS:
        clean = _clean_keyword(keyword)
        for tag in lowered:
            if clean in tag:
                return category
    return None


def categorize(name: str, tags: Iterable[object] | None = None) -> str:
    """Map an icon name and its tags to one of the twenty category ids.

    Total: every input yields a category, never an error.
    """
    return (
        _strategy_name_override(name)
        or _strategy_name_keywords(name)
        or _strategy_tag_keywords(tags or ())
        or DEFAULT_CATEGORY
    )


def map_vendor_category(
    vendor_categories: Iterable[str], category_map: Mapping[str, str]
) -> str | None:
    """Return the local category of the first vendor category present in *category_map*."""
    for vendor in vendor_categories:
        if vendor in category_map:
            return category_map[vendor]
    return None
