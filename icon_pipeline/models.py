"""models.py — Pydantic v2 models for icon records, the manifest, and the report.

Field names are snake_case in Python and camelCase in the JSON documents
consumed by the editor (``licenseUrl``, ``iconCount``, ``totalIcons``...).
"""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from .constants import CATEGORY_IDS, MANIFEST_VERSION


class IconType(StrEnum):
    OUTLINE = "outline"
    FILLED = "filled"
    SOLID = "solid"
    BOLD = "bold"
    SHARP = "sharp"


class _WireModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_json_dict(self) -> dict:
        """Dump with camelCase keys and JSON-safe values."""
        return self.model_dump(mode="json", by_alias=True)


class IconRecord(_WireModel):
    """One classified SVG asset from one source library."""

    id: str = Field(description="library/style/name; also the object key without .svg")
    name: str = Field(description="Display name, e.g. 'Arrow Up Right'")
    library: str
    category: str
    type: IconType
    tags: tuple[str, ...] = ()

    @field_validator("category")
    @classmethod
    def _known_category(cls, value: str) -> str:
        if value not in CATEGORY_IDS:
            raise ValueError(f"unknown category {value!r}")
        return value


class CategoryDefinition(_WireModel):
    id: str
    label: str
    count: int = Field(default=0, ge=0)


class LibraryInfo(_WireModel):
    """Static per-library metadata carried by each adapter."""

    id: str
    name: str
    version: str
    url: str
    license: str
    license_url: str
    attribution: str
    description: str

    def with_count(self, icon_count: int) -> LibraryMetadata:
        return LibraryMetadata(**self.model_dump(), icon_count=icon_count)


class LibraryMetadata(LibraryInfo):
    icon_count: int = Field(default=0, ge=0)


class Manifest(_WireModel):
    """The aggregated document describing all icons, categories, and libraries."""

    version: int = MANIFEST_VERSION
    generated: datetime
    icons: tuple[IconRecord, ...]
    categories: tuple[CategoryDefinition, ...]
    libraries: tuple[LibraryMetadata, ...]

    @model_validator(mode="after")
    def _icons_reference_known_entries(self) -> Manifest:
        category_ids = {cat.id for cat in self.categories}
        library_ids = {lib.id for lib in self.libraries}
        for icon in self.icons:
            if icon.category not in category_ids:
                raise ValueError(f"{icon.id}: category {icon.category!r} not in manifest")
            if icon.library not in library_ids:
                raise ValueError(f"{icon.id}: library {icon.library!r} not in manifest")
        return self


class LibraryCount(_WireModel):
    library: str
    count: int


class TypeCount(_WireModel):
    type: str
    count: int


class CategoryCount(_WireModel):
    category: str
    count: int


class UncategorizedIcon(_WireModel):
    id: str
    name: str
    tags: tuple[str, ...] = ()


class Report(_WireModel):
    """Processing stats written next to the manifest for manual review."""

    total_icons: int
    categorized: int
    uncategorized: int
    library_breakdown: tuple[LibraryCount, ...]
    type_breakdown: tuple[TypeCount, ...]
    category_breakdown: tuple[CategoryCount, ...]
    uncategorized_icons: tuple[UncategorizedIcon, ...]
