"""CatalogDataset — the shape of one packaged event-catalog data file.

Each file under ``histocat/catalog/data/`` holds one language's curated
events plus the localized strings needed to render them:

```json
{
  "schema": "histocat.dataset.v1",
  "language": "fr",
  "aliases": ["fr-CA"],
  "categories": {"emoji": "🗓", "politics": "Politique", ...},
  "link_label": "Wikipédia…",
  "events": [ ... EventRecord ... ]
}
```

Event order in the file is the display order.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .event import Category, EventRecord


class CategoryLabels(BaseModel):
    """Localized category labels sharing one emoji marker."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    emoji: str = Field(min_length=1)
    politics: str
    history: str
    science: str

    def label(self, category: Category) -> str:
        """Return the ``TYPE`` value for `category`, e.g. ``"🗓 Politique"``."""
        return f"{self.emoji} {getattr(self, category.value)}"

    def category_for(self, label: str) -> Category | None:
        """Inverse of :meth:`label`; ``None`` when no category matches."""
        for category in Category:
            if self.label(category) == label:
                return category
        return None


class CatalogDataset(BaseModel):
    """One language's events and rendering strings."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    schema_id: Literal["histocat.dataset.v1"] = Field(alias="schema")
    language: str = Field(pattern=r"^[a-z]{2,3}(-[A-Za-z0-9]{2,8})*$")
    aliases: tuple[str, ...] = Field(default_factory=tuple)
    categories: CategoryLabels
    link_label: str = Field(default="Wikipédia…")
    events: tuple[EventRecord, ...]

    @field_validator("aliases")
    @classmethod
    def _unique_aliases(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if len(set(v)) != len(v):
            raise ValueError("duplicate alias")
        return v

    @property
    def tags(self) -> tuple[str, ...]:
        """Every language tag served by this dataset, primary first."""
        return (self.language, *self.aliases)


__all__ = ["CatalogDataset", "CategoryLabels"]
