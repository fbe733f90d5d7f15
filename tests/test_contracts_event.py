"""Tests for the event record and dataset contracts."""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import ValidationError

from histocat.core.contracts.dataset import CatalogDataset, CategoryLabels
from histocat.core.contracts.date import DatePoint, DateRange
from histocat.core.contracts.event import Category, EventRecord

LABELS = CategoryLabels(emoji="🗓", politics="Politique", history="Histoire", science="Sciences")


def _dataset_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "schema": "histocat.dataset.v1",
        "language": "fr",
        "aliases": ["fr-CA"],
        "categories": LABELS.model_dump(),
        "events": [
            {
                "title": "Famine en France",
                "category": "history",
                "date": {"start": {"year": 1693}, "end": {"year": 1694}},
                "note": {
                    "primary": "1 300 000 morts.",
                    "continuations": [
                        {"text": "", "link": {"url": "https://example.org/famine"}},
                    ],
                },
            },
            {"title": "Astronomie 🔭", "category": "science", "date": {"year": 1609}},
        ],
    }
    payload.update(overrides)
    return payload


def test_labels_round_trip() -> None:
    """Every category has a visible label that maps back to it."""
    assert LABELS.label(Category.POLITICS) == "🗓 Politique"
    assert LABELS.label(Category.SCIENCE) == "🗓 Sciences"
    for category in Category:
        assert LABELS.category_for(LABELS.label(category)) is category
    assert LABELS.category_for("🗓 Sport") is None


def test_dataset_parses_points_ranges_and_links() -> None:
    ds = CatalogDataset.model_validate(_dataset_payload())
    famine, astro = ds.events
    assert isinstance(famine.date, DateRange)
    assert isinstance(astro.date, DatePoint)
    assert famine.has_link and not astro.has_link
    assert famine.note is not None
    assert [link.url for link in famine.note.links] == ["https://example.org/famine"]
    assert ds.tags == ("fr", "fr-CA")


def test_records_are_immutable() -> None:
    record = EventRecord(title="Calaisis", category=Category.HISTORY, date=DatePoint(year=1558))
    with pytest.raises(ValidationError):
        record.title = "Calais"  # type: ignore[misc]


@pytest.mark.parametrize(  # type: ignore[misc]
    "overrides",
    [
        {"schema": "histocat.dataset.v2"},
        {"aliases": ["fr-CA", "fr-CA"]},
        {"language": "French"},
        {"events": [{"title": "X", "category": "sport", "date": {"year": 1900}}]},
        {"events": [{"title": "X", "category": "history", "date": {"day": "1", "year": 1900}}]},
        {"events": [{"title": "X", "category": "history", "date": {"year": 1900}, "extra": 1}]},
        {"events": [{"title": "X", "category": "history", "date": {"year": 1},
                     "note_indent": "\t"}]},
    ],
)
def test_invalid_datasets_rejected(overrides: dict[str, Any]) -> None:
    """Malformed data is a construction-time error, never a render-time one."""
    with pytest.raises(ValidationError):
        CatalogDataset.model_validate(_dataset_payload(**overrides))
