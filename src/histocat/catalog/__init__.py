"""Packaged historical-event catalogs, keyed by language tag."""

from __future__ import annotations

from .store import (
    CatalogDataError,
    EventCatalog,
    check_dataset,
    default_catalog,
    load_dataset,
    packaged_datasets,
)

__all__ = [
    "CatalogDataError",
    "EventCatalog",
    "check_dataset",
    "default_catalog",
    "load_dataset",
    "packaged_datasets",
]
