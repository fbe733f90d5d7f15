"""Event catalog: immutable, language-tag-keyed collections of event records.

The curated events ship as JSON data files inside the package
(``histocat/catalog/data/*.json``), one per language. Each file is validated
against :class:`~histocat.core.contracts.dataset.CatalogDataset` when the
catalog is built; after that, lookups are pure in-memory reads.

Lookup rules
------------
- Exact match on the dataset language or one of its aliases
  (``fr`` and ``fr-CA`` share the French dataset).
- An unknown tag yields an empty tuple; it is never an error.
- The same tuple object is returned for every call with the same tag.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from functools import lru_cache
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from types import MappingProxyType

from pydantic import ValidationError

from histocat.core.contracts.dataset import CatalogDataset
from histocat.core.contracts.event import EventRecord
from histocat.core.result import Result, err, ok
from histocat.core.settings import get_logger

logger = get_logger(__name__)

DATA_PACKAGE = "histocat.catalog"
DATA_DIR = "data"


class CatalogDataError(ValueError):
    """A packaged or user-supplied dataset file is not a valid catalog."""


def _decode(text: str, source: str) -> CatalogDataset:
    try:
        return CatalogDataset.model_validate(json.loads(text))
    except json.JSONDecodeError as e:
        raise CatalogDataError(f"{source}: invalid JSON ({e})") from e
    except ValidationError as e:
        raise CatalogDataError(f"{source}: {e.error_count()} validation error(s)\n{e}") from e


def load_dataset(path: Path | Traversable) -> CatalogDataset:
    """Read and validate one dataset file; raise :class:`CatalogDataError` on failure."""
    return _decode(path.read_text(encoding="utf-8"), str(path))


def check_dataset(path: Path) -> Result[CatalogDataset, str]:
    """Validate a dataset file without raising, for tooling and the CLI."""
    try:
        return ok(load_dataset(path))
    except (CatalogDataError, OSError, UnicodeDecodeError) as e:
        return err(str(e))


def packaged_datasets() -> list[CatalogDataset]:
    """Load every dataset shipped in ``histocat/catalog/data``, sorted by file name."""
    root = resources.files(DATA_PACKAGE).joinpath(DATA_DIR)
    files = sorted(
        (f for f in root.iterdir() if f.is_file() and f.name.endswith(".json")),
        key=lambda f: f.name,
    )
    return [load_dataset(f) for f in files]


class EventCatalog:
    """Read-only mapping from language tag to an ordered tuple of records.

    Build one from datasets with the constructor, or use :func:`default_catalog`
    for the process-wide catalog of packaged data.
    """

    def __init__(self, datasets: Iterable[CatalogDataset]) -> None:
        by_tag: dict[str, CatalogDataset] = {}
        for ds in datasets:
            for tag in ds.tags:
                if tag in by_tag:
                    raise CatalogDataError(
                        f"language tag {tag!r} served by both "
                        f"{by_tag[tag].language!r} and {ds.language!r} datasets"
                    )
                by_tag[tag] = ds
            logger.info("Loaded %d events for %s", len(ds.events), "/".join(ds.tags))
        self._datasets: Mapping[str, CatalogDataset] = MappingProxyType(by_tag)

    def lookup(self, language_tag: str) -> tuple[EventRecord, ...]:
        """Return the records for `language_tag`, or ``()`` if unsupported."""
        ds = self._datasets.get(language_tag)
        if ds is None:
            logger.debug("No events for language tag %r", language_tag)
            return ()
        return ds.events

    def dataset(self, language_tag: str) -> CatalogDataset | None:
        """Return the dataset (labels, link label, events) serving `language_tag`."""
        return self._datasets.get(language_tag)

    def languages(self) -> tuple[str, ...]:
        """Return every supported language tag, in load order."""
        return tuple(self._datasets)

    def __contains__(self, language_tag: object) -> bool:
        return language_tag in self._datasets


@lru_cache(maxsize=1)
def default_catalog() -> EventCatalog:
    """Return the shared catalog, built from packaged data on first access."""
    return EventCatalog(packaged_datasets())


__all__ = [
    "CatalogDataError",
    "EventCatalog",
    "check_dataset",
    "default_catalog",
    "load_dataset",
    "packaged_datasets",
]
