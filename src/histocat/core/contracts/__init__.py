"""Pydantic contracts for event records, date expressions and datasets."""

from __future__ import annotations

from .dataset import CatalogDataset, CategoryLabels
from .date import DateExpression, DatePoint, DateRange, parse_date
from .event import Category, Continuation, EventRecord, Link, Note

__all__ = [
    "CatalogDataset",
    "Category",
    "CategoryLabels",
    "Continuation",
    "DateExpression",
    "DatePoint",
    "DateRange",
    "EventRecord",
    "Link",
    "Note",
    "parse_date",
]
