"""EventRecord — one historical fact shown on genealogy timelines.

A record is a title, one category, a date expression and an optional note.
The note has a primary line and ordered continuation lines; a continuation
may carry a reference link whose final text depends on the rendering mode,
so the link is stored as a URL and formatted only at render time.

Layout quirks of the curated data (a leading space before one ``2 NOTE``
line, a trailing space after one ``DATE`` token) are kept as explicit fields
rather than folded into the text, so that they survive serialization exactly.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from .date import DateExpression


class Category(StrEnum):
    """Event category; the visible label comes from the dataset."""

    POLITICS = "politics"
    HISTORY = "history"
    SCIENCE = "science"


class Link(BaseModel):
    """External reference attached to a continuation line."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    url: str = Field(min_length=1, description="Absolute URL, kept verbatim (no percent-encoding)")


class Continuation(BaseModel):
    """A ``3 CONT`` line: free text, optionally followed by a link."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    text: str = Field(default="")
    link: Link | None = Field(default=None)


class Note(BaseModel):
    """A ``2 NOTE`` line and its continuations, in display order."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    primary: str
    continuations: tuple[Continuation, ...] = Field(default_factory=tuple)

    @property
    def links(self) -> tuple[Link, ...]:
        return tuple(c.link for c in self.continuations if c.link is not None)


class EventRecord(BaseModel):
    """A dated historical event."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    title: str = Field(min_length=1)
    category: Category
    date: DateExpression
    note: Note | None = Field(default=None)

    note_indent: str = Field(default="", pattern=r"^ *$", description="Emitted before '2 NOTE'")
    date_trailer: str = Field(default="", pattern=r"^ *$", description="Emitted after the date")

    @property
    def has_link(self) -> bool:
        return self.note is not None and bool(self.note.links)


__all__ = ["Category", "Continuation", "EventRecord", "Link", "Note"]
