"""Rendering modes and the link-formatting strategies they select.

The host application stores one note-format preference per tree. When it is
``"markdown"`` notes are rendered as Markdown and reference links become
``[label](url)``; any other value (or none at all) means plain text, where a
bare URL padded with spaces is the only form a reader can follow.

The preference is resolved once per render pass; the chosen formatter is then
applied to every link of every record in that pass.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol

from .settings import get_logger

MARKDOWN_PREFERENCE = "markdown"
DEFAULT_LINK_LABEL = "Wikipédia…"

logger = get_logger(__name__)


class RenderingMode(StrEnum):
    """How note text is interpreted by the consuming context."""

    PLAIN_TEXT = "plain"
    MARKUP = "markdown"


def resolve_mode(preference: str | None) -> RenderingMode:
    """Map a stored preference value to a :class:`RenderingMode`.

    Only the exact value ``"markdown"`` selects :attr:`RenderingMode.MARKUP`.
    Unknown and missing values fall back to plain text and never raise.
    """
    if preference == MARKDOWN_PREFERENCE:
        return RenderingMode.MARKUP
    if preference:
        logger.debug("Unrecognized format preference %r; using plain text", preference)
    return RenderingMode.PLAIN_TEXT


class LinkFormatter(Protocol):
    """Strategy turning a URL into the text appended to a ``3 CONT`` line."""

    def format(self, url: str) -> str: ...


@dataclass(frozen=True)
class PlainTextLinks:
    """Bare URL with one space on each side."""

    def format(self, url: str) -> str:
        return f" {url} "


@dataclass(frozen=True)
class MarkupLinks:
    """Markdown inline link ``[label](url)`` preceded by one space."""

    label: str = DEFAULT_LINK_LABEL

    def format(self, url: str) -> str:
        return f" [{self.label}]({url})"


def formatter_for(mode: RenderingMode, *, link_label: str | None = None) -> LinkFormatter:
    """Return the link formatter for `mode`.

    `link_label` only affects Markdown links; ``None`` keeps the default label.
    """
    if mode is RenderingMode.MARKUP:
        return MarkupLinks(label=link_label or DEFAULT_LINK_LABEL)
    return PlainTextLinks()


__all__ = [
    "DEFAULT_LINK_LABEL",
    "LinkFormatter",
    "MarkupLinks",
    "PlainTextLinks",
    "RenderingMode",
    "formatter_for",
    "resolve_mode",
]
