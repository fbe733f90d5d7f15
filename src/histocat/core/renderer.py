"""Catalog renderer: event records -> leveled tagged-text blocks.

Each record becomes one independent string:

    1 EVEN <title>
    2 TYPE <emoji> <category label>
    2 DATE <date token>
    2 NOTE <primary note>          (optional)
    3 CONT <continuation>          (zero or more)

Lines are joined with ``\\n`` and no trailing newline is added; the caller's
collection boundary separates blocks. A continuation carrying a link is
written as ``3 CONT`` + optional `` text`` + the formatted link, so the mode
switch only ever touches the link substring.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .contracts.dataset import CategoryLabels
from .contracts.event import Continuation, EventRecord
from .rendering import LinkFormatter, RenderingMode, formatter_for


def _continuation_line(cont: Continuation, formatter: LinkFormatter) -> str:
    if cont.link is None:
        return f"3 CONT {cont.text}"
    text = f" {cont.text}" if cont.text else ""
    return f"3 CONT{text}{formatter.format(cont.link.url)}"


def serialize_record(
    record: EventRecord,
    labels: CategoryLabels,
    formatter: LinkFormatter,
) -> str:
    """Serialize one record into its block using an already-chosen formatter."""
    lines = [
        f"1 EVEN {record.title}",
        f"2 TYPE {labels.label(record.category)}",
        f"2 DATE {record.date.serialize()}{record.date_trailer}",
    ]
    if record.note is not None:
        lines.append(f"{record.note_indent}2 NOTE {record.note.primary}")
        lines.extend(_continuation_line(c, formatter) for c in record.note.continuations)
    return "\n".join(lines)


def render(
    records: Iterable[EventRecord],
    mode: RenderingMode,
    *,
    labels: CategoryLabels,
    link_label: str | None = None,
) -> Iterator[str]:
    """Lazily yield one serialized block per record, in input order.

    The link formatter is selected once, before the first record, and reused
    for the whole pass.
    """
    formatter = formatter_for(mode, link_label=link_label)
    for record in records:
        yield serialize_record(record, labels, formatter)


__all__ = ["render", "serialize_record"]
