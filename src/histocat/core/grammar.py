"""Reader for the leveled tag grammar produced by :mod:`histocat.core.renderer`.

Genealogy engines parse each block as ``<level> <TAG>[ <value>]`` lines. This
module performs the same split so that rendered output can be checked
against its source record:

- `read_lines(block)` returns every tagged line, tolerating the leading
  spaces some curated lines carry.
- `read_header(block, labels)` recovers the title, category and date from
  the ``1 EVEN`` / ``2 TYPE`` / ``2 DATE`` prefix.

Both return a :class:`~histocat.core.result.Result` rather than raising, since
a malformed block is data, not a bug.

Examples
--------
>>> header = read_header("1 EVEN Calaisis\\n2 TYPE 🗓 Histoire\\n2 DATE JAN 1558").unwrap()
>>> header.title, header.type_label, header.date.serialize()
('Calaisis', '🗓 Histoire', 'JAN 1558')
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .contracts.dataset import CategoryLabels
from .contracts.date import DatePoint, DateRange, parse_date
from .contracts.event import Category
from .result import Result, err, ok

_LINE = re.compile(r"^\s*(?P<level>\d+) (?P<tag>[A-Z_]+)(?: (?P<value>.*))?$", flags=re.DOTALL)


@dataclass(frozen=True)
class TaggedLine:
    """One ``<level> <TAG> <value>`` line; `value` is ``""`` when absent."""

    level: int
    tag: str
    value: str


@dataclass(frozen=True)
class BlockHeader:
    """Values recovered from the first three lines of a block."""

    title: str
    type_label: str
    date: DatePoint | DateRange
    category: Category | None = None


def read_lines(block: str) -> Result[list[TaggedLine], str]:
    """Split `block` into tagged lines, failing on the first malformed one."""
    out: list[TaggedLine] = []
    for lineno, raw in enumerate(block.split("\n"), start=1):
        m = _LINE.match(raw)
        if m is None:
            return err(f"line {lineno}: not a tagged line: {raw!r}")
        out.append(TaggedLine(int(m.group("level")), m.group("tag"), m.group("value") or ""))
    return ok(out)


def _header_from_lines(
    lines: list[TaggedLine], labels: CategoryLabels | None
) -> Result[BlockHeader, str]:
    expected = ((1, "EVEN"), (2, "TYPE"), (2, "DATE"))
    if len(lines) < len(expected):
        return err(f"block has {len(lines)} lines; EVEN/TYPE/DATE prefix needs 3")
    for line, (level, tag) in zip(lines, expected, strict=False):
        if (line.level, line.tag) != (level, tag):
            return err(f"expected '{level} {tag}', got '{line.level} {line.tag}'")

    title, type_label = lines[0].value, lines[1].value
    category = labels.category_for(type_label) if labels is not None else None
    if labels is not None and category is None:
        return err(f"unknown category label: {type_label!r}")
    return parse_date(lines[2].value).map(
        lambda date: BlockHeader(title=title, type_label=type_label, date=date, category=category)
    )


def read_header(block: str, labels: CategoryLabels | None = None) -> Result[BlockHeader, str]:
    """Recover title, ``TYPE`` label and date from a rendered block.

    When `labels` is given the ``TYPE`` value is also mapped back to its
    :class:`~histocat.core.contracts.event.Category`.
    """
    return read_lines(block).flat_map(lambda lines: _header_from_lines(lines, labels))


__all__ = ["BlockHeader", "TaggedLine", "read_header", "read_lines"]
