"""Date expressions — a calendar point or a closed range, as genealogy tokens.

Dates are opaque: nothing here compares, shifts or normalizes them. A point
carries a mandatory year and optional month and day; the day is kept as the
literal string found in the data so that ``04 OCT 1582`` and ``4 OCT 1582``
serialize exactly as they were written.

Token shapes
------------
- ``1 FEB 1328``              day + month + year
- ``JAN 1558``                month + year
- ``1528``                    year only
- ``FROM 1650 TO 1652``       range; each end follows the point rules, and
                              the end may be coarser than the start
- ``ABT 1200``                approximate point
"""

from __future__ import annotations

import re
from typing import Annotated, Literal, cast

from pydantic import BaseModel, ConfigDict, Field, model_validator

from histocat.core.result import Result, err, ok

Month = Literal["JAN", "FEB", "MAR", "APR", "MAY", "JUN", "JUL", "AUG", "SEP", "OCT", "NOV", "DEC"]
MONTHS: tuple[str, ...] = (
    "JAN", "FEB", "MAR", "APR", "MAY", "JUN", "JUL", "AUG", "SEP", "OCT", "NOV", "DEC",
)  # fmt: skip

_POINT = re.compile(
    r"^(?:(?P<abt>ABT) )?(?:(?:(?P<day>\d{1,2}) )?(?P<month>[A-Z]{3}) )?(?P<year>\d{1,4})$"
)
_RANGE = re.compile(r"^FROM (?P<start>.+) TO (?P<end>.+)$")


class DatePoint(BaseModel):
    """A single calendar point; `year` is always present."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    year: int = Field(ge=0, le=9999)
    month: Month | None = Field(default=None)
    day: str | None = Field(default=None, pattern=r"^\d{1,2}$", description="Literal day text")
    approximate: bool = Field(default=False)

    @model_validator(mode="after")
    def _day_needs_month(self) -> DatePoint:
        if self.day is not None and self.month is None:
            raise ValueError("a day requires a month")
        return self

    def serialize(self) -> str:
        parts: list[str] = []
        if self.approximate:
            parts.append("ABT")
        if self.day is not None:
            parts.append(self.day)
        if self.month is not None:
            parts.append(self.month)
        parts.append(str(self.year))
        return " ".join(parts)


class DateRange(BaseModel):
    """A closed range between two points."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    start: DatePoint
    end: DatePoint

    def serialize(self) -> str:
        return f"FROM {self.start.serialize()} TO {self.end.serialize()}"


DateExpression = Annotated[DatePoint | DateRange, Field(union_mode="smart")]


def _parse_point(token: str) -> Result[DatePoint, str]:
    m = _POINT.match(token)
    if m is None:
        return err(f"unrecognized date point: {token!r}")
    month = m.group("month")
    if month is not None and month not in MONTHS:
        return err(f"unknown month abbreviation: {month!r}")
    return ok(
        DatePoint(
            year=int(m.group("year")),
            month=month,
            day=m.group("day"),
            approximate=m.group("abt") is not None,
        )
    )


def parse_date(token: str) -> Result[DatePoint | DateRange, str]:
    """Read a ``DATE`` token back into a :class:`DatePoint` or :class:`DateRange`.

    Surrounding whitespace is ignored; everything else must match the token
    shapes listed in the module docstring.
    """
    token = token.strip()
    m = _RANGE.match(token)
    if m is None:
        return cast(Result[DatePoint | DateRange, str], _parse_point(token))
    start = _parse_point(m.group("start"))
    return start.flat_map(
        lambda s: _parse_point(m.group("end")).map(lambda e: DateRange(start=s, end=e))
    )


__all__ = ["DateExpression", "DatePoint", "DateRange", "MONTHS", "Month", "parse_date"]
