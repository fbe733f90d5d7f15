"""Tests for date expressions: serialization, validation and parsing."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from histocat.core.contracts.date import DatePoint, DateRange, parse_date


def test_point_granularities() -> None:
    """Missing day/month components are omitted, never padded."""
    assert DatePoint(day="1", month="FEB", year=1328).serialize() == "1 FEB 1328"
    assert DatePoint(month="JAN", year=1558).serialize() == "JAN 1558"
    assert DatePoint(year=1528).serialize() == "1528"


def test_day_text_is_kept_verbatim() -> None:
    """Zero-padded and unpadded days both survive serialization as written."""
    assert DatePoint(day="04", month="OCT", year=1582).serialize() == "04 OCT 1582"
    assert DatePoint(day="4", month="OCT", year=1957).serialize() == "4 OCT 1957"


def test_range_allows_coarser_end() -> None:
    """A range end may drop day and month even when the start has them."""
    r = DateRange(
        start=DatePoint(day="17", month="MAR", year=2020),
        end=DatePoint(year=2023),
    )
    assert r.serialize() == "FROM 17 MAR 2020 TO 2023"
    assert DateRange(start=DatePoint(year=1650), end=DatePoint(year=1652)).serialize() == (
        "FROM 1650 TO 1652"
    )


def test_approximate_point() -> None:
    assert DatePoint(year=1200, approximate=True).serialize() == "ABT 1200"


def test_invalid_points_rejected() -> None:
    """Day without month, unknown month and non-numeric day are construction errors."""
    with pytest.raises(ValidationError):
        DatePoint(day="1", year=1328)
    with pytest.raises(ValidationError):
        DatePoint(month="FEV", year=1328)  # type: ignore[arg-type]
    with pytest.raises(ValidationError):
        DatePoint(day="1er", month="FEB", year=1328)


@pytest.mark.parametrize(  # type: ignore[misc]
    "token",
    ["1 FEB 1328", "JAN 1558", "1528", "04 OCT 1582", "FROM 17 JUL 1936 TO 01 APR 1939",
     "FROM 17 MAR 2020 TO 2023", "ABT 1200"],
)
def test_parse_reads_back_serialized_tokens(token: str) -> None:
    """parse_date(token).serialize() reproduces the token exactly."""
    assert parse_date(token).unwrap().serialize() == token


def test_parse_distinguishes_points_and_ranges() -> None:
    assert isinstance(parse_date("FROM 1693 TO 1694").unwrap(), DateRange)
    assert isinstance(parse_date("1709").unwrap(), DatePoint)


def test_parse_ignores_surrounding_whitespace() -> None:
    assert parse_date("09 DEC 1848 ").unwrap() == DatePoint(day="09", month="DEC", year=1848)


@pytest.mark.parametrize(  # type: ignore[misc]
    "token", ["", "1er FEB 1328", "1 FEV 1328", "FROM 1650", "FROM 1650 TO", "mai 1968"]
)
def test_parse_rejects_malformed_tokens(token: str) -> None:
    assert parse_date(token).is_err()
