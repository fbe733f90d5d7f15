"""Typed Result container for explicit success/failure returns.

Motivation
----------
Reading blocks and date tokens back from text is a fallible, data-driven
operation: a malformed line is an expected outcome, not a programming error.
The grammar reader and the dataset checker therefore return a `Result[T, E]`
instead of raising:

- `Ok(value)` / `Err(error)` variants,
- combinators: `map`, `flat_map`, `map_err`,
- unwraps: `unwrap`, `unwrap_err`, `get_or`.

Example
-------
>>> from histocat.core.result import ok, err, Result
>>> def parse_year(x: str) -> Result[int, str]:
...     return ok(int(x)) if x.isdigit() else err(f"not a year: {x!r}")
>>> parse_year("1328").map(lambda y: y + 1).unwrap()
1329
>>> parse_year("MMXX").get_or(0)
0
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, cast

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


class Result(Generic[T, E]):
    """Sum type representing either success (`Ok[T]`) or failure (`Err[E]`)."""

    def is_ok(self) -> bool:
        """Return ``True`` if this is an :class:`Ok` value."""
        return isinstance(self, Ok)

    def is_err(self) -> bool:
        """Return ``True`` if this is an :class:`Err` value."""
        return isinstance(self, Err)

    def unwrap(self) -> T:
        """Return the inner value if ``Ok``, else raise ``ValueError``.

        The error payload is included in the exception message so a failed
        unwrap in a test or a CLI shows which line or token was rejected.
        """
        if isinstance(self, Ok):
            return cast(Ok[T, E], self).value
        raise ValueError(f"unwrap on Err: {cast(Err[T, E], self).error!r}")

    def unwrap_err(self) -> E:
        """Return the error value if ``Err``, else raise ``ValueError``."""
        if isinstance(self, Err):
            return cast(Err[T, E], self).error
        raise ValueError(f"unwrap_err on Ok: {cast(Ok[T, E], self).value!r}")

    def get_or(self, default: T) -> T:
        """Return the success value, or ``default`` when this is ``Err``."""
        if isinstance(self, Ok):
            return cast(Ok[T, E], self).value
        return default

    def map(self, fn: Callable[[T], U]) -> Result[U, E]:
        """Apply ``fn`` to the success value; propagate the error unchanged."""
        if isinstance(self, Ok):
            return Ok(fn(cast(Ok[T, E], self).value))
        return cast(Result[U, E], self)

    def flat_map(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain a computation that itself returns a :class:`Result`."""
        if isinstance(self, Ok):
            return fn(cast(Ok[T, E], self).value)
        return cast(Result[U, E], self)

    def map_err(self, fn: Callable[[E], F]) -> Result[T, F]:
        """Apply ``fn`` to the error value; propagate success unchanged."""
        if isinstance(self, Err):
            return Err(fn(cast(Err[T, E], self).error))
        return cast(Result[T, F], self)


@dataclass(frozen=True)
class Ok(Result[T, E]):
    """Successful result wrapping a value of type ``T``."""

    value: T


@dataclass(frozen=True)
class Err(Result[T, E]):
    """Failed result wrapping an error payload of type ``E``."""

    error: E


def ok(value: T) -> Result[T, E]:
    """Construct :class:`Ok` with better type inference at call sites."""
    return Ok(value)


def err(error: E) -> Result[T, E]:
    """Construct :class:`Err` with better type inference at call sites."""
    return Err(error)


__all__ = ["Result", "Ok", "Err", "ok", "err"]
