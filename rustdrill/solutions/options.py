"""Worked answers to the optional-value exercises."""

from __future__ import annotations

from typing import TypeVar

T = TypeVar("T")

_LAST_HOUR = 23
_EATEN_AT = 22
_PIECES = 5


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at the hour, or None for an hour past 23."""
    if time_of_day < 0:
        raise ValueError("time of day cannot be negative")
    if time_of_day > _LAST_HOUR:
        return None
    return _PIECES if time_of_day < _EATEN_AT else 0


def drain_optionals(values: list[T | None]) -> list[T]:
    """Pop values from the end until a None or the end of the list is reached."""
    drained = []
    while values:
        item = values.pop()
        if item is None:
            break
        drained.append(item)
    return drained