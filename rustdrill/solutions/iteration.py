"""Worked answers to the iterator exercises."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable, Mapping, Sequence

_NUMBERS = (27, 297, 38502, 81)


def capitalize_first(text: str) -> str:
    """Upper-case the first character, leaving the rest unchanged."""
    return text[:1].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalize each word."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalize each word and join them without separators."""
    return "".join(capitalize_first(word) for word in words)


class DivisionError(ArithmeticError):
    """A division could not give an exact integer result."""


class NotDivisibleError(DivisionError):
    """The dividend is not evenly divisible by the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor


class DivideByZeroError(DivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("divide by zero")


def divide(a: int, b: int) -> int:
    """Exact integer quotient of a by b; raise a DivisionError otherwise."""
    if b == 0:
        raise DivideByZeroError()
    if a % b:
        raise NotDivisibleError(a, b)
    return a // b


def result_with_list() -> list[int]:
    """Quotients of the sample numbers by 27; the first error is raised."""
    return [divide(n, 27) for n in _NUMBERS]


def _divide_or_error(a: int, b: int) -> int | DivisionError:
    try:
        return divide(a, b)
    except DivisionError as exc:
        return exc


def list_of_results() -> list[int | DivisionError]:
    """Quotients of the sample numbers by 27, with errors kept in place."""
    return [_divide_or_error(n, 27) for n in _NUMBERS]


def factorial(num: int) -> int:
    """Factorial of a non-negative integer."""
    return math.prod(range(1, num + 1))


class Progress(enum.Enum):
    NONE = "none"
    SOME = "some"
    COMPLETE = "complete"


def count_for(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress using an explicit loop."""
    count = 0
    for progress in progress_map.values():
        if progress is value:
            count += 1
    return count


def count_iterator(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress."""
    return sum(progress is value for progress in progress_map.values())


def count_collection_for(
    collection: Sequence[Mapping[str, Progress]], value: Progress
) -> int:
    """Count matching entries across maps using explicit loops."""
    count = 0
    for progress_map in collection:
        for progress in progress_map.values():
            if progress is value:
                count += 1
    return count


def count_collection_iterator(
    collection: Sequence[Mapping[str, Progress]], value: Progress
) -> int:
    """Count matching entries across maps."""
    return sum(count_iterator(progress_map, value) for progress_map in collection)