"""Worked answers to the vector exercises."""

from __future__ import annotations

from collections.abc import Iterable


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed array and a list holding the same elements."""
    a = (10, 20, 30, 40)
    return a, list(a)


def vec_loop(values: list[int]) -> list[int]:
    """Double every element in place and return the list."""
    for index, element in enumerate(values):
        values[index] = element * 2
    return values


def vec_map(values: Iterable[int]) -> list[int]:
    """A new list with every element doubled."""
    return [element * 2 for element in values]