"""Worked answer to the fallible colour conversion exercise."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass

_CHANNEL_RANGE = range(0, 256)


@dataclass(frozen=True)
class Color:
    """An RGB colour with channels in 0..=255."""

    red: int
    green: int
    blue: int


class IntoColorErrorKind(enum.Enum):
    BAD_LEN = "incorrect number of channels"
    INT_CONVERSION = "channel value out of range"


class IntoColorError(ValueError):
    """Values could not be converted into a Color."""

    def __init__(self, kind: IntoColorErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


def color_from_triple(red: int, green: int, blue: int) -> Color:
    """Build a Color; raise IntoColorError if a channel is out of range."""
    if any(channel not in _CHANNEL_RANGE for channel in (red, green, blue)):
        raise IntoColorError(IntoColorErrorKind.INT_CONVERSION)
    return Color(red, green, blue)


def color_from_sequence(values: Sequence[int]) -> Color:
    """Build a Color from exactly three values; raise IntoColorError otherwise."""
    if len(values) != 3:
        raise IntoColorError(IntoColorErrorKind.BAD_LEN)
    red, green, blue = values
    return color_from_triple(red, green, blue)