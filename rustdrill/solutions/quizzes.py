"""Worked answers to the three quizzes."""

from __future__ import annotations

import enum
from dataclasses import dataclass


def calculate_price_of_apples(quantity: int) -> int:
    """Two per apple, or one per apple when buying more than 40."""
    return quantity if quantity > 40 else quantity * 2


class CommandKind(enum.Enum):
    UPPERCASE = "uppercase"
    TRIM = "trim"
    APPEND = "append"


@dataclass(frozen=True)
class Command:
    """A string transformation; APPEND carries a repeat count."""

    kind: CommandKind
    times: int = 0

    @classmethod
    def uppercase(cls) -> Command:
        return cls(CommandKind.UPPERCASE)

    @classmethod
    def trim(cls) -> Command:
        return cls(CommandKind.TRIM)

    @classmethod
    def append(cls, times: int) -> Command:
        return cls(CommandKind.APPEND, times)

    def apply(self, text: str) -> str:
        if self.kind is CommandKind.UPPERCASE:
            return text.upper()
        if self.kind is CommandKind.TRIM:
            return text.strip()
        return text + "bar" * self.times


def transformer(items) -> list[str]:
    """Apply each command to its string."""
    return [command.apply(text) for text, command in items]


@dataclass
class ReportCard:
    """A report card whose grade is numeric or alphabetical."""

    grade: float | str
    student_name: str
    student_age: int

    def render(self) -> str:
        return (f"{self.student_name} ({self.student_age}) - "
                f"achieved a grade of {self.grade}")

    __str__ = render