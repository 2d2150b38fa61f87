"""Worked answers to the trait exercises."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch

LICENSING_INFO = "Some information"


@singledispatch
def append_bar(value):
    """Append "Bar" to a string, or a "Bar" element to a list of strings."""
    raise TypeError(f"cannot append bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Software carrying licensing information shared by all implementors."""

    def licensing_info(self) -> str:
        return LICENSING_INFO


@dataclass(frozen=True)
class SomeSoftware(Licensed):
    version_number: int = 0


@dataclass(frozen=True)
class OtherSoftware(Licensed):
    version_number: str = ""


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """True when both pieces of software carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()