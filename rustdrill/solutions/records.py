"""Worked answers to the struct exercises."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


@dataclass(frozen=True)
class ColorClassicStruct:
    red: int
    green: int
    blue: int


class ColorTupleStruct(NamedTuple):
    red: int
    green: int
    blue: int


@dataclass(frozen=True)
class UnitLikeStruct:
    """A struct with no fields."""

    def __repr__(self) -> str:
        return "UnitLikeStruct"


@dataclass(frozen=True)
class Order:
    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )