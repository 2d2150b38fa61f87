"""Worked answers to the generics and smart-pointer exercises."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """A cons cell: a value and the rest of the list."""

    value: int
    rest: Union[Cons, Nil] = field(default_factory=Nil)


def create_empty_list() -> Nil:
    return Nil()


def create_non_empty_list() -> Cons:
    return Cons(1, Cons(2, Nil()))


@dataclass
class Cow:
    """Borrowed data that is copied the first time it must be changed."""

    data: Sequence[int]
    owned: bool = False

    @classmethod
    def borrowed(cls, data: Sequence[int]) -> Cow:
        return cls(data, owned=False)

    @classmethod
    def from_owned(cls, data: list[int]) -> Cow:
        return cls(data, owned=True)

    def to_mut(self) -> list[int]:
        """Return mutable data, copying it first if it is borrowed."""
        if not self.owned:
            self.data = list(self.data)
            self.owned = True
        return self.data  # type: ignore[return-value]

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, index: int) -> int:
        return self.data[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self.data)


def abs_all(cow: Cow) -> Cow:
    """Make every element non-negative, copying borrowed data only if needed."""
    for index, value in enumerate(list(cow)):
        if value < 0:
            cow.to_mut()[index] = -value
    return cow