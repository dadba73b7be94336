"""Concrete modifier algebras: X11 bit flags and ordered token sets."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import IntFlag
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class X11Modifier(IntFlag):
    """X11 modifier mask bits, as used by the key notation dialects."""

    NONE = 0
    SHIFT = 1 << 0
    LOCK = 1 << 1
    CONTROL = 1 << 2
    MOD1 = 1 << 3
    MOD2 = 1 << 4
    MOD3 = 1 << 5
    MOD4 = 1 << 6
    MOD5 = 1 << 7
    META = 1 << 28

    @classmethod
    def from_iterable(cls, flags: Iterable[X11Modifier]) -> X11Modifier:
        mask = cls.NONE
        for flag in flags:
            mask |= flag
        return mask

    def is_empty(self) -> bool:
        return self.value == 0

    def flag_names(self) -> tuple[str, ...]:
        """Names of the set bits, lowest bit first."""
        return tuple(
            flag.name for flag in type(self) if flag.value and flag.value & self.value == flag.value
        )

    def describe(self) -> str:
        names = self.flag_names()
        return "|".join(names) if names else "NONE"


BitFlagModifiers = X11Modifier


def _canonical(items: Iterable[Any]) -> tuple[Any, ...]:
    ordered: list[Any] = []
    for item in sorted(items):
        if ordered and ordered[-1] == item:
            continue
        ordered.append(item)
    return tuple(ordered)


@dataclass(frozen=True, order=True)
class OrderedSetModifiers(Generic[T]):
    """Modifier set over an open vocabulary of comparable tokens.

    Items are kept sorted and deduplicated so that two sets built from the
    same tokens in any order compare equal.
    """

    items: tuple[T, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", _canonical(self.items))

    @classmethod
    def from_iterable(cls, tokens: Iterable[T]) -> OrderedSetModifiers[T]:
        return cls(tuple(tokens))

    def __or__(self, other: OrderedSetModifiers[T]) -> OrderedSetModifiers[T]:
        return type(self)(self.items + other.items)

    def __and__(self, other: OrderedSetModifiers[T]) -> OrderedSetModifiers[T]:
        return type(self)(tuple(item for item in self.items if item in other.items))

    def __xor__(self, other: OrderedSetModifiers[T]) -> OrderedSetModifiers[T]:
        only_self = [item for item in self.items if item not in other.items]
        only_other = [item for item in other.items if item not in self.items]
        return type(self)(tuple(only_self + only_other))

    def is_empty(self) -> bool:
        return not self.items

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __contains__(self, item: object) -> bool:
        return item in self.items
