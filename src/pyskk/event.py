"""Chord events and the contracts their parts must satisfy."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Any, Generic, Protocol, TypeVar

_M = TypeVar("_M", bound="Modifiers")


class Key(Protocol):
    """Identity of a single key. Needs equality, hashing and a useful repr."""

    def __eq__(self, other: object) -> bool: ...

    def __hash__(self) -> int: ...


class Modifiers(Protocol):
    """Set-like modifier algebra.

    Implementations must behave like a finite set: ``|`` and ``&`` are
    commutative and associative, ``x ^ x`` is empty, ``x | empty == x``
    and ``a ^ b == (a | b) - (a & b)``.
    """

    def __or__(self: _M, other: _M) -> _M: ...

    def __and__(self: _M, other: _M) -> _M: ...

    def __xor__(self: _M, other: _M) -> _M: ...

    def is_empty(self) -> bool: ...


K = TypeVar("K", bound=Key)
M = TypeVar("M", bound=Modifiers)


@dataclass(frozen=True, order=True)
class ChordEvent(Generic[K, M]):
    """One key pressed together with a set of modifiers."""

    key: K
    modifiers: M

    @classmethod
    def from_tokens(cls, key: K, tokens: Iterable[Any], modifiers_type: Any) -> ChordEvent[K, M]:
        """Build an event, collecting TOKENS with MODIFIERS_TYPE.from_iterable."""
        return cls(key, modifiers_type.from_iterable(tokens))

    def contains(self, other: ChordEvent[K, M]) -> M | None:
        """Return the modifier delta to OTHER, or None when the keys differ.

        An empty delta means the same chord; anything else names the
        modifiers held by exactly one of the two events.
        """
        if self.key != other.key:
            return None
        return self.modifiers ^ other.modifiers

    def extend_modifiers(self, extra: M) -> ChordEvent[K, M]:
        return replace(self, modifiers=self.modifiers | extra)

    def __str__(self) -> str:
        return str(self.key)
