"""Errors produced while reading key notation."""

from __future__ import annotations


class ParseFailed(ValueError):
    """A key notation token could not be turned into a chord."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))

    def __reduce__(self) -> tuple[object, tuple[object, ...]]:
        return type(self), (self.message,)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class KeysymNotFound(ParseFailed):
    def __init__(self, name: str) -> None:
        super().__init__(f"unknown key: {name}")
        self.name = name

    def __reduce__(self) -> tuple[object, tuple[object, ...]]:
        return type(self), (self.name,)


class UnknownModifier(ParseFailed):
    def __init__(self, modifier: str) -> None:
        super().__init__(f"unknown modifier: {modifier}")
        self.modifier = modifier

    def __reduce__(self) -> tuple[object, tuple[object, ...]]:
        return type(self), (self.modifier,)


class BareOpenParen(ParseFailed):
    def __init__(self) -> None:
        super().__init__("bare '(' is not allowed in complex keyseq")

    def __reduce__(self) -> tuple[object, tuple[object, ...]]:
        return type(self), ()


class BareCloseParen(ParseFailed):
    def __init__(self) -> None:
        super().__init__("bare ')' is not allowed in complex keyseq")

    def __reduce__(self) -> tuple[object, tuple[object, ...]]:
        return type(self), ()
