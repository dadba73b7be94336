"""Character level tokenizer for key notation strings.

The notation is a space separated list of chords. A chord is either
dash-joined (``C-S-r``) or parenthesised (``(shift\\ a)``), and any
character may be escaped with a backslash.

The machine is a plain state value advanced one character at a time by
:func:`step`. :class:`ChordTokenizer` drives it over a string and yields
raw tokens lazily.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, replace
from enum import Enum

from .errors import BareCloseParen, BareOpenParen, ParseFailed

logger = logging.getLogger(__name__)

ESCAPE = "\\"
SEPARATOR = " "
OPEN_PAREN = "("
CLOSE_PAREN = ")"


class TokenKind(Enum):
    NORMAL = "normal"
    SPECIAL = "special"


@dataclass(frozen=True)
class RawToken:
    """Text of one chord, before any key or modifier lookup."""

    kind: TokenKind
    text: str


@dataclass(frozen=True)
class TokenizerState:
    kind: TokenKind = TokenKind.NORMAL
    text: str = ""
    escape: bool = False
    started: bool = False

    def token(self) -> RawToken:
        return RawToken(self.kind, self.text)

    def append(self, char: str) -> TokenizerState:
        return replace(self, text=self.text + char, escape=False, started=True)


INITIAL_STATE = TokenizerState()

Emitted = RawToken | ParseFailed | None


def step(state: TokenizerState, char: str) -> tuple[TokenizerState, Emitted]:
    """Advance STATE by one character.

    Returns the next state and whatever the character completed: a token,
    a nesting error, or None. After an error the returned state must not
    be stepped again.
    """
    if state.escape:
        return state.append(char), None

    if char == ESCAPE:
        return replace(state, escape=True), None

    if char == SEPARATOR:
        if state.started:
            return INITIAL_STATE, state.token()
        return INITIAL_STATE, None

    if char == OPEN_PAREN:
        if state.kind is TokenKind.SPECIAL:
            return state, BareOpenParen()
        return TokenizerState(kind=TokenKind.SPECIAL, started=True), None

    if char == CLOSE_PAREN:
        if state.kind is TokenKind.NORMAL:
            return state, BareCloseParen()
        # Inside a special token a closing paren changes nothing.
        return state, None

    return state.append(char), None


def finish(state: TokenizerState) -> RawToken | None:
    """Return the token still in progress at end of input, if any."""
    if state.started:
        return state.token()
    return None


class ChordTokenizer(Iterator[RawToken | ParseFailed]):
    """One-shot, lazy iterator of raw tokens over TEXT.

    Yields a :class:`ParseFailed` instead of raising when the nesting is
    malformed, and stops right after it.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.position = 0
        self._state = INITIAL_STATE
        self._done = False

    def __iter__(self) -> ChordTokenizer:
        return self

    def __next__(self) -> RawToken | ParseFailed:
        if self._done:
            raise StopIteration

        while self.position < len(self.text):
            char = self.text[self.position]
            self.position += 1
            self._state, emitted = step(self._state, char)
            if isinstance(emitted, ParseFailed):
                logger.debug("tokenizer halted at %d in %r: %s", self.position, self.text, emitted)
                self._done = True
                return emitted
            if emitted is not None:
                return emitted

        self._done = True
        token = finish(self._state)
        if token is None:
            raise StopIteration
        return token

    def __repr__(self) -> str:
        return f"ChordTokenizer({self.text!r}, position={self.position})"


def tokenize(text: str) -> list[RawToken | ParseFailed]:
    return list(ChordTokenizer(text))
