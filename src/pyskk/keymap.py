"""Key sequence parsing helpers: chord resolution and formatting."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass

from .errors import KeysymNotFound, ParseFailed, UnknownModifier
from .event import ChordEvent
from .keysyms import NULL_KEY, Codepoint, KeysymResolver, KeysymTable, default_table
from .modifiers import X11Modifier
from .tokenizer import ChordTokenizer, RawToken, TokenKind

logger = logging.getLogger(__name__)

KeyEvent = ChordEvent[Codepoint, X11Modifier]
KeyEventResult = KeyEvent | ParseFailed
KeySequence = tuple[KeyEvent, ...]

# Letter order used when writing chords back out.
MODIFIER_ORDER = ("C", "M", "A", "G", "S")


@dataclass(frozen=True)
class DialectRules:
    """How one token kind is split and looked up."""

    kind: TokenKind
    separator: str | None
    modifiers: Mapping[str, X11Modifier]
    strict_keys: bool

    def split(self, text: str) -> tuple[list[str], str]:
        """Split TEXT into modifier names and the key name."""
        parts = text.split(self.separator)
        if not parts:
            return [], ""
        return parts[:-1], parts[-1]


NORMAL_RULES = DialectRules(
    kind=TokenKind.NORMAL,
    separator="-",
    modifiers={
        "S": X11Modifier.SHIFT,
        "C": X11Modifier.CONTROL,
        "M": X11Modifier.META,
        "A": X11Modifier.MOD1,
        "G": X11Modifier.MOD5,
    },
    strict_keys=True,
)

SPECIAL_RULES = DialectRules(
    kind=TokenKind.SPECIAL,
    separator=None,
    modifiers={
        "shift": X11Modifier.SHIFT,
        "control": X11Modifier.CONTROL,
        "alt": X11Modifier.MOD1,
    },
    strict_keys=False,
)


class ChordResolver:
    """Turn raw tokens into chord events using a keysym table."""

    def __init__(
        self,
        keysyms: KeysymResolver | None = None,
        *,
        normal: DialectRules = NORMAL_RULES,
        special: DialectRules = SPECIAL_RULES,
    ) -> None:
        if normal.kind is special.kind:
            raise ValueError(f"both dialects use token kind: {normal.kind.value}")
        self.keysyms = keysyms if keysyms is not None else default_table()
        self._rules = {normal.kind: normal, special.kind: special}

    def resolve(self, token: RawToken) -> KeyEventResult:
        rules = self._rules[token.kind]
        modifier_names, key_name = rules.split(token.text)

        key = self.keysyms.resolve(key_name)
        if key is None:
            if rules.strict_keys:
                return KeysymNotFound(key_name)
            logger.debug("keysym %r not found; using null key", key_name)
            key = NULL_KEY

        mask = X11Modifier.NONE
        for name in modifier_names:
            flag = rules.modifiers.get(name)
            if flag is None:
                return UnknownModifier(name)
            mask |= flag
        return ChordEvent(key, mask)

    def resolve_all(
        self, tokens: Iterable[RawToken | ParseFailed]
    ) -> Iterator[KeyEventResult]:
        """Resolve TOKENS lazily, passing tokenizer errors through."""
        for token in tokens:
            if isinstance(token, ParseFailed):
                yield token
                continue
            yield self.resolve(token)


def key_events(text: str, keysyms: KeysymResolver | None = None) -> Iterator[KeyEventResult]:
    """Lazily parse TEXT into events and per-token errors, in input order."""
    return ChordResolver(keysyms).resolve_all(ChordTokenizer(text))


def parse_key_sequence(text: str, keysyms: KeysymResolver | None = None) -> KeySequence:
    """Parse TEXT into events, raising the first error found."""
    if not text.strip():
        raise ValueError("empty key sequence")

    events: list[KeyEvent] = []
    for item in key_events(text, keysyms):
        if isinstance(item, ParseFailed):
            raise item
        events.append(item)
    return tuple(events)


def format_chord(event: KeyEvent, keysyms: KeysymTable | None = None) -> str:
    """Render EVENT in dash notation, e.g. ``C-S-r``."""
    table = keysyms if keysyms is not None else default_table()
    name = table.name_of(event.key)
    if name is None:
        raise ValueError(f"no keysym name for key: {event.key!r}")

    leftover = int(event.modifiers)
    parts: list[str] = []
    for letter in MODIFIER_ORDER:
        bit = int(NORMAL_RULES.modifiers[letter])
        if leftover & bit:
            parts.append(letter)
            leftover &= ~bit
    if leftover:
        raise ValueError(f"modifiers have no notation: {X11Modifier(leftover).describe()}")

    return "-".join([*parts, _escape(name)])


def format_key_sequence(sequence: Sequence[KeyEvent], keysyms: KeysymTable | None = None) -> str:
    """Render a key sequence for messages."""
    return " ".join(format_chord(event, keysyms) for event in sequence)


def _escape(name: str) -> str:
    return "".join(f"\\{char}" if char in " ()\\" else char for char in name)
