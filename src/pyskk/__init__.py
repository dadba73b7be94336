"""pyskk key notation package."""

__all__ = [
    "BareCloseParen",
    "BareOpenParen",
    "BitFlagModifiers",
    "ChordEvent",
    "ChordResolver",
    "ChordTokenizer",
    "KeysymNotFound",
    "KeysymTable",
    "OrderedSetModifiers",
    "ParseFailed",
    "RawToken",
    "TokenKind",
    "UnknownModifier",
    "X11Modifier",
    "format_key_sequence",
    "key_events",
    "parse_key_sequence",
]
__version__ = "0.1.0"

from .errors import BareCloseParen, BareOpenParen, KeysymNotFound, ParseFailed, UnknownModifier
from .event import ChordEvent
from .keymap import ChordResolver, format_key_sequence, key_events, parse_key_sequence
from .keysyms import KeysymTable
from .modifiers import BitFlagModifiers, OrderedSetModifiers, X11Modifier
from .tokenizer import ChordTokenizer, RawToken, TokenKind
