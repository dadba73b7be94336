"""Text and rich renderings of parse results."""

from __future__ import annotations

from collections.abc import Iterable

from rich.table import Table
from rich.text import Text

from .errors import ParseFailed
from .event import ChordEvent
from .tokenizer import RawToken


def describe_key(key: object) -> str:
    text = str(key)
    if text == " ":
        return "SPC"
    if len(text) == 1 and not text.isprintable():
        return f"U+{ord(text):04X}"
    return text


def describe_result(item: object) -> str:
    """One-line summary of an event, a raw token or an error."""
    if isinstance(item, ParseFailed):
        return f"error: {item.message}"
    if isinstance(item, RawToken):
        return f"{item.kind.value} {item.text!r}"
    if isinstance(item, ChordEvent):
        modifiers = item.modifiers
        describe = getattr(modifiers, "describe", None)
        mods = describe() if callable(describe) else repr(modifiers)
        return f"ok {describe_key(item.key)} [{mods}]"
    return repr(item)


def results_table(notation: str, items: Iterable[object]) -> Table:
    table = Table(title=Text(notation), show_lines=False)
    table.add_column("#", justify="right")
    table.add_column("result")
    for index, item in enumerate(items, start=1):
        style = "red" if isinstance(item, ParseFailed) else ""
        table.add_row(str(index), Text(describe_result(item), style=style))
    return table
