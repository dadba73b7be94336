"""Minimal interactive shell for trying key notation."""

from __future__ import annotations

from .keymap import format_key_sequence, key_events, parse_key_sequence
from .keysyms import default_table
from .report import describe_key, describe_result
from .tokenizer import ChordTokenizer


def _print_help() -> None:
    print("Commands:")
    print("  :parse <notation>        resolve notation into chords")
    print("  :tokens <notation>       show raw tokens only")
    print("  :lookup <name>           look up a keysym name")
    print("  :format <notation>       parse and print canonical notation")
    print("  :quit                    exit shell")


def _parse(payload: str) -> None:
    results = list(key_events(payload))
    if not results:
        print("(no chords)")
        return
    for item in results:
        print(describe_result(item))


def _tokens(payload: str) -> None:
    tokens = list(ChordTokenizer(payload))
    if not tokens:
        print("(no tokens)")
        return
    for token in tokens:
        print(describe_result(token))


def _lookup(payload: str) -> None:
    payload = payload.strip()
    codepoint = default_table().resolve(payload)
    if codepoint is None:
        print(f"unknown key: {payload}")
        return
    print(f"{payload} -> {describe_key(codepoint)} (U+{ord(codepoint):04X})")


def _format(payload: str) -> None:
    try:
        sequence = parse_key_sequence(payload)
        print(format_key_sequence(sequence))
    except ValueError as exc:
        print(f"error: {exc}")


_COMMANDS = {
    ":parse": _parse,
    ":tokens": _tokens,
    ":lookup": _lookup,
    ":format": _format,
}


def _handle_input(raw: str) -> bool:
    # Trailing whitespace may belong to an escaped space in the payload.
    command = raw.rstrip()
    if not command:
        return True
    if command in {":q", ":quit", ":exit"}:
        return False
    if command == ":help":
        _print_help()
        return True

    name, _, payload = raw.partition(" ")
    handler = _COMMANDS.get(name)
    if handler is None:
        print("unknown input. use :help")
        return True
    if not payload.strip():
        print(f"usage: {name} <{'name' if name == ':lookup' else 'notation'}>")
        return True

    handler(payload)
    return True


def main() -> None:
    print("pyskk key notation shell. Type: :help")
    while True:
        try:
            raw = input("keys> ").lstrip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not _handle_input(raw):
            break


if __name__ == "__main__":
    main()
