import pytest

from pyskk.errors import BareCloseParen, KeysymNotFound, ParseFailed, UnknownModifier
from pyskk.event import ChordEvent
from pyskk.keymap import (
    NORMAL_RULES,
    ChordResolver,
    DialectRules,
    format_chord,
    format_key_sequence,
    key_events,
    parse_key_sequence,
)
from pyskk.keysyms import NULL_KEY, default_table
from pyskk.modifiers import X11Modifier
from pyskk.tokenizer import RawToken, TokenKind

NONE = X11Modifier.NONE


def test_normal_chords_resolve_keys_and_modifiers() -> None:
    assert list(key_events("a i C-S-r")) == [
        ChordEvent("a", NONE),
        ChordEvent("i", NONE),
        ChordEvent("r", X11Modifier.SHIFT | X11Modifier.CONTROL),
    ]


def test_all_modifier_letters() -> None:
    (event,) = parse_key_sequence("S-C-M-A-G-Return")
    assert event.key == "\r"
    assert event.modifiers == (
        X11Modifier.SHIFT
        | X11Modifier.CONTROL
        | X11Modifier.META
        | X11Modifier.MOD1
        | X11Modifier.MOD5
    )


def test_repeated_modifier_letter_is_idempotent() -> None:
    assert parse_key_sequence("C-C-a") == parse_key_sequence("C-a")


def test_special_token_with_unresolved_key_falls_back_to_null() -> None:
    assert list(key_events("(shift)")) == [ChordEvent(NULL_KEY, NONE)]
    assert list(key_events("()")) == [ChordEvent(NULL_KEY, NONE)]


def test_special_token_modifier_words() -> None:
    assert list(key_events("(shift\\ control\\ alt\\ a)")) == [
        ChordEvent("a", X11Modifier.SHIFT | X11Modifier.CONTROL | X11Modifier.MOD1)
    ]


def test_special_token_rejects_unknown_modifier_word() -> None:
    assert list(key_events("(hyper\\ a)")) == [UnknownModifier("hyper")]


def test_unescaped_spaces_split_parenthesised_chords() -> None:
    assert list(key_events("(shift control a)")) == [
        ChordEvent(NULL_KEY, NONE),
        KeysymNotFound("control"),
        BareCloseParen(),
    ]


def test_per_token_errors_do_not_stop_the_pipeline() -> None:
    keysyms = default_table().with_entries({"foo": "あ"})
    assert list(key_events("foo bar-a b", keysyms)) == [
        ChordEvent("あ", NONE),
        UnknownModifier("bar"),
        ChordEvent("b", NONE),
    ]


def test_normal_token_with_unknown_key_is_an_error() -> None:
    results = list(key_events("foo a"))
    assert results == [KeysymNotFound("foo"), ChordEvent("a", NONE)]
    assert results[0].name == "foo"


def test_unknown_key_wins_over_unknown_modifier() -> None:
    assert list(key_events("Q-foo")) == [KeysymNotFound("foo")]


def test_bare_close_paren_ends_the_session() -> None:
    assert list(key_events("a)b")) == [BareCloseParen()]


def test_escaped_space_is_one_key_name_lookup() -> None:
    assert list(key_events("x\\ y")) == [KeysymNotFound("x y")]


def test_escaped_space_resolves_when_name_exists() -> None:
    keysyms = default_table().with_entries({"x y": "z"})
    assert list(key_events("C-x\\ y", keysyms)) == [ChordEvent("z", X11Modifier.CONTROL)]


def test_resolver_accepts_custom_rules() -> None:
    rules = DialectRules(
        kind=TokenKind.NORMAL,
        separator="+",
        modifiers={"ctrl": X11Modifier.CONTROL},
        strict_keys=False,
    )
    resolver = ChordResolver(normal=rules)
    assert resolver.resolve(RawToken(TokenKind.NORMAL, "ctrl+a")) == ChordEvent(
        "a", X11Modifier.CONTROL
    )
    assert resolver.resolve(RawToken(TokenKind.NORMAL, "ctrl+nothing")) == ChordEvent(
        NULL_KEY, X11Modifier.CONTROL
    )


def test_resolve_all_passes_tokenizer_errors_through() -> None:
    resolver = ChordResolver()
    tokens = [RawToken(TokenKind.NORMAL, "a"), BareCloseParen()]
    assert list(resolver.resolve_all(tokens)) == [ChordEvent("a", NONE), BareCloseParen()]


def test_parse_key_sequence_raises_first_error() -> None:
    with pytest.raises(UnknownModifier, match="unknown modifier: bar"):
        parse_key_sequence("a bar-b")
    with pytest.raises(ParseFailed, match="bare '\\)'"):
        parse_key_sequence("a)")


def test_parse_key_sequence_rejects_empty_input() -> None:
    with pytest.raises(ValueError, match="empty key sequence"):
        parse_key_sequence("   ")


def test_format_chord_uses_canonical_modifier_order() -> None:
    (event,) = parse_key_sequence("S-G-A-M-C-r")
    assert format_chord(event) == "C-M-A-G-S-r"


def test_format_key_sequence_round_trips() -> None:
    text = "a C-x M-space S-Return"
    assert format_key_sequence(parse_key_sequence(text)) == text


def test_format_chord_rejects_unrepresentable_events() -> None:
    with pytest.raises(ValueError, match="no keysym name"):
        format_chord(ChordEvent(NULL_KEY, NONE))
    with pytest.raises(ValueError, match="LOCK"):
        format_chord(ChordEvent("a", X11Modifier.LOCK | X11Modifier.SHIFT))


def test_format_chord_escapes_special_characters() -> None:
    keysyms = default_table().with_entries({"x y": "あ"})
    assert format_chord(ChordEvent("あ", X11Modifier.CONTROL), keysyms) == "C-x\\ y"


def test_normal_rules_table() -> None:
    assert set(NORMAL_RULES.modifiers) == {"S", "C", "M", "A", "G"}


def test_function_navigation_and_ime_keys_parse() -> None:
    assert list(key_events("F1 C-Left Home Henkan_Mode")) == [
        ChordEvent(NULL_KEY, NONE),
        ChordEvent(NULL_KEY, X11Modifier.CONTROL),
        ChordEvent(NULL_KEY, NONE),
        ChordEvent(NULL_KEY, NONE),
    ]
    assert list(key_events("eacute S-kana_A yen")) == [
        ChordEvent("é", NONE),
        ChordEvent("ア", X11Modifier.SHIFT),
        ChordEvent("¥", NONE),
    ]


def test_null_key_events_cannot_be_formatted() -> None:
    (event,) = parse_key_sequence("F1")
    with pytest.raises(ValueError, match="no keysym name"):
        format_chord(event)


def test_resolver_rejects_rules_sharing_a_token_kind() -> None:
    with pytest.raises(ValueError, match="normal"):
        ChordResolver(special=NORMAL_RULES)
