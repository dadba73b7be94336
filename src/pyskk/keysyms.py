"""X11 keysym names and the lookup table the resolver reads them from."""

from __future__ import annotations

import string
from collections.abc import Iterator, Mapping
from functools import lru_cache
from types import MappingProxyType
from typing import Protocol

# Codepoints are one-character strings.
Codepoint = str

NULL_KEY: Codepoint = "\0"

_PUNCTUATION: dict[str, Codepoint] = {
    "space": " ",
    "exclam": "!",
    "quotedbl": '"',
    "numbersign": "#",
    "dollar": "$",
    "percent": "%",
    "ampersand": "&",
    "apostrophe": "'",
    "parenleft": "(",
    "parenright": ")",
    "asterisk": "*",
    "plus": "+",
    "comma": ",",
    "minus": "-",
    "period": ".",
    "slash": "/",
    "colon": ":",
    "semicolon": ";",
    "less": "<",
    "equal": "=",
    "greater": ">",
    "question": "?",
    "at": "@",
    "bracketleft": "[",
    "backslash": "\\",
    "bracketright": "]",
    "asciicircum": "^",
    "underscore": "_",
    "grave": "`",
    "braceleft": "{",
    "bar": "|",
    "braceright": "}",
    "asciitilde": "~",
}

_CONTROL: dict[str, Codepoint] = {
    "BackSpace": "\b",
    "Tab": "\t",
    "Linefeed": "\n",
    "Return": "\r",
    "Escape": "\x1b",
    "Delete": "\x7f",
    "KP_Space": " ",
    "KP_Tab": "\t",
    "KP_Enter": "\r",
    "KP_Equal": "=",
    "KP_Multiply": "*",
    "KP_Add": "+",
    "KP_Separator": ",",
    "KP_Subtract": "-",
    "KP_Decimal": ".",
    "KP_Divide": "/",
}

# U+00A0 through U+00FF, in codepoint order.
_LATIN1_NAMES = """
    nobreakspace exclamdown cent sterling currency yen brokenbar section
    diaeresis copyright ordfeminine guillemotleft notsign hyphen registered macron
    degree plusminus twosuperior threesuperior acute mu paragraph periodcentered
    cedilla onesuperior masculine guillemotright onequarter onehalf threequarters questiondown
    Agrave Aacute Acircumflex Atilde Adiaeresis Aring AE Ccedilla
    Egrave Eacute Ecircumflex Ediaeresis Igrave Iacute Icircumflex Idiaeresis
    ETH Ntilde Ograve Oacute Ocircumflex Otilde Odiaeresis multiply
    Oslash Ugrave Uacute Ucircumflex Udiaeresis Yacute THORN ssharp
    agrave aacute acircumflex atilde adiaeresis aring ae ccedilla
    egrave eacute ecircumflex ediaeresis igrave iacute icircumflex idiaeresis
    eth ntilde ograve oacute ocircumflex otilde odiaeresis division
    oslash ugrave uacute ucircumflex udiaeresis yacute thorn ydiaeresis
""".split()

_KANA: dict[str, Codepoint] = {
    "overline": "‾",
    "kana_fullstop": "。",
    "kana_openingbracket": "「",
    "kana_closingbracket": "」",
    "kana_comma": "、",
    "kana_conjunctive": "・",
    "kana_WO": "ヲ",
    "kana_a": "ァ",
    "kana_i": "ィ",
    "kana_u": "ゥ",
    "kana_e": "ェ",
    "kana_o": "ォ",
    "kana_ya": "ャ",
    "kana_yu": "ュ",
    "kana_yo": "ョ",
    "kana_tsu": "ッ",
    "prolongedsound": "ー",
    "kana_A": "ア",
    "kana_I": "イ",
    "kana_U": "ウ",
    "kana_E": "エ",
    "kana_O": "オ",
    "kana_KA": "カ",
    "kana_KI": "キ",
    "kana_KU": "ク",
    "kana_KE": "ケ",
    "kana_KO": "コ",
    "kana_SA": "サ",
    "kana_SHI": "シ",
    "kana_SU": "ス",
    "kana_SE": "セ",
    "kana_SO": "ソ",
    "kana_TA": "タ",
    "kana_CHI": "チ",
    "kana_TSU": "ツ",
    "kana_TE": "テ",
    "kana_TO": "ト",
    "kana_NA": "ナ",
    "kana_NI": "ニ",
    "kana_NU": "ヌ",
    "kana_NE": "ネ",
    "kana_NO": "ノ",
    "kana_HA": "ハ",
    "kana_HI": "ヒ",
    "kana_FU": "フ",
    "kana_HE": "ヘ",
    "kana_HO": "ホ",
    "kana_MA": "マ",
    "kana_MI": "ミ",
    "kana_MU": "ム",
    "kana_ME": "メ",
    "kana_MO": "モ",
    "kana_YA": "ヤ",
    "kana_YU": "ユ",
    "kana_YO": "ヨ",
    "kana_RA": "ラ",
    "kana_RI": "リ",
    "kana_RU": "ル",
    "kana_RE": "レ",
    "kana_RO": "ロ",
    "kana_WA": "ワ",
    "kana_N": "ン",
    "voicedsound": "゛",
    "semivoicedsound": "゜",
    # deprecated spellings
    "kana_middledot": "・",
    "kana_tu": "ッ",
    "kana_TI": "チ",
    "kana_TU": "ツ",
    "kana_HU": "フ",
}

# Keysyms that exist but carry no character; they resolve to the null key.
_NO_CHARACTER = """
    Left Up Right Down Home End Begin Prior Page_Up Next Page_Down
    Select Print Execute Insert Undo Redo Menu Find Cancel Help Break
    Pause Scroll_Lock Sys_Req Num_Lock Caps_Lock Shift_Lock
    Shift_L Shift_R Control_L Control_R Meta_L Meta_R Alt_L Alt_R
    Super_L Super_R Hyper_L Hyper_R Mode_switch script_switch
    KP_Home KP_Left KP_Up KP_Right KP_Down KP_Prior KP_Page_Up KP_Next
    KP_Page_Down KP_End KP_Begin KP_Insert KP_Delete KP_F1 KP_F2 KP_F3 KP_F4
    Multi_key Codeinput SingleCandidate MultipleCandidate PreviousCandidate
    Kanji Muhenkan Henkan_Mode Henkan Romaji Hiragana Katakana Hiragana_Katakana
    Zenkaku Hankaku Zenkaku_Hankaku Touroku Massyo Kana_Lock Kana_Shift
    Eisu_Shift Eisu_toggle Kanji_Bangou Zen_Koho Mae_Koho
""".split() + [f"F{number}" for number in range(1, 36)]


def _builtin_keysyms() -> dict[str, Codepoint]:
    table: dict[str, Codepoint] = {}
    table.update(_PUNCTUATION)
    for char in string.digits + string.ascii_letters:
        table[char] = char
    table.update(_CONTROL)
    for digit in string.digits:
        table[f"KP_{digit}"] = digit
    for offset, name in enumerate(_LATIN1_NAMES):
        table[name] = chr(0xA0 + offset)
    table.update(_KANA)
    for name in _NO_CHARACTER:
        table[name] = NULL_KEY
    return table


KEYSYMS: Mapping[str, Codepoint] = MappingProxyType(_builtin_keysyms())


class KeysymResolver(Protocol):
    """Read-only keysym name lookup."""

    def resolve(self, name: str) -> Codepoint | None: ...


class KeysymTable(Mapping[str, Codepoint]):
    """Immutable keysym name to codepoint table.

    Safe to share between parsers; nothing mutates it after construction.
    """

    def __init__(self, entries: Mapping[str, Codepoint]) -> None:
        for name, codepoint in entries.items():
            if len(codepoint) != 1:
                raise ValueError(f"keysym {name} must map to a single character")
        self._entries = MappingProxyType(dict(entries))
        reverse: dict[Codepoint, str] = {}
        for name, codepoint in self._entries.items():
            if codepoint == NULL_KEY:
                continue
            reverse.setdefault(codepoint, name)
        self._names = MappingProxyType(reverse)

    def resolve(self, name: str) -> Codepoint | None:
        return self._entries.get(name)

    def name_of(self, codepoint: Codepoint) -> str | None:
        """Return the first registered name for CODEPOINT.

        The null key has no name, even though many keysyms resolve to it.
        """
        return self._names.get(codepoint)

    def with_entries(self, entries: Mapping[str, Codepoint]) -> KeysymTable:
        merged = dict(self._entries)
        merged.update(entries)
        return KeysymTable(merged)

    def __getitem__(self, name: str) -> Codepoint:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"KeysymTable({len(self)} entries)"


@lru_cache(maxsize=1)
def default_table() -> KeysymTable:
    return KeysymTable(KEYSYMS)
