"""Key normalization for the menu screens.

Shortcuts (j/k, a/d/o/p/s, y/n) are defined on US QWERTY positions. When a
non-Latin layout is active the terminal delivers Cyrillic, Hebrew or Arabic
runes instead, so every rune is mapped back to the Latin key printed on the
same physical key before the menu looks at it.
"""

from dataclasses import dataclass
from typing import Dict, Optional

# ── Canonical key names ───────────────────────────────────────────────

UP = "up"
DOWN = "down"
LEFT = "left"
RIGHT = "right"
ENTER = "enter"
ESCAPE = "escape"
TAB = "tab"
INTERRUPT = "interrupt"

NAMED_KEYS = frozenset({UP, DOWN, LEFT, RIGHT, ENTER, ESCAPE, TAB, INTERRUPT})

# Textual key names that differ from ours
_TEXTUAL_ALIASES = {
    "return": ENTER,
    "ctrl+c": INTERRUPT,
    "ctrl+m": ENTER,
    "ctrl+i": TAB,
}


@dataclass(frozen=True)
class Key:
    """A key press: either a named key or a single-character rune."""

    value: str

    @property
    def is_rune(self) -> bool:
        return len(self.value) == 1


# ── Layout table ──────────────────────────────────────────────────────

LAYOUT_MAP: Dict[str, str] = {
    # Russian ЙЦУКЕН, lowercase
    "й": "q", "ц": "w", "у": "e", "к": "r", "е": "t",
    "н": "y", "г": "u", "ш": "i", "щ": "o", "з": "p",
    "ф": "a", "ы": "s", "в": "d", "а": "f", "п": "g",
    "р": "h", "о": "j", "л": "k", "д": "l",
    "я": "z", "ч": "x", "с": "c", "м": "v", "и": "b",
    "т": "n", "ь": "m",
    # Russian ЙЦУКЕН, uppercase
    "Й": "Q", "Ц": "W", "У": "E", "К": "R", "Е": "T",
    "Н": "Y", "Г": "U", "Ш": "I", "Щ": "O", "З": "P",
    "Ф": "A", "Ы": "S", "В": "D", "А": "F", "П": "G",
    "Р": "H", "О": "J", "Л": "K", "Д": "L",
    "Я": "Z", "Ч": "X", "С": "C", "М": "V", "И": "B",
    "Т": "N", "Ь": "M",
    # Ukrainian keys that differ from Russian
    "і": "s", "І": "S",
    "є": "'", "Є": '"',
    "ї": "]", "Ї": "}",
    "ґ": "`", "Ґ": "~",
    # Hebrew (single case)
    "ק": "e", "ר": "r", "א": "t", "ט": "y", "ו": "u",
    "ן": "i", "ם": "o", "פ": "p",
    "ש": "a", "ד": "s", "ג": "d", "כ": "f", "ע": "g",
    "י": "h", "ח": "j", "ל": "k", "ך": "l",
    "ז": "z", "ס": "x", "ב": "c", "ה": "v", "נ": "b",
    "מ": "n", "צ": "m",
    # Arabic 101
    "ض": "q", "ص": "w", "ث": "e", "ق": "r", "ف": "t",
    "غ": "y", "ع": "u", "ه": "i", "خ": "o", "ح": "p",
    "ش": "a", "س": "s", "ي": "d", "ب": "f", "ل": "g",
    "ا": "h", "ت": "j", "ن": "k", "م": "l",
    "ئ": "z", "ء": "x", "ؤ": "c", "ر": "v",
    "ى": "n", "ة": "m",
}


def translate_rune(ch: str) -> str:
    """Return the QWERTY character on the key that produces *ch*."""
    return LAYOUT_MAP.get(ch, ch)


def translate(key: Key) -> Key:
    """Normalize *key*; named keys and unmapped runes are returned as-is."""
    if not key.is_rune:
        return key
    mapped = translate_rune(key.value)
    if mapped == key.value:
        return key
    return Key(mapped)


def key_from_textual(event) -> Optional[Key]:
    """Build a canonical :class:`Key` from a Textual ``events.Key``.

    Returns None for keys the menus never react to (function keys,
    modifier combinations other than ctrl+c).
    """
    name = _TEXTUAL_ALIASES.get(event.key, event.key)
    if name in NAMED_KEYS:
        return Key(name)
    ch = event.character
    if ch and len(ch) == 1 and ch.isprintable():
        return Key(ch)
    return None
