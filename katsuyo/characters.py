"""
Hiragana syllable classification for Katsuyo.

Provides the vowel (Umlaut) and consonant row (Row) taxonomy, the static
hiragana table, and dakuten (voicing) lookups used by the conjugation engine.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple


class Umlaut(Enum):
    """Final vowel sound of a kana syllable."""
    A = "a"
    E = "e"
    I = "i"
    O = "o"
    U = "u"

    @classmethod
    def from_char(cls, char: str) -> "Umlaut":
        """Build an Umlaut from a romaji vowel letter ('a', 'e', 'i', 'o', 'u')."""
        try:
            return cls(char)
        except ValueError:
            raise ValueError(f"Not an umlaut: {char!r}") from None


class Row(Enum):
    """Consonant row of the hiragana table."""
    UMLAUTS = "vowel"  # あ,い,う,え,お
    N_SPECIAL = "ん"   # not used by the conjugation tables
    K = "k"
    G = "g"
    S = "s"
    Z = "z"
    T = "t"
    D = "d"
    N = "n"
    H = "h"
    B = "b"
    P = "p"
    M = "m"
    R = "r"
    Y = "y"
    W = "w"


# ============================================================================
# Hiragana Table
# ============================================================================

# Row -> ((character, vowel), ...)
HIRAGANA_SYLLABLES: Tuple[Tuple[Row, Tuple[Tuple[str, Umlaut], ...]], ...] = (
    (Row.UMLAUTS, (("あ", Umlaut.A), ("え", Umlaut.E), ("い", Umlaut.I), ("お", Umlaut.O), ("う", Umlaut.U))),
    (Row.K, (("か", Umlaut.A), ("け", Umlaut.E), ("き", Umlaut.I), ("こ", Umlaut.O), ("く", Umlaut.U))),
    (Row.G, (("が", Umlaut.A), ("げ", Umlaut.E), ("ぎ", Umlaut.I), ("ご", Umlaut.O), ("ぐ", Umlaut.U))),
    (Row.S, (("さ", Umlaut.A), ("せ", Umlaut.E), ("し", Umlaut.I), ("そ", Umlaut.O), ("す", Umlaut.U))),
    (Row.Z, (("ざ", Umlaut.A), ("ぜ", Umlaut.E), ("じ", Umlaut.I), ("ぞ", Umlaut.O), ("ず", Umlaut.U))),
    (Row.T, (("た", Umlaut.A), ("て", Umlaut.E), ("ち", Umlaut.I), ("と", Umlaut.O), ("つ", Umlaut.U))),
    (Row.D, (("だ", Umlaut.A), ("で", Umlaut.E), ("ぢ", Umlaut.I), ("ど", Umlaut.O), ("づ", Umlaut.U))),
    (Row.N, (("な", Umlaut.A), ("ね", Umlaut.E), ("に", Umlaut.I), ("の", Umlaut.O), ("ぬ", Umlaut.U))),
    (Row.H, (("は", Umlaut.A), ("へ", Umlaut.E), ("ひ", Umlaut.I), ("ほ", Umlaut.O), ("ふ", Umlaut.U))),
    (Row.B, (("ば", Umlaut.A), ("べ", Umlaut.E), ("び", Umlaut.I), ("ぼ", Umlaut.O), ("ぶ", Umlaut.U))),
    (Row.P, (("ぱ", Umlaut.A), ("ぺ", Umlaut.E), ("ぴ", Umlaut.I), ("ぽ", Umlaut.O), ("ぷ", Umlaut.U))),
    (Row.M, (("ま", Umlaut.A), ("め", Umlaut.E), ("み", Umlaut.I), ("も", Umlaut.O), ("む", Umlaut.U))),
    (Row.R, (("ら", Umlaut.A), ("れ", Umlaut.E), ("り", Umlaut.I), ("ろ", Umlaut.O), ("る", Umlaut.U))),
    (Row.Y, (("や", Umlaut.A), ("よ", Umlaut.O), ("ゆ", Umlaut.U))),
    # ゐ and ゑ are archaic and left out
    (Row.W, (("わ", Umlaut.A), ("を", Umlaut.O))),
)


@dataclass(frozen=True)
class SyllableInfo:
    """Consonant row and vowel of a classified syllable."""
    row: Row
    umlaut: Umlaut


# Build character -> info mapping
SYLLABLE_INFO: Dict[str, SyllableInfo] = {}
for _row, _letters in HIRAGANA_SYLLABLES:
    for _char, _umlaut in _letters:
        SYLLABLE_INFO.setdefault(_char, SyllableInfo(_row, _umlaut))


# ============================================================================
# Dakuten (Voicing) Table
# ============================================================================

# Unvoiced -> voiced, whole k/s/t/h rows; conjugation only voices て and た
DAKUTEN_MAP: Dict[str, str] = {
    "か": "が", "き": "ぎ", "く": "ぐ", "け": "げ", "こ": "ご",
    "さ": "ざ", "し": "じ", "す": "ず", "せ": "ぜ", "そ": "ぞ",
    "た": "だ", "ち": "ぢ", "つ": "づ", "て": "で", "と": "ど",
    "は": "ば", "ひ": "び", "ふ": "ぶ", "へ": "べ", "ほ": "ぼ",
}


def voice_char(char: str) -> str:
    """Returns the voiced form of a character, or the same character."""
    return DAKUTEN_MAP.get(char, char)


# ============================================================================
# Syllable
# ============================================================================

@dataclass(frozen=True)
class Syllable:
    """
    A single kana character.

    Classification goes through the static hiragana table; characters that
    are not in it (katakana, kanji, small kana, an already conjugated ending)
    are "unclassified" and report no info.

    Example:
        >>> Syllable("が").get_info()
        SyllableInfo(row=<Row.G: 'g'>, umlaut=<Umlaut.A: 'a'>)
        >>> Syllable("ぬ").ends_with(Umlaut.A)
        False
    """
    char: str

    @classmethod
    def from_str(cls, text: str) -> "Syllable":
        """Build a Syllable from the first character of ``text``."""
        if not text:
            raise ValueError("Cannot build a syllable from an empty string")
        return cls(text[0])

    def get_info(self) -> Optional[SyllableInfo]:
        """Row and vowel of the syllable, or None if it is unclassified."""
        return SYLLABLE_INFO.get(self.char)

    def ends_with(self, umlaut: Umlaut) -> bool:
        """True if the syllable ends with the given vowel."""
        info = self.get_info()
        return info is not None and info.umlaut == umlaut

    def is_valid(self) -> bool:
        """True if the syllable is a classified hiragana character."""
        return self.get_info() is not None

    def to_dakuten(self) -> "Syllable":
        """Voiced counterpart (た -> だ); other syllables map to themselves."""
        return Syllable(voice_char(self.char))

    def __str__(self) -> str:
        return self.char
