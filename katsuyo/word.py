"""
Dual kana/kanji word value for Katsuyo.

A Word carries a kana reading, an optional kanji reading and the list of
inflections that produced it. Every edit is applied to both readings at the
same character offset from the end: the kanji reading is assumed to end in
the same okurigana as the kana reading. That precondition is not enforced;
callers supply consistent readings.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, TYPE_CHECKING

from katsuyo.characters import Syllable, Umlaut
from katsuyo.errors import NotAVerb

if TYPE_CHECKING:
    from katsuyo.conjugations import Verb, VerbType


class WordForm(Enum):
    """
    Register of a conjugated form.

    SHORT: しない
    LONG:  しません
    """
    SHORT = "short"
    LONG = "long"


class Inflection(Enum):
    """Provenance tag recording which operation produced a Word."""
    STEM = "stem"
    STEM_POTENTIAL = "stem-potential"
    STEM_BA = "stem-ba"
    STEM_VOLITIONAL = "stem-volitional"
    NEGATIVE = "negative"
    PAST = "past"
    POLITE = "polite"
    TE = "te"
    TARA = "tara"
    BA = "ba"
    POTENTIAL = "potential"
    PASSIVE = "passive"
    CAUSATIVE = "causative"
    CAUSATIVE_PASSIVE = "causative-passive"
    IMPERATIVE = "imperative"
    VOLITIONAL = "volitional"
    ZU = "zu"
    DESIDERATIVE = "desiderative"


def _drop_last(text: str, n: int) -> str:
    return text[:max(len(text) - n, 0)]


@dataclass(frozen=True)
class Word:
    """
    A Japanese word with a kana and an optional kanji reading.

    Attributes:
        kana: Kana reading.
        kanji: Kanji reading, if any.
        inflections: Inflections applied to produce this word (empty for the
            dictionary form).

    Example:
        >>> Word("ならう", "習う").is_verb()
        True
        >>> Word("えいご", "英語").is_verb()
        False
    """
    kana: str
    kanji: Optional[str] = None
    inflections: List[Inflection] = field(default_factory=list)

    # ------------------------------------------------------------------
    # Verb checks
    # ------------------------------------------------------------------

    def is_verb(self) -> bool:
        """True if the last kana syllable ends in u (dictionary form of a verb)."""
        ending = self.ending_syllable()
        return ending is not None and ending.ends_with(Umlaut.U)

    def require_verb(self) -> None:
        """Raise NotAVerb unless the word is a dictionary-form verb."""
        if not self.is_verb():
            raise NotAVerb(self)

    def into_verb(self, verb_type: "VerbType") -> "Verb":
        """
        Promote the word to a Verb of the given class.

        Raises:
            NotAVerb: If the word is not in verb dictionary form.
        """
        from katsuyo.conjugations import Verb

        return Verb(self, verb_type)

    def is_dict_form(self) -> bool:
        return not self.inflections

    def shares_okurigana(self) -> bool:
        """True if the kanji reading is absent or ends like the kana reading."""
        if self.kanji is None:
            return True
        return bool(self.kana) and self.kanji.endswith(self.kana[-1])

    # ------------------------------------------------------------------
    # Reading queries
    # ------------------------------------------------------------------

    def get_reading(self) -> str:
        """Kanji reading if present, otherwise the kana reading."""
        return self.kanji if self.kanji is not None else self.kana

    def try_kana(self, kana: bool) -> str:
        return self.kana if kana else self.get_reading()

    def ending_syllable(self) -> Optional[Syllable]:
        """Last kana syllable, or None for an empty word."""
        if not self.kana:
            return None
        return Syllable(self.kana[-1])

    def has_reading(self, kana: str, kanji: Optional[str] = None) -> bool:
        """
        True if the word has exactly one of the given readings.

        The kanji pattern only counts when both the pattern and the word have
        a kanji reading.
        """
        if self.kana == kana:
            return True
        return kanji is not None and self.kanji is not None and self.kanji == kanji

    def ends_with(self, kana: str, kanji: Optional[str] = None) -> bool:
        """Suffix version of has_reading()."""
        if self.kana.endswith(kana):
            return True
        return kanji is not None and self.kanji is not None and self.kanji.endswith(kanji)

    # ------------------------------------------------------------------
    # Structural edits
    # ------------------------------------------------------------------

    def strip_end(self, n: int) -> "Word":
        """
        Remove the last n characters from both readings.

        Inflections are carried over unchanged.
        """
        kanji = _drop_last(self.kanji, n) if self.kanji is not None else None
        return Word(_drop_last(self.kana, n), kanji, list(self.inflections))

    def push(self, char: str) -> "Word":
        """Append a single character to both readings."""
        if len(char) != 1:
            raise ValueError(f"Expected a single character, got {char!r}")
        return self.push_str(char)

    def push_str(self, text: str) -> "Word":
        """Append a string to both readings."""
        kanji = self.kanji + text if self.kanji is not None else None
        return Word(self.kana + text, kanji, list(self.inflections))

    def with_inflections(self, *inflections: Inflection) -> "Word":
        """Copy of the word tagged with the given inflections."""
        return Word(self.kana, self.kanji, list(inflections))

    def strip_suffix(self, kana: str, kanji: Optional[str]) -> Optional[Tuple[str, Optional[str]]]:
        """
        Strip a kana and a kanji suffix from the word.

        Returns:
            (kana_prefix, kanji_prefix), where kanji_prefix is None when the
            word has no kanji reading. None if the kana reading does not end
            with ``kana``, if no kanji suffix is given, or if the word's kanji
            reading does not end with ``kanji``.
        """
        if kanji is None or not self.kana.endswith(kana):
            return None

        kana_prefix = self.kana[:len(self.kana) - len(kana)]
        if self.kanji is None:
            return kana_prefix, None
        if not self.kanji.endswith(kanji):
            return None
        return kana_prefix, self.kanji[:len(self.kanji) - len(kanji)]

    def new_with_suffix_replaced(
        self,
        kana_suffix: str,
        kanji_suffix: Optional[str],
        new_kana_suffix: str,
        new_kanji_suffix: Optional[str],
    ) -> Optional["Word"]:
        """
        Replace a kana/kanji suffix pair, keeping whatever precedes it.

        Example:
            >>> Word("あそびにくる", "遊びに来る").new_with_suffix_replaced("くる", "来る", "き", "来")
            Word(kana='あそびにき', kanji='遊びに来', inflections=[])
        """
        stripped = self.strip_suffix(kana_suffix, kanji_suffix)
        if stripped is None:
            return None

        kana_prefix, kanji_prefix = stripped
        new_kanji = None
        if kanji_prefix is not None and new_kanji_suffix is not None:
            new_kanji = kanji_prefix + new_kanji_suffix
        return Word(kana_prefix + new_kana_suffix, new_kanji)

    def __str__(self) -> str:
        if self.kanji is None:
            return self.kana
        return f"{self.kanji} 【{self.kana}】"
