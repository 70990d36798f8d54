"""
Irregular verb overrides for Katsuyo.

Irregular verbs are classified once per Verb into one of:

    SURU       - する and compounds ending in する (勉強する, 耳にする)
    KURU       - 来る and compounds ending in 来る (遊びに来る)
    HONORIFIC  - いらっしゃる, おっしゃる, くださる, ござる, なさる
    REGULAR    - everything else

Every conjugation first asks the classification for an override of the
category it needs, and only falls back to the regular stem tables when
there is none. Compound verbs keep their prefix: only the trailing する or
来る conjugates irregularly.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from katsuyo.word import Inflection, Word, WordForm

logger = logging.getLogger(__name__)


class IrregularKind(Enum):
    REGULAR = "regular"
    SURU = "suru"
    KURU = "kuru"
    HONORIFIC = "honorific"


# Te-family categories store only the て variant; callers patch the last mora
TE_FAMILY_PLACEHOLDER = "て"


# ============================================================================
# する (to do)
# ============================================================================

SURU_KANA = "する"

# (category, form) -> (kana ending, kanji of the bare verb)
# form is None where the category has a single register.
SURU_FORMS: Dict[Tuple[Inflection, Optional[WordForm]], Tuple[str, str]] = {
    (Inflection.STEM, WordForm.SHORT): ("し", "為"),
    (Inflection.STEM, WordForm.LONG): ("し", "為"),
    (Inflection.STEM_POTENTIAL, None): ("でき", "出来"),
    (Inflection.STEM_BA, None): ("すれ", "為れ"),
    (Inflection.STEM_VOLITIONAL, None): ("しよ", "為よ"),
    (Inflection.TE, None): ("して", "為て"),
    (Inflection.NEGATIVE, WordForm.SHORT): ("しない", "為ない"),
    (Inflection.NEGATIVE, WordForm.LONG): ("しません", "為ません"),
    (Inflection.PASSIVE, None): ("される", "為れる"),
    (Inflection.CAUSATIVE, None): ("させる", "為せる"),
    (Inflection.CAUSATIVE_PASSIVE, None): ("させられる", "為せられる"),
    (Inflection.IMPERATIVE, None): ("しろ", "為ろ"),
    (Inflection.ZU, None): ("せず", "為ず"),
}


# ============================================================================
# 来る (to come)
# ============================================================================

KURU_KANA = "くる"
KURU_KANJI = "来る"

# (category, form) -> (kana ending, kanji ending)
KURU_FORMS: Dict[Tuple[Inflection, Optional[WordForm]], Tuple[str, str]] = {
    (Inflection.STEM, WordForm.SHORT): ("こ", "来"),
    (Inflection.STEM, WordForm.LONG): ("き", "来"),
    (Inflection.STEM_POTENTIAL, None): ("こられ", "来られ"),
    (Inflection.STEM_BA, None): ("くれ", "来れ"),
    (Inflection.STEM_VOLITIONAL, None): ("こよ", "来よ"),
    (Inflection.TE, None): ("きて", "来て"),
    (Inflection.NEGATIVE, WordForm.SHORT): ("こない", "来ない"),
    (Inflection.NEGATIVE, WordForm.LONG): ("きません", "来ません"),
    (Inflection.PASSIVE, None): ("こられる", "来られる"),
    (Inflection.CAUSATIVE, None): ("こさせる", "来させる"),
    (Inflection.CAUSATIVE_PASSIVE, None): ("こさせられる", "来させられる"),
    (Inflection.IMPERATIVE, None): ("こい", "来い"),
}


# ============================================================================
# Honorific godan verbs
# ============================================================================

# kana -> usual kanji spelling
HONORIFIC_VERBS: Dict[str, Optional[str]] = {
    "いらっしゃる": None,
    "おっしゃる": "仰る",
    "くださる": "下さる",
    "ござる": "御座る",
    "なさる": "為さる",
}

# Categories where the honorific verbs end in い instead of り/れ
HONORIFIC_I_ENDINGS = {
    (Inflection.STEM, WordForm.LONG),
    (Inflection.IMPERATIVE, None),
}

IRASSHARU = "いらっしゃる"


# ============================================================================
# Lexical te-family exceptions
# ============================================================================

# 行く uses っ instead of the い the く row would give
IKU_KANA_ENDINGS = ("いく", "ゆく")
IKU_KANJI_ENDINGS = ("行く", "いく", "ゆく")

ARU_KANA = "ある"
ARU_KANJI = ("有る", "在る")


def is_iku(word: Word) -> bool:
    """True for 行く and compounds ending in it (連れて行く)."""
    if not word.kana.endswith(IKU_KANA_ENDINGS):
        return False
    return word.kanji is None or word.kanji.endswith(IKU_KANJI_ENDINGS)


def is_aru(word: Word) -> bool:
    """True for ある (to exist) in any of its spellings."""
    return any(word.has_reading(ARU_KANA, kanji) for kanji in ARU_KANJI)


def lexical_te(word: Word, mora: str) -> Optional[Word]:
    """
    Te-family form of 行く and ある, which bypass the euphonic table.

    Args:
        word: Dictionary form.
        mora: て or た.
    """
    if is_iku(word) or is_aru(word):
        return word.strip_end(1).push_str("っ" + mora)
    return None


def patch_te_mora(word: Word, mora: str) -> Word:
    """Replace the trailing て of an override result with ``mora``."""
    if mora == TE_FAMILY_PLACEHOLDER:
        return word
    return word.strip_end(1).push_str(mora)


# ============================================================================
# Classification
# ============================================================================

@dataclass(frozen=True)
class Irregular:
    """
    Irregular-verb classification of a dictionary form.

    Attributes:
        kind: Which override family applies.
        bare: True for the bare verb (する, 来る) rather than a compound.
    """
    kind: IrregularKind = IrregularKind.REGULAR
    bare: bool = False

    @property
    def is_regular(self) -> bool:
        return self.kind is IrregularKind.REGULAR

    def apply(
        self,
        word: Word,
        category: Inflection,
        form: Optional[WordForm] = None,
    ) -> Optional[Word]:
        """
        Override for one conjugation category.

        Args:
            word: Dictionary form of the verb.
            category: Stem or form being derived.
            form: Register, for categories that have one.

        Returns:
            The irregular form, or None to use the regular derivation.
        """
        if self.kind is IrregularKind.SURU:
            result = self._apply_suru(word, category, form)
        elif self.kind is IrregularKind.KURU:
            result = self._apply_kuru(word, category, form)
        elif self.kind is IrregularKind.HONORIFIC:
            result = self._apply_honorific(word, category, form)
        else:
            return None

        if result is not None:
            logger.debug(f"{self.kind.value} override for {word.kana} ({category.value}): {result.kana}")
        return result

    def _apply_suru(self, word, category, form):
        entry = SURU_FORMS.get((category, form))
        if entry is None:
            return None

        kana, kanji = entry
        if self.bare:
            return Word(kana, kanji if word.kanji is not None else None)
        return word.strip_end(len(SURU_KANA)).push_str(kana)

    def _apply_kuru(self, word, category, form):
        entry = KURU_FORMS.get((category, form))
        if entry is None:
            return None

        kana, kanji = entry
        replaced = word.new_with_suffix_replaced(KURU_KANA, KURU_KANJI, kana, kanji)
        if replaced is None:
            # Kanji reading spelled with kana okurigana only (遊びにくる)
            replaced = word.new_with_suffix_replaced(KURU_KANA, KURU_KANA, kana, kana)
        return replaced

    def te_family(self, word: Word, mora: str) -> Optional[Word]:
        """
        Override for the te-family (て, た) of the verb.

        The tables only store the て variant; the trailing mora is patched
        to ``mora``. いらっしゃる only differs in the て-form itself
        (いらして), its past stays いらっしゃった.
        """
        if self.kind is IrregularKind.HONORIFIC:
            if mora == TE_FAMILY_PLACEHOLDER and word.kana == IRASSHARU:
                logger.debug(f"honorific override for {word.kana} (te)")
                return word.strip_end(len("っしゃる")).push_str("して")
            return None

        result = self.apply(word, Inflection.TE)
        if result is None:
            return None
        return patch_te_mora(result, mora)

    def _apply_honorific(self, word, category, form):
        if (category, form) in HONORIFIC_I_ENDINGS:
            return word.strip_end(1).push_str("い")
        return None


REGULAR = Irregular()


def _is_kuru(word: Word) -> bool:
    return (
        word.strip_suffix(KURU_KANA, KURU_KANJI) is not None
        or word.strip_suffix(KURU_KANA, KURU_KANA) is not None
    )


def _is_honorific(word: Word) -> bool:
    return any(word.has_reading(kana, kanji) for kana, kanji in HONORIFIC_VERBS.items())


def classify(word: Word, verb_type) -> Irregular:
    """
    Classify a dictionary form for irregular overrides.

    する and 来る are suffix checks and run first, since they apply to
    compounds; the honorific check is an exact match.
    """
    from katsuyo.conjugations import VerbType

    if verb_type is VerbType.ICHIDAN:
        return REGULAR

    if verb_type is VerbType.EXCEPTION:
        if word.kana.endswith(SURU_KANA):
            return Irregular(IrregularKind.SURU, bare=word.kana == SURU_KANA)
        if _is_kuru(word):
            return Irregular(IrregularKind.KURU, bare=word.kana == KURU_KANA)

    if _is_honorific(word):
        return Irregular(IrregularKind.HONORIFIC)

    return REGULAR
