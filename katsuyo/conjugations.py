"""
Japanese verb conjugation engine for Katsuyo.

Derives conjugated forms from a dictionary-form verb by combining five stem
flavors with literal suffixes:

    nai-stem         - negative, causative, passive     (ならう -> ならわ)
    long stem        - polite ~ます forms, desiderative  (ならう -> ならい)
    potential stem   - potential, godan imperative      (ならう -> ならえ)
    ba stem          - ~ば conditional                  (ならう -> ならえ)
    volitional stem  - ~う/~よう volitional              (ならう -> ならお)

plus the euphonic て/た rule for godan verbs. Irregular verbs (する, 来る,
honorific godan verbs) are answered by katsuyo.irregular before any table
lookup.

Example:
    >>> verb = Word("ならう", "習う").into_verb(VerbType.GODAN)
    >>> verb.negative(WordForm.SHORT).kanji
    '習わない'
    >>> verb.te_form().kana
    'ならって'
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Callable, Dict, List, Optional, Tuple

from katsuyo.characters import voice_char
from katsuyo.errors import UnexpectedEnding
from katsuyo.irregular import Irregular, classify, is_aru, lexical_te
from katsuyo.word import Inflection, Word, WordForm

logger = logging.getLogger(__name__)


class VerbType(Enum):
    """Verb class."""
    GODAN = "godan"          # 五段, consonant stem
    ICHIDAN = "ichidan"      # 一段, vowel stem
    EXCEPTION = "exception"  # する, 来る, 行く, ...


# ============================================================================
# Godan (五段) Stem Tables
# ============================================================================

# Final syllable -> replacement, one table per stem flavor
NAI_STEMS: Dict[str, str] = {
    'す': 'さ', 'く': 'か', 'ぐ': 'が', 'む': 'ま', 'ぶ': 'ば',
    'ぬ': 'な', 'る': 'ら', 'う': 'わ', 'つ': 'た',
}

LONG_STEMS: Dict[str, str] = {
    'す': 'し', 'く': 'き', 'ぐ': 'ぎ', 'む': 'み', 'ぶ': 'び',
    'ぬ': 'に', 'る': 'り', 'う': 'い', 'つ': 'ち',
}

POTENTIAL_STEMS: Dict[str, str] = {
    'す': 'せ', 'く': 'け', 'ぐ': 'げ', 'む': 'め', 'ぶ': 'べ',
    'ぬ': 'ね', 'る': 'れ', 'う': 'え', 'つ': 'て',
}

BA_STEMS: Dict[str, str] = dict(POTENTIAL_STEMS)

VOLITIONAL_STEMS: Dict[str, str] = {
    'す': 'そ', 'く': 'こ', 'ぐ': 'ご', 'む': 'も', 'ぶ': 'ぼ',
    'ぬ': 'の', 'る': 'ろ', 'う': 'お', 'つ': 'と',
}

# Te-form / ta-form sound changes
TE_SOUND_CHANGES: Dict[str, str] = {
    'す': 'し',
    'く': 'い', 'ぐ': 'い',
    'む': 'ん', 'ぶ': 'ん', 'ぬ': 'ん',
    'る': 'っ', 'う': 'っ', 'つ': 'っ',
}

# Endings whose て/た becomes で/だ
VOICED_TE_ENDINGS = frozenset('ぐむぶぬ')


# ============================================================================
# Verb
# ============================================================================

@dataclass(frozen=True)
class Verb:
    """
    A dictionary-form verb with its class.

    Every conjugation returns a new Word tagged with the inflections that
    produced it; the Verb itself is never modified.

    Raises:
        NotAVerb: If ``word`` does not end in a u-row syllable.
    """
    word: Word
    verb_type: VerbType
    irregular: Irregular = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        self.word.require_verb()
        if not self.word.shares_okurigana():
            logger.warning(
                f"Kanji reading {self.word.kanji!r} does not end like {self.word.kana!r}; "
                f"derived kanji forms may be wrong"
            )
        object.__setattr__(self, "irregular", classify(self.word, self.verb_type))

    def get_reading(self) -> str:
        return self.word.get_reading()

    def is_dict_form(self) -> bool:
        return self.word.is_dict_form()

    @property
    def is_ichidan(self) -> bool:
        return self.verb_type is VerbType.ICHIDAN

    # ------------------------------------------------------------------
    # Public forms
    # ------------------------------------------------------------------

    def get_stem(self, form: WordForm) -> Word:
        """
        Stem of the verb: nai-stem for SHORT, polite stem for LONG.

        Example:
            >>> verb.get_stem(WordForm.LONG).kana
            'ならい'
            >>> verb.get_stem(WordForm.SHORT).kana
            'ならわ'
        """
        if form is WordForm.SHORT:
            return self._nai_stem().with_inflections(Inflection.STEM)
        return self._stem_long().with_inflections(Inflection.STEM, Inflection.POLITE)

    def dictionary(self, form: WordForm) -> Word:
        """Dictionary form (ならう) or its polite present (ならいます)."""
        if form is WordForm.SHORT:
            return Word(self.word.kana, self.word.kanji)
        return self._stem_long().push_str("ます").with_inflections(Inflection.POLITE)

    def negative(self, form: WordForm) -> Word:
        """ならわない / ならいません"""
        return self._negative(form).with_inflections(*_tags(form, Inflection.NEGATIVE))

    def te_form(self) -> Word:
        """ならって"""
        return self._te_rule("て").with_inflections(Inflection.TE)

    def negative_te_form(self) -> Word:
        """ならわなくて"""
        word = self._negative(WordForm.SHORT).strip_end(1).push_str("くて")
        return word.with_inflections(Inflection.NEGATIVE, Inflection.TE)

    def past(self, form: WordForm) -> Word:
        """ならった / ならいました"""
        if form is WordForm.SHORT:
            word = self._te_rule("た")
        else:
            word = self._stem_long().push_str("ました")
        return word.with_inflections(*_tags(form, Inflection.PAST))

    def negative_past(self, form: WordForm) -> Word:
        """ならわなかった / ならいませんでした"""
        return self._negative_past(form).with_inflections(*_tags(form, Inflection.NEGATIVE, Inflection.PAST))

    def potential(self, form: WordForm) -> Word:
        """ならえる / ならえます"""
        suffix = "る" if form is WordForm.SHORT else "ます"
        word = self._stem_potential().push_str(suffix)
        return word.with_inflections(*_tags(form, Inflection.POTENTIAL))

    def negative_potential(self, form: WordForm) -> Word:
        """ならえない / ならえません"""
        suffix = "ない" if form is WordForm.SHORT else "ません"
        word = self._stem_potential().push_str(suffix)
        return word.with_inflections(*_tags(form, Inflection.POTENTIAL, Inflection.NEGATIVE))

    def imperative(self) -> Word:
        """
        Imperative: たべろ, ならえ, しろ, こい, いらっしゃい.
        """
        override = self._override(Inflection.IMPERATIVE)
        if override is not None:
            word = override
        elif self.is_ichidan:
            word = self.word.strip_end(1).push_str("ろ")
        else:
            word = self._stem_potential()
        return word.with_inflections(Inflection.IMPERATIVE)

    def imperative_negative(self) -> Word:
        """ならうな"""
        return self.word.push_str("な").with_inflections(Inflection.IMPERATIVE, Inflection.NEGATIVE)

    def causative(self) -> Word:
        """たべさせる / ならわせる"""
        return self._causative().with_inflections(Inflection.CAUSATIVE)

    def negative_causative(self) -> Word:
        """たべさせない"""
        word = self._causative().strip_end(1).push_str("ない")
        return word.with_inflections(Inflection.CAUSATIVE, Inflection.NEGATIVE)

    def causative_passive(self) -> Word:
        """たべさせられる / ならわされる"""
        return self._causative_passive().with_inflections(Inflection.CAUSATIVE_PASSIVE)

    def negative_causative_passive(self) -> Word:
        """たべさせられない / ならわされない"""
        word = self._causative_passive().strip_end(1).push_str("ない")
        return word.with_inflections(Inflection.CAUSATIVE_PASSIVE, Inflection.NEGATIVE)

    def passive(self) -> Word:
        """たべられる / ならわれる"""
        return self._passive().with_inflections(Inflection.PASSIVE)

    def negative_passive(self) -> Word:
        """たべられない"""
        word = self._passive().strip_end(1).push_str("ない")
        return word.with_inflections(Inflection.PASSIVE, Inflection.NEGATIVE)

    def tara(self) -> Word:
        """たべたら"""
        return self._te_rule("た").push_str("ら").with_inflections(Inflection.TARA)

    def negative_tara(self) -> Word:
        """たべなかったら"""
        word = self._negative_past(WordForm.SHORT).push_str("ら")
        return word.with_inflections(Inflection.NEGATIVE, Inflection.TARA)

    def ba(self) -> Word:
        """たべれば"""
        return self._stem_ba().push_str("ば").with_inflections(Inflection.BA)

    def negative_ba(self) -> Word:
        """たべなければ"""
        word = self._negative(WordForm.SHORT).strip_end(1).push_str("ければ")
        return word.with_inflections(Inflection.NEGATIVE, Inflection.BA)

    def volitional(self, form: WordForm) -> Word:
        """ならおう / ならいましょう"""
        if form is WordForm.SHORT:
            word = self._stem_volitional().push_str("う")
        else:
            # ~ます -> ~ましょう
            word = self._stem_long().push_str("ましょう")
        return word.with_inflections(*_tags(form, Inflection.VOLITIONAL))

    def negative_volitional(self) -> Word:
        """ならうまい"""
        return self.word.push_str("まい").with_inflections(Inflection.NEGATIVE, Inflection.VOLITIONAL)

    def zu(self) -> Word:
        """ならわず / せず"""
        word = self._override(Inflection.ZU)
        if word is None:
            # ~ない -> ~ず
            word = self._negative(WordForm.SHORT).strip_end(2).push_str("ず")
        return word.with_inflections(Inflection.ZU)

    def desiderative(self) -> Word:
        """ならいたい"""
        return self._stem_long().push_str("たい").with_inflections(Inflection.DESIDERATIVE)

    def negative_desiderative(self) -> Word:
        """ならいたくない"""
        word = self._stem_long().push_str("たくない")
        return word.with_inflections(Inflection.DESIDERATIVE, Inflection.NEGATIVE)

    # ------------------------------------------------------------------
    # Shared derivations
    # ------------------------------------------------------------------

    def _negative(self, form: WordForm) -> Word:
        override = self._override(Inflection.NEGATIVE, form)
        if override is not None:
            return override

        if form is WordForm.SHORT:
            if not self.is_ichidan and is_aru(self.word):
                # ある has no あら~ negative
                return Word("ない")
            return self._nai_stem().push_str("ない")
        return self._stem_long().push_str("ません")

    def _negative_past(self, form: WordForm) -> Word:
        if form is WordForm.SHORT:
            # ~ない -> ~なかった
            return self._negative(WordForm.SHORT).strip_end(1).push_str("かった")
        return self._stem_long().push_str("ませんでした")

    def _causative(self) -> Word:
        override = self._override(Inflection.CAUSATIVE)
        if override is not None:
            return override
        if self.is_ichidan:
            return self.word.strip_end(1).push_str("させる")
        return self._nai_stem().push_str("せる")

    def _causative_passive(self) -> Word:
        override = self._override(Inflection.CAUSATIVE_PASSIVE)
        if override is not None:
            return override
        if self.is_ichidan:
            return self.word.strip_end(1).push_str("させられる")
        return self._nai_stem().push_str("される")

    def _passive(self) -> Word:
        override = self._override(Inflection.PASSIVE)
        if override is not None:
            return override
        suffix = "られる" if self.is_ichidan else "れる"
        return self._nai_stem().push_str(suffix)

    # ------------------------------------------------------------------
    # Te rule
    # ------------------------------------------------------------------

    def _te_rule(self, mora: str) -> Word:
        """
        Te-form with ``mora`` (て or た) as the final syllable.
        """
        override = self.irregular.te_family(self.word, mora)
        if override is not None:
            return override

        if self.is_ichidan:
            return self.word.strip_end(1).push_str(mora)

        lexical = lexical_te(self.word, mora)
        if lexical is not None:
            return lexical

        return self._te_rule_godan(mora)

    def _te_rule_godan(self, mora: str) -> Word:
        stem = self._map_ending(TE_SOUND_CHANGES)
        if self.word.kana[-1] in VOICED_TE_ENDINGS:
            mora = voice_char(mora)
        return stem.push(mora)

    # ------------------------------------------------------------------
    # Stems
    # ------------------------------------------------------------------

    def _nai_stem(self) -> Word:
        if self.is_ichidan:
            return self.word.strip_end(1)
        override = self._override(Inflection.STEM, WordForm.SHORT)
        if override is not None:
            return override
        return self._map_ending(NAI_STEMS)

    def _stem_long(self) -> Word:
        if self.is_ichidan:
            return self.word.strip_end(1)
        override = self._override(Inflection.STEM, WordForm.LONG)
        if override is not None:
            return override
        return self._map_ending(LONG_STEMS)

    def _stem_potential(self) -> Word:
        if self.is_ichidan:
            return self.word.strip_end(1).push_str("られ")
        override = self._override(Inflection.STEM_POTENTIAL)
        if override is not None:
            return override
        return self._map_ending(POTENTIAL_STEMS)

    def _stem_ba(self) -> Word:
        if self.is_ichidan:
            return self.word.strip_end(1).push_str("れ")
        override = self._override(Inflection.STEM_BA)
        if override is not None:
            return override
        return self._map_ending(BA_STEMS)

    def _stem_volitional(self) -> Word:
        if self.is_ichidan:
            return self.word.strip_end(1).push_str("よ")
        override = self._override(Inflection.STEM_VOLITIONAL)
        if override is not None:
            return override
        return self._map_ending(VOLITIONAL_STEMS)

    def _override(self, category: Inflection, form: Optional[WordForm] = None) -> Optional[Word]:
        return self.irregular.apply(self.word, category, form)

    def _map_ending(self, mappings: Dict[str, str]) -> Word:
        """
        Replace the final syllable of the verb using ``mappings``.

        Raises:
            UnexpectedEnding: If the final syllable has no entry.
        """
        ending = self.word.ending_syllable()
        if ending is None:
            raise UnexpectedEnding(self.word)

        mapped = mappings.get(ending.char)
        if mapped is None:
            logger.debug(f"No stem mapping for ending {ending.char!r} of {self.word.kana}")
            raise UnexpectedEnding(self.word, ending.char)

        return self.word.strip_end(1).push(mapped)


def _tags(form: WordForm, *inflections: Inflection) -> Tuple[Inflection, ...]:
    """Inflection tags plus POLITE for the long register."""
    if form is WordForm.LONG:
        return inflections + (Inflection.POLITE,)
    return inflections


# ============================================================================
# Conjugation Catalogue
# ============================================================================

class ConjType(IntEnum):
    """Conjugation categories exposed by Verb."""
    DICTIONARY = 1
    STEM = 2
    NEGATIVE = 3
    PAST = 4
    NEGATIVE_PAST = 5
    TE = 6
    NEGATIVE_TE = 7
    POTENTIAL = 8
    NEGATIVE_POTENTIAL = 9
    PASSIVE = 10
    NEGATIVE_PASSIVE = 11
    CAUSATIVE = 12
    NEGATIVE_CAUSATIVE = 13
    CAUSATIVE_PASSIVE = 14
    NEGATIVE_CAUSATIVE_PASSIVE = 15
    IMPERATIVE = 16
    NEGATIVE_IMPERATIVE = 17
    BA = 18               # provisional ~ば
    NEGATIVE_BA = 19
    TARA = 20             # conditional ~たら
    NEGATIVE_TARA = 21
    VOLITIONAL = 22
    NEGATIVE_VOLITIONAL = 23
    ZU = 24
    DESIDERATIVE = 25     # ~たい
    NEGATIVE_DESIDERATIVE = 26


CONJ_DESCRIPTIONS = {
    ConjType.DICTIONARY: "Non-past",
    ConjType.STEM: "Stem",
    ConjType.NEGATIVE: "Negative",
    ConjType.PAST: "Past (~ta)",
    ConjType.NEGATIVE_PAST: "Negative past",
    ConjType.TE: "Conjunctive (~te)",
    ConjType.NEGATIVE_TE: "Negative conjunctive (~nakute)",
    ConjType.POTENTIAL: "Potential",
    ConjType.NEGATIVE_POTENTIAL: "Negative potential",
    ConjType.PASSIVE: "Passive",
    ConjType.NEGATIVE_PASSIVE: "Negative passive",
    ConjType.CAUSATIVE: "Causative",
    ConjType.NEGATIVE_CAUSATIVE: "Negative causative",
    ConjType.CAUSATIVE_PASSIVE: "Causative-Passive",
    ConjType.NEGATIVE_CAUSATIVE_PASSIVE: "Negative causative-passive",
    ConjType.IMPERATIVE: "Imperative",
    ConjType.NEGATIVE_IMPERATIVE: "Negative imperative (~na)",
    ConjType.BA: "Provisional (~ba)",
    ConjType.NEGATIVE_BA: "Negative provisional (~nakereba)",
    ConjType.TARA: "Conditional (~tara)",
    ConjType.NEGATIVE_TARA: "Negative conditional (~nakattara)",
    ConjType.VOLITIONAL: "Volitional",
    ConjType.NEGATIVE_VOLITIONAL: "Negative volitional (~mai)",
    ConjType.ZU: "Negative continuative (~zu)",
    ConjType.DESIDERATIVE: "Desiderative (~tai)",
    ConjType.NEGATIVE_DESIDERATIVE: "Negative desiderative (~takunai)",
}


# Categories that have both a short and a long register
_FORM_HANDLERS: Dict[ConjType, Callable[[Verb, WordForm], Word]] = {
    ConjType.DICTIONARY: Verb.dictionary,
    ConjType.STEM: Verb.get_stem,
    ConjType.NEGATIVE: Verb.negative,
    ConjType.PAST: Verb.past,
    ConjType.NEGATIVE_PAST: Verb.negative_past,
    ConjType.POTENTIAL: Verb.potential,
    ConjType.NEGATIVE_POTENTIAL: Verb.negative_potential,
    ConjType.VOLITIONAL: Verb.volitional,
}

_HANDLERS: Dict[ConjType, Callable[[Verb], Word]] = {
    ConjType.TE: Verb.te_form,
    ConjType.NEGATIVE_TE: Verb.negative_te_form,
    ConjType.PASSIVE: Verb.passive,
    ConjType.NEGATIVE_PASSIVE: Verb.negative_passive,
    ConjType.CAUSATIVE: Verb.causative,
    ConjType.NEGATIVE_CAUSATIVE: Verb.negative_causative,
    ConjType.CAUSATIVE_PASSIVE: Verb.causative_passive,
    ConjType.NEGATIVE_CAUSATIVE_PASSIVE: Verb.negative_causative_passive,
    ConjType.IMPERATIVE: Verb.imperative,
    ConjType.NEGATIVE_IMPERATIVE: Verb.imperative_negative,
    ConjType.BA: Verb.ba,
    ConjType.NEGATIVE_BA: Verb.negative_ba,
    ConjType.TARA: Verb.tara,
    ConjType.NEGATIVE_TARA: Verb.negative_tara,
    ConjType.NEGATIVE_VOLITIONAL: Verb.negative_volitional,
    ConjType.ZU: Verb.zu,
    ConjType.DESIDERATIVE: Verb.desiderative,
    ConjType.NEGATIVE_DESIDERATIVE: Verb.negative_desiderative,
}


def get_conj_description(conj_type: int) -> str:
    """Get human-readable description of conjugation type."""
    return CONJ_DESCRIPTIONS.get(conj_type, f"Type {conj_type}")


def takes_form(conj_type: ConjType) -> bool:
    """True if the category has short and long registers."""
    return conj_type in _FORM_HANDLERS


def conjugate(verb: Verb, conj_type: ConjType, form: WordForm = WordForm.SHORT) -> Word:
    """
    Conjugate a verb into one category.

    Args:
        verb: Verb to conjugate.
        conj_type: Conjugation category.
        form: Register; ignored for categories that have only one.

    Raises:
        UnexpectedEnding: If the verb's ending has no stem mapping.
    """
    if conj_type in _FORM_HANDLERS:
        return _FORM_HANDLERS[conj_type](verb, form)
    return _HANDLERS[conj_type](verb)


def conjugate_all(verb: Verb) -> List[Tuple[ConjType, Optional[WordForm], Word]]:
    """
    Generate every conjugation of a verb.

    Returns:
        List of (conj_type, form, word) tuples in ConjType order; form is
        None for categories with a single register.
    """
    results = []
    for conj_type in ConjType:
        if takes_form(conj_type):
            for form in WordForm:
                results.append((conj_type, form, conjugate(verb, conj_type, form)))
        else:
            results.append((conj_type, None, conjugate(verb, conj_type)))
    return results
