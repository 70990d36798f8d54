"""
Katsuyo - Japanese verb conjugation.

Derives the conjugated forms of Godan, Ichidan and irregular verbs from
their dictionary form, keeping a kana and a kanji reading in step.

Basic usage:
    >>> from katsuyo import Word, VerbType, WordForm
    >>> verb = Word("たべる", "食べる").into_verb(VerbType.ICHIDAN)
    >>> verb.negative(WordForm.SHORT).kanji
    '食べない'

    >>> from katsuyo import ConjType, conjugate
    >>> conjugate("いく", "行く", VerbType.EXCEPTION, ConjType.TE).kanji
    '行って'
"""

from typing import Optional

__version__ = "0.1.0"

from katsuyo.characters import Row, Syllable, Umlaut
from katsuyo.conjugations import ConjType, Verb, VerbType, conjugate_all, get_conj_description
from katsuyo.conjugations import conjugate as conjugate_verb
from katsuyo.errors import KatsuyoError, NotAVerb, UnexpectedEnding
from katsuyo.word import Inflection, Word, WordForm


def conjugate(
    kana: str,
    kanji: Optional[str] = None,
    verb_type: VerbType = VerbType.GODAN,
    conj_type: ConjType = ConjType.DICTIONARY,
    form: WordForm = WordForm.SHORT,
) -> Word:
    """
    Conjugate a dictionary-form verb in one call.

    Args:
        kana: Kana reading of the verb.
        kanji: Kanji reading, if any.
        verb_type: Verb class.
        conj_type: Conjugation category.
        form: Register, for categories that have one.

    Raises:
        NotAVerb: If the word is not a dictionary-form verb.
        UnexpectedEnding: If the verb's ending has no stem mapping.
    """
    verb = Word(kana, kanji).into_verb(verb_type)
    return conjugate_verb(verb, conj_type, form)
