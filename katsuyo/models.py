"""
Pydantic models for Katsuyo results.

These models give conjugation output a stable, serialisable shape for JSON
output and for the conjugation store.

Usage:
    from katsuyo.models import ConjugationTable

    table = ConjugationTable.from_verb(verb)
    print(table.model_dump_json(indent=2))
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from katsuyo.conjugations import ConjType, Verb, conjugate_all, get_conj_description
from katsuyo.word import Word, WordForm


class Reading(BaseModel):
    """Kana/kanji pair of a single word."""
    kana: str = Field(..., description="Kana reading")
    kanji: Optional[str] = Field(None, description="Kanji reading, if any")
    inflections: List[str] = Field(default_factory=list, description="Inflections applied, in order")

    @classmethod
    def from_word(cls, word: Word) -> "Reading":
        return cls(
            kana=word.kana,
            kanji=word.kanji,
            inflections=[i.value for i in word.inflections],
        )


class ConjugatedForm(Reading):
    """One conjugated form of a verb."""
    conj_type: str = Field(..., description="Conjugation category (e.g. 'NEGATIVE')")
    description: str = Field(..., description="Human-readable category name")
    form: Optional[str] = Field(None, description="'short' or 'long', None if the category has one register")

    @property
    def conj_id(self) -> int:
        return int(ConjType[self.conj_type])

    @classmethod
    def from_result(cls, conj_type: ConjType, form: Optional[WordForm], word: Word) -> "ConjugatedForm":
        return cls(
            conj_type=conj_type.name,
            description=get_conj_description(conj_type),
            form=form.value if form is not None else None,
            kana=word.kana,
            kanji=word.kanji,
            inflections=[i.value for i in word.inflections],
        )


class ConjugationTable(BaseModel):
    """Every conjugated form of one verb."""
    kana: str = Field(..., description="Dictionary form, kana")
    kanji: Optional[str] = Field(None, description="Dictionary form, kanji")
    verb_type: str = Field(..., description="'godan', 'ichidan' or 'exception'")
    forms: List[ConjugatedForm] = Field(default_factory=list)

    @classmethod
    def from_verb(cls, verb: Verb) -> "ConjugationTable":
        """
        Build the full table for a verb.

        Raises:
            UnexpectedEnding: If any category cannot be derived.
        """
        return cls(
            kana=verb.word.kana,
            kanji=verb.word.kanji,
            verb_type=verb.verb_type.value,
            forms=[ConjugatedForm.from_result(*result) for result in conjugate_all(verb)],
        )

    def get(self, conj_type: ConjType, form: Optional[WordForm] = None) -> Optional[ConjugatedForm]:
        """Look up one form; ``form`` is ignored for single-register categories."""
        for entry in self.forms:
            if entry.conj_type != conj_type.name:
                continue
            if entry.form is None or form is None or entry.form == form.value:
                return entry
        return None
