"""
Tests for models.py - pydantic result schema.
"""

import json

from katsuyo.conjugations import ConjType, VerbType
from katsuyo.models import ConjugatedForm, ConjugationTable, Reading
from katsuyo.word import Inflection, Word, WordForm


class TestReading:

    def test_from_word(self):
        reading = Reading.from_word(Word("たべない", "食べない", [Inflection.NEGATIVE]))
        assert reading.kana == "たべない"
        assert reading.kanji == "食べない"
        assert reading.inflections == ["negative"]

    def test_kanji_optional(self):
        assert Reading(kana="しない").kanji is None


class TestConjugatedForm:

    def test_from_result(self):
        word = Word("たべません", "食べません", [Inflection.NEGATIVE, Inflection.POLITE])
        entry = ConjugatedForm.from_result(ConjType.NEGATIVE, WordForm.LONG, word)
        assert entry.conj_type == "NEGATIVE"
        assert entry.description == "Negative"
        assert entry.form == "long"
        assert entry.inflections == ["negative", "polite"]
        assert entry.conj_id == 3

    def test_single_register(self):
        entry = ConjugatedForm.from_result(ConjType.TE, None, Word("たべて", inflections=[Inflection.TE]))
        assert entry.form is None


class TestConjugationTable:

    def test_from_verb(self, make_verb):
        table = ConjugationTable.from_verb(make_verb("たべる", "食べる", VerbType.ICHIDAN))
        assert table.kana == "たべる"
        assert table.kanji == "食べる"
        assert table.verb_type == "ichidan"
        assert table.forms[0].conj_type == "DICTIONARY"

    def test_get(self, make_verb):
        table = ConjugationTable.from_verb(make_verb("ならう", "習う"))
        assert table.get(ConjType.NEGATIVE, WordForm.LONG).kana == "ならいません"
        assert table.get(ConjType.NEGATIVE).kana == "ならわない"
        assert table.get(ConjType.TE, WordForm.LONG).kana == "ならって"

    def test_get_missing(self):
        table = ConjugationTable(kana="ならう", verb_type="godan")
        assert table.get(ConjType.TE) is None

    def test_json(self, make_verb):
        table = ConjugationTable.from_verb(make_verb("する", None, VerbType.EXCEPTION))
        data = json.loads(table.model_dump_json())
        assert data["kanji"] is None
        zu = [f for f in data["forms"] if f["conj_type"] == "ZU"]
        assert zu[0]["kana"] == "せず"
        assert zu[0]["inflections"] == ["zu"]
