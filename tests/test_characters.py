"""
Tests for katsuyo/characters.py - syllable classification and voicing.
"""

import pytest

from katsuyo.characters import DAKUTEN_MAP, SYLLABLE_INFO, Row, Syllable, SyllableInfo, Umlaut, voice_char


class TestUmlaut:

    def test_from_char(self):
        assert Umlaut.from_char("a") is Umlaut.A
        assert Umlaut.from_char("u") is Umlaut.U

    def test_from_char_invalid(self):
        with pytest.raises(ValueError):
            Umlaut.from_char("x")


class TestSyllableInfo:

    @pytest.mark.parametrize("char,row,umlaut", [
        ("あ", Row.UMLAUTS, Umlaut.A),
        ("く", Row.K, Umlaut.U),
        ("ぐ", Row.G, Umlaut.U),
        ("す", Row.S, Umlaut.U),
        ("つ", Row.T, Umlaut.U),
        ("ぬ", Row.N, Umlaut.U),
        ("ぶ", Row.B, Umlaut.U),
        ("む", Row.M, Umlaut.U),
        ("る", Row.R, Umlaut.U),
        ("れ", Row.R, Umlaut.E),
        ("よ", Row.Y, Umlaut.O),
        ("わ", Row.W, Umlaut.A),
        ("を", Row.W, Umlaut.O),
    ])
    def test_classified(self, char, row, umlaut):
        assert Syllable(char).get_info() == SyllableInfo(row, umlaut)

    @pytest.mark.parametrize("char", ["ん", "っ", "ア", "語", "a"])
    def test_unclassified(self, char):
        syllable = Syllable(char)
        assert syllable.get_info() is None
        assert not syllable.is_valid()
        assert not syllable.ends_with(Umlaut.U)

    def test_is_valid(self):
        assert Syllable("る").is_valid()

    def test_ends_with(self):
        assert Syllable("う").ends_with(Umlaut.U)
        assert Syllable("ぬ").ends_with(Umlaut.U)
        assert not Syllable("ぬ").ends_with(Umlaut.A)
        assert not Syllable("ご").ends_with(Umlaut.U)


class TestSyllable:

    def test_from_str_takes_first_char(self):
        assert Syllable.from_str("たべる") == Syllable("た")

    def test_from_str_empty(self):
        with pytest.raises(ValueError):
            Syllable.from_str("")

    def test_str(self):
        assert str(Syllable("か")) == "か"


class TestDakuten:

    @pytest.mark.parametrize("char,voiced", [
        ("た", "だ"),
        ("て", "で"),
        ("か", "が"),
        ("し", "じ"),
        ("ふ", "ぶ"),
    ])
    def test_voice_char(self, char, voiced):
        assert voice_char(char) == voiced
        assert Syllable(char).to_dakuten() == Syllable(voiced)

    def test_map_covers_unvoiced_k_s_t_h_rows(self):
        rows = {SYLLABLE_INFO[char].row for char in DAKUTEN_MAP}
        assert rows == {Row.K, Row.S, Row.T, Row.H}
        assert len(DAKUTEN_MAP) == 20

    @pytest.mark.parametrize("char", ["な", "ま", "あ", "だ"])
    def test_no_voiced_counterpart(self, char):
        assert voice_char(char) == char
