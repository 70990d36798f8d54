"""
Shared fixtures for katsuyo tests.
"""

import pytest

from katsuyo.conjugations import VerbType
from katsuyo.word import Word


@pytest.fixture
def make_verb():
    """Factory: make_verb(kana, kanji=None, verb_type=VerbType.GODAN) -> Verb."""
    def _make(kana, kanji=None, verb_type=VerbType.GODAN):
        return Word(kana, kanji).into_verb(verb_type)
    return _make


@pytest.fixture
def db_path(tmp_path):
    """Path to a fresh SQLite database file."""
    return tmp_path / "katsuyo.db"
