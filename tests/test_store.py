"""
Tests for store.py - SQLite persistence of conjugation tables.
"""

import pytest

from katsuyo.conjugations import ConjType, VerbType
from katsuyo.models import ConjugationTable
from katsuyo.store import (
    ConjugatedEntry,
    VerbEntry,
    find_forms,
    lookup_surface,
    save_table,
    session_scope,
)
from sqlalchemy import func, select


@pytest.fixture
def narau_table(make_verb):
    return ConjugationTable.from_verb(make_verb("ならう", "習う"))


class TestSaveTable:

    def test_save(self, db_path, narau_table):
        with session_scope(db_path) as session:
            entry = save_table(session, narau_table)
            assert entry.id is not None

        with session_scope(db_path) as session:
            forms = find_forms(session, "ならう")
            assert len(forms) == len(narau_table.forms)
            assert forms[0].kana == "ならう"

    def test_resave_replaces(self, db_path, narau_table):
        with session_scope(db_path) as session:
            save_table(session, narau_table)
        with session_scope(db_path) as session:
            save_table(session, narau_table)

        with session_scope(db_path) as session:
            assert session.scalar(select(func.count()).select_from(VerbEntry)) == 1
            count = session.scalar(select(func.count()).select_from(ConjugatedEntry))
            assert count == len(narau_table.forms)

    def test_same_kana_different_type(self, db_path, make_verb):
        with session_scope(db_path) as session:
            save_table(session, ConjugationTable.from_verb(make_verb("きる", "切る")))
            save_table(session, ConjugationTable.from_verb(make_verb("きる", "着る", VerbType.ICHIDAN)))

        with session_scope(db_path) as session:
            assert len(find_forms(session, "きる", "切る")) > 0
            assert len(find_forms(session, "きる")) == 2 * len(find_forms(session, "きる", "着る"))

    def test_rollback_on_error(self, db_path, narau_table):
        with pytest.raises(RuntimeError):
            with session_scope(db_path) as session:
                save_table(session, narau_table)
                raise RuntimeError("boom")

        with session_scope(db_path) as session:
            assert find_forms(session, "ならう") == []


class TestLookupSurface:

    def test_lookup_kana(self, db_path, narau_table):
        with session_scope(db_path) as session:
            save_table(session, narau_table)

        with session_scope(db_path) as session:
            matches = lookup_surface(session, "ならわない")
            assert len(matches) == 1
            verb, conj = matches[0]
            assert verb.kanji == "習う"
            assert conj.conj_type == int(ConjType.NEGATIVE)
            assert conj.form == "short"

    def test_lookup_kanji(self, db_path, narau_table):
        with session_scope(db_path) as session:
            save_table(session, narau_table)
            matches = lookup_surface(session, "習って")
            assert [ConjType(c.conj_type) for _, c in matches] == [ConjType.TE]

    def test_lookup_ambiguous(self, db_path, make_verb):
        # Ichidan potential and passive share a surface form
        with session_scope(db_path) as session:
            save_table(session, ConjugationTable.from_verb(make_verb("たべる", "食べる", VerbType.ICHIDAN)))
            matches = lookup_surface(session, "たべられる")
            conj_types = {ConjType(c.conj_type) for _, c in matches}
            assert conj_types == {ConjType.POTENTIAL, ConjType.PASSIVE}

    def test_lookup_missing(self, db_path):
        with session_scope(db_path) as session:
            assert lookup_surface(session, "たべた") == []
