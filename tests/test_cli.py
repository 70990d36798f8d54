"""
Tests for cli.py - Command line interface.
"""

import json

import pytest

from katsuyo import __version__
from katsuyo.cli import conj_type_arg, main
from katsuyo.conjugations import ConjType


class TestCLIBasics:
    """Tests for basic CLI functionality."""

    def test_version(self, capsys):
        result = main(['--version'])
        assert result == 0
        captured = capsys.readouterr()
        assert 'katsuyo' in captured.out
        assert __version__ in captured.out

    def test_help(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(['--help'])
        assert exc_info.value.code == 0
        captured = capsys.readouterr()
        assert 'Japanese' in captured.out

    def test_no_args(self, capsys):
        """Running without a verb prints help and fails."""
        result = main([])
        assert result == 1
        assert 'usage' in capsys.readouterr().out

    def test_invalid_type(self):
        with pytest.raises(SystemExit) as exc_info:
            main(['たべる', '-t', 'yodan'])
        assert exc_info.value.code == 2


class TestConjArgument:

    @pytest.mark.parametrize("value,expected", [
        ('negative', ConjType.NEGATIVE),
        ('TE', ConjType.TE),
        ('causative-passive', ConjType.CAUSATIVE_PASSIVE),
        ('negative_ba', ConjType.NEGATIVE_BA),
    ])
    def test_parse(self, value, expected):
        assert conj_type_arg(value) is expected

    def test_unknown(self):
        with pytest.raises(SystemExit):
            main(['たべる', '-c', 'subjunctive'])


class TestConjugateCommand:

    def test_table(self, capsys):
        result = main(['ならう', '-k', '習う'])
        assert result == 0
        out = capsys.readouterr().out
        assert '習わない 【ならわない】' in out
        assert 'Conjunctive (~te)' in out

    def test_single_form(self, capsys):
        result = main(['たべる', '-t', 'ichidan', '-c', 'negative'])
        assert result == 0
        assert capsys.readouterr().out.strip() == 'たべない'

    def test_single_form_long(self, capsys):
        result = main(['くる', '-k', '来る', '-t', 'exception', '-c', 'negative', '--long'])
        assert result == 0
        assert capsys.readouterr().out.strip() == '来ません 【きません】'

    def test_single_form_json(self, capsys):
        result = main(['する', '-t', 'exception', '-c', 'zu', '-j'])
        assert result == 0
        data = json.loads(capsys.readouterr().out)
        assert data['kana'] == 'せず'
        assert data['form'] is None
        assert data['inflections'] == ['zu']

    def test_table_json(self, capsys):
        result = main(['いく', '-k', '行く', '-t', 'exception', '--json'])
        assert result == 0
        data = json.loads(capsys.readouterr().out)
        assert data['verb_type'] == 'exception'
        te = [f for f in data['forms'] if f['conj_type'] == 'TE']
        assert te[0]['kanji'] == '行って'

    def test_not_a_verb(self, capsys):
        result = main(['えいご'])
        assert result == 1
        assert 'Error:' in capsys.readouterr().err

    def test_unexpected_ending(self, capsys):
        result = main(['ふ', '-c', 'negative'])
        assert result == 1
        assert 'Unexpected ending' in capsys.readouterr().err


class TestStoreCommands:

    def test_save_and_lookup(self, db_path, capsys):
        assert main(['ならう', '-k', '習う', '--save', '-d', str(db_path)]) == 0
        capsys.readouterr()

        assert main(['--lookup', '習わなかった', '-d', str(db_path)]) == 0
        out = capsys.readouterr().out
        assert '習う' in out
        assert 'Negative past, short' in out

    def test_lookup_no_match(self, db_path, capsys):
        assert main(['--lookup', 'たべた', '-d', str(db_path)]) == 1
        assert 'No saved conjugation' in capsys.readouterr().err

    def test_lookup_default_database_missing(self, tmp_path, monkeypatch, capsys):
        missing = tmp_path / "data" / "katsuyo.db"
        monkeypatch.setattr('katsuyo.settings.DB_PATH', missing)
        assert main(['--lookup', 'たべた']) == 1
        assert 'No saved conjugation' in capsys.readouterr().err
        assert not missing.exists()
        assert not missing.parent.exists()

    def test_save_with_single_form_rejected(self, db_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(['ならう', '-c', 'te', '--save', '-d', str(db_path)])
        assert exc_info.value.code == 2
        assert '--save' in capsys.readouterr().err
        assert not db_path.exists()
