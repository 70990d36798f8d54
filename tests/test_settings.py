"""
Tests for settings.py - environment configuration.
"""

import logging

from katsuyo import settings


class TestLogLevel:

    def test_named_level(self, monkeypatch):
        monkeypatch.setattr(settings, 'LOG_LEVEL', 'INFO')
        assert settings.get_log_level() == logging.INFO

    def test_unknown_level_falls_back(self, monkeypatch):
        monkeypatch.setattr(settings, 'LOG_LEVEL', 'LOUD')
        assert settings.get_log_level() == logging.WARNING


class TestPaths:

    def test_default_db_in_data_dir(self):
        assert settings.DEFAULT_DB_PATH.parent == settings.DATA_DIR
