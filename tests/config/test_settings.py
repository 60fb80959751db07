"""
Tests for Settings.
"""

import logging
import os

import pytest

from file_manager.config.settings import DEFAULT_CHUNK_SIZE, Settings
from file_manager.exceptions import ConfigurationError

ENV_KEYS = [
    "FILE_MANAGER_USERNAME",
    "FILE_MANAGER_START_DIR",
    "FILE_MANAGER_PROMPT",
    "FILE_MANAGER_CHUNK_SIZE",
    "FILE_MANAGER_LOG_LEVEL",
    "FILE_MANAGER_LOG_FILE",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


class TestSettings:
    def test_defaults(self):
        settings = Settings()

        assert settings.username == "User"
        assert settings.start_dir == os.path.expanduser("~")
        assert settings.prompt == ">"
        assert settings.chunk_size == DEFAULT_CHUNK_SIZE
        assert settings.log_level == logging.WARNING
        assert settings.log_file is None

    def test_environment_values(self, monkeypatch, tmp_path):
        monkeypatch.setenv("FILE_MANAGER_USERNAME", "alice")
        monkeypatch.setenv("FILE_MANAGER_START_DIR", str(tmp_path))
        monkeypatch.setenv("FILE_MANAGER_PROMPT", "$ ")
        monkeypatch.setenv("FILE_MANAGER_CHUNK_SIZE", "1024")
        monkeypatch.setenv("FILE_MANAGER_LOG_LEVEL", "debug")
        monkeypatch.setenv("FILE_MANAGER_LOG_FILE", str(tmp_path / "fm.log"))

        settings = Settings()

        assert settings.username == "alice"
        assert settings.start_dir == str(tmp_path)
        assert settings.prompt == "$ "
        assert settings.chunk_size == 1024
        assert settings.log_level == logging.DEBUG
        assert settings.log_file == str(tmp_path / "fm.log")

    def test_arguments_override_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("FILE_MANAGER_USERNAME", "alice")
        monkeypatch.setenv("FILE_MANAGER_LOG_LEVEL", "ERROR")

        settings = Settings(username="bob", start_dir=str(tmp_path), log_level="info")

        assert settings.username == "bob"
        assert settings.start_dir == str(tmp_path)
        assert settings.log_level == logging.INFO

    def test_relative_start_dir_becomes_absolute(self):
        settings = Settings(start_dir="some/where")

        assert os.path.isabs(settings.start_dir)
        assert settings.start_dir.endswith(os.path.join("some", "where"))

    @pytest.mark.parametrize("value", ["abc", "0", "-5"])
    def test_invalid_chunk_size(self, monkeypatch, value):
        monkeypatch.setenv("FILE_MANAGER_CHUNK_SIZE", value)

        with pytest.raises(ConfigurationError, match="FILE_MANAGER_CHUNK_SIZE"):
            Settings()

    def test_invalid_log_level(self):
        with pytest.raises(ConfigurationError, match="Unknown log level"):
            Settings(log_level="chatty")
