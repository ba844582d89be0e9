from __future__ import annotations

from pathlib import Path

import pytest

from redirector.config import Settings, get_paths_file_from_env, get_strict_load_from_env


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("REDIRECT_PATHS_FILE", "REDIRECT_STRICT_LOAD", "LOG_LEVEL", "APP_VERSION"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    s = Settings.from_env()
    assert s == Settings(paths_file=None, strict_load=True, log_level="INFO", app_version="0.1.0")


def test_paths_file(monkeypatch):
    monkeypatch.setenv("REDIRECT_PATHS_FILE", " /etc/redirects.yaml ")
    assert get_paths_file_from_env() == Path("/etc/redirects.yaml")


def test_blank_paths_file_is_unset(monkeypatch):
    monkeypatch.setenv("REDIRECT_PATHS_FILE", "   ")
    assert get_paths_file_from_env() is None


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("true", True), ("1", True), ("YES", True), ("on", True), ("false", False), ("0", False), ("No", False), ("off", False)],
)
def test_strict_load_values(monkeypatch, raw, expected):
    monkeypatch.setenv("REDIRECT_STRICT_LOAD", raw)
    assert get_strict_load_from_env() is expected


def test_strict_load_invalid(monkeypatch):
    monkeypatch.setenv("REDIRECT_STRICT_LOAD", "maybe")
    with pytest.raises(ValueError, match="REDIRECT_STRICT_LOAD"):
        Settings.from_env()


def test_log_level_upper(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert Settings.from_env().log_level == "DEBUG"


def test_log_level_invalid(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(ValueError, match="LOG_LEVEL"):
        Settings.from_env()
