from __future__ import annotations

from pathlib import Path

from config import AppSettings


def test_defaults():
    settings = AppSettings()

    assert settings.log_level == "INFO"
    assert settings.form.date_format == "dd/MM/yyyy"
    assert settings.form.name_max_length == 70
    assert settings.form.email_max_length == 60
    assert settings.form.salary_decimals == 2


def test_from_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("SELLERDESK_DATABASE_PATH", str(tmp_path / "x.sqlite3"))
    monkeypatch.setenv("SELLERDESK_LOG_LEVEL", "debug")

    settings = AppSettings.from_env()

    assert settings.database_path == Path(tmp_path / "x.sqlite3")
    assert settings.log_level == "DEBUG"


def test_from_env_without_overrides(monkeypatch):
    monkeypatch.delenv("SELLERDESK_DATABASE_PATH", raising=False)
    monkeypatch.delenv("SELLERDESK_LOG_LEVEL", raising=False)

    assert AppSettings.from_env() == AppSettings()
