"""Tests for settings and logging setup."""

import logging

import pytest

from lab_access_portal.app.core.config import Settings, get_data_path
from lab_access_portal.app.core.logging_config import normalize_level, setup_logging


@pytest.mark.parametrize(
    "given, expected",
    [("debug", "DEBUG"), (" Warning ", "WARNING"), ("verbose", "INFO"), ("", "INFO"), (None, "INFO")],
)
def test_normalize_level(given, expected):
    assert normalize_level(given) == expected


def test_settings_normalise_unknown_log_level():
    config = Settings(log_level="verbose")
    assert config.log_level == "INFO"
    # Uvicorn receives the lower-cased value and must accept it
    assert config.log_level.lower() in {"critical", "error", "warning", "info", "debug"}


def test_relative_data_file_resolves_against_project_root():
    path = get_data_path(Settings(data_file="db.json"))
    assert path.is_absolute()
    assert path.name == "db.json"
    assert path.parent.joinpath("lab_access_portal").is_dir()


def test_absolute_data_file_is_kept(tmp_path):
    target = tmp_path / "data" / "db.json"
    assert get_data_path(Settings(data_file=str(target))) == target


def test_setup_logging_writes_log_file(tmp_path, monkeypatch):
    # Configure a fresh root logger instead of pytest's
    root = logging.RootLogger(logging.WARNING)
    monkeypatch.setattr(logging, "root", root)
    logfile = tmp_path / "logs" / "portal.log"

    setup_logging("debug", str(logfile))
    try:
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2
        setup_logging("info", str(logfile))
        assert len(root.handlers) == 2

        logging.getLogger().info("hello from the portal")
        for handler in root.handlers:
            handler.flush()
        assert "[INFO] root: hello from the portal" in logfile.read_text()
    finally:
        for handler in root.handlers:
            handler.close()
