# tests/test_config.py
# Lectura de configuración desde el entorno.

from datetime import datetime
from pathlib import Path

import pytest

from invitation import config
from invitation.config import load_settings

ENV_VARS = (
    "WEDDING_DATETIME",
    "RSVP_SINK_URL",
    "RSVP_SINK_TIMEOUT",
    "STORAGE_DIR",
    "ASSETS_DIR",
    "MUSIC_FILE",
    "GATE_CLOSE_DELAY_MS",
    "MODAL_AUTOCLOSE_SECONDS",
    "LOG_LEVEL",
    "LOG_FILE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Ningún .env del directorio de trabajo debe colarse en estos tests.
    monkeypatch.setattr(config, "load_dotenv", lambda *a, **kw: False)


def test_defaults():
    s = load_settings()
    assert s.wedding_datetime == datetime(2026, 4, 3, 14, 0, 0)
    assert s.rsvp_sink_url == ""
    assert s.rsvp_sink_timeout == 10.0
    assert s.storage_dir == Path("data/guests")
    assert s.music_path == Path("assets") / "music.mp3"
    assert s.gate_close_delay_ms == 300
    assert s.modal_autoclose_seconds == 2.0
    assert s.log_level == "INFO"
    assert s.log_file == ""


def test_values_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("WEDDING_DATETIME", "2027-01-02T10:30:00")
    monkeypatch.setenv("RSVP_SINK_URL", "  https://example.com/hook  ")
    monkeypatch.setenv("RSVP_SINK_TIMEOUT", "2.5")
    monkeypatch.setenv("STORAGE_DIR", str(tmp_path))
    monkeypatch.setenv("MUSIC_FILE", "song.mp3")
    monkeypatch.setenv("GATE_CLOSE_DELAY_MS", "0")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    s = load_settings()
    assert s.wedding_datetime == datetime(2027, 1, 2, 10, 30)
    assert s.rsvp_sink_url == "https://example.com/hook"
    assert s.rsvp_sink_timeout == 2.5
    assert s.storage_dir == tmp_path
    assert s.music_path.name == "song.mp3"
    assert s.gate_close_delay_ms == 0
    assert s.log_level == "DEBUG"


def test_malformed_values_fall_back(monkeypatch):
    monkeypatch.setenv("WEDDING_DATETIME", "el tres de abril")
    monkeypatch.setenv("RSVP_SINK_TIMEOUT", "diez")
    monkeypatch.setenv("GATE_CLOSE_DELAY_MS", "300ms")

    s = load_settings()
    assert s.wedding_datetime == datetime(2026, 4, 3, 14, 0, 0)
    assert s.rsvp_sink_timeout == 10.0
    assert s.gate_close_delay_ms == 300


def test_negative_delays_are_clamped(monkeypatch):
    monkeypatch.setenv("GATE_CLOSE_DELAY_MS", "-50")
    monkeypatch.setenv("MODAL_AUTOCLOSE_SECONDS", "-1")
    s = load_settings()
    assert s.gate_close_delay_ms == 0
    assert s.modal_autoclose_seconds == 0.0


def test_setup_logging_writes_file_once(monkeypatch, tmp_path):
    import sys

    from loguru import logger

    from invitation import logging_setup

    monkeypatch.setattr(logging_setup, "_configured", False)
    log_file = tmp_path / "logs" / "invite.log"
    monkeypatch.setenv("LOG_FILE", str(log_file))
    settings = load_settings()

    logging_setup.setup_logging(settings)
    logging_setup.setup_logging(settings)          # segunda llamada: no duplica sinks
    logger.info("hola desde el test")
    logger.remove()
    logger.add(sys.stderr)

    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert sum("hola desde el test" in line for line in lines) == 1
