# invitation/config.py
# =================================================================================
# ⚙️ Configuración por entorno (.env)
# ---------------------------------------------------------------------------------
# - Carga el archivo .env con python-dotenv lo antes posible.
# - Lee cada valor con os.getenv y, si viene mal formado, vuelve al default
#   registrando un warning (nunca rompe el arranque).
# - Empaqueta todo en un modelo Pydantic inmutable (`Settings`).
# =================================================================================

import os
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger
from pydantic import BaseModel, ConfigDict

DEFAULT_WEDDING_DATETIME = "2026-04-03T14:00:00"   # Fecha/hora de la boda (hora local, sin zona).


class Settings(BaseModel):
    """Valores de configuración del sitio ya parseados."""

    wedding_datetime: datetime
    rsvp_sink_url: str = ""
    rsvp_sink_timeout: float = 10.0
    storage_dir: Path = Path("data/guests")
    assets_dir: Path = Path("assets")
    music_file: str = "music.mp3"
    gate_close_delay_ms: int = 300
    modal_autoclose_seconds: float = 2.0
    log_level: str = "INFO"
    log_file: str = ""

    model_config = ConfigDict(frozen=True)

    @property
    def music_path(self) -> Path:
        return self.assets_dir / self.music_file


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("{}={!r} no es un entero; se usa {}", name, raw, default)
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("{}={!r} no es un número; se usa {}", name, raw, default)
        return default


def _env_datetime(name: str, default: str) -> datetime:
    raw = (os.getenv(name) or "").strip()
    try:
        return datetime.fromisoformat(raw or default)
    except ValueError:
        logger.warning("{}={!r} no es una fecha ISO válida; se usa {}", name, raw, default)
        return datetime.fromisoformat(default)


def load_settings(env_file: str | None = None) -> Settings:
    """
    Construye `Settings` a partir del entorno.
    Si se pasa `env_file`, se carga ese .env (útil en scripts); si no, el del cwd.
    Las variables ya presentes en el entorno tienen prioridad sobre el archivo.
    """
    if env_file:
        load_dotenv(dotenv_path=env_file)
    else:
        load_dotenv()

    return Settings(
        wedding_datetime=_env_datetime("WEDDING_DATETIME", DEFAULT_WEDDING_DATETIME),
        rsvp_sink_url=(os.getenv("RSVP_SINK_URL") or "").strip(),
        rsvp_sink_timeout=_env_float("RSVP_SINK_TIMEOUT", 10.0),
        storage_dir=Path(os.getenv("STORAGE_DIR") or "data/guests"),
        assets_dir=Path(os.getenv("ASSETS_DIR") or "assets"),
        music_file=os.getenv("MUSIC_FILE") or "music.mp3",
        gate_close_delay_ms=max(0, _env_int("GATE_CLOSE_DELAY_MS", 300)),
        modal_autoclose_seconds=max(0.0, _env_float("MODAL_AUTOCLOSE_SECONDS", 2.0)),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        log_file=(os.getenv("LOG_FILE") or "").strip(),
    )
