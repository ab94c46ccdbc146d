# invitation/storage.py
# =================================================================================
# 🗄️ Almacenamiento del invitado (equivalente al "localStorage" del navegador)
# ---------------------------------------------------------------------------------
# - `Storage`: interfaz mínima clave → texto (get / set / set_many).
# - `MemoryStorage`: implementación en memoria para tests.
# - `JsonFileStorage`: un archivo JSON por perfil de invitado, escrito de forma
#   atómica (archivo temporal + os.replace).
# - Un archivo ausente o ilegible equivale a "sin valor": nunca es un error fatal.
# =================================================================================

from __future__ import annotations

import json
import os
import re
import tempfile
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

from loguru import logger

from invitation.errors import InvalidProfileError

# Claves persistidas (mismos nombres que en el localStorage del navegador).
GUEST_NAME_KEY = "weddingGuestName"
RSVP_SUBMITTED_KEY = "weddingRSVPSubmitted"
RSVP_PAYLOAD_KEY = "weddingRSVP"

PROFILE_ID_RE = re.compile(r"[A-Za-z0-9_-]{1,64}")


class Storage(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def set_many(self, values: Mapping[str, str]) -> None: ...


class MemoryStorage:
    """Almacenamiento en memoria; sustituye al archivo en los tests."""

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def set_many(self, values: Mapping[str, str]) -> None:
        self._data.update(values)

    def snapshot(self) -> dict[str, str]:
        """Copia del contenido actual (para comparar estados en tests)."""
        return dict(self._data)


class JsonFileStorage:
    """Persistencia por perfil: `<directory>/<profile_id>.json`."""

    def __init__(self, directory: Path | str, profile_id: str) -> None:
        if not is_valid_profile_id(profile_id):
            raise InvalidProfileError(f"Identificador de perfil inválido: {profile_id!r}")
        self.directory = Path(directory)
        self.profile_id = profile_id
        self.path = self.directory / f"{profile_id}.json"

    # ------------------------------------------------------------------
    # Helpers internos
    def _load(self) -> dict[str, str]:
        """Lee el archivo del perfil; cualquier problema se trata como vacío."""
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Almacenamiento ilegible en {} ({}); se ignora", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Almacenamiento con formato inesperado en {}; se ignora", self.path)
            return {}
        return {k: v for k, v in data.items() if isinstance(k, str) and isinstance(v, str)}

    def _save(self, data: Mapping[str, str]) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        # Temporal con nombre único: dos sesiones del mismo perfil no comparten archivo.
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=self.directory, prefix=f"{self.profile_id}.", suffix=".tmp", delete=False
        ) as f:
            json.dump(dict(data), f, indent=2, ensure_ascii=False)
        try:
            os.replace(f.name, self.path)
        except OSError:
            os.unlink(f.name)
            raise

    # ------------------------------------------------------------------
    # Interfaz pública
    def get(self, key: str) -> str | None:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        self.set_many({key: value})

    def set_many(self, values: Mapping[str, str]) -> None:
        """Escribe todas las claves en una sola escritura atómica."""
        data = self._load()
        data.update(values)
        self._save(data)


def is_valid_profile_id(profile_id: str | None) -> bool:
    return bool(profile_id) and PROFILE_ID_RE.fullmatch(profile_id) is not None
