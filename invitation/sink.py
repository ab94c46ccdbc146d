# invitation/sink.py
# =================================================================================
# 📤 Envío "best-effort" de la respuesta RSVP a la hoja de cálculo externa
# ---------------------------------------------------------------------------------
# - POST JSON {fullName, phone, attendance, timestamp} al endpoint configurado.
# - La respuesta del servidor no se lee: el resultado no cambia el flujo.
# - Cualquier fallo de red se registra y se enmascara (nunca llega al invitado).
# - Sin reintentos.
# =================================================================================

from __future__ import annotations

from typing import Protocol

import requests
from loguru import logger

from invitation.schemas import RSVPResponse

JSON_HEADERS = {"Content-Type": "application/json"}


class ResponseSink(Protocol):
    def deliver(self, response: RSVPResponse) -> bool: ...


class SheetSink:
    """Destino HTTP (p. ej. un Google Apps Script que escribe en una hoja)."""

    def __init__(self, url: str, timeout: float = 10.0, session: requests.Session | None = None) -> None:
        self.url = url
        self.timeout = timeout
        self._http = session or requests

    def deliver(self, response: RSVPResponse) -> bool:
        """Devuelve True si la petición salió sin error de red; nunca lanza."""
        if not self.url:
            logger.warning("RSVP_SINK_URL no configurado; la respuesta solo se guarda localmente")
            return False

        payload = response.to_payload()
        logger.info("Enviando RSVP de '{}' a la hoja de cálculo…", response.full_name)
        try:
            self._http.post(self.url, json=payload, headers=JSON_HEADERS, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.exception("Fallo enviando RSVP (se guarda localmente igualmente): {}", e)
            return False
        logger.info("RSVP enviado a la hoja de cálculo")
        return True


class NullSink:
    """Destino que descarta la respuesta (modo local / pruebas)."""

    def deliver(self, response: RSVPResponse) -> bool:
        logger.debug("NullSink: RSVP de '{}' no se envía", response.full_name)
        return False
