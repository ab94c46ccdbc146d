# conftest.py
# -------------------------------------------------------------------------------------
# Archivo: conftest.py (raíz del proyecto)
# Propósito: Configurar pytest para la invitación.
#            - Fixtures comunes: almacenamiento en memoria, destinos RSVP falsos.
#            - Tests de UI end-to-end (marcados `ui`) solo si RUN_UI_TESTS=1 y la app
#              de Streamlit responde en ENTRY_URL; si no, se saltan con motivo claro.
# Uso de variables de entorno (todas opcionales):
#   ENTRY_URL="http://localhost:8501"               --> URL base de la UI (Streamlit).
#   RUN_UI_TESTS="0|1"                              --> Habilita los tests `ui`.
#   PYTEST_PREFLIGHT_TIMEOUT="30"                   --> Segundos para esperar la UI.
#   PYTEST_PREFLIGHT_POLL="1.0"                     --> Intervalo de reintento (seg).
# -------------------------------------------------------------------------------------

from __future__ import annotations

import os
import time

import pytest
import requests

from invitation.schemas import RSVPResponse
from invitation.storage import MemoryStorage

# =========================
# Configuración por defecto
# =========================
ENTRY_URL = os.getenv("ENTRY_URL", "http://localhost:8501")              # URL base de la UI
RUN_UI_TESTS = os.getenv("RUN_UI_TESTS", "0") == "1"                     # Si True, corremos tests `ui`
PREFLIGHT_TIMEOUT = int(os.getenv("PYTEST_PREFLIGHT_TIMEOUT", "30"))     # Tiempo máximo esperando UI
PREFLIGHT_POLL = float(os.getenv("PYTEST_PREFLIGHT_POLL", "1.0"))        # Intervalo entre intentos UI


# =====================
# Helpers de preflight
# =====================
def _server_is_up(base_url: str) -> bool:
    """Devuelve True si la UI responde algo 'OK-ish' (<500)."""
    try:
        r = requests.get(base_url, timeout=2)
    except requests.exceptions.RequestException:
        return False
    return r.status_code < 500


def _wait_for_ui(base_url: str, timeout_s: int, poll_s: float) -> bool:
    """Espera a que la UI responda dentro del timeout, consultando periódicamente."""
    deadline = time.monotonic() + timeout_s
    ok = _server_is_up(base_url)
    while not ok and time.monotonic() < deadline:
        time.sleep(poll_s)
        ok = _server_is_up(base_url)
    return ok


# ===========================
# Hooks de ciclo de ejecución
# ===========================
def pytest_configure(config):
    config.addinivalue_line("markers", "ui: test end-to-end contra la app de Streamlit en marcha")


def pytest_collection_modifyitems(config, items):
    """Salta los tests `ui` salvo que estén habilitados y la UI esté arriba."""
    ui_items = [item for item in items if item.get_closest_marker("ui") is not None]
    if not ui_items:
        return

    if not RUN_UI_TESTS:
        reason = "Tests de UI deshabilitados (exporta RUN_UI_TESTS=1 con la app corriendo)"
    elif not _wait_for_ui(ENTRY_URL, PREFLIGHT_TIMEOUT, PREFLIGHT_POLL):
        reason = f"No pude contactar la UI en {ENTRY_URL} tras {PREFLIGHT_TIMEOUT}s"
    else:
        return

    skip_ui = pytest.mark.skip(reason=reason)
    for item in ui_items:
        item.add_marker(skip_ui)


# ===============================
# Fixtures de utilidad
# ===============================
class RecordingSink:
    """Destino falso que guarda lo recibido y simula éxito."""

    def __init__(self) -> None:
        self.delivered: list[RSVPResponse] = []

    def deliver(self, response: RSVPResponse) -> bool:
        self.delivered.append(response)
        return True


class FailingSink(RecordingSink):
    """Destino falso que simula un fallo de red (lo registra y devuelve False)."""

    def deliver(self, response: RSVPResponse) -> bool:
        self.delivered.append(response)
        return False


class ExplodingSink(RecordingSink):
    """Destino falso que lanza una excepción inesperada."""

    def deliver(self, response: RSVPResponse) -> bool:
        self.delivered.append(response)
        raise RuntimeError("sink roto")


@pytest.fixture()
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture()
def recording_sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture()
def failing_sink() -> FailingSink:
    return FailingSink()


@pytest.fixture()
def exploding_sink() -> ExplodingSink:
    return ExplodingSink()


@pytest.fixture(scope="session")
def entry_url() -> str:
    """Expone la URL base de la UI para los tests end-to-end."""
    return ENTRY_URL
