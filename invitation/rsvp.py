# invitation/rsvp.py
# =================================================================================
# 📝 Máquina de estados del formulario RSVP
# ---------------------------------------------------------------------------------
# Un único contrato para las dos presentaciones (sección en línea y modal):
#   EDITING ──submit válido──▶ SUBMITTING ──envío resuelto (ok o fallo)──▶ SUBMITTED
#   EDITING ──submit inválido──▶ EDITING (con errores)
#   ALREADY_SUBMITTED: estado inicial si ya hay una respuesta persistida.
# - SUBMITTED / ALREADY_SUBMITTED son terminales para el perfil.
# - El envío externo es "best-effort": su resultado no altera el estado final.
# =================================================================================

from __future__ import annotations

import json
import re
from datetime import datetime
from enum import Enum
from typing import Dict, Mapping, Optional

from loguru import logger
from pydantic import ValidationError as PydanticValidationError

from invitation.errors import SubmissionClosedError
from invitation.schemas import Attendance, RSVPResponse, utc_timestamp
from invitation.sink import NullSink, ResponseSink
from invitation.storage import GUEST_NAME_KEY, RSVP_PAYLOAD_KEY, RSVP_SUBMITTED_KEY, Storage

PHONE_RE = re.compile(r"\+?[\d\s\-()]+", re.ASCII)      # Solo dígitos 0-9.
SUBMITTED_FLAG = "true"

FIELDS = ("fullName", "phone", "attendance")

MESSAGES: Dict[str, str] = {
    "fullName.required": "Full name is required",
    "fullName.incomplete": "Please enter your full name",
    "phone.required": "Phone number is required",
    "phone.invalid": "Phone number is invalid",
    "attendance.required": "Please select your attendance status",
}


class FormStatus(str, Enum):
    EDITING = "editing"
    SUBMITTING = "submitting"
    SUBMITTED = "submitted"
    ALREADY_SUBMITTED = "already_submitted"


def validate(fields: Mapping[str, object]) -> Dict[str, str]:
    """Valida los tres campos a la vez; devuelve {campo: mensaje} (vacío si todo es válido)."""
    errors: Dict[str, str] = {}

    full_name = str(fields.get("fullName") or "").strip()
    if not full_name:
        errors["fullName"] = MESSAGES["fullName.required"]
    elif len(full_name.split(" ")) < 2:
        errors["fullName"] = MESSAGES["fullName.incomplete"]

    phone = str(fields.get("phone") or "")
    if not phone.strip():
        errors["phone"] = MESSAGES["phone.required"]
    elif not PHONE_RE.fullmatch(phone):
        errors["phone"] = MESSAGES["phone.invalid"]

    if _coerce_attendance(fields.get("attendance")) is None:
        errors["attendance"] = MESSAGES["attendance.required"]

    return errors


def _coerce_attendance(value: object) -> Optional[Attendance]:
    if isinstance(value, Attendance):
        return value
    try:
        return Attendance(value)
    except ValueError:
        return None


def load_response(storage: Storage) -> Optional[RSVPResponse]:
    """Reconstruye la respuesta persistida; None si no hay o si está dañada."""
    if storage.get(RSVP_SUBMITTED_KEY) != SUBMITTED_FLAG:
        return None
    raw = storage.get(RSVP_PAYLOAD_KEY)
    if not raw:
        return None
    try:
        return RSVPResponse.model_validate(json.loads(raw))
    except (ValueError, PydanticValidationError) as e:
        logger.warning("RSVP persistido ilegible; se vuelve al formulario vacío: {}", e)
        return None


class RSVPForm:
    """Estado del formulario RSVP; las vistas solo leen `fields`, `errors` y `status`."""

    def __init__(self, storage: Storage, sink: Optional[ResponseSink] = None) -> None:
        self._storage = storage
        self._sink = sink or NullSink()
        self.fields: Dict[str, object] = {"fullName": "", "phone": "", "attendance": None}
        self.errors: Dict[str, str] = {}
        self.response: Optional[RSVPResponse] = load_response(storage)

        if self.response is not None:
            self.status = FormStatus.ALREADY_SUBMITTED
            self.fields = {
                "fullName": self.response.full_name,
                "phone": self.response.phone,
                "attendance": self.response.attendance,
            }
        else:
            self.status = FormStatus.EDITING
            guest_name = (storage.get(GUEST_NAME_KEY) or "").strip()
            if guest_name:
                self.fields["fullName"] = guest_name

    @property
    def is_final(self) -> bool:
        """True cuando ya solo se puede mostrar la confirmación."""
        return self.status in (FormStatus.SUBMITTED, FormStatus.ALREADY_SUBMITTED)

    def set_field(self, name: str, value: object) -> None:
        """Actualiza un campo y limpia su error; fuera de edición no hace nada."""
        if name not in FIELDS:
            raise KeyError(name)
        if self.status is not FormStatus.EDITING:
            return
        if name == "attendance":
            value = _coerce_attendance(value)
        self.fields[name] = value
        self.errors.pop(name, None)

    def submit(self, now: Optional[datetime] = None) -> bool:
        """
        Intenta enviar. Devuelve False si hay errores de validación (quedan en `errors`).
        Con datos válidos: envía al destino externo, persiste localmente y pasa a SUBMITTED
        sin importar el resultado del envío. Fuera de EDITING lanza `SubmissionClosedError`.
        """
        if self.status is not FormStatus.EDITING:
            raise SubmissionClosedError(f"El RSVP no admite envíos en estado '{self.status.value}'")

        self.errors = validate(self.fields)
        if self.errors:
            logger.debug("RSVP con errores de validación: {}", sorted(self.errors))
            return False

        self.status = FormStatus.SUBMITTING
        response = RSVPResponse(
            full_name=str(self.fields["fullName"]),
            phone=str(self.fields["phone"]),
            attendance=self.fields["attendance"],
            timestamp=utc_timestamp(now),
        )
        try:
            delivered = self._sink.deliver(response)
        except Exception:
            # El destino es externo: ni siquiera un fallo inesperado bloquea al invitado.
            logger.exception("Error inesperado en el destino del RSVP")
            delivered = False

        self._storage.set_many({
            RSVP_PAYLOAD_KEY: json.dumps(response.to_payload(), ensure_ascii=False),
            RSVP_SUBMITTED_KEY: SUBMITTED_FLAG,
        })
        self.response = response
        self.status = FormStatus.SUBMITTED
        logger.info("RSVP guardado ({}) | enviado={}", response.attendance.value, delivered)
        return True
