# invitation/schemas.py
# =================================================================================
# 📦 Schemas (modelos de datos Pydantic)
# ---------------------------------------------------------------------------------
# - `Attendance`: aceptar / declinar (valores tal cual los guardaba el sitio).
# - `RSVPResponse`: respuesta congelada que se persiste y se envía a la hoja de
#   cálculo. Se serializa con alias camelCase (fullName, phone, attendance, timestamp).
# - `CountdownBreakdown`: días/horas/minutos/segundos restantes (siempre >= 0).
# =================================================================================

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Attendance(str, Enum):
    ACCEPT = "accept"
    DECLINE = "decline"


def utc_timestamp(moment: datetime | None = None) -> str:
    """Instante en ISO-8601 UTC con milisegundos y sufijo 'Z' (p. ej. 2026-04-01T12:00:00.000Z)."""
    moment = moment or datetime.now(timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class RSVPResponse(BaseModel):
    """Respuesta RSVP completa y validada; no existe actualización ni borrado."""

    full_name: str = Field(alias="fullName")
    phone: str
    attendance: Attendance
    timestamp: str

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def is_accepting(self) -> bool:
        return self.attendance is Attendance.ACCEPT

    def to_payload(self) -> dict[str, str]:
        """Cuerpo JSON para el destino externo y para el almacenamiento local."""
        return self.model_dump(mode="json", by_alias=True)


class CountdownBreakdown(BaseModel):
    days: int = Field(default=0, ge=0)
    hours: int = Field(default=0, ge=0, le=23)
    minutes: int = Field(default=0, ge=0, le=59)
    seconds: int = Field(default=0, ge=0, le=59)

    model_config = ConfigDict(frozen=True)

    @property
    def is_zero(self) -> bool:
        return not (self.days or self.hours or self.minutes or self.seconds)
