# invitation/gate.py
# =================================================================================
# 🚪 Puerta de identidad (pantalla de bienvenida)
# ---------------------------------------------------------------------------------
# - Al montar, consulta si ya hay un nombre de invitado guardado.
# - Si lo hay, la puerta nunca se muestra y el nombre se reporta de inmediato.
# - Si no, bloquea el resto del sitio hasta recibir un nombre válido (>= 2 chars).
# - Un perfil guarda un único nombre: no hay camino para sobrescribirlo.
# =================================================================================

from __future__ import annotations

from loguru import logger

from invitation.errors import ValidationError
from invitation.storage import GUEST_NAME_KEY, Storage

MIN_NAME_LENGTH = 2


class IdentityGate:
    def __init__(self, storage: Storage) -> None:
        self._storage = storage
        self.guest_name: str | None = self.stored_name()

    def stored_name(self) -> str | None:
        name = (self._storage.get(GUEST_NAME_KEY) or "").strip()
        return name or None

    @property
    def is_open(self) -> bool:
        """True mientras la puerta deba bloquear el sitio."""
        return self.guest_name is None

    def submit(self, name: str) -> str:
        """
        Valida y guarda el nombre; devuelve el nombre que queda reportado.
        Lanza `ValidationError` si el nombre recortado tiene menos de 2 caracteres.
        """
        trimmed = (name or "").strip()
        if len(trimmed) < MIN_NAME_LENGTH:
            raise ValidationError("name", "name too short")

        existing = self.stored_name()
        if existing is not None:
            # Primer nombre guardado gana; el nuevo valor solo queda en el log.
            logger.info("Nombre ya registrado para este perfil; se conserva '{}'", existing)
            self.guest_name = existing
            return existing

        self._storage.set(GUEST_NAME_KEY, trimmed)
        self.guest_name = trimmed
        logger.info("Invitado registrado: '{}'", trimmed)
        return trimmed
