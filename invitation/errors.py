# invitation/errors.py
# =================================================================================
# ⚠️ Excepciones del núcleo de la invitación
# =================================================================================


class InvitationError(Exception):
    """Base de todos los errores propios del sitio."""


class ValidationError(InvitationError):
    """Un campo no pasó la validación; se muestra junto al campo y es recuperable."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field          # Campo afectado (p. ej. "name").
        self.message = message      # Mensaje legible para la UI / logs.


class SubmissionClosedError(InvitationError):
    """Se intentó enviar el RSVP fuera del estado de edición (ya enviado o en curso)."""


class InvalidProfileError(InvitationError):
    """El identificador de perfil del invitado no es válido para el almacenamiento."""
