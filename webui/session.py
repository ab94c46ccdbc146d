# webui/session.py
# =================================================================================
# 🔗 Enlace entre Streamlit y el núcleo de la invitación
# ---------------------------------------------------------------------------------
# - Configuración y logging una vez por proceso (cache_resource).
# - Perfil del invitado: identificador opaco guardado en una cookie del navegador.
#   `?guest=...` en la URL solo se usa si el navegador aún no tiene cookie
#   (p. ej. el mismo invitado abriendo su enlace en otro dispositivo).
# - Almacenamiento del perfil, puerta de identidad y formulario RSVP compartido
#   entre la sección en línea y el modal (una sola instancia por sesión).
# =================================================================================

import uuid
from typing import Optional

import streamlit as st
from loguru import logger
from streamlit_cookies_controller import CookieController

from invitation.config import Settings, load_settings
from invitation.gate import IdentityGate
from invitation.logging_setup import setup_logging
from invitation.rsvp import RSVPForm
from invitation.sink import SheetSink
from invitation.storage import JsonFileStorage, is_valid_profile_id

PROFILE_PARAM = "guest"
PROFILE_COOKIE = "wedding_guest"
COOKIE_MAX_AGE = 400 * 24 * 3600        # Tope de vida que aceptan los navegadores (~400 días).


@st.cache_resource(show_spinner=False)
def get_settings() -> Settings:
    settings = load_settings()
    setup_logging(settings)
    logger.info(
        "[BOOT] WEDDING_DATETIME={} | STORAGE_DIR={} | SINK_SET={}",
        settings.wedding_datetime.isoformat(),
        settings.storage_dir,
        "yes" if settings.rsvp_sink_url else "no",
    )
    return settings


def resolve_profile_id(cookie_value: Optional[str], query_value: Optional[str]) -> Optional[str]:
    """La cookie del navegador manda; el query param es solo respaldo. None si ninguno sirve."""
    for candidate in (cookie_value, query_value):
        if is_valid_profile_id(candidate):
            return candidate
    return None


def read_profile_cookie() -> Optional[str]:
    # Cookies de la petición inicial de la sesión (lectura síncrona).
    return st.context.cookies.get(PROFILE_COOKIE)


def write_profile_cookie(profile_id: str) -> None:
    CookieController(key="guest_cookie").set(PROFILE_COOKIE, profile_id, max_age=COOKIE_MAX_AGE)


def current_profile_id() -> str:
    """Devuelve el perfil de esta sesión; lo crea y lo fija en la cookie si hace falta."""
    profile_id = st.session_state.get("profile_id")
    if profile_id:
        return profile_id

    cookie_value = read_profile_cookie()
    profile_id = resolve_profile_id(cookie_value, st.query_params.get(PROFILE_PARAM))
    if profile_id is None:
        profile_id = uuid.uuid4().hex
        logger.info("Nuevo perfil de invitado: {}", profile_id)
    if profile_id != cookie_value:
        write_profile_cookie(profile_id)

    st.session_state["profile_id"] = profile_id
    return profile_id


def get_storage(settings: Settings) -> JsonFileStorage:
    return JsonFileStorage(settings.storage_dir, current_profile_id())


def get_gate(settings: Settings) -> IdentityGate:
    return IdentityGate(get_storage(settings))


def get_rsvp_form(settings: Settings) -> RSVPForm:
    """Instancia única del formulario RSVP para la sesión (inline + modal)."""
    if "rsvp_form" not in st.session_state:
        sink = SheetSink(settings.rsvp_sink_url, timeout=settings.rsvp_sink_timeout)
        st.session_state["rsvp_form"] = RSVPForm(get_storage(settings), sink)
    return st.session_state["rsvp_form"]
