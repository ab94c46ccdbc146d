# webui/layouts.py
# =================================================================================
# 🧩 Ensamblajes alternativos de la invitación
# ---------------------------------------------------------------------------------
# - start_page(): configuración de página, estilos, música y puerta de identidad.
# - render_single_page(): todas las secciones apiladas (RSVP en línea al final).
# - render_paged(): una sección a la vez, guiada por `SectionProgression`.
# =================================================================================

import streamlit as st

from invitation.config import Settings
from invitation.progression import SectionProgression
from webui.music import render_music_toggle
from webui.sections.details import render_details
from webui.sections.gallery import render_gallery
from webui.sections.hero import render_hero
from webui.sections.rsvp import render_rsvp_section
from webui.sections.story import render_story
from webui.sections.welcome import render_welcome
from webui.session import get_gate, get_settings
from webui.texts import t
from webui.ui import apply_global_styles, render_footer, scroll_to_top

PROGRESSION_KEY = "progression"
SCROLL_FLAG = "_scroll_top"


def start_page() -> tuple[Settings, str]:
    """Prepara la página y devuelve (settings, nombre del invitado); la puerta detiene el script si sigue abierta."""
    st.set_page_config(
        page_title=t("page.title"),
        page_icon="💍",
        layout="wide",
        initial_sidebar_state="collapsed",
    )
    settings = get_settings()
    apply_global_styles(settings.assets_dir)

    gate = get_gate(settings)
    if gate.is_open:
        render_welcome(gate, settings)               # Llama a st.stop() mientras siga abierta.

    render_music_toggle(settings)
    return settings, gate.guest_name


def _render_section(key: str, settings: Settings, guest_name: str) -> None:
    if key == "hero":
        render_hero(settings, guest_name)
    elif key == "story":
        render_story()
    elif key == "details":
        render_details()
    elif key == "gallery":
        render_gallery(settings)
    elif key == "rsvp":
        render_rsvp_section(settings)
    else:
        raise ValueError(f"Sección desconocida: {key}")


# ───────────────────────────────────────────────────────────
# Ensamblaje 1: una sola página
# ───────────────────────────────────────────────────────────
def render_single_page(settings: Settings, guest_name: str) -> None:
    for key in ("hero", "story", "details", "gallery", "rsvp"):
        with st.container(key=f"section-{key}"):
            _render_section(key, settings, guest_name)
    render_footer()


# ───────────────────────────────────────────────────────────
# Ensamblaje 2: paginado
# ───────────────────────────────────────────────────────────
def _request_scroll(_index: int) -> None:
    st.session_state[SCROLL_FLAG] = True


def get_progression() -> SectionProgression:
    if PROGRESSION_KEY not in st.session_state:
        st.session_state[PROGRESSION_KEY] = SectionProgression(on_move=_request_scroll)
    return st.session_state[PROGRESSION_KEY]


def _render_section_nav(progression: SectionProgression) -> None:
    """Un botón por sección desbloqueada (navegar solo a lo ya abierto)."""
    unlocked = sorted(progression.unlocked)
    cols = st.columns(len(progression.sections))
    for index, section in enumerate(progression.sections):
        with cols[index]:
            st.button(
                section.title,
                key=f"nav_{section.key}",
                disabled=index not in unlocked or index == progression.current,
                on_click=progression.navigate,
                args=(index,),
            )


def render_paged(settings: Settings, guest_name: str) -> None:
    progression = get_progression()

    if progression.is_last:
        with st.container(key="back-to-start"):
            st.button(t("nav.back_to_start"), key="back_to_start", on_click=progression.back_to_start)

    _render_section_nav(progression)

    section = progression.current_section
    with st.container(key=f"section-{section.key}"):
        _render_section(section.key, settings, guest_name)

    if section.next_label:
        with st.container(key="envelope"):
            st.button(
                f"✉️ {section.next_label} · {t('nav.open')}",
                key=f"next_{section.key}",
                on_click=progression.advance,
            )

    render_footer()

    if st.session_state.pop(SCROLL_FLAG, False):
        scroll_to_top(marker=section.key)
