# webui/music.py
# =================================================================================
# 🎵 Botón de música de fondo (play / pausa de una pista en bucle)
# =================================================================================

from typing import MutableMapping

import streamlit as st
from loguru import logger

from invitation.config import Settings
from webui.texts import t

MUSIC_KEY = "music_on"


def toggle_music(state: MutableMapping) -> bool:
    """Invierte el estado de la música y devuelve el nuevo valor."""
    state[MUSIC_KEY] = not state.get(MUSIC_KEY, False)
    return state[MUSIC_KEY]


@st.cache_resource(show_spinner=False)
def _load_track(path: str) -> bytes | None:
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        logger.warning("Pista de música no disponible ({}): {}", path, e)
        return None


def render_music_toggle(settings: Settings) -> None:
    is_on = st.session_state.get(MUSIC_KEY, False)
    with st.container(key="music-toggle"):
        st.button(
            t("music.on") if is_on else t("music.off"),
            key="music_button",
            on_click=toggle_music,
            args=(st.session_state,),
        )
    if is_on:
        track = _load_track(str(settings.music_path))
        if track:
            st.audio(track, format="audio/mpeg", loop=True, autoplay=True)
