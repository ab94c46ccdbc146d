# webui/sections/welcome.py
# =================================================================================
# 🚪 Pantalla de bienvenida (puerta de identidad)
# - Bloquea el resto del sitio hasta que el invitado escribe su nombre.
# - Tras un nombre válido: pequeña pausa para la animación de salida y rerun.
# =================================================================================

import time

import streamlit as st

from invitation.config import Settings
from invitation.content import COUPLE, DATE_LABEL
from invitation.errors import ValidationError
from invitation.gate import IdentityGate
from webui.texts import t


def render_welcome(gate: IdentityGate, settings: Settings) -> None:
    """Dibuja la puerta y detiene el script mientras siga abierta."""
    st.markdown(
        f"""
        <div class="welcome-card fade-in">
          <div class="wave wave-top"></div>
          <h1 class="welcome-title">{t("welcome.title")}</h1>
          <p class="welcome-subtitle">{t("welcome.subtitle")}</p>
          <h2 class="couple-names">{COUPLE[0]} &amp; {COUPLE[1]}</h2>
          <p class="welcome-date">{DATE_LABEL}</p>
        </div>
        """,
        unsafe_allow_html=True,
    )

    with st.form("welcome_form"):
        name = st.text_input(
            t("welcome.label"),
            key="welcome_name",
            placeholder=t("welcome.placeholder"),
        )
        entered = st.form_submit_button(t("welcome.submit"), type="primary")

    if entered:
        try:
            gate.submit(name)
        except ValidationError:
            st.error(t("welcome.error"))
        else:
            st.markdown('<div class="welcome-exit"></div>', unsafe_allow_html=True)
            time.sleep(settings.gate_close_delay_ms / 1000)
            st.rerun()

    st.stop()
