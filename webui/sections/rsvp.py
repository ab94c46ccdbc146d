# webui/sections/rsvp.py
# =================================================================================
# 📝 RSVP: dos presentaciones (sección en línea y modal) sobre UN solo formulario
# ---------------------------------------------------------------------------------
# - Ambas vistas leen/escriben el mismo `RSVPForm` guardado en la sesión.
# - Cada widget sincroniza su campo con `set_field` (que limpia el error del campo).
# - El envío se hace en el callback del botón, así la siguiente ejecución ya
#   pinta errores o la confirmación.
# - El modal se cierra solo `MODAL_AUTOCLOSE_SECONDS` después de confirmar.
# =================================================================================

import html
import time

import streamlit as st
from loguru import logger

from invitation.config import Settings
from invitation.errors import SubmissionClosedError
from invitation.rsvp import FormStatus, RSVPForm
from invitation.schemas import Attendance
from webui.session import get_rsvp_form
from webui.texts import t
from webui.ui import section_header

AUTOCLOSE_FLAG = "_rsvp_modal_autoclose"

ATTENDANCE_LABELS = {
    Attendance.ACCEPT: "rsvp.accept",
    Attendance.DECLINE: "rsvp.decline",
}


# ───────────────────────────────────────────────────────────
# Callbacks (se ejecutan antes de re-dibujar)
# ───────────────────────────────────────────────────────────
def _sync_field(form: RSVPForm, field: str, widget_key: str) -> None:
    form.set_field(field, st.session_state.get(widget_key))


def _submit(form: RSVPForm, prefix: str) -> None:
    try:
        accepted = form.submit()
    except SubmissionClosedError as e:
        logger.warning("Envío RSVP ignorado ({}): {}", prefix, e)
        return
    if accepted and prefix == "modal":
        st.session_state[AUTOCLOSE_FLAG] = True


# ───────────────────────────────────────────────────────────
# Piezas visuales
# ───────────────────────────────────────────────────────────
def _field_error(form: RSVPForm, field: str) -> None:
    message = form.errors.get(field)
    if message:
        st.markdown(f'<p class="field-error">{html.escape(message)}</p>', unsafe_allow_html=True)


def render_form_fields(form: RSVPForm, prefix: str) -> None:
    """Campos + botón de envío; `prefix` separa las claves de cada presentación."""
    keys = {field: f"rsvp_{prefix}_{field}" for field in ("fullName", "phone", "attendance")}

    # El formulario es la fuente de verdad: los widgets se rellenan desde él.
    for field, key in keys.items():
        st.session_state[key] = form.fields[field]

    st.text_input(
        t("rsvp.full_name"),
        key=keys["fullName"],
        placeholder=t("rsvp.full_name_placeholder"),
        on_change=_sync_field,
        args=(form, "fullName", keys["fullName"]),
    )
    _field_error(form, "fullName")

    st.text_input(
        t("rsvp.phone"),
        key=keys["phone"],
        placeholder=t("rsvp.phone_placeholder"),
        on_change=_sync_field,
        args=(form, "phone", keys["phone"]),
    )
    _field_error(form, "phone")

    st.radio(
        t("rsvp.attendance"),
        options=list(ATTENDANCE_LABELS),
        format_func=lambda option: t(ATTENDANCE_LABELS[option]),
        index=None,
        key=keys["attendance"],
        horizontal=True,
        on_change=_sync_field,
        args=(form, "attendance", keys["attendance"]),
    )
    _field_error(form, "attendance")

    st.button(
        t("rsvp.sending") if form.status is FormStatus.SUBMITTING else t("rsvp.submit"),
        key=f"rsvp_{prefix}_submit",
        type="primary",
        disabled=form.status is not FormStatus.EDITING,
        on_click=_submit,
        args=(form, prefix),
    )


def render_confirmation(form: RSVPForm) -> None:
    response = form.response
    if response is None:
        return
    accepting = response.is_accepting
    st.markdown(
        f"""
        <div class="confirmation-card pop-in">
          <div class="checkmark">✓</div>
          <h2 class="confirmation-title">{t("confirm.title")}</h2>
          <p class="confirmation-text">{t("confirm.accept_text") if accepting else t("confirm.decline_text")}</p>
          <div class="confirmation-details">
            <p><strong>{t("confirm.name")}:</strong> {html.escape(response.full_name)}</p>
            <p><strong>{t("confirm.phone")}:</strong> {html.escape(response.phone)}</p>
            <p><strong>{t("confirm.attendance")}:</strong> {t("confirm.accepting") if accepting else t("confirm.declining")}</p>
          </div>
          <p class="confirmation-note">{t("confirm.accept_note") if accepting else t("confirm.decline_note")}</p>
        </div>
        """,
        unsafe_allow_html=True,
    )


# ───────────────────────────────────────────────────────────
# Presentación 1: sección en línea
# ───────────────────────────────────────────────────────────
def render_rsvp_section(settings: Settings) -> None:
    form = get_rsvp_form(settings)
    with st.container(key="rsvp-section"):
        if form.is_final:
            render_confirmation(form)
            return
        section_header(t("rsvp.title"), t("rsvp.subtitle"))
        render_form_fields(form, prefix="inline")


# ───────────────────────────────────────────────────────────
# Presentación 2: modal
# ───────────────────────────────────────────────────────────
def render_modal_body(settings: Settings) -> None:
    """Contenido del modal; tras confirmar espera el autocierre y cierra con un rerun completo."""
    form = get_rsvp_form(settings)
    if form.is_final:
        render_confirmation(form)
        if st.session_state.pop(AUTOCLOSE_FLAG, False):
            time.sleep(settings.modal_autoclose_seconds)
            st.rerun()                                   # Rerun completo: el modal se cierra.
        return
    st.caption(t("rsvp.subtitle"))
    render_form_fields(form, prefix="modal")


@st.dialog(t("rsvp.title"))
def _rsvp_dialog(settings: Settings) -> None:
    render_modal_body(settings)


def open_rsvp_modal(settings: Settings) -> None:
    _rsvp_dialog(settings)
