# webui/sections/details.py
# =================================================================================
# 📅 Detalles del evento: tarjetas (fecha, hora, lugar, vestimenta), agenda,
#    nota del lugar y aviso importante.
# =================================================================================

import html

import streamlit as st

from invitation.content import DETAIL_CARDS, IMPORTANT_NOTICE, SCHEDULE, VENUE_NOTE
from webui.texts import t
from webui.ui import section_header


def render_details() -> None:
    section_header(t("details.title"), t("details.subtitle"))

    cols = st.columns(len(DETAIL_CARDS))
    for index, (col, card) in enumerate(zip(cols, DETAIL_CARDS)):
        with col:
            st.markdown(
                f"""
                <div class="detail-card reveal" style="animation-delay:{index * 0.15:.2f}s">
                  <div class="icon-circle" style="border-color:{card['color']}">
                    <span class="icon">{card['icon']}</span>
                  </div>
                  <h3 class="card-title">{html.escape(card['title'])}</h3>
                  <p class="card-info">{html.escape(card['info'])}</p>
                </div>
                """,
                unsafe_allow_html=True,
            )

    rows = "".join(
        f'<div class="schedule-item"><div class="schedule-time">{item["time"]}</div>'
        f'<div class="schedule-event">{html.escape(item["event"])}</div></div>'
        for item in SCHEDULE
    )
    st.markdown(
        f"""
        <div class="schedule reveal delay-2">
          <h3 class="schedule-title">{t("details.schedule")}</h3>
          {rows}
        </div>
        <div class="location-note reveal delay-3">
          <p class="location-title">{t("details.location")}</p>
          <p class="location-text">{html.escape(VENUE_NOTE)}</p>
        </div>
        <div class="important-note reveal delay-4">
          <p class="important-title">{t("details.important")}</p>
          <p class="important-text">{html.escape(IMPORTANT_NOTICE)}</p>
        </div>
        """,
        unsafe_allow_html=True,
    )
