# webui/sections/story.py
# Sección "Our Foundation": versículo de la pareja.

import html

import streamlit as st

from invitation.content import (
    SCRIPTURE_FOOTNOTE,
    SCRIPTURE_LINES,
    SCRIPTURE_REFERENCE,
    STORY_SUBTITLE,
    STORY_TITLE,
)
from webui.ui import section_header


def render_story() -> None:
    section_header(STORY_TITLE, STORY_SUBTITLE)
    lines = "".join(f'<p class="scripture-line">{html.escape(line)}</p>' for line in SCRIPTURE_LINES)
    st.markdown(
        f"""
        <div class="scripture-card reveal delay-1">
          <div class="scripture-reference">{SCRIPTURE_REFERENCE}</div>
          <div class="scripture-text">{lines}</div>
          <div class="scripture-footnote">{SCRIPTURE_FOOTNOTE}</div>
        </div>
        <div class="pattern-divider reveal delay-2"></div>
        """,
        unsafe_allow_html=True,
    )
