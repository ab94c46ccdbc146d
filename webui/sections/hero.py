# webui/sections/hero.py
# =================================================================================
# 💍 Hero: saludo personalizado, nombres, fecha, cuenta regresiva y botón RSVP
# - La cuenta regresiva es un fragmento que se re-ejecuta cada segundo mientras
#   el hero esté en pantalla; al llegar a cero deja de programarse.
# - "RSVP Now" abre el formulario en un modal (mismo formulario que la sección).
# =================================================================================

import html
from datetime import datetime

import streamlit as st

from invitation.config import Settings
from invitation.content import COUPLE, DATE_LABEL, HERO_COLLAGE
from invitation.countdown import TICK_SECONDS, Countdown
from webui.sections.rsvp import open_rsvp_modal
from webui.texts import t
from webui.ui import img_tag

COUNTDOWN_KEY = "countdown"


def _get_countdown(target: datetime) -> Countdown:
    countdown = st.session_state.get(COUNTDOWN_KEY)
    if countdown is None or countdown.target != target:
        countdown = Countdown(target)
        st.session_state[COUNTDOWN_KEY] = countdown
    return countdown


def _countdown_html(countdown: Countdown) -> str:
    b = countdown.current
    units = [
        (b.days, t("countdown.days")),
        (b.hours, t("countdown.hours")),
        (b.minutes, t("countdown.minutes")),
        (b.seconds, t("countdown.seconds")),
    ]
    items = '<div class="countdown-divider">:</div>'.join(
        f'<div class="countdown-item"><div class="countdown-number">{value}</div>'
        f'<div class="countdown-label">{label}</div></div>'
        for value, label in units
    )
    return f'<div class="countdown">{items}</div>'


def refresh_interval(countdown: Countdown) -> float | None:
    """Segundos entre refrescos del fragmento; None (sin temporizador) al terminar."""
    return None if countdown.finished else TICK_SECONDS


def render_countdown(target: datetime) -> None:
    countdown = _get_countdown(target)
    countdown.tick()
    run_every = refresh_interval(countdown)

    @st.fragment(run_every=run_every)
    def _ticker() -> None:
        countdown.tick()
        st.markdown(_countdown_html(countdown), unsafe_allow_html=True)
        if countdown.finished and run_every is not None:
            st.rerun()              # Rerun completo: el fragmento se recrea sin temporizador.

    _ticker()


def render_collage(settings: Settings) -> None:
    tiles = []
    for index, image in enumerate(HERO_COLLAGE):
        style = (
            f"top:{15 + index * 15}%; left:{10 + index * 18}%; "
            f"--rot:{image['rotation']}deg; --scale:{image['scale']}; "
            f"animation-delay:{image['delay']}s; animation-duration:{8 + index}s;"
        )
        tag = img_tag(settings.assets_dir, image["src"], alt="Wedding moment", css_class="collage-img")
        if tag:
            tiles.append(f'<div class="collage-tile" style="{style}">{tag}</div>')
    st.markdown(
        f'<div class="collage">{"".join(tiles)}<div class="collage-overlay"></div></div>',
        unsafe_allow_html=True,
    )


def render_hero(settings: Settings, guest_name: str | None) -> None:
    render_collage(settings)

    greeting = ""
    if guest_name:
        greeting = f'<p class="hero-greeting">{html.escape(t("hero.greeting", name=guest_name.upper()))}</p>'

    st.markdown(
        f"""
        <div class="hero reveal">
          {greeting}
          <p class="hero-subtitle">{t("hero.subtitle")}</p>
          <h1 class="hero-title">{COUPLE[0]} <span class="ampersand">&amp;</span> {COUPLE[1]}</h1>
          <p class="hero-date">{DATE_LABEL}</p>
          <div class="decorative-line grow"></div>
        </div>
        """,
        unsafe_allow_html=True,
    )

    render_countdown(settings.wedding_datetime)

    with st.container(key="hero-rsvp"):
        if st.button(t("hero.rsvp"), key="hero_rsvp_button", type="primary"):
            open_rsvp_modal(settings)
