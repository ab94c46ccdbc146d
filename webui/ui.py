# webui/ui.py
# =============================================================================
# Utilidades de UI compartidas (solo presentación visual, sin lógica de negocio)
# - Estilos globales + animaciones desde una hoja estática (assets/invite.css)
# - Imágenes locales incrustadas como base64 (con fallback si faltan)
# - Cabecera de sección, pie de página y "scroll al inicio"
# =============================================================================

import base64
import html
from pathlib import Path
from typing import Optional

import streamlit as st
from loguru import logger

from webui.texts import t

STYLESHEET = "invite.css"


# ───────────────────────────────────────────────────────────
# 1) Estilos globales (una sola definición de las animaciones)
# ───────────────────────────────────────────────────────────
@st.cache_resource(show_spinner=False)
def _load_stylesheet(assets_dir: str) -> str:
    """Lee la hoja de estilos una vez por proceso."""
    path = Path(assets_dir) / STYLESHEET
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        logger.warning("No se pudo leer la hoja de estilos {}: {}", path, e)
        return ""


def apply_global_styles(assets_dir: Path) -> None:
    css = _load_stylesheet(str(assets_dir))
    if css:
        st.markdown(f"<style>{css}</style>", unsafe_allow_html=True)


# ───────────────────────────────────────────────────────────
# 2) Imágenes locales como base64
# ───────────────────────────────────────────────────────────
def image_to_base64(path: Path) -> Optional[str]:
    """Convierte un archivo de imagen a base64; None si no existe o no se puede leer."""
    if not path.exists():
        return None
    try:
        with open(path, "rb") as img_file:
            return base64.b64encode(img_file.read()).decode()
    except OSError as e:
        logger.warning("No se pudo leer la imagen {}: {}", path, e)
        return None


@st.cache_resource(show_spinner=False)
def load_image(assets_dir: str, relative: str) -> Optional[str]:
    b64 = image_to_base64(Path(assets_dir) / relative)
    if b64 is None:
        logger.warning("Imagen no encontrada: {}/{}", assets_dir, relative)
    return b64


def img_tag(assets_dir: Path, relative: str, alt: str = "", css_class: str = "", style: str = "") -> str:
    """Etiqueta <img> con la imagen incrustada, o cadena vacía si falta el archivo."""
    b64 = load_image(str(assets_dir), relative)
    if not b64:
        return ""
    mime = "image/png" if relative.lower().endswith(".png") else "image/jpeg"
    return (
        f'<img src="data:{mime};base64,{b64}" alt="{html.escape(alt)}" '
        f'class="{css_class}" style="{style}">'
    )


# ───────────────────────────────────────────────────────────
# 3) Piezas comunes de las secciones
# ───────────────────────────────────────────────────────────
def section_header(title: str, subtitle: str = "") -> None:
    sub = f'<p class="section-subtitle">{html.escape(subtitle)}</p>' if subtitle else ""
    st.markdown(
        f"""
        <div class="section-header reveal">
          <div class="decorative-line"></div>
          <h2 class="section-title">{html.escape(title)}</h2>
          {sub}
        </div>
        """,
        unsafe_allow_html=True,
    )


def render_footer() -> None:
    st.markdown(
        f"""
        <footer class="site-footer">
          <p class="footer-text">{t("footer.line")}</p>
          <p class="footer-subtext">{t("footer.sub")}</p>
        </footer>
        """,
        unsafe_allow_html=True,
    )


def scroll_to_top(marker: str = "") -> None:
    """Sube al inicio de la página; `marker` distingue movimientos seguidos."""
    st.html(
        f"""
        <script data-move="{html.escape(marker)}">
          (() => {{
            const main = document.querySelector('[data-testid="stMain"]') || document.querySelector('section.main');
            if (main) {{ main.scrollTo({{top: 0, behavior: 'smooth'}}); }}
            window.scrollTo({{top: 0, behavior: 'smooth'}});
          }})();
        </script>
        """,
        unsafe_allow_javascript=True,
    )
