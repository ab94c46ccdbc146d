# webui/sections/gallery.py
# =================================================================================
# 🖼️ Galería: cuadrícula de fotos + visor ampliado (lightbox) en un diálogo
# =================================================================================

import streamlit as st

from invitation.config import Settings
from invitation.content import GALLERY_IMAGES
from webui.texts import t
from webui.ui import img_tag, section_header


@st.dialog(" ", width="large")
def _lightbox(settings: Settings, index: int) -> None:
    image = GALLERY_IMAGES[index]
    tag = img_tag(settings.assets_dir, image["src"], alt=image["alt"], css_class="lightbox-img")
    st.markdown(
        f'<div class="lightbox">{tag}<p class="lightbox-caption">{image["caption"]}</p></div>',
        unsafe_allow_html=True,
    )


def render_gallery(settings: Settings) -> None:
    section_header(t("gallery.title"), t("gallery.subtitle"))

    cols = st.columns(2)
    for index, image in enumerate(GALLERY_IMAGES):
        with cols[index % 2]:
            tag = img_tag(settings.assets_dir, image["src"], alt=image["alt"], css_class="gallery-img")
            st.markdown(
                f"""
                <div class="image-card pop-in" style="animation-delay:{index * 0.1:.1f}s">
                  {tag}
                  <div class="image-overlay"><p class="image-caption">{image["caption"]}</p></div>
                </div>
                """,
                unsafe_allow_html=True,
            )
            if st.button(t("gallery.view"), key=f"gallery_view_{index}"):
                _lightbox(settings, index)
