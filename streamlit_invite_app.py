# streamlit_invite_app.py
# =================================================================================
# 💌 Punto de entrada: Invitación en una sola página
# Rol: puerta de bienvenida y luego todas las secciones apiladas
#      (Hero, Historia, Detalles, Galería, RSVP) con el pie de página.
# Uso: streamlit run streamlit_invite_app.py
# =================================================================================

from webui.layouts import render_single_page, start_page

settings, guest_name = start_page()
render_single_page(settings, guest_name)
