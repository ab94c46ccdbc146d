# streamlit_paged_app.py
# =================================================================================
# 📜 Punto de entrada: Invitación paginada
# Rol: puerta de bienvenida y luego una sección a la vez; cada "sobre" desbloquea
#      la siguiente y en la última aparece "Back to Start".
# Uso: streamlit run streamlit_paged_app.py
# =================================================================================

from webui.layouts import render_paged, start_page

settings, guest_name = start_page()
render_paged(settings, guest_name)
