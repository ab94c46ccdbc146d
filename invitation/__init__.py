# invitation/__init__.py
# =================================================================================
# 💌 Núcleo de la invitación (sin dependencia de Streamlit)
# - Puerta de identidad, cuenta regresiva, formulario RSVP y progresión de secciones.
# - La capa visual vive en `webui/` y solo se conecta a estas piezas.
# =================================================================================

__version__ = "1.0.0"
