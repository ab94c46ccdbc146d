# webui/__init__.py
# Capa visual (Streamlit) de la invitación: estilos, textos, sesión y secciones.
