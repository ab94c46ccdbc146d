# webui/sections/__init__.py
# Secciones de la invitación; cada una se dibuja con una función render_*().
