# webui/texts.py
# =================================================================================
# 🗒️ Textos visibles del sitio (un solo idioma)
# - Todas las cadenas de la UI pasan por t(key) para mantenerlas en un lugar.
# - Si falta una clave se devuelve la propia clave (fácil de detectar en pantalla).
# =================================================================================

from typing import Dict

TEXTS: Dict[str, str] = {
    # --- Página ---
    "page.title": "Forster & Tamia • 3 April 2026",

    # --- Bienvenida ---
    "welcome.title": "Welcome",
    "welcome.subtitle": "You're invited to celebrate the union of",
    "welcome.label": "Please enter your name to continue",
    "welcome.placeholder": "Your name",
    "welcome.submit": "Enter",
    "welcome.error": "Please enter your name",

    # --- Hero ---
    "hero.greeting": "WELCOME, {name}!",
    "hero.subtitle": "WE ARE GETTING MARRIED",
    "hero.rsvp": "RSVP Now",
    "countdown.days": "DAYS",
    "countdown.hours": "HOURS",
    "countdown.minutes": "MINUTES",
    "countdown.seconds": "SECONDS",

    # --- Detalles ---
    "details.title": "Wedding Details",
    "details.subtitle": "Everything you need to know",
    "details.schedule": "Schedule",
    "details.location": "📍 Venue Location",
    "details.important": "⚠️ Important Notice",

    # --- Galería ---
    "gallery.title": "Gallery",
    "gallery.subtitle": "Moments captured in time",
    "gallery.view": "Click to view",

    # --- RSVP ---
    "rsvp.title": "RSVP",
    "rsvp.subtitle": "Please confirm your attendance",
    "rsvp.full_name": "Full Name *",
    "rsvp.full_name_placeholder": "Enter your full name",
    "rsvp.phone": "Phone Number *",
    "rsvp.phone_placeholder": "+27 12 345 6789",
    "rsvp.attendance": "Will you attend? *",
    "rsvp.accept": "✓ Joyfully Accept",
    "rsvp.decline": "✕ Regretfully Decline",
    "rsvp.submit": "Submit RSVP",
    "rsvp.sending": "Submitting…",
    "confirm.title": "Thank You!",
    "confirm.accept_text": "We're thrilled you'll be joining us on our special day!",
    "confirm.decline_text": "Thank you for letting us know. We'll miss you!",
    "confirm.name": "Name",
    "confirm.phone": "Phone",
    "confirm.attendance": "Attendance",
    "confirm.accepting": "✓ Accepting",
    "confirm.declining": "✕ Declining",
    "confirm.accept_note": "A confirmation has been saved. See you on 3 April 2026! ❤️",
    "confirm.decline_note": "Your response has been saved. We hope to celebrate with you another time! ❤️",

    # --- Navegación paginada ---
    "nav.open": "CLICK TO OPEN",
    "nav.back_to_start": "↑ Back to Start",

    # --- Música ---
    "music.on": "🔊",
    "music.off": "🔈",

    # --- Pie ---
    "footer.line": "Forster & Tamia • 3 April 2026",
    "footer.sub": "Made with ❤️ for our special day",
}


def t(key: str, **kwargs: str) -> str:
    text = TEXTS.get(key, key)
    return text.format(**kwargs) if kwargs else text
