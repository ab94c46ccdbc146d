# invitation/content.py
# =================================================================================
# 💍 Contenido fijo de la invitación (Forster & Tamia)
# - Datos de presentación: textos, tarjetas, agenda, galería y secciones.
# - Sin lógica; las secciones de `webui/sections` solo los dibujan.
# =================================================================================

from typing import Dict, List, NamedTuple, Optional

COUPLE = ("Forster", "Tamia")
DATE_LABEL = "3 April 2026"
VENUE = "Lakeside Events next to Mbokodo"


class SectionDescriptor(NamedTuple):
    key: str                       # Identificador estable (hero, story, ...).
    title: str                     # Nombre visible en la navegación.
    next_label: Optional[str]      # Texto del botón "siguiente"; None en la última sección.


SECTIONS: List[SectionDescriptor] = [
    SectionDescriptor("hero", "Welcome", "See Our Story"),
    SectionDescriptor("story", "Our Story", "View Details"),
    SectionDescriptor("details", "Details", "View Gallery"),
    SectionDescriptor("gallery", "Gallery", "RSVP Now"),
    SectionDescriptor("rsvp", "RSVP", None),
]

# --- Hero: collage animado de fondo ---
HERO_COLLAGE: List[Dict] = [
    {"src": "images/couple-1.jpg", "delay": 0.0, "rotation": -8, "scale": 1.1},
    {"src": "images/couple-2.jpg", "delay": 0.5, "rotation": 5, "scale": 1.2},
    {"src": "images/couple-1.jpg", "delay": 1.0, "rotation": -12, "scale": 0.9},
    {"src": "images/couple-2.jpg", "delay": 1.5, "rotation": 10, "scale": 1.15},
    {"src": "images/couple-1.jpg", "delay": 2.0, "rotation": -5, "scale": 1.05},
]

# --- Historia: versículo que inspira a la pareja ---
STORY_TITLE = "Our Foundation"
STORY_SUBTITLE = "Words that inspire our journey together"
SCRIPTURE_REFERENCE = "Ruth 1:16"
SCRIPTURE_LINES: List[str] = [
    "“Entreat me not to leave you,",
    "Or to turn back from following after you;",
    "For wherever you go, I will go;",
    "And wherever you lodge, I will lodge;",
    "Your people shall be my people,",
    "And your God, my God.”",
]
SCRIPTURE_FOOTNOTE = "A promise of unwavering commitment and love"

# --- Detalles del evento ---
DETAIL_CARDS: List[Dict[str, str]] = [
    {"icon": "📅", "title": "Date", "info": DATE_LABEL, "color": "#000000"},
    {"icon": "🕐", "title": "Time", "info": "2:00 PM till late", "color": "#d4af37"},
    {"icon": "📍", "title": "Venue", "info": VENUE, "color": "#000000"},
    {"icon": "🖤", "title": "Dress Code", "info": "Strictly All Black", "color": "#000000"},
]

SCHEDULE: List[Dict[str, str]] = [
    {"time": "2:00 PM", "event": "Guest Arrival & Reception"},
    {"time": "3:00 PM", "event": "Ceremony Begins"},
    {"time": "4:30 PM", "event": "Cocktail Hour"},
    {"time": "6:00 PM", "event": "Dinner & Celebration"},
    {"time": "8:00 PM", "event": "First Dance"},
    {"time": "9:00 PM", "event": "Party till late"},
]

VENUE_NOTE = "Lakeside Events is located next to Mbokodo. Ample parking available on-site."
IMPORTANT_NOTICE = "No children allowed • Strictly by invitation • No plus one"

# --- Galería ---
GALLERY_IMAGES: List[Dict[str, str]] = [
    {"src": "images/couple-1.jpg", "alt": "Forster & Tamia - Traditional Attire", "caption": "Traditional Elegance"},
    {"src": "images/couple-2.jpg", "alt": "Forster & Tamia - Together", "caption": "Love & Joy"},
    {"src": "images/couple-1.jpg", "alt": "Forster & Tamia - Celebration", "caption": "Cultural Beauty"},
    {"src": "images/couple-2.jpg", "alt": "Forster & Tamia - Happiness", "caption": "Forever Together"},
]
