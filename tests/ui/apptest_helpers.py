# tests/ui/apptest_helpers.py
# Utilidades compartidas por los tests AppTest (scripts reales, sin navegador).

import json
from pathlib import Path

from streamlit.testing.v1 import AppTest

from invitation.storage import GUEST_NAME_KEY

ROOT = Path(__file__).resolve().parents[2]
INVITE_SCRIPT = str(ROOT / "streamlit_invite_app.py")
PAGED_SCRIPT = str(ROOT / "streamlit_paged_app.py")
PROFILE = "apptest01"
APP_TIMEOUT = 30                     # Segundos por ejecución del script.


class BrowserCookie:
    """Cookie del perfil tal como la vería el navegador entre visitas."""

    def __init__(self) -> None:
        self.value = None
        self.written = []

    def read(self):
        return self.value

    def write(self, profile_id: str) -> None:
        self.written.append(profile_id)
        self.value = profile_id


def make_app(script: str = INVITE_SCRIPT, profile: str | None = PROFILE) -> AppTest:
    at = AppTest.from_file(script, default_timeout=APP_TIMEOUT)
    if profile:
        at.query_params["guest"] = profile
    return at


def stored(storage_dir: Path, profile: str = PROFILE) -> dict:
    path = storage_dir / f"{profile}.json"
    if not path.exists():
        return {}
    return json.loads(path.read_text(encoding="utf-8"))


def store_guest(storage_dir: Path, name: str, profile: str = PROFILE) -> None:
    """Deja un invitado ya identificado (la puerta no aparece)."""
    (storage_dir / f"{profile}.json").write_text(
        json.dumps({GUEST_NAME_KEY: name}, ensure_ascii=False), encoding="utf-8"
    )


def widget_keys(widgets) -> list:
    return [w.key for w in widgets]


def markdown_text(at: AppTest) -> str:
    return "\n".join(m.value for m in at.markdown)
