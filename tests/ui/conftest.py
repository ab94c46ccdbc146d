# tests/ui/conftest.py
# Fixtures para los tests AppTest: almacenamiento temporal y cookie de navegador falsa.

import pytest
import streamlit as st

from apptest_helpers import BrowserCookie
from webui import session


@pytest.fixture()
def storage_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("STORAGE_DIR", str(tmp_path))
    monkeypatch.setenv("GATE_CLOSE_DELAY_MS", "0")
    monkeypatch.setenv("MODAL_AUTOCLOSE_SECONDS", "0")
    monkeypatch.setenv("RSVP_SINK_URL", "")
    monkeypatch.delenv("WEDDING_DATETIME", raising=False)
    st.cache_resource.clear()              # La configuración se cachea por proceso.
    yield tmp_path
    st.cache_resource.clear()


@pytest.fixture()
def browser_cookie(monkeypatch):
    cookie = BrowserCookie()
    monkeypatch.setattr(session, "read_profile_cookie", cookie.read)
    monkeypatch.setattr(session, "write_profile_cookie", cookie.write)
    return cookie
