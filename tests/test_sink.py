# tests/test_sink.py
# Envío a la hoja de cálculo: éxito, URL vacía y fallos de red enmascarados.

import pytest
import requests

from invitation.schemas import Attendance, RSVPResponse
from invitation.sink import JSON_HEADERS, NullSink, SheetSink

URL = "https://script.example.com/macros/s/abc/exec"


@pytest.fixture()
def response():
    return RSVPResponse(
        full_name="Ana Pérez",
        phone="0821234567",
        attendance=Attendance.ACCEPT,
        timestamp="2026-03-01T09:30:15.123Z",
    )


class FakeSession:
    def __init__(self, error=None):
        self.calls = []
        self.error = error

    def post(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error:
            raise self.error
        return object()


def test_deliver_posts_json_payload(response):
    session = FakeSession()
    sink = SheetSink(URL, timeout=3, session=session)
    assert sink.deliver(response) is True

    [(url, kwargs)] = session.calls
    assert url == URL
    assert kwargs["json"] == {
        "fullName": "Ana Pérez",
        "phone": "0821234567",
        "attendance": "accept",
        "timestamp": "2026-03-01T09:30:15.123Z",
    }
    assert kwargs["headers"] == JSON_HEADERS
    assert kwargs["timeout"] == 3


def test_deliver_uses_requests_module_by_default(monkeypatch, response):
    calls = []
    monkeypatch.setattr(requests, "post", lambda url, **kw: calls.append(url))
    assert SheetSink(URL).deliver(response) is True
    assert calls == [URL]


def test_deliver_without_url_does_not_post(response):
    session = FakeSession()
    assert SheetSink("", session=session).deliver(response) is False
    assert session.calls == []


@pytest.mark.parametrize(
    "error",
    [requests.exceptions.ConnectionError("sin red"), requests.exceptions.Timeout("lento")],
)
def test_network_errors_are_masked(response, error):
    session = FakeSession(error=error)
    assert SheetSink(URL, session=session).deliver(response) is False
    assert len(session.calls) == 1       # sin reintentos


def test_null_sink(response):
    assert NullSink().deliver(response) is False
