# -----------------------------
# File: tests/conftest.py
# -----------------------------
import json
import logging

import pytest
import requests

from page_store import build_api_url


class DummyResp:
    def __init__(self, status=200, payload=None, text=None, reason=""):
        self.status_code = status
        self.reason = reason
        if text is None:
            text = json.dumps(payload) if payload is not None else ""
        self.text = text

    def json(self):
        return json.loads(self.text)


class DummySession:
    """Answers /api/pages requests from a dict of url -> DummyResp (or exception)."""

    def __init__(self, routes=None, headers=None):
        self.routes = routes or {}
        self.headers = headers or {}
        self.calls = []

    def get(self, url, headers=None, timeout=None):
        self.calls.append(url)
        resp = self.routes.get(url)
        if resp is None:
            return DummyResp(404, {"message": "Page not found."})
        if isinstance(resp, Exception):
            raise resp
        return resp


def page_payload(title, texts, links=None):
    payload = {"title": title, "lines": [{"text": t} for t in texts]}
    if links is not None:
        payload["links"] = links
    return payload


@pytest.fixture
def api():
    """Build a DummySession from {(project, page_name): DummyResp | Exception}."""
    def _make(pages, headers=None):
        routes = {build_api_url(project, name): resp for (project, name), resp in pages.items()}
        return DummySession(routes, headers=headers)
    return _make


@pytest.fixture
def no_sleep(monkeypatch):
    """Record sleeps instead of waiting."""
    slept = []
    monkeypatch.setattr("limiter.time.sleep", lambda s: slept.append(s))
    return slept


@pytest.fixture
def network_error():
    return requests.ConnectionError("connection refused")


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Drop handlers a test's CLI run attached to the root logger."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in root.handlers[:]:
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
