"""Tests for app wiring and the /healthz probe."""
from __future__ import annotations

import pytest  # type: ignore[import-not-found]

from ebook_sender.db.engine import reset_for_tests
from ebook_sender.startup.wiring import create_app


@pytest.fixture(autouse=True)
def in_memory_db(monkeypatch):
    reset_for_tests(drop=True)
    monkeypatch.setenv("EBOOK_SENDER_DB_PATH", ":memory:")
    yield
    reset_for_tests(drop=True)


def test_create_app_registers_routes_and_health():
    app = create_app({"SECRET_KEY": "wiring-secret"})
    assert "ebook_view" in app.blueprints
    assert "health" in app.blueprints
    with app.test_client() as client:
        resp = client.get("/healthz")
        assert resp.status_code == 200
        assert resp.get_json() == {"status": "ok", "db": True}


def test_create_app_falls_back_to_configured_secret(monkeypatch):
    monkeypatch.setenv("EBOOK_SENDER_SECRET_KEY", "from-env")
    app = create_app()
    assert app.config["SECRET_KEY"] == "from-env"
    assert app.config["BABEL_DEFAULT_LOCALE"] == "pt_BR"
