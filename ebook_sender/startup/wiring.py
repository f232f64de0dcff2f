"""Application initialization / wiring.

Orchestrates: DB init, Babel, route registration.
"""
from __future__ import annotations
from typing import Any, Optional

from flask import Flask

from ebook_sender.config import secret_key, summarize_runtime_config
from ebook_sender.db import init_engine_once
from ebook_sender.routes.inject import register_all as register_routes
from ebook_sender.utils.logging import get_logger

LOG = get_logger("ebook_sender.startup")


def init_app(app: Any, handoff=None) -> None:
    LOG.debug("init_app starting")
    init_engine_once()
    LOG.debug("DB engine initialized")
    if not app.config.get("SECRET_KEY"):
        app.config["SECRET_KEY"] = secret_key()
    app.config.setdefault("BABEL_DEFAULT_LOCALE", "pt_BR")
    register_routes(app, handoff=handoff)
    LOG.info("App startup wiring complete: %s", summarize_runtime_config())


def create_app(config: Optional[dict] = None, handoff=None) -> Flask:
    app = Flask("ebook_sender")
    if config:
        app.config.update(config)
    init_app(app, handoff=handoff)
    return app


__all__ = ["init_app", "create_app"]
