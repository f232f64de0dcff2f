"""Route registration, called from startup wiring."""
from __future__ import annotations
from typing import Any

from .ebook_view import register_ebook_view_blueprint
from .health import register_health


def register_all(app: Any, handoff=None) -> None:
    register_ebook_view_blueprint(app, handoff=handoff)
    register_health(app)

__all__ = ["register_all"]
