"""Identity helpers backed by the Flask session."""
from __future__ import annotations
from typing import Optional
from flask import session

from ebook_sender import config as app_config


def get_session_user_key() -> str:
    return app_config.session_user_key()


def get_current_user_id() -> Optional[int]:
    uid = session.get(get_session_user_key())
    if uid is None:
        return None
    try:
        return int(uid)
    except (TypeError, ValueError):
        return None


def is_authenticated() -> bool:
    return get_current_user_id() is not None


__all__ = [
    "get_session_user_key",
    "get_current_user_id",
    "is_authenticated",
]
