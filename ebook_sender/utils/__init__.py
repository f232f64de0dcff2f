"""Utility helpers."""
from .identity import (
    get_session_user_key,
    get_current_user_id,
    is_authenticated,
)

__all__ = [
    "get_session_user_key",
    "get_current_user_id",
    "is_authenticated",
]
