"""Application configuration accessors.

Centralizes environment variable parsing & defaults so the rest of the
package never reads os.environ directly.
"""
from __future__ import annotations

import os
from functools import lru_cache

APP_NAME = "ebook_sender"
APP_VERSION = "0.4.0"
APP_DESCRIPTION = "Ebook view page with bulk client selection and send confirmation"

DEFAULT_DB_PATH = "ebook_sender.db"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_RECIPIENT_NOUN = "cliente"
DEFAULT_RECIPIENT_NOUN_PLURAL = "clientes"


def _raw_env(name: str, default: str | None = None) -> str | None:
    val = os.getenv(name)
    return val if val is not None else default


def _stripped_env(name: str) -> str | None:
    value = os.getenv(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def get_db_path() -> str:
    raw = _raw_env("EBOOK_SENDER_DB_PATH", DEFAULT_DB_PATH)
    if raw and raw != ":memory:" and not os.path.isabs(raw):
        data_root = os.getenv("EBOOK_SENDER_DATA_DIR")
        if data_root:
            return os.path.join(data_root, raw)
    return raw  # type: ignore[return-value]


def log_level_name() -> str:
    return _raw_env("EBOOK_SENDER_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()  # type: ignore[union-attr]


def recipient_noun_forms() -> tuple[str, str]:
    """Singular/plural noun used in the send confirmation message.

    Environment Variables: EBOOK_SENDER_RECIPIENT_NOUN,
    EBOOK_SENDER_RECIPIENT_NOUN_PLURAL (defaults: cliente / clientes).
    """
    singular = _stripped_env("EBOOK_SENDER_RECIPIENT_NOUN") or DEFAULT_RECIPIENT_NOUN
    plural = _stripped_env("EBOOK_SENDER_RECIPIENT_NOUN_PLURAL") or DEFAULT_RECIPIENT_NOUN_PLURAL
    return singular, plural


def secret_key() -> str:
    return os.getenv("EBOOK_SENDER_SECRET_KEY", "dev-ebook-sender")


def session_user_key() -> str:
    return os.getenv("EBOOK_SENDER_SESSION_USER_KEY", "user_id")


def app_title() -> str | None:
    """Optional page title override."""
    return _stripped_env("APP_TITLE")


@lru_cache(maxsize=1)
def metadata() -> dict:
    return {
        "name": APP_NAME,
        "version": APP_VERSION,
        "description": APP_DESCRIPTION,
    }


def summarize_runtime_config() -> dict:
    singular, plural = recipient_noun_forms()
    return {
        **metadata(),
        "db_path": get_db_path(),
        "log_level": log_level_name(),
        "recipient_noun": singular,
        "recipient_noun_plural": plural,
    }


__all__ = [
    "APP_NAME",
    "APP_VERSION",
    "APP_DESCRIPTION",
    "get_db_path",
    "log_level_name",
    "recipient_noun_forms",
    "secret_key",
    "session_user_key",
    "app_title",
    "metadata",
    "summarize_runtime_config",
]
