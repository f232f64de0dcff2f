"""Application logging helpers.

All package loggers live under the ``ebook_sender`` namespace: a single
stream handler is attached to the namespace root (level from
`ebook_sender.config.log_level_name()`) and module loggers such as
``get_logger("selection")`` propagate to it.
"""
from __future__ import annotations

import logging
import threading
from typing import Optional

from ebook_sender import config as app_config

ROOT_LOGGER_NAME = "ebook_sender"
_LOCK = threading.Lock()
_ROOT: Optional[logging.Logger] = None


def _configure_root() -> logging.Logger:
    global _ROOT
    if _ROOT is not None:
        return _ROOT
    with _LOCK:
        if _ROOT is not None:
            return _ROOT
        root = logging.getLogger(ROOT_LOGGER_NAME)
        level = getattr(logging, app_config.log_level_name(), logging.INFO)
        root.setLevel(level)
        if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("[ebook_sender] %(asctime)s %(levelname)s %(name)s %(message)s"))
            root.addHandler(handler)
        root.propagate = False
        _ROOT = root
        return root


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    root = _configure_root()
    if name == ROOT_LOGGER_NAME:
        return root
    if not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


__all__ = ["get_logger", "ROOT_LOGGER_NAME"]
