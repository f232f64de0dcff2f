"""Errors raised by the client selection controller.

All of them signal a defect in the calling code (a stale page, a wrong
id, a negative count), never a user mistake, so they propagate.
"""
from __future__ import annotations


class SelectionError(RuntimeError):
    """Base error for selection controller failures."""


class NotFoundError(SelectionError, LookupError):
    """Raised when a recipient id is not part of the recipient set."""

    def __init__(self, recipient_id):
        super().__init__(f"recipient not found: {recipient_id!r}")
        self.recipient_id = recipient_id


class InvalidCountError(SelectionError, ValueError):
    """Raised when a negative count reaches the pluralization formatter."""


class ControllerDisposedError(SelectionError):
    """Raised when a disposed controller receives an event."""


__all__ = [
    "SelectionError",
    "NotFoundError",
    "InvalidCountError",
    "ControllerDisposedError",
]
