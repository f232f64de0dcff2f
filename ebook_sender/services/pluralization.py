"""Count-aware noun selection for confirmation messages."""
from __future__ import annotations

from ebook_sender.services.errors import InvalidCountError


def format_plural(singular: str, plural: str, total: int) -> str:
    """Return `plural` when total > 1, otherwise `singular`.

    Zero maps to the singular form ("0 cliente"). Negative totals are a
    caller bug and raise InvalidCountError.
    """
    if total < 0:
        raise InvalidCountError(f"total must not be negative (got {total})")
    if total > 1:
        return plural
    return singular


__all__ = ["format_plural"]
