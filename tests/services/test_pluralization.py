"""Tests for the confirmation message noun selection."""
from __future__ import annotations

import pytest  # type: ignore[import-not-found]

from ebook_sender.services import InvalidCountError, format_plural


def test_negative_total_is_rejected():
    with pytest.raises(InvalidCountError):
        format_plural("cliente", "clientes", -1)


@pytest.mark.parametrize(
    "total, expected",
    [(0, "cliente"), (1, "cliente"), (2, "clientes"), (37, "clientes")],
)
def test_only_totals_above_one_are_plural(total, expected):
    assert format_plural("cliente", "clientes", total) == expected


def test_invalid_count_error_is_a_value_error():
    with pytest.raises(ValueError):
        format_plural("book", "books", -5)
