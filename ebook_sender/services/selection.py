"""Recipient selection state for the bulk send form.

The model owns a fixed, ordered recipient set built once when the page is
initialized. Only the `selected` flag of a recipient ever changes; after
each mutation every subscribed listener is called synchronously with the
model so the action gate and any UI adapter can re-evaluate.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Dict, Hashable, Iterable, List, Tuple

from ebook_sender.services.errors import NotFoundError
from ebook_sender.utils.logging import get_logger

LOG = get_logger("selection")

SelectionListener = Callable[["SelectionModel"], None]


@dataclass(frozen=True)
class Recipient:
    """One selectable client on the send form."""

    id: Hashable
    name: str
    email: str
    selected: bool = False


class SelectionModel:
    def __init__(self, recipients: Iterable[Recipient]) -> None:
        self._recipients: List[Recipient] = list(recipients)
        self._index: Dict[Hashable, int] = {}
        for position, recipient in enumerate(self._recipients):
            if recipient.id in self._index:
                raise ValueError(f"duplicate recipient id: {recipient.id!r}")
            self._index[recipient.id] = position
        self._listeners: List[SelectionListener] = []

    @property
    def recipients(self) -> Tuple[Recipient, ...]:
        return tuple(self._recipients)

    def subscribe(self, listener: SelectionListener) -> Callable[[], None]:
        """Register a listener; returns a callable that removes it again."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def clear_listeners(self) -> None:
        self._listeners.clear()

    def _position(self, recipient_id: Hashable) -> int:
        try:
            return self._index[recipient_id]
        except KeyError:
            raise NotFoundError(recipient_id) from None

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def toggle_one(self, recipient_id: Hashable) -> Recipient:
        position = self._position(recipient_id)
        current = self._recipients[position]
        updated = replace(current, selected=not current.selected)
        self._recipients[position] = updated
        LOG.debug("Recipient %r selected=%s", recipient_id, updated.selected)
        self._notify()
        return updated

    def set_all(self, target: bool) -> None:
        target = bool(target)
        self._recipients = [
            r if r.selected is target else replace(r, selected=target)
            for r in self._recipients
        ]
        LOG.debug("All %d recipients selected=%s", len(self._recipients), target)
        self._notify()

    def is_selected(self, recipient_id: Hashable) -> bool:
        return self._recipients[self._position(recipient_id)].selected

    def selected_recipients(self) -> Tuple[Recipient, ...]:
        return tuple(r for r in self._recipients if r.selected)

    def all_selected(self) -> bool:
        """Select-all checkbox reflection; False for an empty set."""
        return bool(self._recipients) and all(r.selected for r in self._recipients)


__all__ = ["Recipient", "SelectionModel", "SelectionListener"]
