"""Send action gate derived from the recipient selection."""
from __future__ import annotations

import enum
from typing import Callable, List, Optional

from ebook_sender.services.selection import SelectionModel
from ebook_sender.utils.logging import get_logger

LOG = get_logger("action_gate")

GateListener = Callable[[bool], None]
ResetListener = Callable[[], None]


class GateState(enum.Enum):
    DISALLOWED = "disallowed"
    ALLOWED = "allowed"


def is_action_allowed(model: SelectionModel) -> bool:
    return len(model.selected_recipients()) > 0


class ActionGate:
    """Two-state machine tracking whether the send action may be invoked.

    Re-evaluated after every selection mutation. Presentation listeners are
    told when the send control must flip enabled/disabled, and reset
    listeners when the select-all indicator must be cleared (which happens
    on every transition to DISALLOWED and never touches the model).
    """

    def __init__(self, model: SelectionModel) -> None:
        self._model = model
        self._state = GateState.ALLOWED if is_action_allowed(model) else GateState.DISALLOWED
        self._change_listeners: List[GateListener] = []
        self._reset_listeners: List[ResetListener] = []
        self._unsubscribe: Optional[Callable[[], None]] = model.subscribe(self._on_model_change)

    @property
    def state(self) -> GateState:
        return self._state

    @property
    def allowed(self) -> bool:
        return self._state is GateState.ALLOWED

    def on_change(self, listener: GateListener) -> Callable[[], None]:
        self._change_listeners.append(listener)
        return lambda: self._discard(self._change_listeners, listener)

    def on_select_all_reset(self, listener: ResetListener) -> Callable[[], None]:
        self._reset_listeners.append(listener)
        return lambda: self._discard(self._reset_listeners, listener)

    @staticmethod
    def _discard(listeners: list, listener) -> None:
        if listener in listeners:
            listeners.remove(listener)

    def _on_model_change(self, model: SelectionModel) -> None:
        self.reevaluate()

    def reevaluate(self) -> GateState:
        previous = self._state
        self._state = GateState.ALLOWED if is_action_allowed(self._model) else GateState.DISALLOWED
        if self._state is previous:
            return self._state
        LOG.debug("Send gate %s -> %s", previous.value, self._state.value)
        for listener in list(self._change_listeners):
            listener(self.allowed)
        if self._state is GateState.DISALLOWED:
            for reset in list(self._reset_listeners):
                reset()
        return self._state

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self._change_listeners.clear()
        self._reset_listeners.clear()


__all__ = ["GateState", "ActionGate", "is_action_allowed", "GateListener", "ResetListener"]
