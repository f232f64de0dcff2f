"""Selection & confirmation controller for the "view ebook" send form.

One controller is created per rendered page from the page's recipient list
and owned by whichever adapter drives it (a Flask request, a test). It
reacts to exactly three input events:

* ``toggle_one(id)``: a client checkbox was clicked;
* ``toggle_select_all(target)``: the select-all checkbox was clicked;
* ``invoke_send()``: the send button was clicked.

Every event completes synchronously, including the gate re-evaluation and
the listener fan-out, before it returns.
"""
from __future__ import annotations

from typing import Callable, Hashable, Iterable, Optional, Sequence, Tuple

from ebook_sender.services import confirmation_summary
from ebook_sender.services.action_gate import ActionGate, GateListener, GateState, ResetListener
from ebook_sender.services.confirmation_summary import SummaryContent
from ebook_sender.services.errors import ControllerDisposedError
from ebook_sender.services.selection import Recipient, SelectionModel
from ebook_sender.utils.logging import get_logger

LOG = get_logger("selection_controller")

SendHandoff = Callable[[Sequence[Recipient]], None]


class SelectionController:
    def __init__(
        self,
        recipients: Iterable[Recipient],
        *,
        noun_forms: Optional[Tuple[str, str]] = None,
    ) -> None:
        self._model = SelectionModel(recipients)
        self._gate = ActionGate(self._model)
        self._noun_forms = noun_forms
        self._disposed = False

    @property
    def model(self) -> SelectionModel:
        self._ensure_alive()
        return self._model

    @property
    def gate(self) -> ActionGate:
        self._ensure_alive()
        return self._gate

    @property
    def disposed(self) -> bool:
        return self._disposed

    def _ensure_alive(self) -> None:
        if self._disposed:
            raise ControllerDisposedError("selection controller already disposed")

    # ---- presentation hooks --------------------------------------------
    def on_send_enabled_change(self, listener: GateListener) -> Callable[[], None]:
        return self.gate.on_change(listener)

    def on_select_all_reset(self, listener: ResetListener) -> Callable[[], None]:
        return self.gate.on_select_all_reset(listener)

    def on_selection_change(self, listener: Callable[[SelectionModel], None]) -> Callable[[], None]:
        return self.model.subscribe(listener)

    # ---- input events ---------------------------------------------------
    def toggle_one(self, recipient_id: Hashable) -> Recipient:
        self._ensure_alive()
        return self._model.toggle_one(recipient_id)

    def toggle_select_all(self, target: bool) -> None:
        self._ensure_alive()
        self._model.set_all(target)

    def invoke_send(self) -> Optional[SummaryContent]:
        """Summary for the confirmation dialog, or None while the gate is closed."""
        self._ensure_alive()
        if not self._gate.allowed:
            LOG.debug("Send invoked with no recipients selected; ignored")
            return None
        return self.summary()

    # ---- queries --------------------------------------------------------
    def send_enabled(self) -> bool:
        self._ensure_alive()
        return self._gate.allowed

    def gate_state(self) -> GateState:
        self._ensure_alive()
        return self._gate.state

    def all_selected(self) -> bool:
        self._ensure_alive()
        return self._model.all_selected()

    def summary(self) -> SummaryContent:
        self._ensure_alive()
        return confirmation_summary.build(self._model, noun_forms=self._noun_forms)

    # ---- handoff --------------------------------------------------------
    def confirm_send(self, handoff: SendHandoff) -> bool:
        """Pass the selected recipients to the submission collaborator.

        Returns False, without calling `handoff`, while nothing is selected.
        """
        self._ensure_alive()
        if not self._gate.allowed:
            return False
        selected = self._model.selected_recipients()
        LOG.info("Handing off send for %d recipient(s)", len(selected))
        handoff(selected)
        return True

    def dispose(self) -> None:
        if self._disposed:
            return
        self._gate.detach()
        self._model.clear_listeners()
        self._disposed = True


def create(
    recipients: Iterable[Recipient],
    *,
    noun_forms: Optional[Tuple[str, str]] = None,
) -> SelectionController:
    return SelectionController(recipients, noun_forms=noun_forms)


def dispose(controller: SelectionController) -> None:
    controller.dispose()


__all__ = ["SelectionController", "SendHandoff", "create", "dispose"]
