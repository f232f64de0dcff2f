"""Tests for the selection controller lifecycle and input events."""
from __future__ import annotations

from typing import List, Sequence

import pytest  # type: ignore[import-not-found]

from ebook_sender.services import (
    ControllerDisposedError,
    GateState,
    NotFoundError,
    Recipient,
    create,
    dispose,
)


def _recipients() -> List[Recipient]:
    return [
        Recipient(id=1, name="Ana", email="ana@x.com"),
        Recipient(id=2, name="Bob", email="bob@x.com"),
    ]


def test_send_scenario_for_two_clients():
    controller = create(_recipients())
    assert controller.gate_state() is GateState.DISALLOWED
    assert controller.invoke_send() is None

    controller.toggle_one(1)
    assert controller.send_enabled() is True
    summary = controller.invoke_send()
    assert summary is not None
    assert summary.count == 1
    assert summary.message.startswith("Você selecionou 1 cliente")
    assert [(i.name, i.email) for i in summary.items] == [("Ana", "ana@x.com")]

    controller.toggle_one(2)
    summary = controller.invoke_send()
    assert summary is not None
    assert summary.count == 2
    assert "2 clientes" in summary.message
    assert [i.name for i in summary.items] == ["Ana", "Bob"]

    controller.toggle_one(1)
    controller.toggle_one(2)
    assert controller.send_enabled() is False
    assert controller.invoke_send() is None


def test_presentation_signals_follow_select_all():
    controller = create(_recipients())
    enabled: List[bool] = []
    resets: List[bool] = []
    controller.on_send_enabled_change(enabled.append)
    controller.on_select_all_reset(lambda: resets.append(True))

    controller.toggle_select_all(True)
    assert controller.all_selected() is True
    controller.toggle_one(2)
    assert controller.all_selected() is False
    controller.toggle_one(1)

    assert enabled == [True, False]
    assert resets == [True]


def test_confirm_send_hands_off_selected_recipients_only_when_allowed():
    controller = create(_recipients())
    calls: List[Sequence[Recipient]] = []

    assert controller.confirm_send(calls.append) is False
    assert calls == []

    controller.toggle_one(2)
    assert controller.confirm_send(calls.append) is True
    assert [[r.email for r in batch] for batch in calls] == [["bob@x.com"]]


def test_unknown_recipient_propagates_not_found():
    controller = create(_recipients())
    with pytest.raises(NotFoundError):
        controller.toggle_one(42)


def test_disposed_controller_rejects_events():
    controller = create(_recipients())
    changes: List[bool] = []
    controller.on_send_enabled_change(changes.append)
    dispose(controller)
    assert controller.disposed is True
    with pytest.raises(ControllerDisposedError):
        controller.toggle_one(1)
    with pytest.raises(ControllerDisposedError):
        controller.invoke_send()
    # disposing twice is harmless
    dispose(controller)
    assert changes == []


def test_controller_noun_forms_are_used_in_summary():
    controller = create(_recipients(), noun_forms=("leitor", "leitores"))
    controller.toggle_select_all(True)
    summary = controller.summary()
    assert summary.message == "Você selecionou 2 leitores. Confirma o envio?"


def test_selection_listener_sees_each_mutation_until_unsubscribed():
    controller = create(_recipients())
    counts: List[int] = []
    unsubscribe = controller.on_selection_change(lambda model: counts.append(len(model.selected_recipients())))
    controller.toggle_one(1)
    controller.toggle_select_all(True)
    unsubscribe()
    controller.toggle_select_all(False)
    assert counts == [1, 2]
