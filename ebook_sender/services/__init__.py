"""Service exports."""

from .errors import (
    SelectionError,
    NotFoundError,
    InvalidCountError,
    ControllerDisposedError,
)
from .pluralization import format_plural
from .selection import Recipient, SelectionModel
from .action_gate import ActionGate, GateState, is_action_allowed
from .confirmation_summary import SummaryContent, SummaryItem, build as build_summary, render_html
from .controller import SelectionController, SendHandoff, create, dispose
from . import ebook_recipients_service

__all__ = [
    "SelectionError",
    "NotFoundError",
    "InvalidCountError",
    "ControllerDisposedError",
    "format_plural",
    "Recipient",
    "SelectionModel",
    "ActionGate",
    "GateState",
    "is_action_allowed",
    "SummaryContent",
    "SummaryItem",
    "build_summary",
    "render_html",
    "SelectionController",
    "SendHandoff",
    "create",
    "dispose",
    "ebook_recipients_service",
]
