"""View ebook page blueprint.

Routes:
    GET  /ebook/view/<id>            -> page with client checkboxes
    POST /ebook/view/<id>/confirm    -> page with the confirmation dialog
    POST /ebook/view/<id>/send       -> hands the selection off, redirects back
    POST /ebook/view/<id>/summary    -> JSON gate state + summary

Every request rebuilds a selection controller from the ebook's client list,
replays the submitted checkboxes onto it and disposes it before returning.
The send button is rendered submittable; static/js/ebook_view.js toggles it
from the checkbox state in the browser and /confirm re-checks the selection
on the server. All routes require a logged-in session.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence
from urllib.parse import urlencode

from flask import (
    Blueprint,
    current_app,
    flash,
    jsonify,
    redirect,
    render_template,
    request,
    url_for,
)
from flask_babel import Babel, gettext as _, lazy_gettext as _l

from ebook_sender.config import app_title
from ebook_sender.services import controller as selection_controller
from ebook_sender.services import ebook_recipients_service, render_html
from ebook_sender.services.ebook_recipients_service import EbookNotFoundError
from ebook_sender.services.errors import NotFoundError
from ebook_sender.services.selection import Recipient
from ebook_sender.utils import is_authenticated
from ebook_sender.utils.logging import get_logger

bp = Blueprint(
    "ebook_view",
    __name__,
    url_prefix="/ebook",
    template_folder="../templates",
    static_folder="../static",
    static_url_path="/assets",
)
LOG = get_logger("ebook_view")

HANDOFF_EXTENSION_KEY = "ebook_sender.send_handoff"

_ERROR_MESSAGES = {
    "login_required": _l("Log in to continue."),
    "ebook_not_found": _l("Ebook not found."),
    "recipient_not_found": _l("One of the selected clients is not listed for this ebook."),
    "invalid_payload": _l("Request payload must be a JSON object."),
}


def _log_handoff(ebook_id: int, recipients: Sequence[Recipient]) -> None:
    LOG.info(
        "Send confirmed for ebook %s to %d client(s): %s",
        ebook_id,
        len(recipients),
        ", ".join(r.email for r in recipients),
    )


def _json_error(code: str, status: int = 400, *, details: Optional[Dict[str, Any]] = None):
    payload: Dict[str, Any] = {"error": code}
    message = _ERROR_MESSAGES.get(code)
    if message is not None:
        payload["message"] = str(message)
    if details:
        payload["details"] = details
    return jsonify(payload), status


def _login_redirect():
    target = request.full_path or request.path or "/"
    if target.endswith("?"):
        target = target[:-1]
    return redirect(f"/login?{urlencode({'next': target})}")


def _posted_client_ids() -> List[str]:
    return request.form.getlist("clients[]")


def _posted_select_all() -> bool:
    return request.form.get("select_all") in {"on", "1", "true"}


def _render_page(ebook, controller, *, term: Optional[str], summary=None):
    return (
        render_template(
            "ebook_view.html",
            title=app_title() or ebook.title,
            ebook=ebook,
            recipients=controller.model.recipients,
            send_enabled=controller.send_enabled(),
            all_selected=controller.all_selected(),
            term=term or "",
            summary=summary,
            summary_html=render_html(summary) if summary is not None else None,
        ),
        200,
    )


@bp.route("/view/<int:ebook_id>", methods=["GET"])
def view_page(ebook_id: int):
    if not is_authenticated():
        return _login_redirect()
    term = request.args.get("term")
    try:
        ebook, recipients = ebook_recipients_service.load_recipients(ebook_id, term)
    except EbookNotFoundError:
        return render_template("ebook_not_found.html", ebook_id=ebook_id), 404
    controller = selection_controller.create(recipients)
    try:
        return _render_page(ebook, controller, term=term)
    finally:
        selection_controller.dispose(controller)


@bp.route("/view/<int:ebook_id>/confirm", methods=["POST"])
def confirm_page(ebook_id: int):
    if not is_authenticated():
        return _login_redirect()
    term = request.form.get("term")
    try:
        ebook, recipients = ebook_recipients_service.load_recipients(ebook_id, term)
    except EbookNotFoundError:
        return render_template("ebook_not_found.html", ebook_id=ebook_id), 404
    controller = selection_controller.create(recipients)
    try:
        try:
            ebook_recipients_service.apply_selection(
                controller, _posted_client_ids(), select_all=_posted_select_all()
            )
        except NotFoundError as exc:
            LOG.warning("Confirm for ebook %s posted unknown client %r", ebook_id, exc.recipient_id)
            return str(_ERROR_MESSAGES["recipient_not_found"]), 400
        summary = controller.invoke_send()
        if summary is None:
            flash(_("Select at least one client to send the ebook."), "warning")
        return _render_page(ebook, controller, term=term, summary=summary)
    finally:
        selection_controller.dispose(controller)


@bp.route("/view/<int:ebook_id>/send", methods=["POST"])
def send(ebook_id: int):
    if not is_authenticated():
        return _login_redirect()
    term = request.form.get("term")
    try:
        _ebook, recipients = ebook_recipients_service.load_recipients(ebook_id, term)
    except EbookNotFoundError:
        return render_template("ebook_not_found.html", ebook_id=ebook_id), 404
    controller = selection_controller.create(recipients)
    try:
        try:
            ebook_recipients_service.apply_selection(
                controller, _posted_client_ids(), select_all=_posted_select_all()
            )
        except NotFoundError as exc:
            LOG.warning("Send for ebook %s posted unknown client %r", ebook_id, exc.recipient_id)
            return str(_ERROR_MESSAGES["recipient_not_found"]), 400
        handoff = current_app.extensions.get(HANDOFF_EXTENSION_KEY, _log_handoff)
        sent = controller.confirm_send(lambda selected: handoff(ebook_id, selected))
        if sent:
            flash(_("Ebook sent to the selected clients."), "success")
        else:
            flash(_("Select at least one client to send the ebook."), "warning")
    finally:
        selection_controller.dispose(controller)
    return redirect(url_for("ebook_view.view_page", ebook_id=ebook_id))


@bp.route("/view/<int:ebook_id>/summary", methods=["POST"])
def summary_api(ebook_id: int):
    if not is_authenticated():
        return _json_error("login_required", 401)
    payload = request.get_json(silent=True)
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        return _json_error("invalid_payload")
    client_ids = payload.get("clients") or []
    if not isinstance(client_ids, list):
        return _json_error("invalid_payload")
    term = payload.get("term")
    if term is not None and not isinstance(term, str):
        return _json_error("invalid_payload")
    select_all = payload.get("select_all", False)
    if not isinstance(select_all, bool):
        return _json_error("invalid_payload")
    try:
        _ebook, recipients = ebook_recipients_service.load_recipients(ebook_id, term)
    except EbookNotFoundError:
        return _json_error("ebook_not_found", 404)
    controller = selection_controller.create(recipients)
    try:
        try:
            ebook_recipients_service.apply_selection(
                controller, client_ids, select_all=select_all
            )
        except NotFoundError as exc:
            return _json_error("recipient_not_found", details={"client_id": exc.recipient_id})
        summary = controller.invoke_send()
        return jsonify(
            {
                "allowed": controller.send_enabled(),
                "all_selected": controller.all_selected(),
                "summary": summary.as_dict() if summary is not None else None,
            }
        )
    finally:
        selection_controller.dispose(controller)


def register_ebook_view_blueprint(app: Any, handoff=None) -> None:
    """Register the blueprint once; `handoff(ebook_id, recipients)` receives confirmed sends."""
    if "babel" not in app.extensions:
        Babel(app)
    if handoff is not None:
        app.extensions[HANDOFF_EXTENSION_KEY] = handoff
    if getattr(app, "_ebook_view_bp", None):
        return
    app.register_blueprint(bp)
    setattr(app, "_ebook_view_bp", bp)
    LOG.debug("ebook_view blueprint registered")


__all__ = ["bp", "register_ebook_view_blueprint", "HANDOFF_EXTENSION_KEY"]
