"""Builds the recipient list of an ebook's view page and replays posted selections."""
from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from ebook_sender.db.models import Ebook
from ebook_sender.db.repositories import ebooks_repo
from ebook_sender.services.controller import SelectionController
from ebook_sender.services.selection import Recipient
from ebook_sender.utils.logging import get_logger

LOG = get_logger("ebook_recipients_service")


class EbookNotFoundError(RuntimeError):
    """Raised when an ebook id cannot be located."""


def load_recipients(ebook_id: int, term: Optional[str] = None) -> Tuple[Ebook, List[Recipient]]:
    ebook = ebooks_repo.get_ebook(ebook_id)
    if ebook is None:
        raise EbookNotFoundError(f"ebook {ebook_id} not found")
    clients = ebooks_repo.list_clients_for_ebook(ebook_id, term)
    recipients = [Recipient(id=str(c.id), name=c.name, email=c.email) for c in clients]
    LOG.debug("Loaded %d recipient(s) for ebook %s term=%r", len(recipients), ebook_id, term)
    return ebook, recipients


def apply_selection(
    controller: SelectionController,
    client_ids: Iterable[object],
    *,
    select_all: bool = False,
) -> None:
    """Replay a submitted form onto a fresh controller.

    The posted client ids are authoritative; `select_all` only applies when
    no id was posted. Raises NotFoundError for ids that were not rendered
    on the page.
    """
    keys: List[str] = []
    for raw in client_ids:
        key = str(raw).strip()
        if key and key not in keys:
            keys.append(key)
    if not keys:
        if select_all:
            controller.toggle_select_all(True)
        return
    for key in keys:
        controller.toggle_one(key)


__all__ = ["EbookNotFoundError", "load_recipients", "apply_selection"]
