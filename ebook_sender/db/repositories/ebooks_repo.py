"""Repository helpers for clients, ebooks, and the clients listed per ebook."""
from __future__ import annotations

from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError

from ebook_sender.db import app_session
from ebook_sender.db.models import Client, Ebook, EbookClient

DEFAULT_LIST_LIMIT = 1000
LIKE_ESCAPE = "\\"


class ClientExistsError(Exception):
    """Raised when attempting to insert a client with a duplicate email."""


def create_client(name: str, email: str) -> Client:
    client = Client(name=name, email=email)
    try:
        with app_session() as session:
            session.add(client)
    except IntegrityError as exc:
        raise ClientExistsError("Client already exists for email") from exc
    return client


def create_ebook(title: str) -> Ebook:
    ebook = Ebook(title=title)
    with app_session() as session:
        session.add(ebook)
    return ebook


def get_ebook(ebook_id: int) -> Optional[Ebook]:
    with app_session() as session:
        return session.query(Ebook).filter(Ebook.id == ebook_id).one_or_none()


def attach_client(ebook_id: int, client_id: int) -> bool:
    """Link a client to an ebook; returns False when already linked."""
    with app_session() as session:
        existing = (
            session.query(EbookClient)
            .filter(EbookClient.ebook_id == ebook_id, EbookClient.client_id == client_id)
            .one_or_none()
        )
        if existing:
            return False
        session.add(EbookClient(ebook_id=ebook_id, client_id=client_id))
        return True


def _escape_like(value: str) -> str:
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def list_clients_for_ebook(
    ebook_id: int,
    term: Optional[str] = None,
    *,
    limit: int = DEFAULT_LIST_LIMIT,
) -> List[Client]:
    """Clients listed for an ebook, ordered by name then id.

    `term` filters case-insensitively on name or email; `%` and `_` in it
    match literally.
    """
    with app_session() as session:
        query = (
            session.query(Client)
            .join(EbookClient, EbookClient.client_id == Client.id)
            .filter(EbookClient.ebook_id == ebook_id)
        )
        cleaned = (term or "").strip()
        if cleaned:
            pattern = f"%{_escape_like(cleaned)}%"
            query = query.filter(
                or_(
                    Client.name.ilike(pattern, escape=LIKE_ESCAPE),
                    Client.email.ilike(pattern, escape=LIKE_ESCAPE),
                )
            )
        return query.order_by(Client.name.asc(), Client.id.asc()).limit(limit).all()


__all__ = [
    "ClientExistsError",
    "DEFAULT_LIST_LIMIT",
    "create_client",
    "create_ebook",
    "get_ebook",
    "attach_client",
    "list_clients_for_ebook",
]
