"""ORM models for the ebook sender DB (clients, ebooks, and their link)."""
from __future__ import annotations

import datetime

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class Client(Base):
    """A reader the creator can send ebooks to."""

    __tablename__ = "clients"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, index=True)
    email = Column(String(255), nullable=False, unique=True)
    created_at = Column(DateTime, default=datetime.datetime.utcnow, nullable=False)

    def __repr__(self) -> str:  # pragma: no cover
        return f"<Client id={self.id} email={self.email}>"


class Ebook(Base):
    __tablename__ = "ebooks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    created_at = Column(DateTime, default=datetime.datetime.utcnow, nullable=False)

    def __repr__(self) -> str:  # pragma: no cover
        return f"<Ebook id={self.id} title={self.title}>"


class EbookClient(Base):
    """Clients listed on an ebook's view page. Each (ebook, client) pair is unique."""

    __tablename__ = "ebook_clients"

    id = Column(Integer, primary_key=True, autoincrement=True)
    ebook_id = Column(Integer, ForeignKey("ebooks.id", ondelete="CASCADE"), nullable=False, index=True)
    client_id = Column(Integer, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.datetime.utcnow, nullable=False)

    __table_args__ = (
        UniqueConstraint("ebook_id", "client_id", name="uq_ebook_client"),
        Index("ix_ebook_clients_client_ebook", "client_id", "ebook_id"),
    )


__all__ = ["Base", "Client", "Ebook", "EbookClient"]
