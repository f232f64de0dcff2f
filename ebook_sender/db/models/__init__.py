"""ORM models aggregate exports."""
from .ebooks import (  # noqa: F401
	Base,
	Client,
	Ebook,
	EbookClient,
)

__all__ = [
	"Base",
	"Client",
	"Ebook",
	"EbookClient",
]
