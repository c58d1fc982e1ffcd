"""Domain entities."""

from docstore.domain.entities.author import Author
from docstore.domain.entities.document import Document

__all__ = [
    "Author",
    "Document",
]
