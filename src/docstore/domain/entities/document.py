"""Document entity."""

from dataclasses import dataclass, replace
from datetime import datetime

from docstore.domain.entities.author import Author


@dataclass
class Document:
    """Stored record. ``id`` stays None until the document is first saved."""

    id: str | None = None
    title: str | None = None
    content: str | None = None
    author: Author | None = None
    created: datetime | None = None

    def copy(self) -> "Document":
        """Structurally independent duplicate, including the embedded author."""
        return replace(
            self,
            author=self.author.copy() if self.author is not None else None,
        )
