"""Author entity - embedded in a document by value."""

from dataclasses import dataclass, replace


@dataclass
class Author:
    """Document author."""

    id: str | None = None
    name: str | None = None

    def copy(self) -> "Author":
        return replace(self)
