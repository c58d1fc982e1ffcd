"""Search request - independently optional filter dimensions."""

from collections.abc import Sequence
from dataclasses import dataclass, fields
from datetime import datetime


@dataclass(frozen=True)
class SearchRequest:
    """Query descriptor. A field left as None places no constraint on its dimension.

    List dimensions match when ANY listed value matches; dimensions are
    combined with AND. Date bounds are inclusive.
    """

    title_prefixes: Sequence[str] | None = None
    contains_contents: Sequence[str] | None = None
    author_ids: Sequence[str] | None = None
    created_from: datetime | None = None
    created_to: datetime | None = None

    def is_empty(self) -> bool:
        """True when no dimension is constrained (matches every document)."""
        return all(getattr(self, f.name) is None for f in fields(self))
