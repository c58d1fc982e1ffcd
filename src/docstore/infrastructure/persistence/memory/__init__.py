"""In-memory storage adapters."""

from docstore.infrastructure.persistence.memory.document_manager import DocumentManager

__all__ = [
    "DocumentManager",
]
