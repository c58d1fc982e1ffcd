"""Application ports - interfaces for storage adapters."""

from docstore.application.ports.repositories import DocumentRepository

__all__ = [
    "DocumentRepository",
]
