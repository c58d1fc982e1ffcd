"""DocStore - in-memory document repository with upsert, lookup and search."""

__version__ = "0.1.0"
