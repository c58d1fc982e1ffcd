"""Domain exceptions."""


class DocStoreError(Exception):
    """Base exception for DocStore."""

    pass


class NotFound(DocStoreError):
    """Requested document was not found."""

    pass


class ValidationError(DocStoreError):
    """Validation failed for input data."""

    pass
