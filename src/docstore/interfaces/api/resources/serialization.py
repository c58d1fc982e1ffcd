"""JSON <-> domain conversion shared by API resources."""

from datetime import UTC, datetime
from typing import Any

from docstore.domain.entities import Author, Document
from docstore.domain.exceptions import ValidationError
from docstore.domain.value_objects import SearchRequest


def document_to_dict(d: Document) -> dict:
    return {
        "id": d.id,
        "title": d.title,
        "content": d.content,
        "author": (
            {"id": d.author.id, "name": d.author.name} if d.author is not None else None
        ),
        "created": d.created.isoformat() if d.created else None,
    }


def document_from_media(body: Any, document_id: str | None = None) -> Document:
    """Build a Document from a JSON body. ``document_id`` (from the path) wins over body id."""
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")

    author_raw = body.get("author")
    if author_raw is None:
        author = None
    elif isinstance(author_raw, dict):
        author = Author(
            id=_optional_str(author_raw, "id"),
            name=_optional_str(author_raw, "name"),
        )
    else:
        raise ValidationError("author must be an object or null")

    return Document(
        id=document_id if document_id is not None else _optional_str(body, "id"),
        title=_optional_str(body, "title"),
        content=_optional_str(body, "content"),
        author=author,
        created=_parse_timestamp(body.get("created"), "created"),
    )


def search_request_from_media(body: Any) -> SearchRequest:
    """Build a SearchRequest; missing or null keys leave the dimension unconstrained."""
    if body is None:
        return SearchRequest()
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return SearchRequest(
        title_prefixes=_optional_str_list(body, "title_prefixes"),
        contains_contents=_optional_str_list(body, "contains_contents"),
        author_ids=_optional_str_list(body, "author_ids"),
        created_from=_parse_timestamp(body.get("created_from"), "created_from"),
        created_to=_parse_timestamp(body.get("created_to"), "created_to"),
    )


def _optional_str(body: dict, key: str) -> str | None:
    value = body.get(key)
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"{key} must be a string or null")
    return value


def _optional_str_list(body: dict, key: str) -> list[str] | None:
    value = body.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValidationError(f"{key} must be a list of strings or null")
    return value


def _parse_timestamp(value: Any, key: str) -> datetime | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{key} must be an ISO-8601 string or null")
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as e:
        raise ValidationError(f"Invalid {key}: {e}") from e
    # Naive timestamps are taken as UTC so every stored value is comparable.
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed
