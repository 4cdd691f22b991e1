import datetime
import logging
import re
from typing import Iterable, Optional

from content_store.exceptions import ValidationError
from content_store.schemas.content import (
    PUBLISH_DATE_FORMAT,
    ContentDocument,
    ContentImage,
)
from content_store.utils import calculate_reading_time

logger = logging.getLogger(__name__)

_PUBLISH_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}")


def validate(
    metadata,
    body: str = "",
    *,
    slug: str = "",
    allowed_categories: Optional[Iterable[str]] = None,
    words_per_minute: int = 200,
) -> ContentDocument:
    """Check a frontmatter mapping and build a ContentDocument from it.

    Raises ValidationError for the first missing or malformed field; checks
    run in a fixed order so the same document always reports the same field.
    """
    if not isinstance(metadata, dict):
        raise ValidationError(
            "frontmatter", "metadata block must be a mapping of key: value pairs"
        )

    title = _require_text(metadata, "title", allow_blank=False)
    publish_date = _parse_publish_date(metadata)
    draft = _parse_draft(metadata)
    snippet = _require_text(metadata, "snippet")
    image = _parse_image(metadata)
    category = _require_text(metadata, "category")
    author = _require_text(metadata, "author")
    tags = _parse_tags(metadata)

    allowed = frozenset(allowed_categories or ())
    if allowed and category not in allowed:
        raise ValidationError(
            "category",
            f"'{category}' is not one of: {', '.join(sorted(allowed))}",
        )

    return ContentDocument(
        slug=slug,
        title=title,
        snippet=snippet,
        publishDate=publish_date,
        category=category,
        author=author,
        image=image,
        tags=tags,
        draft=draft,
        body=body,
        readingTime=calculate_reading_time(body, words_per_minute),
    )


def _require_text(metadata: dict, field: str, allow_blank: bool = True) -> str:
    if metadata.get(field) is None:
        raise ValidationError(field, "is required")
    value = metadata[field]
    if not isinstance(value, str):
        raise ValidationError(field, f"must be text, got {type(value).__name__}")
    if not allow_blank and not value.strip():
        raise ValidationError(field, "must not be empty")
    return value


def _parse_publish_date(metadata: dict) -> datetime.datetime:
    value = metadata.get("publishDate")
    if value is None:
        raise ValidationError("publishDate", "is required")
    # YAML turns bare dates into date objects; only the quoted text form counts
    if not isinstance(value, str):
        raise ValidationError(
            "publishDate",
            f"must be text in the form YYYY-MM-DD HH:MM, got {type(value).__name__}",
        )
    if not _PUBLISH_DATE_PATTERN.fullmatch(value):
        raise ValidationError(
            "publishDate", f"'{value}' is not in the form YYYY-MM-DD HH:MM"
        )
    try:
        return datetime.datetime.strptime(value, PUBLISH_DATE_FORMAT)
    except ValueError as e:
        raise ValidationError(
            "publishDate", f"'{value}' is not in the form YYYY-MM-DD HH:MM"
        ) from e


def _parse_draft(metadata: dict) -> bool:
    value = metadata.get("draft", False)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValidationError("draft", f"must be true or false, got {value!r}")
    return value


def _parse_image(metadata: dict) -> Optional[ContentImage]:
    if metadata.get("image") is None:
        return None
    value = metadata["image"]
    if not isinstance(value, dict):
        raise ValidationError("image", "must be a mapping with src and alt")

    src = value.get("src")
    if src is None:
        raise ValidationError("image.src", "is required when image is present")
    if not isinstance(src, str) or not src.strip():
        raise ValidationError("image.src", "must be a non-empty URL")

    alt = value.get("alt")
    if alt is None:
        raise ValidationError("image.alt", "is required when image is present")
    if not isinstance(alt, str):
        raise ValidationError("image.alt", f"must be text, got {type(alt).__name__}")

    return ContentImage(src=src, alt=alt)


def _parse_tags(metadata: dict) -> list[str]:
    value = metadata.get("tags")
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise ValidationError("tags", "must be a list of strings")
    for item in value:
        if not isinstance(item, str):
            raise ValidationError("tags", f"must be a list of strings, got {item!r}")
    return list(value)
