"""
Display-field extraction from Notion page property bags.

Extraction is first-value and best-effort: any missing property, empty
rich-text array or unexpected shape falls back to the field's default.
It never raises.
"""

import datetime
import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from notion_blog.locale import fallback_for
from notion_blog.schemas.blog import DocumentProperties, PostSummary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DisplayField:
    property_name: str
    property_type: str
    fallback_key: Optional[str] = None  # None means a numeric field, fallback 0


TITLE = DisplayField("Title", "title", "title")
DESCRIPTION = DisplayField("Description", "rich_text", "description")
BODY = DisplayField("Body", "rich_text", "body")
READING_TIME = DisplayField("Reading Time", "formula")


def extract_field(
    properties: Any, field: DisplayField, locale: Optional[str] = None
) -> Union[str, float]:
    """Return the field's first value from the property bag, or its fallback."""
    if field.fallback_key is None:
        return _first_number(properties, field)

    fallback = fallback_for(field.fallback_key, locale)
    prop = _get(properties, field.property_name)
    items = _get(prop, field.property_type)
    if not isinstance(items, list) or not items:
        return fallback
    text = _get(items[0], "plain_text")
    if not isinstance(text, str) or not text:
        return fallback
    return text


def _first_number(properties: Any, field: DisplayField) -> float:
    formula = _get(_get(properties, field.property_name), field.property_type)
    value = _get(formula, "number")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return value or 0


def _get(container: Any, key: str) -> Any:
    if isinstance(container, Mapping):
        return container.get(key)
    return None


def parse_last_edited(page: Any) -> Optional[datetime.datetime]:
    raw = _get(page, "last_edited_time")
    if not isinstance(raw, str) or not raw:
        return None
    try:
        return datetime.datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError:
        logger.warning(f"Unparseable last_edited_time: {raw!r}")
        return None


def to_post_summary(page: Mapping, locale: Optional[str] = None) -> PostSummary:
    properties = page.get("properties")
    return PostSummary(
        id=page["id"],
        title=extract_field(properties, TITLE, locale),
        description=extract_field(properties, DESCRIPTION, locale),
        readingTimeMinutes=extract_field(properties, READING_TIME, locale),
    )


def to_document_properties(
    page: Mapping, locale: Optional[str] = None
) -> DocumentProperties:
    properties = page.get("properties")
    return DocumentProperties(
        title=extract_field(properties, TITLE, locale),
        description=extract_field(properties, DESCRIPTION, locale),
        body=extract_field(properties, BODY, locale),
        readingTimeMinutes=extract_field(properties, READING_TIME, locale),
        lastEditedAt=parse_last_edited(page),
    )
