import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field


class PostSummary(BaseModel):
    id: str
    title: str
    description: str
    readingTimeMinutes: float = 0


class DocumentProperties(BaseModel):
    title: str
    description: str
    body: str
    readingTimeMinutes: float = 0
    lastEditedAt: Optional[datetime.datetime] = None


class BlockEntry(BaseModel):
    value: Dict[str, Any]


class RecordMap(BaseModel):
    # Only `block` is populated; the other keys are required by the renderer.
    block: Dict[str, BlockEntry] = Field(default_factory=dict)
    collection: Dict[str, Any] = Field(default_factory=dict)
    collection_view: Dict[str, Any] = Field(default_factory=dict)
    notion_user: Dict[str, Any] = Field(default_factory=dict)
    collection_query: Dict[str, Any] = Field(default_factory=dict)
    signed_urls: Dict[str, Any] = Field(default_factory=dict)


class PostDetail(BaseModel):
    id: str
    properties: DocumentProperties
    lastEditedDisplay: Optional[str] = None
    hasBody: bool = False
    recordMap: RecordMap


class PostIndex(BaseModel):
    posts: List[PostSummary] = Field(default_factory=list)
    status: Literal["ok", "empty", "unavailable"] = "ok"
    message: Optional[str] = None
