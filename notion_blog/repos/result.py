from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ContentResult(Generic[T]):
    """
    Outcome of a Notion fetch.
    On failure `value` still holds a safe default (empty list or None),
    so callers that only read `value` see an empty result.
    """

    ok: bool
    value: T
    reason: Optional[str] = None

    @classmethod
    def success(cls, value: T) -> "ContentResult[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, default: T, reason: str) -> "ContentResult[T]":
        return cls(ok=False, value=default, reason=reason)
