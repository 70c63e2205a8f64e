import datetime
from typing import Dict, Optional

DEFAULT_LOCALE = "en"

_EN_MONTHS = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]

FALLBACKS: Dict[str, Dict[str, str]] = {
    "en": {
        "title": "Untitled",
        "description": "No description",
        "body": "No body",
    },
    "ko": {
        "title": "제목 없음",
        "description": "설명 없음",
        "body": "본문 없음",
    },
}

INDEX_MESSAGES: Dict[str, Dict[str, str]] = {
    "en": {
        "empty": "No posts yet.",
        "unavailable": "Posts are temporarily unavailable.",
    },
    "ko": {
        "empty": "게시물이 없습니다. 곧 새로운 글이 업데이트될 예정입니다.",
        "unavailable": "게시물을 불러올 수 없습니다. 잠시 후 다시 시도해 주세요.",
    },
}


def normalize_locale(locale: Optional[str]) -> str:
    if not locale:
        return DEFAULT_LOCALE
    code = locale.replace("_", "-").split("-", 1)[0].lower()
    return code if code in FALLBACKS else DEFAULT_LOCALE


def fallback_for(key: str, locale: Optional[str] = None) -> str:
    return FALLBACKS[normalize_locale(locale)][key]


def index_message(status: str, locale: Optional[str] = None) -> Optional[str]:
    return INDEX_MESSAGES[normalize_locale(locale)].get(status)


def format_date(value: Optional[datetime.datetime], locale: Optional[str] = None):
    """Long-form calendar date, e.g. "May 3, 2024" or "2024년 5월 3일"."""
    if value is None:
        return None
    if value.tzinfo is not None:
        value = value.astimezone()
    if normalize_locale(locale) == "ko":
        return f"{value.year}년 {value.month}월 {value.day}일"
    return f"{_EN_MONTHS[value.month - 1]} {value.day}, {value.year}"
