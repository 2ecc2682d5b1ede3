import hashlib
from datetime import UTC, datetime


def now_utc() -> datetime:
    return datetime.now(UTC)


def sha256_text(value: str) -> str:
    return hashlib.sha256(value.encode("utf-8")).hexdigest()


def first_text(item: dict, *keys: str) -> str:
    """Return the first present, non-empty value among ``keys`` as a string."""
    for key in keys:
        value = item.get(key)
        if value is None:
            continue
        text = str(value)
        if text:
            return text
    return ""
