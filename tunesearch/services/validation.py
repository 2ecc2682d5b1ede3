from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tunesearch.services.store import SearchRecord

SEARCH_WORD_REQUIRED = "searchWord parameter is required"


class ValidationError(ValueError):
    pass


def require(condition: bool, message: str) -> None:
    if not condition:
        raise ValidationError(message)


def validate_search_term(term: str | None) -> str:
    cleaned = (term or "").strip()
    require(bool(cleaned), SEARCH_WORD_REQUIRED)
    return cleaned


def validate_search_record(record: SearchRecord) -> None:
    require(isinstance(record.id, int) and not isinstance(record.id, bool), f"Record id must be an integer: {record.id!r}")
    require(bool(record.kind.strip()), f"kind is required (id={record.id})")
    require(bool(record.artist_name.strip()), f"artistName is required (id={record.id})")
    require(record.search_date is not None, f"searchDate is required (id={record.id})")
