from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import DisconnectionError, InterfaceError, OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session

from tunesearch.models.core import SearchResult
from tunesearch.services.validation import validate_search_record

logger = logging.getLogger(__name__)

MUTABLE_FIELDS = ("kind", "artist_name", "collection_name", "collection_view_url", "image", "search_date")

_UPSERT_INSERTS = {
    "sqlite": sqlite_insert,
    "postgresql": postgresql_insert,
}


class StoreError(RuntimeError):
    pass


class StoreUnavailable(StoreError):
    pass


class StoreWriteError(StoreError):
    pass


@dataclass
class SearchRecord:
    id: int
    kind: str
    artist_name: str
    collection_name: str
    collection_view_url: str
    image: str
    search_date: datetime

    def values(self) -> dict[str, Any]:
        return asdict(self)


def _execute_upsert(db: Session, record: SearchRecord) -> None:
    values = record.values()
    insert_factory = _UPSERT_INSERTS.get(db.get_bind().dialect.name)
    if insert_factory is None:
        db.merge(SearchResult(**values))
        return
    stmt = insert_factory(SearchResult).values(**values)
    stmt = stmt.on_conflict_do_update(
        index_elements=[SearchResult.id],
        set_={field: getattr(stmt.excluded, field) for field in MUTABLE_FIELDS},
    )
    db.execute(stmt)


def upsert_search_result(db: Session, record: SearchRecord) -> SearchResult:
    """Insert ``record`` or replace every mutable field of the row sharing its id.

    Each call is its own transaction and returns a detached copy of the row as
    written by this call. Database failures roll back and surface as
    StoreUnavailable (connection-level) or StoreWriteError (everything else);
    an invalid record raises ValidationError before the store is touched.
    """
    validate_search_record(record)
    try:
        _execute_upsert(db, record)
        db.commit()
        stored = db.get(SearchResult, record.id, populate_existing=True)
    except (OperationalError, InterfaceError, DisconnectionError) as exc:
        db.rollback()
        raise StoreUnavailable(f"Record store unavailable while writing id={record.id}: {exc}") from exc
    except SQLAlchemyError as exc:
        db.rollback()
        raise StoreWriteError(f"Failed to upsert search result id={record.id}: {exc}") from exc

    if stored is None:
        raise StoreWriteError(f"Upserted search result id={record.id} could not be read back")
    # Later commits in this session must not expire or refresh the returned snapshot.
    db.expunge(stored)
    logger.debug("Upserted search result id=%s", record.id)
    return stored


def count_search_results(db: Session) -> int:
    return int(db.scalar(select(func.count()).select_from(SearchResult)) or 0)
