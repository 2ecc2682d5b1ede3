from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from sqlalchemy.orm import Session

from tunesearch.models.core import SearchResult
from tunesearch.services.connectors.base import CatalogConnector, CatalogRequestFailed
from tunesearch.services.store import SearchRecord, StoreError, upsert_search_result
from tunesearch.services.utils import first_text, now_utc, sha256_text
from tunesearch.services.validation import ValidationError

logger = logging.getLogger(__name__)

# 52 bits keeps synthetic ids exact in JavaScript clients.
_FALLBACK_ID_HEX_DIGITS = 13


@dataclass
class ItemFailure:
    index: int
    record_id: int | None
    reason: str


@dataclass
class SearchOutcome:
    records: list[SearchResult] = field(default_factory=list)
    failures: list[ItemFailure] = field(default_factory=list)
    error: CatalogRequestFailed | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _catalog_id(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, str) and value.strip().isdigit():
        value = int(value.strip())
    if isinstance(value, int):
        return value if value > 0 else None
    return None


def fallback_record_id(item: dict[str, Any]) -> int:
    """Deterministic negative id for items carrying neither trackId nor collectionId.

    Real catalog ids are positive, so synthetic ids never collide with them, and
    the same item maps to the same row on every retry.
    """
    key = "|".join(
        [
            first_text(item, "kind"),
            first_text(item, "artistName"),
            first_text(item, "collectionName", "trackName"),
            first_text(item, "collectionViewUrl", "trackViewUrl"),
        ]
    )
    return -(int(sha256_text(key)[:_FALLBACK_ID_HEX_DIGITS], 16) or 1)


def normalize_catalog_item(item: dict[str, Any], *, search_date: datetime) -> SearchRecord:
    record_id = _catalog_id(item.get("trackId")) or _catalog_id(item.get("collectionId")) or fallback_record_id(item)
    return SearchRecord(
        id=record_id,
        kind=first_text(item, "kind"),
        artist_name=first_text(item, "artistName"),
        collection_name=first_text(item, "collectionName", "trackName"),
        collection_view_url=first_text(item, "collectionViewUrl", "trackViewUrl"),
        image=first_text(item, "artworkUrl600", "artworkUrl100"),
        search_date=search_date,
    )


def run_catalog_search(
    db: Session,
    term: str,
    *,
    connector: CatalogConnector,
    clock: Callable[[], datetime] = now_utc,
) -> SearchOutcome:
    try:
        items = connector.fetch(term)
    except CatalogRequestFailed as exc:
        logger.warning("Catalog search for %r failed: status=%s reason=%s", term, exc.status, exc.reason)
        return SearchOutcome(error=exc)

    outcome = SearchOutcome()
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            outcome.failures.append(ItemFailure(index=index, record_id=None, reason="catalog item is not an object"))
            logger.error("Skipped catalog item %d for %r: not an object", index, term)
            continue
        record = normalize_catalog_item(item, search_date=clock())
        try:
            stored = upsert_search_result(db, record)
        except (ValidationError, StoreError) as exc:
            outcome.failures.append(ItemFailure(index=index, record_id=record.id, reason=str(exc)))
            logger.error("Error saving catalog item %d (id=%s) for %r: %s", index, record.id, term, exc)
            continue
        outcome.records.append(stored)

    logger.info(
        "Catalog search for %r: %d items, %d saved, %d failed",
        term,
        len(items),
        len(outcome.records),
        len(outcome.failures),
    )
    return outcome


def search_and_save(
    db: Session,
    term: str,
    *,
    connector: CatalogConnector,
    clock: Callable[[], datetime] = now_utc,
) -> list[SearchResult]:
    """Fetch ``term`` from the catalog, upsert every item and return the stored rows.

    Upstream failures yield an empty list; use run_catalog_search to tell them
    apart from an empty result set.
    """
    return run_catalog_search(db, term, connector=connector, clock=clock).records
