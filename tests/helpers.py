from datetime import UTC, datetime, timedelta
from typing import Any

import httpx

from tunesearch.services.connectors.base import CatalogConnector
from tunesearch.services.connectors.itunes import ITunesConnector


def catalog_item(track_id: int | None = 1, **overrides: Any) -> dict[str, Any]:
    item: dict[str, Any] = {
        "trackId": track_id,
        "kind": "podcast",
        "artistName": "A",
        "collectionName": "B",
        "collectionViewUrl": "http://x",
        "artworkUrl600": "http://img",
    }
    item.update(overrides)
    return {key: value for key, value in item.items() if value is not None}


class StubConnector(CatalogConnector):
    name = "stub"

    def __init__(self, items: list[Any] | None = None, error: Exception | None = None) -> None:
        self.items = items or []
        self.error = error
        self.terms: list[str] = []

    def fetch(self, term: str) -> list[Any]:
        self.terms.append(term)
        if self.error is not None:
            raise self.error
        return list(self.items)


class TickingClock:
    def __init__(self, start: datetime | None = None, step: timedelta = timedelta(seconds=1)) -> None:
        self.current = start or datetime(2026, 1, 1, 12, 0, tzinfo=UTC)
        self.step = step

    def __call__(self) -> datetime:
        value = self.current
        self.current += self.step
        return value


def mock_itunes_connector(handler) -> ITunesConnector:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return ITunesConnector(base_url="https://catalog.test/search", country="sa", limit=30, client=client)
