from __future__ import annotations

import logging
from typing import Any

import httpx

from tunesearch.services.connectors.base import CatalogConnector, CatalogRequestFailed

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://itunes.apple.com/search"
DEFAULT_COUNTRY = "sa"
DEFAULT_LIMIT = 30


class ITunesConnector(CatalogConnector):
    name = "itunes"

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BASE_URL,
        country: str = DEFAULT_COUNTRY,
        limit: int = DEFAULT_LIMIT,
        timeout_seconds: float = 10.0,
        client: httpx.Client | None = None,
    ) -> None:
        self.base_url = base_url
        self.country = country
        self.limit = limit
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=timeout_seconds,
            headers={"User-Agent": "tunesearch/0.1", "Accept": "application/json"},
        )

    def build_params(self, term: str) -> dict[str, str]:
        return {"term": term, "limit": str(self.limit), "country": self.country}

    def fetch(self, term: str) -> list[dict[str, Any]]:
        try:
            response = self._client.get(self.base_url, params=self.build_params(term))
        except httpx.TimeoutException as exc:
            raise CatalogRequestFailed(None, f"timeout: {exc}") from exc
        except httpx.HTTPError as exc:
            raise CatalogRequestFailed(None, f"transport error: {exc}") from exc

        if not response.is_success:
            raise CatalogRequestFailed(response.status_code, response.reason_phrase or "unsuccessful response")

        try:
            payload = response.json()
        except ValueError as exc:
            raise CatalogRequestFailed(response.status_code, "response body is not JSON") from exc
        if not isinstance(payload, dict):
            raise CatalogRequestFailed(response.status_code, "response body is not an object")
        results = payload.get("results")
        if not isinstance(results, list):
            raise CatalogRequestFailed(response.status_code, "response has no results list")

        logger.debug("Catalog returned %d items for %r", len(results), term)
        return results

    def close(self) -> None:
        if self._owns_client:
            self._client.close()
