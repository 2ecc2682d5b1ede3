"""Catalog connector interface and the iTunes Search API connector."""

from tunesearch.services.connectors.base import CatalogConnector, CatalogRequestFailed
from tunesearch.services.connectors.itunes import ITunesConnector

__all__ = ["CatalogConnector", "CatalogRequestFailed", "ITunesConnector"]
