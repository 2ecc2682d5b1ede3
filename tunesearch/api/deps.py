from fastapi import Request

from tunesearch.services.connectors.base import CatalogConnector


def get_catalog_connector(request: Request) -> CatalogConnector:
    return request.app.state.catalog_connector
