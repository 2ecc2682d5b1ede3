import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tunesearch import __version__
from tunesearch.api.routes import health, search
from tunesearch.config import get_settings
from tunesearch.database import engine
from tunesearch.logging_config import configure_logging
from tunesearch.schemas import MetaResponse
from tunesearch.services.connectors.itunes import ITunesConnector
from tunesearch.services.schema import ensure_runtime_schema

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    configure_logging(settings.log_level)
    ensure_runtime_schema(engine)
    app.state.catalog_connector = ITunesConnector(
        base_url=settings.catalog_base_url,
        country=settings.catalog_country,
        limit=settings.catalog_limit,
        timeout_seconds=settings.catalog_timeout_seconds,
    )
    logger.info(
        "Catalog connector ready: %s (country=%s, limit=%d)",
        settings.catalog_base_url,
        settings.catalog_country,
        settings.catalog_limit,
    )
    try:
        yield
    finally:
        app.state.catalog_connector.close()


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title="tunesearch",
        version=__version__,
        description="Relays search terms to the iTunes Search API and keeps the latest copy of every result.",
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(search.router)

    @app.get("/meta", response_model=MetaResponse)
    def meta() -> MetaResponse:
        settings = get_settings()
        return MetaResponse(
            service="tunesearch",
            version=__version__,
            catalog=settings.catalog_base_url,
            catalog_country=settings.catalog_country,
            catalog_limit=settings.catalog_limit,
            strict_upstream_errors=settings.strict_upstream_errors,
            timestamp=datetime.now(UTC),
        )

    return app


app = create_app()
