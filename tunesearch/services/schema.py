import logging

from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from tunesearch.models.base import Base
from tunesearch.services.store import StoreUnavailable

logger = logging.getLogger(__name__)


def ensure_runtime_schema(engine: Engine) -> None:
    try:
        existing_tables = set(inspect(engine).get_table_names())
        Base.metadata.create_all(bind=engine)
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.error("Could not connect to the record store: %s", exc)
        raise StoreUnavailable(f"Record store unavailable: {exc}") from exc

    created = sorted(set(Base.metadata.tables) - existing_tables)
    if created:
        logger.info("Created tables: %s", ", ".join(created))
    logger.info("Connected to record store (%s)", engine.dialect.name)
