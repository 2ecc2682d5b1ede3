import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from tunesearch.api.deps import get_catalog_connector
from tunesearch.config import Settings, get_settings
from tunesearch.database import get_db
from tunesearch.schemas import ErrorResponse, SearchResultOut
from tunesearch.services.catalog import run_catalog_search
from tunesearch.services.connectors.base import CatalogConnector
from tunesearch.services.validation import SEARCH_WORD_REQUIRED, ValidationError, validate_search_term

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/search", tags=["search"])

CATALOG_FAILED = "Catalog request failed"
INTERNAL_ERROR = "Internal server error"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@router.get("", include_in_schema=False)
@router.get("/", include_in_schema=False)
def search_without_term() -> JSONResponse:
    return _error(400, SEARCH_WORD_REQUIRED)


@router.get(
    "/{search_word}",
    response_model=list[SearchResultOut],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
def search(
    search_word: str,
    db: Session = Depends(get_db),
    connector: CatalogConnector = Depends(get_catalog_connector),
    settings: Settings = Depends(get_settings),
):
    try:
        term = validate_search_term(search_word)
    except ValidationError as exc:
        return _error(400, str(exc))

    try:
        outcome = run_catalog_search(db, term, connector=connector)
        if not outcome.ok and settings.strict_upstream_errors:
            return _error(502, CATALOG_FAILED)
        return [SearchResultOut.model_validate(record) for record in outcome.records]
    except Exception:
        logger.exception("Search endpoint error for %r", term)
        return _error(500, INTERNAL_ERROR)
