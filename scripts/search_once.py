import argparse
import json

from tunesearch.config import get_settings
from tunesearch.database import SessionLocal, engine
from tunesearch.logging_config import configure_logging
from tunesearch.schemas import SearchResultOut
from tunesearch.services.catalog import run_catalog_search
from tunesearch.services.connectors.itunes import ITunesConnector
from tunesearch.services.schema import ensure_runtime_schema
from tunesearch.services.store import StoreError
from tunesearch.services.validation import ValidationError, validate_search_term


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run one catalog search and upsert the results")
    parser.add_argument("term", help="Search term sent to the catalog")
    parser.add_argument("--strict", action="store_true", help="Exit 1 when any item fails to save")
    return parser.parse_args()


def main() -> int:
    settings = get_settings()
    args = parse_args()
    configure_logging(settings.log_level)
    try:
        term = validate_search_term(args.term)
        ensure_runtime_schema(engine)
    except (ValidationError, StoreError) as exc:
        print(f"error: {exc}")
        return 1

    connector = ITunesConnector(
        base_url=settings.catalog_base_url,
        country=settings.catalog_country,
        limit=settings.catalog_limit,
        timeout_seconds=settings.catalog_timeout_seconds,
    )
    try:
        with SessionLocal() as db:
            outcome = run_catalog_search(db, term, connector=connector)
            payload = [
                SearchResultOut.model_validate(record).model_dump(mode="json", by_alias=True)
                for record in outcome.records
            ]
    finally:
        connector.close()

    print(json.dumps(payload, indent=2, ensure_ascii=False))
    if not outcome.ok:
        print(f"error: {outcome.error}")
        return 1
    if args.strict and outcome.failures:
        print(f"error: {len(outcome.failures)} items failed to save")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
