"""Entry point: serve the API with uvicorn."""
import argparse

import uvicorn

from tunesearch.config import get_settings
from tunesearch.logging_config import configure_logging


def parse_args() -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="tunesearch API server")
    parser.add_argument("--host", default=settings.api_host, help="Bind host (default: API_HOST)")
    parser.add_argument("--port", type=int, default=settings.api_port, help="Bind port (default: API_PORT)")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes (development)")
    return parser.parse_args()


def main() -> int:
    settings = get_settings()
    args = parse_args()
    configure_logging(settings.log_level)
    uvicorn.run(
        "tunesearch.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
