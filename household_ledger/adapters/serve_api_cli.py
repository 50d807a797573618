"""CLI adapter serving the HTTP API with uvicorn."""

import uvicorn

from household_ledger.adapters.api.app import create_app
from household_ledger.infrastructure.container import build_settings
from household_ledger.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Build the application from settings and serve it."""
    logger = get_app_logger()
    settings = build_settings()
    app = create_app(settings=settings, logger=logger)
    logger.info(f"Serving API on {settings.api_host}:{settings.api_port}")
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":  # pragma: no cover
    main()
