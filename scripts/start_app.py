#!/usr/bin/env python3
"""Serve the Inkwell API with uvicorn.

Settings are checked before the server binds, so a staging or production
deploy with placeholder session secrets exits instead of serving.
"""

import sys

import logfire
import uvicorn

from inkwell.config import API_VERSION, Settings
from inkwell.util.logging import setup_logging
from inkwell.util.observability import configure_logfire


def main() -> int:
    """Validate settings, then hand over to uvicorn."""
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    with logfire.span(
        "api.startup", environment=settings.environment, version=API_VERSION
    ):
        try:
            settings.ensure_deployable()
        except Exception:
            logfire.exception("Refusing to start")
            raise

        logfire.info(
            "Serving API",
            base_url=settings.api.base_url,
            gateway=settings.payment.gateway_base_url,
        )

    # create_app builds the DI container inside the server process
    uvicorn.run(
        "inkwell.interface.api.app:create_app",
        factory=True,
        host="0.0.0.0",
        port=settings.port,
        log_level="debug" if settings.debug else "info",
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
