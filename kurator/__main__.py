"""
Kurator Backend — Process Entrypoint
======================================

Usage:
    python -m kurator

Reads API_HOST for the listen address and serves the app with uvicorn.
Exits with status 1 when configuration is missing or invalid; uvicorn
exits non-zero on its own when the startup database ping fails.
"""

import logging
import sys

import uvicorn
from pydantic import ValidationError

from kurator.config import get_settings
from kurator.log_config import setup_logging

logger = logging.getLogger("kurator")


def main() -> None:
    setup_logging()
    try:
        settings = get_settings()
    except ValidationError as e:
        logger.critical("Configuration error:\n%s", e)
        sys.exit(1)

    # Building the app reads the settings validated above
    from kurator.main import app

    host, port = settings.listen_address
    uvicorn.run(app, host=host, port=port, log_config=None)


if __name__ == "__main__":
    main()
