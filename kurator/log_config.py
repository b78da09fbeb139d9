"""
Kurator Backend — Logging Configuration
=========================================

What:  Configures the root logger once for the whole process.
Who:   Called by the entrypoint before settings are read (so configuration
       errors are visible) and again by the lifespan with LOG_LEVEL.

Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
"""

import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],  # Docker captures stdout
        force=True,  # Override any existing logging config
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("pymongo").setLevel(logging.WARNING)
