"""
Logging setup shared by the API app and the CLI script.

Level precedence: explicit argument (ALGOSEARCH_LOG_LEVEL via Settings), then the
LOG_LEVEL environment variable, then INFO.
"""

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# Request plumbing that would otherwise log every connection at DEBUG
QUIET_LOGGERS = ("urllib3", "httpx")


def resolve_level(level: str | None = None) -> int:
    name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    return getattr(logging, name, logging.INFO)


def configure_logging(level: str | None = None) -> int:
    """Configure the root logger once and return the level applied."""
    resolved = resolve_level(level)
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger("algosearch").setLevel(resolved)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(resolved, logging.WARNING))
    return resolved
