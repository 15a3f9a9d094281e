"""Logging setup for the API process."""

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    # httpx logs every request URL at INFO, which would include OAuth codes
    logging.getLogger("httpx").setLevel(logging.WARNING)
