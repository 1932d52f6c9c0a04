"""Process-wide logging setup shared by the API server and CLI scripts."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger once; later calls only adjust the level."""
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    logging.getLogger().setLevel(level)
    # httpx logs every request URL at INFO, which would include the TMDB api_key.
    logging.getLogger("httpx").setLevel(logging.WARNING)
