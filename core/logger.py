import logging

from core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s | %(message)s"

log = logging.getLogger("scanner")


def setup_logging() -> None:
    """Configure root logging once, at app import."""
    level = getattr(logging, str(settings.LOG_LEVEL).upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)

    # httpx logs every request at INFO; keep it quiet unless debugging
    if level > logging.DEBUG:
        logging.getLogger("httpx").setLevel(logging.WARNING)
