import logging

from medibloc.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Root logger setup, called once when the app is built."""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=LOG_FORMAT,
    )
    # uvicorn access lines duplicate what the error layer already reports
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
