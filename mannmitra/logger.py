import logging

from mannmitra.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

logger = logging.getLogger("mannmitra")


def setup_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """Attach a console handler to the package logger once.

    Streamlit re-executes the script on every interaction, so the handler is
    only added when none is present.
    """
    logger.setLevel(getattr(logging, level, logging.INFO))
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    return logger
