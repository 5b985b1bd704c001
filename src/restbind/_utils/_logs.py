import logging
import sys

from .constants import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(debug: bool = False) -> None:
    """Attach a stderr handler to the ``restbind`` logger.

    Calling it more than once only adjusts the level.
    """
    level = logging.DEBUG if debug else logging.WARNING
    logger.setLevel(level)

    if not any(getattr(h, "_restbind", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._restbind = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
