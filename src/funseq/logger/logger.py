"""Package-wide logging for funseq.

The containers and combinators never print; they log through module loggers
(``logging.getLogger(__name__)``), which all sit under the ``funseq`` logger
configured here. Faults are reported at ERROR right before they are raised,
rotations and clones at DEBUG.
"""

import logging
import sys

from funseq.core.config import settings

__all__ = ["logger", "setup_logger"]

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logger(
    name: str = "funseq",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Attach a stdout handler to the ``name`` logger and return it.

    Calling it again for a logger that already has handlers returns the
    logger untouched, so importing the package twice never duplicates output.

    Args:
        name: Logger to configure; package modules log under ``funseq.*``
        level: Level name such as "DEBUG". Defaults to ``settings.log_level``
            (env LOG_LEVEL).
        format_string: Record format, ``LOG_FORMAT`` when omitted

    Returns:
        The configured logger
    """
    level = level or settings.log_level
    format_string = format_string or LOG_FORMAT

    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=format_string, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, level.upper()))
        # Keep package records out of the application's root handlers
        logger.propagate = False

    return logger


logger = setup_logger()
