"""Logging helpers for applications that embed the client."""

import logging
from typing import TextIO

LOGGER_NAME = "tesco_grocery"
DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(
    level: int = logging.INFO,
    *,
    stream: TextIO | None = None,
    fmt: str = DEFAULT_FORMAT,
    propagate: bool = False,
) -> logging.Logger:
    """Send client logs to a stream.

    The client owns one named handler on the ``tesco_grocery`` logger. Calling
    this again updates that handler's stream and format in place instead of
    stacking handlers, so it is safe to call from application startup code
    that may run more than once.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = propagate
    handler = _client_handler(logger)
    if handler is None:
        handler = logging.StreamHandler(stream)
        handler.set_name(LOGGER_NAME)
        logger.addHandler(handler)
    elif stream is not None:
        handler.setStream(stream)
    handler.setFormatter(logging.Formatter(fmt))
    return logger


def _client_handler(logger: logging.Logger) -> logging.StreamHandler | None:
    for handler in logger.handlers:
        if isinstance(handler, logging.StreamHandler) and (
            handler.get_name() == LOGGER_NAME
        ):
            return handler
    return None
