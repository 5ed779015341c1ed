"""
abi2ts logging configuration.

The library logs through the "abi2ts" logger, which has a NullHandler
attached so nothing is printed unless the application asks for it.

Example:
    import logging
    from abi2ts._logging import configure_logging

    configure_logging(level=logging.DEBUG)
"""

import logging

logger = logging.getLogger("abi2ts")
logger.addHandler(logging.NullHandler())


def configure_logging(
    level: int = logging.INFO,
    format: str | None = None,
    handler: logging.Handler | None = None,
) -> None:
    """
    Configure logging for abi2ts.

    Args:
        level: Logging level (default: INFO)
        format: Log format string (default: "[%(levelname)s] abi2ts: %(message)s")
        handler: Custom handler (default: StreamHandler to stderr)
    """
    logger.setLevel(level)

    for h in logger.handlers[:]:
        if not isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    if handler is None:
        handler = logging.StreamHandler()
        if format is None:
            format = "[%(levelname)s] abi2ts: %(message)s"
        handler.setFormatter(logging.Formatter(format))

    handler.setLevel(level)
    logger.addHandler(handler)
