"""Package-wide logger writing to stderr."""
import logging
import sys


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger: logging.Logger = logging.getLogger("integer_calculator")


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """
    Send package logs to the current stderr at the given level.

    Calling it again replaces the previous handler.

    :param str level: Name of a logging level (e.g. "DEBUG", "INFO")

    :return: The configured package logger
    :rtype: logging.Logger
    """
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    # Results go to stdout, keep diagnostics out of the root logger
    logger.propagate = False
    logger.setLevel(level.upper())
    return logger
