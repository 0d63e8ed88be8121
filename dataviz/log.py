"""Logging setup for the app and the dataviz package."""

import logging
import sys

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Chatty third-party loggers kept at WARNING
_NOISY = ["matplotlib", "matplotlib.font_manager", "PIL", "fsspec", "watchdog"]


def setup_logging(log_level: str = "INFO") -> None:
    """
    Configure application logging.

    Streamlit re-runs the script on every interaction, so existing handlers on
    the package logger are replaced rather than stacked.
    """
    level = getattr(logging, log_level.upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    logger = logging.getLogger("dataviz")
    logger.setLevel(level)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT))
    logger.addHandler(handler)
    logger.propagate = False

    for name in _NOISY:
        logging.getLogger(name).setLevel(logging.WARNING)
