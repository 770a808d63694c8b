"""Console logging shared by the sort engines and the benchmark CLI."""

import logging
import os

LOG_LEVEL_ENV = "POLYSORT_LOG_LEVEL"


def get_logger(name: str) -> logging.Logger:
    """
    Logger writing ``time | level | module: message`` lines to stderr.

    The level comes from POLYSORT_LOG_LEVEL (default INFO; DEBUG shows the
    per-sort comparison and move counts). Safe to call repeatedly.
    """
    level_str = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    level = getattr(logging, level_str, logging.INFO)

    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(level)
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)-7s | %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    logger.addHandler(handler)
    logger.propagate = False
    return logger
