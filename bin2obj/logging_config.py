"""Console logging for the bin2obj namespace."""

from __future__ import annotations

import logging
import sys


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Send bin2obj diagnostics to stdout: INFO by default, DEBUG when verbose."""
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger("bin2obj")
    logger.setLevel(level)

    # Repeated runs in one process must not stack handlers.
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(handler)
    return logger
