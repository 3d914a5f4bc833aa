"""Centralized logging configuration for flowgen."""

from __future__ import annotations

import logging
import os
import sys


def configure_logging() -> None:
    """Configure logging for a generator run.

    Respects the FLOWGEN_LOG_LEVEL environment variable:
    - DEBUG: every scanned entry
    - INFO: one line per discovered job (default)
    - WARNING: only problems
    """
    log_level_name = os.getenv("FLOWGEN_LOG_LEVEL", "INFO").upper()
    log_level = getattr(logging, log_level_name, logging.INFO)

    logging.basicConfig(
        level=log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    for handler in logging.getLogger().handlers:
        handler.setLevel(log_level)
