"""Environment-driven settings for the checkout CLI.

``POS_CATALOG_PATH``
    Optional CSV or JSON price table.  When unset the built-in demo table
    is used.
``POS_LOG_DIR``
    Directory for the rotating JSON log file (default ``logs``).  An empty
    value disables file logging.
``POS_LOG_LEVEL``
    Logging level name (default ``INFO``).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

from logging_config import parse_level

DEFAULT_LOG_DIR = "logs"
DEFAULT_LOG_LEVEL = "INFO"

# Price table used when no catalog file is configured
DEMO_PRICES: Dict[str, str] = {
    "12345": "7.25",
    "23456": "12.50",
}


@dataclass(frozen=True)
class Settings:
    catalog_path: Optional[str]
    log_dir: Optional[str]
    log_level: int


def load_settings(environ: Mapping[str, str] = os.environ) -> Settings:
    """Build :class:`Settings` from environment variables.

    :raises ValueError: if ``POS_LOG_LEVEL`` is not a known level name.
    """
    catalog_path = environ.get("POS_CATALOG_PATH", "").strip() or None
    log_dir = environ.get("POS_LOG_DIR", DEFAULT_LOG_DIR).strip() or None
    log_level = parse_level(environ.get("POS_LOG_LEVEL", DEFAULT_LOG_LEVEL))
    return Settings(catalog_path=catalog_path, log_dir=log_dir, log_level=log_level)
