"""Configure checkout logging using the Python standard library.

Records are formatted as JSON, one object per line, with the fields
``timestamp``, ``level``, ``module`` and ``message``.  The checkout
session id and any ``extra`` dict passed by the caller are merged in when
present::

    logger.info("Barcode priced", extra={"session_id": sid, "extra": {"barcode": "12345"}})
"""

import json
import logging
import logging.handlers
import os
from datetime import datetime, UTC
from typing import Optional

LOG_FILE_NAME = "pos.log"


class JsonFormatter(logging.Formatter):
    """Format log records as JSON strings."""

    def format(self, record: logging.LogRecord) -> str:
        log_record = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "module": record.module,
            "message": record.getMessage(),
        }
        if hasattr(record, "session_id"):
            log_record["session_id"] = getattr(record, "session_id")
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            # Merge into top level rather than nesting under 'extra'
            log_record.update(extra)
        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_record, default=str)


def parse_level(name: str) -> int:
    """Translate a level name such as ``"debug"`` into its numeric value."""
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name!r}")
    return level


def configure_logging(log_dir: Optional[str] = "logs", level: int = logging.INFO) -> None:
    """Configure the root logger with JSON formatting.

    Args:
        log_dir: Directory for the rotating ``pos.log`` file.  It is
            created if missing.  ``None`` or an empty string logs to the
            console only.
        level: Logging level for the root logger.
    """
    logger = logging.getLogger()
    logger.setLevel(level)
    # Remove any default handlers (e.g. from basicConfig)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    formatter = JsonFormatter()
    # Console handler (stderr) so stdout stays the display
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    logger.addHandler(console_handler)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            filename=os.path.join(log_dir, LOG_FILE_NAME),
            maxBytes=5 * 1024 * 1024,  # 5 MB per log file
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        logger.addHandler(file_handler)
