"""Logging configuration using loguru.

Colored lines on stderr by default; one JSON object per line with
``--json-logs`` so runs can be fed to a log collector.
"""

import json
import sys
from typing import Any

from loguru import logger

TEXT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<level>{message}</level>"
)


def _json_line(message: Any) -> None:
    """Write a record as JSON; bound extras (spreadsheet_id, sheet) go top-level."""
    record = message.record
    entry: dict[str, Any] = {
        "time": record["time"].isoformat(),
        "severity": record["level"].name,
        "message": record["message"],
        **{k: v for k, v in record["extra"].items() if not k.startswith("_")},
    }
    if record["exception"] is not None:
        entry["exception"] = repr(record["exception"].value)
    sys.stderr.write(json.dumps(entry, default=str, ensure_ascii=False) + "\n")


def configure_logging(*, json_logs: bool = False, log_level: str = "INFO") -> None:
    """Replace loguru's default handler.

    Args:
        json_logs: If True, output one JSON object per line
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    logger.remove()
    if json_logs:
        logger.add(_json_line, level=log_level, format="{message}")
    else:
        logger.add(sys.stderr, level=log_level, format=TEXT_FORMAT, colorize=True)
