"""Loguru logging configuration.

Everything goes to stderr in a human-readable format. Coverage and
geocoding outcomes are additionally logged as decision records, bound with
``json_output=True`` plus structured fields (area id, match method,
provider, confidence). Those are serialized to JSON lines: into
``decisions.jsonl`` when a ``log_dir`` is configured, otherwise to stderr.
Visitor coordinates are never bound onto decision records.
"""

import sys
from pathlib import Path
from typing import Any

from loguru import logger

_LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | {name}:{function}:{line} | {message}"

LOG_FILENAME = "coverage-api.log"
DECISIONS_FILENAME = "decisions.jsonl"


def _is_decision(record: dict[str, Any]) -> bool:
    return bool(record["extra"].get("json_output", False))


def decision_logger(kind: str, **fields: Any) -> Any:
    """Return a logger bound as a decision record of *kind* with *fields*."""
    return logger.bind(json_output=True, decision=kind, **fields)


def setup_logging(log_level: str = "INFO", log_dir: str | None = None) -> None:
    """Configure Loguru sinks.

    Args:
        log_level: Minimum log level to emit.
        log_dir: Optional directory for log files.  When set, a rotating
            text log and a rotating decisions JSON-lines file are written
            there (rotated every 24 hours, retained 7 days).
    """
    level = log_level.upper()
    logger.remove()
    logger.add(sys.stderr, level=level, format=_LOG_FORMAT, serialize=False)

    if not log_dir:
        logger.add(sys.stderr, level=level, serialize=True, filter=_is_decision)
        return

    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_path / LOG_FILENAME,
        level=level,
        format=_LOG_FORMAT,
        rotation="24h",
        retention="7 days",
    )
    logger.add(
        log_path / DECISIONS_FILENAME,
        level=level,
        serialize=True,
        filter=_is_decision,
        rotation="24h",
        retention="7 days",
    )
