"""Logging setup for kinetic-factors."""

from __future__ import annotations

import json
import logging
import sys
from typing import Any


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info and record.exc_info[1] is not None:
            log_entry["exception"] = self.formatException(record.exc_info)

        # Fields passed through ``extra={"factor": ...}``
        for key in ("factor", "solute"):
            if hasattr(record, key):
                log_entry[key] = getattr(record, key)

        return json.dumps(log_entry, default=str)


def setup_logging(
    level: str = "INFO",
    log_format: str = "text",
    log_file: str | None = None,
    module_levels: dict[str, str] | None = None,
) -> None:
    """Configure the ``kinetic_factors`` logger hierarchy.

    Args:
        level: Package log level (e.g. 'DEBUG', 'INFO', 'WARNING').
        log_format: 'text' for human-readable or 'json' for structured output.
        log_file: Optional file path to write logs to.
        module_levels: Per-module log levels
            (e.g. {'kinetic_factors.factors': 'DEBUG'}).
    """
    package_logger = logging.getLogger("kinetic_factors")
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Repeated calls must not stack handlers
    package_logger.handlers.clear()

    if log_format == "json":
        formatter: logging.Formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    package_logger.addHandler(console)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    if module_levels:
        for module, mod_level in module_levels.items():
            logging.getLogger(module).setLevel(getattr(logging, mod_level.upper(), logging.INFO))

    package_logger.debug(f"Logging configured: level={level}, format={log_format}")


__all__ = ["JSONFormatter", "setup_logging"]
