"""Logging setup driven by the ``log_level`` / ``log_format`` config keys."""

from __future__ import annotations

import json
import logging
import sys

_LEVEL_MAP: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

_TEXT_FMT = "%(levelname)s | %(name)s | %(message)s"

# Marks handlers installed here so reconfiguring replaces only ours
_HANDLER_TAG = "_treespace_handler"


class JsonFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def configure_logging(level: str = "warn", fmt: str = "text") -> logging.Logger:
    """Attach a single stderr handler to the ``treespace`` logger.

    Safe to call repeatedly; earlier handlers installed by this function
    are removed first.
    """
    logger = logging.getLogger("treespace")
    logger.setLevel(_LEVEL_MAP.get(level, logging.WARNING))

    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JsonFormatter() if fmt == "json" else logging.Formatter(_TEXT_FMT))
    setattr(handler, _HANDLER_TAG, True)
    logger.addHandler(handler)
    return logger
