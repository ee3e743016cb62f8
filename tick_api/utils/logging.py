"""
Logging configuration with optional JSON output.
"""
import logging
import sys
import json
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from tick_api.config import settings

LOGGER_NAME = "tick_api"


class JSONFormatter(logging.Formatter):
    """JSON log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        log_obj: Dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
            "service": "tick_api",
        }

        # Request context attached by tick_api.api.util
        if hasattr(record, "method"):
            log_obj["method"] = record.method
        if hasattr(record, "url"):
            log_obj["url"] = record.url
        if hasattr(record, "status"):
            log_obj["status"] = record.status
        if hasattr(record, "duration_ms"):
            log_obj["duration_ms"] = record.duration_ms

        if record.exc_info:
            log_obj["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(log_obj)


def configure_logging(level: int = logging.INFO, use_json: Optional[bool] = None) -> logging.Logger:
    """
    Opt-in helper that sends the client's own logs to stdout.

    Only the "tick_api" logger is touched; the root logger and any handlers
    the embedding application installed are left alone. Calling it again
    replaces the handler added by the previous call.
    JSON output is used when use_json is set, or LOG_JSON=true otherwise.
    """
    if use_json is None:
        use_json = settings.LOG_JSON

    handler = logging.StreamHandler(sys.stdout)

    if use_json:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )

    logger = logging.getLogger(LOGGER_NAME)
    for existing in list(logger.handlers):
        if getattr(existing, "_tick_api_handler", False):
            logger.removeHandler(existing)
    handler._tick_api_handler = True
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
