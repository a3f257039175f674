"""
Structured JSON logging for the listing assistant.
"""
import json
import logging
from datetime import datetime, timezone

# Attributes every LogRecord carries; anything else arrived via extra=
_RESERVED = set(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    def format(self, record):
        log_obj = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in vars(record).items():
            if key not in _RESERVED and not key.startswith("_"):
                log_obj[key] = value
        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_obj, default=str)


def setup_logging(level: str = "INFO", json_logs: bool = True) -> logging.Logger:
    """Attach a single stream handler to the package logger."""
    logger = logging.getLogger("listing_assistant")
    logger.setLevel(level.upper())

    for handler in logger.handlers:
        if getattr(handler, "_listing_assistant", False):
            break
    else:
        handler = logging.StreamHandler()
        handler._listing_assistant = True
        logger.addHandler(handler)

    if json_logs:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    return logger
