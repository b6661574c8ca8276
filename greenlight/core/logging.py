import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from starlette.requests import Request

_RESERVED_KEYS = set(logging.makeLogRecord({}).__dict__.keys()) | {"message", "asctime"}


def _jsonable(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool, list, dict)):
        return value
    return str(value)


class JsonLogFormatter(logging.Formatter):
    """One JSON object per line; anything passed through ``extra`` becomes a top level key."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            {key: _jsonable(value) for key, value in record.__dict__.items() if key not in _RESERVED_KEYS}
        )
        if record.exc_info:
            payload["trace"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=str)


def request_fields(request: Request) -> dict[str, str]:
    return {"request_method": request.method, "request_url": str(request.url)}


def configure_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    root.setLevel(level.upper())

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonLogFormatter())

    root.handlers.clear()
    root.addHandler(handler)

    # every failed request is already logged by the error responder
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
