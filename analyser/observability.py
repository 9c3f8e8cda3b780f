import json
import logging
from typing import Optional

from .config import Settings

# Attributes every LogRecord carries; anything else was passed via `extra=`
_STANDARD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """One JSON object per record, with `extra=` fields merged in."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload = {
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        payload.update(
            (k, v) for k, v in vars(record).items()
            if k not in _STANDARD_ATTRS and not k.startswith("_")
        )
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging(settings: Optional[Settings] = None, level: Optional[str] = None) -> None:
    """Configure the root logger from settings; level overrides settings.log_level."""
    settings = settings or Settings()
    resolved = getattr(logging, (level or settings.log_level).upper(), logging.WARNING)

    logging.basicConfig(format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    root = logging.getLogger()
    root.setLevel(resolved)
    if settings.log_format.lower() == "json":
        for handler in root.handlers:
            handler.setFormatter(JsonFormatter())
