"""Structured Logging: one JSON object per line, carrying article/version/actor context.

Invariants:
    - Every line has timestamp (record creation time, UTC), level, logger, message
    - Only whitelisted extras are emitted: article/version ids, actor kind, error
      code, request path and the view-counted flag; anything else passed via
      `extra=` (tokens, addresses) never reaches the output
    - UUIDs and other non-JSON extras are rendered with str(); bools/numbers stay native
    - setup_logging is idempotent: calling it again replaces its own handler

Design Decisions:
    - Record time, not format time: lines keep their order when a handler lags
    - SQLAlchemy engine logs pinned to WARNING unless log_level is DEBUG
"""

import logging
import json
from datetime import datetime, timezone

_EXTRA_FIELDS = (
    "article_id", "version_id", "actor_kind", "error_code", "path", "counted",
)
_HANDLER_NAME = "pressroom"


def _jsonable(value):
    if isinstance(value, (bool, int, float)):
        return value
    return str(value)


class JSONFormatter(logging.Formatter):
    """Render a LogRecord as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update({
            key: _jsonable(record.__dict__[key])
            for key in _EXTRA_FIELDS
            if record.__dict__.get(key) is not None
        })
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the Pressroom root handler. Returns it."""
    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    root.addHandler(handler)

    resolved = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(resolved)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.DEBUG if resolved <= logging.DEBUG else logging.WARNING,
    )
    return handler
