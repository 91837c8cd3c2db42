"""Stdout logging for services that classify their errors.

Records are rendered as newline-delimited JSON or as one plain text line.
Both renderings carry the bound context. A record logged with ``exc_info``
also carries the error id, kind and HTTP status that the exception resolves
to, unless the context already binds them.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import IO, Any

from ..normalize import extract_public
from . import fields
from .context import bind_context, get_context

_CORE_FIELDS = frozenset(
    {fields.TIMESTAMP, fields.LEVEL, fields.LOGGER, fields.MESSAGE}
)


class ContextFilter(logging.Filter):
    """Snapshot the bound context onto each record as ``record.context``."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.context = get_context()
        return True


def record_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Return the structured fields of one record, core fields first."""
    payload: dict[str, Any] = {
        fields.TIMESTAMP: datetime.fromtimestamp(record.created, UTC).isoformat(),
        fields.LEVEL: record.levelname,
        fields.LOGGER: record.name,
        fields.MESSAGE: record.getMessage(),
    }

    context = getattr(record, "context", None)
    if isinstance(context, dict):
        payload.update(context)

    if record.exc_info and record.exc_info[1] is not None:
        public = extract_public(record.exc_info[1])
        payload.setdefault(fields.ERROR_ID, str(public.kind.id))
        if public.kind.name:
            payload.setdefault(fields.ERROR_KIND, public.kind.name)
        payload.setdefault(fields.HTTP_STATUS, str(public.status))
    return payload


class JsonFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        payload = record_fields(record)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, separators=(",", ":"))


class PlainFormatter(logging.Formatter):
    """``timestamp LEVEL logger message key=value ...`` lines."""

    def format(self, record: logging.LogRecord) -> str:
        payload = record_fields(record)
        head = " ".join(
            str(payload[key])
            for key in (fields.TIMESTAMP, fields.LEVEL, fields.LOGGER, fields.MESSAGE)
        )
        extras = sorted(
            (key, value) for key, value in payload.items() if key not in _CORE_FIELDS
        )
        line = " ".join([head, *(f"{key}={value}" for key, value in extras)])
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def configure_logging(
    *,
    level: str = "INFO",
    json_output: bool = True,
    service: str | None = None,
    environment: str | None = None,
    stream: IO[str] | None = None,
) -> logging.Handler:
    """Install one handler on the root logger and return it.

    Output goes to ``stream``, stdout by default. Existing root handlers are
    replaced, so repeated calls do not duplicate output. ``service`` and
    ``environment`` are bound into the logging context when given.
    """
    handler = logging.StreamHandler(stream=stream or sys.stdout)
    handler.setLevel(level.upper())
    handler.addFilter(ContextFilter())
    handler.setFormatter(JsonFormatter() if json_output else PlainFormatter())

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level.upper())

    bind_context(**{fields.SERVICE: service, fields.ENVIRONMENT: environment})
    return handler


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger from the standard logging hierarchy."""
    return logging.getLogger(name)
