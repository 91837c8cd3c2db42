"""Diagnostic log sink for classified errors."""

from __future__ import annotations

import logging

from ..normalize import extract_public
from . import fields
from .context import log_context

_SERVER_ERROR_STATUS = 500


def log_error(
    logger: logging.Logger,
    err: BaseException,
    *,
    message: str = "Request failed",
) -> None:
    """Log the full render of ``err`` with its kind, status and call path.

    Server-side statuses are logged at ERROR, everything else at WARNING.
    """
    public = extract_public(err, include_stack=True)
    payload: dict[str, object] = {
        fields.EVENT: fields.ERROR_EVENT,
        fields.ERROR_ID: public.kind.id,
        fields.ERROR_KIND: public.kind.name or None,
        fields.HTTP_STATUS: public.status,
        fields.ERROR_TYPE: type(err).__name__,
        fields.STACK_TRACE: public.stack_trace or None,
    }
    level = logging.ERROR if public.status >= _SERVER_ERROR_STATUS else logging.WARNING
    with log_context(payload):
        logger.log(level, "%s: %s", message, err)
