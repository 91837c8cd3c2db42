"""FastAPI boundary: classified error responses and request helpers.

Every exception reaching the application edge is normalized with
``extract_public``. The status comes from the resolved kind, the message from
the catalog for the request's Accept-Language, and the request id header is
echoed into the body.
"""

from __future__ import annotations

import json
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .. import kinds
from ..aggregate import AggregateError
from ..config import HttpSettings
from ..languages import negotiate
from ..logging import fields, get_logger, log_context, log_error
from ..normalize import extract_public
from ..types import CausalError, ClassifiedError
from ..wrapping import annotate, classify, with_data

_LOGGER = get_logger(__name__)

ACCEPT_LANGUAGE_HEADER = "Accept-Language"


def create_app(
    *,
    title: str = "apierrors",
    version: str = "0.0.0",
    settings: HttpSettings | None = None,
) -> FastAPI:
    """Create a FastAPI app with classified error handlers installed."""
    app = FastAPI(title=title, version=version)
    register_error_handlers(app, settings=settings)
    return app


def register_error_handlers(
    app: FastAPI, *, settings: HttpSettings | None = None
) -> None:
    """Route classified, validation and unexpected errors to ``error_response``."""
    http_settings = settings or HttpSettings()

    async def _handle_error(request: Request, exc: Exception) -> JSONResponse:
        return error_response(request, exc, settings=http_settings)

    async def _handle_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        classified = with_data(
            classify(exc, kinds.INVALID_DATA),
            {"errors": jsonable_encoder(exc.errors())},
        )
        return error_response(request, classified, settings=http_settings)

    for error_type in (CausalError, ClassifiedError, AggregateError, Exception):
        app.add_exception_handler(error_type, _handle_error)
    app.add_exception_handler(RequestValidationError, _handle_validation)


def error_response(
    request: Request,
    exc: BaseException,
    *,
    settings: HttpSettings | None = None,
) -> JSONResponse:
    """Build the localized JSON error response for one exception."""
    http_settings = settings or HttpSettings()
    accept_language = request.headers.get(ACCEPT_LANGUAGE_HEADER, "")
    public = extract_public(
        exc, accept_language, include_stack=http_settings.expose_stack_trace
    )

    request_id = (request.headers.get(http_settings.request_id_header) or "").strip()
    headers: dict[str, str] = {}
    if request_id:
        public = public.replace(request_id=request_id)
        headers[http_settings.request_id_header] = request_id

    request_fields = {
        fields.REQUEST_ID: request_id or None,
        fields.METHOD: request.method,
        fields.PATH: request.url.path,
        fields.LOCALE: negotiate(accept_language).value,
    }
    with log_context(request_fields):
        log_error(_LOGGER, exc)

    return JSONResponse(
        status_code=public.status,
        content=public.to_body().model_dump(mode="json", exclude_none=True),
        headers=headers,
    )


def get_header(
    request: Request,
    name: str,
    *,
    required: bool = True,
    strip: bool = True,
) -> str | None:
    """Fetch one header value, classifying a missing required header."""
    value = request.headers.get(name)
    if value is not None and strip:
        value = value.strip()

    if required and not value:
        raise annotate(
            ClassifiedError.of(kinds.WRONG_REQUEST),
            f"missing required header: {name}",
        )
    return value


async def read_raw_body(request: Request) -> bytes:
    """Read raw request body bytes without interpretation."""
    return await request.body()


async def read_text_body(request: Request, *, encoding: str = "utf-8") -> str:
    """Read and decode one request body as text."""
    body = await read_raw_body(request)
    try:
        return body.decode(encoding)
    except UnicodeDecodeError as exc:
        raise annotate(
            classify(exc, kinds.WRONG_REQUEST),
            f"body decode failed with encoding {encoding}",
        ) from exc


async def read_json_body(request: Request) -> Any:
    """Read and decode one request body as JSON."""
    body = await read_raw_body(request)
    try:
        return json.loads(body)
    except json.JSONDecodeError as exc:
        raise annotate(
            classify(exc, kinds.INVALID_DATA), "body is not valid JSON"
        ) from exc
