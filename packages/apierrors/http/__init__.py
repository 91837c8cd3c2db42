"""Public HTTP boundary API."""

from .server import (
    ACCEPT_LANGUAGE_HEADER,
    create_app,
    error_response,
    get_header,
    read_json_body,
    read_raw_body,
    read_text_body,
    register_error_handlers,
)

__all__ = [
    "ACCEPT_LANGUAGE_HEADER",
    "create_app",
    "error_response",
    "get_header",
    "read_json_body",
    "read_raw_body",
    "read_text_body",
    "register_error_handlers",
]
