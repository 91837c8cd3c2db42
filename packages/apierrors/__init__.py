"""Structured, localized error classification for HTTP services.

Raw failures are bound to an ``ErrorKind`` with ``classify``, enriched with
``annotate`` and ``wrap_with_message``, collected with ``AggregateError`` and
resolved at the API edge with ``extract_public``.
"""

from . import kinds
from .aggregate import AggregateError
from .bootstrap import bootstrap
from .catalog import lookup, translate
from .kinds import ErrorKind
from .languages import Locale, negotiate, parse_accept_language
from .normalize import decode_error, error_is, extract_public, is_unknown
from .stack import (
    Stack,
    StackFilter,
    capture_stack,
    configure_stack,
    unmatched_prefixes,
)
from .types import CausalError, ClassifiedError, ErrorBody, WrappedCause
from .wrapping import (
    annotate,
    cause,
    classify,
    error_with_fallback,
    force_stack,
    is_causal,
    new_error_with_stack,
    with_data,
    wrap_with_message,
)

__all__ = [
    "AggregateError",
    "CausalError",
    "ClassifiedError",
    "ErrorBody",
    "ErrorKind",
    "Locale",
    "Stack",
    "StackFilter",
    "WrappedCause",
    "annotate",
    "bootstrap",
    "capture_stack",
    "cause",
    "classify",
    "configure_stack",
    "decode_error",
    "error_is",
    "error_with_fallback",
    "extract_public",
    "force_stack",
    "is_causal",
    "is_unknown",
    "kinds",
    "lookup",
    "negotiate",
    "new_error_with_stack",
    "parse_accept_language",
    "translate",
    "unmatched_prefixes",
    "with_data",
    "wrap_with_message",
]
