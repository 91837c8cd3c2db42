"""Process startup for the error framework: settings, logging, stack rules."""

from __future__ import annotations

from .config import ApiErrorsSettings, load_settings
from .logging import configure_logging, get_logger, log_context
from .stack import configure_stack, unmatched_prefixes

_LOGGER = get_logger(__name__)


def bootstrap(settings: ApiErrorsSettings | None = None) -> ApiErrorsSettings:
    """Apply ``settings`` (or the loaded cascade) to logging and stack capture.

    Intended to run once at process startup, before any error is classified.
    """
    resolved = settings if settings is not None else load_settings()
    configure_logging(
        level=resolved.logging.level,
        json_output=resolved.logging.json_output,
        service=resolved.logging.service,
        environment=resolved.logging.environment,
    )
    stack_filter = configure_stack(resolved.stack)
    stack_fields = {
        "stack_depth": stack_filter.depth,
        "include_prefixes": ",".join(stack_filter.include_prefixes),
    }
    with log_context(stack_fields):
        _LOGGER.info("apierrors configured")
        unmatched = unmatched_prefixes(stack_filter)
        if unmatched:
            _LOGGER.warning(
                "No imported module matches stack prefixes %s; "
                "call paths from them will be empty",
                ", ".join(unmatched),
            )
    return resolved
