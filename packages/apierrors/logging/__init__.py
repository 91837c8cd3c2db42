"""Public logging API for the error framework.

Wraps Python's ``logging`` module with stdout defaults, structured context
propagation and a sink for classified errors.
"""

from .config import configure_logging, get_logger
from .context import bind_context, clear_context, get_context, log_context
from .errors import log_error

__all__ = [
    "bind_context",
    "clear_context",
    "configure_logging",
    "get_context",
    "get_logger",
    "log_context",
    "log_error",
]
