"""Public API for error framework configuration."""

from .loader import load_settings
from .models import (
    DEFAULT_CONFIG_PATH,
    ApiErrorsSettings,
    HttpSettings,
    LoggingSettings,
    StackSettings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ApiErrorsSettings",
    "HttpSettings",
    "LoggingSettings",
    "StackSettings",
    "load_settings",
]
