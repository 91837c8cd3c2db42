"""Localized default messages for error kinds.

Message tables are packaged YAML resources, read once at import time and
frozen. Lookups never fail: an id without a message resolves to the message
of ``UNKNOWN_ERROR`` in the same locale.
"""

from __future__ import annotations

from importlib.resources import files
from types import MappingProxyType
from typing import Mapping

import yaml

from . import kinds
from .languages import Locale, negotiate

_LOCALE_FILES: dict[Locale, str] = {
    Locale.AMERICAN_ENGLISH: "en-US.yaml",
    Locale.FRENCH: "fr.yaml",
}


def _load_messages(filename: str) -> Mapping[int, str]:
    """Load and validate one packaged message table."""
    resource = files(__package__).joinpath("locales", filename)
    parsed = yaml.safe_load(resource.read_text(encoding="utf-8"))
    if not isinstance(parsed, dict):
        raise ValueError(
            f"Message catalog must contain a top-level mapping: {filename}"
        )

    messages: dict[int, str] = {}
    for key, value in parsed.items():
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"Empty message for kind {key} in {filename}")
        messages[int(key)] = value

    if kinds.UNKNOWN_ERROR.id not in messages:
        raise ValueError(f"Missing UNKNOWN_ERROR message in {filename}")
    return MappingProxyType(messages)


CATALOG: Mapping[Locale, Mapping[int, str]] = MappingProxyType(
    {locale: _load_messages(filename) for locale, filename in _LOCALE_FILES.items()}
)


def lookup(kind_id: int, locale: Locale = Locale.AMERICAN_ENGLISH) -> str:
    """Return the default message of one kind in one locale."""
    messages = CATALOG[locale]
    return messages.get(kind_id, messages[kinds.UNKNOWN_ERROR.id])


def translate(kind_id: int, accept_language: str | None = "") -> str:
    """Return the message of one kind for an Accept-Language value."""
    return lookup(kind_id, negotiate(accept_language))
