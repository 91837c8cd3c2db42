"""Accept-Language parsing and negotiation against the supported locales.

Only two locales carry message catalogs. Negotiation compares primary
language subtags, so ``en-GB`` resolves to American English and ``fr-CA`` to
French. Anything that cannot be parsed resolves to American English.
"""

from __future__ import annotations

import logging
import re
from enum import Enum

_LOGGER = logging.getLogger(__name__)

_TAG_PATTERN = re.compile(r"^(?:\*|[A-Za-z]{1,8}(?:-[A-Za-z0-9]{1,8})*)$")
_QUALITY_PATTERN = re.compile(r"^q=(0(?:\.\d{0,3})?|1(?:\.0{0,3})?)$", re.IGNORECASE)


class Locale(str, Enum):
    """Locales with a message catalog."""

    AMERICAN_ENGLISH = "en-US"
    FRENCH = "fr"


DEFAULT_LOCALE = Locale.AMERICAN_ENGLISH

_SUPPORTED_LANGUAGES: dict[str, Locale] = {
    "en": Locale.AMERICAN_ENGLISH,
    "fr": Locale.FRENCH,
}


def parse_accept_language(header: str) -> list[tuple[str, float]]:
    """Parse one Accept-Language value into ``(tag, quality)`` pairs.

    Pairs are ordered by descending quality; ties keep header order. Blank
    list members are skipped.

    Raises:
        ValueError: If a language tag or quality parameter is malformed.
    """
    weighted: list[tuple[str, float]] = []
    for member in header.split(","):
        member = member.strip()
        if not member:
            continue

        tag, *params = (part.strip() for part in member.split(";"))
        if not _TAG_PATTERN.match(tag):
            raise ValueError(f"invalid language tag: {tag!r}")

        quality = 1.0
        for param in params:
            match = _QUALITY_PATTERN.match(param)
            if match is None:
                raise ValueError(f"invalid language parameter: {param!r}")
            quality = float(match.group(1))

        weighted.append((tag, quality))

    return sorted(weighted, key=lambda item: item[1], reverse=True)


def negotiate(accept_language: str | None) -> Locale:
    """Return the best supported locale for one Accept-Language value."""
    if not accept_language or not accept_language.strip():
        return DEFAULT_LOCALE

    try:
        preferences = parse_accept_language(accept_language)
    except ValueError as exc:
        _LOGGER.debug("Falling back to %s: %s", DEFAULT_LOCALE.value, exc)
        return DEFAULT_LOCALE

    for tag, quality in preferences:
        if quality <= 0 or tag == "*":
            continue
        language = tag.split("-", 1)[0].lower()
        locale = _SUPPORTED_LANGUAGES.get(language)
        if locale is not None:
            return locale

    return DEFAULT_LOCALE
