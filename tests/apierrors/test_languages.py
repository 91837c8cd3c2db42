"""Unit tests for Accept-Language parsing and negotiation."""

from __future__ import annotations

import pytest

from packages.apierrors.languages import (
    DEFAULT_LOCALE,
    Locale,
    negotiate,
    parse_accept_language,
)


def test_parse_accept_language_orders_by_quality() -> None:
    """Entries should be sorted by descending quality, ties in header order."""
    parsed = parse_accept_language("en;q=0.8, fr-FR, de;q=0.8, fr;q=0.9")

    assert parsed == [("fr-FR", 1.0), ("fr", 0.9), ("en", 0.8), ("de", 0.8)]


def test_parse_accept_language_skips_blank_members() -> None:
    """Empty list members should be ignored rather than rejected."""
    assert parse_accept_language(" , fr ,,") == [("fr", 1.0)]


@pytest.mark.parametrize(
    "header",
    ["en_US", "fr;q=2", "fr;q=abc", "fr;level=1", "123456789"],
)
def test_parse_accept_language_rejects_malformed_values(header: str) -> None:
    """Malformed tags and parameters should raise ValueError."""
    with pytest.raises(ValueError):
        parse_accept_language(header)


@pytest.mark.parametrize(
    ("header", "expected"),
    [
        ("fr-FR,fr;q=0.9,en;q=0.8", Locale.FRENCH),
        ("en-GB", Locale.AMERICAN_ENGLISH),
        ("de-DE,fr;q=0.5", Locale.FRENCH),
        ("fr;q=0,en;q=0.1", Locale.AMERICAN_ENGLISH),
        ("*,fr;q=0.2", Locale.FRENCH),
        ("FR", Locale.FRENCH),
    ],
)
def test_negotiate_picks_best_supported_locale(header: str, expected: Locale) -> None:
    """Negotiation should match primary subtags in quality order."""
    assert negotiate(header) is expected


@pytest.mark.parametrize("header", [None, "", "   ", "de, it", "fr;q=bogus"])
def test_negotiate_falls_back_to_american_english(header: str | None) -> None:
    """Empty, unsupported and malformed values should yield the default locale."""
    assert negotiate(header) is DEFAULT_LOCALE is Locale.AMERICAN_ENGLISH
