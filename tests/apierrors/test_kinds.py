"""Unit tests for the error kind registry."""

from __future__ import annotations

from http import HTTPStatus

import pytest

from packages.apierrors import kinds


def test_registry_ids_are_unique_and_match_constants() -> None:
    """Each registered kind should be reachable by id and by constant name."""
    for kind in kinds.all_kinds():
        assert kinds.lookup(kind.id) is kind
        assert getattr(kinds, kind.name) is kind


def test_all_kinds_is_ordered_by_id() -> None:
    """all_kinds should list the registry in ascending id order."""
    ids = [kind.id for kind in kinds.all_kinds()]

    assert ids == sorted(ids)
    assert ids[0] == kinds.UNKNOWN_ERROR.id == 1
    assert len(ids) == len(kinds.REGISTRY)


def test_every_kind_maps_to_a_client_or_server_status() -> None:
    """Kind statuses should be HTTP error statuses."""
    for kind in kinds.all_kinds():
        assert 400 <= kind.status < 600, kind


def test_well_known_kinds_keep_their_ids_and_statuses() -> None:
    """Persisted ids and their transport statuses should never drift."""
    assert (kinds.UNKNOWN_ERROR.id, kinds.UNKNOWN_ERROR.status) == (1, 500)
    assert (kinds.NOT_FOUND.id, kinds.NOT_FOUND.status) == (38, HTTPStatus.NOT_FOUND)
    assert (kinds.WRONG_REQUEST.id, kinds.WRONG_REQUEST.status) == (74, 400)
    assert (kinds.INVALID_DATA.id, kinds.INVALID_DATA.status) == (149, 400)
    assert kinds.UNAUTHORIZED.status == 401
    assert kinds.FORBIDDEN.status == 403


def test_lookup_returns_none_for_unregistered_id() -> None:
    """Retired or foreign ids should not resolve to a kind."""
    assert kinds.lookup(0) is None
    assert kinds.lookup(10_000) is None


def test_registering_a_reused_id_is_rejected() -> None:
    """The registry should refuse to renumber an existing kind."""
    with pytest.raises(ValueError, match="already registered as NOT_FOUND"):
        kinds._kind(kinds.NOT_FOUND.id, HTTPStatus.BAD_REQUEST, "SHADOW")

    assert kinds.lookup(kinds.NOT_FOUND.id) is kinds.NOT_FOUND


def test_registry_is_read_only() -> None:
    """The exposed registry mapping should not accept writes."""
    with pytest.raises(TypeError):
        kinds.REGISTRY[999] = kinds.UNKNOWN_ERROR  # type: ignore[index]
