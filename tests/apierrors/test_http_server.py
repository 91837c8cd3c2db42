"""Tests for the FastAPI error boundary and request helpers."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from packages.apierrors import kinds
from packages.apierrors.aggregate import AggregateError
from packages.apierrors.config import HttpSettings
from packages.apierrors.http import (
    create_app,
    get_header,
    read_json_body,
    read_raw_body,
    read_text_body,
)
from packages.apierrors.normalize import error_is
from packages.apierrors.types import CausalError, ClassifiedError
from packages.apierrors.wrapping import classify, wrap_with_message


def _request(body: bytes = b"", headers: dict[str, str] | None = None) -> Request:
    """Create a minimal Starlette request object for helper tests."""
    sent = False
    normalized_headers = {"host": "test.local", **(headers or {})}
    scope: dict[str, Any] = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "POST",
        "scheme": "http",
        "path": "/",
        "raw_path": b"/",
        "query_string": b"",
        "headers": [
            (name.lower().encode("latin-1"), value.encode("latin-1"))
            for name, value in normalized_headers.items()
        ],
        "client": ("127.0.0.1", 12345),
        "server": ("127.0.0.1", 80),
        "root_path": "",
    }

    async def receive() -> dict[str, Any]:
        nonlocal sent
        if sent:
            return {"type": "http.disconnect"}
        sent = True
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(scope, receive=receive)


def _build_app(settings: HttpSettings | None = None) -> FastAPI:
    app = create_app(title="apierrors-test", version="1.2.3", settings=settings)

    @app.get("/projects/{key}")
    async def get_project(key: str) -> dict[str, str]:
        refused = ConnectionRefusedError("connection refused")
        raise classify(
            wrap_with_message(refused, f"loading project {key}"), kinds.NOT_FOUND
        )

    @app.get("/forbidden")
    async def forbidden() -> None:
        raise ClassifiedError.of(kinds.FORBIDDEN)

    @app.get("/batch")
    async def batch() -> None:
        raise AggregateError(
            [
                ClassifiedError.of(kinds.NOT_FOUND),
                ClassifiedError.of(kinds.FORBIDDEN, "project is locked"),
            ]
        )

    @app.get("/boom")
    async def boom() -> None:
        raise RuntimeError("boom")

    @app.get("/items/{item_id}")
    async def get_item(item_id: int) -> dict[str, int]:
        return {"item_id": item_id}

    @app.get("/signed")
    async def signed(request: Request) -> dict[str, str | None]:
        return {"signature": get_header(request, "x-signature")}

    @app.post("/echo")
    async def echo(request: Request) -> Any:
        return await read_json_body(request)

    return app


@pytest.fixture
def client() -> TestClient:
    return TestClient(_build_app(), raise_server_exceptions=False)


def test_create_app_returns_fastapi_app() -> None:
    """create_app should return a FastAPI instance with configured metadata."""
    app = create_app(title="apierrors-test", version="1.2.3")

    assert app.title == "apierrors-test"
    assert app.version == "1.2.3"


def test_classified_error_maps_to_kind_status_and_catalog_message(
    client: TestClient,
) -> None:
    """A re-classified failure should respond with its kind status and message."""
    response = client.get("/projects/KEY-1")

    assert response.status_code == 404
    assert response.json() == {
        "id": kinds.NOT_FOUND.id,
        "message": "resource not found",
    }


def test_error_message_follows_accept_language(client: TestClient) -> None:
    """The message should be localized for the negotiated locale."""
    response = client.get(
        "/forbidden", headers={"Accept-Language": "fr-FR,fr;q=0.9,en;q=0.8"}
    )

    assert response.status_code == 403
    assert response.json() == {"id": kinds.FORBIDDEN.id, "message": "accès refusé"}


def test_request_id_is_echoed(client: TestClient) -> None:
    """The request id header should be copied into the body and response."""
    response = client.get("/forbidden", headers={"X-Request-ID": " req-42 "})

    assert response.json()["request_id"] == "req-42"
    assert response.headers["X-Request-ID"] == "req-42"


def test_unexpected_exception_is_unknown_error(client: TestClient) -> None:
    """Unclassified failures should surface as the unknown kind."""
    response = client.get("/boom", headers={"Accept-Language": "fr"})

    assert response.status_code == 500
    assert response.json() == {
        "id": kinds.UNKNOWN_ERROR.id,
        "message": "erreur interne",
    }


def test_aggregate_error_joins_messages(client: TestClient) -> None:
    """Aggregates should respond as unknown with a joined summary."""
    response = client.get("/batch")

    assert response.status_code == 500
    assert response.json() == {
        "id": kinds.UNKNOWN_ERROR.id,
        "message": "resource not found, project is locked",
    }


def test_validation_error_is_invalid_data(client: TestClient) -> None:
    """Request validation failures should carry the validation details."""
    response = client.get("/items/abc")
    body = response.json()

    assert response.status_code == 400
    assert body["id"] == kinds.INVALID_DATA.id
    assert body["message"] == "Cannot validate given data"
    assert body["data"]["errors"][0]["loc"] == ["path", "item_id"]


def test_missing_header_is_wrong_request(client: TestClient) -> None:
    """A missing required header should respond as a bad request."""
    missing = client.get("/signed")
    present = client.get("/signed", headers={"x-signature": "  abc  "})

    assert missing.status_code == 400
    assert missing.json()["id"] == kinds.WRONG_REQUEST.id
    assert present.json() == {"signature": "abc"}


def test_invalid_json_body_is_invalid_data(client: TestClient) -> None:
    """Undecodable JSON bodies should respond as invalid data."""
    invalid = client.post("/echo", content=b"{not json")
    valid = client.post("/echo", json={"a": 1})

    assert invalid.status_code == 400
    assert invalid.json()["id"] == kinds.INVALID_DATA.id
    assert valid.json() == {"a": 1}


def test_stack_trace_is_exposed_only_when_enabled() -> None:
    """The captured path should be in the body only when configured."""
    hidden = TestClient(_build_app()).get("/projects/KEY-1")
    exposed = TestClient(
        _build_app(HttpSettings(expose_stack_trace=True))
    ).get("/projects/KEY-1")

    assert "stack_trace" not in hidden.json()
    assert exposed.json()["stack_trace"].endswith("get_project")


def test_error_response_logs_request_fields(
    client: TestClient, caplog: pytest.LogCaptureFixture
) -> None:
    """Every error response should be logged with its level and render."""
    with caplog.at_level(logging.WARNING, logger="packages.apierrors.http.server"):
        client.get("/projects/KEY-1", headers={"X-Request-ID": "req-7"})
        client.get("/boom")

    warning, error = [
        record
        for record in caplog.records
        if record.name == "packages.apierrors.http.server"
    ]
    assert warning.levelno == logging.WARNING
    assert "(caused by: loading project KEY-1: connection refused)" in (
        warning.getMessage()
    )
    assert error.levelno == logging.ERROR
    assert error.getMessage() == "Request failed: boom"


def test_get_header_returns_trimmed_value() -> None:
    """get_header should return the requested header value by default."""
    request = _request(headers={"x-signature": "  abc123  "})

    assert get_header(request, "x-signature") == "abc123"
    assert get_header(request, "x-signature", strip=False) == "  abc123  "


def test_get_header_raises_classified_error_for_missing_header() -> None:
    """Missing required headers should raise a wrong-request classification."""
    request = _request(headers={})

    with pytest.raises(CausalError) as exc_info:
        get_header(request, "x-signature")

    assert error_is(exc_info.value, kinds.WRONG_REQUEST)
    assert exc_info.value.classification.from_ == "missing required header: x-signature"
    assert get_header(request, "x-signature", required=False) is None


def test_read_body_helpers() -> None:
    """Body helpers should return raw bytes, text and decoded JSON."""
    assert asyncio.run(read_raw_body(_request(body=b"raw"))) == b"raw"
    assert asyncio.run(read_text_body(_request(body="héllo".encode()))) == "héllo"
    assert asyncio.run(read_json_body(_request(body=b'{"a": [1]}'))) == {"a": [1]}


def test_read_text_body_classifies_decode_failures() -> None:
    """Bytes invalid in the requested encoding should raise a wrong request."""
    with pytest.raises(CausalError) as exc_info:
        asyncio.run(read_text_body(_request(body=b"\xff\xfe"), encoding="utf-8"))

    assert error_is(exc_info.value, kinds.WRONG_REQUEST)
    assert exc_info.value.classification.from_.startswith(
        "body decode failed with encoding utf-8: "
    )
    assert isinstance(exc_info.value.root, UnicodeDecodeError)
