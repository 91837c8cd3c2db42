"""Request-scoped logging context.

Fields such as the request id or the negotiated locale live in a
``contextvars`` variable holding a read-only mapping. Binding never mutates
the current mapping; it installs a merged copy, so a context captured by a
task or thread is never changed behind its back.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from types import MappingProxyType
from typing import Iterator, Mapping

_EMPTY: Mapping[str, str] = MappingProxyType({})

_LOG_CONTEXT: ContextVar[Mapping[str, str]] = ContextVar(
    "apierrors_log_context", default=_EMPTY
)


def _merged(values: Mapping[str, object]) -> Mapping[str, str]:
    """Return the current context updated with ``values``; ``None`` is skipped."""
    merged = dict(_LOG_CONTEXT.get())
    merged.update(
        (str(key), str(value)) for key, value in values.items() if value is not None
    )
    return MappingProxyType(merged)


def get_context() -> dict[str, str]:
    """Return a copy of the current logging context."""
    return dict(_LOG_CONTEXT.get())


def bind_context(**values: object) -> None:
    """Bind stringified values for the rest of the current context."""
    if values:
        _LOG_CONTEXT.set(_merged(values))


def clear_context(*keys: str) -> None:
    """Clear selected keys, or the whole context when none are given."""
    if not keys:
        _LOG_CONTEXT.set(_EMPTY)
        return
    remaining = {
        key: value for key, value in _LOG_CONTEXT.get().items() if key not in keys
    }
    _LOG_CONTEXT.set(MappingProxyType(remaining))


@contextmanager
def log_context(values: Mapping[str, object]) -> Iterator[None]:
    """Bind ``values`` for the duration of one block only."""
    token = _LOG_CONTEXT.set(_merged(values))
    try:
        yield
    finally:
        _LOG_CONTEXT.reset(token)
