"""Shared fixtures for error framework tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest

from packages.apierrors import stack
from packages.apierrors.logging import clear_context

_VENDORED_DRIVER = '''
def dial(callback):
    return callback()
'''


@pytest.fixture(autouse=True)
def module_stack_filter(
    request: pytest.FixtureRequest, monkeypatch: pytest.MonkeyPatch
) -> stack.StackFilter:
    """Treat the calling test module as the application's module space."""
    module_name = request.module.__name__
    stack_filter = stack.StackFilter(
        include_prefixes=(module_name,),
        exclude_prefixes=(f"{module_name}.vendor",),
    )
    monkeypatch.setattr(stack, "_active_filter", stack_filter)
    return stack_filter


@pytest.fixture(autouse=True)
def clean_log_context() -> Iterator[None]:
    """Start and end every test with an empty logging context."""
    clear_context()
    yield
    clear_context()


@pytest.fixture
def vendored_dial(request: pytest.FixtureRequest) -> Callable[[Callable], object]:
    """Return ``dial(callback)`` compiled as a vendored module of the test module."""
    module_name = f"{request.module.__name__}.vendor.driver"
    namespace: dict[str, object] = {"__name__": module_name}
    exec(compile(_VENDORED_DRIVER, f"<{module_name}>", "exec"), namespace)
    return namespace["dial"]
