"""Bounded call-path capture for classified errors.

A captured stack is reduced to the bare function names of the frames that
belong to the application's own module space, outermost caller first, joined
with ``>``. Frames from vendored modules, from this package and from the
wrapping helpers carry no diagnostic value and are dropped.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from .config import StackSettings

DEFAULT_DEPTH = 32
SEPARATOR = ">"

DEFAULT_IGNORED_NAMES: frozenset[str] = frozenset(
    {
        "classify",
        "annotate",
        "wrap_with_message",
        "force_stack",
        "with_data",
        "new_error_with_stack",
        "error_with_fallback",
        "append",
    }
)

_INTERNAL_PACKAGE = __name__.rpartition(".")[0]


@dataclass(frozen=True)
class StackFilter:
    """Module-prefix and helper-name rules applied to captured frames."""

    include_prefixes: tuple[str, ...] = ("packages",)
    exclude_prefixes: tuple[str, ...] = ("packages.vendor",)
    ignored_names: frozenset[str] = DEFAULT_IGNORED_NAMES
    depth: int = DEFAULT_DEPTH

    @classmethod
    def from_settings(cls, settings: StackSettings) -> StackFilter:
        """Build one frozen filter from validated stack settings."""
        return cls(
            include_prefixes=tuple(settings.include_prefixes),
            exclude_prefixes=tuple(settings.exclude_prefixes),
            ignored_names=frozenset(settings.ignored_names),
            depth=settings.depth,
        )

    def keeps(self, module: str, name: str) -> bool:
        """Return whether one frame belongs in the rendered path."""
        if _in_module_space(module, (_INTERNAL_PACKAGE,)):
            return False
        if not _in_module_space(module, self.include_prefixes):
            return False
        if _in_module_space(module, self.exclude_prefixes):
            return False
        return name not in self.ignored_names


@dataclass(frozen=True)
class Stack:
    """Filtered function names, outermost caller first."""

    frames: tuple[str, ...] = field(default_factory=tuple)

    def __str__(self) -> str:
        return SEPARATOR.join(self.frames)

    def __len__(self) -> int:
        return len(self.frames)


_active_filter = StackFilter()


def configure_stack(settings: StackSettings) -> StackFilter:
    """Replace the process-wide filter; call once at startup."""
    global _active_filter
    _active_filter = StackFilter.from_settings(settings)
    return _active_filter


def active_filter() -> StackFilter:
    """Return the process-wide filter used by ``capture_stack``."""
    return _active_filter


def capture_stack(skip: int = 0, *, stack_filter: StackFilter | None = None) -> Stack:
    """Capture the current call path above the caller of this function.

    ``skip`` drops that many additional innermost frames. At most
    ``stack_filter.depth`` frames are inspected. Never raises: a call stack
    shallower than ``skip`` yields an empty ``Stack``.
    """
    rules = stack_filter if stack_filter is not None else _active_filter
    try:
        frame = sys._getframe(skip + 1)
    except ValueError:
        return Stack()

    names: list[str] = []
    for _ in range(rules.depth):
        if frame is None:
            break
        module = str(frame.f_globals.get("__name__", ""))
        name = frame.f_code.co_name
        if rules.keeps(module, name):
            names.append(name)
        frame = frame.f_back

    names.reverse()
    return Stack(frames=tuple(names))


def unmatched_prefixes(stack_filter: StackFilter | None = None) -> tuple[str, ...]:
    """Return the include prefixes that match no currently imported module."""
    rules = stack_filter if stack_filter is not None else _active_filter
    loaded = tuple(sys.modules)
    return tuple(
        prefix
        for prefix in rules.include_prefixes
        if not any(_in_module_space(module, (prefix,)) for module in loaded)
    )


def _in_module_space(module: str, prefixes: Iterable[str]) -> bool:
    """Return whether ``module`` is one of ``prefixes`` or nested below one."""
    return any(
        module == prefix or module.startswith(f"{prefix}.") for prefix in prefixes
    )
