"""Classified error values and their wire shape.

Three exception types make up the classified side of the error union:

- ``ClassifiedError``: one ``ErrorKind`` plus optional public overrides. It
  has no captured stack and is the value returned by extraction.
- ``CausalError``: the original failure, the call path captured at its first
  classification, and exactly one current ``ClassifiedError``.
- ``WrappedCause``: one context message layered over an underlying failure.

All three are treated as values: helpers return new instances rather than
mutating the ones they receive.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from . import catalog
from .kinds import ErrorKind
from .stack import Stack


class ErrorBody(BaseModel):
    """Serialized public error returned to API consumers."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    message: str = ""
    data: Any = None
    request_id: str | None = None
    stack_trace: str | None = None


class ClassifiedError(Exception):
    """One error kind with optional message, payload and context."""

    def __init__(
        self,
        kind: ErrorKind,
        message: str = "",
        *,
        data: Any = None,
        request_id: str = "",
        stack_trace: str = "",
        from_: str = "",
    ) -> None:
        super().__init__(kind, message)
        self.kind = kind
        self.message = message
        self.data = data
        self.request_id = request_id
        self.stack_trace = stack_trace
        self.from_ = from_

    @classmethod
    def of(cls, kind: ErrorKind, message: str = "", **fields: Any) -> ClassifiedError:
        """Build one classification from a registered kind."""
        return cls(kind, message, **fields)

    @property
    def id(self) -> int:
        return self.kind.id

    @property
    def status(self) -> int:
        return self.kind.status

    def replace(self, **changes: Any) -> ClassifiedError:
        """Return a copy with the given attributes replaced."""
        values: dict[str, Any] = {
            "kind": self.kind,
            "message": self.message,
            "data": self.data,
            "request_id": self.request_id,
            "stack_trace": self.stack_trace,
            "from_": self.from_,
        }
        values.update(changes)
        return ClassifiedError(**values)

    def default_message(self) -> str:
        """Return the override message, else the English catalog message."""
        return self.message or catalog.lookup(self.kind.id)

    def light(self) -> str:
        """Render without parentheses, for use inside joined summaries."""
        message = self.default_message()
        if self.from_:
            return f"{message}: {self.from_}"
        return message

    def to_body(self) -> ErrorBody:
        """Return the wire representation of this classification."""
        return ErrorBody(
            id=self.kind.id,
            message=self.message,
            data=self.data,
            request_id=self.request_id or None,
            stack_trace=self.stack_trace or None,
        )

    def to_json(self) -> str:
        """Serialize the wire representation, omitting empty optional fields."""
        return self.to_body().model_dump_json(exclude_none=True)

    def __str__(self) -> str:
        message = self.default_message()
        if self.from_:
            return f"{message} (from: {self.from_})"
        return message

    def __repr__(self) -> str:
        return (
            f"ClassifiedError(kind={self.kind!r}, message={self.message!r}, "
            f"from_={self.from_!r})"
        )


class WrappedCause(Exception):
    """Context message layered over an optional underlying failure."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        underlying = str(self.cause)
        if not underlying:
            return self.message
        return f"{self.message}: {underlying}"


class CausalError(Exception):
    """Original failure with its captured call path and current classification.

    ``root`` is ``None`` only when a bare ``ClassifiedError`` was promoted
    without an underlying failure. The stack is captured once, when the
    instance chain is first created, and shared by every derived instance.
    """

    def __init__(
        self,
        root: BaseException | None,
        stack: Stack,
        classification: ClassifiedError,
    ) -> None:
        super().__init__(root, stack, classification)
        self.root = root
        self.stack = stack
        self.classification = classification

    def with_classification(self, classification: ClassifiedError) -> CausalError:
        """Return a copy carrying ``classification``; root and stack are shared."""
        return CausalError(self.root, self.stack, classification)

    def with_root(self, root: BaseException | None) -> CausalError:
        """Return a copy carrying ``root``; stack and classification are shared."""
        return CausalError(root, self.stack, self.classification)

    def __str__(self) -> str:
        root = "" if self.root is None else str(self.root)
        caused_by = ""
        if root and root != self.classification.from_:
            caused_by = f" (caused by: {root})"
        rendered = f"{self.classification}{caused_by}"
        if len(self.stack) == 0:
            return rendered
        return f"{self.stack}: {rendered}"

    def __repr__(self) -> str:
        return (
            f"CausalError(root={self.root!r}, stack={str(self.stack)!r}, "
            f"classification={self.classification!r})"
        )
