"""Normalization of arbitrary error values into public classifications."""

from __future__ import annotations

from dataclasses import replace

from pydantic import ValidationError

from . import catalog, kinds
from .aggregate import AggregateError
from .kinds import ErrorKind
from .types import CausalError, ClassifiedError, ErrorBody


def extract_public(
    err: BaseException | None,
    accept_language: str | None = "",
    *,
    include_stack: bool = False,
) -> ClassifiedError:
    """Resolve any error value into one localized public classification.

    Total over its input: aggregates, ``None`` and foreign exceptions resolve
    to ``UNKNOWN_ERROR``. An explicit message override is kept as is;
    otherwise the message is taken from the catalog for the negotiated
    locale. With ``include_stack`` the captured call path is copied into
    ``stack_trace``.
    """
    match err:
        case AggregateError():
            summary = ", ".join(
                extract_public(item, accept_language).light() for item in err
            )
            public = ClassifiedError.of(kinds.UNKNOWN_ERROR, summary)
        case CausalError():
            public = err.classification
            if include_stack:
                public = public.replace(stack_trace=str(err.stack))
        case ClassifiedError():
            public = err
        case _:
            public = ClassifiedError.of(kinds.UNKNOWN_ERROR)

    if not public.kind.status:
        public = public.replace(
            kind=replace(public.kind, status=kinds.UNKNOWN_ERROR.status)
        )
    if not public.message:
        public = public.replace(
            message=catalog.translate(public.kind.id, accept_language)
        )
    return public


def error_is(err: BaseException | None, target: ErrorKind | ClassifiedError) -> bool:
    """Return whether ``err`` resolves to the same kind id as ``target``."""
    target_id = _kind_of(target).id
    match err:
        case None:
            return False
        case CausalError():
            return err.classification.kind.id == target_id
        case ClassifiedError():
            return err.kind.id == target_id
        case _:
            return target_id == kinds.UNKNOWN_ERROR.id


def is_unknown(err: BaseException | None) -> bool:
    """Return whether ``err`` is unclassified or classified as unknown."""
    return error_is(err, kinds.UNKNOWN_ERROR)


def decode_error(payload: bytes | str) -> ClassifiedError | None:
    """Parse one serialized public error; ``None`` when it is not one."""
    try:
        body = ErrorBody.model_validate_json(payload)
    except ValidationError:
        return None

    if body.id == 0:
        return None

    kind = kinds.lookup(body.id) or ErrorKind(id=body.id, status=0)
    return ClassifiedError(
        kind,
        body.message,
        data=body.data,
        request_id=body.request_id or "",
        stack_trace=body.stack_trace or "",
    )


def _kind_of(target: ErrorKind | ClassifiedError) -> ErrorKind:
    """Return the kind carried by a kind or a classification."""
    if isinstance(target, ClassifiedError):
        return target.kind
    return target
