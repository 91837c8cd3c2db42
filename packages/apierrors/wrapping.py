"""Classification and wrapping transitions over the error union.

Every helper accepts any of ``None``, an ``AggregateError``, a
``CausalError``, a bare ``ClassifiedError`` or a raw exception, and returns a
new value; ``None`` always maps to ``None``. The call path is captured the
first time a value becomes a ``CausalError`` and is never captured again for
values derived from it.
"""

from __future__ import annotations

from typing import Any, overload

from . import kinds
from .aggregate import AggregateError
from .kinds import ErrorKind
from .normalize import error_is, extract_public
from .stack import capture_stack
from .types import CausalError, ClassifiedError, WrappedCause


@overload
def classify(err: None, kind: ErrorKind | ClassifiedError) -> None: ...


@overload
def classify(err: BaseException, kind: ErrorKind | ClassifiedError) -> CausalError: ...


def classify(
    err: BaseException | None, kind: ErrorKind | ClassifiedError
) -> CausalError | None:
    """Bind ``err`` to ``kind``, capturing the call path if not yet captured.

    A ``CausalError`` keeps its root, stack and ``from_`` context and only
    takes the new kind. An aggregate gets a context summarizing each
    element's current classification.
    """
    classification = _as_classification(kind)
    match err:
        case None:
            return None
        case CausalError():
            return err.with_classification(
                classification.replace(from_=err.classification.from_)
            )
        case AggregateError():
            summary = ", ".join(extract_public(item).light() for item in err)
            return _new_causal(err, classification.replace(from_=summary))
        case _:
            return _new_causal(err, classification.replace(from_=str(err)))


def annotate(
    err: BaseException | None,
    context: str,
    *,
    default_kind: ErrorKind = kinds.UNKNOWN_ERROR,
) -> CausalError | None:
    """Prepend ``context`` to the ``from_`` context of ``err``.

    Raw exceptions are first classified with ``default_kind``, which is
    ``UNKNOWN_ERROR`` unless overridden; aggregates always with
    ``UNKNOWN_ERROR``. An existing stack is never re-captured.
    """
    match err:
        case None:
            return None
        case CausalError():
            classification = err.classification
            return err.with_classification(
                classification.replace(
                    from_=_prepend_context(context, classification.from_)
                )
            )
        case ClassifiedError():
            return _new_causal(
                WrappedCause(context),
                err.replace(from_=_prepend_context(context, err.from_)),
            )
        case AggregateError():
            return annotate(classify(err, kinds.UNKNOWN_ERROR), context)
        case _:
            return annotate(classify(err, default_kind), context)


def wrap_with_message(err: BaseException | None, message: str) -> CausalError | None:
    """Layer ``message`` over the cause of ``err``; kind and stack are kept.

    Values without a classification are classified as ``UNKNOWN_ERROR``.
    """
    match err:
        case None:
            return None
        case CausalError():
            return err.with_root(WrappedCause(message, err.root))
        case ClassifiedError():
            return _new_causal(WrappedCause(message), err)
        case _:
            return _new_causal(
                WrappedCause(message, err), ClassifiedError.of(kinds.UNKNOWN_ERROR)
            )


def force_stack(err: BaseException | None) -> CausalError | None:
    """Return ``err`` as a ``CausalError``, capturing the call path if needed."""
    match err:
        case None:
            return None
        case CausalError():
            return err
        case AggregateError():
            return classify(err, kinds.UNKNOWN_ERROR)
        case ClassifiedError():
            return _new_causal(None, err)
        case _:
            return _new_causal(err, ClassifiedError.of(kinds.UNKNOWN_ERROR))


def with_data(err: BaseException | None, data: Any) -> CausalError | None:
    """Attach a public payload to the classification of ``err``."""
    wrapped = force_stack(err)
    if wrapped is None:
        return None
    return wrapped.with_classification(wrapped.classification.replace(data=data))


def new_error_with_stack(
    root: BaseException | None, err: BaseException | None
) -> CausalError | None:
    """Keep the cause and stack of ``root`` with the classification of ``err``."""
    wrapped = force_stack(root)
    if wrapped is None:
        return None

    match err:
        case CausalError():
            classification = err.classification
        case ClassifiedError():
            classification = err
        case _:
            classification = extract_public(err)
    return wrapped.with_classification(classification)


def error_with_fallback(
    err: BaseException | None,
    kind: ErrorKind | ClassifiedError,
    context: str,
) -> BaseException | None:
    """Reclassify unknown errors as ``kind`` with ``context``; keep others."""
    if not error_is(err, kinds.UNKNOWN_ERROR):
        return err
    fallback = _as_classification(kind)
    return new_error_with_stack(
        err, fallback.replace(from_=_prepend_context(context, fallback.from_))
    )


def cause(err: BaseException | None) -> BaseException | None:
    """Return the innermost original failure behind ``err``."""
    match err:
        case CausalError(root=None):
            return err.classification
        case CausalError():
            current = err.root
        case _:
            current = err

    while isinstance(current, WrappedCause) and current.cause is not None:
        current = current.cause
    return current


def is_causal(err: BaseException | None) -> bool:
    """Return whether ``err`` already carries a captured call path."""
    return isinstance(err, CausalError)


def _new_causal(
    root: BaseException | None, classification: ClassifiedError
) -> CausalError:
    """Create the first ``CausalError`` of a chain, capturing the call path."""
    return CausalError(root, capture_stack(), classification)


def _as_classification(kind: ErrorKind | ClassifiedError) -> ClassifiedError:
    """Normalize a kind argument into a classification value."""
    if isinstance(kind, ClassifiedError):
        return kind
    return ClassifiedError.of(kind)


def _prepend_context(context: str, previous: str) -> str:
    """Return cumulative context, newest first."""
    if not previous:
        return context
    return f"{context}: {previous}"
