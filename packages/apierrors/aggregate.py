"""Ordered container for independently classified failures."""

from __future__ import annotations

from typing import Iterable, Iterator


class AggregateError(Exception):
    """Errors reported together, in insertion order and without dedup."""

    def __init__(self, errors: Iterable[BaseException | None] = ()) -> None:
        super().__init__()
        self._errors: list[BaseException] = []
        for error in errors:
            self.append(error)

    @property
    def errors(self) -> tuple[BaseException, ...]:
        return tuple(self._errors)

    def append(self, err: BaseException | None) -> None:
        """Add one error; aggregates are spliced, others get a captured stack."""
        from .wrapping import force_stack

        if err is None:
            return
        if isinstance(err, AggregateError):
            for item in err:
                self.append(item)
            return
        self._errors.append(force_stack(err))

    def join(self, other: AggregateError) -> None:
        """Append every element of ``other`` as is."""
        self._errors.extend(other)

    def is_empty(self) -> bool:
        return not self._errors

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[BaseException]:
        return iter(tuple(self._errors))

    def __getitem__(self, index: int) -> BaseException:
        return self._errors[index]

    def __str__(self) -> str:
        return ", ".join(str(error) for error in self._errors)

    def __repr__(self) -> str:
        return f"AggregateError({self._errors!r})"
