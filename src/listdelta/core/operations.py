"""Operations describing a single change to an ordered collection.

Each variant is a frozen dataclass.  ``Insert``, ``Update`` and ``Remove``
carry indices relative to the collection as it is at the moment the operation
is applied, not relative to the state before an enclosing batch started.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Sequence, Tuple, TypeVar, Union

from ..errors import InvalidOperationError, UnsupportedChangeSetError
from .changesets import ChangeSet

T = TypeVar("T")
X = TypeVar("X")


def _check_index(value: int, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidOperationError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidOperationError(f"{name} must be non-negative, got {value}")


@dataclass(frozen=True)
class Insert(Generic[T]):
    """Insert *elements* so that the first one lands at *from_index*."""

    elements: Tuple[T, ...]
    from_index: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "elements", tuple(self.elements))
        _check_index(self.from_index, "from_index")

    @property
    def window(self) -> range:
        return range(self.from_index, self.from_index + len(self.elements))

    def map(self, transform: Callable[[T], X]) -> Insert[X]:
        return Insert(tuple(transform(item) for item in self.elements), self.from_index)

    def change_set(self) -> ChangeSet:
        return ChangeSet.inserts(self.window)


@dataclass(frozen=True)
class Update(Generic[T]):
    """Replace the contiguous run starting at *from_index* with *elements*."""

    elements: Tuple[T, ...]
    from_index: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "elements", tuple(self.elements))
        _check_index(self.from_index, "from_index")

    @property
    def window(self) -> range:
        return range(self.from_index, self.from_index + len(self.elements))

    def map(self, transform: Callable[[T], X]) -> Update[X]:
        return Update(tuple(transform(item) for item in self.elements), self.from_index)

    def change_set(self) -> ChangeSet:
        return ChangeSet.updates(self.window)


@dataclass(frozen=True)
class Remove:
    """Delete the half-open index *range*; the collection shrinks by its length."""

    range: range

    def __post_init__(self) -> None:
        if not isinstance(self.range, range):
            raise InvalidOperationError(f"Remove expects a range, got {self.range!r}")
        if self.range.step != 1:
            raise InvalidOperationError(f"Remove range must have step 1, got {self.range!r}")
        _check_index(self.range.start, "range.start")
        if self.range.stop < self.range.start:
            # range(3, 1) -> range(3, 3)
            object.__setattr__(self, "range", range(self.range.start, self.range.start))

    @classmethod
    def span(cls, start: int, stop: int) -> Remove:
        return cls(range(start, stop))

    @property
    def start(self) -> int:
        return self.range.start

    @property
    def stop(self) -> int:
        return self.range.stop

    def map(self, transform: Callable[[Any], Any]) -> Remove:
        # Structure only; there are no elements to transform.
        return self

    def change_set(self) -> ChangeSet:
        return ChangeSet.deletes(self.range)


@dataclass(frozen=True)
class Reset(Generic[T]):
    """Replace the whole collection with *array*.  Not valid inside a batch."""

    array: Tuple[T, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "array", tuple(self.array))

    def map(self, transform: Callable[[T], X]) -> Reset[X]:
        return Reset(tuple(transform(item) for item in self.array))

    def change_set(self) -> ChangeSet:
        raise UnsupportedChangeSetError(
            "Reset has no index-set representation; reload the whole list instead"
        )


@dataclass(frozen=True)
class Batch:
    """Operations applied one after another but reported as a single change.

    Nesting batches or placing a :class:`Reset` inside one is not supported;
    the coalescer rejects both.
    """

    operations: Tuple["Operation", ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "operations", tuple(self.operations))

    def map(self, transform: Callable[[Any], Any]) -> Batch:
        return Batch(tuple(operation.map(transform) for operation in self.operations))

    def change_set(self) -> ChangeSet:
        raise UnsupportedChangeSetError(
            "Batch has no single change set; use change_sets_from_batch()"
        )


Operation = Union[Insert, Update, Remove, Reset, Batch]


def map_operation(operation: Operation, transform: Callable[[Any], Any]) -> Operation:
    """Return *operation* with every carried element passed through *transform*."""

    return operation.map(transform)


@dataclass(frozen=True)
class VectorEvent(Generic[T]):
    """Collection contents after a change, plus the operation that caused it."""

    array: Tuple[T, ...]
    operation: Operation

    def __post_init__(self) -> None:
        object.__setattr__(self, "array", tuple(self.array))

    @classmethod
    def of(cls, array: Sequence[T], operation: Operation) -> VectorEvent[T]:
        return cls(tuple(array), operation)

    def map(self, transform: Callable[[T], X]) -> VectorEvent[X]:
        return VectorEvent(
            tuple(transform(item) for item in self.array),
            self.operation.map(transform),
        )


__all__ = [
    "Batch",
    "Insert",
    "Operation",
    "Remove",
    "Reset",
    "Update",
    "VectorEvent",
    "map_operation",
]
