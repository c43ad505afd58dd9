"""Index-set change descriptions handed to list widget adapters."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable


class IndexSpace(Enum):
    """Coordinate system an index set is expressed in."""

    # Indices before any operation of the batch was applied.
    ORIGINAL = "original"
    # Indices after every operation of the batch was applied.
    FINAL = "final"


class ChangeKind(str, Enum):
    INSERTS = "inserts"
    UPDATES = "updates"
    DELETES = "deletes"

    @property
    def index_space(self) -> IndexSpace:
        if self is ChangeKind.DELETES:
            return IndexSpace.ORIGINAL
        return IndexSpace.FINAL


@dataclass(frozen=True)
class ChangeSet:
    """A set of row indices that were inserted, updated or deleted.

    Inserted and updated indices refer to the final collection; deleted
    indices refer to the original one (see :attr:`ChangeKind.index_space`).
    Order within the set carries no meaning.
    """

    kind: ChangeKind
    indices: FrozenSet[int] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "indices", frozenset(self.indices))

    @classmethod
    def inserts(cls, indices: Iterable[int]) -> ChangeSet:
        return cls(ChangeKind.INSERTS, frozenset(indices))

    @classmethod
    def updates(cls, indices: Iterable[int]) -> ChangeSet:
        return cls(ChangeKind.UPDATES, frozenset(indices))

    @classmethod
    def deletes(cls, indices: Iterable[int]) -> ChangeSet:
        return cls(ChangeKind.DELETES, frozenset(indices))

    @property
    def index_space(self) -> IndexSpace:
        return self.kind.index_space

    def sorted_indices(self) -> list[int]:
        return sorted(self.indices)

    def __bool__(self) -> bool:
        return bool(self.indices)

    def __len__(self) -> int:
        return len(self.indices)

    def __repr__(self) -> str:
        return f"{self.kind.value.capitalize()}({self.sorted_indices()})"
