"""Reduce a batch of operations to one set of inserts, updates and deletes.

List widgets cannot replay a batch one operation at a time inside a single
refresh cycle: they remove rows using the indices from *before* the batch and
request content for inserted or reloaded rows using the indices from *after*
it.  The fold below therefore tracks two coordinate systems side by side:

* ``final_inserts`` / ``final_updates`` hold positions in the collection as
  it looks after the operations folded so far.  They move whenever a later
  insert or remove lands at or before them.
* ``original_deletes`` holds indices into the collection as it was before the
  batch.  Those never move; a later remove is mapped back into original space
  instead.

For example::

    [Insert([A], 0), Insert([B], 0)]            -> [Inserts({0, 1})]
    [Insert([B], 0), Remove(range(1, 2))]       -> [Inserts({0}), Deletes({0})]
    [Insert([A], 0), Insert([B], 0), Remove(range(1, 2))] -> [Inserts({0})]
    [Insert([A], 0), Remove(range(0, 1))]       -> []
    [Insert([A, B], 0), Insert([C, D], 1)]      -> [Inserts({0, 1, 2, 3})]
"""

from __future__ import annotations

import logging
from bisect import bisect_left
from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Sequence, Tuple

from ..errors import NestedBatchError, ResetInBatchError
from .changesets import ChangeKind, ChangeSet
from .operations import Batch, Insert, Operation, Remove, Reset, Update

logger = logging.getLogger(__name__)


def shift_indices(indices: Iterable[int], from_index: int, by: int) -> FrozenSet[int]:
    """Return *indices* with every value ``>= from_index`` moved by *by*."""

    return frozenset(index + by if index >= from_index else index for index in indices)


def _slot_start(sorted_deletes: Sequence[int], slot_rank: int) -> int:
    """Return the position of the first deleted original with *slot_rank* survivors before it.

    ``sorted_deletes[i] - i`` counts the survivors in front of the i-th deleted
    original and never decreases, so a binary search finds the slot.
    """

    lo, hi = 0, len(sorted_deletes)
    while lo < hi:
        mid = (lo + hi) // 2
        if sorted_deletes[mid] - mid < slot_rank:
            lo = mid + 1
        else:
            hi = mid
    return lo


def _window_to_original(
    window: range, sorted_inserts: Sequence[int], sorted_deletes: Sequence[int]
) -> List[int]:
    """Map the pre-existing rows of a current-space *window* to original indices.

    Positions holding pending inserts are skipped.  Both pointers only move
    forward, so one window costs ``len(window) + len(sorted_deletes)``.
    """

    mapped: List[int] = []
    inserts_before = bisect_left(sorted_inserts, window.start)
    deletes_before = 0
    for index in window:
        if inserts_before < len(sorted_inserts) and sorted_inserts[inserts_before] == index:
            inserts_before += 1
            continue
        rank = index - inserts_before
        while (
            deletes_before < len(sorted_deletes)
            and sorted_deletes[deletes_before] <= rank + deletes_before
        ):
            deletes_before += 1
        mapped.append(rank + deletes_before)
    return mapped


def change_sets_from_batch(operations: Iterable[Operation]) -> List[ChangeSet]:
    """Coalesce *operations* into change sets ordered inserts, updates, deletes.

    Every operation must be an :class:`Insert`, :class:`Update` or
    :class:`Remove`.  A :class:`Reset` or a nested :class:`Batch` raises
    before any output is produced.
    """

    operations = list(operations)
    final_inserts: FrozenSet[int] = frozenset()
    final_updates: FrozenSet[int] = frozenset()
    # Kept sorted; original indices never move, so only the membership changes.
    original_deletes: List[int] = []

    for position, operation in enumerate(operations):
        if isinstance(operation, Insert):
            window = operation.window
            count = len(window)
            if not count:
                continue
            from_index = operation.from_index
            slot_rank = from_index - bisect_left(sorted(final_inserts), from_index)

            final_inserts = shift_indices(final_inserts, from_index, count)
            final_updates = shift_indices(final_updates, from_index, count)

            # Originals deleted from the very slot being filled come back as
            # updates of the rows that now occupy it.
            start = stop = _slot_start(original_deletes, slot_rank)
            while (
                stop < len(original_deletes)
                and stop - start < count
                and original_deletes[stop] - stop == slot_rank
            ):
                stop += 1
            refilled = stop - start
            original_deletes = original_deletes[:start] + original_deletes[stop:]
            final_updates = final_updates | frozenset(window[:refilled])
            final_inserts = final_inserts | frozenset(window[refilled:])

        elif isinstance(operation, Update):
            final_updates = final_updates | frozenset(operation.window)

        elif isinstance(operation, Remove):
            removed = operation.range
            if not removed:
                continue
            really_removed = _window_to_original(removed, sorted(final_inserts), original_deletes)

            final_inserts = shift_indices(
                final_inserts.difference(removed), removed.start, -len(removed)
            )
            final_updates = shift_indices(
                final_updates.difference(removed), removed.start, -len(removed)
            )
            # Two ascending runs; the sort is a linear merge.
            original_deletes = sorted(original_deletes + really_removed)

        elif isinstance(operation, Reset):
            raise ResetInBatchError(
                f"Reset at position {position} inside a batch is not supported"
            )
        elif isinstance(operation, Batch):
            raise NestedBatchError(
                f"Batch at position {position} is nested inside a batch; nesting is not supported"
            )
        else:
            raise TypeError(f"Unknown operation {operation!r} at position {position}")

    pending = {
        ChangeKind.INSERTS: final_inserts,
        ChangeKind.UPDATES: final_updates,
        ChangeKind.DELETES: frozenset(original_deletes),
    }
    change_sets = [ChangeSet(kind, pending[kind]) for kind in ChangeKind if pending[kind]]
    logger.debug(
        "Coalesced %d operations into %d inserts, %d updates, %d deletes",
        len(operations),
        len(final_inserts),
        len(final_updates),
        len(original_deletes),
    )
    return change_sets


coalesce = change_sets_from_batch


@dataclass(frozen=True)
class RefreshPlan:
    """What a list widget has to do to reflect one operation."""

    change_sets: Tuple[ChangeSet, ...] = ()
    is_reset: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.is_reset and not self.change_sets

    def get(self, kind: ChangeKind) -> FrozenSet[int]:
        for change_set in self.change_sets:
            if change_set.kind is kind:
                return change_set.indices
        return frozenset()


def plan_refresh(operation: Operation) -> RefreshPlan:
    """Translate any operation, including ``Reset`` and ``Batch``, into a plan."""

    if isinstance(operation, Reset):
        return RefreshPlan(is_reset=True)
    if isinstance(operation, Batch):
        return RefreshPlan(tuple(change_sets_from_batch(operation.operations)))
    change_set = operation.change_set()
    if not change_set:
        return RefreshPlan()
    return RefreshPlan((change_set,))
