"""Apply operations and reduced change sets to plain Python lists.

Replaying is how a reduction is checked: applying the change sets of a batch
to the original list, with values pulled from the final list the way a list
widget requests cell content, must give the same rows as applying the
batch's operations one by one.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Sequence, Tuple

from ..errors import ReplayError, ReplayMismatchError
from .changesets import ChangeKind, ChangeSet
from .coalesce import RefreshPlan, plan_refresh
from .operations import Batch, Insert, Operation, Remove, Reset, Update

logger = logging.getLogger(__name__)


def apply_operation(items: Sequence[Any], operation: Operation) -> List[Any]:
    """Return a new list with *operation* applied to *items*."""

    result = list(items)
    if isinstance(operation, Insert):
        if operation.from_index > len(result):
            raise ReplayError(
                f"Insert at {operation.from_index} is past the end of a list of {len(result)}"
            )
        result[operation.from_index:operation.from_index] = operation.elements
    elif isinstance(operation, Update):
        if operation.window.stop > len(result):
            raise ReplayError(
                f"Update of {operation.window} is out of bounds for a list of {len(result)}"
            )
        result[operation.window.start:operation.window.stop] = operation.elements
    elif isinstance(operation, Remove):
        if operation.stop > len(result):
            raise ReplayError(
                f"Remove of {operation.range} is out of bounds for a list of {len(result)}"
            )
        del result[operation.start:operation.stop]
    elif isinstance(operation, Reset):
        result = list(operation.array)
    elif isinstance(operation, Batch):
        for child in operation.operations:
            result = apply_operation(result, child)
    else:
        raise TypeError(f"Unknown operation {operation!r}")
    return result


def apply_change_sets(
    original: Sequence[Any],
    change_sets: Iterable[ChangeSet],
    final: Sequence[Any],
) -> List[Any]:
    """Apply *change_sets* to *original*, taking new values from *final*.

    Deletes use original indices.  Inserts are applied in ascending order and,
    like updates, use final indices.
    """

    inserts: set[int] = set()
    updates: set[int] = set()
    deletes: set[int] = set()
    for change_set in change_sets:
        if change_set.kind is ChangeKind.INSERTS:
            inserts |= change_set.indices
        elif change_set.kind is ChangeKind.UPDATES:
            updates |= change_set.indices
        else:
            deletes |= change_set.indices

    if any(index >= len(original) for index in deletes):
        raise ReplayError(f"Deletes {sorted(deletes)} exceed a list of {len(original)}")
    result = [item for index, item in enumerate(original) if index not in deletes]
    for index in sorted(inserts):
        if index > len(result) or index >= len(final):
            raise ReplayError(f"Insert at {index} is out of bounds")
        result.insert(index, final[index])
    for index in updates:
        if index >= len(result) or index >= len(final):
            raise ReplayError(f"Update at {index} is out of bounds")
        result[index] = final[index]
    return result


def replay_verified(
    original: Sequence[Any], operation: Operation
) -> Tuple[List[Any], RefreshPlan]:
    """Apply *operation* once and check its refresh plan against the result.

    Returns the new list together with the plan so callers walking a log can
    carry the list forward without applying the operation a second time.
    """

    final = apply_operation(original, operation)
    plan = plan_refresh(operation)
    if plan.is_reset:
        return final, plan
    replayed = apply_change_sets(original, plan.change_sets, final)
    if replayed != final:
        logger.debug("Replay mismatch for %r: expected %r, got %r", operation, final, replayed)
        raise ReplayMismatchError(
            f"Applying {list(plan.change_sets)} gives {replayed!r}, expected {final!r}"
        )
    return final, plan


def verify_operation(original: Sequence[Any], operation: Operation) -> RefreshPlan:
    """Check that the refresh plan for *operation* reproduces sequential replay."""

    _, plan = replay_verified(original, operation)
    return plan
