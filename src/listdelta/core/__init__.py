from .changesets import ChangeKind, ChangeSet, IndexSpace
from .coalesce import (
    RefreshPlan,
    change_sets_from_batch,
    coalesce,
    plan_refresh,
    shift_indices,
)
from .operations import (
    Batch,
    Insert,
    Operation,
    Remove,
    Reset,
    Update,
    VectorEvent,
    map_operation,
)
from .replay import apply_change_sets, apply_operation, replay_verified, verify_operation

__all__ = [
    "Batch",
    "ChangeKind",
    "ChangeSet",
    "IndexSpace",
    "Insert",
    "Operation",
    "RefreshPlan",
    "Remove",
    "Reset",
    "Update",
    "VectorEvent",
    "apply_change_sets",
    "apply_operation",
    "change_sets_from_batch",
    "coalesce",
    "map_operation",
    "plan_refresh",
    "replay_verified",
    "shift_indices",
    "verify_operation",
]
