"""Coalesce batched edits of an ordered collection into list-widget change sets."""

from .core import (
    Batch,
    ChangeKind,
    ChangeSet,
    IndexSpace,
    Insert,
    Operation,
    RefreshPlan,
    Remove,
    Reset,
    Update,
    VectorEvent,
    change_sets_from_batch,
    coalesce,
    map_operation,
    plan_refresh,
)

__version__ = "0.1.0"

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
    "change_sets_from_batch",
    "coalesce",
    "map_operation",
    "plan_refresh",
]
