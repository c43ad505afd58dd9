"""Custom exception hierarchy for listdelta."""

from __future__ import annotations


class ListDeltaError(Exception):
    """Base class for all custom errors raised by listdelta."""


# --- Programming errors ---

class ProgrammingError(ListDeltaError):
    """Base class for misuse of the operation API.

    These are not recoverable at runtime; callers must fix the code that
    produced the offending operation.
    """


class InvalidOperationError(ProgrammingError, ValueError):
    """Raised when an operation is constructed with malformed indices."""


class ResetInBatchError(ProgrammingError):
    """Raised when a ``Reset`` operation appears inside a batch."""


class NestedBatchError(ProgrammingError):
    """Raised when a ``Batch`` operation appears inside another batch."""


class UnsupportedChangeSetError(ProgrammingError):
    """Raised when ``change_set()`` is requested for a ``Reset`` or ``Batch``."""


# --- Replay errors ---

class ReplayError(ListDeltaError):
    """Raised when an operation cannot be applied to a list."""


class ReplayMismatchError(ReplayError):
    """Raised when applying reduced change sets diverges from sequential replay."""


# --- Operation log errors ---

class OperationLogError(ListDeltaError):
    """Base class for operation log failures."""


class OperationLogLoadError(OperationLogError):
    """Raised when the operation log file cannot be read or parsed."""


class OperationLogValidationError(OperationLogError):
    """Raised when operation log data fails schema validation."""
