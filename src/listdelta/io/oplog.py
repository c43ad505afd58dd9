"""Read and write JSON operation logs.

An operation log records the contents of a list before editing started
(``initial``) and the operations that were applied to it, in order::

    {
      "schema": "listdelta/oplog@1",
      "initial": ["a", "b"],
      "operations": [
        {"op": "batch", "operations": [
          {"op": "insert", "from_index": 0, "elements": ["x"]},
          {"op": "remove", "start": 1, "stop": 2}
        ]}
      ]
    }
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from jsonschema import ValidationError

from ..config import OPLOG_SCHEMA_ID
from ..errors import (
    InvalidOperationError,
    OperationLogLoadError,
    OperationLogValidationError,
)
from ..core.operations import Batch, Insert, Operation, Remove, Reset, Update
from .schema import validate_operation, validate_oplog

logger = logging.getLogger(__name__)


@dataclass
class OperationLog:
    initial: List[Any] = field(default_factory=list)
    operations: List[Operation] = field(default_factory=list)


def _decode(data: Dict[str, Any]) -> Operation:
    # JSON Schema counts 1.0 as an integer; indices are read back as int.
    kind = data["op"]
    if kind == "insert":
        return Insert(tuple(data["elements"]), int(data["from_index"]))
    if kind == "update":
        return Update(tuple(data["elements"]), int(data["from_index"]))
    if kind == "remove":
        start, stop = int(data["start"]), int(data["stop"])
        if stop < start:
            raise OperationLogValidationError(
                f"remove stop {stop} is before its start {start}"
            )
        return Remove(range(start, stop))
    if kind == "reset":
        return Reset(tuple(data["array"]))
    return Batch(tuple(_decode(child) for child in data["operations"]))


def _decode_checked(data: Dict[str, Any]) -> Operation:
    try:
        return _decode(data)
    except InvalidOperationError as exc:
        raise OperationLogValidationError(str(exc)) from exc


def operation_from_dict(data: Dict[str, Any]) -> Operation:
    """Build an operation from its JSON mapping, validating it first."""

    try:
        validate_operation(data)
    except ValidationError as exc:
        raise OperationLogValidationError(exc.message) from exc
    return _decode_checked(data)


def operation_to_dict(operation: Operation) -> Dict[str, Any]:
    """Return the JSON mapping for *operation*."""

    if isinstance(operation, Insert):
        return {"op": "insert", "from_index": operation.from_index, "elements": list(operation.elements)}
    if isinstance(operation, Update):
        return {"op": "update", "from_index": operation.from_index, "elements": list(operation.elements)}
    if isinstance(operation, Remove):
        return {"op": "remove", "start": operation.start, "stop": operation.stop}
    if isinstance(operation, Reset):
        return {"op": "reset", "array": list(operation.array)}
    if isinstance(operation, Batch):
        return {"op": "batch", "operations": [operation_to_dict(child) for child in operation.operations]}
    raise TypeError(f"Unknown operation {operation!r}")


def parse_oplog(payload: Dict[str, Any]) -> OperationLog:
    """Validate an already decoded document and build an :class:`OperationLog`."""

    try:
        validate_oplog(payload)
    except ValidationError as exc:
        raise OperationLogValidationError(exc.message) from exc
    return OperationLog(
        initial=list(payload.get("initial", [])),
        operations=[_decode_checked(item) for item in payload["operations"]],
    )


def load_oplog(path: Path) -> OperationLog:
    """Load the operation log stored at *path*."""

    try:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise OperationLogLoadError(f"Cannot read operation log {path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise OperationLogValidationError(f"{path} does not contain a JSON object")
    log = parse_oplog(payload)
    logger.debug("Loaded %d operations from %s", len(log.operations), path)
    return log


def dump_oplog(log: OperationLog, path: Path) -> None:
    """Write *log* to *path* as JSON."""

    payload = {
        "schema": OPLOG_SCHEMA_ID,
        "initial": list(log.initial),
        "operations": [operation_to_dict(operation) for operation in log.operations],
    }
    Path(path).write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")


__all__ = [
    "OperationLog",
    "dump_oplog",
    "load_oplog",
    "operation_from_dict",
    "operation_to_dict",
    "parse_oplog",
]
