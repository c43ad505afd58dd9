"""Schema helpers for operation log documents."""

from __future__ import annotations

from typing import Any

from jsonschema import Draft202012Validator

from ..config import OPLOG_SCHEMA_ID

_INDEX = {"type": "integer", "minimum": 0}

OPLOG_SCHEMA: dict[str, Any] = {
    "$id": "listdelta/oplog.schema.json",
    "type": "object",
    "required": ["schema", "operations"],
    "properties": {
        "schema": {"const": OPLOG_SCHEMA_ID},
        "initial": {"type": "array"},
        "operations": {
            "type": "array",
            "items": {"$ref": "#/$defs/operation"},
        },
    },
    "additionalProperties": True,
    "$defs": {
        "operation": {
            "oneOf": [
                {"$ref": "#/$defs/insert"},
                {"$ref": "#/$defs/update"},
                {"$ref": "#/$defs/remove"},
                {"$ref": "#/$defs/reset"},
                {"$ref": "#/$defs/batch"},
            ]
        },
        "insert": {
            "type": "object",
            "required": ["op", "from_index", "elements"],
            "properties": {
                "op": {"const": "insert"},
                "from_index": _INDEX,
                "elements": {"type": "array"},
            },
            "additionalProperties": False,
        },
        "update": {
            "type": "object",
            "required": ["op", "from_index", "elements"],
            "properties": {
                "op": {"const": "update"},
                "from_index": _INDEX,
                "elements": {"type": "array"},
            },
            "additionalProperties": False,
        },
        "remove": {
            "type": "object",
            "required": ["op", "start", "stop"],
            "properties": {
                "op": {"const": "remove"},
                "start": _INDEX,
                "stop": _INDEX,
            },
            "additionalProperties": False,
        },
        "reset": {
            "type": "object",
            "required": ["op", "array"],
            "properties": {
                "op": {"const": "reset"},
                "array": {"type": "array"},
            },
            "additionalProperties": False,
        },
        # Nested batches are structurally valid here; the coalescer is the
        # one that rejects them.
        "batch": {
            "type": "object",
            "required": ["op", "operations"],
            "properties": {
                "op": {"const": "batch"},
                "operations": {
                    "type": "array",
                    "items": {"$ref": "#/$defs/operation"},
                },
            },
            "additionalProperties": False,
        },
    },
}

OPERATION_SCHEMA: dict[str, Any] = {
    "$id": "listdelta/operation.schema.json",
    "$ref": "#/$defs/operation",
    "$defs": OPLOG_SCHEMA["$defs"],
}

_validator = Draft202012Validator(OPLOG_SCHEMA)
_operation_validator = Draft202012Validator(OPERATION_SCHEMA)


def validate_oplog(data: dict[str, Any]) -> None:
    """Validate *data* against the operation log schema."""

    _validator.validate(data)


def validate_operation(data: dict[str, Any]) -> None:
    """Validate a single operation mapping."""

    _operation_validator.validate(data)


__all__ = ["OPERATION_SCHEMA", "OPLOG_SCHEMA", "validate_oplog", "validate_operation"]
