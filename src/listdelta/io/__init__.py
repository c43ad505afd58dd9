from .oplog import (
    OperationLog,
    dump_oplog,
    load_oplog,
    operation_from_dict,
    operation_to_dict,
    parse_oplog,
)
from .schema import OPLOG_SCHEMA, validate_oplog

__all__ = [
    "OPLOG_SCHEMA",
    "OperationLog",
    "dump_oplog",
    "load_oplog",
    "operation_from_dict",
    "operation_to_dict",
    "parse_oplog",
    "validate_oplog",
]
