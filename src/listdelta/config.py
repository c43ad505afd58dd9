"""Default configuration values for listdelta."""

from __future__ import annotations

from typing import Final

# Root logger name shared by the library modules and the CLI console handler.
LOGGER_NAME: Final[str] = "listdelta"
CONSOLE_HANDLER_NAME: Final[str] = "listdelta-console"

# Identifier stored in every operation log document.  Bump the suffix when the
# document layout changes in a way older readers cannot understand.
OPLOG_SCHEMA_ID: Final[str] = "listdelta/oplog@1"
