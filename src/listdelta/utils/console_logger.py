from __future__ import annotations

import logging
import sys

_INSTALLED_HANDLERS: set[str] = set()


def ensure_console_logger(
    logger: logging.Logger,
    handler_name: str,
    *,
    level: int = logging.INFO,
) -> None:
    """Attach a stdout handler named *handler_name* to *logger* once.

    Later calls with the same name only adjust the level.
    """
    if handler_name in _INSTALLED_HANDLERS or any(
        getattr(handler, "name", None) == handler_name for handler in logger.handlers
    ):
        _INSTALLED_HANDLERS.add(handler_name)
        for handler in logger.handlers:
            if getattr(handler, "name", None) == handler_name:
                handler.setLevel(level)
        logger.setLevel(level)
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.name = handler_name
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    _INSTALLED_HANDLERS.add(handler_name)
