import logging

from listdelta.utils.console_logger import ensure_console_logger


def test_handler_installed_once() -> None:
    logger = logging.getLogger("listdelta.test.console")
    logger.handlers.clear()

    ensure_console_logger(logger, "test-console-once")
    ensure_console_logger(logger, "test-console-once")

    named = [h for h in logger.handlers if getattr(h, "name", None) == "test-console-once"]
    assert len(named) == 1


def test_second_call_updates_level() -> None:
    logger = logging.getLogger("listdelta.test.level")
    logger.handlers.clear()

    ensure_console_logger(logger, "test-console-level", level=logging.WARNING)
    ensure_console_logger(logger, "test-console-level", level=logging.DEBUG)

    assert logger.level == logging.DEBUG
    assert logger.handlers[0].level == logging.DEBUG
