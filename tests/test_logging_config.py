"""Tests for the root logger setup."""
import logging

import pytest

from src.core.logging_config import NOISY_LOGGERS, setup_logging


def _gateway_handlers(root: logging.Logger) -> list:
    return [h for h in root.handlers if (h.get_name() or "").startswith("gateway.")]


@pytest.fixture
def restore_logging():
    """Put the console-only setup back after a test reconfigures logging."""
    yield
    setup_logging("INFO")


class TestSetupLogging:

    def test_console_only_by_default(self, restore_logging) -> None:
        root = setup_logging("WARNING")

        handlers = _gateway_handlers(root)
        assert [h.get_name() for h in handlers] == ["gateway.console"]
        assert root.level == logging.WARNING

    def test_repeated_calls_do_not_stack_handlers(self, restore_logging) -> None:
        setup_logging("INFO")
        root = setup_logging("INFO")

        assert len(_gateway_handlers(root)) == 1

    def test_log_dir_adds_daily_file(self, tmp_path, restore_logging) -> None:
        root = setup_logging("DEBUG", tmp_path / "logs")

        logging.getLogger("tests.logging").info("written to file")
        for handler in _gateway_handlers(root):
            handler.flush()

        files = list((tmp_path / "logs").glob("gateway_*.log"))
        assert len(files) == 1
        assert "written to file" in files[0].read_text(encoding="utf-8")

    def test_unknown_level_falls_back_to_info(self, restore_logging) -> None:
        assert setup_logging("chatty").level == logging.INFO

    def test_noisy_loggers_quieted(self, restore_logging) -> None:
        setup_logging("DEBUG")

        for name in NOISY_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING
