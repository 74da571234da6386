#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/utils/test_logging_utils.py
"""Unit tests for configure_logging."""

import logging

import pytest

from markrender.logging_utils import PACKAGE_LOGGER_NAME, configure_logging, resolve_log_level


@pytest.fixture
def restore_root_logger():
    """Restore the root logger's handlers and level after a test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.unit
class TestConfigureLogging:
    """Tests for root logger configuration."""

    def test_level_by_name(self, restore_root_logger) -> None:
        """Test string level names."""
        root = configure_logging("debug")
        assert root is restore_root_logger
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1

    def test_unknown_level_defaults_to_info(self, restore_root_logger) -> None:
        """Test that unknown names fall back to INFO."""
        assert configure_logging("chatty").level == logging.INFO

    def test_trace_format(self, restore_root_logger) -> None:
        """Test that trace mode includes logger names."""
        root = configure_logging(logging.WARNING, trace_mode=True)
        assert "%(name)s" in root.handlers[0].formatter._fmt

    def test_log_file(self, restore_root_logger, tmp_path) -> None:
        """Test teeing output to a file."""
        log_file = tmp_path / "render.log"
        root = configure_logging("INFO", log_file=str(log_file))
        assert len(root.handlers) == 2
        logging.getLogger("markrender.test").info("rendered")
        for handler in root.handlers:
            handler.flush()
        assert "rendered" in log_file.read_text(encoding="utf-8")

    def test_unwritable_log_file(self, restore_root_logger, tmp_path) -> None:
        """Test that a bad log path keeps console logging."""
        root = configure_logging("INFO", log_file=str(tmp_path / "missing" / "render.log"))
        assert len(root.handlers) == 1

    def test_package_only(self, restore_root_logger) -> None:
        """Test scoping the handlers to the package logger."""
        package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
        try:
            configured = configure_logging("WARNING", package_only=True)
            assert configured is package_logger
            assert configured.level == logging.WARNING
            assert configured.propagate is False
            assert len(configured.handlers) == 1
        finally:
            for handler in package_logger.handlers:
                handler.close()
            package_logger.handlers.clear()
            package_logger.setLevel(logging.NOTSET)
            package_logger.propagate = True


@pytest.mark.unit
class TestResolveLogLevel:
    """Tests for level name resolution."""

    @pytest.mark.parametrize(
        "level,expected",
        [(logging.ERROR, logging.ERROR), ("debug", logging.DEBUG), (" Warning ", logging.WARNING), ("loud", logging.INFO)],
    )
    def test_resolve(self, level, expected: int) -> None:
        """Test ints, names and unknown names."""
        assert resolve_log_level(level) == expected
