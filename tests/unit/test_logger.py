"""
test_logger.py — Unit tests for lifecycle/logger.py
"""

import io
import logging

import pytest

from lifecycle.logger import LOGGER, LogStream, resolve_level

# ── resolve_level ─────────────────────────────────────────────────────────────


class TestResolveLevel:
    @pytest.mark.parametrize("level", ["debug", "INFO", "Warning", "ERROR"])
    def test_known_names_are_upper_cased(self, level):
        assert resolve_level(level) == level.upper()

    def test_logging_constants_pass_through(self):
        assert resolve_level(logging.DEBUG) == logging.DEBUG

    def test_unknown_name_falls_back_to_default(self):
        """A bad RECIPE_HOOKS_LOG_LEVEL must not break importing the harness."""
        assert resolve_level("chatty") == "WARNING"
        assert resolve_level("chatty", default="ERROR") == "ERROR"

    def test_resolved_level_is_accepted_by_handlers(self):
        handler = logging.StreamHandler(io.StringIO())
        handler.setLevel(resolve_level("chatty"))
        assert handler.level == logging.WARNING


# ── LogStream ─────────────────────────────────────────────────────────────────


class TestLogStream:
    def test_registered_stream_receives_messages_until_unregistered(self):
        stream = io.StringIO()
        log_id = LogStream.Register(stream)
        LOGGER.warning("while registered")
        LogStream.Unregister(log_id)
        LOGGER.warning("after unregister")
        assert "while registered" in stream.getvalue()
        assert "after unregister" not in stream.getvalue()

    def test_unregister_unknown_id_is_a_no_op(self):
        LogStream.Unregister(-1)
