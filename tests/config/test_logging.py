"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from pizzeria.config.logging import APP_LOGGER, configure_logging, order_log_context


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app = logging.getLogger(APP_LOGGER)
    app_level = app.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    app.setLevel(app_level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger(APP_LOGGER).level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False)
        assert logging.getLogger(APP_LOGGER).level == logging.WARNING

    def test_leaves_third_party_levels_alone(self) -> None:
        third_party = logging.getLogger("pizzeria_tests.thirdparty")
        third_party.setLevel(logging.NOTSET)
        configure_logging(verbose=True)
        assert third_party.level == logging.NOTSET
        assert logging.getLogger("markdown_it").level == logging.NOTSET

    def test_single_handler(self) -> None:
        configure_logging()
        configure_logging()
        assert len(logging.getLogger().handlers) == 1

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("pizzeria.test").warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "pizzeria.test"
        assert "timestamp" in parsed

    def test_stdlib_logger_gets_order_context(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)
        with order_log_context(12):
            logging.getLogger("pizzeria.services.order").info("placed")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "placed"
        assert parsed["order_id"] == 12
        assert parsed["logger"] == "pizzeria.services.order"

    def test_context_is_unbound_after_block(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)
        with order_log_context(3):
            pass
        logging.getLogger("pizzeria.x").info("after")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert "order_id" not in parsed
