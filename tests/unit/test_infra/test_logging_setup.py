"""Tests for logging setup, the JSON formatter and lazy log arguments."""

from __future__ import annotations

import json
import logging
import sys

import pytest

from searchable_scope.core.settings import LoggingSettings
from searchable_scope.infra.logging import (
    JSONFormatter,
    configure_logging,
    lazy,
    lazy_sql,
    reset_logging_state,
    setup_logging,
)


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way pytest configured it."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    reset_logging_state()
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("searchable_scope").setLevel(logging.NOTSET)
    logging.captureWarnings(False)
    reset_logging_state()


def make_record(msg="hello %s", args=("world",), exc_info=None, **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="searchable_scope.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=args,
        exc_info=exc_info,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_default_keys(self):
        payload = json.loads(JSONFormatter().format(make_record()))

        assert payload["level"] == "INFO"
        assert payload["logger"] == "searchable_scope.test"
        assert payload["message"] == "hello world"
        assert payload["timestamp"].endswith("Z")

    def test_static_fields_and_extras(self):
        formatter = JSONFormatter(static={"service": "searchable-scope"})
        record = make_record(search_config={"columns": ["name"], "relations": {}})

        payload = json.loads(formatter.format(record))

        assert payload["service"] == "searchable-scope"
        assert payload["search_config"] == {"columns": ["name"], "relations": {}}
        assert "args" not in payload
        assert "pathname" not in payload

    def test_exception_kept_on_one_line(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = make_record(exc_info=sys.exc_info())

        output = JSONFormatter().format(record)

        assert "\n" not in output
        assert "ValueError: boom" in json.loads(output)["exception"]

    def test_custom_keys(self):
        formatter = JSONFormatter(fmt_keys={"lvl": "levelname", "fn": "funcName"})
        payload = json.loads(formatter.format(make_record()))
        assert payload["lvl"] == "INFO"
        assert "fn" in payload


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_text_handler(self, restore_root_logger):
        configure_logging(log_level="WARNING")

        assert restore_root_logger.level == logging.WARNING
        handler = restore_root_logger.handlers[-1]
        assert isinstance(handler, logging.StreamHandler)
        assert not isinstance(handler.formatter, JSONFormatter)

    def test_json_handler(self, restore_root_logger):
        configure_logging(log_level="DEBUG", json_logs=True, service_name="svc")

        handler = restore_root_logger.handlers[-1]
        assert isinstance(handler.formatter, JSONFormatter)
        assert handler.formatter.static == {"service": "svc"}

    def test_function_name_included(self, restore_root_logger):
        configure_logging(json_logs=True, include_function_name=True)
        formatter = restore_root_logger.handlers[-1].formatter
        assert formatter.fmt_keys["function"] == "funcName"

    def test_search_debug_opens_package_logger(self, restore_root_logger):
        configure_logging(log_level="WARNING", search_debug=True)

        assert restore_root_logger.level == logging.WARNING
        assert logging.getLogger("searchable_scope").level == logging.DEBUG
        assert restore_root_logger.handlers[-1].level == logging.DEBUG

    def test_search_debug_from_settings(self, restore_root_logger, monkeypatch):
        monkeypatch.setenv("LOG_SEARCH_DEBUG", "true")
        setup_logging()
        assert logging.getLogger("searchable_scope").level == logging.DEBUG


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_configures_once(self, restore_root_logger):
        setup_logging(LoggingSettings(level="ERROR"))
        setup_logging(LoggingSettings(level="DEBUG"))

        assert restore_root_logger.level == logging.ERROR

    def test_force_reconfigures(self, restore_root_logger):
        setup_logging(LoggingSettings(level="ERROR"))
        setup_logging(LoggingSettings(level="DEBUG"), force=True)

        assert restore_root_logger.level == logging.DEBUG

    def test_loads_settings_from_environment(self, restore_root_logger, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "critical")
        setup_logging()
        assert restore_root_logger.level == logging.CRITICAL

    def test_overrides_win(self, restore_root_logger):
        setup_logging(LoggingSettings(level="ERROR"), log_level="INFO")
        assert restore_root_logger.level == logging.INFO


class TestLazy:
    """Tests for lazy log arguments."""

    def test_not_evaluated_when_disabled(self, caplog):
        calls = []

        def expensive():
            calls.append(1)
            return "value"

        logger = logging.getLogger("searchable_scope.test.lazy")
        with caplog.at_level(logging.INFO, logger="searchable_scope.test.lazy"):
            logger.debug("SQL: %s", lazy(expensive))

        assert calls == []

    def test_evaluated_when_formatted(self, caplog):
        logger = logging.getLogger("searchable_scope.test.lazy")
        with caplog.at_level(logging.DEBUG, logger="searchable_scope.test.lazy"):
            logger.debug("SQL: %s", lazy(lambda: "SELECT 1"))

        assert caplog.records[-1].getMessage() == "SQL: SELECT 1"

    def test_lazy_sql_keeps_placeholders(self):
        from sqlalchemy import column

        rendered = str(lazy_sql(column("name") == "secret"))
        assert rendered.startswith("name = :")
        assert "secret" not in rendered

    def test_lazy_sql_compiles_only_when_formatted(self):
        calls = []

        class Clause:
            def compile(self):
                calls.append(1)
                return "SELECT 1"

        deferred = lazy_sql(Clause())
        assert calls == []
        assert str(deferred) == "SELECT 1"
        assert calls == [1]

    def test_search_condition_logged_at_debug(self, caplog):
        from sqlalchemy import select

        from searchable_scope.core.database.search.composer import compose
        from searchable_scope.core.database.search.types import EffectiveSearchConfig
        from tests.fixtures.search_models import Product

        name = "searchable_scope.core.database.search.composer"
        with caplog.at_level(logging.DEBUG, logger=name):
            compose(select(Product), Product, EffectiveSearchConfig(columns=("name",)), "lap")

        messages = [r.getMessage() for r in caplog.records if r.name == name]
        assert len(messages) == 1
        assert messages[0].startswith("Search condition: lower(products.name) LIKE lower(:")
        assert "lap" not in messages[0]
