"""Unit tests for provider_virtono.utils.logger module."""

import json
import logging
import sys
from io import StringIO
from unittest.mock import patch

from opentelemetry.sdk.trace import TracerProvider

from provider_virtono.utils.context import operation_context, set_context
from provider_virtono.utils.logger import (
    ColoredConsoleFormatter,
    ContextInjectionFilter,
    CustomJsonFormatter,
    get_logger,
    setup_logging,
)


def _record(msg="Test message", level=logging.INFO, args=(), exc_info=None):
    return logging.LogRecord(
        name="test.logger",
        level=level,
        pathname="test.py",
        lineno=42,
        msg=msg,
        args=args,
        exc_info=exc_info,
    )


class TestCustomJsonFormatter:
    """Tests for CustomJsonFormatter class."""

    def setup_method(self):
        self.formatter = CustomJsonFormatter()

    def test_format_basic_log_record(self):
        log_data = json.loads(self.formatter.format(_record()))

        assert log_data["level"] == "INFO"
        assert log_data["logger"] == "test.logger"
        assert log_data["message"] == "Test message"
        assert isinstance(log_data["timestamp"], (int, float))

    def test_format_with_extra_fields(self):
        record = _record()
        record.resource_kind = "VirtualMachine"
        record.kind = "compute.virtono.crossplane.io/v1alpha1, Kind=VirtualMachine"

        log_data = json.loads(self.formatter.format(record))

        assert log_data["resource_kind"] == "VirtualMachine"
        assert log_data["kind"].endswith("Kind=VirtualMachine")

    def test_format_with_context_variables(self):
        set_context(
            resource_kind="VirtualMachine", resource_name="vm1", action="scheme.decode"
        )
        record = _record()
        ContextInjectionFilter().filter(record)

        log_data = json.loads(self.formatter.format(record))

        assert log_data["resource_kind"] == "VirtualMachine"
        assert log_data["resource_name"] == "vm1"
        assert log_data["action"] == "scheme.decode"

    def test_format_with_trace_context(self):
        tracer = TracerProvider().get_tracer(__name__)

        with tracer.start_as_current_span("test-span") as span:
            span_context = span.get_span_context()
            record = _record()
            ContextInjectionFilter().filter(record)

        log_data = json.loads(self.formatter.format(record))

        assert log_data["trace_id"] == format(span_context.trace_id, "032x")
        assert log_data["span_id"] == format(span_context.span_id, "016x")

    def test_format_with_exception(self):
        try:
            raise ValueError("Test error")
        except ValueError:
            record = _record("Error occurred", logging.ERROR, exc_info=sys.exc_info())

        log_data = json.loads(self.formatter.format(record))

        assert log_data["level"] == "ERROR"
        assert "ValueError: Test error" in log_data["exc_info"]

    def test_format_with_message_formatting(self):
        record = _record("Registered %s under %s", args=("VirtualMachine", "v1alpha1"))

        log_data = json.loads(self.formatter.format(record))

        assert log_data["message"] == "Registered VirtualMachine under v1alpha1"


class TestColoredConsoleFormatter:
    def test_level_is_colored(self):
        formatter = ColoredConsoleFormatter("%(levelname)s %(message)s")

        output = formatter.format(_record(level=logging.WARNING))

        assert "\033[33mWARNING\033[0m" in output
        assert output.endswith("Test message")


class TestSetupLogging:
    """Tests for setup_logging function."""

    def setup_method(self):
        root_logger = logging.getLogger()
        self.saved_handlers = root_logger.handlers[:]
        self.saved_level = root_logger.level

    def teardown_method(self):
        root_logger = logging.getLogger()
        root_logger.handlers[:] = self.saved_handlers
        root_logger.setLevel(self.saved_level)

    def test_json_format(self):
        with patch("provider_virtono.utils.logger.settings") as mock_settings:
            mock_settings.LOG_FORMAT = "json"
            mock_settings.LOG_LEVEL = "DEBUG"
            setup_logging()

        root_logger = logging.getLogger()
        assert len(root_logger.handlers) == 1
        handler = root_logger.handlers[0]
        assert isinstance(handler.formatter, CustomJsonFormatter)
        assert any(isinstance(f, ContextInjectionFilter) for f in handler.filters)
        assert root_logger.level == logging.DEBUG

    def test_console_format(self):
        with patch("provider_virtono.utils.logger.settings") as mock_settings:
            mock_settings.LOG_FORMAT = "console"
            mock_settings.LOG_LEVEL = "WARNING"
            setup_logging()

        root_logger = logging.getLogger()
        assert isinstance(root_logger.handlers[0].formatter, ColoredConsoleFormatter)
        assert root_logger.level == logging.WARNING


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger_returns_named_logger(self):
        logger = get_logger("test.module")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "test.module"
        assert get_logger("test.module") is logger

    def test_logged_lines_carry_operation_context(self):
        logger = get_logger("test.context")
        stream = StringIO()
        handler = logging.StreamHandler(stream)
        handler.setFormatter(CustomJsonFormatter())
        handler.addFilter(ContextInjectionFilter())
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        try:
            with operation_context("virtualmachine.validate", resource_name="vm1"):
                logger.info("Validating")
        finally:
            logger.removeHandler(handler)

        log_data = json.loads(stream.getvalue())
        assert log_data["action"] == "virtualmachine.validate"
        assert log_data["resource_name"] == "vm1"
