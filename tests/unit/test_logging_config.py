"""Unit tests for structured logging configuration."""

import structlog

from card_registration.logging_config import configure_logging, get_logger


def teardown_function():
    structlog.reset_defaults()


def test_configure_json_logging():
    configure_logging(log_level="DEBUG", format_as_json=True)

    config = structlog.get_config()
    assert isinstance(config["processors"][-1], structlog.processors.JSONRenderer)


def test_configure_console_logging():
    configure_logging(log_level="warning", format_as_json=False)

    config = structlog.get_config()
    assert isinstance(config["processors"][-1], structlog.dev.ConsoleRenderer)


def test_environment_bound_to_context():
    configure_logging(log_level="INFO", format_as_json=True)

    context = structlog.contextvars.get_contextvars()
    assert context["environment"] == "development"
    structlog.contextvars.clear_contextvars()


def test_get_logger_returns_bound_logger():
    configure_logging(log_level="INFO", format_as_json=True)

    logger = get_logger("card_registration.tests")

    assert hasattr(logger, "info")
    assert hasattr(logger, "bind")
