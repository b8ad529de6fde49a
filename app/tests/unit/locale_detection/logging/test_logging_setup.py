"""Unit tests for locale_detection.logging.setup module."""

import json

import pytest

from locale_detection.i18n import LocaleResolver
from locale_detection.logging import setup
from locale_detection.logging.setup import (
    _is_test_environment,
    configure_logging,
    get_module_logger,
)
from tests.factories import make_locale_config, make_request_context


@pytest.fixture
def live_logging(monkeypatch, capsys, mock_settings):
    """Configure logging as outside of tests, restoring test suppression afterwards."""
    monkeypatch.setattr(setup, "_is_test_environment", lambda: False)

    def _configure(**overrides):
        return configure_logging(settings=mock_settings, **overrides)

    yield _configure
    monkeypatch.undo()
    configure_logging()


def _resolve_fr():
    resolver = LocaleResolver(make_locale_config())
    return resolver.resolve(make_request_context(params={"locale": "fr"}))


@pytest.mark.unit
class TestIsTestEnvironment:
    """Test suite for _is_test_environment helper."""

    def test_detects_pytest_in_sys_modules(self):
        """Returns True when pytest is in sys.modules."""
        assert _is_test_environment() is True


@pytest.mark.unit
class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_returns_bound_logger(self, mock_settings):
        """configure_logging returns a usable logger."""
        logger = configure_logging(settings=mock_settings)

        assert hasattr(logger, "info")
        assert hasattr(logger, "debug")
        assert hasattr(logger, "error")

    def test_idempotent(self, mock_settings):
        """Multiple configure_logging calls are safe."""
        configure_logging(settings=mock_settings)
        logger = configure_logging(settings=mock_settings)
        logger.info("test_event", key="value")

    def test_suppressed_during_tests(self, capsys):
        """Library events are not printed while tests run."""
        configure_logging(log_level="DEBUG")

        assert _resolve_fr() == "fr"

        captured = capsys.readouterr()
        assert "locale_resolved" not in captured.out + captured.err

    def test_level_filters_library_events(self, live_logging, capsys):
        """Debug events from the resolver are dropped above DEBUG."""
        live_logging(log_level="WARNING", is_production=True)

        assert _resolve_fr() == "fr"

        captured = capsys.readouterr()
        assert "locale_resolved" not in captured.out + captured.err

    def test_reconfiguration_applies_to_existing_loggers(self, live_logging, capsys):
        """Module loggers created at import follow the latest configuration."""
        live_logging(log_level="WARNING", is_production=False)
        _resolve_fr()
        live_logging(log_level="DEBUG", is_production=True)
        capsys.readouterr()

        _resolve_fr()

        lines = [line for line in capsys.readouterr().err.splitlines() if line.startswith("{")]
        events = [json.loads(line) for line in lines]
        resolved = [event for event in events if event["event"] == "locale_resolved"]
        assert len(resolved) == 1
        assert resolved[0]["component"] == "i18n.resolver"
        assert resolved[0]["locale"] == "fr"
        assert resolved[0]["level"] == "debug"


@pytest.mark.unit
class TestGetModuleLogger:
    """Test suite for get_module_logger."""

    def test_usable_for_events(self):
        """get_module_logger returns a logger usable for events."""
        logger = get_module_logger()
        logger.info("module_logger_event", locale="fr")

    def test_binds_calling_module(self, live_logging, capsys):
        """The calling module's name is bound as component and module_path."""
        live_logging(log_level="INFO", is_production=True)
        capsys.readouterr()

        get_module_logger().info("module_logger_event")

        lines = [line for line in capsys.readouterr().err.splitlines() if line.startswith("{")]
        event = json.loads(lines[-1])
        assert event["component"] == "test_logging_setup"
        assert event["module_path"].endswith("test_logging_setup")
