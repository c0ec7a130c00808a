"""Tests for global configuration"""

from unittest.mock import Mock

from hierlog import BasicConfig, Level, LoggingConfig
from hierlog.formatters import (
    BasicFormatter,
    ColorizedFormatter,
    JSONFormatter,
    MessageOnlyFormatter,
    SimpleFormatter,
)
from hierlog.handlers import ConsoleHandler


class TestBasicConfig:
    """Test BasicConfig dataclass and presets."""

    def test_defaults(self):
        config = BasicConfig()
        assert config.level is None
        assert config.formatter is None
        assert config.handlers is None
        assert config.force is False

    def test_level_name_is_parsed(self):
        assert BasicConfig(level="error").level == Level.ERROR

    def test_development_preset(self):
        config = BasicConfig.development()
        assert config.level == Level.DEBUG
        assert isinstance(config.formatter, ColorizedFormatter)

    def test_production_preset(self):
        config = BasicConfig.production()
        assert config.level == Level.ERROR
        assert isinstance(config.formatter, JSONFormatter)

    def test_testing_and_minimal_presets(self):
        assert BasicConfig.testing().level == Level.WARNING
        assert isinstance(BasicConfig.minimal().formatter, MessageOnlyFormatter)

    def test_for_environment(self, monkeypatch):
        monkeypatch.setenv("HIERLOG_ENV", "staging")
        assert BasicConfig.for_environment().level == Level.INFO
        assert BasicConfig.for_environment("production").level == Level.ERROR


class TestLoggingConfig:
    """Test LoggingConfig state handling."""

    def test_defaults(self):
        config = LoggingConfig()
        assert config.configured is False
        assert config.level == Level.WARNING
        assert isinstance(config.formatter, BasicFormatter)
        assert len(config.handlers) == 1
        assert isinstance(config.handlers[0], ConsoleHandler)
        assert config.disabled_level is None

    def test_handlers_returns_copy(self):
        config = LoggingConfig()
        handlers = config.handlers
        handlers.append(Mock())
        handlers.clear()
        assert len(config.handlers) == 1

    def test_configure_applies_fields(self):
        config = LoggingConfig()
        handler = Mock()
        formatter = SimpleFormatter()

        applied = config.configure(level=Level.DEBUG, formatter=formatter, handlers=[handler])

        assert applied is True
        assert config.configured is True
        assert config.level == Level.DEBUG
        assert config.formatter is formatter
        assert config.handlers == [handler]

    def test_configure_copies_handler_list(self):
        config = LoggingConfig()
        handlers = [Mock()]
        config.configure(handlers=handlers)
        handlers.append(Mock())
        assert len(config.handlers) == 1

    def test_partial_configure_keeps_other_fields(self):
        config = LoggingConfig()
        default_handlers = config.handlers
        config.configure(level=Level.ERROR)
        assert config.handlers == default_handlers
        assert isinstance(config.formatter, BasicFormatter)

    def test_second_configure_is_ignored(self):
        config = LoggingConfig()
        config.configure(level=Level.ERROR)

        applied = config.configure(level=Level.DEBUG)

        assert applied is False
        assert config.level == Level.ERROR

    def test_force_reconfigures(self):
        config = LoggingConfig()
        config.configure(level=Level.ERROR)

        applied = config.configure(BasicConfig(level=Level.DEBUG, force=True))

        assert applied is True
        assert config.level == Level.DEBUG

    def test_formatter_rebuilds_default_console_handler(self):
        config = LoggingConfig()
        formatter = SimpleFormatter()
        config.configure(formatter=formatter)

        handlers = config.handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], ConsoleHandler)
        assert handlers[0].formatter is formatter

    def test_formatter_does_not_replace_custom_handlers(self):
        config = LoggingConfig()
        handler = Mock()
        config.configure(handlers=[handler])
        config.configure(formatter=SimpleFormatter(), force=True)
        assert config.handlers == [handler]

    def test_reset(self):
        config = LoggingConfig()
        config.configure(level=Level.DEBUG, handlers=[Mock()])
        config.disable(Level.INFO)

        config.reset()

        assert config.configured is False
        assert config.level == Level.WARNING
        assert isinstance(config.handlers[0], ConsoleHandler)
        assert config.disabled_level is None

    def test_disable(self):
        config = LoggingConfig()
        config.disable(Level.INFO)
        assert config.disabled_level == Level.INFO
        config.disable(Level.NOTSET)
        assert config.disabled_level is None
