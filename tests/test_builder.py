"""Tests for LoggerBuilder"""

import json
from unittest.mock import Mock

import hierlog
from hierlog import Level, LoggerBuilder, LoggerRegistry, LoggingConfig
from hierlog.filters import LevelFilter
from hierlog.formatters import ColorizedFormatter, MessageOnlyFormatter
from hierlog.handlers import ConsoleHandler, FileHandler, JSONHandler


class TestLoggerBuilder:
    """Test builder against an explicit registry."""

    def setup_method(self):
        """Create an isolated registry."""
        self.registry = LoggerRegistry(LoggingConfig())

    def builder(self):
        return LoggerBuilder(self.registry)

    def test_defaults_to_root(self):
        logger = self.builder().build()
        assert logger is self.registry.get_logger("root")
        assert logger.handlers == []

    def test_name_and_level(self):
        logger = self.builder().with_name("app.worker").with_level("debug").build()

        assert logger.name == "app.worker"
        assert logger.level == Level.DEBUG
        assert logger.parent is self.registry.get_logger("app")

    def test_returns_registry_instance(self):
        built = self.builder().with_name("svc").build()
        assert self.registry.get_logger("svc") is built

    def test_console(self):
        logger = self.builder().with_name("svc").with_console().build()
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], ConsoleHandler)

    def test_colored_console(self):
        handler = self.builder().with_console(colored=True).build().handlers[0]
        assert isinstance(handler.formatter, ColorizedFormatter)

    def test_formatter_wins_over_colors(self):
        formatter = MessageOnlyFormatter()
        handler = (self.builder()
                   .with_console(colored=True)
                   .with_formatter(formatter)
                   .build()
                   .handlers[0])
        assert handler.formatter is formatter

    def test_file(self, tmp_path):
        path = tmp_path / "worker.log"
        logger = (self.builder()
                  .with_name("worker")
                  .with_level(Level.INFO)
                  .with_file(str(path), mode="write")
                  .with_formatter(MessageOnlyFormatter())
                  .build())

        logger.info("started")
        for handler in logger.handlers:
            handler.close()

        assert isinstance(logger.handlers[0], FileHandler)
        assert path.read_text(encoding="utf-8") == "started\n"

    def test_json(self, capsys):
        logger = (self.builder()
                  .with_name("svc")
                  .with_level(Level.INFO)
                  .with_json()
                  .build())

        logger.info("ready", extra={"port": 8080})

        assert isinstance(logger.handlers[0], JSONHandler)
        # "svc" has its own handler so only the JSON line is written
        data = json.loads(capsys.readouterr().out)
        assert data["message"] == "ready"
        assert data["port"] == 8080

    def test_filter_applied_to_builtin_handlers(self, tmp_path):
        log_filter = LevelFilter(min_level=Level.ERROR)
        logger = (self.builder()
                  .with_console()
                  .with_file(str(tmp_path / "app.log"))
                  .with_filter(log_filter)
                  .build())

        assert all(handler.log_filter is log_filter for handler in logger.handlers)
        for handler in logger.handlers:
            handler.close()

    def test_custom_handlers(self):
        handler = Mock()
        logger = (self.builder()
                  .with_name("svc")
                  .with_level(Level.DEBUG)
                  .add_handler(handler)
                  .build())

        logger.debug("hello")

        handler.assert_called_once()
        assert handler.call_args[0][0].message == "hello"

    def test_build_appends_by_default(self):
        first, second = Mock(), Mock()
        self.builder().with_name("svc").add_handler(first).build()
        logger = self.builder().with_name("svc").add_handler(second).build()
        assert logger.handlers == [first, second]

    def test_replace_handlers(self):
        first, second = Mock(), Mock()
        self.builder().with_name("svc").add_handler(first).build()
        logger = (self.builder()
                  .with_name("svc")
                  .replace_handlers()
                  .add_handler(second)
                  .build())
        assert logger.handlers == [second]


class TestLoggerBuilderDefaultRegistry:
    """Test builder against the facade registry."""

    def setup_method(self):
        hierlog.reset()

    def teardown_method(self):
        hierlog.reset()

    def test_builds_into_default_registry(self):
        logger = LoggerBuilder().with_name("app.api").build()
        assert hierlog.get_logger("app.api") is logger
