"""
Tests for channel-aware logging configuration.
"""

from postlang.core.logging import (
    LogChannel,
    LogLevel,
    configure_logging,
    get_logger,
    get_pass_logger,
)


class TestConfiguration:

    def test_default_is_silent(self, monkeypatch):
        monkeypatch.delenv("POSTLANG_LOG_LEVEL", raising=False)
        configure_logging(force=True)

        assert not get_logger(LogChannel.SYSTEM).enabled(LogLevel.INFO)

    def test_environment_level(self, monkeypatch):
        monkeypatch.setenv("POSTLANG_LOG_LEVEL", "verbose")
        configure_logging(force=True)
        log = get_logger(LogChannel.PARSE)

        assert log.enabled(LogLevel.VERBOSE)
        assert not log.enabled(LogLevel.DEBUG)

    def test_channel_filter(self):
        """Unknown channel names are dropped."""
        configure_logging(level="info", channels=["parse", "bogus"], force=True)

        assert get_logger(LogChannel.PARSE).enabled(LogLevel.INFO)
        assert not get_logger(LogChannel.VALIDATE).enabled(LogLevel.INFO)

    def test_environment_channels(self, monkeypatch):
        monkeypatch.setenv("POSTLANG_LOG_CHANNELS", "analyze")
        configure_logging(level="debug", force=True)

        assert get_logger(LogChannel.ANALYZE).enabled(LogLevel.DEBUG)
        assert not get_logger(LogChannel.LEX).enabled(LogLevel.INFO)

    def test_level_names(self):
        assert LogLevel.parse("Debug") == LogLevel.DEBUG
        assert LogLevel.parse("loud") == LogLevel.SILENT


class TestLoggers:

    def test_channel_by_name(self):
        assert get_logger("analyze").channel == LogChannel.ANALYZE
        assert get_logger("nope").channel == LogChannel.SYSTEM

    def test_pass_logger_channel_from_prefix(self):
        assert get_pass_logger("p10_parse").channel == LogChannel.PARSE
        assert get_pass_logger("p30_generate").channel == LogChannel.RENDER
        assert get_pass_logger("p99_custom").channel == LogChannel.PIPELINE

    def test_logging_does_not_touch_stdout(self, capsys):
        configure_logging(level="debug", force=True)
        get_logger(LogChannel.SYSTEM).info("hello", value=1)

        assert capsys.readouterr().out == ""
