import logging

from url_query_cleaner.log import PLAIN_FORMAT, LogConfig, setup_logging


def test_quiet_overrides_level():
    assert LogConfig(level="DEBUG", quiet=True).effective_level() == logging.ERROR
    assert LogConfig(level="debug").effective_level() == logging.DEBUG
    assert LogConfig(level="bogus").effective_level() == logging.INFO


def test_no_color_env_disables_rich(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    assert LogConfig().use_rich() is False
    monkeypatch.delenv("NO_COLOR")
    assert LogConfig(no_color=True).use_rich() is False


def test_setup_logging_installs_single_plain_stderr_handler(capsys):
    setup_logging(LogConfig(level="WARNING"))
    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert root.level == logging.WARNING
    assert root.handlers[0].formatter._fmt == PLAIN_FORMAT

    logging.getLogger("url_query_cleaner.test").warning("hello %s", "stderr")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "WARNING url_query_cleaner.test: hello stderr" in captured.err
