import io

import pytest

from dstructs.logger import Logger, LogLevel, log


def _run_all(level):
    stream = io.StringIO()
    logger = Logger(level, stream)
    logger.warn("Hello!")
    logger.error("Hello!")
    logger.info("Hello!")
    return stream.getvalue()


def test_info_level_shows_everything():
    assert _run_all(LogLevel.INFO) == (
        "[WARNING]: Hello!\n[ERROR]: Hello!\n[INFO]: Hello!\n"
    )


def test_warning_level_hides_info():
    assert _run_all(LogLevel.WARNING) == "[WARNING]: Hello!\n[ERROR]: Hello!\n"


def test_error_level_shows_only_errors():
    assert _run_all(LogLevel.ERROR) == "[ERROR]: Hello!\n"


def test_default_level_is_info():
    assert Logger().level is LogLevel.INFO


def test_level_values_and_order():
    levels = [Logger(value).level for value in (0, 1, 2)]
    assert levels == [LogLevel.ERROR, LogLevel.WARNING, LogLevel.INFO]
    assert levels[0] < levels[1] < levels[2]


def test_level_accepts_int_and_can_change():
    stream = io.StringIO()
    logger = Logger(1, stream)
    assert logger.level is LogLevel.WARNING
    logger.level = LogLevel.ERROR
    logger.warn("quiet")
    assert stream.getvalue() == ""


def test_invalid_level_rejected():
    with pytest.raises(ValueError):
        Logger(7)


def test_log_writes_line():
    stream = io.StringIO()
    log("Hello World!!", stream)
    assert stream.getvalue() == "Hello World!!\n"


def test_log_defaults_to_stdout(capsys):
    log("Hey World")
    assert capsys.readouterr().out == "Hey World\n"