import argparse
import io
import logging

import pytest

from tfproviderdocs.command import output
from tfproviderdocs.command.output import (
    LOG_LEVEL_FLAG_HELP_DEFINITION,
    LOG_LEVEL_FLAG_HELP_DESCRIPTION,
    Ui,
    add_log_level_argument,
    configure_logging,
    log_level_help,
)


@pytest.fixture(autouse=True)
def _restore_logging():
    logger = logging.getLogger("tfproviderdocs")
    level, handlers = logger.level, list(logger.handlers)
    yield
    logger.setLevel(level)
    logger.handlers[:] = handlers


def _ui(color=False):
    out, err = io.StringIO(), io.StringIO()
    return Ui(stdout=out, stderr=err, color=color), out, err


def test_output_goes_to_stdout_uncoloured():
    ui, out, err = _ui(color=True)
    ui.output("plain message")
    assert out.getvalue() == "plain message\n"
    assert err.getvalue() == ""


def test_info_is_green_on_stdout():
    ui, out, err = _ui(color=True)
    ui.info("hello")
    assert out.getvalue().startswith("\033[0;32m")
    assert "hello" in out.getvalue()
    assert err.getvalue() == ""


def test_error_is_red_on_stderr():
    ui, out, err = _ui(color=True)
    ui.error("broken")
    assert err.getvalue() == "\033[0;31mbroken\033[0m\n"
    assert out.getvalue() == ""


def test_warn_goes_to_stderr():
    ui, out, err = _ui(color=False)
    ui.warn("careful")
    assert err.getvalue() == "careful\n"
    assert out.getvalue() == ""


def test_without_colour_messages_are_plain():
    ui, out, err = _ui(color=False)
    ui.info("a")
    ui.error("b")
    assert out.getvalue() == "a\n"
    assert err.getvalue() == "b\n"


def test_log_level_help():
    assert log_level_help() == (LOG_LEVEL_FLAG_HELP_DEFINITION, LOG_LEVEL_FLAG_HELP_DESCRIPTION)
    assert log_level_help()[0] == "-log-level=[TRACE|DEBUG|INFO|WARN|ERROR]"


def test_log_level_argument_default():
    parser = argparse.ArgumentParser()
    add_log_level_argument(parser)
    assert parser.parse_args([]).log_level == "INFO"


def test_log_level_argument_value():
    parser = argparse.ArgumentParser()
    add_log_level_argument(parser)
    assert parser.parse_args(["-log-level", "DEBUG"]).log_level == "DEBUG"
    assert parser.parse_args(["--log-level=WARN"]).log_level == "WARN"


@pytest.mark.parametrize(
    "name, expected",
    [
        ("debug", logging.DEBUG),
        ("DEBUG", logging.DEBUG),
        ("INFO", logging.INFO),
        ("WARN", logging.WARNING),
        ("ERROR", logging.ERROR),
        ("TRACE", output.TRACE),
        ("not-a-level", logging.INFO),
    ],
)
def test_configure_logging_levels(name, expected):
    assert configure_logging("check", name).level == expected


def test_configure_logging_writes_to_stderr(capsys):
    logger = configure_logging("check", "debug")
    logger.getChild("sub").debug("hello there")
    err = capsys.readouterr().err
    assert "[DEBUG] check: hello there" in err


def test_configure_logging_filters_below_level(capsys):
    logger = configure_logging("check", "error")
    logger.getChild("sub").info("quiet message")
    assert "quiet message" not in capsys.readouterr().err


def test_configure_logging_twice_keeps_one_handler(capsys):
    configure_logging("check", "info")
    logger = configure_logging("check", "info")
    logger.info("once only")
    assert capsys.readouterr().err.count("once only") == 1