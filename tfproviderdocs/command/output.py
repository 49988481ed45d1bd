"""Terminal output and logging set-up for the commands."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime
from typing import TextIO

LOG_LEVEL_FLAG_HELP_DEFINITION = "-log-level=[TRACE|DEBUG|INFO|WARN|ERROR]"
LOG_LEVEL_FLAG_HELP_DESCRIPTION = "Log output level."

DEFAULT_LOG_LEVEL = "INFO"

TRACE = 5
OFF = logging.CRITICAL + 10

PACKAGE_LOGGER = "tfproviderdocs"

logging.addLevelName(TRACE, "TRACE")

_LEVELS = {
    "trace": TRACE,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "off": OFF,
}

_LEVEL_LABELS = {
    TRACE: "TRACE",
    logging.DEBUG: "DEBUG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERROR",
    logging.CRITICAL: "ERROR",
}

_COLOR_INFO = 32
_COLOR_WARN = 33
_COLOR_ERROR = 31
_RESET = "\033[0m"


class Ui:
    """Writes messages for the user, coloured by kind.

    Output and info go to standard output; warnings and errors to standard error.
    Streams left as None are looked up when written to.
    """

    def __init__(
        self,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
        color: bool = True,
    ) -> None:
        self._stdout = stdout
        self._stderr = stderr
        self.color = color

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr if self._stderr is not None else sys.stderr

    def _write(self, stream: TextIO, message: str, color: int | None) -> None:
        if self.color and color is not None:
            message = f"\033[0;{color}m{message}{_RESET}"
        stream.write(message + "\n")
        stream.flush()

    def output(self, message: str) -> None:
        """Write a plain message to standard output."""
        self._write(self.stdout, message, None)

    def info(self, message: str) -> None:
        """Write an informational message to standard output."""
        self._write(self.stdout, message, _COLOR_INFO)

    def warn(self, message: str) -> None:
        """Write a warning to standard error."""
        self._write(self.stderr, message, _COLOR_WARN)

    def error(self, message: str) -> None:
        """Write an error to standard error."""
        self._write(self.stderr, message, _COLOR_ERROR)


def add_log_level_argument(parser: argparse.ArgumentParser) -> argparse.Action:
    """Add the ``-log-level`` option to the parser."""
    return parser.add_argument(
        "-log-level",
        "--log-level",
        dest="log_level",
        default=DEFAULT_LOG_LEVEL,
    )


def log_level_help() -> tuple[str, str]:
    """Return the help entry of the ``-log-level`` option."""
    return LOG_LEVEL_FLAG_HELP_DEFINITION, LOG_LEVEL_FLAG_HELP_DESCRIPTION


class _StderrHandler(logging.StreamHandler):
    """A stream handler that always writes to the current standard error."""

    def __init__(self) -> None:
        logging.Handler.__init__(self)

    @property
    def stream(self) -> TextIO:  # type: ignore[override]
        return sys.stderr


class _Formatter(logging.Formatter):
    def __init__(self, logger_name: str) -> None:
        super().__init__()
        self._logger_name = logger_name

    def format(self, record: logging.LogRecord) -> str:
        moment = datetime.fromtimestamp(record.created).astimezone()
        stamp = moment.strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + moment.strftime("%z")
        label = _LEVEL_LABELS.get(record.levelno, record.levelname)
        text = f"{stamp} [{label}] {self._logger_name}: {record.getMessage()}"
        if record.exc_info:
            text = f"{text}\n{self.formatException(record.exc_info)}"
        return text


def configure_logging(logger_name: str, log_level: str) -> logging.Logger:
    """Send the package's log records to standard error at the given level.

    Unknown level names fall back to INFO.
    """
    level = _LEVELS.get(log_level.strip().lower(), logging.INFO)
    logger = logging.getLogger(PACKAGE_LOGGER)

    for handler in [h for h in logger.handlers if isinstance(h, _StderrHandler)]:
        logger.removeHandler(handler)

    handler = _StderrHandler()
    handler.setFormatter(_Formatter(logger_name))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger