"""The command line entry point and its commands."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, Protocol, Sequence

from tfproviderdocs.command.check_command import CheckCommand
from tfproviderdocs.command.output import Ui
from tfproviderdocs.version import VersionInfo, get_version

NAME = "tfproviderdocs"

_HELP_FLAGS = ("-h", "-help", "--help")
_VERSION_FLAGS = ("-v", "-version", "--version")
_EXIT_UNKNOWN_COMMAND = 127


class _Command(Protocol):
    def help(self) -> str: ...

    def name(self) -> str: ...

    def run(self, args: Sequence[str]) -> int: ...

    def synopsis(self) -> str: ...


@dataclass
class VersionCommand:
    """Prints the version."""

    version: VersionInfo
    ui: Ui

    def help(self) -> str:
        return ""

    def name(self) -> str:
        return "version"

    def run(self, args: Sequence[str]) -> int:
        self.ui.output(self.version.full_version_number(True))
        return 0

    def synopsis(self) -> str:
        return "Prints the version"


def commands(ui: Ui) -> dict[str, Callable[[], _Command]]:
    """Return the factories of the available commands, by name."""
    return {
        "check": lambda: CheckCommand(ui),
        "version": lambda: VersionCommand(get_version(), ui),
    }


def _general_help(factories: dict[str, Callable[[], _Command]]) -> str:
    width = max(len(name) for name in factories)
    lines = [
        f"Usage: {NAME} [--version] [--help] <command> [<args>]",
        "",
        "Available commands are:",
    ]
    lines.extend(
        f"    {name.ljust(width)}    {factories[name]().synopsis()}" for name in sorted(factories)
    )
    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line, returning the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    ui = Ui()
    factories = commands(ui)

    is_help = False
    is_version = False
    subcommand = ""
    subcommand_args: list[str] = []

    for index, arg in enumerate(args):
        if arg == "--":
            break
        if arg in _HELP_FLAGS:
            is_help = True
            continue
        if subcommand:
            continue
        if arg in _VERSION_FLAGS:
            is_version = True
            continue
        if arg and not arg.startswith("-"):
            subcommand = arg
            subcommand_args = args[index + 1 :]

    if is_version:
        sys.stderr.write(get_version().full_version_number(True) + "\n")
        return 0

    if is_help and not subcommand:
        sys.stderr.write(_general_help(factories) + "\n")
        return 0

    factory = factories.get(subcommand)
    if factory is None:
        sys.stderr.write(_general_help(factories) + "\n")
        return _EXIT_UNKNOWN_COMMAND

    command = factory()
    if is_help:
        sys.stderr.write(command.help() + "\n")
        return 0

    return command.run(subcommand_args)