"""The application object that ties commands, parsing and output together."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Iterable

from . import ui
from .command import Command
from .errors import (
    CliError,
    CommandNotFound,
    ConfigurationError,
    SubcommandNotFound,
    UnknownFlag,
)
from .flag import Flag
from .parser import ParsedArgs
from .parser import parse as _parse_args

_HINTED_ERRORS = (CommandNotFound, SubcommandNotFound, UnknownFlag)


@dataclass
class CLIApp:
    """A command-line application with a root command named after the app.

    ``add_command`` and ``add_global_flag`` return the app so calls can be chained.
    """

    name: str = "app"
    version: str = "0.0.0"
    description: str = ""
    root_command: Command = field(init=False)

    def __post_init__(self) -> None:
        self.root_command = Command(self.name)

    def add_command(self, command: Command) -> CLIApp:
        self.root_command.add_subcommand(command)
        return self

    def add_global_flag(self, flag: Flag) -> CLIApp:
        self.root_command.add_flag(flag)
        return self

    def parse(self, args: Iterable[str]) -> ParsedArgs:
        """Parse ``args`` without printing anything."""
        return _parse_args(self.root_command, [str(arg) for arg in args])

    def validate(self) -> None:
        """Check the definition; raise ConfigurationError if it is inconsistent."""
        self._validate_command(self.root_command)

    def _validate_command(self, command: Command) -> None:
        flag_names: set[str] = set()
        short_names: set[str] = set()

        for flag in command.flags.values():
            if flag.name in flag_names:
                raise ConfigurationError(f"Flag duplicada encontrada: {flag.name}")
            flag_names.add(flag.name)

            if flag.short is not None:
                if flag.short in short_names:
                    raise ConfigurationError(
                        f"Flag curta duplicada encontrada: {flag.short}"
                    )
                short_names.add(flag.short)

            if flag.required and flag.default_value is not None:
                raise ConfigurationError(
                    f"Flag '{flag.name}' não pode ser obrigatória e ter valor padrão"
                )

        subcommand_names: set[str] = set()
        for subcommand in command.subcommands.values():
            if subcommand.name in subcommand_names:
                raise ConfigurationError(
                    f"Subcomando duplicado encontrado: {subcommand.name}"
                )
            subcommand_names.add(subcommand.name)
            self._validate_command(subcommand)

    def run(self, args: Iterable[str]) -> ParsedArgs:
        """Parse ``args``, showing help or the error on the terminal.

        Errors are reported and then raised again.
        """
        try:
            parsed = self.parse(args)
        except CliError as error:
            ui.show_error(error)
            if isinstance(error, _HINTED_ERRORS):
                print()
                ui.show_info("Use --help para obter ajuda")
            raise

        if parsed.help_requested:
            self._show_help(parsed)
        return parsed

    def run_from_env(self) -> ParsedArgs:
        """Run with the arguments of the current process."""
        return self.run(sys.argv[1:])

    def _show_help(self, parsed: ParsedArgs) -> None:
        command = self.root_command
        if parsed.subcommand is not None:
            command = self.root_command.subcommands.get(parsed.subcommand, command)
        ui.show_help(self.name, self.version, self.description, command)

    def get_info(self) -> list[str]:
        """Full names of every command below the root, parents before children."""
        return list(self._collect_commands(self.root_command, ""))

    def _collect_commands(self, command: Command, prefix: str) -> Iterable[str]:
        for subcommand in command.subcommands.values():
            full_name = f"{prefix} {subcommand.name}" if prefix else subcommand.name
            yield full_name
            yield from self._collect_commands(subcommand, full_name)


@dataclass
class AppInfo:
    """A summary of an application's commands and global flags."""

    name: str
    version: str
    description: str = ""
    commands: list[str] = field(default_factory=list)
    global_flags: int = 0

    def display(self) -> None:
        ui.show_info(f"{self.name} v{self.version}")
        if self.description:
            print(self.description)
        print(f"Comandos disponíveis: {len(self.commands)}")
        for command in self.commands:
            print(f"  - {command}")
        print(f"Flags globais: {self.global_flags}")