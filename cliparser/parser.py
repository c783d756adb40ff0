"""Turning a list of command-line words into parsed arguments."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from .command import Command
from .errors import (
    FlagValueMissing,
    NotEnoughArguments,
    ParseError,
    RequiredFlagNotProvided,
    TooManyArguments,
    UnknownFlag,
)
from .flag import FlagType, FlagValue

_HELP_ARGS = ("--help", "-h")


@dataclass
class ParsedArgs:
    """The outcome of parsing a command line."""

    command: str
    subcommand: str | None = None
    flags: dict[str, FlagValue] = field(default_factory=dict)
    positional_args: list[str] = field(default_factory=list)
    help_requested: bool = False

    def get_flag(self, name: str) -> FlagValue | None:
        return self.flags.get(name)

    def has_flag(self, name: str) -> bool:
        return name in self.flags

    def get_arg(self, index: int) -> str | None:
        """Return the positional argument at ``index``, or None if absent."""
        if 0 <= index < len(self.positional_args):
            return self.positional_args[index]
        return None


def parse(command: Command, args: Iterable[str]) -> ParsedArgs:
    """Parse ``args`` against ``command``, raising a CliError on failure."""
    args = list(args)
    parsed = ParsedArgs(command.name)

    if not args and command.show_help_on_empty:
        parsed.help_requested = True
        return parsed

    i = 0
    while i < len(args):
        arg = args[i]

        if arg in _HELP_ARGS:
            parsed.help_requested = True
            return parsed

        if arg.startswith("--"):
            i += _parse_flag(command, args, i, arg[2:], parsed)
        elif arg.startswith("-") and len(arg) == 2:
            short = arg[1]
            flag = next((f for f in command.flags.values() if f.short == short), None)
            if flag is None:
                raise UnknownFlag(short)
            i += _parse_flag(command, args, i, flag.name, parsed)
        elif (subcommand := command.get_subcommand(arg)) is not None:
            parsed.subcommand = arg
            sub_parsed = parse(subcommand, args[i + 1 :])
            parsed.flags.update(sub_parsed.flags)
            parsed.positional_args.extend(sub_parsed.positional_args)
            parsed.help_requested = sub_parsed.help_requested
            break
        else:
            parsed.positional_args.append(arg)
            i += 1

    _validate_positional_args(command, parsed)
    _apply_defaults(command, parsed)
    return parsed


def _parse_flag(
    command: Command, args: list[str], index: int, flag_name: str, parsed: ParsedArgs
) -> int:
    """Record one flag starting at ``index``; return how many words it used."""
    flag = command.get_flag(flag_name)
    if flag is None:
        raise UnknownFlag(flag_name)

    if flag.flag_type is FlagType.BOOL:
        parsed.flags[flag_name] = FlagValue(FlagType.BOOL, True)
        return 1

    if index + 1 >= len(args):
        raise FlagValueMissing(flag_name)

    value = flag.parse_value(args[index + 1])
    existing = parsed.flags.get(flag.name)
    if flag.flag_type.is_list and existing is not None:
        value = _combine_lists(existing, value)
    parsed.flags[flag.name] = value
    return 2


def _combine_lists(existing: FlagValue, new: FlagValue) -> FlagValue:
    if existing.kind is not new.kind or not existing.kind.is_list:
        raise ParseError("Erro interno: tentativa de combinar valores incompativeis")
    return FlagValue(existing.kind, [*existing.value, *new.value])


def _validate_positional_args(command: Command, parsed: ParsedArgs) -> None:
    required = command.required_positional_count()
    provided = len(parsed.positional_args)
    if provided < required:
        raise NotEnoughArguments(required, provided)
    if provided > len(command.positional_args):
        raise TooManyArguments()


def _apply_defaults(command: Command, parsed: ParsedArgs) -> None:
    for flag in command.flags.values():
        if flag.name in parsed.flags:
            continue
        if flag.default_value is not None:
            parsed.flags[flag.name] = flag.default_value
        elif flag.required:
            raise RequiredFlagNotProvided(flag.name)