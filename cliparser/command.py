"""Commands, their flags, subcommands and positional arguments."""

from __future__ import annotations

from dataclasses import dataclass, field

from .flag import Flag


@dataclass
class PositionalArg:
    """A positional argument of a command."""

    name: str
    description: str = ""
    required: bool = True


@dataclass
class Command:
    """A command with flags, subcommands and positional arguments.

    The ``add_*`` methods return the command itself so calls can be chained.
    """

    name: str
    description: str = ""
    flags: dict[str, Flag] = field(default_factory=dict)
    subcommands: dict[str, Command] = field(default_factory=dict)
    positional_args: list[PositionalArg] = field(default_factory=list)
    show_help_on_empty: bool = False

    def add_flag(self, flag: Flag) -> Command:
        """Add a flag, replacing any existing flag of the same name."""
        self.flags[flag.name] = flag
        return self

    def add_subcommand(self, subcommand: Command) -> Command:
        """Add a subcommand, replacing any existing one of the same name."""
        self.subcommands[subcommand.name] = subcommand
        return self

    def add_positional_arg(self, positional_arg: PositionalArg) -> Command:
        self.positional_args.append(positional_arg)
        return self

    def get_flag(self, name: str) -> Flag | None:
        """Find a flag by its name, or by its short form for one-character names."""
        found = self.flags.get(name)
        if found is not None:
            return found
        if len(name) == 1:
            return next((f for f in self.flags.values() if f.short == name), None)
        return None

    def get_subcommand(self, name: str) -> Command | None:
        return self.subcommands.get(name)

    def sorted_flags(self) -> list[Flag]:
        return sorted(self.flags.values(), key=lambda f: f.name)

    def sorted_subcommands(self) -> list[Command]:
        return sorted(self.subcommands.values(), key=lambda c: c.name)

    def has_subcommands(self) -> bool:
        return bool(self.subcommands)

    def has_flags(self) -> bool:
        return bool(self.flags)

    def has_positional_args(self) -> bool:
        return bool(self.positional_args)

    def required_positional_count(self) -> int:
        return sum(1 for arg in self.positional_args if arg.required)