"""Command-line parsing with commands, subcommands, typed flags and coloured help."""

__version__ = "0.1.0"

__all__ = ["argument", "cli", "command", "errors", "example", "flag", "parser", "ui"]