"""A small demonstration application built with the library."""

from __future__ import annotations

import math
import sys
from typing import Sequence

from . import ui
from .cli import CLIApp
from .command import Command
from .errors import CliError
from .flag import Flag, FlagType, FlagValue
from .parser import ParsedArgs


def build_app() -> CLIApp:
    """Create the demonstration application with its hello and calc commands."""
    hello = (
        Command("hello", description="Saúda o usuário")
        .add_flag(
            Flag(
                "name",
                FlagType.STRING,
                short="n",
                description="Nome da pessoa para saudar",
                required=True,
            )
        )
        .add_flag(
            Flag(
                "times",
                FlagType.INTEGER,
                short="t",
                description="Quantas vezes repetir a saudação",
                default_value=FlagValue(FlagType.INTEGER, 1),
            )
        )
        .add_flag(
            Flag(
                "greeting",
                FlagType.STRING,
                short="g",
                description="Tipo de saudação",
                possible_values=["oi", "olá", "hello", "hola"],
                default_value=FlagValue(FlagType.STRING, "olá"),
            )
        )
    )
    calc = (
        Command("calc", description="Calculadora simples")
        .add_subcommand(
            Command("add", description="Soma números").add_flag(
                Flag(
                    "numbers",
                    FlagType.INTEGER_LIST,
                    description="Números a serem somados",
                    required=True,
                )
            )
        )
        .add_subcommand(
            Command("multiply", description="Multiplica números").add_flag(
                Flag(
                    "numbers",
                    FlagType.INTEGER_LIST,
                    description="Números a serem multiplicados",
                    required=True,
                )
            )
        )
    )
    return (
        CLIApp("exemplo-basico", "1.0.0", "Exemplo básico de uso da biblioteca cliparser")
        .add_command(hello)
        .add_command(calc)
    )


def _flag_or(parsed: ParsedArgs, name: str, extract, fallback):
    value = parsed.get_flag(name)
    result = extract(value) if value is not None else None
    return fallback if result is None else result


def handle_hello(parsed: ParsedArgs) -> None:
    """Print the greeting as many times as requested."""
    name = _flag_or(parsed, "name", FlagValue.as_string, "Mundo")
    times = _flag_or(parsed, "times", FlagValue.as_integer, 1)
    greeting = _flag_or(parsed, "greeting", FlagValue.as_string, "olá")

    message = f"{greeting}, {name}!"
    for i in range(1, times + 1):
        if times > 1:
            ui.show_success(f"({i}/{times}) {message}")
        else:
            ui.show_success(message)


def handle_calc(parsed: ParsedArgs) -> None:
    """Sum or multiply the given numbers, depending on the parsed command."""
    value = parsed.get_flag("numbers")
    numbers = value.as_integer_list() if value is not None else None
    if numbers is None:
        return
    if parsed.command == "add":
        ui.show_success(f"Soma: {sum(numbers)}")
    elif parsed.command == "multiply":
        ui.show_success(f"Produto: {math.prod(numbers)}")


def main(argv: Sequence[str] | None = None) -> int:
    app = build_app()
    try:
        parsed = app.run_from_env() if argv is None else app.run(argv)
    except CliError:
        return 1

    if parsed.help_requested:
        return 0

    if parsed.subcommand == "hello":
        handle_hello(parsed)
    elif parsed.subcommand == "calc":
        handle_calc(parsed)
    else:
        ui.show_warning("Nenhum comando especificado")
        ui.show_info("Use --help para ver os comandos disponíveis")
    return 0


if __name__ == "__main__":
    sys.exit(main())