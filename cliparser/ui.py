"""Coloured terminal output: messages and help screens."""

from __future__ import annotations

import math
import sys

from .command import Command
from .errors import CliError
from .flag import FlagType, FlagValue

_BOLD = ("\x1b[1m", "\x1b[0m")
_RED = ("\x1b[31m", "\x1b[39m")
_GREEN = ("\x1b[32m", "\x1b[39m")
_YELLOW = ("\x1b[33m", "\x1b[39m")
_BLUE = ("\x1b[34m", "\x1b[39m")
_CYAN = ("\x1b[36m", "\x1b[39m")
_ON_BLACK = ("\x1b[40m", "\x1b[49m")

_VARIANT_NAMES = {
    FlagType.BOOL: "Bool",
    FlagType.STRING: "String",
    FlagType.INTEGER: "Integer",
    FlagType.FLOAT: "Float",
    FlagType.STRING_LIST: "StringList",
    FlagType.INTEGER_LIST: "IntegerList",
}


def _style(text: str, *styles: tuple[str, str]) -> str:
    """Wrap ``text`` in each style in turn, innermost first."""
    for start, end in styles:
        text = f"{start}{text}{end}"
    return text


def _label(text: str, colour: tuple[str, str]) -> str:
    return _style(text, _BOLD, colour, _ON_BLACK)


def _debug_scalar(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        escaped = (
            value.replace("\\", "\\\\")
            .replace('"', '\\"')
            .replace("\n", "\\n")
            .replace("\r", "\\r")
            .replace("\t", "\\t")
        )
        return f'"{escaped}"'
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "inf" if value > 0 else "-inf"
        return repr(value)
    return str(value)


def _debug_value(value: FlagValue) -> str:
    """Render a flag value as ``Variant(payload)``."""
    if value.kind.is_list:
        payload = "[" + ", ".join(_debug_scalar(item) for item in value.value) + "]"
    else:
        payload = _debug_scalar(value.value)
    return f"{_VARIANT_NAMES[value.kind]}({payload})"


def show_help(app_name: str, version: str, description: str, command: Command) -> None:
    print(format_help(app_name, version, description, command))


def show_error(error: CliError) -> None:
    print(f"{_label('[ERROR]', _RED)} {error}", file=sys.stderr)


def show_success(message: str) -> None:
    print(f"{_label('[SUCCESS]', _GREEN)}, {message}")


def show_warning(message: str) -> None:
    print(f"{_label('[WARNING]', _YELLOW)}, {message}")


def show_info(message: str) -> None:
    print(f"{_label('[INFO]', _BLUE)}, {message}")


def format_help(app_name: str, version: str, description: str, command: Command) -> str:
    """Build the help screen for ``command``."""
    parts = [_style(f"{app_name} v{version}", _CYAN)]

    if description:
        parts.append(f"\n\n{description}")

    parts.append("\n\n")
    parts.append(_style("USO", _BOLD, _YELLOW))
    parts.append(f"\n    {format_usage(app_name, command)}\n\n")

    if command.has_positional_args():
        parts.append(_style("ARGUMENTOS", _YELLOW))
        parts.append("\n")
        for arg in command.positional_args:
            marker = "" if arg.required else " (opcional)"
            parts.append(f"    {_style(arg.name, _GREEN)}{marker}\n{arg.description}")
        parts.append("\n")

    if command.has_flags():
        parts.append(_style("OPÇÕES:", _YELLOW, _BOLD) + "\n")
        for flag in command.sorted_flags():
            short_part = f"-{flag.short} " if flag.short is not None else "    "
            type_hint = (
                "" if flag.flag_type is FlagType.BOOL
                else f"<{flag.flag_type.description()}>"
            )
            marker = "" if flag.required else " (opcional)"
            parts.append(
                f"    {short_part} --{flag.name}{type_hint}\n"
                f"        {flag.description}{marker}"
            )
            if flag.possible_values is not None:
                parts.append(
                    f"        Valores possíveis: {', '.join(flag.possible_values)}\n"
                )
            if flag.default_value is not None:
                parts.append(f"        Padrão: {_debug_value(flag.default_value)}\n")
        parts.append("\n")

    return "".join(parts)


def format_usage(app_name: str, command: Command) -> str:
    """Build the one-line usage summary for ``command``."""
    usage = [app_name]
    if command.name != app_name:
        usage.append(command.name)
    if command.has_subcommands():
        usage.append("<SUBCOMANDO>")
    if command.has_flags():
        usage.append("[OPÇÕES]")
    for arg in command.positional_args:
        usage.append(f"<{arg.name}>" if arg.required else f"[{arg.name}]")
    return " ".join(usage)