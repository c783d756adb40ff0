"""Exceptions raised while configuring or parsing a command line."""

from __future__ import annotations


class CliError(Exception):
    """Base class for every error reported by the parser."""

    def _fields(self) -> tuple:
        return (str(self),)

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._fields() == other._fields()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._fields()))

    def __repr__(self) -> str:
        args = ", ".join(repr(field) for field in self._fields())
        return f"{type(self).__name__}({args})"


class CommandNotFound(CliError):
    """A command name did not match any known command."""

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f"Comando não encontrado: {command}")

    def _fields(self) -> tuple:
        return (self.command,)


class SubcommandNotFound(CliError):
    """A subcommand name did not match any known subcommand."""

    def __init__(self, subcommand: str) -> None:
        self.subcommand = subcommand
        super().__init__(f"Subcomando não encontrado: {subcommand}")

    def _fields(self) -> tuple:
        return (self.subcommand,)


class RequiredFlagNotProvided(CliError):
    """A flag marked as required was absent and has no default."""

    def __init__(self, flag: str) -> None:
        self.flag = flag
        super().__init__(f"Flag obrigatória não fornecida: --{flag}")

    def _fields(self) -> tuple:
        return (self.flag,)


class UnknownFlag(CliError):
    """A flag was given that the command does not define."""

    def __init__(self, flag: str) -> None:
        self.flag = flag
        super().__init__(f"Flag desconhecida: --{flag}")

    def _fields(self) -> tuple:
        return (self.flag,)


class InvalidFlagValue(CliError):
    """A flag's value could not be converted or is not allowed."""

    def __init__(self, flag: str, value: str, expected: str) -> None:
        self.flag = flag
        self.value = value
        self.expected = expected
        super().__init__(
            f"Valor inválido para flag: --{flag}: {value}. Esperado: {expected}"
        )

    def _fields(self) -> tuple:
        return (self.flag, self.value, self.expected)


class FlagValueMissing(CliError):
    """A flag that takes a value was the last argument."""

    def __init__(self, flag: str) -> None:
        self.flag = flag
        super().__init__(f"Flag --{flag} requer um valor")

    def _fields(self) -> tuple:
        return (self.flag,)


class TooManyArguments(CliError):
    """More positional arguments were given than the command accepts."""

    def __init__(self) -> None:
        super().__init__("Muitos argumentos posicionais fornecidos")

    def _fields(self) -> tuple:
        return ()


class NotEnoughArguments(CliError):
    """Fewer positional arguments were given than the command requires."""

    def __init__(self, expected: int, received: int) -> None:
        self.expected = expected
        self.received = received
        super().__init__(
            "Argumentos posicionais insuficientes. "
            f"Esperado: {expected}, recebido: {received}"
        )

    def _fields(self) -> tuple:
        return (self.expected, self.received)


class CliIOError(CliError):
    """An input/output operation failed."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Erro de I/O: {message}")

    def _fields(self) -> tuple:
        return (self.message,)


class ParseError(CliError):
    """A generic parsing failure."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Erro de parsing: {message}")

    def _fields(self) -> tuple:
        return (self.message,)


class ConfigurationError(CliError):
    """The application definition itself is inconsistent."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Aplicação nâo configurada corretamente: {message}")

    def _fields(self) -> tuple:
        return (self.message,)