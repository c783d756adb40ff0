"""Flag definitions and the conversion of their textual values."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Sequence

from .errors import FlagValueMissing, InvalidFlagValue

_INT_RE = re.compile(r"[+-]?[0-9]+\Z")
_FLOAT_RE = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)\Z",
    re.IGNORECASE,
)
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


class FlagType(Enum):
    """Kinds of value a flag accepts."""

    BOOL = "boolean"
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    STRING_LIST = "string list"
    INTEGER_LIST = "integer list"

    def description(self) -> str:
        """Human-readable name of the type."""
        return self.value

    @property
    def is_list(self) -> bool:
        return self in (FlagType.STRING_LIST, FlagType.INTEGER_LIST)


@dataclass
class FlagValue:
    """A parsed flag value tagged with its type."""

    kind: FlagType
    value: Any

    def _if(self, kind: FlagType) -> Any:
        return self.value if self.kind is kind else None

    def as_string(self) -> str | None:
        return self._if(FlagType.STRING)

    def as_bool(self) -> bool | None:
        return self._if(FlagType.BOOL)

    def as_integer(self) -> int | None:
        return self._if(FlagType.INTEGER)

    def as_float(self) -> float | None:
        return self._if(FlagType.FLOAT)

    def as_string_list(self) -> list[str] | None:
        return self._if(FlagType.STRING_LIST)

    def as_integer_list(self) -> list[int] | None:
        return self._if(FlagType.INTEGER_LIST)


@dataclass
class Flag:
    """A named option of a command."""

    name: str
    flag_type: FlagType
    short: str | None = None
    description: str = ""
    required: bool = False
    default_value: FlagValue | None = None
    possible_values: list[str] | None = None

    def __post_init__(self) -> None:
        if self.short is not None and len(self.short) != 1:
            raise ValueError(f"short flag must be a single character: {self.short!r}")
        if self.possible_values is not None:
            self.possible_values = list(self.possible_values)

    def parse_value(self, value: str) -> FlagValue:
        """Convert one textual value according to the flag's type."""
        kind = self.flag_type
        if kind is FlagType.BOOL:
            if value in ("true", "false"):
                return FlagValue(kind, value == "true")
            return FlagValue(kind, value != "")
        if kind is FlagType.STRING:
            self._check_possible(value)
            return FlagValue(kind, value)
        if kind is FlagType.INTEGER:
            return FlagValue(kind, self._parse_int(value))
        if kind is FlagType.FLOAT:
            return FlagValue(kind, self._parse_float(value))
        if kind is FlagType.STRING_LIST:
            return FlagValue(kind, [value])
        return FlagValue(kind, [self._parse_int(value)])

    def parse_values(self, values: Sequence[str]) -> FlagValue:
        """Convert several textual values; only list types accept more than one."""
        kind = self.flag_type
        if kind is FlagType.STRING_LIST:
            for value in values:
                self._check_possible(value)
            return FlagValue(kind, list(values))
        if kind is FlagType.INTEGER_LIST:
            return FlagValue(kind, [self._parse_int(value) for value in values])
        if len(values) > 1:
            raise InvalidFlagValue(
                self.name, ", ".join(values), f"single {kind.description()}"
            )
        if not values:
            raise FlagValueMissing(self.name)
        return self.parse_value(values[0])

    def _parse_int(self, value: str) -> int:
        if _INT_RE.match(value):
            number = int(value)
            if _I64_MIN <= number <= _I64_MAX:
                return number
        raise InvalidFlagValue(self.name, value, "integer")

    def _parse_float(self, value: str) -> float:
        if not _FLOAT_RE.match(value):
            raise InvalidFlagValue(self.name, value, "float")
        return float(value)

    def _check_possible(self, value: str) -> None:
        if self.possible_values is not None and value not in self.possible_values:
            joined = ", ".join(self.possible_values)
            raise InvalidFlagValue(self.name, value, f'one of "{joined}"')