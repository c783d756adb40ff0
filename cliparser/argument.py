"""A simple standalone argument description."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ArgType(Enum):
    """Kinds of value an argument may carry."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    FLAG = "flag"


@dataclass
class Argument:
    """A named argument with a long form and an optional short form."""

    name: str
    long: str
    short: str | None = None
    description: str = ""
    arg_type: ArgType = ArgType.STRING
    required: bool = False
    default: str | None = None

    def __post_init__(self) -> None:
        if self.short is not None and len(self.short) != 1:
            raise ValueError(f"short form must be a single character: {self.short!r}")