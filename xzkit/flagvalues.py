"""Flag values and usage lines for GNU-style command line flags."""

from __future__ import annotations

import enum
import re
from abc import ABC, abstractmethod
from typing import Any, Iterable

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1

_TRUE_STRINGS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_STRINGS = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_INT_PATTERN = re.compile(
    r"(?P<sign>[+-]?)"
    r"(?:(?P<hex>0[xX][0-9a-fA-F_]+)"
    r"|(?P<bin>0[bB][01_]+)"
    r"|(?P<oct>0[oO][0-7_]+)"
    r"|(?P<legacy>0[0-7_]*)"
    r"|(?P<dec>[1-9][0-9_]*))"
)


class HasArg(enum.IntEnum):
    """Whether a flag requires, forbids or optionally takes an argument."""

    REQUIRED = 0
    NO = 1
    OPTIONAL = 2


class Value(ABC):
    """The value behind a flag."""

    @abstractmethod
    def set(self, text: str) -> None:
        """Set the value from an argument string."""

    @abstractmethod
    def update(self) -> None:
        """Change the value for a flag given without an argument."""

    @abstractmethod
    def get(self) -> Any:
        """Return the current value."""

    @abstractmethod
    def __str__(self) -> str: ...


def _parse_bool(text: str) -> bool:
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    raise ValueError(f"invalid boolean value {text!r}")


def _parse_int(text: str) -> int:
    """Parse an integer with an optional base prefix; a leading 0 means octal."""
    m = _INT_PATTERN.fullmatch(text)
    if m is None:
        raise ValueError(f"invalid integer value {text!r}")
    try:
        if m["hex"]:
            value = int(m["hex"][2:], 16)
        elif m["bin"]:
            value = int(m["bin"][2:], 2)
        elif m["oct"]:
            value = int(m["oct"][2:], 8)
        elif m["legacy"]:
            digits = m["legacy"][1:]
            value = int(digits, 8) if digits else 0
        else:
            value = int(m["dec"], 10)
    except ValueError:
        raise ValueError(f"invalid integer value {text!r}") from None
    if m["sign"] == "-":
        value = -value
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"integer value {text!r} out of range")
    return value


class BoolValue(Value):
    """A boolean flag value; a flag without argument sets it to true."""

    def __init__(self, value: bool = False) -> None:
        self.value = bool(value)

    def set(self, text: str) -> None:
        try:
            self.value = _parse_bool(text)
        except ValueError:
            self.value = False
            raise

    def update(self) -> None:
        self.value = True

    def get(self) -> bool:
        return self.value

    def __str__(self) -> str:
        return "true" if self.value else "false"


class IntValue(Value):
    """An integer flag value; a flag without argument increments it."""

    def __init__(self, value: int = 0) -> None:
        self.value = int(value)

    def set(self, text: str) -> None:
        self.value = _parse_int(text)

    def update(self) -> None:
        self.value += 1

    def get(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


class StringValue(Value):
    """A string flag value; a flag without argument restores the default."""

    def __init__(self, default: str = "") -> None:
        self.default = default
        self.value = default

    def set(self, text: str) -> None:
        self.value = text

    def update(self) -> None:
        self.value = self.default

    def get(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class PresetValue(Value):
    """One of a range of flags such as -0 ... -9 sharing a target integer."""

    def __init__(self, target: IntValue, preset: int) -> None:
        self.target = target
        self.preset = preset

    def set(self, text: str) -> None:
        try:
            self.target.value = _parse_int(text)
        except ValueError:
            self.target.value = 0
            raise

    def update(self) -> None:
        self.target.value = self.preset

    def get(self) -> int:
        return self.target.value

    def __str__(self) -> str:
        return str(self.target.value)


def line_flags(name: str, shorthands: str, default_value: str) -> str:
    """Return the flags column of a usage line."""
    parts = [f"-{c}" for c in shorthands]
    if name:
        long_form = f"--{name}"
        if default_value:
            long_form += f"={default_value}"
        parts.append(long_form)
    return ", ".join(parts)


def format_usage(lines: Iterable[tuple[str, str]]) -> str:
    """Format (flags, usage) pairs as aligned usage text sorted by flags."""
    ordered = sorted(lines, key=lambda line: line[0])
    width = max((len(flags) for flags, _ in ordered), default=0)
    return "".join(f"  {flags:<{width}}  {usage}\n" for flags, usage in ordered)