"""GNU-style command line flag parsing."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass
from typing import Callable, Iterable, TextIO

from .flagvalues import (
    BoolValue,
    HasArg,
    IntValue,
    PresetValue,
    StringValue,
    Value,
    format_usage,
    line_flags,
)


class ErrorHandling(enum.IntEnum):
    """How :meth:`FlagSet.parse` reacts to a parsing error."""

    CONTINUE_ON_ERROR = 0
    EXIT_ON_ERROR = 1
    PANIC_ON_ERROR = 2


class FlagError(ValueError):
    """Raised for errors in the command line arguments."""


@dataclass
class Flag:
    """A single flag with its long name, shorthands and value."""

    name: str
    shorthands: str
    has_arg: HasArg
    value: Value


class FlagSet:
    """A set of flags parsed from a list of arguments.

    Flags given as ``--name``, ``--name=arg``, ``-x`` or combined short
    options such as ``-vvv``. An argument ``--`` ends flag parsing; all
    arguments after it are kept. Non-flag arguments are kept in order.
    """

    def __init__(
        self,
        name: str = "",
        error_handling: ErrorHandling = ErrorHandling.CONTINUE_ON_ERROR,
        usage_func: Callable[[], None] | None = None,
    ) -> None:
        self.name = name
        self.error_handling = error_handling
        self.usage_func = usage_func
        self.parsed = False
        self._formal: dict[str, Flag] = {}
        self._lines: list[tuple[str, str]] = []
        self._args: list[str] = []
        self._output: TextIO | None = None
        self._has_preset = False

    # --- arguments -----------------------------------------------------

    @property
    def args(self) -> list[str]:
        """The arguments left after parsing."""
        return list(self._args)

    def arg(self, i: int) -> str:
        """Return argument ``i`` after parsing, or "" if there is none."""
        if 0 <= i < len(self._args):
            return self._args[i]
        return ""

    def narg(self) -> int:
        """Return the number of arguments left after parsing."""
        return len(self._args)

    # --- output --------------------------------------------------------

    def _out(self) -> TextIO:
        return self._output if self._output is not None else sys.stderr

    def set_output(self, out: TextIO) -> None:
        """Set the stream for usage and error messages."""
        self._output = out

    def _panic(self, message: str) -> None:
        if self.name:
            message = f"{self.name} {message}"
        print(message, file=self._out())
        raise ValueError(message)

    def print_defaults(self) -> None:
        """Write the usage lines of all flags."""
        self._out().write(format_usage(self._lines))

    def usage(self) -> None:
        """Write the usage message, using the custom function if set."""
        if self.usage_func is not None:
            self.usage_func()
            return
        out = self._out()
        if self.name:
            out.write(f"Usage of {self.name}:\n")
        else:
            out.write("Usage:\n")
        self.print_defaults()

    # --- parsing -------------------------------------------------------

    def parse(self, arguments: Iterable[str]) -> None:
        """Parse ``arguments``; on error print it and the usage message."""
        self.parsed = True
        self._args = list(arguments)
        i = 0
        while i < len(self._args):
            try:
                i = self._parse_arg(i)
            except FlagError as err:
                print(f"{self.name}: {err}", file=self._out())
                self.usage()
                if self.error_handling == ErrorHandling.EXIT_ON_ERROR:
                    raise SystemExit(2) from err
                if self.error_handling == ErrorHandling.PANIC_ON_ERROR:
                    raise RuntimeError(str(err)) from err
                raise

    def _lookup_long(self, name: str) -> Flag:
        if len(name) < 2:
            self._panic(f"{name} is not a long option")
        flag = self._formal.get(name)
        if flag is None:
            raise FlagError(f"long option {name} is unsupported")
        return flag

    def _lookup_short(self, c: str) -> Flag:
        flag = self._formal.get(c)
        if flag is None:
            raise FlagError(f"short option {c} is unsupported")
        return flag

    def _set_value(self, flag: Flag, text: str) -> None:
        try:
            flag.value.set(text)
        except ValueError as err:
            raise FlagError(str(err)) from err

    def _process_extra_arg(self, flag: Flag, i: int) -> None:
        if flag.has_arg == HasArg.NO:
            flag.value.update()
            return
        if i < len(self._args):
            text = self._args[i]
            if not text.startswith("-"):
                if flag.has_arg == HasArg.REQUIRED:
                    del self._args[i]
                    self._set_value(flag, text)
                    return
                try:
                    flag.value.set(text)
                except ValueError:
                    flag.value.update()
                    return
                del self._args[i]
                return
        if flag.has_arg == HasArg.REQUIRED:
            raise FlagError("no argument present")
        flag.value.update()

    def _parse_arg(self, i: int) -> int:
        text = self._args[i]
        if len(text) < 2 or text[0] != "-":
            return i + 1
        del self._args[i]
        if text[1] == "-":
            if len(text) == 2:
                return len(self._args)
            body = text[2:]
            name, sep, value = body.partition("=")
            flag = self._lookup_long(name)
            if not sep:
                self._process_extra_arg(flag, i)
                return i
            if flag.has_arg == HasArg.NO:
                raise FlagError(f"option {body} doesn't support argument")
            self._set_value(flag, value)
            return i
        for c in text[1:]:
            flag = self._lookup_short(c)
            self._process_extra_arg(flag, i)
        return i

    # --- definition ----------------------------------------------------

    def _set_formal(self, name: str, flag: Flag) -> None:
        if not name:
            self._panic("no support for empty name strings")
        if name in self._formal:
            self._panic(f"flag redefined: {flag.name}")
        self._formal[name] = flag

    def var_p(
        self, value: Value, name: str, shorthands: str, has_arg: HasArg
    ) -> None:
        """Define a flag with a long name and shorthand characters."""
        flag = Flag(name, shorthands, HasArg(has_arg), value)
        if not name and not shorthands:
            self._panic("flag with no name or shorthands")
        if len(name) == 1:
            self._panic(
                f"flag has single character name {name!r}; use shorthands"
            )
        if name:
            self._set_formal(name, flag)
        for c in shorthands:
            self._set_formal(c, flag)

    def var(self, value: Value, name: str, has_arg: HasArg) -> None:
        """Define a flag; a single-character name becomes a shorthand."""
        if len(name) == 1:
            self.var_p(value, "", name, has_arg)
        else:
            self.var_p(value, name, "", has_arg)

    def _add_line(self, flags: str, usage: str) -> None:
        if not flags:
            self._panic(f"no flags for {usage!r}")
        self._lines.append((flags, usage))

    def bool_p(
        self, name: str, shorthands: str, value: bool, usage: str
    ) -> BoolValue:
        """Define a bool flag with shorthands; return its value holder."""
        self._add_line(line_flags(name, shorthands, "true" if value else ""), usage)
        holder = BoolValue(value)
        self.var_p(holder, name, shorthands, HasArg.OPTIONAL)
        return holder

    def bool(self, name: str, value: bool, usage: str) -> BoolValue:
        """Define a bool flag; return its value holder."""
        self._add_line(line_flags(name, "", "true" if value else ""), usage)
        holder = BoolValue(value)
        self.var(holder, name, HasArg.OPTIONAL)
        return holder

    def counter_p(
        self, name: str, shorthands: str, value: int, usage: str
    ) -> IntValue:
        """Define a counter flag with shorthands; return its value holder."""
        self._add_line(line_flags(name, shorthands, ""), usage)
        holder = IntValue(value)
        self.var_p(holder, name, shorthands, HasArg.OPTIONAL)
        return holder

    def counter(self, name: str, value: int, usage: str) -> IntValue:
        """Define a counter flag; return its value holder."""
        self._add_line(line_flags(name, "", ""), usage)
        holder = IntValue(value)
        self.var(holder, name, HasArg.OPTIONAL)
        return holder

    def int_p(
        self, name: str, shorthands: str, value: int, usage: str
    ) -> IntValue:
        """Define an integer flag with shorthands; return its value holder."""
        default = str(value) if value != 0 else ""
        self._add_line(line_flags(name, shorthands, default), usage)
        holder = IntValue(value)
        self.var_p(holder, name, shorthands, HasArg.REQUIRED)
        return holder

    def int(self, name: str, value: int, usage: str) -> IntValue:
        """Define an integer flag; return its value holder."""
        default = str(value) if value != 0 else ""
        self._add_line(line_flags(name, "", default), usage)
        holder = IntValue(value)
        self.var(holder, name, HasArg.REQUIRED)
        return holder

    def string_p(
        self, name: str, shorthands: str, value: str, usage: str
    ) -> StringValue:
        """Define a string flag with shorthands; return its value holder."""
        self._add_line(line_flags(name, shorthands, value), usage)
        holder = StringValue(value)
        self.var_p(holder, name, shorthands, HasArg.REQUIRED)
        return holder

    def string(self, name: str, value: str, usage: str) -> StringValue:
        """Define a string flag; return its value holder."""
        self._add_line(line_flags(name, "", value), usage)
        holder = StringValue(value)
        self.var(holder, name, HasArg.REQUIRED)
        return holder

    def preset(self, start: int, end: int, value: int, usage: str) -> IntValue:
        """Define preset flags -start ... -end sharing one integer value."""
        if self._has_preset:
            self._panic(f"flagset {self.name} has already a preset")
        self._add_line(f"-{start} ... -{end}", usage)
        target = IntValue(value)
        for i in range(start, end + 1):
            self.var(PresetValue(target, i), str(i), HasArg.NO)
        self._has_preset = True
        return target