"""A small logger whose message categories can be switched off by flags.

Each :class:`Logger` writes one line per message to a text stream. The
line starts with an optional prefix, date, time and source location,
controlled by :class:`LogFlag`. The ``NO*`` flags suppress whole message
categories. Fatal messages raise :class:`SystemExit` with status 1 and
panic messages raise :class:`PanicError`, even when their output is
suppressed.
"""

from __future__ import annotations

import enum
import inspect
import os
import sys
import threading
from datetime import datetime
from typing import Any, TextIO


class LogFlag(enum.IntFlag):
    """Flags selecting the line header and the suppressed categories."""

    DATE = 1 << 0
    TIME = 1 << 1
    MICROSECONDS = 1 << 2
    LONGFILE = 1 << 3
    SHORTFILE = 1 << 4
    NOPANIC = 1 << 5
    NOFATAL = 1 << 6
    NOWARN = 1 << 7
    NOPRINT = 1 << 8
    NODEBUG = 1 << 9
    STDFLAGS = DATE | TIME | NODEBUG


class PanicError(RuntimeError):
    """Raised by the panic methods after the message has been logged."""


def _go_str(value: Any) -> str:
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _sprint(args: tuple[Any, ...]) -> str:
    """Join operands, adding spaces only between two non-string operands."""
    parts: list[str] = []
    prev_string = True
    for i, arg in enumerate(args):
        is_string = isinstance(arg, str)
        if i > 0 and not is_string and not prev_string:
            parts.append(" ")
        parts.append(_go_str(arg))
        prev_string = is_string
    return "".join(parts)


def _sprintln(args: tuple[Any, ...]) -> str:
    """Join all operands with spaces and end with a newline."""
    return " ".join(_go_str(arg) for arg in args) + "\n"


def _sprintf(fmt: str, args: tuple[Any, ...]) -> str:
    return fmt % args if args else fmt


def _caller(depth: int) -> tuple[str, int]:
    """Return file name and line of the frame ``depth`` levels up."""
    frame = inspect.currentframe()
    try:
        for _ in range(depth + 1):
            if frame is None:
                break
            frame = frame.f_back
        if frame is None:
            return "???", 0
        return frame.f_code.co_filename, frame.f_lineno
    finally:
        del frame


class Logger:
    """Writes log lines to a stream; access to the stream is serialised."""

    def __init__(
        self,
        out: TextIO | None = None,
        prefix: str = "",
        flags: int = LogFlag.STDFLAGS,
    ) -> None:
        self._lock = threading.RLock()
        self.out = out
        self.prefix = prefix
        self.flags = LogFlag(flags)

    def set_output(self, out: TextIO | None) -> None:
        """Send future lines to ``out``; ``None`` means standard error."""
        with self._lock:
            self.out = out

    def _header(self, flags: LogFlag, now: datetime, file: str, line: int) -> str:
        parts = [self.prefix]
        if flags & LogFlag.DATE:
            parts.append(f"{now.year:04d}-{now.month:02d}-{now.day:02d} ")
        if flags & (LogFlag.TIME | LogFlag.MICROSECONDS):
            parts.append(f"{now.hour:02d}:{now.minute:02d}:{now.second:02d}")
            if flags & LogFlag.MICROSECONDS:
                parts.append(f".{now.microsecond:06d}")
            parts.append(" ")
        if flags & (LogFlag.SHORTFILE | LogFlag.LONGFILE):
            if flags & LogFlag.SHORTFILE:
                file = os.path.basename(file)
            parts.append(f"{file}:{line}: ")
        return "".join(parts)

    def _emit(self, noflag: int, message: str) -> None:
        # Called directly by the public methods; the logging caller is
        # two frames above this one.
        now = datetime.now()
        with self._lock:
            flags = self.flags
            if flags & noflag:
                return
            file, line = "", 0
            if flags & (LogFlag.SHORTFILE | LogFlag.LONGFILE):
                file, line = _caller(2)
            text = self._header(flags, now, file, line) + message
            if not message.endswith("\n"):
                text += "\n"
            out = self.out if self.out is not None else sys.stderr
            out.write(text)
            flush = getattr(out, "flush", None)
            if flush is not None:
                flush()

    def output(self, noflag: int, message: str) -> None:
        """Write ``message`` unless a flag in ``noflag`` is set."""
        self._emit(noflag, message)

    def print(self, *args: Any) -> None:
        self._emit(LogFlag.NOPRINT, _sprint(args))

    def printf(self, fmt: str, *args: Any) -> None:
        self._emit(LogFlag.NOPRINT, _sprintf(fmt, args))

    def println(self, *args: Any) -> None:
        self._emit(LogFlag.NOPRINT, _sprintln(args))

    def warn(self, *args: Any) -> None:
        self._emit(LogFlag.NOWARN, _sprint(args))

    def warnf(self, fmt: str, *args: Any) -> None:
        self._emit(LogFlag.NOWARN, _sprintf(fmt, args))

    def warnln(self, *args: Any) -> None:
        self._emit(LogFlag.NOWARN, _sprintln(args))

    def debug(self, *args: Any) -> None:
        self._emit(LogFlag.NODEBUG, _sprint(args))

    def debugf(self, fmt: str, *args: Any) -> None:
        self._emit(LogFlag.NODEBUG, _sprintf(fmt, args))

    def debugln(self, *args: Any) -> None:
        self._emit(LogFlag.NODEBUG, _sprintln(args))

    def fatal(self, *args: Any) -> None:
        """Log the message and exit with status 1."""
        self._emit(LogFlag.NOFATAL, _sprint(args))
        raise SystemExit(1)

    def fatalf(self, fmt: str, *args: Any) -> None:
        """Log the formatted message and exit with status 1."""
        self._emit(LogFlag.NOFATAL, _sprintf(fmt, args))
        raise SystemExit(1)

    def fatalln(self, *args: Any) -> None:
        """Log the operands joined by spaces and exit with status 1."""
        self._emit(LogFlag.NOFATAL, _sprintln(args))
        raise SystemExit(1)

    def panic(self, *args: Any) -> None:
        """Log the message and raise :class:`PanicError`."""
        message = _sprint(args)
        self._emit(LogFlag.NOPANIC, message)
        raise PanicError(message)

    def panicf(self, fmt: str, *args: Any) -> None:
        """Log the formatted message and raise :class:`PanicError`."""
        message = _sprintf(fmt, args)
        self._emit(LogFlag.NOPANIC, message)
        raise PanicError(message)

    def panicln(self, *args: Any) -> None:
        """Log the operands joined by spaces and raise :class:`PanicError`."""
        message = _sprintln(args)
        self._emit(LogFlag.NOPANIC, message)
        raise PanicError(message)


_std = Logger(None, "", LogFlag.STDFLAGS)


def standard_logger() -> Logger:
    """Return the shared logger that writes to standard error."""
    return _std