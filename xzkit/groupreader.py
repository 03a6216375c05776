"""Formatting of text into groups of five characters."""

from __future__ import annotations

from typing import BinaryIO

_NEWLINE = 0x0A
_SPACE = 0x20
_UNDERSCORE = ord("_")
_DASH = ord("-")
_CHUNK = 8192


class GroupReader:
    """Reads a byte stream and formats it in groups of five characters.

    Spaces become ``_`` and unprintable bytes become ``-``. Each line holds
    ``groups_per_line`` groups; values below one mean eight.
    """

    def __init__(self, stream: BinaryIO, groups_per_line: int = 8) -> None:
        self._stream = stream
        self.groups_per_line = groups_per_line
        self._off = 0
        self._eof = False

    def read(self, size: int = -1) -> bytes:
        """Return up to ``size`` formatted bytes; all of them if negative.

        An empty result signals the end of the text.
        """
        if size is None or size < 0:
            parts = []
            while chunk := self._read_chunk(_CHUNK):
                parts.append(chunk)
            return b"".join(parts)
        return self._read_chunk(size)

    def _read_chunk(self, size: int) -> bytes:
        if self._eof:
            return b""
        groups = self.groups_per_line if self.groups_per_line >= 1 else 8
        line_len = groups * 6
        out = bytearray()
        while len(out) < size:
            i = len(out)
            if self._off % line_len == line_len - 1:
                # keep a separator from ending the chunk
                if i + 1 == size and size > 1:
                    return bytes(out)
                c = _NEWLINE
            elif self._off % 6 == 5:
                if i + 1 == size and size > 1:
                    return bytes(out)
                c = _SPACE
            else:
                byte = self._stream.read(1)
                if not byte:
                    self._eof = True
                    if out and out[-1] == _SPACE:
                        out[-1] = _NEWLINE
                        return bytes(out)
                    if out and out[-1] == _NEWLINE:
                        return bytes(out)
                    out.append(_NEWLINE)
                    return bytes(out)
                c = byte[0]
                if c == _SPACE:
                    c = _UNDERSCORE
                elif not chr(c).isprintable():
                    c = _DASH
            out.append(c)
            self._off += 1
        return bytes(out)