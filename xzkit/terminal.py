"""Detection of terminals."""

from __future__ import annotations

import os
from typing import IO, Union

FileLike = Union[int, IO]


def is_terminal(fd: FileLike) -> bool:
    """Tell whether the file descriptor (or file object) is a terminal."""
    if not isinstance(fd, int):
        try:
            fd = fd.fileno()
        except (AttributeError, OSError, ValueError):
            return False
    try:
        return os.isatty(fd)
    except OSError:
        return False