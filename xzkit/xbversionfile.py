"""The ``xb version-file`` command: write a Go file with a version constant."""

from __future__ import annotations

import contextlib
import os
import subprocess
import sys
from typing import Sequence

from .xbcat import _UsageParser
from .xlog import Logger

VF_USAGE = """xb version-file [options] <id>:<path>...

The command creates go file with a version constant. The version string
contains the contents of the VERSION environment variable or the output
of git describe.

   -h  prints this message and exits
   -p  package name (default main)
   -o  file name of output

"""

_log = Logger(None, "xb version-file: ", 0)


def render_version_file(version: str) -> str:
    """Return Go source declaring the version constant."""
    return f'package main\n\nconst version = "{version}"\n'


def current_version() -> str:
    """Return $VERSION, or the output of ``git describe`` when it is unset."""
    version = os.environ.get("VERSION", "")
    if not version:
        try:
            result = subprocess.run(
                ["git", "describe"], capture_output=True, check=True, text=True
            )
        except (OSError, subprocess.CalledProcessError) as err:
            raise RuntimeError(
                f"error {err} while executing git describe"
            ) from err
        version = result.stdout
    return version.strip()


def main(argv: Sequence[str] | None = None) -> int:
    """Run ``xb version-file`` with the given arguments."""
    if argv is None:
        argv = sys.argv[1:]
    parser = _UsageParser("xb version-file", VF_USAGE)
    parser.add_argument("-h", dest="help", action="store_true")
    parser.add_argument("-p", dest="package", default="main")
    parser.add_argument("-o", dest="out", default="")
    parser.add_argument("rest", nargs="*")
    opts = parser.parse_args(list(argv))

    if opts.help:
        sys.stdout.write(VF_USAGE)
        return 0
    if opts.package == "":
        _log.fatal("option -p must not be empty")

    if opts.out:
        try:
            target = open(opts.out, "w", encoding="utf-8", newline="")
        except OSError as err:
            _log.fatal(str(err))
    else:
        target = contextlib.nullcontext(sys.stdout)

    with target as out:
        try:
            version = current_version()
        except RuntimeError as err:
            _log.fatal(str(err))
        out.write(render_version_file(version))
    return 0