"""The ``xb cat`` command: embed text files as string constants in a Go file."""

from __future__ import annotations

import argparse
import contextlib
import os
import stat
import sys
from typing import Iterable, Mapping, Sequence

from .xlog import Logger

CAT_USAGE = """xb cat [options] <id>:<path>...

This xb command puts the contents of the files given as relative paths to
the GOPATH variable as string constants into a go file.

   -h  prints this message and exits
   -p  package name (default main)
   -o  file name of output

"""

_log = Logger(None, "xb cat: ", 0)


class _UsageParser(argparse.ArgumentParser):
    """Argument parser that prints a fixed usage text and exits with 1 on errors."""

    def __init__(self, prog: str, usage_text: str) -> None:
        super().__init__(prog=prog, add_help=False)
        self.usage_text = usage_text

    def error(self, message: str) -> None:  # type: ignore[override]
        sys.stderr.write(f"{self.prog}: {message}\n")
        sys.stderr.write(self.usage_text)
        raise SystemExit(1)


class PathFinder:
    """Resolves ``<id>:<path>`` arguments against GOPATH and the current directory."""

    def __init__(
        self, gopath: Iterable[str] | None = None, home: str | None = None
    ) -> None:
        if gopath is None:
            gopath = os.environ.get("GOPATH", "").split(":")
        self.gopath = list(gopath)
        self.home = os.environ.get("HOME", "") if home is None else home
        self._count = 0

    def find(self, arg: str) -> tuple[str, str]:
        """Return the constant name and the resolved path for ``arg``.

        An argument without an id gets the name ``gocat<n>``. The path ``-``
        stands for standard input and is returned unchanged.
        """
        ident, sep, path = arg.partition(":")
        if not sep:
            self._count += 1
            ident, path = f"gocat{self._count}", ident
        if path == "-":
            return ident, path
        path = path.replace("~", self.home, 1)
        if os.path.isabs(path):
            candidates = [os.path.normpath(path)]
        else:
            candidates = [
                os.path.normpath(os.path.join(q, "src", path)) for q in self.gopath
            ]
            candidates.append(os.path.normpath(os.path.join(".", path)))
        for candidate in candidates:
            try:
                info = os.stat(candidate)
            except FileNotFoundError:
                continue
            if not stat.S_ISREG(info.st_mode):
                raise ValueError(f"{candidate} is not a regular file")
            return ident, candidate
        raise FileNotFoundError(f"file {path} not found")


def render_go_file(package: str, constants: Mapping[str, str]) -> str:
    """Return Go source declaring each entry as a raw string constant."""
    body = "".join(
        f"const {name} = `{constants[name]}`\n" for name in sorted(constants)
    )
    return f"package {package}\n\n{body}"


def _read_text(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8", errors="surrogateescape", newline="") as f:
        return f.read()


def main(argv: Sequence[str] | None = None) -> int:
    """Run ``xb cat`` with the given arguments."""
    if argv is None:
        argv = sys.argv[1:]
    parser = _UsageParser("xb cat", CAT_USAGE)
    parser.add_argument("-h", dest="help", action="store_true")
    parser.add_argument("-p", dest="package", default="main")
    parser.add_argument("-o", dest="out", default="")
    parser.add_argument("files", nargs="*")
    opts = parser.parse_args(list(argv))

    if opts.help:
        sys.stdout.write(CAT_USAGE)
        return 0
    if opts.package == "":
        _log.fatal("option -p must not be empty")

    if opts.out:
        try:
            target = open(opts.out, "w", encoding="utf-8",
                          errors="surrogateescape", newline="")
        except OSError as err:
            _log.fatal(str(err))
    else:
        target = contextlib.nullcontext(sys.stdout)

    with target as out:
        finder = PathFinder()
        constants: dict[str, str] = {}
        for arg in opts.files:
            try:
                ident, path = finder.find(arg)
                constants[ident] = _read_text(path)
            except (OSError, ValueError) as err:
                _log.print(str(err))
        out.write(render_go_file(opts.package, constants))
    return 0