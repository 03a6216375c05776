# xzkit

`xzkit` collects the low-level pieces needed to read and write the xz
container format, together with a few supporting tools.

## What is inside

- `xzkit.bits`: little-endian integer helpers and the variable-length
  unsigned integers ("uvarints") used throughout the xz format:
  `encode_uvarint`, `read_uvarint`, `encode_uint32_le`,
  `encode_uint64_le`, `uint32_le`. `read_uvarint` returns the value and
  the number of bytes read; a uvarint longer than ten bytes, or one that
  does not fit in 64 bits, raises `UvarintOverflowError`, and a stream
  that ends early raises `EOFError`.
- `xzkit.checksums`: the `CRC32` (IEEE) and `CRC64` (ECMA) checksums with
  `update` and `digest` methods, where `digest` returns the value in
  little-endian byte order, plus a `crc64(data, crc=0)` function.
- `xzkit.fileformat`: the stream `Header` and `Footer` (each with
  `to_bytes` and `from_bytes`), index `Record`s, `write_index`,
  `read_index_body`, `read_record`, the `CheckMethod` enumeration,
  `verify_flags`, `flag_string`, `valid_header` and `pad_len`. Malformed
  data raises `FormatError`.
- `xzkit.rollhash`: rolling hashes over n-byte windows, `CyclicPoly` and
  `RabinKarp`, and `hashes(roller, data)`, which returns the hash of
  every window of a byte string.
- `xzkit.groupreader`: `GroupReader`, which lays text read from a binary
  stream out in groups of five characters, eight groups to a line by
  default. Spaces become `_` and unprintable bytes become `-`.
- `xzkit.flagvalues` and `xzkit.flagset`: GNU-style option parsing
  through `FlagSet`, with long options (`--name`, `--name=value`),
  bundled short options, counters (`-vvv`), numeric presets (`-0` …
  `-9`) and `--` to end option parsing. Errors raise `FlagError`,
  `SystemExit(2)` or `RuntimeError`, depending on the `ErrorHandling`
  chosen.
- `xzkit.xlog`: a `Logger` whose print, warning, debug, fatal and panic
  messages can each be switched off with `LogFlag` values. Fatal methods
  raise `SystemExit(1)`; panic methods raise `PanicError`, even when
  their output is suppressed. `standard_logger()` returns a shared logger
  writing to standard error.
- `xzkit.terminal`: `is_terminal` tells whether a file descriptor or file
  object is a terminal.

## Installation

```
pip install .
```

## Examples

```python
import io

from xzkit.bits import encode_uvarint, read_uvarint
from xzkit.fileformat import CheckMethod, Header, valid_header

encoded = encode_uvarint(300)          # b'\xac\x02'
value, size = read_uvarint(io.BytesIO(encoded))

header = Header(flags=CheckMethod.CRC32).to_bytes()
assert valid_header(header)
```

```python
from xzkit.rollhash import CyclicPoly, hashes

window_hashes = hashes(CyclicPoly(4), b"abcdefgh")
```

```python
from xzkit.flagset import FlagSet

flags = FlagSet("demo")
verbose = flags.counter_p("verbose", "v", 0, "")
flags.parse(["-vvv", "input.txt"])
assert verbose.value == 3 and flags.args == ["input.txt"]
```

## Commands

Two small build helpers are installed as commands.

```
xb-cat [-p package] [-o out.go] id:path ...
xb-version-file [-o version.go]
```

`xb-cat` writes a Go source file that declares the contents of each
given text file as a raw string constant, sorted by name. A path is looked
up below `src` in each `GOPATH` entry and then relative to the current
directory; the first `~` is replaced by `$HOME`, and `-` reads standard
input. An argument without an `id:` part gets the name `gocat1`,
`gocat2`, and so on. Files that cannot be found are reported and skipped.

`xb-version-file` writes a Go source file in package `main` holding a
`version` constant, taken from the `VERSION` environment variable, or
from the output of `git describe` when it is not set. It accepts `-p`,
which must not be empty, but the file it writes always declares package
`main`.

Both commands print their help with `-h` and write to standard output
unless `-o` names a file.

## What is not included

The package does not compress or decompress data: it handles the
container structures (headers, footers, index, checksums) but has no
LZMA2 coder and no command for compressing files. There is also no
single dispatcher command grouping the helpers, and no command for
adding header comments to source files.

## Running the tests

```
pip install ".[test]"
pytest
```