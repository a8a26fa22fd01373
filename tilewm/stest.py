"""Filter a list of files by their properties, printing those that pass."""

from __future__ import annotations

import os
import stat
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, TextIO

FLAG_LETTERS = "abcdefghlpqrsuvwx"
USAGE = "usage: stest [-abcdefghlpqrsuvwx] [-n file] [-o file] [file...]"
_PATH_MAX = 4096


@dataclass(frozen=True)
class StestOptions:
    """Selected tests; ``newer``/``older`` hold reference mtimes in seconds."""

    flags: frozenset = frozenset()
    newer: int | None = None
    older: int | None = None


def _mtime(st: os.stat_result) -> int:
    return st.st_mtime_ns // 1_000_000_000


def parse_args(argv: Iterable[str]) -> tuple[StestOptions, list[str]]:
    """Parse option arguments; return the options and the remaining paths.

    Raises ValueError on an unknown option or a missing option argument.
    """
    args = list(argv)
    flags: set[str] = set()
    times: dict[str, int] = {}
    while args and args[0].startswith("-") and len(args[0]) > 1:
        arg = args.pop(0)
        if arg == "--":
            break
        rest = arg[1:]
        while rest:
            letter, rest = rest[0], rest[1:]
            if letter in ("n", "o"):
                if rest:
                    file = rest
                elif args:
                    file = args.pop(0)
                else:
                    raise ValueError(f"option -{letter} requires an argument")
                rest = ""
                try:
                    times[letter] = _mtime(os.stat(file))
                except OSError as exc:
                    times.pop(letter, None)
                    print(f"{file}: {exc.strerror}", file=sys.stderr)
            elif letter in FLAG_LETTERS:
                flags.add(letter)
            else:
                raise ValueError(f"unknown option -{letter}")
    options = StestOptions(frozenset(flags), times.get("n"), times.get("o"))
    return options, args


def _passes(path: str, name: str, st: os.stat_result, options: StestOptions) -> bool:
    flags = options.flags
    mode = st.st_mode
    if "a" not in flags and name.startswith("."):
        return False
    checks = (
        ("b", lambda: stat.S_ISBLK(mode)),
        ("c", lambda: stat.S_ISCHR(mode)),
        ("d", lambda: stat.S_ISDIR(mode)),
        ("e", lambda: os.access(path, os.F_OK)),
        ("f", lambda: stat.S_ISREG(mode)),
        ("g", lambda: bool(mode & stat.S_ISGID)),
        ("h", lambda: os.path.islink(path)),
        ("p", lambda: stat.S_ISFIFO(mode)),
        ("r", lambda: os.access(path, os.R_OK)),
        ("s", lambda: st.st_size > 0),
        ("u", lambda: bool(mode & stat.S_ISUID)),
        ("w", lambda: os.access(path, os.W_OK)),
        ("x", lambda: os.access(path, os.X_OK)),
    )
    if not all(check() for letter, check in checks if letter in flags):
        return False
    if options.newer is not None and not _mtime(st) > options.newer:
        return False
    if options.older is not None and not _mtime(st) < options.older:
        return False
    return True


def matches(path: str, name: str, options: StestOptions) -> bool:
    """Return whether ``path`` passes the selected tests (inverted by ``-v``)."""
    try:
        st = os.stat(path)
    except OSError:
        passed = False
    else:
        passed = _passes(path, name, st, options)
    return passed != ("v" in options.flags)


def _candidates(
    paths: list[str], options: StestOptions, stdin: TextIO
) -> Iterator[tuple[str, str]]:
    if not paths:
        for line in stdin:
            if not line:
                break
            if line.endswith("\n"):
                line = line[:-1]
            yield line, line
        return
    for arg in paths:
        if "l" in options.flags:
            try:
                entries = os.listdir(arg)
            except OSError:
                yield arg, arg
                continue
            for name in [".", "..", *entries]:
                path = f"{arg}/{name}"
                if len(os.fsencode(path)) < _PATH_MAX:
                    yield path, name
        else:
            yield arg, arg


def run(paths: list[str], options: StestOptions, stdin: TextIO, stdout: TextIO) -> int:
    """Print every passing name; return 0 if anything passed, else 1."""
    found = False
    for path, name in _candidates(paths, options, stdin):
        if matches(path, name, options):
            if "q" in options.flags:
                return 0
            found = True
            print(name, file=stdout)
    return 0 if found else 1


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    try:
        options, paths = parse_args(args)
    except ValueError:
        print(USAGE, file=sys.stderr)
        return 2
    return run(paths, options, sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())