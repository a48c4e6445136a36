"""Shared helpers: warnings, human-readable sizes, small file readers, flags."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence

_PREFIXES = {
    1000: ("", "k", "M", "G", "T", "P", "E", "Z", "Y"),
    1024: ("", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"),
}

_INT_RE = re.compile(r"\s*([+-]?\d+)")


class UsageError(Exception):
    """Raised when command-line flags are not understood."""


def warn(message: str) -> None:
    """Write a warning to stderr.

    A message ending in ':' is followed by the error being handled, if any.
    """
    if message.endswith(":"):
        error = sys.exc_info()[1]
        detail = error.strerror if isinstance(error, OSError) and error.strerror else error
        if detail:
            sys.stderr.write(f"{message} {detail}\n")
            return
    sys.stderr.write(message + "\n")


def fmt_human(num: float, base: int) -> str | None:
    """Scale *num* by *base* (1000 or 1024) and add the matching unit prefix."""
    prefixes = _PREFIXES.get(base)
    if prefixes is None:
        warn("fmt_human: Invalid base")
        return None
    scaled = float(num)
    index = 0
    while index < len(prefixes) - 1 and scaled >= base:
        scaled /= base
        index += 1
    return f"{scaled:.1f} {prefixes[index]}"


def read_text(path: str) -> str | None:
    """Return the whole content of *path*, or None after a warning."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return handle.read()
    except OSError:
        warn(f"fopen '{path}':")
        return None


def read_int(path: str) -> int | None:
    """Return the leading integer in *path*, or None."""
    text = read_text(path)
    if text is None:
        return None
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else None


def parse_flags(argv: Sequence[str], allowed: str) -> tuple[list[str], list[str]]:
    """Split *argv* into single-letter flags and the remaining arguments.

    Grouped flags such as ``-1s`` are split; ``--`` ends the flags. A letter
    not in *allowed* raises UsageError.
    """
    args = list(argv)
    flags: list[str] = []
    while args and args[0].startswith("-") and len(args[0]) > 1:
        word = args.pop(0)
        if word == "--":
            break
        for letter in word[1:]:
            if letter not in allowed:
                raise UsageError(f"unknown flag -{letter}")
            flags.append(letter)
    return flags, args