"""RAM and swap readings from a meminfo file."""

from __future__ import annotations

import re

from wmkit.util import fmt_human, read_text

MEMINFO = "/proc/meminfo"

_LINE_RE = re.compile(r"^([^:\s]+):\s*(\d+)", re.MULTILINE)

_RAM_FIELDS = ("MemTotal", "MemFree", "MemAvailable", "Buffers", "Cached")
_SWAP_FIELDS = ("SwapTotal", "SwapFree", "SwapCached")


def parse_meminfo(path: str = MEMINFO) -> dict[str, int] | None:
    """Map each field of a meminfo file to its value in kB."""
    text = read_text(path)
    if text is None:
        return None
    return {name: int(value) for name, value in _LINE_RE.findall(text)}


def _fields(path: str, names: tuple[str, ...]) -> tuple[int, ...] | None:
    info = parse_meminfo(path)
    if info is None or any(name not in info for name in names):
        return None
    return tuple(info[name] for name in names)


def _div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return -quotient if (numerator < 0) != (denominator < 0) else quotient


def ram_free(unused: str | None = None, path: str = MEMINFO) -> str | None:
    """Available memory."""
    values = _fields(path, ("MemAvailable",))
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def ram_perc(unused: str | None = None, path: str = MEMINFO) -> str | None:
    """Used memory, without buffers and cache, in percent."""
    values = _fields(path, _RAM_FIELDS)
    if values is None:
        return None
    total, free, _available, buffers, cached = values
    if total == 0:
        return None
    return str(_div(100 * ((total - free) - (buffers + cached)), total))


def ram_total(unused: str | None = None, path: str = MEMINFO) -> str | None:
    """Total memory."""
    values = _fields(path, ("MemTotal",))
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def ram_used(unused: str | None = None, path: str = MEMINFO) -> str | None:
    """Used memory, without buffers and cache."""
    values = _fields(path, _RAM_FIELDS)
    if values is None:
        return None
    total, free, _available, buffers, cached = values
    return fmt_human((total - free - buffers - cached) * 1024, 1024)


def swap_free(unused: str | None = None, path: str = MEMINFO) -> str | None:
    """Free swap space."""
    values = _fields(path, ("SwapFree",))
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def swap_perc(unused: str | None = None, path: str = MEMINFO) -> str | None:
    """Used swap space, without swap cache, in percent."""
    values = _fields(path, _SWAP_FIELDS)
    if values is None:
        return None
    total, free, cached = values
    if total == 0:
        return None
    return str(_div(100 * (total - free - cached), total))


def swap_total(unused: str | None = None, path: str = MEMINFO) -> str | None:
    """Total swap space."""
    values = _fields(path, ("SwapTotal",))
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def swap_used(unused: str | None = None, path: str = MEMINFO) -> str | None:
    """Used swap space, without swap cache."""
    values = _fields(path, _SWAP_FIELDS)
    if values is None:
        return None
    total, free, cached = values
    return fmt_human((total - free - cached) * 1024, 1024)