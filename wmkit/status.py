"""Status line assembled from readings and set as the root window name or printed."""

from __future__ import annotations

import os
import re
import signal
import subprocess
import sys
import threading
import time
from collections.abc import Callable, Iterable, Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass
from typing import NoReturn

from wmkit.cpu import cpu_perc
from wmkit.memory import ram_perc
from wmkit.network import netspeed_rx, wifi_essid
from wmkit.power import battery_perc
from wmkit.system import datetime
from wmkit.util import UsageError, parse_flags, warn

PROG = "wmstatus"
VERSION = "1.0"

INTERVAL = 1000  # milliseconds between updates
UNKNOWN_STR = "?"  # shown when a reading yields nothing
MAXLEN = 2048  # maximum status length in bytes, terminator included

_SPEC_RE = re.compile(r"%([%s])")


def _printf(fmt: str, value: str) -> str:
    return _SPEC_RE.sub(lambda m: "%" if m.group(1) == "%" else value, fmt)


@dataclass(frozen=True)
class StatusItem:
    """One reading: a function, the format its value goes into, its argument."""

    func: Callable[[str | None], str | None]
    fmt: str
    arg: str | None = None

    def render(self, unknown: str = UNKNOWN_STR) -> str:
        """The formatted reading; *unknown* stands in when it yields None."""
        value = self.func(self.arg)
        if value is None:
            value = unknown
        return _printf(self.fmt, value)


@dataclass(frozen=True)
class Theme:
    """Colours used in the status formats."""

    text: str
    battery: str


THEMES = {
    "oxocarbon": Theme(text="#f2f4f8", battery="#ff7eb6"),
    "biscuit": Theme(text="##f2f4f8", battery="#EAB471"),
}


def _items_for(theme: Theme) -> tuple[StatusItem, ...]:
    text, batt = theme.text, theme.battery
    return (
        StatusItem(cpu_perc, f" ^c{text}^ %s%% |^d^ "),
        StatusItem(ram_perc, f"^c{text}^ %s%% |^d^ "),
        StatusItem(wifi_essid, f"^c{text}^ %s^d^ ", "wlan0"),
        StatusItem(netspeed_rx, f"^c{text}^ %s |^d^ ", "wlan0"),
        StatusItem(datetime, f"^c{text}^ %s | ^d^", "%a, %d %m %Y"),
        StatusItem(datetime, f"^c{text}^ %s | ^d^", "%I:%M %p"),
        StatusItem(battery_perc, f"^c{batt}^ %s%%^d^ ", "BAT1"),
    )


DEFAULT_ITEMS = _items_for(THEMES["oxocarbon"])


def build_status(
    items: Iterable[StatusItem],
    unknown: str = UNKNOWN_STR,
    maxlen: int = MAXLEN,
) -> str:
    """Concatenate the rendered items, stopping at the first that does not fit.

    Room for *maxlen* bytes is assumed, one of them kept for the terminator.
    """
    parts: list[str] = []
    used = 0
    for item in items:
        piece = item.render(unknown)
        size = len(piece.encode("utf-8"))
        if size >= maxlen - used:
            warn("vsnprintf: Output truncated")
            break
        parts.append(piece)
        used += size
    return "".join(parts)


class _Wake(Exception):
    """Raised from a signal handler to cut a sleep short."""


class _Loop:
    def __init__(self, done: bool) -> None:
        self.done = done
        self.sleeping = False

    def _handle(self, signo: int, frame: object) -> None:
        if signo != signal.SIGUSR1:
            self.done = True
        if self.sleeping:
            raise _Wake

    @contextmanager
    def signals(self) -> Iterator[None]:
        if threading.current_thread() is not threading.main_thread():
            yield
            return
        wanted = (signal.SIGINT, signal.SIGTERM, signal.SIGUSR1)
        previous = {signo: signal.signal(signo, self._handle) for signo in wanted}
        try:
            yield
        finally:
            for signo, handler in previous.items():
                signal.signal(signo, handler)

    def sleep(self, seconds: float) -> None:
        try:
            self.sleeping = True
            time.sleep(seconds)
        except _Wake:
            pass
        finally:
            self.sleeping = False


def run(
    items: Sequence[StatusItem],
    interval: int = INTERVAL,
    once: bool = False,
    output: Callable[[str], None] = print,
) -> None:
    """Hand a fresh status line to *output* every *interval* milliseconds.

    SIGINT and SIGTERM end the loop, SIGUSR1 forces an early update; with
    *once* a single line is produced.
    """
    if interval < 0:
        raise ValueError("interval must not be negative")
    loop = _Loop(done=once)
    with loop.signals():
        while True:
            start = time.monotonic()
            output(build_status(items))
            if not loop.done:
                wait = interval / 1000 - (time.monotonic() - start)
                if wait >= 0:
                    loop.sleep(wait)
            if loop.done:
                break


def _die(message: str) -> NoReturn:
    warn(message)
    raise SystemExit(1)


def _usage() -> NoReturn:
    _die(f"usage: {PROG} [-v] [-s] [-1]")


def _print_status(status: str) -> None:
    try:
        print(status, flush=True)
    except OSError:
        _die("puts:")


def _store_root_name(status: str) -> None:
    try:
        subprocess.run(["xsetroot", "-name", status], check=True)
    except (OSError, subprocess.CalledProcessError):
        _die("XStoreName: Allocation failed")


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: -s prints to stdout, -1 prints once, -v shows the version."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        flags, rest = parse_flags(args, "vs1")
    except UsageError:
        _usage()

    sflag = once = False
    for flag in flags:
        if flag == "v":
            _die(f"{PROG}-{VERSION}")
        if flag == "1":
            once = True
        sflag = True

    if rest:
        _usage()

    if not sflag and not os.environ.get("DISPLAY"):
        _die("XOpenDisplay: Failed to open display")

    run(DEFAULT_ITEMS, INTERVAL, once, _print_status if sflag else _store_root_name)

    if not sflag:
        try:
            subprocess.run(["xsetroot", "-name", ""], check=False)
        except OSError:
            _die("XCloseDisplay: Failed to close display")
    return 0