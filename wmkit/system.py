"""Date, host, kernel, uptime and user readings."""

from __future__ import annotations

import os
import pwd
import socket
import time

from wmkit.util import warn

_BUFFER_SIZE = 1024


def _uptime_clock() -> int:
    for name in ("CLOCK_BOOTTIME", "CLOCK_UPTIME", "CLOCK_MONOTONIC"):
        clock = getattr(time, name, None)
        if clock is not None:
            return clock
    return time.CLOCK_MONOTONIC


def datetime(fmt: str) -> str | None:
    """Local time formatted with strftime *fmt*."""
    result = time.strftime(fmt, time.localtime())
    if not result or len(result) >= _BUFFER_SIZE:
        warn("strftime: Result string exceeds buffer size")
        return None
    return result


def hostname(unused: str | None = None) -> str | None:
    """Name of this host."""
    try:
        return socket.gethostname()
    except OSError:
        warn("gethostbyname:")
        return None


def kernel_release(unused: str | None = None) -> str | None:
    """Kernel release, as printed by 'uname -r'."""
    try:
        return os.uname().release
    except OSError:
        warn("uname:")
        return None


def uptime(unused: str | None = None) -> str | None:
    """Time since boot as 'Hh Mm'."""
    clock = _uptime_clock()
    try:
        seconds = int(time.clock_gettime(clock))
    except OSError:
        warn(f"clock_gettime {clock}")
        return None
    hours, rest = divmod(seconds, 3600)
    return f"{hours}h {rest // 60}m"


def gid(unused: str | None = None) -> str:
    """Real group id of the current process."""
    return str(os.getgid())


def uid(unused: str | None = None) -> str:
    """Effective user id of the current process."""
    return str(os.geteuid())


def username(unused: str | None = None) -> str | None:
    """Login name belonging to the effective user id."""
    user_id = os.geteuid()
    try:
        return pwd.getpwuid(user_id).pw_name
    except KeyError:
        warn(f"getpwuid '{user_id}': no such user")
        return None