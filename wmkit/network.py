"""Network readings: transfer speed, addresses and wireless link."""

from __future__ import annotations

import array
import fcntl
import os
import re
import socket
import struct

import psutil

from wmkit.util import fmt_human, read_int, warn

SYS_CLASS_NET = "/sys/class/net"
PROC_NET_WIRELESS = "/proc/net/wireless"
INTERVAL = 1000  # milliseconds between status updates

IFNAMSIZ = 16
IW_ESSID_MAX_SIZE = 32
SIOCGIWESSID = 0x8B1B
_IWREQ_SIZE = 32

_U64 = 1 << 64
_LINE_LIMIT = 1022
_WIRELESS_RE = re.compile(r"\s*[+-]?\d+(?!\d)\s*([+-]?\d+)")


class NetSpeed:
    """Bytes per second moved by an interface since the previous call.

    *direction* is 'rx' or 'tx'. The first call only records a sample and
    yields None.
    """

    def __init__(
        self,
        direction: str,
        interval: int = INTERVAL,
        root: str = SYS_CLASS_NET,
    ) -> None:
        if direction not in ("rx", "tx"):
            raise ValueError(f"direction must be 'rx' or 'tx', not {direction!r}")
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.direction = direction
        self.interval = interval
        self.root = root
        self._bytes = 0

    def __call__(self, interface: str) -> str | None:
        previous = self._bytes
        path = os.path.join(
            self.root, interface, "statistics", f"{self.direction}_bytes"
        )
        value = read_int(path)
        if value is None:
            return None
        self._bytes = value
        if previous == 0:
            return None
        delta = (value - previous) % _U64
        return fmt_human(delta * 1000 // self.interval, 1024)


_rx = NetSpeed("rx")
_tx = NetSpeed("tx")


def netspeed_rx(interface: str) -> str | None:
    """Receive speed of *interface*."""
    return _rx(interface)


def netspeed_tx(interface: str) -> str | None:
    """Transmit speed of *interface*."""
    return _tx(interface)


def _ip(interface: str, family: int) -> str | None:
    try:
        addresses = psutil.net_if_addrs()
    except OSError:
        warn("getifaddrs:")
        return None
    for address in addresses.get(interface, ()):
        if address.family == family:
            return address.address
    return None


def ipv4(interface: str) -> str | None:
    """First IPv4 address of *interface*."""
    return _ip(interface, socket.AF_INET)


def ipv6(interface: str) -> str | None:
    """First IPv6 address of *interface*."""
    return _ip(interface, socket.AF_INET6)


def rssi_to_perc(rssi: int) -> int:
    """Map a signal strength in dBm onto 0..100."""
    if rssi >= -50:
        return 100
    if rssi <= -100:
        return 0
    return 2 * (rssi + 100)


def wifi_perc(
    interface: str,
    root: str = SYS_CLASS_NET,
    wireless_path: str = PROC_NET_WIRELESS,
) -> str | None:
    """Link quality of a wireless interface that is up, in percent."""
    operstate = os.path.join(root, interface, "operstate")
    try:
        with open(operstate, encoding="utf-8", errors="replace") as handle:
            status = handle.readline(4)
    except OSError:
        warn(f"fopen '{operstate}':")
        return None
    if status != "up\n":
        return None

    try:
        with open(wireless_path, encoding="utf-8", errors="replace") as handle:
            lines = [handle.readline(_LINE_LIMIT) for _ in range(3)]
    except OSError:
        warn(f"fopen '{wireless_path}':")
        return None
    line = lines[2]
    if not line:
        return None

    start = line.find(interface)
    if start < 0:
        return None
    match = _WIRELESS_RE.match(line, start + len(interface) + 2)
    if not match:
        return None
    quality = int(match.group(1))
    # 70 is the maximum link quality reported by the kernel
    return str(int(quality / 70 * 100))


def wifi_essid(interface: str) -> str | None:
    """Network name the wireless *interface* is associated with."""
    name = interface.encode()
    if len(name) >= IFNAMSIZ:
        warn("vsnprintf: Output truncated")
        return None

    essid = array.array("B", bytes(IW_ESSID_MAX_SIZE + 1))
    address, _ = essid.buffer_info()
    request = struct.pack("16sPHH", name, address, IW_ESSID_MAX_SIZE + 1, 0)
    request += bytes(_IWREQ_SIZE - len(request))

    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError:
        warn("socket 'AF_INET':")
        return None
    with sock:
        try:
            fcntl.ioctl(sock.fileno(), SIOCGIWESSID, request)
        except OSError:
            warn("ioctl 'SIOCGIWESSID':")
            return None

    value = essid.tobytes().split(b"\0", 1)[0].decode("utf-8", errors="replace")
    return value or None