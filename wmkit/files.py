"""File, directory, disk and command readings."""

from __future__ import annotations

import os
import subprocess

from wmkit.util import fmt_human, warn

_LINE_LIMIT = 1022


def _first_line(line: str) -> str | None:
    if line.endswith("\n"):
        line = line[:-1]
    return line or None


def cat(path: str) -> str | None:
    """First line of the file at *path*, or None if it is empty."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            line = handle.readline(_LINE_LIMIT)
    except OSError:
        warn(f"fopen '{path}':")
        return None
    return _first_line(line)


def num_files(path: str) -> str | None:
    """Number of entries in the directory at *path*."""
    try:
        count = len(os.listdir(path))
    except OSError:
        warn(f"opendir '{path}':")
        return None
    return str(count)


def _statvfs(path: str) -> os.statvfs_result | None:
    try:
        return os.statvfs(path)
    except OSError:
        warn(f"statvfs '{path}':")
        return None


def disk_free(path: str) -> str | None:
    """Space available to unprivileged users on the filesystem of *path*."""
    fs = _statvfs(path)
    if fs is None:
        return None
    return fmt_human(fs.f_frsize * fs.f_bavail, 1024)


def disk_perc(path: str) -> str | None:
    """Used share of the filesystem of *path*, in percent."""
    fs = _statvfs(path)
    if fs is None or fs.f_blocks == 0:
        return None
    return str(int(100 * (1 - fs.f_bavail / fs.f_blocks)))


def disk_total(path: str) -> str | None:
    """Total size of the filesystem of *path*."""
    fs = _statvfs(path)
    if fs is None:
        return None
    return fmt_human(fs.f_frsize * fs.f_blocks, 1024)


def disk_used(path: str) -> str | None:
    """Used space on the filesystem of *path*."""
    fs = _statvfs(path)
    if fs is None:
        return None
    return fmt_human(fs.f_frsize * (fs.f_blocks - fs.f_bfree), 1024)


def run_command(cmd: str) -> str | None:
    """First line printed by the shell command *cmd*."""
    try:
        process = subprocess.Popen(
            cmd,
            shell=True,
            stdout=subprocess.PIPE,
            text=True,
            errors="replace",
        )
    except OSError:
        warn(f"popen '{cmd}':")
        return None
    with process:
        line = process.stdout.readline(_LINE_LIMIT)
        process.stdout.close()
        process.wait()
    return _first_line(line)