import os
import re
import socket
import time
from types import SimpleNamespace
from unittest import mock

from wmkit import system


def test_datetime_year_matches_localtime():
    assert system.datetime("%Y") == str(time.localtime().tm_year)


def test_datetime_literal_text_passes_through():
    assert system.datetime("status") == "status"


def test_datetime_empty_result_is_none():
    assert system.datetime("") is None


def test_datetime_too_long_is_none():
    assert system.datetime("%Y" * 600) is None


def test_hostname_matches_socket():
    assert system.hostname() == socket.gethostname()


def test_hostname_error_is_none():
    with mock.patch("wmkit.system.socket.gethostname", side_effect=OSError(1, "boom")):
        assert system.hostname() is None


def test_kernel_release_matches_uname():
    assert system.kernel_release() == os.uname().release


def test_uptime_format():
    result = system.uptime()
    match = re.fullmatch(r"(\d+)h (\d+)m", result)
    assert match is not None
    assert int(match.group(2)) < 60


def test_uptime_with_fixed_clock():
    with mock.patch("wmkit.system.time.clock_gettime", return_value=7384.5):
        assert system.uptime() == "2h 3m"


def test_uptime_clock_error_is_none():
    with mock.patch("wmkit.system.time.clock_gettime", side_effect=OSError(22, "bad")):
        assert system.uptime() is None


def test_gid_and_uid():
    assert system.gid() == str(os.getgid())
    assert system.uid() == str(os.geteuid())


def test_username_from_password_database():
    entry = SimpleNamespace(pw_name="alice")
    with mock.patch("wmkit.system.pwd.getpwuid", return_value=entry) as lookup:
        assert system.username() == "alice"
    lookup.assert_called_once_with(os.geteuid())


def test_username_missing_entry_is_none():
    with mock.patch("wmkit.system.pwd.getpwuid", side_effect=KeyError(0)):
        assert system.username() is None