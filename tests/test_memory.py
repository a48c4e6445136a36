import pytest

from wmkit import memory
from wmkit.util import fmt_human

MEMINFO = (
    "MemTotal:        4194304 kB\n"
    "MemFree:         1048576 kB\n"
    "MemAvailable:    2097152 kB\n"
    "Buffers:          524288 kB\n"
    "Cached:          1572864 kB\n"
    "SwapCached:            0 kB\n"
    "SwapTotal:          2048 kB\n"
    "SwapFree:           1024 kB\n"
    "HugePages_Total:       0\n"
)


@pytest.fixture
def meminfo(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text(MEMINFO)
    return str(path)


def test_parse_meminfo_reads_fields(meminfo):
    info = memory.parse_meminfo(meminfo)
    assert info["MemTotal"] == 4194304
    assert info["Cached"] == 1572864
    assert info["SwapFree"] == 1024
    assert info["HugePages_Total"] == 0


def test_parse_meminfo_missing_file(tmp_path):
    assert memory.parse_meminfo(str(tmp_path / "absent")) is None


def test_ram_total_and_free(meminfo):
    assert memory.ram_total(None, meminfo) == fmt_human(4194304 * 1024, 1024)
    assert memory.ram_free(None, meminfo) == fmt_human(2097152 * 1024, 1024)


def test_ram_used(meminfo):
    assert memory.ram_used(None, meminfo) == "1.0 Gi"


def test_ram_perc(meminfo):
    assert memory.ram_perc(None, meminfo) == "25"


def test_ram_perc_zero_total(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text(MEMINFO.replace("4194304", "0"))
    assert memory.ram_perc(None, str(path)) is None


def test_ram_perc_missing_field(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text("MemTotal: 100 kB\nMemFree: 50 kB\n")
    assert memory.ram_perc(None, str(path)) is None
    assert memory.ram_used(None, str(path)) is None


def test_swap_total_and_free(meminfo):
    assert memory.swap_total(None, meminfo) == fmt_human(2048 * 1024, 1024)
    assert memory.swap_free(None, meminfo) == fmt_human(1024 * 1024, 1024)


def test_swap_used_equals_free_when_half_used(meminfo):
    assert memory.swap_used(None, meminfo) == memory.swap_free(None, meminfo)


def test_swap_perc(meminfo):
    assert memory.swap_perc(None, meminfo) == "50"


def test_swap_perc_without_swap(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text("SwapTotal: 0 kB\nSwapFree: 0 kB\nSwapCached: 0 kB\n")
    assert memory.swap_perc(None, str(path)) is None


@pytest.mark.parametrize(
    "reader",
    [
        memory.ram_free,
        memory.ram_perc,
        memory.ram_total,
        memory.ram_used,
        memory.swap_free,
        memory.swap_perc,
        memory.swap_total,
        memory.swap_used,
    ],
)
def test_unreadable_file_gives_none(reader, tmp_path):
    assert reader(None, str(tmp_path / "absent")) is None