import pytest

from wmkit.power import battery_perc, battery_remaining, battery_state


def make_battery(root, **files):
    bat = root / "BAT0"
    bat.mkdir()
    for name, value in files.items():
        (bat / name).write_text(value)
    return str(root)


def test_battery_perc(tmp_path):
    root = make_battery(tmp_path, capacity="87\n")
    assert battery_perc("BAT0", root) == "87"


def test_battery_perc_missing(tmp_path):
    assert battery_perc("BAT9", str(tmp_path)) is None


@pytest.mark.parametrize(
    "status,symbol",
    [
        ("Charging\n", "+"),
        ("Discharging\n", "-"),
        ("Full\n", "o"),
        ("Not charging\n", "o"),
        ("Unknown\n", "?"),
    ],
)
def test_battery_state(tmp_path, status, symbol):
    root = make_battery(tmp_path, status=status)
    assert battery_state("BAT0", root) == symbol


def test_battery_state_missing(tmp_path):
    assert battery_state("BAT0", str(tmp_path)) is None


def test_remaining_whole_hours(tmp_path):
    root = make_battery(
        tmp_path,
        status="Discharging\n",
        charge_now="3000000\n",
        current_now="1500000\n",
    )
    assert battery_remaining("BAT0", root) == "2h 0m"


def test_remaining_half_hour(tmp_path):
    root = make_battery(
        tmp_path, status="Discharging\n", charge_now="5000\n", current_now="2000\n"
    )
    assert battery_remaining("BAT0", root) == "2h 30m"


def test_remaining_uses_energy_and_power(tmp_path):
    root = make_battery(
        tmp_path, status="Discharging\n", energy_now="4000\n", power_now="4000\n"
    )
    result = battery_remaining("BAT0", root)
    assert result.startswith("1h ")
    assert result.endswith(" 0m")


def test_remaining_charging_is_empty(tmp_path):
    root = make_battery(
        tmp_path, status="Charging\n", charge_now="5000\n", current_now="2000\n"
    )
    assert battery_remaining("BAT0", root) == ""


def test_remaining_zero_current(tmp_path):
    root = make_battery(
        tmp_path, status="Discharging\n", charge_now="5000\n", current_now="0\n"
    )
    assert battery_remaining("BAT0", root) is None


def test_remaining_no_charge_file(tmp_path):
    root = make_battery(tmp_path, status="Discharging\n", current_now="10\n")
    assert battery_remaining("BAT0", root) is None