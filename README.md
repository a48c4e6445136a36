# wmkit

Small building blocks for a minimal tiling desktop on Linux:

- a **status line** made from system readings (CPU, memory, disk, network,
  battery, date and time, …), each put through a printf-style format and
  joined one after another;
- the **geometry of tiling layouts** with configurable gaps: tile, bottom
  stack, bottom stack with horizontal stack, centred master, centred
  floating master and deck.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## The `wmstatus` command

```
wmstatus        # set the X root window name every second
wmstatus -s     # print the status line to stdout every second
wmstatus -1     # print the status line once and exit
wmstatus -v     # write "wmstatus-1.0" to stderr and exit with status 1
```

Flags may be grouped (`-1s`), and `--` ends them. Any other flag or any
extra argument prints a usage message and exits with status 1.

Without `-s`, the `DISPLAY` environment variable must be set; the root
window name is set by running the external `xsetroot -name` program, and it
is cleared again when the loop ends.

SIGINT and SIGTERM end the loop; SIGUSR1 cuts the current wait short and
forces an immediate refresh.

The line that is shown is `wmkit.status.DEFAULT_ITEMS`: CPU usage, RAM
usage, the ESSID and receive speed of `wlan0`, the date (`%a, %d %m %Y`),
the time (`%I:%M %p`) and the charge of battery `BAT1`. Its colour codes
(`^c#rrggbb^ … ^d^`) come from the `oxocarbon` entry of
`wmkit.status.THEMES`; a `biscuit` theme is defined there as well.

## Readings

Each reading is a function whose first argument is a single string (or
`None` when it needs none) and which returns a string, or `None` when the
value cannot be read. Failures are reported on stderr via
`wmkit.util.warn`.

| module           | functions |
|------------------|-----------|
| `wmkit.cpu`      | `cpu_perc`, `cpu_freq`, `load_avg`, `entropy`, `temp` |
| `wmkit.memory`   | `ram_free`, `ram_perc`, `ram_total`, `ram_used`, `swap_free`, `swap_perc`, `swap_total`, `swap_used`, `parse_meminfo` |
| `wmkit.files`    | `cat`, `num_files`, `disk_free`, `disk_perc`, `disk_total`, `disk_used`, `run_command` |
| `wmkit.system`   | `datetime`, `hostname`, `kernel_release`, `uptime`, `uid`, `gid`, `username` |
| `wmkit.power`    | `battery_perc`, `battery_state`, `battery_remaining` |
| `wmkit.network`  | `netspeed_rx`, `netspeed_tx`, `ipv4`, `ipv6`, `wifi_perc`, `wifi_essid`, `rssi_to_perc` |

Readings that measure a rate compare with the previous call, so their
first call returns `None`. For separate counters, create your own
`wmkit.cpu.CpuPercent(stat_path)` or
`wmkit.network.NetSpeed(direction, interval, root)` (`direction` is `"rx"`
or `"tx"`, `interval` in milliseconds).

Most file-based readings take an extra path or root argument, which makes
them easy to point at test data, e.g. `ram_perc(None, "/tmp/meminfo")` or
`battery_state("BAT0", root="/tmp/power_supply")`.

Sizes are rendered by `wmkit.util.fmt_human(num, base)` with base 1000 or
1024, for example `fmt_human(1536, 1024) == "1.5 Ki"`.

### Building your own line

```python
from wmkit.cpu import cpu_perc
from wmkit.memory import ram_perc
from wmkit.system import datetime
from wmkit.status import StatusItem, build_status, run

items = [
    StatusItem(cpu_perc, " cpu %s%% |"),
    StatusItem(ram_perc, " mem %s%% |"),
    StatusItem(datetime, " %s", "%I:%M %p"),
]
print(build_status(items, unknown="?", maxlen=2048))

run(items, interval=1000, once=True, output=print)
```

In a format, `%s` is replaced by the value and `%%` by a percent sign. A
reading that returns `None` is shown as `unknown`. Items are added in
order until the next one would not fit into `maxlen` bytes (one kept for a
terminator); that one and the rest are left off.

## Tiling layouts

`wmkit.layout_model` holds a `Monitor` with its window area
(`wx`, `wy`, `ww`, `wh`), master count and factor (`nmaster`, `mfact`),
gap settings and a list of `Client`s. `Monitor.tiled()` gives the visible,
non-floating clients; the functions in `wmkit.layouts` — `tile`, `bstack`,
`bstackhoriz`, `centeredmaster`, `centeredfloatingmaster` and `deck` —
place each of them by calling `Client.resize`.

```python
from wmkit.layout_model import Client, Monitor
from wmkit.layouts import tile

m = Monitor(wx=0, wy=0, ww=1920, wh=1080, clients=[Client(), Client(), Client()])
tile(m)
for c in m.tiled():
    print(c.x, c.y, c.width(), c.height())
```

`Client.width()` and `Client.height()` include both borders (`bw`); each
client's `cfact` sets its share of its area. `deck` also writes
`D <n>` into `Monitor.ltsymbol` for the number of stacked clients.

Gaps are changed on the monitor with `set_gaps`, `incr_gaps`,
`incr_inner_gaps`, `incr_outer_gaps`, `incr_oh_gaps`, `incr_ov_gaps`,
`incr_ih_gaps`, `incr_iv_gaps`, `toggle_gaps` and `default_gaps`; negative
values are clamped to zero. With `smartgaps` set, outer gaps disappear
when only one client is tiled. After each change the monitor's `arrange`
callback, if set, is called with the monitor.

## What wmkit does not do

- It has no volume reading.
- It has no spiral, dwindle or grid layouts; only the six layouts listed
  above.
- It does not manage windows: the layouts compute geometry on `Client`
  objects, and nothing here talks to an X server except `wmstatus`, which
  sets the root window name through `xsetroot`.