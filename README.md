# statwm

`statwm` is a library with two parts:

- **Status components** (`statwm.components`). Small functions that each
  take one argument and return a short text value about the system: CPU,
  memory, swap, battery, disks, network, wireless, volume, files and shell
  command output. They are the building blocks of a status line.
- **A tiling window manager model** (`statwm.wm`). Monitors, clients, tags,
  window rules, the tile and monocle layouts, and key and button binding
  configuration. It is pure Python and needs no display.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Status components

Each component is a plain function. It returns a string, or `None` when
there is no value to show yet (for example `cpu_perc` and the network speed
functions on their first call, which only record a baseline). When a value
cannot be read at all, `statwm.util.ComponentError` is raised.

| Function | Module | Argument |
|---|---|---|
| `battery_perc`, `battery_state`, `battery_remaining` | `statwm.components.battery` | battery name (`BAT0`) |
| `cat`, `num_files`, `run_command`, `temp`, `entropy` | `statwm.components.files` | path / directory / shell command / sensor file / unused |
| `cpu_freq`, `cpu_perc` | `statwm.components.cpu` | unused |
| `disk_free`, `disk_perc`, `disk_total`, `disk_used` | `statwm.components.disk` | mount point (`/`) |
| `ipv4`, `ipv6`, `netspeed_rx`, `netspeed_tx` | `statwm.components.netaddr` | interface (`eth0`) |
| `ram_free`, `ram_perc`, `ram_total`, `ram_used` | `statwm.components.ram` | unused |
| `swap_free`, `swap_perc`, `swap_total`, `swap_used` | `statwm.components.swap` | unused |
| `wifi_perc`, `wifi_essid` | `statwm.components.wifi` | interface (`wlan0`) |
| `vol_perc` | `statwm.components.volume` | mixer device (`/dev/mixer`) |

On Linux the values come from `/proc` and `/sys`; where those files are
absent, the battery, CPU frequency, memory, swap and network counter
components fall back to `psutil`.

Some of the parsing is available on its own, which is handy for testing or
for reading saved data:

- `statwm.components.cpu.busy_percent(previous, current)` and the stateful
  `CpuPercent` class.
- `statwm.components.netaddr.NetSpeed(counter, interval)`, which turns any
  growing byte counter into a rate.
- `statwm.components.ram.parse_meminfo(text)` and
  `statwm.components.swap.swap_info(text)`.
- `statwm.components.wifi.parse_wireless_link(text, interface)`.
- `statwm.components.keyboard.format_indicators(fmt, led_mask)` renders caps
  and num lock state: `c` and `n` letters, each optionally followed by `?`.
  `statwm.components.keyboard.get_layout(symbols, group)` picks a layout name
  out of an XKB symbols string.

Sizes are printed with binary or decimal prefixes by
`statwm.util.fmt_human`. For example, `fmt_human(1536, 1024)` gives
`"1.5 Ki"`.

```python
from statwm.components.disk import disk_perc
from statwm.components.ram import ram_used
from statwm.util import ComponentError

try:
    print(f"disk {disk_perc('/')}% ram {ram_used(None)}")
except ComponentError as err:
    print("n/a", err)
```

## The window manager model

`statwm.wm.model` holds the data: `Rect`, `Layout`, `Rule`, `Client` and
`Monitor`. A monitor keeps its clients in list order and a separate focus
stack, and knows its window area and bar position (`update_bar_pos`).
`apply_rules` matches a window's title, class and instance against rules and
returns whether it floats, its tags and its monitor.

`statwm.wm.layouts` provides `tile` and `monocle`. Each takes a monitor and a
`resize(client, x, y, w, h, interact)` callback:

```python
from statwm.wm.layouts import tile
from statwm.wm.model import Client, Monitor

m = Monitor(mw=1000, mh=800, wx=0, wy=0, ww=1000, wh=800)
a = Client(window=1, tags=1, mon=m)
b = Client(window=2, tags=1, mon=m)
m.attach(a)
m.attach(b)   # b is now first and becomes the master

def resize(c, x, y, w, h, interact):
    c.x, c.y, c.w, c.h = x, y, w, h

tile(m, resize)
# b -> (0, 0, 550, 800), a -> (550, 0, 450, 800)
```

`statwm.wm.config` describes a configuration: `Config` (appearance, tags,
rules, `mfact`, `nmaster`, layouts, commands and bindings), `KeyBinding`,
`ButtonBinding`, the `Mod`, `Click` and `Scheme` enums, and `clean_mask`,
which strips lock modifiers from a modifier mask. `default_config()` returns
the stock setup with nine tags; `statwm.wm.userconfig.user_config()` returns
a personal variant with five tags, the Super key as modifier and extra
launcher keys.

## What this package does not do

- There is no command and no loop that gathers components into a status line
  at an interval. It also cannot set the root window name on an X display.
  Call the components yourself and join their output.
- There are no components for date and time, host name, kernel release, load
  average, uptime or user and group ids.
- The window manager model does not connect to an X server, handle events,
  apply client size hints or dispatch key and button bindings. It holds the
  state, the rules, the layouts and the configuration only.