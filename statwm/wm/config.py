"""Window-manager configuration: appearance, tags, rules, layouts and bindings."""

from __future__ import annotations

import dataclasses
import string
from dataclasses import dataclass, field
from enum import IntEnum, IntFlag
from typing import Any

from statwm.wm.layouts import monocle, tile
from statwm.wm.model import Layout, Rule


class Mod(IntFlag):
    """X modifier masks."""

    SHIFT = 1
    LOCK = 2
    CONTROL = 4
    MOD1 = 8
    MOD2 = 16
    MOD3 = 32
    MOD4 = 64
    MOD5 = 128


class Click(IntEnum):
    """Where a pointer button was pressed."""

    TAG_BAR = 0
    LT_SYMBOL = 1
    STATUS_TEXT = 2
    WIN_TITLE = 3
    CLIENT_WIN = 4
    ROOT_WIN = 5


class Scheme(IntEnum):
    """Colour scheme indices."""

    NORM = 0
    SEL = 1


BUTTON1 = 1
BUTTON2 = 2
BUTTON3 = 3

ALL_TAGS = 0xFFFFFFFF
MAX_TAGS = 31
DMENU_MON_INDEX = 2

XK: dict[str, int] = {
    **{c: ord(c) for c in string.ascii_lowercase},
    **{d: ord(d) for d in string.digits},
    "Return": 0xFF0D,
    "Tab": 0xFF09,
    "space": 0x20,
    "comma": 0x2C,
    "period": 0x2E,
}

COL_GRAY1 = "#222222"
COL_GRAY2 = "#444444"
COL_GRAY3 = "#bbbbbb"
COL_GRAY4 = "#eeeeee"
COL_CYAN = "#005577"
FONT = "monospace:size=10"

_CLEAN = (
    Mod.SHIFT | Mod.CONTROL | Mod.MOD1 | Mod.MOD2 | Mod.MOD3 | Mod.MOD4 | Mod.MOD5
)

DEFAULT_LAYOUTS = (Layout("[]=", tile), Layout("><>"), Layout("[M]", monocle))


def shcmd(cmd: str) -> tuple[str, ...]:
    """Argument vector running ``cmd`` through the shell."""
    return ("/bin/sh", "-c", cmd)


def clean_mask(mask: int, numlock_mask: int) -> int:
    """Strip lock modifiers and keep only the meaningful modifier bits."""
    return int(mask) & ~(int(numlock_mask) | Mod.LOCK) & _CLEAN


@dataclass(frozen=True)
class KeyBinding:
    """A key combination bound to a named action."""

    mod: int
    keysym: int
    func: str
    arg: Any = None


@dataclass(frozen=True)
class ButtonBinding:
    """A pointer button on a bar region or window bound to a named action."""

    click: Click
    mask: int
    button: int
    func: str
    arg: Any = None


def tag_keys(key: int, tag: int, modkey: int) -> list[KeyBinding]:
    """The four bindings that view, toggle, tag and toggle-tag one tag."""
    mask = 1 << tag
    return [
        KeyBinding(modkey, key, "view", mask),
        KeyBinding(modkey | Mod.CONTROL, key, "toggleview", mask),
        KeyBinding(modkey | Mod.SHIFT, key, "tag", mask),
        KeyBinding(modkey | Mod.CONTROL | Mod.SHIFT, key, "toggletag", mask),
    ]


def default_keys(modkey: int, layouts: tuple[Layout, ...]) -> list[KeyBinding]:
    """Standard bindings after the spawn keys, tag keys included."""
    keys = [
        KeyBinding(modkey, XK["b"], "togglebar"),
        KeyBinding(modkey, XK["j"], "focusstack", +1),
        KeyBinding(modkey, XK["k"], "focusstack", -1),
        KeyBinding(modkey, XK["i"], "incnmaster", +1),
        KeyBinding(modkey, XK["d"], "incnmaster", -1),
        KeyBinding(modkey, XK["h"], "setmfact", -0.05),
        KeyBinding(modkey, XK["l"], "setmfact", +0.05),
        KeyBinding(modkey, XK["Return"], "zoom"),
        KeyBinding(modkey, XK["Tab"], "view"),
        KeyBinding(modkey | Mod.SHIFT, XK["c"], "killclient"),
        KeyBinding(modkey, XK["t"], "setlayout", layouts[0]),
        KeyBinding(modkey, XK["f"], "setlayout", layouts[1]),
        KeyBinding(modkey, XK["m"], "setlayout", layouts[2]),
        KeyBinding(modkey, XK["space"], "setlayout"),
        KeyBinding(modkey | Mod.SHIFT, XK["space"], "togglefloating"),
        KeyBinding(modkey, XK["0"], "view", ALL_TAGS),
        KeyBinding(modkey | Mod.SHIFT, XK["0"], "tag", ALL_TAGS),
        KeyBinding(modkey, XK["comma"], "focusmon", -1),
        KeyBinding(modkey, XK["period"], "focusmon", +1),
        KeyBinding(modkey | Mod.SHIFT, XK["comma"], "tagmon", -1),
        KeyBinding(modkey | Mod.SHIFT, XK["period"], "tagmon", +1),
    ]
    for tag, digit in enumerate("123456789"):
        keys.extend(tag_keys(XK[digit], tag, modkey))
    keys.append(KeyBinding(modkey | Mod.SHIFT, XK["q"], "quit"))
    return keys


def default_buttons(
    modkey: int, layouts: tuple[Layout, ...], termcmd: tuple[str, ...]
) -> list[ButtonBinding]:
    """Standard pointer bindings."""
    return [
        ButtonBinding(Click.LT_SYMBOL, 0, BUTTON1, "setlayout"),
        ButtonBinding(Click.LT_SYMBOL, 0, BUTTON3, "setlayout", layouts[2]),
        ButtonBinding(Click.WIN_TITLE, 0, BUTTON2, "zoom"),
        ButtonBinding(Click.STATUS_TEXT, 0, BUTTON2, "spawn", termcmd),
        ButtonBinding(Click.CLIENT_WIN, modkey, BUTTON1, "movemouse"),
        ButtonBinding(Click.CLIENT_WIN, modkey, BUTTON2, "togglefloating"),
        ButtonBinding(Click.CLIENT_WIN, modkey, BUTTON3, "resizemouse"),
        ButtonBinding(Click.TAG_BAR, 0, BUTTON1, "view"),
        ButtonBinding(Click.TAG_BAR, 0, BUTTON3, "toggleview"),
        ButtonBinding(Click.TAG_BAR, modkey, BUTTON1, "tag"),
        ButtonBinding(Click.TAG_BAR, modkey, BUTTON3, "toggletag"),
    ]


def _default_colors() -> dict[Scheme, tuple[str, str, str]]:
    return {
        Scheme.NORM: (COL_GRAY3, COL_GRAY1, COL_GRAY2),
        Scheme.SEL: (COL_GRAY4, COL_CYAN, COL_CYAN),
    }


def _dmenu_command(font: str, colors: dict[Scheme, tuple[str, str, str]]) -> tuple[str, ...]:
    norm_fg, norm_bg, _ = colors[Scheme.NORM]
    sel_fg, sel_bg, _ = colors[Scheme.SEL]
    return (
        "dmenu_run", "-m", "0", "-fn", font,
        "-nb", norm_bg, "-nf", norm_fg, "-sb", sel_bg, "-sf", sel_fg,
    )


@dataclass
class Config:
    """Everything the window manager is configured with."""

    borderpx: int = 1
    snap: int = 32
    showbar: bool = True
    topbar: bool = True
    fonts: tuple[str, ...] = (FONT,)
    dmenufont: str = FONT
    colors: dict[Scheme, tuple[str, str, str]] = field(default_factory=_default_colors)
    tags: tuple[str, ...] = tuple("123456789")
    rules: tuple[Rule, ...] = (
        Rule(klass="Gimp", tags=0, isfloating=True, monitor=-1),
        Rule(klass="Firefox", tags=1 << 8, isfloating=False, monitor=-1),
    )
    mfact: float = 0.55
    nmaster: int = 1
    resizehints: bool = True
    lockfullscreen: bool = True
    layouts: tuple[Layout, ...] = DEFAULT_LAYOUTS
    modkey: int = Mod.MOD1
    dmenucmd: tuple[str, ...] = ()
    termcmd: tuple[str, ...] = ("st",)
    keys: tuple[KeyBinding, ...] = ()
    buttons: tuple[ButtonBinding, ...] = ()

    def __post_init__(self) -> None:
        if len(self.tags) > MAX_TAGS:
            raise ValueError(f"at most {MAX_TAGS} tags fit into the tag mask")
        if not self.layouts:
            raise ValueError("at least one layout is required")
        if not self.dmenucmd:
            self.dmenucmd = _dmenu_command(self.dmenufont, self.colors)

    def tagmask(self) -> int:
        """Bit mask covering every configured tag."""
        return (1 << len(self.tags)) - 1


def default_config() -> Config:
    """The stock configuration with its key and button bindings."""
    base = Config()
    keys = [
        KeyBinding(base.modkey, XK["p"], "spawn", base.dmenucmd),
        KeyBinding(base.modkey | Mod.SHIFT, XK["Return"], "spawn", base.termcmd),
        *default_keys(base.modkey, base.layouts),
    ]
    buttons = default_buttons(base.modkey, base.layouts, base.termcmd)
    return dataclasses.replace(base, keys=tuple(keys), buttons=tuple(buttons))