"""The personal configuration: larger fonts, dark colours, five tags."""

from __future__ import annotations

import dataclasses

from statwm.wm.config import (
    XK,
    Config,
    KeyBinding,
    Mod,
    Scheme,
    default_buttons,
    default_keys,
    shcmd,
)
from statwm.wm.model import Rule

FONT = "Fira code:size=14"
DMENU_FONT = "Fira code:size=12"
COL_GRAY1 = "#121212"
COL_GRAY2 = "#444444"
COL_GRAY3 = "#bbbbbb"
COL_GRAY4 = "#eeeeee"
COL_CYAN = "#1c1c1c"
MODKEY = Mod.MOD4
TERMCMD = ("alacritty",)


def user_config() -> Config:
    """The personal configuration with its key and button bindings."""
    colors = {
        Scheme.NORM: (COL_GRAY3, COL_GRAY1, COL_GRAY2),
        Scheme.SEL: (COL_GRAY4, COL_CYAN, COL_CYAN),
    }
    base = Config(
        fonts=(FONT,),
        dmenufont=DMENU_FONT,
        colors=colors,
        tags=tuple("12345"),
        rules=(
            Rule(klass="Discord", instance="discord", tags=0, isfloating=True, monitor=-1),
            Rule(klass="Firefox", tags=1 << 8, isfloating=False, monitor=-1),
            Rule(klass="Alacritty", tags=0, isfloating=False, monitor=-1),
        ),
        modkey=MODKEY,
        termcmd=TERMCMD,
    )
    keys = [
        KeyBinding(MODKEY, XK["p"], "spawn", base.dmenucmd),
        KeyBinding(MODKEY | Mod.SHIFT, XK["Return"], "spawn", TERMCMD),
        KeyBinding(MODKEY, XK["a"], "spawn", shcmd("firefox")),
        KeyBinding(MODKEY, XK["e"], "spawn", shcmd("thunar")),
        KeyBinding(MODKEY, XK["c"], "spawn", shcmd("vscodium")),
        KeyBinding(MODKEY, XK["u"], "spawn", shcmd("alacritty -e cmus")),
        *default_keys(MODKEY, base.layouts),
    ]
    buttons = default_buttons(MODKEY, base.layouts, TERMCMD)
    return dataclasses.replace(base, keys=tuple(keys), buttons=tuple(buttons))