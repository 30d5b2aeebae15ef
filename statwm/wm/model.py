"""Core window-manager data: geometry, layouts, rules, clients and monitors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional, Sequence

BROKEN = "broken"


@dataclass
class Rect:
    """A rectangle in root-window coordinates."""

    x: int
    y: int
    w: int
    h: int


@dataclass(frozen=True)
class Layout:
    """A layout symbol and its arrange function; no function means floating."""

    symbol: str
    arrange: Optional[Callable[..., Any]] = None


@dataclass(frozen=True)
class Rule:
    """A window rule matched by substrings of class, instance and title."""

    klass: Optional[str] = None
    instance: Optional[str] = None
    title: Optional[str] = None
    tags: int = 0
    isfloating: bool = False
    monitor: int = -1


@dataclass(eq=False)
class Client:
    """A managed top-level window."""

    window: int
    name: str = ""
    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0
    oldx: int = 0
    oldy: int = 0
    oldw: int = 0
    oldh: int = 0
    bw: int = 0
    oldbw: int = 0
    tags: int = 0
    isfixed: bool = False
    isfloating: bool = False
    isurgent: bool = False
    neverfocus: bool = False
    oldstate: bool = False
    isfullscreen: bool = False
    hints: Any = None
    hints_valid: bool = False
    mon: Optional["Monitor"] = None

    def visible(self) -> bool:
        """Whether the client's tags intersect its monitor's current tag set."""
        if self.mon is None:
            return False
        return bool(self.tags & self.mon.tagset[self.mon.seltags])

    def width(self) -> int:
        """Outer width including both borders."""
        return self.w + 2 * self.bw

    def height(self) -> int:
        """Outer height including both borders."""
        return self.h + 2 * self.bw


def _default_layouts() -> list[Layout]:
    floating = Layout("><>")
    return [floating, floating]


@dataclass(eq=False)
class Monitor:
    """One screen with its clients, focus stack, bar and layout state."""

    num: int = 0
    mfact: float = 0.55
    nmaster: int = 1
    showbar: bool = True
    topbar: bool = True
    ltsymbol: str = ""
    by: int = 0
    mx: int = 0
    my: int = 0
    mw: int = 0
    mh: int = 0
    wx: int = 0
    wy: int = 0
    ww: int = 0
    wh: int = 0
    seltags: int = 0
    sellt: int = 0
    tagset: list[int] = field(default_factory=lambda: [1, 1])
    lt: list[Layout] = field(default_factory=_default_layouts)
    clients: list[Client] = field(default_factory=list)
    stack: list[Client] = field(default_factory=list)
    sel: Optional[Client] = None
    barwin: int = 0

    def __post_init__(self) -> None:
        if not self.ltsymbol:
            self.ltsymbol = self.lt[0].symbol[:15]

    @property
    def layout(self) -> Layout:
        """The currently selected layout."""
        return self.lt[self.sellt]

    def update_bar_pos(self, bar_height: int) -> None:
        """Recompute the window area and bar position from the screen area."""
        self.wy = self.my
        self.wh = self.mh
        if self.showbar:
            self.wh -= bar_height
            self.by = self.wy if self.topbar else self.wy + self.wh
            self.wy = self.wy + bar_height if self.topbar else self.wy
        else:
            self.by = -bar_height

    def intersect(self, x: int, y: int, w: int, h: int) -> int:
        """Area of overlap between a rectangle and this monitor's window area."""
        dx = max(0, min(x + w, self.wx + self.ww) - max(x, self.wx))
        dy = max(0, min(y + h, self.wy + self.wh) - max(y, self.wy))
        return dx * dy

    def attach(self, client: Client) -> None:
        """Put ``client`` at the head of the client list."""
        self.clients.insert(0, client)

    def detach(self, client: Client) -> None:
        """Remove ``client`` from the client list if present."""
        if client in self.clients:
            self.clients.remove(client)

    def attach_stack(self, client: Client) -> None:
        """Put ``client`` at the top of the focus stack."""
        self.stack.insert(0, client)

    def detach_stack(self, client: Client) -> None:
        """Remove ``client`` from the focus stack, reselecting if it was selected."""
        if client in self.stack:
            self.stack.remove(client)
        if client is self.sel:
            self.sel = next((c for c in self.stack if c.visible()), None)

    def tiled(self) -> Iterator[Client]:
        """Visible, non-floating clients in list order."""
        return (c for c in self.clients if not c.isfloating and c.visible())

    def next_tiled(self, client: Optional[Client] = None) -> Optional[Client]:
        """The first tiled client after ``client``, or the first tiled one if None."""
        if client is None:
            candidates: Sequence[Client] = self.clients
        else:
            candidates = self.clients[self.clients.index(client) + 1:]
        return next(
            (c for c in candidates if not c.isfloating and c.visible()), None
        )


def apply_rules(
    rules: Sequence[Rule],
    name: str,
    klass: Optional[str],
    instance: Optional[str],
    monitors: Sequence[Monitor],
    current: Monitor,
    tagmask: int,
) -> tuple[bool, int, Monitor]:
    """Match rules against a window; return (isfloating, tags, monitor)."""
    klass = klass if klass else BROKEN
    instance = instance if instance else BROKEN
    isfloating = False
    tags = 0
    monitor = current
    for rule in rules:
        if (
            (not rule.title or rule.title in name)
            and (not rule.klass or rule.klass in klass)
            and (not rule.instance or rule.instance in instance)
        ):
            isfloating = rule.isfloating
            tags |= rule.tags
            found = next((m for m in monitors if m.num == rule.monitor), None)
            if found is not None:
                monitor = found
    tags = tags & tagmask if tags & tagmask else monitor.tagset[monitor.seltags]
    return isfloating, tags, monitor