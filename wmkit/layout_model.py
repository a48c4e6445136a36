"""Clients, monitors and the gap settings that tiling layouts work with."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

BORDER_PX = 3


@dataclass(frozen=True)
class Gaps:
    """Outer horizontal/vertical and inner horizontal/vertical gaps in pixels."""

    oh: int = 0
    ov: int = 0
    ih: int = 0
    iv: int = 0


DEFAULT_GAPS = Gaps(oh=5, ov=5, ih=5, iv=5)


@dataclass(eq=False)
class Client:
    """A managed window with its geometry and size factor."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0
    bw: int = BORDER_PX
    cfact: float = 1.0
    isfloating: bool = False
    visible: bool = True
    name: str = ""

    def resize(self, x: float, y: float, w: float, h: float) -> None:
        """Move and resize; fractional values are truncated toward zero."""
        self.x, self.y, self.w, self.h = int(x), int(y), int(w), int(h)

    def width(self) -> int:
        """Outer width including both borders."""
        return self.w + 2 * self.bw

    def height(self) -> int:
        """Outer height including both borders."""
        return self.h + 2 * self.bw


@dataclass(eq=False)
class Monitor:
    """A screen area holding clients, the master settings and the gaps."""

    wx: int = 0
    wy: int = 0
    ww: int = 0
    wh: int = 0
    mfact: float = 0.5
    nmaster: int = 1
    gappoh: int = DEFAULT_GAPS.oh
    gappov: int = DEFAULT_GAPS.ov
    gappih: int = DEFAULT_GAPS.ih
    gappiv: int = DEFAULT_GAPS.iv
    clients: list[Client] = field(default_factory=list)
    enablegaps: bool = True
    smartgaps: bool = False
    gap_defaults: Gaps = DEFAULT_GAPS
    bh: int = 0
    ltsymbol: str = ""
    arrange: Callable[[Monitor], None] | None = None

    def _rearrange(self) -> None:
        if self.arrange is not None:
            self.arrange(self)

    def tiled(self) -> list[Client]:
        """Visible, non-floating clients in stacking order."""
        return [c for c in self.clients if c.visible and not c.isfloating]

    def gaps(self) -> tuple[Gaps, int]:
        """Effective gaps and the number of tiled clients."""
        n = len(self.tiled())
        inner = 1 if self.enablegaps else 0
        outer = 0 if self.smartgaps and n == 1 else inner
        effective = Gaps(
            oh=self.gappoh * outer,
            ov=self.gappov * outer,
            ih=self.gappih * inner,
            iv=self.gappiv * inner,
        )
        return effective, n

    def facts(self, msize: int, ssize: int) -> tuple[float, float, int, int]:
        """Total master and stack factors and the pixels left after splitting.

        Returns (mfacts, sfacts, mrest, srest).
        """
        tiled = self.tiled()
        split = max(self.nmaster, 0)
        masters, stack = tiled[:split], tiled[split:]
        mfacts = sum(c.cfact for c in masters)
        sfacts = sum(c.cfact for c in stack)
        mtotal = 0
        for c in masters:
            mtotal = int(mtotal + msize * (c.cfact / mfacts))
        stotal = 0
        for c in stack:
            stotal = int(stotal + ssize * (c.cfact / sfacts))
        return mfacts, sfacts, msize - mtotal, ssize - stotal

    def set_gaps(self, oh: int, ov: int, ih: int, iv: int) -> None:
        """Set all four gaps, clamping negatives to zero, and rearrange."""
        self.gappoh = max(oh, 0)
        self.gappov = max(ov, 0)
        self.gappih = max(ih, 0)
        self.gappiv = max(iv, 0)
        self._rearrange()

    def default_gaps(self) -> None:
        """Restore the configured gaps."""
        d = self.gap_defaults
        self.set_gaps(d.oh, d.ov, d.ih, d.iv)

    def toggle_gaps(self) -> None:
        """Switch all gaps on or off."""
        self.enablegaps = not self.enablegaps
        self._rearrange()

    def incr_gaps(self, delta: int) -> None:
        self.set_gaps(
            self.gappoh + delta,
            self.gappov + delta,
            self.gappih + delta,
            self.gappiv + delta,
        )

    def incr_inner_gaps(self, delta: int) -> None:
        self.set_gaps(
            self.gappoh, self.gappov, self.gappih + delta, self.gappiv + delta
        )

    def incr_outer_gaps(self, delta: int) -> None:
        self.set_gaps(
            self.gappoh + delta, self.gappov + delta, self.gappih, self.gappiv
        )

    def incr_oh_gaps(self, delta: int) -> None:
        self.set_gaps(self.gappoh + delta, self.gappov, self.gappih, self.gappiv)

    def incr_ov_gaps(self, delta: int) -> None:
        self.set_gaps(self.gappoh, self.gappov + delta, self.gappih, self.gappiv)

    def incr_ih_gaps(self, delta: int) -> None:
        self.set_gaps(self.gappoh, self.gappov, self.gappih + delta, self.gappiv)

    def incr_iv_gaps(self, delta: int) -> None:
        self.set_gaps(self.gappoh, self.gappov, self.gappih, self.gappiv + delta)