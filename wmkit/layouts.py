"""Tiling layouts with gaps: tile, bottom stack, centred master and deck."""

from __future__ import annotations

from wmkit.layout_model import Monitor

_UINT = 1 << 32


def _bump(index: int, rest: int) -> int:
    """One extra pixel for the first *rest* clients, compared as unsigned."""
    return 1 if index % _UINT < rest % _UINT else 0


def _cdiv(numerator: int, denominator: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return -quotient if (numerator < 0) != (denominator < 0) else quotient


def tile(m: Monitor) -> None:
    """Master column on the left, stack column on the right."""
    g, n = m.gaps()
    if n == 0:
        return
    oh, ov, ih, iv = g.oh, g.ov, g.ih, g.iv

    sx = mx = m.wx + ov
    sy = my = m.wy + oh
    mh = m.wh - 2 * oh - ih * (min(n, m.nmaster) - 1)
    sh = m.wh - 2 * oh - ih * (n - m.nmaster - 1)
    sw = mw = m.ww - 2 * ov

    if m.nmaster and n > m.nmaster:
        sw = int((mw - iv) * (1 - m.mfact))
        mw = mw - iv - sw
        sx = mx + mw + iv

    mfacts, sfacts, mrest, srest = m.facts(mh, sh)

    for i, c in enumerate(m.tiled()):
        if i < m.nmaster:
            c.resize(
                mx, my, mw - 2 * c.bw,
                mh * (c.cfact / mfacts) + _bump(i, mrest) - 2 * c.bw,
            )
            my += c.height() + ih
        else:
            c.resize(
                sx, sy, sw - 2 * c.bw,
                sh * (c.cfact / sfacts) + _bump(i - m.nmaster, srest) - 2 * c.bw,
            )
            sy += c.height() + ih


def bstack(m: Monitor) -> None:
    """Master row on top, stack row below, both split horizontally."""
    g, n = m.gaps()
    if n == 0:
        return
    oh, ov, ih, iv = g.oh, g.ov, g.ih, g.iv

    sx = mx = m.wx + ov
    sy = my = m.wy + oh
    sh = mh = m.wh - 2 * oh
    mw = m.ww - 2 * ov - iv * (min(n, m.nmaster) - 1)
    sw = m.ww - 2 * ov - iv * (n - m.nmaster - 1)

    if m.nmaster and n > m.nmaster:
        sh = int((mh - ih) * (1 - m.mfact))
        mh = mh - ih - sh
        sx = mx
        sy = my + mh + ih

    mfacts, sfacts, mrest, srest = m.facts(mw, sw)

    for i, c in enumerate(m.tiled()):
        if i < m.nmaster:
            c.resize(
                mx, my,
                mw * (c.cfact / mfacts) + _bump(i, mrest) - 2 * c.bw,
                mh - 2 * c.bw,
            )
            mx += c.width() + iv
        else:
            c.resize(
                sx, sy,
                sw * (c.cfact / sfacts) + _bump(i - m.nmaster, srest) - 2 * c.bw,
                sh - 2 * c.bw,
            )
            sx += c.width() + iv


def bstackhoriz(m: Monitor) -> None:
    """Master row on top, stack clients piled below at full width."""
    g, n = m.gaps()
    if n == 0:
        return
    oh, ov, ih, iv = g.oh, g.ov, g.ih, g.iv

    sx = mx = m.wx + ov
    sy = my = m.wy + oh
    mh = m.wh - 2 * oh
    sh = m.wh - 2 * oh - ih * (n - m.nmaster - 1)
    mw = m.ww - 2 * ov - iv * (min(n, m.nmaster) - 1)
    sw = m.ww - 2 * ov

    if m.nmaster and n > m.nmaster:
        sh = int((mh - ih) * (1 - m.mfact))
        mh = mh - ih - sh
        sy = my + mh + ih
        sh = m.wh - mh - 2 * oh - ih * (n - m.nmaster)

    mfacts, sfacts, mrest, srest = m.facts(mw, sh)

    for i, c in enumerate(m.tiled()):
        if i < m.nmaster:
            c.resize(
                mx, my,
                mw * (c.cfact / mfacts) + _bump(i, mrest) - 2 * c.bw,
                mh - 2 * c.bw,
            )
            mx += c.width() + iv
        else:
            c.resize(
                sx, sy, sw - 2 * c.bw,
                sh * (c.cfact / sfacts) + _bump(i - m.nmaster, srest) - 2 * c.bw,
            )
            sy += c.height() + ih


def centeredmaster(m: Monitor) -> None:
    """Master column in the centre, stack clients alternating right and left."""
    g, n = m.gaps()
    if n == 0:
        return
    oh, ov, ih, iv = g.oh, g.ov, g.ih, g.iv
    nmaster = m.nmaster
    stack = max(n - nmaster, 0)

    mx = m.wx + ov
    my = m.wy + oh
    mh = m.wh - 2 * oh - ih * ((min(n, nmaster) if nmaster else n) - 1)
    mw = m.ww - 2 * ov
    lh = m.wh - 2 * oh - ih * (stack // 2 - 1)
    rh = m.wh - 2 * oh - ih * (stack // 2 - (0 if stack % 2 else 1))
    lx = ly = lw = 0
    rx = ry = rw = 0

    if nmaster and n > nmaster:
        if n - nmaster > 1:
            mw = int((m.ww - 2 * ov - 2 * iv) * m.mfact)
            lw = _cdiv(m.ww - mw - 2 * ov - 2 * iv, 2)
            rw = (m.ww - mw - 2 * ov - 2 * iv) - lw
            mx += lw + iv
        else:
            mw = int((mw - iv) * m.mfact)
            lw = 0
            rw = m.ww - mw - iv - 2 * ov
        lx = m.wx + ov
        ly = m.wy + oh
        rx = mx + mw + iv
        ry = m.wy + oh

    tiled = m.tiled()

    def area(index: int) -> str:
        if not nmaster or index < nmaster:
            return "master"
        return "left" if (index - nmaster) % 2 else "right"

    areas = [area(i) for i in range(len(tiled))]
    factors = {"master": 0.0, "left": 0.0, "right": 0.0}
    for c, where in zip(tiled, areas):
        factors[where] += c.cfact

    sizes = {"master": mh, "left": lh, "right": rh}
    totals = {"master": 0, "left": 0, "right": 0}
    for c, where in zip(tiled, areas):
        totals[where] = int(
            totals[where] + sizes[where] * (c.cfact / factors[where])
        )

    mrest = mh - totals["master"]
    lrest = lh - totals["left"]
    rrest = rh - totals["right"]

    for i, (c, where) in enumerate(zip(tiled, areas)):
        if where == "master":
            c.resize(
                mx, my, mw - 2 * c.bw,
                mh * (c.cfact / factors["master"]) + _bump(i, mrest) - 2 * c.bw,
            )
            my += c.height() + ih
        elif where == "left":
            c.resize(
                lx, ly, lw - 2 * c.bw,
                lh * (c.cfact / factors["left"])
                + _bump(i - 2 * nmaster, 2 * lrest) - 2 * c.bw,
            )
            ly += c.height() + ih
        else:
            c.resize(
                rx, ry, rw - 2 * c.bw,
                rh * (c.cfact / factors["right"])
                + _bump(i - 2 * nmaster, 2 * rrest) - 2 * c.bw,
            )
            ry += c.height() + ih


def centeredfloatingmaster(m: Monitor) -> None:
    """Stack row across the screen with the master row floating in the centre."""
    g, n = m.gaps()
    if n == 0:
        return
    oh, ov, ih, iv = g.oh, g.ov, g.ih, g.iv
    mivf = 1.0

    sx = mx = m.wx + ov
    sy = my = m.wy + oh
    sh = mh = m.wh - 2 * oh
    mw = m.ww - 2 * ov - iv * (n - 1)
    sw = m.ww - 2 * ov - iv * (n - m.nmaster - 1)

    if m.nmaster and n > m.nmaster:
        mivf = 0.8
        masters = min(n, m.nmaster) - 1
        if m.ww > m.wh:
            mw = int(m.ww * m.mfact - iv * mivf * masters)
            mh = int(m.wh * 0.9)
        else:
            mw = int(m.ww * 0.9 - iv * mivf * masters)
            mh = int(m.wh * m.mfact)
        mx = m.wx + _cdiv(m.ww - mw, 2)
        my = m.wy + _cdiv(m.wh - mh - 2 * oh, 2)

        sx = m.wx + ov
        sy = m.wy + oh
        sh = m.wh - 2 * oh

    mfacts, sfacts, mrest, srest = m.facts(mw, sw)

    for i, c in enumerate(m.tiled()):
        if i < m.nmaster:
            c.resize(
                mx, my,
                mw * (c.cfact / mfacts) + _bump(i, mrest) - 2 * c.bw,
                mh - 2 * c.bw,
            )
            mx = int(mx + c.width() + iv * mivf)
        else:
            c.resize(
                sx, sy,
                sw * (c.cfact / sfacts) + _bump(i - m.nmaster, srest) - 2 * c.bw,
                sh - 2 * c.bw,
            )
            sx += c.width() + iv


def deck(m: Monitor) -> None:
    """Master column on the left, stack clients piled on one another on the right."""
    g, n = m.gaps()
    if n == 0:
        return
    oh, ov, ih, iv = g.oh, g.ov, g.ih, g.iv

    sx = mx = m.wx + ov
    sy = my = m.wy + oh
    sh = mh = m.wh - 2 * oh - ih * (min(n, m.nmaster) - 1)
    sw = mw = m.ww - 2 * ov

    if m.nmaster and n > m.nmaster:
        sw = int((mw - iv) * (1 - m.mfact))
        mw = mw - iv - sw
        sx = mx + mw + iv
        sh = m.wh - 2 * oh

    mfacts, _sfacts, mrest, _srest = m.facts(mh, sh)

    if n != m.nmaster:
        m.ltsymbol = f"D {n - m.nmaster}"[:15]

    for i, c in enumerate(m.tiled()):
        if i < m.nmaster:
            c.resize(
                mx, my, mw - 2 * c.bw,
                mh * (c.cfact / mfacts) + _bump(i, mrest) - 2 * c.bw,
            )
            my += c.height() + ih
        else:
            c.resize(sx, sy, sw - 2 * c.bw, sh - 2 * c.bw)