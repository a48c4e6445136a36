import pytest

from wmkit.layout_model import DEFAULT_GAPS, Client, Gaps, Monitor


def _monitor(count=3, **kwargs):
    return Monitor(
        wx=0, wy=0, ww=1000, wh=600,
        clients=[Client() for _ in range(count)],
        **kwargs,
    )


def test_client_resize_truncates():
    c = Client(bw=2)
    c.resize(10.9, 20.2, 99.7, 50.5)
    assert (c.x, c.y, c.w, c.h) == (10, 20, 99, 50)


def test_client_outer_size_includes_borders():
    c = Client(bw=4)
    c.resize(0, 0, 100, 60)
    assert c.width() == 100 + 8
    assert c.height() == 60 + 8


def test_tiled_skips_floating_and_hidden():
    a, b, c = Client(), Client(isfloating=True), Client(visible=False)
    m = Monitor(clients=[a, b, c])
    assert m.tiled() == [a]


def test_gaps_reports_settings_and_count():
    m = _monitor(3, gappoh=1, gappov=2, gappih=3, gappiv=4)
    gaps, n = m.gaps()
    assert gaps == Gaps(oh=1, ov=2, ih=3, iv=4)
    assert n == 3


def test_gaps_disabled_are_zero():
    m = _monitor(2)
    m.toggle_gaps()
    gaps, _ = m.gaps()
    assert gaps == Gaps()
    m.toggle_gaps()
    assert m.gaps()[0] == DEFAULT_GAPS


def test_smartgaps_drop_outer_for_single_client():
    m = _monitor(1, smartgaps=True)
    gaps, n = m.gaps()
    assert n == 1
    assert (gaps.oh, gaps.ov) == (0, 0)
    assert (gaps.ih, gaps.iv) == (DEFAULT_GAPS.ih, DEFAULT_GAPS.iv)


def test_set_gaps_clamps_negative_and_arranges():
    calls = []
    m = _monitor(arrange=calls.append)
    m.set_gaps(-3, 7, -1, 2)
    assert (m.gappoh, m.gappov, m.gappih, m.gappiv) == (0, 7, 0, 2)
    assert calls == [m]


def test_incr_gaps_all_and_back_to_default():
    m = _monitor()
    m.incr_gaps(10)
    assert (m.gappoh, m.gappov, m.gappih, m.gappiv) == tuple(
        v + 10 for v in (DEFAULT_GAPS.oh, DEFAULT_GAPS.ov, DEFAULT_GAPS.ih, DEFAULT_GAPS.iv)
    )
    m.default_gaps()
    assert Gaps(m.gappoh, m.gappov, m.gappih, m.gappiv) == DEFAULT_GAPS


@pytest.mark.parametrize(
    "method, changed",
    [
        ("incr_inner_gaps", {"gappih", "gappiv"}),
        ("incr_outer_gaps", {"gappoh", "gappov"}),
        ("incr_oh_gaps", {"gappoh"}),
        ("incr_ov_gaps", {"gappov"}),
        ("incr_ih_gaps", {"gappih"}),
        ("incr_iv_gaps", {"gappiv"}),
    ],
)
def test_partial_increments(method, changed):
    m = _monitor(gappoh=1, gappov=1, gappih=1, gappiv=1)
    getattr(m, method)(2)
    for name in ("gappoh", "gappov", "gappih", "gappiv"):
        assert getattr(m, name) == (3 if name in changed else 1)


def test_decrement_never_goes_negative():
    m = _monitor(gappoh=2, gappov=2, gappih=2, gappiv=2)
    m.incr_gaps(-10)
    assert (m.gappoh, m.gappov, m.gappih, m.gappiv) == (0, 0, 0, 0)


def test_facts_sum_cfacts():
    m = _monitor(0, nmaster=2)
    m.clients = [Client(cfact=0.5), Client(cfact=1.5), Client(cfact=2.0)]
    mfacts, sfacts, mrest, srest = m.facts(600, 600)
    assert mfacts == pytest.approx(2.0)
    assert sfacts == pytest.approx(2.0)
    assert mrest == 0
    assert srest == 0


def test_facts_rest_is_below_client_count():
    m = _monitor(4, nmaster=1)
    _, sfacts, mrest, srest = m.facts(301, 301)
    assert sfacts == pytest.approx(3.0)
    assert mrest == 0
    assert 0 <= srest < 3


def test_facts_without_stack():
    m = _monitor(2, nmaster=5)
    mfacts, sfacts, _, srest = m.facts(400, 400)
    assert mfacts == pytest.approx(2.0)
    assert sfacts == 0
    assert srest == 400