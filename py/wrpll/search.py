
from .budget import budget_for
from .constants import *

from dataclasses import dataclass
from typing import NoReturn

__all__ = 'RNP', 'SearchFailed', 'compute_rnp', 'fail', 'in_range', \
    'n2_range', 'p_range', 'r2_range', 'update_rnp', 'wrpll_dividers'

class SearchFailed(RuntimeError):
    pass

def fail(why: str) -> NoReturn:
    raise SearchFailed(why)

@dataclass
class RNP:
    '''WRPLL dividers.  n2 and r2 are twice the N and R dividers, which keeps
    the arithmetic integral.  p == 0 means nothing found yet.'''
    p: int = 0
    n2: int = 0
    r2: int = 0

    def is_set(self) -> bool:
        return self.p != 0

    def set(self, r2: int, n2: int, p: int) -> None:
        self.p = p
        self.n2 = n2
        self.r2 = r2

    def __str__(self) -> str:
        return f'({self.r2},{self.n2},{self.p})'

def r2_range() -> range:
    # Ref = LC_FREQ / R, and we want REF_MIN <= Ref <= REF_MAX.  With R2 = 2 * R
    # this gives LC_FREQ * 2 / REF_MAX < r2 < LC_FREQ * 2 / REF_MIN.
    return range(LC_FREQ * 2 // REF_MAX + 1, LC_FREQ * 2 // REF_MIN + 1)

def n2_range(r2: int) -> range:
    # VCO = N * LC_FREQ / R, and we want VCO_MIN <= VCO <= VCO_MAX.  With
    # R2 = 2 * R and N2 = 2 * N this gives
    # VCO_MIN * r2 / LC_FREQ < n2 < VCO_MAX * r2 / LC_FREQ.
    return range(VCO_MIN * r2 // LC_FREQ + 1, VCO_MAX * r2 // LC_FREQ + 1)

def p_range() -> range:
    return range(P_MIN, P_MAX + 1, P_INC)

def in_range(rnp: RNP) -> bool:
    '''Check that the dividers are ones that compute_rnp can produce.'''
    return rnp.r2 in r2_range() and rnp.n2 in n2_range(rnp.r2) \
        and rnp.p in p_range()

def update_rnp(freq2k: int, budget: int, r2: int, n2: int, p: int,
               best: RNP) -> None:
    '''Replace best with (r2, n2, p) if the latter is better.

    The output clock is (LC_FREQ_2K / 2000) * N / (P * R), which compares to
    freq2k.  The error is

        delta = 1e6 * abs(freq2k - (LC_FREQ_2K * n2 / (p * r2))) / freq2k

    and we would like delta <= budget.  Everything is cross multiplied so
    that it stays in integers, and the results must match the known good
    table bit for bit.

    If the error is over budget, always prefer to improve upon it.  If within
    budget, try to maximise Ref * VCO, that is N / (P * R^2).'''
    if not best.is_set():
        best.set(r2, n2, p)
        return

    a = freq2k * budget * p * r2
    b = freq2k * budget * best.p * best.r2
    diff = abs(freq2k * p * r2 - LC_FREQ_2K * n2)
    diff_best = abs(freq2k * best.p * best.r2 - LC_FREQ_2K * best.n2)
    c = 1000000 * diff
    d = 1000000 * diff_best

    if a < c and b < d:
        # Both over budget, take the closer.
        if best.p * best.r2 * diff < p * r2 * diff_best:
            best.set(r2, n2, p)
    elif a >= c and b < d:
        # Candidate within budget, best is not.
        best.set(r2, n2, p)
    elif a >= c and b >= d:
        # Both within budget, take the higher n2 / (r2 * r2).
        if n2 * best.r2 * best.r2 > best.n2 * r2 * r2:
            best.set(r2, n2, p)
    # Otherwise a < c and b >= d, keep best.

def compute_rnp(clock: int) -> RNP:
    '''Search for the WRPLL dividers for a clock in Hz.

    Returns a zero RNP if nothing was found, which cannot happen for sane
    pixel clocks.'''
    freq2k = clock // 100

    # 540MHz bypasses the WRPLL entirely and passes the LC PLL through.
    if freq2k == BYPASS_FREQ2K:
        return RNP(p=1, n2=2, r2=2)

    budget = budget_for(clock)
    best = RNP()
    for r2 in r2_range():
        for n2 in n2_range(r2):
            for p in p_range():
                update_rnp(freq2k, budget, r2, n2, p, best)

    return best

def wrpll_dividers(clock: int) -> RNP:
    '''As compute_rnp, but fail if there is no result.'''
    rnp = compute_rnp(clock)
    if not rnp.is_set():
        fail(f'No WRPLL dividers found for {clock} Hz')
    return rnp

def test_ranges() -> None:
    assert r2_range() == range(14, 113)
    assert n2_range(14) == range(13, 25)
    assert n2_range(112) == range(100, 200)
    assert list(p_range()) == list(range(2, 65, 2))
    assert len(p_range()) == 32

def test_scenarios() -> None:
    assert compute_rnp(19_750_000) == RNP(p=38, n2=25, r2=18)
    assert compute_rnp(27_000_000) == RNP(p=30, n2=21, r2=14)
    assert compute_rnp(108_000_000) == RNP(p=8, n2=24, r2=15)
    assert compute_rnp(270_000_000) == RNP(p=2, n2=14, r2=14)

def test_bypass() -> None:
    assert compute_rnp(540_000_000) == RNP(p=1, n2=2, r2=2)
    # Truncation to 100Hz units means these bypass too.
    assert compute_rnp(540_000_099) == RNP(p=1, n2=2, r2=2)
    assert compute_rnp(540_000_100) != RNP(p=1, n2=2, r2=2)

def test_deterministic() -> None:
    first = compute_rnp(148_500_000)
    assert compute_rnp(148_500_000) == first
    compute_rnp(25_175_000)
    assert compute_rnp(148_500_000) == first

def test_in_range() -> None:
    for clock in 19_750_000, 65_000_000, 148_500_000, 241_500_000, \
            298_000_000, 300_000_000:
        rnp = compute_rnp(clock)
        assert in_range(rnp), (clock, rnp)
    assert not in_range(RNP())
    assert not in_range(RNP(p=1, n2=2, r2=2))
    assert not in_range(RNP(p=3, n2=14, r2=14))
    assert not in_range(RNP(p=2, n2=25, r2=14))

def test_update_first() -> None:
    best = RNP()
    update_rnp(2700000, 1000, 16, 20, 6, best)
    assert best == RNP(p=6, n2=20, r2=16)

# 270MHz, i.e., LC_FREQ_2K / 2.  (14,14,2) and (16,16,2) are both exact.
FREQ2K_270M = 2700000

def test_update_both_in_budget() -> None:
    # Exact matches: prefer the larger n2 / r2^2.
    best = RNP(p=2, n2=16, r2=16)
    update_rnp(FREQ2K_270M, 1000, 14, 14, 2, best)
    assert best == RNP(p=2, n2=14, r2=14)
    update_rnp(FREQ2K_270M, 1000, 16, 16, 2, best)
    assert best == RNP(p=2, n2=14, r2=14)
    # Equal ratio keeps the first.
    update_rnp(FREQ2K_270M, 1000, 14, 14, 2, best)
    assert best == RNP(p=2, n2=14, r2=14)

def test_update_in_budget_wins() -> None:
    # (14,15,2) is 1/14 out, way over budget.
    best = RNP(p=2, n2=15, r2=14)
    update_rnp(FREQ2K_270M, 1000, 16, 16, 2, best)
    assert best == RNP(p=2, n2=16, r2=16)
    update_rnp(FREQ2K_270M, 1000, 14, 15, 2, best)
    assert best == RNP(p=2, n2=16, r2=16)
    # A huge budget brings it back in; then the n2 / r2^2 rule applies.
    update_rnp(FREQ2K_270M, 100000, 14, 15, 2, best)
    assert best == RNP(p=2, n2=15, r2=14)

def test_update_both_over_budget() -> None:
    # (14,15,2) is 1/14 out, (14,16,2) is 2/14 out.  Take the closer.
    best = RNP(p=2, n2=16, r2=14)
    update_rnp(FREQ2K_270M, 0, 14, 15, 2, best)
    assert best == RNP(p=2, n2=15, r2=14)
    update_rnp(FREQ2K_270M, 0, 14, 16, 2, best)
    assert best == RNP(p=2, n2=15, r2=14)

def test_full_table() -> None:
    from .table import WRPLL_TMDS_CLOCK_TABLE
    for e in WRPLL_TMDS_CLOCK_TABLE:
        rnp = compute_rnp(e.clock)
        assert rnp == e.rnp(), f'{e.clock} Hz: {rnp} != {e.rnp()}'

def test_wrpll_dividers() -> None:
    assert wrpll_dividers(74_250_000) == compute_rnp(74_250_000)
    try:
        fail('bang')
    except SearchFailed as e:
        assert str(e) == 'bang'
    else:
        assert False, 'fail() returned'

def test_empty_search(monkeypatch) -> None:
    monkeypatch.setattr(f'{__name__}.r2_range', lambda: range(0))
    assert compute_rnp(148_500_000) == RNP()
    try:
        wrpll_dividers(148_500_000)
    except SearchFailed as e:
        assert '148500000 Hz' in str(e)
    else:
        assert False, 'Empty search accepted'
    # The bypass does not search.
    assert wrpll_dividers(540_000_000) == RNP(p=1, n2=2, r2=2)
