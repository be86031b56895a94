'''Per-frequency error budget for the WRPLL search.

The budget is in ppm.  Within budget, the search optimises for reference times
VCO frequency rather than for accuracy.  Frequencies with a budget of zero
need to be as exact as possible, the rest were tuned so that the search
matches the known good settings.'''

BUDGET_TIERS = {
    0: (
        25175000, 25200000, 27000000, 27027000, 37762500, 37800000,
        40500000, 40541000, 54000000, 54054000, 59341000, 59400000,
        72000000, 74176000, 74250000, 81000000, 81081000, 89012000,
        89100000, 108000000, 108108000, 111264000, 111375000, 148352000,
        148500000, 162000000, 162162000, 222525000, 222750000, 296703000,
        297000000),
    1500: (233500000, 245250000, 247750000, 253250000, 298000000),
    2000: (169128000, 169500000, 179500000, 202000000),
    4000: (
        256250000, 262500000, 270000000, 272500000, 273750000, 280750000,
        281250000, 286000000, 291750000),
    5000: (267250000, 268500000),
}

DEFAULT_BUDGET = 1000

BUDGETS = frozenset(BUDGET_TIERS) | {DEFAULT_BUDGET}

BUDGET_BY_CLOCK = {
    clock: budget
    for budget, clocks in BUDGET_TIERS.items() for clock in clocks}

assert len(BUDGET_BY_CLOCK) == sum(len(c) for c in BUDGET_TIERS.values()), \
    'A clock appears in more than one budget tier'

def budget_for(clock: int) -> int:
    '''Budget, in ppm, for clock in Hz.'''
    return BUDGET_BY_CLOCK.get(clock, DEFAULT_BUDGET)

def test_budget_tiers() -> None:
    assert budget_for(25175000) == 0
    assert budget_for(148500000) == 0
    assert budget_for(297000000) == 0
    assert budget_for(233500000) == 1500
    assert budget_for(298000000) == 1500
    assert budget_for(169128000) == 2000
    assert budget_for(202000000) == 2000
    assert budget_for(270000000) == 4000
    assert budget_for(291750000) == 4000
    assert budget_for(267250000) == 5000
    assert budget_for(268500000) == 5000

def test_budget_default() -> None:
    for clock in 1, 19750000, 25175001, 65000000, 148500001, 540000000, \
            1 << 40:
        assert budget_for(clock) == DEFAULT_BUDGET
    assert BUDGETS == {0, 1000, 1500, 2000, 4000, 5000}

def test_budget_total() -> None:
    from .table import WRPLL_TMDS_CLOCK_TABLE
    for e in WRPLL_TMDS_CLOCK_TABLE:
        assert budget_for(e.clock) in BUDGETS
    # Every listed clock is a pixel clock from the table.
    table = set(e.clock for e in WRPLL_TMDS_CLOCK_TABLE)
    assert set(BUDGET_BY_CLOCK) <= table
