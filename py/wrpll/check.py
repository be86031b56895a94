'''Check the divider search against the table of known good values.'''

from .search import RNP, compute_rnp
from .table import TMDSClock, WRPLL_TMDS_CLOCK_TABLE

import sys

from dataclasses import dataclass
from typing import Iterable

@dataclass
class Mismatch:
    entry: TMDSClock
    computed: RNP

    def __str__(self) -> str:
        return f'Computed value differs for {self.entry.clock} Hz:\n' \
            f'  Reference: {self.entry.rnp()}\n' \
            f'  Computed:  {self.computed}'

def check_table(entries: Iterable[TMDSClock] = WRPLL_TMDS_CLOCK_TABLE) \
        -> list[Mismatch]:
    '''Run the search for every entry, and collect the ones that differ.'''
    result = []
    for e in entries:
        rnp = compute_rnp(e.clock)
        if rnp != e.rnp():
            result.append(Mismatch(e, rnp))
    return result

def run_check(entries: Iterable[TMDSClock] = WRPLL_TMDS_CLOCK_TABLE,
              verbose: bool = False) -> int:
    '''Report on check_table, returning the exit status.'''
    entries = list(entries)
    mismatches = check_table(entries)
    for m in mismatches:
        print(m, file=sys.stderr)
    if verbose or mismatches:
        print(f'{len(entries) - len(mismatches)} of {len(entries)} '
              f'clocks match')
    return 1 if mismatches else 0

BAD = TMDSClock(148500000, 4, 22, 20)

def test_check_pass() -> None:
    assert check_table(WRPLL_TMDS_CLOCK_TABLE[:5]) == []
    assert check_table([]) == []
    assert run_check(WRPLL_TMDS_CLOCK_TABLE[-3:]) == 0

def test_check_mismatch(capsys) -> None:
    entries = [WRPLL_TMDS_CLOCK_TABLE[0], BAD, WRPLL_TMDS_CLOCK_TABLE[-1]]
    mismatches = check_table(entries)
    assert len(mismatches) == 1
    assert mismatches[0].entry is BAD
    assert mismatches[0].computed == compute_rnp(BAD.clock)
    # Keeps going after the failure.
    assert run_check(entries) == 1
    out, err = capsys.readouterr()
    assert 'Computed value differs for 148500000 Hz:' in err
    assert '  Reference: (20,22,4)\n' in err
    assert f'  Computed:  {compute_rnp(BAD.clock)}' in err
    assert '2 of 3 clocks match' in out
