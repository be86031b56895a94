#!/usr/bin/python3

from . import check, table
from .budget import budget_for
from .constants import LC_FREQ, MHz
from .search import SearchFailed, wrpll_dividers
from .tools import freq_to_hz, freq_to_str, fraction_to_str, output_freq, \
    ppm_error, ref_freq, str_to_freq, vco_freq

import argparse, sys

from fractions import Fraction

def do_compute(freqs: list[Fraction], verbose: bool = False) -> None:
    for f in freqs:
        clock = freq_to_hz(f)
        rnp = wrpll_dividers(clock)
        print(f'{freq_to_str(f)}: r2={rnp.r2} n2={rnp.n2} p={rnp.p}')
        if rnp.p == 1:
            print('    WRPLL bypass, LC PLL passed through')
            continue
        error = ppm_error(clock, rnp)
        print(f'    Ref: {freq_to_str(ref_freq(rnp), 6)} = '
              f'{freq_to_str(LC_FREQ * MHz)} '
              f'/ {fraction_to_str(Fraction(rnp.r2, 2))}')
        print(f'    VCO: {freq_to_str(vco_freq(rnp), 6)} = Ref '
              f'* {fraction_to_str(Fraction(rnp.n2, 2))}')
        print(f'    Out: {freq_to_str(output_freq(rnp), 9)} '
              f'error {float(error):.4g} ppm, budget {budget_for(clock)} ppm')
        if verbose:
            e = table.lookup(clock)
            if e is None:
                print('    Not in reference table')
            elif e.rnp() == rnp:
                print('    Matches reference table')
            else:
                print(f'    Reference table has {e.rnp()}')

def do_budget(freqs: list[Fraction]) -> None:
    for f in freqs:
        print(f'{freq_to_str(f)}: {budget_for(freq_to_hz(f))} ppm')

def do_table() -> None:
    for e in table.WRPLL_TMDS_CLOCK_TABLE:
        print(f'{e.clock:9} {e.p:2} {e.n2:3} {e.r2:3}')

def add_to_argparse(argp: argparse.ArgumentParser,
                    dest: str = 'command', metavar: str = 'COMMAND') -> None:
    subp = argp.add_subparsers(
        dest=dest, metavar=metavar, required=True, help='Sub-command')

    compute = subp.add_parser(
        'compute', help='Compute WRPLL dividers',
        description='''Compute WRPLL dividers for pixel clocks.''',
        epilog='''Frequencies may have a suffix of Hz, kHz, MHz or GHz (or
        just the first letter).  With no suffix, MHz is assumed.  The search
        works in units of 100Hz, so anything finer is ignored.''')
    compute.add_argument('FREQ', type=str_to_freq, nargs='+',
                         help='Pixel clock frequencies')
    compute.add_argument('-v', '--verbose', action='store_true',
                         help='Compare against the reference table')

    checkp = subp.add_parser(
        'check', help='Check against reference table',
        description='''Run the divider search for every clock in the table of
        known good values, and report any differences.  The exit status is
        non-zero if any differ.''')
    checkp.add_argument('-v', '--verbose', action='store_true',
                        help='Report a summary even if all match')

    budget = subp.add_parser(
        'budget', help='Report error budgets',
        description='Report the ppm error budget used for pixel clocks.')
    budget.add_argument('FREQ', type=str_to_freq, nargs='+',
                        help='Pixel clock frequencies')

    subp.add_parser('table', help='List the reference table',
                    description='''List the table of known good values:
                    clock in Hz, p, n2, r2.''')

def run_command(args: argparse.Namespace, command: str) -> int:
    if command == 'compute':
        do_compute(args.FREQ, args.verbose)

    elif command == 'check':
        return check.run_check(verbose=args.verbose)

    elif command == 'budget':
        do_budget(args.FREQ)

    elif command == 'table':
        do_table()

    else:
        print(args)
        assert False, f'This should never happen: {command}'

    return 0

def main(argv: list[str] | None = None) -> int:
    argp = argparse.ArgumentParser(description='Haswell WRPLL divider utility')
    add_to_argparse(argp)

    args = argp.parse_args(argv)
    try:
        return run_command(args, args.command)
    except (SearchFailed, ValueError) as e:
        print(e, file=sys.stderr)
        return 1

def test_compute(capsys) -> None:
    assert main(['compute', '-v', '270M', '540MHz', '65000000hz']) == 0
    out, _ = capsys.readouterr()
    lines = out.splitlines()
    assert lines[0] == '270 MHz: r2=14 n2=14 p=2'
    assert lines[1] == '    Ref: 385.714 MHz = 2.7 GHz / 7'
    assert lines[2] == '    VCO: 2.7 GHz = Ref * 7'
    assert lines[3] == '    Out: 270 MHz error 0 ppm, budget 4000 ppm'
    assert lines[4] == '    Matches reference table'
    assert lines[5] == '540 MHz: r2=2 n2=2 p=1'
    assert lines[6] == '    WRPLL bypass, LC PLL passed through'
    assert lines[7].startswith('65 MHz: ')

def test_compute_not_in_table(capsys) -> None:
    assert main(['compute', '-v', '19.75001M']) == 0
    out, _ = capsys.readouterr()
    assert 'Not in reference table' in out
    assert 'budget 1000 ppm' in out

def test_fractional_hz(capsys) -> None:
    assert main(['compute', '1.5Hz']) == 1
    _, err = capsys.readouterr()
    assert 'not a whole number of Hz' in err

def test_zero_hz(capsys) -> None:
    assert main(['compute', '0']) == 1
    out, err = capsys.readouterr()
    assert out == ''
    assert 'not a positive frequency' in err

def test_budget(capsys) -> None:
    assert main(['budget', '148.5M', '267.25M', '1G']) == 0
    out, _ = capsys.readouterr()
    assert out.splitlines() == [
        '148.5 MHz: 0 ppm', '267.25 MHz: 5000 ppm', '1 GHz: 1000 ppm']

def test_table(capsys) -> None:
    assert main(['table']) == 0
    out, _ = capsys.readouterr()
    lines = out.splitlines()
    assert len(lines) == len(table.WRPLL_TMDS_CLOCK_TABLE)
    assert lines[0] == ' 19750000 38  25  18'

def test_bad_command() -> None:
    try:
        main(['frobnicate'])
    except SystemExit as e:
        assert e.code == 2
    else:
        assert False, 'Bad command accepted'

if __name__ == '__main__':
    sys.exit(main())
