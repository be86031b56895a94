
from .constants import Hz, LC_FREQ, LC_FREQ_2K, MHz, kHz
from .search import RNP

from fractions import Fraction

def str_to_freq(s: str) -> Fraction:
    s = s.lower()
    for suffix, scale in ('khz', 1000), ('mhz', 1000_000), \
            ('ghz', 1000_000_000), ('hz', 1):
        if s.endswith(suffix):
            break
        if suffix != 'hz' and s.endswith(suffix[0]):
            suffix = suffix[0]
            break
    else:
        suffix = ''
        scale = 1000000

    return Fraction(s.removesuffix(suffix).replace('_', '')) * scale \
        / (1000000 * MHz)

# Set the name of str_to_freq to give sensible argparse help test.
str_to_freq.__name__ = 'frequency'

def freq_to_hz(freq: Fraction) -> int:
    '''The pixel clock as integer Hz, as the search wants it.'''
    clock = freq / Hz
    if clock.denominator != 1:
        raise ValueError(f'{freq_to_str(freq)} is not a whole number of Hz')
    if clock <= 0:
        raise ValueError(f'{freq_to_str(freq)} is not a positive frequency')
    return clock.numerator

def freq_to_str(freq: Fraction, precision: int = 0) -> str:
    if freq < 0:
        return '-' + freq_to_str(-freq, precision)
    if freq >= 1000 * MHz:
        scaled = freq / (MHz * 1000)
        suffix = 'GHz'
    elif freq >= MHz:
        scaled = freq / MHz
        suffix = 'MHz'
    elif freq >= kHz:
        scaled = freq / kHz
        suffix = 'kHz'
    else:
        scaled = freq / Hz
        suffix = 'Hz'

    if scaled.denominator == 1:
        return f'{scaled.numerator} {suffix}'
    elif precision == 0:
        return f'{float(scaled)} {suffix}'
    else:
        return f'{float(scaled):.{precision}g} {suffix}'

def fraction_to_str(f: Fraction) -> str:
    if f.denominator == 1 or f < 1:
        return str(f)
    d = f.denominator
    return f'({f.numerator // d} + {f.numerator % d}/{d})'

def ref_freq(rnp: RNP) -> Fraction:
    '''Reference seen by the WRPLL, after the R divider.'''
    return Fraction(LC_FREQ * 2, rnp.r2) * MHz

def vco_freq(rnp: RNP) -> Fraction:
    return Fraction(LC_FREQ * rnp.n2, rnp.r2) * MHz

def output_freq(rnp: RNP) -> Fraction:
    # LC_FREQ_2K is in 100Hz units.
    return Fraction(LC_FREQ_2K * rnp.n2, rnp.p * rnp.r2) * 100 * Hz

def ppm_error(clock: int, rnp: RNP) -> Fraction:
    '''Error of the output relative to clock (in Hz), in ppm.'''
    target = clock * Hz
    return (output_freq(rnp) - target) / target * 1000000

def test_str_to_freq() -> None:
    assert str_to_freq('148.5MHz') == Fraction(297, 2)
    assert str_to_freq('148.5m') == Fraction(297, 2)
    assert str_to_freq('25175k') == Fraction(25175, 1000)
    assert str_to_freq('25175KHz') == Fraction(25175, 1000)
    assert str_to_freq('27000000Hz') == 27
    assert str_to_freq('27_000_000hz') == 27
    assert str_to_freq('0.54G') == 540
    assert str_to_freq('74.25') == Fraction(297, 4)

def test_freq_to_hz() -> None:
    assert freq_to_hz(str_to_freq('148.5MHz')) == 148_500_000
    assert freq_to_hz(str_to_freq('37.7625M')) == 37_762_500
    try:
        freq_to_hz(str_to_freq('0.5Hz'))
    except ValueError:
        pass
    else:
        assert False, 'Fractional Hz accepted'
    for f in '0', '-1M':
        try:
            freq_to_hz(str_to_freq(f))
        except ValueError:
            pass
        else:
            assert False, f'{f} accepted'

def test_freq_to_str() -> None:
    assert freq_to_str(Fraction(297, 2)) == '148.5 MHz'
    assert freq_to_str(2700 * MHz) == '2.7 GHz'
    assert freq_to_str(4800 * MHz) == '4.8 GHz'
    assert freq_to_str(27 * MHz) == '27 MHz'
    assert freq_to_str(25 * kHz) == '25 kHz'
    assert freq_to_str(-5 * Hz) == '-5 Hz'
    assert freq_to_str(Fraction(1, 3) * MHz, 4) == '333.3 kHz'
    assert fraction_to_str(Fraction(7, 2)) == '(3 + 1/2)'
    assert fraction_to_str(Fraction(1, 2)) == '1/2'

def test_derived_freqs() -> None:
    rnp = RNP(p=2, n2=14, r2=14)
    assert ref_freq(rnp) == Fraction(5400, 14) * MHz
    assert vco_freq(rnp) == 2700 * MHz
    assert output_freq(rnp) == 270 * MHz
    assert ppm_error(270_000_000, rnp) == 0
    # Bypass.
    assert output_freq(RNP(p=1, n2=2, r2=2)) == 540 * MHz
    # 108MHz.
    assert output_freq(RNP(p=8, n2=24, r2=15)) == 108 * MHz
    assert ppm_error(100_000_000, RNP(p=8, n2=24, r2=15)) == 80000

def test_table_errors() -> None:
    from .table import WRPLL_TMDS_CLOCK_TABLE
    for e in WRPLL_TMDS_CLOCK_TABLE:
        # The worst is 268.5MHz, with a budget of 5000ppm.
        assert abs(ppm_error(e.clock, e.rnp())) < 5000, e
