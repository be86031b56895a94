
from fractions import Fraction

# Units for reporting.  All the frequencies are in MHz.
MHz = Fraction(1)
kHz = MHz / 1000
Hz = kHz / 1000

# The LC PLL feeds the WRPLL reference.  In MHz.
LC_FREQ = 2700
# The same, in the 100Hz units that the search works in.
LC_FREQ_2K = LC_FREQ * 2000

# Post divider.  Only even values are used.
P_MIN = 2
P_MAX = 64
P_INC = 2

# Constraints for PLL good behavior, in MHz.  REF is the reference after the
# R divider, i.e., LC_FREQ / R.  VCO is N times that.
REF_MIN = 48
REF_MAX = 400
VCO_MIN = 2400
VCO_MAX = 4800

# A 540MHz pixel clock bypasses the WRPLL and takes the LC PLL directly.
# Expressed in 100Hz units.
BYPASS_FREQ2K = 5400000
