'''Haswell WRPLL divider search.

compute_rnp() finds the (r2, n2, p) dividers for a pixel clock, and the check
module verifies it against the table of known good settings.'''

from .search import RNP, SearchFailed, compute_rnp, wrpll_dividers
