"""
SI metric prefix formatting and parsing.

    >>> si(2.2e-6, "F")
    '2.2 µF'
    >>> parse_si("1.21 kW")
    (1210.0, 'W')
"""

from .parser import ParseError, SIScan, parse_si, scan_si
from .prefixes import PrefixConf, prefix_exponent, prefix_symbol
from .si import SIConf, SIValue, compute_si, si, si_with_digits

__all__ = [
    "ParseError", "SIScan", "parse_si", "scan_si",
    "PrefixConf", "prefix_exponent", "prefix_symbol",
    "SIConf", "SIValue", "compute_si", "si", "si_with_digits",
]
