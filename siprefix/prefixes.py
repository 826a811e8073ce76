#
# siprefix Prefix Table
#

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Final

# Third-party ----------------------------------------------------------------------------------------------------------
from frozendict import frozendict

# Local ----------------------------------------------------------------------------------------------------------------
from .collections import FrozenBiMap
from .formatters import fmt_type, fmt_value


# @formatter:off

class PrefixConf:
    """
    Prefix table constants shared by the formatter and the parser.

    Attributes:
        SI_PREFIXES: SI decimal prefixes with 10^(3N) exponents from yocto to yotta.
            Maps exponents to symbols and back: -6→"µ", "k"→3, etc.

        ALIASES: Alternative spellings accepted by the parser, mapped to their canonical symbol.
            The micro sign µ (U+00B5) is canonical; ASCII u and the Greek small letter mu (U+03BC)
            are aliases.
    """

    SI_PREFIXES = FrozenBiMap({
        -24: "y",   # yocto
        -21: "z",   # zepto
        -18: "a",   # atto
        -15: "f",   # femto
        -12: "p",   # pico  = 10⁻¹²
        -9: "n",    # nano  = 10⁻⁹
        -6: "µ",    # micro = 10⁻⁶
        -3: "m",    # milli = 10⁻³
        0: "",      # (no prefix) = 10⁰
        3: "k",     # kilo  = 10³
        6: "M",     # mega  = 10⁶
        9: "G",     # giga  = 10⁹
        12: "T",    # tera  = 10¹²
        15: "P",    # peta
        18: "E",    # exa
        21: "Z",    # zetta
        24: "Y",    # yotta
    })

    ALIASES = frozendict({
        "u": "µ",
        "U": "µ",
        "μ": "µ",  # Greek small letter mu
        "Μ": "µ",  # Greek capital letter mu, case-swapped μ
    })

# @formatter:on

SI_PREFIXES: Final = PrefixConf.SI_PREFIXES

valid_exponents = tuple(SI_PREFIXES.keys())
valid_prefixes = tuple(symbol for symbol in SI_PREFIXES.values() if symbol)

MIN_EXPONENT: Final = min(valid_exponents)
MAX_EXPONENT: Final = max(valid_exponents)


# Methods --------------------------------------------------------------------------------------------------------------

def prefix_symbol(exp: int) -> str:
    """
    Return the SI prefix symbol for a table exponent, empty string for 0.

    Raises:
        TypeError: If exp is not an int.
        ValueError: If exp is not one of valid_exponents.

    Examples:
        >>> prefix_symbol(-6)
        'µ'
        >>> prefix_symbol(0)
        ''
    """
    if isinstance(exp, bool) or not isinstance(exp, int):
        raise TypeError(f"exponent must be an int, got {fmt_type(exp)}")

    symbol = SI_PREFIXES.get(exp)
    if symbol is None:
        raise ValueError(
            f"Invalid exponent integer value: {fmt_value(exp)}, expected one of {valid_exponents}"
        )
    return symbol


def prefix_exponent(symbol: str) -> int | None:
    """
    Return the exponent for a single SI prefix letter, or None if the letter is not a prefix.

    The exact symbol wins over its case-swapped form, so 'm' is milli and 'M' is mega,
    while 'K' resolves to kilo and 'g' to giga. Aliases for micro are resolved as well.

    The empty string is not a prefix: the 10⁰ tier has no letter to look up.

    Examples:
        >>> prefix_exponent("k"), prefix_exponent("K")
        (3, 3)
        >>> prefix_exponent("u")
        -6
        >>> prefix_exponent("W") is None
        True
    """
    if not isinstance(symbol, str):
        raise TypeError(f"prefix symbol must be a str, got {fmt_type(symbol)}")

    if len(symbol) != 1:
        return None

    for candidate in (symbol, symbol.swapcase()):
        candidate = PrefixConf.ALIASES.get(candidate, candidate)
        if candidate and SI_PREFIXES.has_value(candidate):
            return SI_PREFIXES.get_key(candidate)

    return None


# Module Sanity Checks -------------------------------------------------------------------------------------------------

# Ensure the table covers every multiple of 3 between the extremes.
if valid_exponents != tuple(range(MIN_EXPONENT, MAX_EXPONENT + 1, 3)):
    raise AssertionError(
        "Configuration Error: SI prefix exponents must be consecutive multiples of 3."
    )
