#
# siprefix SI Formatting
#

# Standard library -----------------------------------------------------------------------------------------------------
import math
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_EVEN, MAX_EMAX, MIN_EMIN, localcontext
from typing import Self

# Local ----------------------------------------------------------------------------------------------------------------
from .formatters import fmt_type, fmt_value
from .numeric import decimal_exponent, std_float, tier_exponent, to_decimal
from .parser import parse_si
from .prefixes import MAX_EXPONENT, prefix_symbol


# @formatter:off

class SIConf:
    """
    Default configuration constants for SI formatting.

    Attributes:
        DIGITS: Fractional digits kept by si(), trailing zeros are trimmed afterwards.
        SEPARATOR: String between the mantissa and the prefixed unit.
        ROUNDING: Decimal rounding mode applied to the mantissa.
        UNSCALED_UNITS: Units that are never prefixed, the value is shown as-is.
        NAN, POS_INFINITY, NEG_INFINITY: Symbols for non-finite values, shown without prefix.
    """

    DIGITS = 6
    SEPARATOR = " "
    ROUNDING = ROUND_HALF_EVEN

    UNSCALED_UNITS = frozenset({"%", "‰"})

    NAN = "NaN"
    POS_INFINITY = "inf"
    NEG_INFINITY = "-inf"

# @formatter:on


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class SIValue:
    """
    A value-unit pair displayed with an automatically selected SI prefix.

    The value is always stored in base units as a float; digits overrides SIConf.DIGITS
    when set.

    Examples:
        >>> str(SIValue(2.2e-6, "F"))
        '2.2 µF'
        >>> str(SIValue(2.234e-12, "F", digits=1))
        '2.2 pF'
        >>> SIValue.parse("1.21 kW")
        SIValue(value=1210.0, unit='W', digits=None)
    """

    value: float
    unit: str
    digits: int | None = None

    def __post_init__(self):
        object.__setattr__(self, "value", std_float(self.value))
        _validate_unit(self.unit)
        if self.digits is not None:
            _validate_digits(self.digits)

    @classmethod
    def parse(cls, text: str, *, digits: int | None = None) -> Self:
        """Create from a prefixed string such as '6.8 mW', raises ParseError on invalid input."""
        value, unit = parse_si(text)
        return cls(value=value, unit=unit, digits=digits)

    def __str__(self):
        return self.as_str

    @property
    def as_str(self) -> str:
        """Formatted value with SI-prefixed unit."""
        return si_with_digits(self.value, self._digits, self.unit)

    @property
    def mantissa(self) -> float:
        """
        The rounded mantissa shown by as_str, e.g. 2.2 for 2.2e-9 F.

        Zero and non-finite values are returned unscaled.
        """
        parts = _si_parts(self.value, self._digits, self.unit)
        if parts is None:
            return self.value
        return float(parts[0])

    @property
    def prefix(self) -> str:
        """The SI prefix shown by as_str, e.g. 'n' for 2.2e-9 F and '' for any % value."""
        parts = _si_parts(self.value, self._digits, self.unit)
        if parts is None:
            return ""
        return prefix_symbol(parts[1])

    @property
    def _digits(self) -> int:
        return SIConf.DIGITS if self.digits is None else self.digits


# Methods --------------------------------------------------------------------------------------------------------------

def si(value, unit: str) -> str:
    """
    Format a value with an SI prefix in front of the unit.

    Keeps up to SIConf.DIGITS fractional digits of the mantissa and trims trailing zeros.

    The separator is emitted even for an empty unit, so si(2200, "") gives '2.2 k', which
    parses back as (2.2, 'k'). Pass a unit to get a lossless round-trip.

    Examples:
        >>> si(2.2345e-12, "F")
        '2.2345 pF'
        >>> si(1e6, "F")
        '1 MF'
        >>> si(0, "F")
        '0 F'
        >>> si(0.05, "%")
        '0.05 %'
    """
    return si_with_digits(value, SIConf.DIGITS, unit)


def si_with_digits(value, digits: int, unit: str) -> str:
    """
    Format a value with an SI prefix, rounding the mantissa to at most `digits` fractional digits.

    The mantissa is rounded on the shortest decimal representation of the value, so digits
    the value does not have are never produced, and trailing zeros are trimmed.

    Values beyond 10^±24 keep the most extreme prefix, non-finite values are shown
    without prefix.

    Raises:
        TypeError: If value is not numeric, digits is not an int, or unit is not a str.
        ValueError: If digits is negative.

    Examples:
        >>> si_with_digits(2.234e-12, 0, "F")
        '2 pF'
        >>> si_with_digits(2.234e-12, 2, "F")
        '2.23 pF'
        >>> si_with_digits(2.234e-12, 4, "F")
        '2.234 pF'
    """
    _validate_digits(digits)
    _validate_unit(unit)
    number = std_float(value)

    if not math.isfinite(number):
        return f"{_non_finite_str(number)}{SIConf.SEPARATOR}{unit}"

    parts = _si_parts(number, digits, unit)
    if parts is None:
        return f"0{SIConf.SEPARATOR}{unit}"

    mantissa, exp = parts
    return f"{_mantissa_str(mantissa)}{SIConf.SEPARATOR}{prefix_symbol(exp)}{unit}"


def compute_si(value) -> tuple[float, str]:
    """
    Scale a value to its SI tier and return the mantissa with the prefix symbol.

    No rounding is applied. Zero and non-finite values are returned unscaled with an empty prefix.

    Examples:
        >>> compute_si(2.2e-9)
        (2.2, 'n')
        >>> compute_si(-2200)
        (-2.2, 'k')
    """
    number = std_float(value)
    if number == 0 or not math.isfinite(number):
        return number, ""

    exact = to_decimal(number)
    exp = tier_exponent(decimal_exponent(exact))
    with _decimal_context(exact, 0):
        mantissa = exact.scaleb(-exp)
    return float(mantissa), prefix_symbol(exp)


# Private Methods ------------------------------------------------------------------------------------------------------

def _decimal_context(number: Decimal, digits: int):
    """Local decimal context wide enough to hold number with digits fractional digits exactly."""
    prec = max(28, abs(decimal_exponent(number)) + digits + 2)
    return localcontext(prec=prec, Emax=MAX_EMAX, Emin=MIN_EMIN)


def _si_parts(number: float, digits: int, unit: str) -> tuple[Decimal, int] | None:
    """Rounded mantissa and tier exponent of a finite nonzero number, None for zero and non-finite values."""
    if number == 0 or not math.isfinite(number):
        return None
    scaled = unit not in SIConf.UNSCALED_UNITS
    return _round_scaled(to_decimal(number), digits, scaled=scaled)


def _round_scaled(exact: Decimal, digits: int, *, scaled: bool = True) -> tuple[Decimal, int]:
    """
    Scale exact to its tier and round to digits.

    A mantissa rounded up to 1000 moves to the next tier while one exists.
    """
    exp = tier_exponent(decimal_exponent(exact)) if scaled else 0
    with _decimal_context(exact, digits):
        quantum = Decimal(1).scaleb(-digits)
        mantissa = exact.scaleb(-exp).quantize(quantum, rounding=SIConf.ROUNDING)
        if scaled and abs(mantissa) >= 1000 and exp < MAX_EXPONENT:
            exp += 3
            mantissa = exact.scaleb(-exp).quantize(quantum, rounding=SIConf.ROUNDING)

    if mantissa.is_zero():
        # Values below the smallest tier may round to zero, never show '-0'
        mantissa = Decimal(0)
    return mantissa, exp


def _mantissa_str(mantissa: Decimal) -> str:
    text = f"{mantissa:f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _non_finite_str(number: float) -> str:
    if math.isnan(number):
        return SIConf.NAN
    return SIConf.POS_INFINITY if number > 0 else SIConf.NEG_INFINITY


def _validate_digits(digits: int):
    if isinstance(digits, bool) or not isinstance(digits, int):
        raise TypeError(f"digits must be an int, got {fmt_type(digits)}")
    if digits < 0:
        raise ValueError(f"digits must be >= 0, got {fmt_value(digits)}")


def _validate_unit(unit: str):
    if not isinstance(unit, str):
        raise TypeError(f"unit must be a str, got {fmt_type(unit)}")
