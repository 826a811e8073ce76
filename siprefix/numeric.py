"""
Numeric helpers shared by the SI formatter and parser.

Standardizes numeric inputs from Python stdlib and third-party libraries into float, and
computes decimal exponents and prefix tiers on exact decimal representations of floats.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import operator
from decimal import Decimal

# Local ----------------------------------------------------------------------------------------------------------------
from .formatters import fmt_type
from .prefixes import MAX_EXPONENT, MIN_EXPONENT


# Methods --------------------------------------------------------------------------------------------------------------

def std_float(value) -> float:
    """
    Convert a numeric value to a standard Python float.

    Supports Python int/float, Decimal, Fraction, and third-party scalars via __index__,
    .item(), or __float__ (NumPy and PyTorch scalars, SymPy numbers, etc.).

    Integers too large for a float become signed infinity, the same as float overflow.
    Special values inf, -inf, and nan pass through unchanged.

    Raises:
        TypeError: For bool, None, str, and any type without a numeric protocol.

    Examples:
        >>> std_float(22)
        22.0
        >>> from fractions import Fraction
        >>> std_float(Fraction(1, 4))
        0.25
        >>> std_float(10**400)
        inf
    """
    if isinstance(value, bool):
        raise TypeError(f"boolean values not supported, got {value}")

    # Float subclasses such as numpy.float64 are narrowed to float
    if isinstance(value, float):
        return float(value)

    if isinstance(value, (str, bytes)) or value is None:
        raise TypeError(f"unsupported numeric type: {fmt_type(value)}")

    # Priority 1: "true integers", NumPy integer types implement __index__
    if hasattr(value, "__index__"):
        try:
            return _int_to_float(operator.index(value))
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {fmt_type(value)} to int via __index__: {e}") from e

    # Priority 2: array/tensor scalars with .item()
    if hasattr(value, "item") and callable(value.item):
        try:
            result = value.item()
        except (TypeError, ValueError, AttributeError):
            result = None
        if isinstance(result, (int, float)) and not isinstance(result, bool):
            return _int_to_float(result) if isinstance(result, int) else result

    # Priority 3: duck typing via __float__, Decimal and Fraction included
    if hasattr(value, "__float__"):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {fmt_type(value)} to float: {e}") from e

    raise TypeError(
        f"unsupported numeric type: {fmt_type(value)}. "
        f"Expected int, float, or types implementing __index__, __float__, or .item()"
    )


def to_decimal(value: float) -> Decimal:
    """
    Exact decimal form of the shortest repr of a finite float.

    Unlike Decimal(value), which expands the binary fraction, 2.234e-12 becomes Decimal('2.234E-12').

    Raises:
        ValueError: If value is NaN or infinite.
    """
    if not math.isfinite(value):
        raise ValueError(f"value must be finite, got {value}")
    return Decimal(float.__repr__(value))


def decimal_exponent(number: Decimal) -> int:
    """
    Exponent of the most significant digit, floor(log10(|number|)) computed without rounding errors.

    Returns 0 for zero.

    Examples:
        >>> decimal_exponent(Decimal("999.9"))
        2
        >>> decimal_exponent(Decimal("1000"))
        3
        >>> decimal_exponent(Decimal("0.05"))
        -2
    """
    if number.is_zero():
        return 0
    return number.adjusted()


def tier_exponent(exponent: int) -> int:
    """
    Round an exponent down to a multiple of 3 and clamp it to the prefix table range.

    Examples:
        >>> tier_exponent(-1), tier_exponent(5), tier_exponent(6)
        (-3, 3, 6)
        >>> tier_exponent(30), tier_exponent(-30)
        (24, -24)
    """
    tier = (exponent // 3) * 3
    return max(MIN_EXPONENT, min(MAX_EXPONENT, tier))


# Private Methods ------------------------------------------------------------------------------------------------------

def _int_to_float(number: int) -> float:
    try:
        return float(number)
    except OverflowError:
        return math.inf if number > 0 else -math.inf
