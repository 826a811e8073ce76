#
# siprefix SI Parsing
#

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass
from decimal import Decimal, MAX_EMAX, MIN_EMIN, localcontext
from typing import Callable

# Local ----------------------------------------------------------------------------------------------------------------
from .formatters import fmt_type, fmt_value
from .prefixes import prefix_exponent, prefix_symbol

_DIGITS = "0123456789"
_SIGNS = "+-"
_EXPONENT_MARKERS = "eE"

# Exponents longer than this saturate to inf or 0.0 without being converted to int
_MAX_EXPONENT_DIGITS = 6


# Classes --------------------------------------------------------------------------------------------------------------

class ParseError(ValueError):
    """
    Raised when a string does not start with a number.

    Attributes:
        text: The input string.
        pos: Cursor position where scanning stopped.
    """

    def __init__(self, message: str, *, text: str = "", pos: int = 0):
        super().__init__(message)
        self.text = text
        self.pos = pos


@dataclass(frozen=True)
class SIScan:
    """
    Scanned parts of an SI-prefixed string, before any numeric conversion.

    The prefix is stored as its canonical table symbol, so 'K' is kept as 'k' and 'u' as 'µ'.

    Example:
        scan_si("-6.8e-3 kW") → SIScan(sign='-', integer='6', fraction='8', exponent='-3', prefix='k', unit='W')
    """

    sign: str = ""
    integer: str = ""
    fraction: str = ""
    exponent: str = ""
    prefix: str = ""
    unit: str = ""

    @property
    def number_text(self) -> str:
        """Numeric part as a canonical literal, e.g. '-6.8e-3'."""
        number = f"{self.sign}{self.integer or '0'}"
        if self.fraction:
            number += f".{self.fraction}"
        if self.exponent:
            number += f"e{self.exponent}"
        return number

    @property
    def prefix_exp(self) -> int:
        """Exponent of the prefix, 0 when there is no prefix."""
        if not self.prefix:
            return 0
        return prefix_exponent(self.prefix)

    @property
    def value(self) -> float:
        """
        The number in base units.

        Computed on exact decimals and converted to float once, so '1.21 k' is exactly 1210.0.
        Overflow saturates to ±inf, underflow to ±0.0.
        """
        digits = f"{self.integer or '0'}.{self.fraction or '0'}"
        mantissa = Decimal(f"{self.sign}{digits}")
        if mantissa.is_zero():
            return float(mantissa)

        exp_digits = self.exponent.lstrip(_SIGNS).lstrip("0")
        exp_negative = self.exponent.startswith("-")
        if len(exp_digits) > _MAX_EXPONENT_DIGITS:
            if exp_negative:
                return -0.0 if self.sign == "-" else 0.0
            return float("-inf") if self.sign == "-" else float("inf")

        exp = int(exp_digits or "0") * (-1 if exp_negative else 1)
        with localcontext(prec=max(28, len(digits)), Emax=MAX_EMAX, Emin=MIN_EMIN):
            return float(mantissa.scaleb(exp + self.prefix_exp))


class _Cursor:
    """Position-based cursor over the input characters."""

    __slots__ = ("text", "pos")

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    @property
    def rest(self) -> str:
        return self.text[self.pos:]

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def take(self, chars: str) -> str:
        """Consume one character if it is one of chars."""
        ch = self.peek()
        if ch and ch in chars:
            self.pos += 1
            return ch
        return ""

    def take_while(self, predicate: Callable[[str], bool]) -> str:
        start = self.pos
        while self.pos < len(self.text) and predicate(self.text[self.pos]):
            self.pos += 1
        return self.text[start:self.pos]


# Methods --------------------------------------------------------------------------------------------------------------

def parse_si(text: str) -> tuple[float, str]:
    """
    Parse an SI-prefixed string into a base-unit value and its unit.

    Grammar: [sign] digits [. digits] [e|E [sign] digits] [whitespace] [prefix] unit

    The prefix letter is case-insensitive, 'u' stands for 'µ'. A prefix letter is only taken
    when at least one unit character follows it, so '1 m' is one meter and '1 mm' is 0.001 m.
    Anything that is not a known prefix becomes part of the unit, which may be empty.

    Raises:
        ParseError: If text does not start with a number.
        TypeError: If text is not a str.

    Examples:
        >>> parse_si("1.21 kW")
        (1210.0, 'W')
        >>> parse_si("6.8e-3W")
        (0.0068, 'W')
        >>> parse_si("1000")
        (1000.0, '')
    """
    scan = scan_si(text)
    return scan.value, scan.unit


def scan_si(text: str) -> SIScan:
    """
    Split an SI-prefixed string into its parts without converting the number.

    Surrounding whitespace is ignored. Raises ParseError if no digit is found at the number position.
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be a str, got {fmt_type(text)}")

    cursor = _Cursor(text.strip())

    sign = cursor.take(_SIGNS)
    integer = cursor.take_while(_is_digit)
    fraction = ""
    if cursor.take("."):
        fraction = cursor.take_while(_is_digit)

    if not integer and not fraction:
        raise ParseError(
            f"invalid SI value {fmt_value(text)}: expected a number at position {cursor.pos}",
            text=text, pos=cursor.pos,
        )

    exponent = _scan_exponent(cursor)
    cursor.take_while(str.isspace)

    rest = cursor.rest
    prefix = ""
    if len(rest) > 1:
        exp = prefix_exponent(rest[0])
        if exp is not None:
            prefix = prefix_symbol(exp)
            rest = rest[1:]

    return SIScan(
        sign=sign, integer=integer, fraction=fraction,
        exponent=exponent, prefix=prefix, unit=rest,
    )


# Private Methods ------------------------------------------------------------------------------------------------------

def _is_digit(ch: str) -> bool:
    return ch in _DIGITS


def _scan_exponent(cursor: _Cursor) -> str:
    """Consume an exponent like 'e-3' and return '-3'; a marker without digits is left in place."""
    start = cursor.pos
    if not cursor.take(_EXPONENT_MARKERS):
        return ""

    sign = cursor.take(_SIGNS)
    digits = cursor.take_while(_is_digit)
    if not digits:
        cursor.pos = start
        return ""
    return f"{sign}{digits}"
