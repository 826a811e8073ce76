"""
Formatting of values and types for exception messages.

Messages raised by the formatter and the parser embed offending inputs through fmt_value() and fmt_type(),
so a broken __repr__ or a huge string never breaks the error path itself.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .utils import class_name

PRIMITIVE_TYPES = (
    type(None),
    bool,  # Comes before int (is subclass of int)
    int,
    float,
    str,
)

# Longer representations are truncated with an ellipsis
MAX_REPR = 80


# Methods --------------------------------------------------------------------------------------------------------------


def fmt_type(obj: Any) -> str:
    """Format type information of an object or a type.

    Examples:
        >>> fmt_type(42)
        '<int>'
        >>> fmt_type(None)
        '<NoneType>'
    """
    return f"<{class_name(obj)}>"


def fmt_value(obj: Any) -> str:
    """
    Format a single value for an exception message.

    Primitives are shown by repr only, everything else as a type-value pair.
    Representations longer than MAX_REPR are truncated.

    Examples:
        >>> fmt_value("x1.21JW")
        "'x1.21JW'"
        >>> from fractions import Fraction
        >>> fmt_value(Fraction(1, 3))
        '<Fraction: Fraction(1, 3)>'
    """
    repr_ = _safe_repr(obj).replace(">", "\\>")

    if len(repr_) > MAX_REPR:
        repr_ = repr_[:MAX_REPR] + "..."

    if type(obj) in PRIMITIVE_TYPES:
        return repr_

    return f"<{type(obj).__name__}: {repr_}>"


# Private Methods ------------------------------------------------------------------------------------------------------


def _safe_repr(obj: Any) -> str:
    try:
        return repr(obj)
    except Exception as e:
        return f"<{type(obj).__name__} object (repr failed: {type(e).__name__})>"
