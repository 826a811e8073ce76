"""
siprefix utilities shared across the package.

Contains functions used by multiple modules to avoid circular imports.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any


# Methods --------------------------------------------------------------------------------------------------------------


def class_name(obj: Any) -> str:
    """
    Get the class name of an object or a class.

    Both `class_name(2.2)` and `class_name(float)` return 'float'.

    Examples:
        >>> from decimal import Decimal
        >>> class_name(Decimal("2.2"))
        'Decimal'
    """
    cls = obj if isinstance(obj, type) else obj.__class__
    return cls.__name__
