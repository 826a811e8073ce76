#
# Pytest Fixtures
#

# Standard library -----------------------------------------------------------------------------------------------------
import math
from typing import Callable

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def assert_close() -> Callable[[float, float], None]:
    """Fixture asserting two values agree within a relative tolerance, 1% by default."""

    def _assert_close(actual: float, expected: float, rel: float = 0.01) -> None:
        if expected == 0:
            assert actual == 0, f"got {actual}, wanted 0"
            return
        error = math.fabs(1 - actual / expected)
        assert error <= rel, f"got {actual}, wanted {expected} (±{error})"

    return _assert_close
