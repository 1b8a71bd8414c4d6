from __future__ import annotations

import math


def legacy_round(number: float, precision: int = 0) -> float:
    """Round half away from zero at ``precision`` decimals.

    ``legacy_round(2.345, 2) == 2.35`` and ``legacy_round(-2.345, 2) == -2.35``.
    Every published score goes through this, so it must not be swapped for
    ``round()`` (which rounds half to even).
    """
    factor = 10 ** precision
    rounded = math.copysign(math.floor(abs(number) * factor + 0.5), number)
    # Small negatives round to 0.0, not -0.0.
    return rounded / factor if rounded else 0.0
