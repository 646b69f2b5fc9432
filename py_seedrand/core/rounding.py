"""Rounding policies for integer draws."""

import math
from enum import Enum

from ..exceptions import UnknownDistributionError


class Rounding(Enum):
    """How a float draw is turned into an integer."""

    FLOOR = "floor"
    CEIL = "ceil"
    TRUNCATE = "truncate"
    HALF_AWAY = "half_away"

    @classmethod
    def parse(cls, name) -> "Rounding":
        """Look up a policy by member or case-insensitive name."""
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).lower())
        except ValueError:
            raise UnknownDistributionError(
                "rounding policy", str(name), [member.value for member in cls]
            ) from None

    def apply(self, value: float) -> int:
        if self is Rounding.FLOOR:
            return math.floor(value)
        if self is Rounding.CEIL:
            return math.ceil(value)
        if self is Rounding.TRUNCATE:
            return math.trunc(value)
        # Python's round() is half-to-even; value - t is exact in float arithmetic
        t = math.trunc(value)
        if abs(value - t) >= 0.5:
            return t + (1 if value > 0 else -1)
        return t
