"""
Checked integer arithmetic for counts and charges.

Counts are unsigned and charges signed; both are bounded by a configurable
bit width. Every combination site goes through these helpers so a formula
such as ``C65535C1`` fails with an overflow error instead of silently
growing past the width.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from formulipy.exceptions import NegativeOverflowError, PositiveOverflowError


@dataclass(frozen=True, slots=True)
class NumericLimits:
    """Integer widths for repeat counts and charges.

    Attributes:
        count_bits: Width of the unsigned count type.
        charge_bits: Width of the signed charge type.
    """

    count_bits: int = 16
    charge_bits: int = 16

    def __post_init__(self) -> None:
        if self.count_bits < 2 or self.charge_bits < 2:
            raise ValueError("Integer widths must be at least 2 bits")

    @property
    def max_count(self) -> int:
        return (1 << self.count_bits) - 1

    @property
    def max_charge(self) -> int:
        return (1 << (self.charge_bits - 1)) - 1

    @property
    def min_charge(self) -> int:
        return -(1 << (self.charge_bits - 1))

    def check_count(self, value: int) -> int:
        """Return value if it is a representable count, else raise.

        Raises:
            PositiveOverflowError: If value exceeds ``max_count``.
            NegativeOverflowError: If value is negative.
        """
        if value > self.max_count:
            raise PositiveOverflowError(f"Count {value} exceeds {self.max_count}")
        if value < 0:
            raise NegativeOverflowError(f"Count {value} is negative")
        return value

    def check_charge(self, value: int) -> int:
        """Return value if it is a representable charge, else raise."""
        if value > self.max_charge:
            raise PositiveOverflowError(f"Charge {value} exceeds {self.max_charge}")
        if value < self.min_charge:
            raise NegativeOverflowError(f"Charge {value} is below {self.min_charge}")
        return value

    def add_counts(self, a: int, b: int) -> int:
        return self.check_count(a + b)

    def mul_counts(self, a: int, b: int) -> int:
        return self.check_count(a * b)

    def add_charges(self, a: int, b: int) -> int:
        return self.check_charge(a + b)

    def append_digit(self, value: int, digit: int) -> int:
        """Shift a decimal digit onto a count, checking the width at each step."""
        return self.add_counts(self.mul_counts(value, 10), digit)


DEFAULT_LIMITS: Final[NumericLimits] = NumericLimits()

# Maximum bracket/radical nesting accepted by the parser
DEFAULT_MAX_DEPTH: Final[int] = 128
