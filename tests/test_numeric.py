"""Tests for checked count and charge arithmetic."""

import pytest

from formulipy.exceptions import NegativeOverflowError, PositiveOverflowError
from formulipy.numeric import DEFAULT_LIMITS, DEFAULT_MAX_DEPTH, NumericLimits


class TestNumericLimits:
    """Test integer widths."""

    def test_defaults(self):
        """Sixteen-bit counts and charges."""
        assert DEFAULT_LIMITS.max_count == 65535
        assert DEFAULT_LIMITS.max_charge == 32767
        assert DEFAULT_LIMITS.min_charge == -32768
        assert DEFAULT_MAX_DEPTH == 128

    def test_narrow(self):
        """Eight-bit widths."""
        limits = NumericLimits(count_bits=8, charge_bits=8)
        assert limits.max_count == 255
        assert limits.max_charge == 127
        assert limits.min_charge == -128

    def test_too_narrow(self):
        """Widths below two bits are rejected."""
        with pytest.raises(ValueError):
            NumericLimits(count_bits=1)

    def test_check_count(self):
        """Counts are unsigned."""
        assert DEFAULT_LIMITS.check_count(65535) == 65535
        with pytest.raises(PositiveOverflowError):
            DEFAULT_LIMITS.check_count(65536)
        with pytest.raises(NegativeOverflowError):
            DEFAULT_LIMITS.check_count(-1)

    def test_check_charge(self):
        """Charges are signed."""
        assert DEFAULT_LIMITS.check_charge(-32768) == -32768
        with pytest.raises(NegativeOverflowError):
            DEFAULT_LIMITS.check_charge(-32769)
        with pytest.raises(PositiveOverflowError):
            DEFAULT_LIMITS.check_charge(32768)

    def test_arithmetic(self):
        """Checked add and multiply."""
        limits = NumericLimits(count_bits=4, charge_bits=4)
        assert limits.add_counts(7, 8) == 15
        assert limits.mul_counts(3, 5) == 15
        with pytest.raises(PositiveOverflowError):
            limits.mul_counts(4, 4)
        assert limits.add_charges(-4, -4) == -8
        with pytest.raises(NegativeOverflowError):
            limits.add_charges(-5, -4)

    def test_append_digit(self):
        """Digit folding stops at the width."""
        assert DEFAULT_LIMITS.append_digit(6553, 5) == 65535
        with pytest.raises(PositiveOverflowError):
            DEFAULT_LIMITS.append_digit(6553, 6)
