"""Unit tests for SystemRates value object."""

from decimal import Decimal

import pytest
from domain.exceptions import ValidationError
from domain.value_objects import SystemRates


class TestSystemRates:
    """Test SystemRates validation."""

    def test_numbers_are_converted_to_decimal(self):
        """Test that int and float rates become Decimal."""
        assert SystemRates(min_wage_per_hour=60).min_wage_per_hour == Decimal("60")
        assert SystemRates(min_wage_per_hour=62.5).min_wage_per_hour == Decimal("62.5")

    def test_negative_rate_raises_error(self):
        """Test that a negative minimum wage is rejected."""
        with pytest.raises(ValidationError, match="cannot be negative"):
            SystemRates(min_wage_per_hour=Decimal("-1"))

    def test_last_updated_is_utc_aware(self):
        rates = SystemRates(min_wage_per_hour=Decimal("60"))
        assert rates.last_updated.tzinfo is not None

    def test_rates_are_immutable(self):
        """Test that the snapshot cannot be modified."""
        rates = SystemRates(min_wage_per_hour=Decimal("60"))
        with pytest.raises(AttributeError):
            rates.min_wage_per_hour = Decimal("70")
