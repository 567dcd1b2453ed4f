"""Minimum wage floor for postings."""

from decimal import ROUND_CEILING, Decimal
from typing import Union

from domain.enums import WageType
from domain.exceptions import WageBelowMinimumError
from domain.value_objects import SystemRates

Number = Union[Decimal, int, float]
CENT = Decimal("0.01")


def _as_decimal(value: Number) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


def _to_amount(value: Decimal) -> Decimal:
    """Round to cents, dropping the fraction of whole amounts (480.0 -> 480)."""
    amount = value.quantize(CENT, rounding=ROUND_CEILING)
    if amount == amount.to_integral_value():
        return amount.quantize(Decimal("1"))
    return amount


def minimum_required(
    rates: SystemRates,
    wage_type: WageType,
    duration_hours: Number,
) -> Decimal:
    """
    Compute the minimum amount a posting must offer.

    Hourly postings must pay at least the hourly rate; daily postings must
    pay the hourly rate for every hour of the shift.

    Args:
        rates: Current system rates
        wage_type: How the posting quotes its wage
        duration_hours: Length of the shift

    Returns:
        Minimum payable amount
    """
    if WageType(wage_type) == WageType.HOURLY:
        return _to_amount(rates.min_wage_per_hour)
    return _to_amount(rates.min_wage_per_hour * _as_decimal(duration_hours))


def is_compliant(offered: Number, minimum: Number) -> bool:
    """Check whether an offered amount meets the minimum."""
    return _as_decimal(offered) >= _as_decimal(minimum)


def validate_offer(
    rates: SystemRates,
    wage_type: WageType,
    duration_hours: Number,
    offered: Number,
) -> Decimal:
    """
    Validate an offered wage against the floor.

    Returns:
        The minimum that was checked against

    Raises:
        WageBelowMinimumError: If the offer is below the minimum
    """
    minimum = minimum_required(rates, wage_type, duration_hours)
    if not is_compliant(offered, minimum):
        raise WageBelowMinimumError(offered=offered, minimum=minimum)
    return minimum
