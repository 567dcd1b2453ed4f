"""Application services shared by the use cases."""

from .hours_ledger import HoursLedger, WEEKLY_HOUR_LIMIT
from .capacity_controller import CapacityController
from .transaction_runner import run_in_transaction, UnitOfWorkFactory

__all__ = [
    "HoursLedger",
    "WEEKLY_HOUR_LIMIT",
    "CapacityController",
    "run_in_transaction",
    "UnitOfWorkFactory",
]
