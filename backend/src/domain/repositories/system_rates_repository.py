"""System rates repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Optional

from domain.value_objects import SystemRates


class ISystemRatesRepository(ABC):
    """Abstract repository for the singleton system rates record."""

    @abstractmethod
    async def get(self) -> Optional[SystemRates]:
        """
        Retrieve the stored rates.

        Returns:
            SystemRates if stored, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, rates: SystemRates) -> SystemRates:
        """
        Store the rates, replacing any previous value.

        Args:
            rates: New rates

        Returns:
            Stored SystemRates
        """
        pass
