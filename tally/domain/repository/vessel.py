"""Vessel repository interface."""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List, Optional

from tally.domain.model.vessel import Vessel
from tally.domain.value import ContractId, VesselId


class VesselRepository(ABC):
    """Repository for Vessel entity."""

    @abstractmethod
    async def find_by_id(self, vessel_id: VesselId) -> Optional[Vessel]:
        """Find a vessel by ID.

        Args:
            vessel_id: The vessel's identifier

        Returns:
            The vessel if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_contract(self, contract_id: ContractId) -> List[Vessel]:
        """Find all vessels nominated against a contract.

        Args:
            contract_id: The contract's identifier

        Returns:
            Vessels whose contract_id matches
        """
        pass

    @abstractmethod
    async def save(self, vessel: Vessel) -> Vessel:
        """Save a vessel (create or update).

        Args:
            vessel: The vessel to save

        Returns:
            The saved vessel
        """
        pass

    @abstractmethod
    async def update_quantity(
        self, vessel_id: VesselId, quantity: Decimal | None
    ) -> Optional[Vessel]:
        """Update the quantity a vessel carries.

        Args:
            vessel_id: The vessel's identifier
            quantity: New quantity (None clears it)

        Returns:
            The updated vessel, None if it does not exist
        """
        pass
