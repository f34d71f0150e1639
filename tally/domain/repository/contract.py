"""Contract repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from tally.domain.model.contract import Contract
from tally.domain.value import ContractId


class ContractRepository(ABC):
    """Repository for Contract entity."""

    @abstractmethod
    async def find_by_id(self, contract_id: ContractId) -> Optional[Contract]:
        """Find a contract by ID.

        Args:
            contract_id: The contract's identifier

        Returns:
            The contract if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, contract: Contract) -> Contract:
        """Save a contract (create or update).

        Args:
            contract: The contract to save

        Returns:
            The saved contract
        """
        pass
