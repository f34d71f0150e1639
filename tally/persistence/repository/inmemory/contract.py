"""In-memory contract repository for testing."""

from typing import Optional

from tally.domain.model.contract import Contract
from tally.domain.repository.contract import ContractRepository
from tally.domain.value import ContractId


class InMemoryContractRepository(ContractRepository):
    """In-memory implementation of ContractRepository for testing."""

    def __init__(self) -> None:
        self._contracts: dict[ContractId, Contract] = {}

    async def find_by_id(self, contract_id: ContractId) -> Optional[Contract]:
        """Find a contract by ID."""
        return self._contracts.get(contract_id)

    async def save(self, contract: Contract) -> Contract:
        """Save a contract."""
        self._contracts[contract.id] = contract
        return contract
