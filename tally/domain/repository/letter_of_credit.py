"""Letter of credit repository interface."""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List, Optional

from tally.domain.model.letter_of_credit import LetterOfCredit, VesselLetterOfCredit
from tally.domain.value import LetterOfCreditId, VesselId, VesselLetterOfCreditId


class LetterOfCreditRepository(ABC):
    """Repository for LetterOfCredit entity and its vessel relations."""

    @abstractmethod
    async def find_by_id(self, lc_id: LetterOfCreditId) -> Optional[LetterOfCredit]:
        """Find a letter of credit by ID.

        Args:
            lc_id: The letter of credit's identifier

        Returns:
            The letter of credit if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, lc: LetterOfCredit) -> LetterOfCredit:
        """Save a letter of credit (create or update).

        Args:
            lc: The letter of credit to save

        Returns:
            The saved letter of credit
        """
        pass

    @abstractmethod
    async def find_relations(
        self, lc_id: LetterOfCreditId
    ) -> List[VesselLetterOfCredit]:
        """Find all vessel relations of a letter of credit.

        Args:
            lc_id: The letter of credit's identifier

        Returns:
            Relation rows in creation order
        """
        pass

    @abstractmethod
    async def find_relation_by_id(
        self, relation_id: VesselLetterOfCreditId
    ) -> Optional[VesselLetterOfCredit]:
        """Find a single vessel relation.

        Args:
            relation_id: The relation's identifier

        Returns:
            The relation if found, None otherwise
        """
        pass

    @abstractmethod
    async def add_relation(
        self,
        lc_id: LetterOfCreditId,
        vessel_id: VesselId,
        quantity: Decimal | None,
        notes: str | None = None,
    ) -> VesselLetterOfCredit:
        """Create a vessel relation.

        Args:
            lc_id: The letter of credit
            vessel_id: The vessel it finances
            quantity: Quantity of the vessel financed by this letter of credit
            notes: Optional free-form notes

        Returns:
            The created relation with its assigned id
        """
        pass

    @abstractmethod
    async def delete_relation(self, relation_id: VesselLetterOfCreditId) -> bool:
        """Delete a vessel relation.

        Args:
            relation_id: The relation's identifier

        Returns:
            True if a relation was deleted, False if none existed
        """
        pass
