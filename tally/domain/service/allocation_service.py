"""Allocation domain service."""

from decimal import Decimal

import logfire

from tally.domain.error import NotFoundError, ValidationError
from tally.domain.model import Vessel, VesselLetterOfCredit
from tally.domain.repository import (
    LetterOfCreditRepository,
    TransactionManager,
    VesselRepository,
)
from tally.domain.value import (
    AllocatableEntityType,
    AllocationSummary,
    LetterOfCreditId,
    VesselId,
    VesselLetterOfCreditId,
)

from .allocation import reconcile
from .base import Service
from .notification import InvalidationBoundary
from .subject_resolver import SubjectResolver


class AllocationService(Service):
    """Domain service for quantity allocation over contracts and letters of credit."""

    def __init__(
        self,
        subject_resolver: SubjectResolver,
        letter_of_credit_repository: LetterOfCreditRepository,
        vessel_repository: VesselRepository,
        transaction_manager: TransactionManager,
        invalidation: InvalidationBoundary,
    ) -> None:
        """Initialize allocation service.

        Args:
            subject_resolver: Resolves entities and their allocations
            letter_of_credit_repository: Letter of credit repository
            vessel_repository: Vessel repository
            transaction_manager: Commits allocation changes
            invalidation: Boundary notified after each allocation change
        """
        self.subject_resolver = subject_resolver
        self.letter_of_credit_repository = letter_of_credit_repository
        self.vessel_repository = vessel_repository
        self.transaction_manager = transaction_manager
        self.invalidation = invalidation

    async def get_allocation_summary(
        self, entity_type: AllocatableEntityType, entity_id: int
    ) -> AllocationSummary:
        """Reconcile an entity's quantity against its allocations.

        Recomputed on every call, nothing is cached.

        Args:
            entity_type: Contract or letter of credit
            entity_id: ID of the entity

        Returns:
            Allocated and remaining quantity

        Raises:
            NotFoundError: If the entity does not exist
        """
        entity, allocations = await self.subject_resolver.resolve_allocations(
            entity_type, entity_id
        )
        summary = reconcile(entity.quantity, allocations)
        if summary.over_allocated:
            logfire.info(
                "Entity over-allocated",
                entity_type=entity_type.value,
                entity_id=entity_id,
                remaining=str(summary.remaining),
            )
        return summary

    async def allocate_vessel_to_letter_of_credit(
        self,
        lc_id: LetterOfCreditId,
        vessel_id: VesselId,
        quantity: Decimal | None,
        notes: str | None = None,
    ) -> VesselLetterOfCredit:
        """Finance part of a vessel's cargo with a letter of credit.

        Args:
            lc_id: The letter of credit
            vessel_id: The vessel
            quantity: Quantity financed by this letter of credit
            notes: Optional notes

        Returns:
            The created relation

        Raises:
            ValidationError: If the quantity is negative
            NotFoundError: If the letter of credit or vessel does not exist
        """
        with logfire.span(
            "allocate_vessel_to_letter_of_credit",
            lc_id=lc_id,
            vessel_id=vessel_id,
        ):
            if quantity is not None and quantity < 0:
                raise ValidationError("allocation quantity must not be negative")

            if not await self.letter_of_credit_repository.find_by_id(lc_id):
                raise NotFoundError(
                    AllocatableEntityType.LETTER_OF_CREDIT.value, str(lc_id)
                )
            if not await self.vessel_repository.find_by_id(vessel_id):
                raise NotFoundError("vessel", str(vessel_id))

            relation = await self.letter_of_credit_repository.add_relation(
                lc_id, vessel_id, quantity, notes
            )
            await self.transaction_manager.commit()
            logfire.info(
                "Vessel allocated to letter of credit",
                relation_id=relation.id,
                lc_id=lc_id,
                vessel_id=vessel_id,
            )

            await self.invalidation.allocation_changed(
                AllocatableEntityType.LETTER_OF_CREDIT, lc_id
            )
            return relation

    async def release_vessel_allocation(
        self, relation_id: VesselLetterOfCreditId
    ) -> VesselLetterOfCredit:
        """Remove a vessel from a letter of credit.

        Args:
            relation_id: The relation to delete

        Returns:
            The deleted relation

        Raises:
            NotFoundError: If the relation does not exist
        """
        with logfire.span("release_vessel_allocation", relation_id=relation_id):
            relation = await self.letter_of_credit_repository.find_relation_by_id(
                relation_id
            )
            if not relation:
                raise NotFoundError("vessel_letter_of_credit", str(relation_id))

            deleted = await self.letter_of_credit_repository.delete_relation(
                relation_id
            )
            if not deleted:
                # Removed concurrently between lookup and delete
                raise NotFoundError("vessel_letter_of_credit", str(relation_id))

            await self.transaction_manager.commit()
            logfire.info(
                "Vessel allocation released",
                relation_id=relation_id,
                lc_id=relation.lc_id,
            )

            await self.invalidation.allocation_changed(
                AllocatableEntityType.LETTER_OF_CREDIT, relation.lc_id
            )
            return relation

    async def update_vessel_quantity(
        self, vessel_id: VesselId, quantity: Decimal | None
    ) -> Vessel:
        """Change the quantity a vessel carries.

        Args:
            vessel_id: The vessel
            quantity: New quantity (None clears it)

        Returns:
            The updated vessel

        Raises:
            ValidationError: If the quantity is negative
            NotFoundError: If the vessel does not exist
        """
        with logfire.span("update_vessel_quantity", vessel_id=vessel_id):
            if quantity is not None and quantity < 0:
                raise ValidationError("vessel quantity must not be negative")

            vessel = await self.vessel_repository.update_quantity(vessel_id, quantity)
            if not vessel:
                raise NotFoundError("vessel", str(vessel_id))

            await self.transaction_manager.commit()
            logfire.info(
                "Vessel quantity updated",
                vessel_id=vessel_id,
                quantity=str(quantity),
            )

            if vessel.contract_id is not None:
                await self.invalidation.allocation_changed(
                    AllocatableEntityType.CONTRACT, vessel.contract_id
                )
            return vessel
