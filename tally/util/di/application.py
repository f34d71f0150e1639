"""Application layer DI providers."""

from dishka import Scope, provide

from tally.application.usecase.allocation import (
    AllocateVesselUseCase,
    GetAllocationSummaryUseCase,
    ReleaseVesselAllocationUseCase,
    UpdateVesselQuantityUseCase,
)
from tally.application.usecase.vote import (
    GetAggregateDecisionUseCase,
    ListDocumentGroupsUseCase,
    ListVotesUseCase,
    SubmitVoteUseCase,
)
from tally.domain.service import AllocationService, VoteService
from tally.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_submit_vote_use_case(self, vote_service: VoteService) -> SubmitVoteUseCase:
        """Provide submit vote use case."""
        return SubmitVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_aggregate_decision_use_case(
        self, vote_service: VoteService
    ) -> GetAggregateDecisionUseCase:
        """Provide get aggregate decision use case."""
        return GetAggregateDecisionUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_list_votes_use_case(self, vote_service: VoteService) -> ListVotesUseCase:
        """Provide list votes use case."""
        return ListVotesUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_list_document_groups_use_case(
        self, vote_service: VoteService
    ) -> ListDocumentGroupsUseCase:
        """Provide list document groups use case."""
        return ListDocumentGroupsUseCase(vote_service=vote_service)

    # Allocation use cases
    @provide(scope=Scope.REQUEST)
    def get_allocation_summary_use_case(
        self, allocation_service: AllocationService
    ) -> GetAllocationSummaryUseCase:
        """Provide get allocation summary use case."""
        return GetAllocationSummaryUseCase(allocation_service=allocation_service)

    @provide(scope=Scope.REQUEST)
    def get_allocate_vessel_use_case(
        self, allocation_service: AllocationService
    ) -> AllocateVesselUseCase:
        """Provide allocate vessel use case."""
        return AllocateVesselUseCase(allocation_service=allocation_service)

    @provide(scope=Scope.REQUEST)
    def get_release_vessel_allocation_use_case(
        self, allocation_service: AllocationService
    ) -> ReleaseVesselAllocationUseCase:
        """Provide release vessel allocation use case."""
        return ReleaseVesselAllocationUseCase(allocation_service=allocation_service)

    @provide(scope=Scope.REQUEST)
    def get_update_vessel_quantity_use_case(
        self, allocation_service: AllocationService
    ) -> UpdateVesselQuantityUseCase:
        """Provide update vessel quantity use case."""
        return UpdateVesselQuantityUseCase(allocation_service=allocation_service)
