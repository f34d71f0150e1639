"""Domain layer DI providers."""

from dishka import Scope, provide

from tally.config import AuthSettings
from tally.domain.repository import (
    ContractRepository,
    DocumentRepository,
    LetterOfCreditRepository,
    RequestRepository,
    TransactionManager,
    VesselRepository,
    VoteRepository,
)
from tally.domain.service import (
    AllocationService,
    IdentityService,
    InvalidationBoundary,
    InvalidationHub,
    SubjectResolver,
    VoteService,
    log_invalidation,
)
from tally.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    The invalidation hub is APP-scoped: subscribers outlive single requests.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_invalidation_hub(self) -> InvalidationHub:
        """Provide the application-wide invalidation hub."""
        hub = InvalidationHub()
        hub.subscribe(log_invalidation)
        return hub

    @provide(scope=Scope.APP)
    def get_invalidation_boundary(self, hub: InvalidationHub) -> InvalidationBoundary:
        """Expose the hub as the boundary services notify."""
        return hub

    @provide(scope=Scope.APP)
    def get_identity_service(self, auth_settings: AuthSettings) -> IdentityService:
        """Provide voter identity domain service."""
        return IdentityService(auth_settings=auth_settings)

    @provide
    def get_subject_resolver(
        self,
        vote_repository: VoteRepository,
        contract_repository: ContractRepository,
        request_repository: RequestRepository,
        document_repository: DocumentRepository,
        letter_of_credit_repository: LetterOfCreditRepository,
        vessel_repository: VesselRepository,
    ) -> SubjectResolver:
        """Provide subject resolution service."""
        return SubjectResolver(
            vote_repository=vote_repository,
            contract_repository=contract_repository,
            request_repository=request_repository,
            document_repository=document_repository,
            letter_of_credit_repository=letter_of_credit_repository,
            vessel_repository=vessel_repository,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        subject_resolver: SubjectResolver,
        transaction_manager: TransactionManager,
        invalidation: InvalidationBoundary,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            subject_resolver=subject_resolver,
            transaction_manager=transaction_manager,
            invalidation=invalidation,
        )

    @provide
    def get_allocation_service(
        self,
        subject_resolver: SubjectResolver,
        letter_of_credit_repository: LetterOfCreditRepository,
        vessel_repository: VesselRepository,
        transaction_manager: TransactionManager,
        invalidation: InvalidationBoundary,
    ) -> AllocationService:
        """Provide allocation domain service."""
        return AllocationService(
            subject_resolver=subject_resolver,
            letter_of_credit_repository=letter_of_credit_repository,
            vessel_repository=vessel_repository,
            transaction_manager=transaction_manager,
            invalidation=invalidation,
        )
