"""Vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, status
from pydantic import BaseModel

from tally.application.usecase.vote import (
    GetAggregateDecisionRequest,
    GetAggregateDecisionResponse,
    GetAggregateDecisionUseCase,
    ListDocumentGroupsRequest,
    ListDocumentGroupsResponse,
    ListDocumentGroupsUseCase,
    ListVotesRequest,
    ListVotesResponse,
    ListVotesUseCase,
    SubmitVoteRequest,
    SubmitVoteResponse,
    SubmitVoteUseCase,
)
from tally.config import AuthSettings
from tally.domain.error import DomainError
from tally.domain.service import IdentityService
from tally.domain.value import SubjectType
from tally.interface.error import http_error

router = APIRouter(prefix="/votes", tags=["votes"], route_class=DishkaRoute)


class SubmitVoteBody(BaseModel):
    """Body of a vote submission."""

    decision: str
    comment: str | None = None
    file_name: str | None = None
    file_path: str | None = None


@router.post(
    "/{subject_type}/{subject_id}",
    response_model=SubmitVoteResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_vote(
    subject_type: SubjectType,
    subject_id: int,
    body: SubmitVoteBody,
    submit_vote_use_case: FromDishka[SubmitVoteUseCase],
    identity_service: FromDishka[IdentityService],
    auth_settings: FromDishka[AuthSettings],
    http_request: Request,
) -> SubmitVoteResponse:
    """Cast a vote on a contract, request or document.

    Requires authentication. A rejection must carry a comment.

    Args:
        subject_type: contract, request or document
        subject_id: ID of the subject
        body: Decision, comment and, on document votes, an optional echo
            of the document reference
        submit_vote_use_case: Submit vote use case from DI
        identity_service: Identity service for token verification (injected)
        auth_settings: Names the cookie carrying the JWT (injected)
        http_request: Incoming request, read for the auth cookie

    Returns:
        The subject's aggregate decision after this vote

    Raises:
        HTTPException: 401 if not authenticated, 400 on invalid input,
            404 if the subject is missing, 409 if already voted
    """
    auth_token = http_request.cookies.get(auth_settings.cookie_name)
    voter_id = identity_service.get_voter_id_from_token(auth_token)
    if not voter_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to vote",
        )

    try:
        request = SubmitVoteRequest(
            subject_type=subject_type,
            subject_id=subject_id,
            voter_id=voter_id,
            decision=body.decision,
            comment=body.comment,
            file_name=body.file_name,
            file_path=body.file_path,
        )
        return await submit_vote_use_case.execute(request)
    except DomainError as e:
        raise http_error(e)


@router.get(
    "/{subject_type}/{subject_id}/decision",
    response_model=GetAggregateDecisionResponse,
)
async def get_aggregate_decision(
    subject_type: SubjectType,
    subject_id: int,
    use_case: FromDishka[GetAggregateDecisionUseCase],
) -> GetAggregateDecisionResponse:
    """Get the overall approval state of a subject."""
    try:
        return await use_case.execute(
            GetAggregateDecisionRequest(subject_type=subject_type, subject_id=subject_id)
        )
    except DomainError as e:
        raise http_error(e)


@router.get("/{subject_type}/{subject_id}", response_model=ListVotesResponse)
async def list_votes(
    subject_type: SubjectType,
    subject_id: int,
    use_case: FromDishka[ListVotesUseCase],
) -> ListVotesResponse:
    """List the votes on a subject, oldest first."""
    try:
        return await use_case.execute(
            ListVotesRequest(subject_type=subject_type, subject_id=subject_id)
        )
    except DomainError as e:
        raise http_error(e)


@router.get(
    "/{subject_type}/{subject_id}/documents",
    response_model=ListDocumentGroupsResponse,
)
async def list_document_groups(
    subject_type: SubjectType,
    subject_id: int,
    use_case: FromDishka[ListDocumentGroupsUseCase],
) -> ListDocumentGroupsResponse:
    """List a subject's votes grouped per uploaded document."""
    try:
        return await use_case.execute(
            ListDocumentGroupsRequest(subject_type=subject_type, subject_id=subject_id)
        )
    except DomainError as e:
        raise http_error(e)
