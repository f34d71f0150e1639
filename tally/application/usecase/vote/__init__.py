"""Vote use cases."""

from .get_aggregate_decision import (
    GetAggregateDecisionRequest,
    GetAggregateDecisionResponse,
    GetAggregateDecisionUseCase,
)
from .list_document_groups import (
    DocumentGroupInfo,
    ListDocumentGroupsRequest,
    ListDocumentGroupsResponse,
    ListDocumentGroupsUseCase,
)
from .list_votes import ListVotesRequest, ListVotesResponse, ListVotesUseCase, VoteInfo
from .submit_vote import SubmitVoteRequest, SubmitVoteResponse, SubmitVoteUseCase

__all__ = [
    "DocumentGroupInfo",
    "GetAggregateDecisionRequest",
    "GetAggregateDecisionResponse",
    "GetAggregateDecisionUseCase",
    "ListDocumentGroupsRequest",
    "ListDocumentGroupsResponse",
    "ListDocumentGroupsUseCase",
    "ListVotesRequest",
    "ListVotesResponse",
    "ListVotesUseCase",
    "SubmitVoteRequest",
    "SubmitVoteResponse",
    "SubmitVoteUseCase",
    "VoteInfo",
]
