"""Domain services."""

from .allocation import reconcile
from .allocation_service import AllocationService
from .base import Service
from .identity_service import IdentityService
from .notification import (
    Invalidation,
    InvalidationBoundary,
    InvalidationHub,
    InvalidationKind,
    log_invalidation,
)
from .subject_resolver import SubjectResolver, group_by_subject_document
from .vote_policy import (
    aggregate_decision,
    document_reference,
    parse_decision,
    validate_submission,
)
from .vote_service import VoteService

__all__ = [
    "AllocationService",
    "Invalidation",
    "InvalidationBoundary",
    "InvalidationHub",
    "InvalidationKind",
    "IdentityService",
    "Service",
    "SubjectResolver",
    "VoteService",
    "aggregate_decision",
    "document_reference",
    "group_by_subject_document",
    "log_invalidation",
    "parse_decision",
    "reconcile",
    "validate_submission",
]
