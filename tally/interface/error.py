"""Interface layer errors.

Translates domain errors into HTTP errors. Expected failures are logged as
warnings; a DataIntegrityError means stored data is corrupt and is logged
as an error.
"""

import logfire
from fastapi import HTTPException, status

from tally.domain.error import (
    DataIntegrityError,
    DomainError,
    DuplicateVoterError,
    NotFoundError,
    ValidationError,
)

_STATUS_CODES: dict[type[DomainError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    DuplicateVoterError: status.HTTP_409_CONFLICT,
    DataIntegrityError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def http_error(error: DomainError) -> HTTPException:
    """Build the HTTPException for a domain error.

    Args:
        error: Error raised by a use case

    Returns:
        HTTPException carrying the matching status code
    """
    status_code = next(
        (
            code
            for error_type, code in _STATUS_CODES.items()
            if isinstance(error, error_type)
        ),
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )

    if status_code >= 500:
        logfire.error(
            "Request failed",
            error=str(error),
            error_type=type(error).__name__,
        )
        return HTTPException(status_code=status_code, detail="Internal server error")

    logfire.warn(
        "Request rejected",
        error=str(error),
        error_type=type(error).__name__,
        status_code=status_code,
    )
    return HTTPException(status_code=status_code, detail=str(error))
