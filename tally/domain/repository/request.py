"""Contract request repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from tally.domain.model.request import Request
from tally.domain.value import RequestId


class RequestRepository(ABC):
    """Repository for Request entity."""

    @abstractmethod
    async def find_by_id(self, request_id: RequestId) -> Optional[Request]:
        """Find a request by ID."""
        pass

    @abstractmethod
    async def save(self, request: Request) -> Request:
        """Save a request (create or update)."""
        pass
