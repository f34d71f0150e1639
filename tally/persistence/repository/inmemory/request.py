"""In-memory request repository for testing."""

from typing import Optional

from tally.domain.model.request import Request
from tally.domain.repository.request import RequestRepository
from tally.domain.value import RequestId


class InMemoryRequestRepository(RequestRepository):
    """In-memory implementation of RequestRepository for testing."""

    def __init__(self) -> None:
        self._requests: dict[RequestId, Request] = {}

    async def find_by_id(self, request_id: RequestId) -> Optional[Request]:
        return self._requests.get(request_id)

    async def save(self, request: Request) -> Request:
        self._requests[request.id] = request
        return request
