"""Invalidation boundary.

Mutating services announce what changed through a single boundary instead
of each call site deciding which cached views to drop. Dashboards and
detail views subscribe to the hub and refresh whatever they derived from
the changed subject or entity.
"""

import inspect
from abc import ABC, abstractmethod
from enum import Enum
from typing import Awaitable, Callable, Union

import logfire

from tally.domain.value import AllocatableEntityType, SubjectType
from tally.domain.value.common import ValueObject


class InvalidationKind(str, Enum):
    """What kind of mutation made dependent views stale."""

    VOTE_RECORDED = "vote_recorded"
    ALLOCATION_CHANGED = "allocation_changed"


class Invalidation(ValueObject):
    """A single staleness notice."""

    kind: InvalidationKind
    target_type: str  # SubjectType or AllocatableEntityType value
    target_id: int


Subscriber = Callable[[Invalidation], Union[Awaitable[None], None]]


class InvalidationBoundary(ABC):
    """Hooks called once per successful, committed mutation."""

    @abstractmethod
    async def vote_recorded(self, subject_type: SubjectType, subject_id: int) -> None:
        """Announce that a vote was durably recorded on a subject."""
        pass

    @abstractmethod
    async def allocation_changed(
        self, entity_type: AllocatableEntityType, entity_id: int
    ) -> None:
        """Announce that an entity's allocations changed."""
        pass


class InvalidationHub(InvalidationBoundary):
    """In-process fan-out of invalidations to subscribers.

    Each notice is delivered once to every subscriber. A failing subscriber
    is logged and skipped: the mutation is already committed, so it must
    not be reported to the caller as failed.
    """

    def __init__(self) -> None:
        self._subscribers: list[Subscriber] = []

    def subscribe(self, subscriber: Subscriber) -> Callable[[], None]:
        """Register a subscriber.

        Args:
            subscriber: Sync or async callable receiving each Invalidation

        Returns:
            Callable that removes the subscriber again
        """
        self._subscribers.append(subscriber)

        def unsubscribe() -> None:
            if subscriber in self._subscribers:
                self._subscribers.remove(subscriber)

        return unsubscribe

    async def vote_recorded(self, subject_type: SubjectType, subject_id: int) -> None:
        await self._publish(
            Invalidation(
                kind=InvalidationKind.VOTE_RECORDED,
                target_type=subject_type.value,
                target_id=subject_id,
            )
        )

    async def allocation_changed(
        self, entity_type: AllocatableEntityType, entity_id: int
    ) -> None:
        await self._publish(
            Invalidation(
                kind=InvalidationKind.ALLOCATION_CHANGED,
                target_type=entity_type.value,
                target_id=entity_id,
            )
        )

    async def _publish(self, notice: Invalidation) -> None:
        with logfire.span(
            "invalidation_hub.publish",
            kind=notice.kind.value,
            target_type=notice.target_type,
            target_id=notice.target_id,
        ):
            # Copy so subscribers may unsubscribe while being notified
            for subscriber in list(self._subscribers):
                try:
                    result = subscriber(notice)
                    if inspect.isawaitable(result):
                        await result
                except Exception as e:
                    logfire.error(
                        "Invalidation subscriber failed",
                        kind=notice.kind.value,
                        target_type=notice.target_type,
                        target_id=notice.target_id,
                        error=str(e),
                        error_type=type(e).__name__,
                    )


def log_invalidation(notice: Invalidation) -> None:
    """Default subscriber: record every invalidation in the logs."""
    logfire.info(
        "Views invalidated",
        kind=notice.kind.value,
        target_type=notice.target_type,
        target_id=notice.target_id,
    )
