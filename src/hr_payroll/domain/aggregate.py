"""Aggregate root base with a pending domain event log."""

from __future__ import annotations

from datetime import date
from typing import Callable, Generic, TypeVar

from hr_payroll.domain.events import DomainEvent
from hr_payroll.domain.identifiers import EntityId

Clock = Callable[[], date]
"""Source of "today". Injected into factories; ``date.today`` by default."""

TId = TypeVar("TId", bound=EntityId)


class AggregateRoot(Generic[TId]):
    """Consistency boundary that records domain events as it mutates.

    Events accumulate in order during a unit of work. The owner publishes
    them and then clears the log; ``pull_domain_events`` reads
    and clears in one call. A log that is never cleared replays its events
    on the next read.
    """

    def __init__(self, aggregate_id: TId, clock: Clock = date.today) -> None:
        self._id = aggregate_id
        self._clock = clock
        self._domain_events: list[DomainEvent] = []

    @property
    def id(self) -> TId:
        return self._id

    @property
    def domain_events(self) -> tuple[DomainEvent, ...]:
        """Pending events, oldest first."""
        return tuple(self._domain_events)

    def clear_domain_events(self) -> None:
        self._domain_events.clear()

    def pull_domain_events(self) -> list[DomainEvent]:
        """Return pending events and clear the log."""
        events = list(self._domain_events)
        self._domain_events.clear()
        return events

    def _register_event(self, event: DomainEvent) -> None:
        self._domain_events.append(event)

    def _today(self) -> date:
        return self._clock()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AggregateRoot) or type(other) is not type(self):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._id))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id})"
