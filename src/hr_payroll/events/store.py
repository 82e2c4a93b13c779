"""In-memory event store used as the published-event audit log.

The store provides:
- Append-only storage of published domain events
- Idempotent writes (via event_id)
- Filtering by aggregate, type and category
- Ordered replay

It can be registered directly as a catch-all emitter handler:

    store = EventStore()
    emitter.on_all(store.append)
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterator
from uuid import UUID

from hr_payroll.domain.events import DomainEvent, EventCategory
from hr_payroll.domain.identifiers import EntityId


@dataclass(frozen=True)
class StoredEvent:
    """A recorded event with a JSON-safe payload."""

    sequence: int
    event_id: UUID
    event_type: str
    category: str
    aggregate_id: UUID
    occurred_on: datetime
    payload: dict[str, Any]
    version: int

    @classmethod
    def from_event(cls, event: DomainEvent, sequence: int) -> StoredEvent:
        """Create stored event from domain event."""
        return cls(
            sequence=sequence,
            event_id=event.metadata.event_id,
            event_type=event.event_type,
            category=event.category.value,
            aggregate_id=event.metadata.aggregate_id,
            occurred_on=event.metadata.occurred_on,
            payload=event.payload(),
            version=event.metadata.version,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "sequence": self.sequence,
            "event_id": str(self.event_id),
            "event_type": self.event_type,
            "category": self.category,
            "aggregate_id": str(self.aggregate_id),
            "occurred_on": self.occurred_on.isoformat(),
            "payload": self.payload,
            "version": self.version,
        }


class EventStore:
    """Append-only, in-process event log."""

    def __init__(self) -> None:
        self._events: list[StoredEvent] = []
        self._seen: set[UUID] = set()

    def __call__(self, event: DomainEvent) -> None:
        self.append(event)

    def __len__(self) -> int:
        return len(self._events)

    def append(self, event: DomainEvent) -> bool:
        """Append event to store.

        Returns True if event was stored, False if duplicate (idempotent).
        """
        if event.metadata.event_id in self._seen:
            return False

        self._events.append(StoredEvent.from_event(event, sequence=len(self._events) + 1))
        self._seen.add(event.metadata.event_id)
        return True

    def append_batch(self, events: list[DomainEvent]) -> int:
        """Append events in order. Returns count of newly stored events."""
        return sum(1 for event in events if self.append(event))

    def get_by_aggregate(self, aggregate_id: EntityId | UUID) -> list[StoredEvent]:
        if isinstance(aggregate_id, EntityId):
            aggregate_id = aggregate_id.value
        return [e for e in self._events if e.aggregate_id == aggregate_id]

    def get_by_type(self, event_type: str) -> list[StoredEvent]:
        return [e for e in self._events if e.event_type == event_type]

    def get_by_category(self, category: EventCategory | str) -> list[StoredEvent]:
        value = category.value if isinstance(category, EventCategory) else category
        return [e for e in self._events if e.category == value]

    def replay(self, after_sequence: int = 0) -> Iterator[StoredEvent]:
        """Yield events with a sequence number greater than ``after_sequence``."""
        for event in self._events:
            if event.sequence > after_sequence:
                yield event
