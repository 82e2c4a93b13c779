"""Published domain event endpoints."""

from uuid import UUID

from fastapi import APIRouter

from hr_payroll.api.dependencies import Events
from hr_payroll.api.schemas import EventListResponse, EventResponse
from hr_payroll.domain import EventCategory

router = APIRouter(prefix="/events", tags=["events"])


@router.get("", response_model=EventListResponse)
async def list_events(
    store: Events,
    aggregate_id: UUID | None = None,
    event_type: str | None = None,
    category: EventCategory | None = None,
    after_sequence: int = 0,
) -> EventListResponse:
    """List published events in sequence order."""
    if aggregate_id is not None:
        events = store.get_by_aggregate(aggregate_id)
    elif event_type is not None:
        events = store.get_by_type(event_type)
    elif category is not None:
        events = store.get_by_category(category)
    else:
        events = list(store.replay(after_sequence))

    if event_type is not None:
        events = [e for e in events if e.event_type == event_type]
    if category is not None:
        events = [e for e in events if e.category == category.value]
    events = [e for e in events if e.sequence > after_sequence]
    return EventListResponse(
        items=[EventResponse.from_stored(e) for e in events],
        total=len(events),
    )
