"""Shared plumbing for application services."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Protocol, TypeVar
from uuid import uuid4

from hr_payroll.domain import AggregateRoot
from hr_payroll.domain.aggregate import Clock
from hr_payroll.domain.identifiers import IdGenerator
from hr_payroll.events import EventEmitter

logger = logging.getLogger(__name__)

A = TypeVar("A", bound=AggregateRoot)


class ServiceError(Exception):
    """Base class for collaborator-level failures."""


class EntityNotFoundError(ServiceError, LookupError):
    """Raised when a referenced aggregate does not exist."""

    def __init__(self, entity: str, entity_id: Any):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")


class DuplicateEntityError(ServiceError):
    """Raised when a uniqueness convention would be broken."""


class _Saves(Protocol):
    def save(self, aggregate: Any) -> Any: ...


class AggregateService:
    """Base for services that run one unit of work per call.

    A unit of work loads an aggregate, invokes one guarded mutator, saves
    the aggregate and then publishes the events it recorded. If the mutator
    raises, nothing is saved and nothing is published.
    """

    def __init__(
        self,
        emitter: EventEmitter | None = None,
        id_generator: IdGenerator = uuid4,
        clock: Clock = date.today,
    ) -> None:
        self.emitter = emitter if emitter is not None else EventEmitter()
        self.id_generator = id_generator
        self.clock = clock

    def _commit(self, repository: _Saves, aggregate: A) -> A:
        """Save ``aggregate`` and publish its drained events."""
        repository.save(aggregate)
        events = aggregate.pull_domain_events()
        with self.emitter.batch() as batch:
            batch.add_all(events)
        if batch.errors:
            logger.warning(
                "%d event handler(s) failed while publishing %s events",
                len(batch.errors),
                type(aggregate).__name__,
            )
        return aggregate
