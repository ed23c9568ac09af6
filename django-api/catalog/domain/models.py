"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in catalog/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import date, datetime, time

from catalog.domain.value_objects import (
    CategoryId,
    EventId,
    SessionId,
    TaxonomyType,
    TopicId,
)


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    event_id: str
    event_name: str
    event_type: str | None
    event_date_start: date | None
    event_date_end: date | None
    parent_event_id: EventId | None
    event_description: str | None
    cataloging_status: str | None
    notes: str | None
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class ChildEvent:
    """Projection of an Event as listed under its parent."""

    id: EventId
    event_id: str
    event_name: str
    event_type: str | None
    event_date_start: date | None


@dataclass(frozen=True)
class Session:
    """Domain representation of a Session."""

    id: SessionId
    session_id: str
    event_id: EventId | None
    session_name: str
    session_date: date | None
    session_time: str | None
    session_start_time: time | None
    session_end_time: time | None
    sequence_in_event: int | None
    topic: str | None
    category: str | None
    session_description: str | None
    duration_estimated: str | None
    cataloging_status: str | None
    notes: str | None
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class EventSession:
    """Projection of a Session as listed under its event."""

    id: SessionId
    session_name: str
    session_date: date | None
    sequence_in_event: int | None


@dataclass(frozen=True)
class NewSession:
    """Values for a session that has not been persisted yet."""

    session_id: str
    session_name: str
    event_id: EventId | None = None
    session_date: date | None = None
    session_time: str | None = None
    session_start_time: time | None = None
    session_end_time: time | None = None
    sequence_in_event: int | None = None
    topic: str | None = None
    category: str | None = None
    session_description: str | None = None
    duration_estimated: str | None = None
    cataloging_status: str | None = None
    notes: str | None = None


@dataclass(frozen=True)
class Topic:
    """Domain representation of a Topic."""

    id: TopicId
    name: str
    type: TaxonomyType


@dataclass(frozen=True)
class Category:
    """Domain representation of a Category."""

    id: CategoryId
    name: str
    type: TaxonomyType
