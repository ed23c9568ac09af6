from catalog.domain.models import (
    Category,
    ChildEvent,
    Event,
    EventSession,
    NewSession,
    Session,
    Topic,
)
from catalog.domain.value_objects import (
    CategoryId,
    EventId,
    SessionId,
    TaxonomyType,
    TopicId,
)

__all__ = [
    "Event",
    "ChildEvent",
    "Session",
    "EventSession",
    "NewSession",
    "Topic",
    "Category",
    "EventId",
    "SessionId",
    "TopicId",
    "CategoryId",
    "TaxonomyType",
]
