"""Catalog service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from dataclasses import dataclass

from catalog.domain import (
    Category,
    ChildEvent,
    Event,
    EventSession,
    NewSession,
    Session,
    TaxonomyType,
    Topic,
)
from catalog.domain.errors import (
    InvalidTaxonomyTypeError,
    RequiredFieldError,
    SessionNotFoundError,
    TaxonomyEntryNotFoundError,
)
from catalog.stores.interfaces import CatalogStore

logger = logging.getLogger(__name__)

# Passed as type_ to an update to keep the stored type.
UNCHANGED = object()


@dataclass(frozen=True)
class NewSessionFormData:
    """Reference lists and default selection for the new-session form."""

    events: list[Event]
    topics: list[Topic]
    categories: list[Category]
    default_event_id: str | None = None


class CatalogService:
    """Service for archive catalog operations."""

    def __init__(self, store: CatalogStore) -> None:
        self._store = store

    def list_child_events(self, event_id: str) -> list[ChildEvent]:
        """Return the direct children of an event.

        The identifier is passed through as-is; an identifier the store
        cannot compare fails like any other query.

        Raises:
            StorageQueryError: If the query fails.
        """
        return self._store.list_child_events(event_id)

    def list_event_sessions(self, event_id: str) -> list[EventSession]:
        """Return the sessions of an event.

        Raises:
            StorageQueryError: If the query fails.
        """
        return self._store.list_event_sessions(event_id)

    def load_new_session_form(self, default_event_id: str | None = None) -> NewSessionFormData:
        """Load everything the new-session form needs, one query at a time."""
        events = self._store.list_events()
        topics = self._store.list_topics()
        categories = self._store.list_categories()
        return NewSessionFormData(
            events=events,
            topics=topics,
            categories=categories,
            default_event_id=default_event_id or None,
        )

    def get_session(self, session_id: str) -> Session:
        """Return a session by ID.

        Raises:
            SessionNotFoundError: If the session does not exist.
        """
        session = self._store.get_session(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    def create_session(self, new_session: NewSession) -> Session:
        """Persist a session.

        Raises:
            RequiredFieldError: If the session ID or name is blank.
            DuplicateNameError: If the session ID is already taken.
        """
        if not new_session.session_id.strip():
            raise RequiredFieldError("sessionId")
        if not new_session.session_name.strip():
            raise RequiredFieldError("sessionName")
        session = self._store.create_session(new_session)
        logger.info("created session %s (%s)", session.session_id, session.id)
        return session

    def list_topics(self) -> list[Topic]:
        return self._store.list_topics()

    def create_topic(self, name: object, type_: object) -> Topic:
        """Create a topic under one of the fixed taxonomy types.

        Raises:
            RequiredFieldError: If the name or type is blank.
            InvalidTaxonomyTypeError: If the type is not a known label.
            DuplicateNameError: If the name is already taken.
        """
        name, taxonomy_type = self._validate_taxonomy_entry(name, type_)
        return self._store.create_topic(name, taxonomy_type)

    def list_categories(self) -> list[Category]:
        return self._store.list_categories()

    def create_category(self, name: object, type_: object) -> Category:
        """Create a category under one of the fixed taxonomy types.

        Raises:
            RequiredFieldError: If the name or type is blank.
            InvalidTaxonomyTypeError: If the type is not a known label.
            DuplicateNameError: If the name is already taken.
        """
        name, taxonomy_type = self._validate_taxonomy_entry(name, type_)
        return self._store.create_category(name, taxonomy_type)

    def update_topic(self, topic_id: str, name: object, type_: object = UNCHANGED) -> Topic:
        """Rename a topic, and retype it unless type_ is UNCHANGED.

        Raises:
            RequiredFieldError: If the name, or a given type, is blank.
            InvalidTaxonomyTypeError: If a given type is not a known label.
            TaxonomyEntryNotFoundError: If the topic does not exist.
            DuplicateNameError: If the name is already taken.
        """
        name, taxonomy_type = self._validate_taxonomy_update(name, type_)
        topic = self._store.update_topic(topic_id, name, taxonomy_type)
        if topic is None:
            raise TaxonomyEntryNotFoundError(topic_id)
        return topic

    def delete_topic(self, topic_id: str) -> None:
        """Raises TaxonomyEntryNotFoundError if the topic does not exist."""
        if not self._store.delete_topic(topic_id):
            raise TaxonomyEntryNotFoundError(topic_id)
        logger.info("deleted topic %s", topic_id)

    def update_category(
        self, category_id: str, name: object, type_: object = UNCHANGED
    ) -> Category:
        """Rename a category, and retype it unless type_ is UNCHANGED.

        Raises the same errors as update_topic.
        """
        name, taxonomy_type = self._validate_taxonomy_update(name, type_)
        category = self._store.update_category(category_id, name, taxonomy_type)
        if category is None:
            raise TaxonomyEntryNotFoundError(category_id)
        return category

    def delete_category(self, category_id: str) -> None:
        if not self._store.delete_category(category_id):
            raise TaxonomyEntryNotFoundError(category_id)
        logger.info("deleted category %s", category_id)

    @classmethod
    def _validate_taxonomy_update(
        cls, name: object, type_: object
    ) -> tuple[str, TaxonomyType | None]:
        if type_ is UNCHANGED:
            if not isinstance(name, str) or not name.strip():
                raise RequiredFieldError("name")
            return name.strip(), None
        return cls._validate_taxonomy_entry(name, type_)

    @staticmethod
    def _validate_taxonomy_entry(name: object, type_: object) -> tuple[str, TaxonomyType]:
        if not isinstance(name, str) or not name.strip():
            raise RequiredFieldError("name")
        if not isinstance(type_, str) or not type_.strip():
            raise RequiredFieldError("type")
        try:
            taxonomy_type = TaxonomyType.parse(type_.strip())
        except ValueError:
            raise InvalidTaxonomyTypeError(type_) from None
        return name.strip(), taxonomy_type
