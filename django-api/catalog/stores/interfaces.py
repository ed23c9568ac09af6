"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
Every failed query surfaces as StorageQueryError.
"""

from abc import ABC, abstractmethod

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


class CatalogStore(ABC):
    """Interface for catalog persistence operations."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events ordered by event_name ascending."""
        ...

    @abstractmethod
    def list_child_events(self, parent_event_id: str) -> list[ChildEvent]:
        """Return events whose parent is parent_event_id.

        Ordered by event_date_start ascending, then event_name ascending.
        """
        ...

    @abstractmethod
    def list_event_sessions(self, event_id: str) -> list[EventSession]:
        """Return sessions of an event.

        Ordered by sequence_in_event ascending, then session_date ascending.
        """
        ...

    @abstractmethod
    def get_session(self, session_id: str) -> Session | None:
        """Return a session by ID, or None if not found."""
        ...

    @abstractmethod
    def create_session(self, new_session: NewSession) -> Session:
        """Persist a new session and return it."""
        ...

    @abstractmethod
    def list_topics(self) -> list[Topic]:
        """Return all topics ordered by name ascending."""
        ...

    @abstractmethod
    def create_topic(self, name: str, type_: TaxonomyType) -> Topic:
        """Persist a new topic. Raises DuplicateNameError on a taken name."""
        ...

    @abstractmethod
    def list_categories(self) -> list[Category]:
        """Return all categories ordered by name ascending."""
        ...

    @abstractmethod
    def create_category(self, name: str, type_: TaxonomyType) -> Category:
        """Persist a new category. Raises DuplicateNameError on a taken name."""
        ...

    @abstractmethod
    def update_topic(
        self, topic_id: str, name: str, type_: TaxonomyType | None
    ) -> Topic | None:
        """Rename a topic, retyping it when type_ is given.

        Returns None if no topic has topic_id. Raises DuplicateNameError on a
        taken name.
        """
        ...

    @abstractmethod
    def delete_topic(self, topic_id: str) -> bool:
        """Delete a topic. Returns False if no topic has topic_id."""
        ...

    @abstractmethod
    def update_category(
        self, category_id: str, name: str, type_: TaxonomyType | None
    ) -> Category | None:
        """Rename a category, retyping it when type_ is given.

        Returns None if no category has category_id. Raises DuplicateNameError
        on a taken name.
        """
        ...

    @abstractmethod
    def delete_category(self, category_id: str) -> bool:
        """Delete a category. Returns False if no category has category_id."""
        ...
