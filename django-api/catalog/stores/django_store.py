"""Django ORM implementation of the CatalogStore."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from uuid import UUID

from django.core.exceptions import ValidationError
from django.db import Error, IntegrityError, transaction
from django.db.models import F, Model
from django.utils import timezone

from catalog import models
from catalog.domain import (
    Category,
    CategoryId,
    ChildEvent,
    Event,
    EventId,
    EventSession,
    NewSession,
    Session,
    SessionId,
    TaxonomyType,
    Topic,
    TopicId,
)
from catalog.domain.errors import DuplicateNameError, StorageQueryError
from catalog.stores.interfaces import CatalogStore

logger = logging.getLogger(__name__)


@contextmanager
def _query(operation: str) -> Iterator[None]:
    """Translate failures raised inside the block into StorageQueryError.

    Covers every django.db error, InterfaceError from a dropped connection
    included. Lookup values the column rejects and stored type labels outside
    TaxonomyType count as failed queries too.
    """
    try:
        yield
    except (Error, ValidationError, ValueError) as e:
        logger.debug("query %s failed: %s", operation, e)
        raise StorageQueryError(operation) from e


def _event_id(value: UUID | None) -> EventId | None:
    return EventId(value=value) if value is not None else None


def _to_event(row: models.Event) -> Event:
    return Event(
        id=EventId(value=row.id),
        event_id=row.event_id,
        event_name=row.event_name,
        event_type=row.event_type,
        event_date_start=row.event_date_start,
        event_date_end=row.event_date_end,
        parent_event_id=_event_id(row.parent_event_id),
        event_description=row.event_description,
        cataloging_status=row.cataloging_status,
        notes=row.notes,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _to_session(row: models.Session) -> Session:
    return Session(
        id=SessionId(value=row.id),
        session_id=row.session_id,
        event_id=_event_id(row.event_id),
        session_name=row.session_name,
        session_date=row.session_date,
        session_time=row.session_time,
        session_start_time=row.session_start_time,
        session_end_time=row.session_end_time,
        sequence_in_event=row.sequence_in_event,
        topic=row.topic,
        category=row.category,
        session_description=row.session_description,
        duration_estimated=row.duration_estimated,
        cataloging_status=row.cataloging_status,
        notes=row.notes,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _to_topic(row: models.Topic) -> Topic:
    return Topic(id=TopicId(value=row.id), name=row.name, type=TaxonomyType(row.type))


def _to_category(row: models.Category) -> Category:
    return Category(
        id=CategoryId(value=row.id), name=row.name, type=TaxonomyType(row.type)
    )


class DjangoCatalogStore(CatalogStore):
    """Relational catalog store using Django ORM.

    Sort keys put NULLs last on every backend, matching PostgreSQL's
    ascending default.
    """

    def list_events(self) -> list[Event]:
        with _query("list_events"):
            rows = models.Event.objects.order_by(F("event_name").asc())
            return [_to_event(row) for row in rows]

    def list_child_events(self, parent_event_id: str) -> list[ChildEvent]:
        with _query("list_child_events"):
            rows = (
                models.Event.objects.filter(parent_event_id=parent_event_id)
                .order_by(
                    F("event_date_start").asc(nulls_last=True),
                    F("event_name").asc(),
                )
                .values("id", "event_id", "event_name", "event_type", "event_date_start")
            )
            return [
                ChildEvent(
                    id=EventId(value=row["id"]),
                    event_id=row["event_id"],
                    event_name=row["event_name"],
                    event_type=row["event_type"],
                    event_date_start=row["event_date_start"],
                )
                for row in rows
            ]

    def list_event_sessions(self, event_id: str) -> list[EventSession]:
        with _query("list_event_sessions"):
            rows = (
                models.Session.objects.filter(event_id=event_id)
                .order_by(
                    F("sequence_in_event").asc(nulls_last=True),
                    F("session_date").asc(nulls_last=True),
                )
                .values("id", "session_name", "session_date", "sequence_in_event")
            )
            return [
                EventSession(
                    id=SessionId(value=row["id"]),
                    session_name=row["session_name"],
                    session_date=row["session_date"],
                    sequence_in_event=row["sequence_in_event"],
                )
                for row in rows
            ]

    def get_session(self, session_id: str) -> Session | None:
        try:
            pk = SessionId.from_string(session_id)
        except ValueError:
            return None
        with _query("get_session"):
            row = models.Session.objects.filter(pk=pk.value).first()
        return _to_session(row) if row is not None else None

    def create_session(self, new_session: NewSession) -> Session:
        try:
            with transaction.atomic():
                row = models.Session.objects.create(
                    session_id=new_session.session_id,
                    event_id=new_session.event_id.value if new_session.event_id else None,
                    session_name=new_session.session_name,
                    session_date=new_session.session_date,
                    session_time=new_session.session_time,
                    session_start_time=new_session.session_start_time,
                    session_end_time=new_session.session_end_time,
                    sequence_in_event=new_session.sequence_in_event,
                    topic=new_session.topic,
                    category=new_session.category,
                    session_description=new_session.session_description,
                    duration_estimated=new_session.duration_estimated,
                    cataloging_status=new_session.cataloging_status,
                    notes=new_session.notes,
                )
        except IntegrityError as e:
            raise DuplicateNameError(new_session.session_id) from e
        except Error as e:
            raise StorageQueryError("create_session") from e
        return _to_session(row)

    def list_topics(self) -> list[Topic]:
        with _query("list_topics"):
            return [_to_topic(row) for row in models.Topic.objects.order_by("name")]

    def create_topic(self, name: str, type_: TaxonomyType) -> Topic:
        try:
            with transaction.atomic():
                row = models.Topic.objects.create(name=name, type=type_.value)
        except IntegrityError as e:
            raise DuplicateNameError(name) from e
        except Error as e:
            raise StorageQueryError("create_topic") from e
        return _to_topic(row)

    def list_categories(self) -> list[Category]:
        with _query("list_categories"):
            return [
                _to_category(row) for row in models.Category.objects.order_by("name")
            ]

    def create_category(self, name: str, type_: TaxonomyType) -> Category:
        try:
            with transaction.atomic():
                row = models.Category.objects.create(name=name, type=type_.value)
        except IntegrityError as e:
            raise DuplicateNameError(name) from e
        except Error as e:
            raise StorageQueryError("create_category") from e
        return _to_category(row)

    def update_topic(
        self, topic_id: str, name: str, type_: TaxonomyType | None
    ) -> Topic | None:
        row = _update_entry(models.Topic, topic_id, name, type_, "update_topic")
        with _query("update_topic"):
            return _to_topic(row) if row is not None else None

    def delete_topic(self, topic_id: str) -> bool:
        with _query("delete_topic"):
            deleted, _ = models.Topic.objects.filter(pk=topic_id).delete()
        return deleted > 0

    def update_category(
        self, category_id: str, name: str, type_: TaxonomyType | None
    ) -> Category | None:
        row = _update_entry(models.Category, category_id, name, type_, "update_category")
        with _query("update_category"):
            return _to_category(row) if row is not None else None

    def delete_category(self, category_id: str) -> bool:
        with _query("delete_category"):
            deleted, _ = models.Category.objects.filter(pk=category_id).delete()
        return deleted > 0


def _update_entry(
    model: type[Model],
    entry_id: str,
    name: str,
    type_: TaxonomyType | None,
    operation: str,
) -> Model | None:
    """Rename a topic or category row, retyping it when type_ is given.

    Returns the updated row, or None when no row has entry_id.
    """
    values = {"name": name, "updated_at": timezone.now()}
    if type_ is not None:
        values["type"] = type_.value
    try:
        with transaction.atomic():
            if not model.objects.filter(pk=entry_id).update(**values):
                return None
            return model.objects.get(pk=entry_id)
    except IntegrityError as e:
        raise DuplicateNameError(name) from e
    except (Error, ValidationError) as e:
        raise StorageQueryError(operation) from e
