"""Integration tests for DjangoCatalogStore against the test database.

Run with: pytest tests/test_stores.py -v
"""

from datetime import date
from uuid import uuid4

import pytest
from django.db import InterfaceError, OperationalError

from catalog import models
from catalog.domain import EventId, NewSession, TaxonomyType
from catalog.domain.errors import DuplicateNameError, StorageQueryError
from catalog.stores import DjangoCatalogStore


@pytest.fixture
def store() -> DjangoCatalogStore:
    return DjangoCatalogStore()


@pytest.mark.django_db
class TestChildEvents:
    """Tests for list_child_events."""

    def test_same_date_sorted_by_name(self, store, make_event):
        parent = make_event("Parent")
        make_event("Z", event_date_start=date(2024, 1, 1), parent=parent)
        make_event("A", event_date_start=date(2024, 1, 1), parent=parent)

        children = store.list_child_events(str(parent.pk))

        assert [child.event_name for child in children] == ["A", "Z"]

    def test_sorted_by_date_then_name_with_undated_last(self, store, make_event):
        parent = make_event("Parent")
        make_event("Undated", parent=parent)
        make_event("Later", event_date_start=date(2024, 3, 1), parent=parent)
        make_event("Earlier", event_date_start=date(2024, 1, 1), parent=parent)

        children = store.list_child_events(str(parent.pk))

        assert [child.event_name for child in children] == ["Earlier", "Later", "Undated"]

    def test_only_direct_children(self, store, make_event):
        parent = make_event("Parent")
        child = make_event("Child", parent=parent)
        make_event("Grandchild", parent=child)
        make_event("Unrelated")

        children = store.list_child_events(str(parent.pk))

        assert [c.id for c in children] == [EventId(value=child.pk)]

    def test_projection(self, store, make_event):
        parent = make_event("Parent")
        make_event(
            "Child",
            event_id="EVT-CHILD",
            event_type="Retreat",
            event_date_start=date(2024, 5, 4),
            parent=parent,
        )

        (child,) = store.list_child_events(str(parent.pk))

        assert child.event_id == "EVT-CHILD"
        assert child.event_type == "Retreat"
        assert child.event_date_start == date(2024, 5, 4)

    def test_no_children(self, store, make_event):
        assert store.list_child_events(str(make_event("Leaf").pk)) == []

    def test_malformed_identifier_is_a_query_failure(self, store):
        with pytest.raises(StorageQueryError):
            store.list_child_events("not-a-uuid")

    def test_database_error_is_translated(self, store, monkeypatch):
        def boom(*args, **kwargs):
            raise OperationalError("connection dropped")

        monkeypatch.setattr(models.Event.objects, "filter", boom)
        with pytest.raises(StorageQueryError) as excinfo:
            store.list_child_events(str(uuid4()))
        assert isinstance(excinfo.value.__cause__, OperationalError)

    def test_interface_error_is_translated(self, store, monkeypatch):
        """A dropped connection surfaces as InterfaceError, outside DatabaseError."""
        def closed(*args, **kwargs):
            raise InterfaceError("connection already closed")

        monkeypatch.setattr(models.Event.objects, "filter", closed)
        with pytest.raises(StorageQueryError) as excinfo:
            store.list_child_events(str(uuid4()))
        assert isinstance(excinfo.value.__cause__, InterfaceError)


@pytest.mark.django_db
class TestEventSessions:
    """Tests for list_event_sessions."""

    def test_sorted_by_sequence_then_date(self, store, make_event, make_session):
        event = make_event("Retreat")
        make_session(event, "S1", sequence_in_event=2, session_date=date(2024, 2, 1))
        make_session(event, "S2", sequence_in_event=1, session_date=date(2024, 1, 1))

        sessions = store.list_event_sessions(str(event.pk))

        assert [s.session_name for s in sessions] == ["S2", "S1"]

    def test_same_sequence_sorted_by_date_unsequenced_last(self, store, make_event, make_session):
        event = make_event("Retreat")
        make_session(event, "Loose", session_date=date(2024, 1, 1))
        make_session(event, "Second", sequence_in_event=1, session_date=date(2024, 1, 2))
        make_session(event, "First", sequence_in_event=1, session_date=date(2024, 1, 1))

        sessions = store.list_event_sessions(str(event.pk))

        assert [s.session_name for s in sessions] == ["First", "Second", "Loose"]

    def test_only_sessions_of_event(self, store, make_event, make_session):
        event = make_event("Retreat")
        other = make_event("Other")
        make_session(event, "Mine", sequence_in_event=1)
        make_session(other, "Theirs", sequence_in_event=1)

        sessions = store.list_event_sessions(str(event.pk))

        assert [s.session_name for s in sessions] == ["Mine"]
        assert sessions[0].sequence_in_event == 1

    def test_malformed_identifier_is_a_query_failure(self, store):
        with pytest.raises(StorageQueryError):
            store.list_event_sessions("42")


@pytest.mark.django_db
class TestReferenceLists:
    """Tests for the name-ordered reference lists."""

    def test_events_ordered_by_name(self, store, make_event):
        make_event("Summer Retreat")
        make_event("Autumn Teachings")
        make_event("Mountain Camp", parent=make_event("Bodhgaya Pilgrimage"))

        names = [event.event_name for event in store.list_events()]

        assert names == ["Autumn Teachings", "Bodhgaya Pilgrimage", "Mountain Camp", "Summer Retreat"]

    def test_topics_and_categories_ordered_by_name(self, store):
        models.Topic.objects.create(name="Tara", type="Deities")
        models.Topic.objects.create(name="Meditation", type="Practices")
        models.Category.objects.create(name="Sutras", type="Texts")
        models.Category.objects.create(name="Lineage Masters", type="Historical Figures")

        assert [t.name for t in store.list_topics()] == ["Meditation", "Tara"]
        categories = store.list_categories()
        assert [c.name for c in categories] == ["Lineage Masters", "Sutras"]
        assert categories[0].type is TaxonomyType.HISTORICAL_FIGURES

    def test_unknown_stored_type_is_a_query_failure(self, store):
        """Rows written by other tooling may carry a label outside the fixed set."""
        models.Topic.objects.create(name="Q&A", type="Teaching")

        with pytest.raises(StorageQueryError):
            store.list_topics()


@pytest.mark.django_db
class TestWrites:
    """Tests for session, topic and category creation."""

    def test_create_session(self, store, make_event):
        event = make_event("Retreat")

        session = store.create_session(
            NewSession(
                session_id="session-01-intro",
                session_name="Introduction",
                event_id=EventId(value=event.pk),
                sequence_in_event=1,
            )
        )

        row = models.Session.objects.get(pk=session.id.value)
        assert row.event_id == event.pk
        assert store.get_session(str(session.id)) == session

    def test_get_session_unknown_or_malformed(self, store):
        assert store.get_session(str(uuid4())) is None
        assert store.get_session("not-a-uuid") is None

    def test_duplicate_session_id(self, store):
        store.create_session(NewSession(session_id="s-1", session_name="One"))
        with pytest.raises(DuplicateNameError):
            store.create_session(NewSession(session_id="s-1", session_name="Again"))

    def test_duplicate_topic_name(self, store):
        store.create_topic("Compassion", TaxonomyType.PRACTICES)
        with pytest.raises(DuplicateNameError):
            store.create_topic("Compassion", TaxonomyType.CORE_TEACHINGS)
        assert models.Topic.objects.count() == 1

    def test_create_category_stores_label(self, store):
        category = store.create_category("Sutras", TaxonomyType.TEXTS)
        assert models.Category.objects.get(pk=category.id.value).type == "Texts"


@pytest.mark.django_db
class TestTaxonomyUpdates:
    """Tests for update and delete of topics and categories."""

    def test_update_topic_name_only(self, store):
        row = models.Topic.objects.create(name="Tara", type="Deities")

        topic = store.update_topic(str(row.pk), "Green Tara", None)

        assert topic.name == "Green Tara"
        assert topic.type is TaxonomyType.DEITIES
        assert models.Topic.objects.get(pk=row.pk).name == "Green Tara"

    def test_update_category_retypes(self, store):
        row = models.Category.objects.create(name="Lineage", type="Texts")

        category = store.update_category(str(row.pk), "Lineage", TaxonomyType.HISTORICAL_FIGURES)

        assert category.type is TaxonomyType.HISTORICAL_FIGURES
        assert models.Category.objects.get(pk=row.pk).type == "Historical Figures"

    def test_update_missing_entry(self, store):
        assert store.update_topic(str(uuid4()), "Tara", None) is None

    def test_update_to_taken_name(self, store):
        models.Topic.objects.create(name="Tara", type="Deities")
        row = models.Topic.objects.create(name="Meditation", type="Practices")

        with pytest.raises(DuplicateNameError):
            store.update_topic(str(row.pk), "Tara", None)
        assert models.Topic.objects.get(pk=row.pk).name == "Meditation"

    def test_update_malformed_identifier(self, store):
        with pytest.raises(StorageQueryError):
            store.update_category("not-a-uuid", "Sutras", None)

    def test_delete(self, store):
        row = models.Category.objects.create(name="Sutras", type="Texts")

        assert store.delete_category(str(row.pk)) is True
        assert store.delete_category(str(row.pk)) is False
        assert not models.Category.objects.exists()
