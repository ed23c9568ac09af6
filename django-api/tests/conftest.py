"""Pytest configuration and shared fixtures."""

from datetime import date

import pytest
from rest_framework.test import APIClient

from catalog import models


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def make_event():
    """Factory for persisted events; business IDs are generated when omitted."""
    counter = iter(range(1, 10_000))

    def _make(
        event_name: str,
        *,
        event_date_start: date | None = None,
        parent: models.Event | None = None,
        event_type: str | None = None,
        event_id: str | None = None,
    ) -> models.Event:
        return models.Event.objects.create(
            event_id=event_id or f"EVT-{next(counter):04d}",
            event_name=event_name,
            event_type=event_type,
            event_date_start=event_date_start,
            parent_event=parent,
        )

    return _make


@pytest.fixture
def make_session():
    """Factory for persisted sessions under an event."""
    counter = iter(range(1, 10_000))

    def _make(
        event: models.Event | None,
        session_name: str,
        *,
        sequence_in_event: int | None = None,
        session_date: date | None = None,
    ) -> models.Session:
        return models.Session.objects.create(
            session_id=f"SES-{next(counter):04d}",
            event=event,
            session_name=session_name,
            sequence_in_event=sequence_in_event,
            session_date=session_date,
        )

    return _make
