"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.db import models

from catalog.domain.value_objects import TaxonomyType

TAXONOMY_TYPE_CHOICES = [(label, label) for label in TaxonomyType.labels()]


class Event(models.Model):
    """Persistence model for events."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event_id = models.CharField(max_length=255, unique=True)
    event_name = models.CharField(max_length=255)
    event_type = models.CharField(max_length=100, blank=True, null=True)
    event_date_start = models.DateField(blank=True, null=True)
    event_date_end = models.DateField(blank=True, null=True)
    parent_event = models.ForeignKey(
        "self",
        on_delete=models.SET_NULL,
        blank=True,
        null=True,
        related_name="children",
    )
    event_description = models.TextField(blank=True, null=True)
    cataloging_status = models.CharField(max_length=50, blank=True, null=True)
    notes = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "events"
        indexes = [
            models.Index(fields=["parent_event", "event_date_start"]),
            models.Index(fields=["event_name"]),
        ]

    def __str__(self) -> str:
        return self.event_name


class Session(models.Model):
    """Persistence model for event sessions."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    session_id = models.CharField(max_length=255, unique=True)
    event = models.ForeignKey(
        Event,
        on_delete=models.CASCADE,
        blank=True,
        null=True,
        related_name="sessions",
    )
    session_name = models.CharField(max_length=255)
    session_date = models.DateField(blank=True, null=True)
    session_time = models.CharField(max_length=50, blank=True, null=True)
    session_start_time = models.TimeField(blank=True, null=True)
    session_end_time = models.TimeField(blank=True, null=True)
    sequence_in_event = models.IntegerField(blank=True, null=True)
    topic = models.CharField(max_length=255, blank=True, null=True)
    category = models.CharField(max_length=255, blank=True, null=True)
    session_description = models.TextField(blank=True, null=True)
    duration_estimated = models.CharField(max_length=50, blank=True, null=True)
    cataloging_status = models.CharField(max_length=50, blank=True, null=True)
    notes = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "sessions"
        indexes = [
            models.Index(fields=["event", "sequence_in_event"]),
        ]

    def __str__(self) -> str:
        return self.session_name


class Topic(models.Model):
    """Persistence model for topics."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255, unique=True)
    type = models.CharField(max_length=50, choices=TAXONOMY_TYPE_CHOICES)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "topics"

    def __str__(self) -> str:
        return self.name


class Category(models.Model):
    """Persistence model for categories."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255, unique=True)
    type = models.CharField(max_length=50, choices=TAXONOMY_TYPE_CHOICES)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "categories"
        verbose_name_plural = "categories"

    def __str__(self) -> str:
        return self.name
