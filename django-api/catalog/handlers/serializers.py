"""Serializers for transforming domain models to API responses.

Field names follow the JSON contract (camelCase); sources point at the
snake_case domain attributes.
"""

from rest_framework import serializers


class ChildEventSerializer(serializers.Serializer):
    """Serializer for the ChildEvent projection."""

    id = serializers.UUIDField(source="id.value")
    eventId = serializers.CharField(source="event_id")
    eventName = serializers.CharField(source="event_name")
    eventType = serializers.CharField(source="event_type", allow_null=True)
    eventDateStart = serializers.DateField(source="event_date_start", allow_null=True)


class EventSessionSerializer(serializers.Serializer):
    """Serializer for the EventSession projection."""

    id = serializers.UUIDField(source="id.value")
    sessionName = serializers.CharField(source="session_name")
    sessionDate = serializers.DateField(source="session_date", allow_null=True)
    sequenceInEvent = serializers.IntegerField(source="sequence_in_event", allow_null=True)


class TaxonomyEntrySerializer(serializers.Serializer):
    """Serializer for Topic and Category domain models."""

    id = serializers.UUIDField(source="id.value")
    name = serializers.CharField()
    type = serializers.CharField(source="type.value")
