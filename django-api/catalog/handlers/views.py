"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from rest_framework import status
from rest_framework.exceptions import ParseError
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from catalog.domain.errors import (
    DomainError,
    DuplicateNameError,
    InvalidTaxonomyTypeError,
    RequiredFieldError,
    TaxonomyEntryNotFoundError,
)
from catalog.domain.value_objects import TaxonomyType
from catalog.handlers.providers import get_catalog_service
from catalog.handlers.serializers import (
    ChildEventSerializer,
    EventSessionSerializer,
    TaxonomyEntrySerializer,
)
from catalog.services import UNCHANGED

logger = logging.getLogger(__name__)

INVALID_TYPE_MESSAGE = f"Type must be one of: {', '.join(TaxonomyType.labels())}"
REJECTED_ERRORS = (InvalidTaxonomyTypeError, DuplicateNameError, TaxonomyEntryNotFoundError)


def _error(message: str, status_code: int) -> Response:
    return Response({"error": message}, status=status_code)


def _json_object(request: Request) -> dict:
    """Return the request body as a dict; non-object JSON reads as empty.

    Raises:
        ParseError: If the body is not valid JSON.
    """
    return request.data if isinstance(request.data, dict) else {}


class ChildEventListView(APIView):
    """Handler for GET /api/events/{event_id}/children"""

    def get(self, request: Request, event_id: str) -> Response:
        try:
            children = get_catalog_service().list_child_events(event_id)
            data = ChildEventSerializer(children, many=True).data
        except Exception:
            logger.exception("Failed to fetch child events for %s", event_id)
            return _error("Failed to fetch child events", status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response(data)


class EventSessionListView(APIView):
    """Handler for GET /api/events/{event_id}/sessions"""

    def get(self, request: Request, event_id: str) -> Response:
        try:
            sessions = get_catalog_service().list_event_sessions(event_id)
            data = EventSessionSerializer(sessions, many=True).data
        except Exception:
            logger.exception("Failed to fetch sessions for %s", event_id)
            return _error("Failed to fetch sessions", status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response(data)


class TaxonomyView(APIView):
    """Base for topic and category handlers.

    Subclasses set ``entity`` and ``entity_plural`` (used in error messages)
    and the CatalogService method names they call.
    """

    entity = ""
    entity_plural = ""

    def _rejected(self, error: DomainError) -> Response:
        """Map the type, duplicate-name and not-found errors to responses."""
        if isinstance(error, InvalidTaxonomyTypeError):
            return _error(INVALID_TYPE_MESSAGE, status.HTTP_400_BAD_REQUEST)
        if isinstance(error, DuplicateNameError):
            return _error(
                f"A {self.entity} with this name already exists",
                status.HTTP_409_CONFLICT,
            )
        return _error(f"{self.entity.capitalize()} not found", status.HTTP_404_NOT_FOUND)


class TaxonomyListView(TaxonomyView):
    """Shared GET/POST handling for topic and category collections."""

    list_method = ""
    create_method = ""

    def get(self, request: Request) -> Response:
        service = get_catalog_service()
        try:
            entries = getattr(service, self.list_method)()
        except DomainError:
            logger.exception("Error fetching %s", self.entity_plural)
            return _error(
                f"Failed to fetch {self.entity_plural}",
                status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return Response(TaxonomyEntrySerializer(entries, many=True).data)

    def post(self, request: Request) -> Response:
        service = get_catalog_service()
        try:
            payload = _json_object(request)
            entry = getattr(service, self.create_method)(
                payload.get("name"), payload.get("type")
            )
        except RequiredFieldError as e:
            return _error(f"{e.field.capitalize()} is required", status.HTTP_400_BAD_REQUEST)
        except REJECTED_ERRORS as e:
            return self._rejected(e)
        except (ParseError, DomainError):
            logger.exception("Error creating %s", self.entity)
            return _error(
                f"Failed to create {self.entity}",
                status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        logger.info("created %s %r (%s)", self.entity, entry.name, entry.type.value)
        return Response(TaxonomyEntrySerializer(entry).data)


class TaxonomyDetailView(TaxonomyView):
    """Shared PATCH/DELETE handling for a single topic or category."""

    update_method = ""
    delete_method = ""

    def patch(self, request: Request, entry_id: str) -> Response:
        service = get_catalog_service()
        try:
            payload = _json_object(request)
            entry = getattr(service, self.update_method)(
                entry_id, payload.get("name"), payload.get("type", UNCHANGED)
            )
        except RequiredFieldError as e:
            message = "Name is required" if e.field == "name" else "Type cannot be empty"
            return _error(message, status.HTTP_400_BAD_REQUEST)
        except REJECTED_ERRORS as e:
            return self._rejected(e)
        except (ParseError, DomainError):
            logger.exception("Error updating %s %s", self.entity, entry_id)
            return _error(
                f"Failed to update {self.entity}",
                status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return Response(TaxonomyEntrySerializer(entry).data)

    def delete(self, request: Request, entry_id: str) -> Response:
        try:
            getattr(get_catalog_service(), self.delete_method)(entry_id)
        except TaxonomyEntryNotFoundError:
            return _error(f"{self.entity.capitalize()} not found", status.HTTP_404_NOT_FOUND)
        except DomainError:
            logger.exception("Error deleting %s %s", self.entity, entry_id)
            return _error(
                f"Failed to delete {self.entity}",
                status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return Response({"success": True})


class TopicListView(TaxonomyListView):
    """Handler for GET/POST /api/topics"""

    entity = "topic"
    entity_plural = "topics"
    list_method = "list_topics"
    create_method = "create_topic"


class CategoryListView(TaxonomyListView):
    """Handler for GET/POST /api/categories"""

    entity = "category"
    entity_plural = "categories"
    list_method = "list_categories"
    create_method = "create_category"


class TopicDetailView(TaxonomyDetailView):
    """Handler for PATCH/DELETE /api/topics/{entry_id}"""

    entity = "topic"
    entity_plural = "topics"
    update_method = "update_topic"
    delete_method = "delete_topic"


class CategoryDetailView(TaxonomyDetailView):
    """Handler for PATCH/DELETE /api/categories/{entry_id}"""

    entity = "category"
    entity_plural = "categories"
    update_method = "update_category"
    delete_method = "delete_category"
