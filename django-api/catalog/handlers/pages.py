"""Server-rendered pages for sessions.

The new-session page always reloads its reference lists; a storage failure
while loading them is left to Django's default error handling.
"""

from django.http import Http404, HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.views.decorators.cache import never_cache
from django.views.decorators.http import require_http_methods

from catalog.domain.errors import DuplicateNameError, SessionNotFoundError
from catalog.handlers.forms import NewSessionForm
from catalog.handlers.providers import get_catalog_service


@never_cache
@require_http_methods(["GET", "POST"])
def new_session(request: HttpRequest) -> HttpResponse:
    """Handler for /sessions/new"""
    service = get_catalog_service()
    form_data = service.load_new_session_form(request.GET.get("eventId"))

    if request.method == "POST":
        form = NewSessionForm(form_data, request.POST)
        if form.is_valid():
            try:
                session = service.create_session(form.to_new_session())
            except DuplicateNameError:
                form.add_error("sessionId", "A session with this ID already exists")
            else:
                return redirect("session-detail", session_id=str(session.id))
    else:
        form = NewSessionForm(form_data)

    return render(
        request,
        "catalog/session_new.html",
        {"form": form, "form_data": form_data},
    )


@require_http_methods(["GET"])
def session_detail(request: HttpRequest, session_id: str) -> HttpResponse:
    """Handler for /sessions/{session_id}"""
    try:
        session = get_catalog_service().get_session(session_id)
    except SessionNotFoundError:
        raise Http404("Session not found")
    return render(request, "catalog/session_detail.html", {"session": session})
