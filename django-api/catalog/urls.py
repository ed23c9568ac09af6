from django.urls import path

from catalog.handlers import (
    CategoryDetailView,
    CategoryListView,
    ChildEventListView,
    EventSessionListView,
    TopicDetailView,
    TopicListView,
    new_session,
    session_detail,
)

urlpatterns = [
    path(
        "api/events/<str:event_id>/children",
        ChildEventListView.as_view(),
        name="event-children",
    ),
    path(
        "api/events/<str:event_id>/sessions",
        EventSessionListView.as_view(),
        name="event-sessions",
    ),
    path("api/topics", TopicListView.as_view(), name="topic-list"),
    path("api/topics/<str:entry_id>", TopicDetailView.as_view(), name="topic-detail"),
    path("api/categories", CategoryListView.as_view(), name="category-list"),
    path(
        "api/categories/<str:entry_id>",
        CategoryDetailView.as_view(),
        name="category-detail",
    ),
    path("sessions/new", new_session, name="session-new"),
    path("sessions/<str:session_id>", session_detail, name="session-detail"),
]
