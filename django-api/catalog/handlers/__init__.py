from catalog.handlers.pages import new_session, session_detail
from catalog.handlers.views import (
    CategoryDetailView,
    CategoryListView,
    ChildEventListView,
    EventSessionListView,
    TopicDetailView,
    TopicListView,
)

__all__ = [
    "ChildEventListView",
    "EventSessionListView",
    "TopicListView",
    "CategoryListView",
    "TopicDetailView",
    "CategoryDetailView",
    "new_session",
    "session_detail",
]
