from django.contrib import admin

from catalog.models import Category, Event, Session, Topic


class SessionInline(admin.TabularInline):
    model = Session
    fields = ["session_id", "session_name", "session_date", "sequence_in_event"]
    extra = 1


class ChildEventInline(admin.TabularInline):
    model = Event
    fk_name = "parent_event"
    fields = ["event_id", "event_name", "event_type", "event_date_start"]
    verbose_name = "child event"
    verbose_name_plural = "child events"
    extra = 0


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["event_name", "event_id", "event_type", "event_date_start", "parent_event"]
    list_filter = ["event_type"]
    search_fields = ["event_name", "event_id"]
    inlines = [ChildEventInline, SessionInline]


@admin.register(Session)
class SessionAdmin(admin.ModelAdmin):
    list_display = ["session_name", "event", "sequence_in_event", "session_date"]
    list_filter = ["event"]
    search_fields = ["session_name", "session_id"]


@admin.register(Topic)
class TopicAdmin(admin.ModelAdmin):
    list_display = ["name", "type"]
    list_filter = ["type"]
    search_fields = ["name"]


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ["name", "type"]
    list_filter = ["type"]
    search_fields = ["name"]
