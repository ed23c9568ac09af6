"""Form that renders and validates the new-session page."""

from django import forms

from catalog.domain import EventId, NewSession
from catalog.services import NewSessionFormData

CATALOGING_STATUS_CHOICES = [
    ("", "Not Started"),
    ("In Progress", "In Progress"),
    ("Ready", "Ready"),
    ("Needs Review", "Needs Review"),
]


class NewSessionForm(forms.Form):
    """Session form populated from the event, topic and category lists.

    Field names match the submitted form keys.
    """

    sessionId = forms.CharField(
        label="Session ID",
        max_length=255,
        widget=forms.TextInput(attrs={"placeholder": "e.g., session-01-intro"}),
    )
    sessionName = forms.CharField(
        label="Session Name",
        max_length=255,
        widget=forms.TextInput(attrs={"placeholder": "e.g., Introduction to Bodhichitta"}),
    )
    eventId = forms.ChoiceField(label="Event")
    sessionDate = forms.DateField(
        label="Session Date",
        required=False,
        widget=forms.DateInput(attrs={"type": "date"}),
    )
    sessionTime = forms.CharField(label="Session Time", max_length=50, required=False)
    sessionStartTime = forms.TimeField(
        label="Start Time",
        required=False,
        widget=forms.TimeInput(attrs={"type": "time"}),
    )
    sessionEndTime = forms.TimeField(
        label="End Time",
        required=False,
        widget=forms.TimeInput(attrs={"type": "time"}),
    )
    sequenceInEvent = forms.IntegerField(
        label="Sequence in Event",
        required=False,
        widget=forms.NumberInput(attrs={"placeholder": "1"}),
    )
    topic = forms.ChoiceField(label="Topic", required=False)
    category = forms.ChoiceField(label="Category", required=False)
    durationEstimated = forms.CharField(
        label="Duration (Estimated)",
        max_length=50,
        required=False,
        widget=forms.TextInput(attrs={"placeholder": "e.g., 01:30:00"}),
    )
    catalogingStatus = forms.ChoiceField(
        label="Cataloging Status",
        choices=CATALOGING_STATUS_CHOICES,
        required=False,
    )
    sessionDescription = forms.CharField(
        label="Description",
        required=False,
        widget=forms.Textarea(attrs={"rows": 4}),
    )
    notes = forms.CharField(
        label="Notes",
        required=False,
        widget=forms.Textarea(attrs={"rows": 3}),
    )

    def __init__(self, form_data: NewSessionFormData, *args, **kwargs) -> None:
        kwargs.setdefault("initial", {"eventId": form_data.default_event_id or ""})
        super().__init__(*args, **kwargs)
        self.fields["eventId"].choices = [("", "Select Event")] + [
            (str(event.id), event.event_name) for event in form_data.events
        ]
        self.fields["topic"].choices = [("", "Select Topic")] + [
            (topic.name, topic.name) for topic in form_data.topics
        ]
        self.fields["category"].choices = [("", "Select Category")] + [
            (category.name, category.name) for category in form_data.categories
        ]

    def to_new_session(self) -> NewSession:
        data = self.cleaned_data
        return NewSession(
            session_id=data["sessionId"],
            session_name=data["sessionName"],
            event_id=EventId.from_string(data["eventId"]),
            session_date=data["sessionDate"],
            session_time=data["sessionTime"] or None,
            session_start_time=data["sessionStartTime"],
            session_end_time=data["sessionEndTime"],
            sequence_in_event=data["sequenceInEvent"],
            topic=data["topic"] or None,
            category=data["category"] or None,
            session_description=data["sessionDescription"] or None,
            duration_estimated=data["durationEstimated"] or None,
            cataloging_status=data["catalogingStatus"] or None,
            notes=data["notes"] or None,
        )
