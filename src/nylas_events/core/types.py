# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Value objects owned by an Event.

Each model's field names (or aliases, where the wire name differs) are the
rename table between the Python attribute and the wire key. ``to_wire()``
drops ``None`` values; ``from_wire()`` is ``model_validate`` with unknown keys
ignored.
"""

from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    field_validator,
)


class WireModel(BaseModel):
    """Base class for value objects exchanged with the API."""

    model_config = ConfigDict(
        extra="ignore",  # Servers add keys over time
        validate_assignment=True,
        populate_by_name=True,  # Accept both attribute and wire names
    )

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_wire(cls, data: Dict[str, Any]):
        return cls.model_validate(data)


# --- Enums ---


class ParticipantStatus(str, Enum):
    """Attendance answer of a participant."""

    YES = "yes"
    NO = "no"
    MAYBE = "maybe"
    NOREPLY = "noreply"


class RSVPStatus(str, Enum):
    """Answers accepted by the RSVP endpoint."""

    YES = "yes"
    NO = "no"
    MAYBE = "maybe"


class ReminderMethod(str, Enum):
    """How the calendar provider alerts about an upcoming event."""

    EMAIL = "email"
    POPUP = "popup"
    DISPLAY = "display"
    SOUND = "sound"


class ICSMethod(str, Enum):
    """iTIP methods an ICS file can be generated for."""

    REQUEST = "request"
    PUBLISH = "publish"
    REPLY = "reply"
    ADD = "add"
    CANCEL = "cancel"
    REFRESH = "refresh"
    COUNTER = "counter"
    DECLINE_COUNTER = "declinecounter"


# --- Participants ---


class Participant(WireModel):
    """A person invited to an event, identified by email."""

    name: Optional[str] = Field(default=None, description="Display name")
    email: Optional[str] = Field(default=None, description="Email address")
    status: Optional[ParticipantStatus] = Field(
        default=None, description="Attendance answer, only sent when creating"
    )
    comment: Optional[str] = Field(default=None, description="Comment on the answer")
    phone_number: Optional[str] = Field(default=None, description="Phone number")

    def to_wire(self, include_status: bool = True) -> Dict[str, Any]:
        """
        Serialize the participant.

        Args:
            include_status: Whether to send ``status``. The API accepts it
                when an event is created and rejects it on update.
        """
        payload = super().to_wire()
        if not include_status:
            payload.pop("status", None)
        return payload


# --- Notifications ---


class _NotificationBase(WireModel):
    minutes_before_event: Optional[int] = Field(
        default=None, description="How long before the event to notify"
    )


class EmailNotification(_NotificationBase):
    """Email sent before the event."""

    type: Literal["email"] = Field(default="email", description="Notification channel")
    subject: Optional[str] = Field(default=None, description="Email subject")
    body: Optional[str] = Field(default=None, description="Email body")


class SMSNotification(_NotificationBase):
    """Text message sent before the event."""

    type: Literal["sms"] = Field(default="sms", description="Notification channel")
    message: Optional[str] = Field(default=None, description="SMS text")


class WebhookNotification(_NotificationBase):
    """Webhook called before the event."""

    type: Literal["webhook"] = Field(default="webhook", description="Notification channel")
    url: Optional[str] = Field(default=None, description="Webhook URL")
    payload: Optional[str] = Field(
        default=None, description="Opaque request body, usually serialized JSON"
    )


Notification = Annotated[
    Union[EmailNotification, SMSNotification, WebhookNotification],
    Field(discriminator="type"),
]

_notification_adapter: TypeAdapter = TypeAdapter(Notification)


def notification_from_wire(data: Dict[str, Any]) -> Union[
    EmailNotification, SMSNotification, WebhookNotification
]:
    """Parse a notification into the class matching its ``type``."""
    return _notification_adapter.validate_python(data)


# --- Reminders ---


class EventReminder(WireModel):
    """
    Reminder override for an event.

    Replaces the legacy ``reminder_minutes``/``reminder_method`` scalars on
    the event; when set, those scalars are not sent.
    """

    reminder_minutes: Optional[str] = Field(
        default=None, description="String-encoded list of minutes, e.g. '[20]'"
    )
    reminder_method: Optional[ReminderMethod] = Field(
        default=None, description="How the reminder is delivered"
    )


# --- Conferencing ---


class ConferencingDetails(WireModel):
    """A meeting that already exists on the conferencing provider."""

    url: Optional[str] = Field(default=None, description="Join URL")
    meeting_code: Optional[str] = Field(default=None, description="Meeting code")
    password: Optional[str] = Field(default=None, description="Meeting password")
    pin: Optional[str] = Field(default=None, description="Dial-in PIN")
    phone: Optional[List[str]] = Field(default=None, description="Dial-in numbers")


class ConferencingAutocreate(WireModel):
    """Asks the API to create the meeting on the provider."""

    settings: Dict[str, Any] = Field(
        default_factory=dict, description="Provider-specific meeting settings"
    )


class EventConferencing(WireModel):
    """
    Conferencing attached to an event.

    Exactly one of ``details`` and ``autocreate`` may be sent. Holding both is
    allowed on the object; ``Event.validate_event()`` rejects it before saving.
    """

    provider: Optional[str] = Field(
        default=None, description="Provider name, e.g. 'Zoom Meeting'"
    )
    details: Optional[ConferencingDetails] = Field(
        default=None, description="Manually created meeting"
    )
    autocreate: Optional[ConferencingAutocreate] = Field(
        default=None, description="Meeting generated by the API"
    )

    def has_conflicting_modes(self) -> bool:
        """Whether both ``details`` and ``autocreate`` are populated."""
        return self.details is not None and self.autocreate is not None


# --- Recurrence ---


class Recurrence(WireModel):
    """Recurrence rules for a repeating event."""

    rrule: List[str] = Field(
        default_factory=list, description="RRULE/EXDATE lines, e.g. 'RRULE:FREQ=WEEKLY'"
    )
    timezone: Optional[str] = Field(
        default=None, description="IANA timezone the rules are evaluated in"
    )


# --- ICS ---


class ICSOptions(WireModel):
    """
    Options for generating an ICS file from an event.

    Accepts both the snake_case names and the camelCase ones (``iCalUID``,
    ``prodId``). Unknown keys are rejected so a misspelled option is never
    dropped silently.
    """

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
        populate_by_name=True,
    )

    ical_uid: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("ical_uid", "iCalUID"),
        description="UID of the iCal event",
    )
    method: Optional[ICSMethod] = Field(default=None, description="iTIP method")
    prod_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("prodid", "prod_id", "prodId"),
        serialization_alias="prodid",
        description="PRODID of the calendar",
    )

    @field_validator("method", mode="before")
    @classmethod
    def lower_case_method(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.lower()
        return value
