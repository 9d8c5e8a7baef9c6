# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
The Event resource.

An ``Event`` is a pydantic model bound to a ``Connection``. Its fields use
the wire names, so parsing a response is ``model_validate`` and the rename
tables live on the value objects (see ``types.py``). Serialization is
explicit because several keys follow their own rules:

- ``calendar_id``, ``when`` and ``participants`` are always sent
- other scalars are sent when not None
- ``notifications``, ``metadata``, ``recurrence`` and ``conferencing`` are
  sent only once assigned, so ``notifications=[]`` is sent as ``[]`` while an
  untouched field is left out
- participant ``status`` is sent on create only
- a ``reminders`` object suppresses the legacy reminder scalars
- server-set fields are never sent

Example:
    >>> conn = HTTPConnection("https://api.nylas.com", access_token="token")
    >>> event = Event(connection=conn, calendar_id="cal-1", title="Standup")
    >>> event.start = 1409594400
    >>> event.end = 1409598000
    >>> await event.save()          # POST /events, then refreshed in place
    >>> event.id
    'evt-123'
"""

from __future__ import annotations

import logging
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    field_serializer,
    field_validator,
)

from .connection import Connection
from .exceptions import (
    CapacityExceededError,
    ConferencingConflictError,
    MissingCalendarIdError,
    MissingConnectionError,
    MissingEventIdError,
    MissingTimeRangeError,
    TransportError,
)
from .types import (
    EventConferencing,
    EventReminder,
    ICSMethod,
    ICSOptions,
    Notification,
    Participant,
    Recurrence,
    ReminderMethod,
    RSVPStatus,
)
from .when import Endpoint, When

if TYPE_CHECKING:
    from .sync_client import SyncEvent

logger = logging.getLogger(__name__)

EVENTS_PATH = "/events"
RSVP_PATH = "/send-rsvp"
ICS_PATH = "/events/to-ics"

# Sent whenever they are not None
_SCALAR_FIELDS = frozenset(
    [
        "title",
        "description",
        "location",
        "busy",
        "capacity",
        "reminder_minutes",
        "reminder_method",
    ]
)

# Sent only once explicitly assigned
_EXPLICIT_FIELDS = ("notifications", "metadata", "recurrence", "conferencing")

_LEGACY_REMINDER_FIELDS = ("reminder_minutes", "reminder_method")


def _to_wire_value(value: Any) -> Any:
    if isinstance(value, list):
        return [_to_wire_value(item) for item in value]
    if isinstance(value, BaseModel):
        return value.to_wire()
    if isinstance(value, dict):
        return dict(value)
    return value


class Event(BaseModel):
    """
    A calendar event.

    Create and update go through ``save()``: an event without an ``id`` is
    created, one with an ``id`` is updated. The server response replaces the
    event's fields in place, including the ``id`` assigned on create.
    """

    model_config = ConfigDict(
        extra="ignore",  # Ignore keys of other API versions
        validate_assignment=True,
        arbitrary_types_allowed=True,  # When is a plain class
    )

    # --- Server-set, never sent ---
    id: Optional[str] = Field(default=None, description="Server-assigned id")
    account_id: Optional[str] = Field(default=None, description="Owning account")
    owner: Optional[str] = Field(default=None, description="Organizer, e.g. 'Name <email>'")
    ical_uid: Optional[str] = Field(default=None, description="iCalendar UID")
    master_event_id: Optional[str] = Field(
        default=None, description="Id of the recurring series this occurrence belongs to"
    )
    original_start_time: Optional[datetime] = Field(
        default=None, description="Original start of a modified occurrence"
    )
    event_collection_id: Optional[Union[int, str]] = Field(
        default=None, description="Scheduling collection the event belongs to"
    )
    round_robin_order: Optional[List[str]] = Field(
        default=None, description="Order hosts are assigned in for round-robin events"
    )
    read_only: Optional[bool] = Field(
        default=None, description="Whether the account can modify the event"
    )
    status: Optional[str] = Field(
        default=None, description="confirmed, tentative or cancelled"
    )
    message_id: Optional[str] = Field(
        default=None, description="Message the event was created from"
    )

    # --- Writable ---
    calendar_id: str = Field(default="", description="Calendar the event lives in")
    title: Optional[str] = Field(default=None, description="Event title")
    description: Optional[str] = Field(default=None, description="Event description")
    location: Optional[str] = Field(default=None, description="Event location")
    busy: Optional[bool] = Field(
        default=None, description="Whether the event blocks free/busy time"
    )
    participants: List[Participant] = Field(
        default_factory=list, description="People invited to the event"
    )
    when: When = Field(default_factory=When, description="Time range of the event")
    recurrence: Optional[Recurrence] = Field(default=None, description="Recurrence rules")
    capacity: Optional[int] = Field(
        default=None, ge=-1, description="Maximum participant count, -1 for unlimited"
    )
    metadata: Optional[Dict[str, str]] = Field(
        default=None, description="Free-form key/value pairs"
    )
    notifications: Optional[List[Notification]] = Field(
        default=None, description="Notifications sent before the event"
    )
    reminders: Optional[EventReminder] = Field(
        default=None, description="Reminder override; suppresses the legacy scalars"
    )
    reminder_minutes: Optional[str] = Field(
        default=None, description="Legacy reminder minutes, e.g. '[20]'"
    )
    reminder_method: Optional[ReminderMethod] = Field(
        default=None, description="Legacy reminder method"
    )
    conferencing: Optional[EventConferencing] = Field(
        default=None, description="Conferencing details or autocreate request"
    )

    _connection: Optional[Connection] = PrivateAttr(default=None)

    def __init__(self, connection: Optional[Connection] = None, **data: Any):
        super().__init__(**data)
        self._connection = connection

    @field_validator("when", mode="before")
    @classmethod
    def coerce_when(cls, value: Any) -> Any:
        if value is None:
            return When()
        if isinstance(value, dict):
            try:
                return When.from_wire(value)
            except TypeError as e:
                # Reported as a ValidationError by pydantic
                raise ValueError(str(e)) from e
        return value

    @field_serializer("when")
    def serialize_when(self, when: When) -> Dict[str, Any]:
        return when.to_wire()

    @field_validator("participants", mode="before")
    @classmethod
    def coerce_participants(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("calendar_id", mode="before")
    @classmethod
    def coerce_calendar_id(cls, value: Any) -> Any:
        return "" if value is None else value

    # ---------- Time range shortcuts ----------

    @property
    def start(self) -> Optional[Endpoint]:
        return self.when.start

    @start.setter
    def start(self, value: Endpoint) -> None:
        self.when.set_start(value)

    @property
    def end(self) -> Optional[Endpoint]:
        return self.when.end

    @end.setter
    def end(self, value: Endpoint) -> None:
        self.when.set_end(value)

    # ---------- Connection ----------

    @property
    def connection(self) -> Optional[Connection]:
        return self._connection

    def bind(self, connection: Connection) -> "Event":
        """Attach a connection and return self for chaining."""
        self._connection = connection
        return self

    def _require_connection(self, operation: str) -> Connection:
        if self._connection is None:
            raise MissingConnectionError(operation)
        return self._connection

    # ---------- Validation and wire format ----------

    def validate_event(self) -> None:
        """
        Check cross-field rules, stopping at the first violation.

        Raises:
            ConferencingConflictError: Conferencing has both details and autocreate
            CapacityExceededError: More participants than a non-negative capacity
        """
        if self.conferencing is not None and self.conferencing.has_conflicting_modes():
            raise ConferencingConflictError()

        if (
            self.capacity is not None
            and self.capacity >= 0
            and len(self.participants) > self.capacity
        ):
            raise CapacityExceededError(len(self.participants), self.capacity)

    def to_wire(self) -> Dict[str, Any]:
        """Build the JSON body sent on create, update and ICS generation."""
        include_status = self.id is None

        payload: Dict[str, Any] = {"calendar_id": self.calendar_id}
        payload.update(
            self.model_dump(mode="json", include=set(_SCALAR_FIELDS), exclude_none=True)
        )
        payload["when"] = self.when.to_wire()
        payload["participants"] = [
            p.to_wire(include_status=include_status) for p in self.participants
        ]

        for name in _EXPLICIT_FIELDS:
            value = getattr(self, name)
            if name in self.model_fields_set and value is not None:
                payload[name] = _to_wire_value(value)

        if self.reminders is not None:
            for name in _LEGACY_REMINDER_FIELDS:
                payload.pop(name, None)

        return payload

    @classmethod
    def from_wire(
        cls, payload: Optional[Dict[str, Any]], connection: Optional[Connection] = None
    ) -> "Event":
        """Parse an API response into an Event bound to ``connection``."""
        event = cls.model_validate(payload or {})
        event._connection = connection
        return event

    def _refresh_from(self, other: "Event") -> None:
        # Bypass validate_assignment: other is already validated
        for name in type(self).model_fields:
            object.__setattr__(self, name, getattr(other, name))
        object.__setattr__(self, "__pydantic_fields_set__", set(other.model_fields_set))

    # ---------- API operations ----------

    async def save(self, params: Optional[Dict[str, Any]] = None) -> "Event":
        """
        Create or update the event.

        Validation runs first; an invalid event raises before any request is
        sent. On success the response is applied to this event in place. If
        two saves overlap on one event, the last response applied wins.

        Args:
            params: Query string parameters, e.g. ``{"notify_participants": True}``

        Returns:
            This event, refreshed from the server response.

        Raises:
            EventValidationError: If ``validate_event()`` fails
            MissingConnectionError: If the event is not bound to a connection
            Exception: Any error raised by the connection, unchanged
        """
        self.validate_event()
        connection = self._require_connection("save the event")

        if self.id is None:
            method, path = "POST", EVENTS_PATH
        else:
            method, path = "PUT", f"{EVENTS_PATH}/{self.id}"

        logger.debug(f"Saving event via {method} {path}")
        response = await connection.request(method, path, body=self.to_wire(), qs=params)

        if isinstance(response, dict):
            self._refresh_from(Event.from_wire(response))
        return self

    async def rsvp(
        self, status: Union[RSVPStatus, str], comment: Optional[str] = None
    ) -> "Event":
        """
        Answer the invitation to this event.

        Args:
            status: ``yes``, ``no`` or ``maybe``
            comment: Optional note sent with the answer

        Returns:
            The event as returned by the API.
        """
        if self.id is None:
            raise MissingEventIdError("send an RSVP")
        connection = self._require_connection("send an RSVP")

        body: Dict[str, Any] = {
            "event_id": self.id,
            "status": status.value if isinstance(status, Enum) else status,
        }
        if comment is not None:
            body["comment"] = comment

        logger.debug(f"Sending RSVP '{body['status']}' for event {self.id}")
        response = await connection.request("POST", RSVP_PATH, body=body)
        return Event.from_wire(response, connection=connection)

    async def generate_ics(
        self,
        ics_options: Optional[Union[ICSOptions, Dict[str, Any]]] = None,
    ) -> str:
        """
        Render the event as an ICS file on the server.

        Args:
            ics_options: ``ICSOptions`` or a dict with ``ical_uid``, ``method``
                (an ``ICSMethod`` or its name) and ``prod_id``/``prodid``

        Returns:
            The ICS file contents.

        Raises:
            MissingCalendarIdError: If ``calendar_id`` is empty
            MissingTimeRangeError: If ``when`` has no shape
            TransportError: If the response carries no ``ics`` string
        """
        operation = "generate an ICS file"
        if not self.calendar_id:
            raise MissingCalendarIdError(operation)
        if not self.when.is_set:
            raise MissingTimeRangeError(operation)
        connection = self._require_connection(operation)

        if not isinstance(ics_options, ICSOptions):
            ics_options = ICSOptions.model_validate(ics_options or {})

        body = self.to_wire()
        body["ics_options"] = ics_options.to_wire()

        logger.debug(f"Generating ICS for calendar {self.calendar_id}")
        response = await connection.request("POST", ICS_PATH, body=body)
        if not isinstance(response, dict) or not isinstance(response.get("ics"), str):
            raise TransportError(
                f"Malformed ICS response, expected an object with an 'ics' string: "
                f"{response!r}",
                body=response,
            )
        return response["ics"]

    def sync(self) -> "SyncEvent":
        """Return a synchronous wrapper around this event."""
        from .sync_client import SyncEvent

        return SyncEvent(self)


__all__ = ["Event", "ICSMethod", "EVENTS_PATH", "RSVP_PATH", "ICS_PATH"]
