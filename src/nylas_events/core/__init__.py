# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""Event model, wire format and the connection it is saved through."""

from .callbacks import with_callback
from .config import ClientConfig
from .connection import Connection, HTTPConnection
from .event import Event
from .exceptions import (
    CapacityExceededError,
    ConferencingConflictError,
    EventValidationError,
    MissingCalendarIdError,
    MissingConnectionError,
    MissingEventIdError,
    MissingTimeRangeError,
    NylasEventsError,
    PreconditionError,
    TransportError,
)
from .sync_client import SyncEvent
from .types import (
    ConferencingAutocreate,
    ConferencingDetails,
    EmailNotification,
    EventConferencing,
    EventReminder,
    ICSMethod,
    ICSOptions,
    Notification,
    Participant,
    ParticipantStatus,
    Recurrence,
    ReminderMethod,
    RSVPStatus,
    SMSNotification,
    WebhookNotification,
    notification_from_wire,
)
from .when import Date, Datespan, Time, TimeRange, Timespan, When, time_range

__all__ = [
    # Event and connection
    "Event",
    "SyncEvent",
    "Connection",
    "HTTPConnection",
    "ClientConfig",
    "with_callback",
    # Time ranges
    "When",
    "TimeRange",
    "Time",
    "Timespan",
    "Date",
    "Datespan",
    "time_range",
    # Value objects
    "Participant",
    "ParticipantStatus",
    "RSVPStatus",
    "Notification",
    "EmailNotification",
    "SMSNotification",
    "WebhookNotification",
    "notification_from_wire",
    "EventReminder",
    "ReminderMethod",
    "EventConferencing",
    "ConferencingDetails",
    "ConferencingAutocreate",
    "Recurrence",
    "ICSOptions",
    "ICSMethod",
    # Errors
    "NylasEventsError",
    "EventValidationError",
    "ConferencingConflictError",
    "CapacityExceededError",
    "PreconditionError",
    "MissingCalendarIdError",
    "MissingTimeRangeError",
    "MissingEventIdError",
    "MissingConnectionError",
    "TransportError",
]
