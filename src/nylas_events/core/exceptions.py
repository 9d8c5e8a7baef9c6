# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""Custom exceptions for event validation and API requests."""

from typing import Any, Optional


class NylasEventsError(Exception):
    """Base exception for all nylas-events errors."""

    pass


class EventValidationError(NylasEventsError, ValueError):
    """
    Raised when an event fails cross-field validation.

    Validation runs before any request is issued, so an event that raises
    this error never reaches the API.
    """

    pass


class ConferencingConflictError(EventValidationError):
    """Raised when conferencing carries both manual details and autocreate."""

    def __init__(self, message: Optional[str] = None):
        if message is None:
            message = (
                "Cannot set both 'details' and 'autocreate' in conferencing object."
            )

        super().__init__(message)


class CapacityExceededError(EventValidationError):
    """Raised when an event has more participants than its capacity allows."""

    def __init__(
        self,
        participant_count: int,
        capacity: int,
        message: Optional[str] = None,
    ):
        self.participant_count = participant_count
        self.capacity = capacity

        if message is None:
            message = (
                f"The number of participants in the event ({participant_count}) "
                f"exceeds the set capacity ({capacity})."
            )

        super().__init__(message)


class PreconditionError(NylasEventsError):
    """Raised when an operation is called on an event missing required state."""

    pass


class MissingCalendarIdError(PreconditionError):
    """Raised when an operation needs a calendar id and none is set."""

    def __init__(self, operation: str, message: Optional[str] = None):
        self.operation = operation

        if message is None:
            message = f"Cannot {operation}: the event has no calendar_id."

        super().__init__(message)


class MissingTimeRangeError(PreconditionError):
    """Raised when an operation needs a populated time range and none is set."""

    def __init__(self, operation: str, message: Optional[str] = None):
        self.operation = operation

        if message is None:
            message = (
                f"Cannot {operation}: the event's 'when' has no time, timespan, "
                f"date or datespan set."
            )

        super().__init__(message)


class MissingEventIdError(PreconditionError):
    """Raised when an operation needs a saved event and the event has no id."""

    def __init__(self, operation: str, message: Optional[str] = None):
        self.operation = operation

        if message is None:
            message = f"Cannot {operation}: the event has not been saved yet."

        super().__init__(message)


class MissingConnectionError(PreconditionError):
    """Raised when an API operation is called on an event with no connection."""

    def __init__(self, operation: str, message: Optional[str] = None):
        self.operation = operation

        if message is None:
            message = f"Cannot {operation}: the event is not bound to a connection."

        super().__init__(message)


class TransportError(NylasEventsError):
    """
    Raised by a connection when a request fails.

    Covers both network failures (``status_code`` is None) and non-2xx
    responses from the API.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Any = None,
    ):
        self.status_code = status_code
        self.body = body

        if status_code is not None:
            message = f"{message} (status: {status_code})"

        super().__init__(message)
