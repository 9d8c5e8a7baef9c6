# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Synchronous wrapper for Event.

This module provides a SyncEvent that wraps an Event, allowing synchronous
usage while the underlying operations use async I/O.

Example:
    >>> event = Event(connection=HTTPConnection("https://api.nylas.com"))
    >>> sync_event = event.sync()
    >>> sync_event.event.title = "Standup"
    >>> sync_event.save()
    >>> ics = sync_event.generate_ics({"method": "request"})
"""

from __future__ import annotations

from typing import Any, Dict, Optional, TYPE_CHECKING, Union

from .callbacks import Callback, with_callback
from .types import ICSOptions, RSVPStatus
from .utils import run_async_safely

if TYPE_CHECKING:
    from .event import Event


class SyncEvent:
    """
    Synchronous wrapper around an Event.

    Every operation blocks until the request finishes. Validation and
    precondition errors are raised before any request, as with the async API.
    An optional ``callback(error, result)`` mirrors the outcome.

    Attributes:
        _async: The wrapped Event instance
    """

    def __init__(self, event: "Event"):
        self._async = event

    @property
    def event(self) -> "Event":
        """Access the underlying Event."""
        return self._async

    def save(
        self,
        params: Optional[Dict[str, Any]] = None,
        callback: Optional[Callback] = None,
    ) -> "Event":
        """
        Create or update the event. See ``Event.save()``.

        Validation errors are raised directly and never reach ``callback``;
        request errors reach both.
        """
        self._async.validate_event()
        return run_async_safely(with_callback(self._async.save(params), callback))

    def rsvp(
        self,
        status: Union[RSVPStatus, str],
        comment: Optional[str] = None,
        callback: Optional[Callback] = None,
    ) -> "Event":
        """Answer the invitation. See ``Event.rsvp()``."""
        return run_async_safely(
            with_callback(self._async.rsvp(status, comment), callback)
        )

    def generate_ics(
        self,
        ics_options: Optional[Union[ICSOptions, Dict[str, Any]]] = None,
        callback: Optional[Callback] = None,
    ) -> str:
        """Render the event as ICS. See ``Event.generate_ics()``."""
        return run_async_safely(
            with_callback(self._async.generate_ics(ics_options), callback)
        )
