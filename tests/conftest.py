# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Pytest configuration and shared fixtures for nylas-events tests.
"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

# Add src to Python path
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from nylas_events.core import Connection, Event


async def _echo(method, path, *, body=None, qs=None):
    """Answer every request with the body it was sent, like a permissive server."""
    return body


@pytest.fixture
def connection():
    """A Connection whose request() echoes the request body back."""
    conn = MagicMock(spec=Connection)
    conn.request = AsyncMock(side_effect=_echo)
    return conn


@pytest.fixture
def event(connection):
    """A fresh, unsaved event bound to the echo connection."""
    return Event(connection=connection)


@pytest.fixture
def event_json():
    """A create/update response as returned by the API."""
    return {
        "id": "id-1234",
        "title": "test event",
        "when": {"time": 1409594400, "object": "time"},
        "participants": [
            {
                "name": "foo",
                "email": "bar",
                "status": "noreply",
                "comment": "This is a comment",
                "phone_number": "416-000-0000",
            }
        ],
        "ical_uid": "id-5678",
        "master_event_id": "master-1234",
        "original_start_time": 1409592400,
        "event_collection_id": 100,
        "capacity": 4,
        "round_robin_order": ["test@email.com"],
    }
