# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""Tests for the validate, save, rsvp and ics commands."""

import json
from unittest.mock import AsyncMock, patch

import pytest
from typer.testing import CliRunner

from nylas_events.cli.__main__ import app
from nylas_events.core import TransportError

runner = CliRunner()


@pytest.fixture
def event_file(tmp_path):
    path = tmp_path / "event.json"
    path.write_text(
        json.dumps(
            {
                "calendar_id": "cal-1",
                "title": "Standup",
                "when": {"start_time": 1409594400, "end_time": 1409598000},
                "participants": [{"email": "person1@email.com", "status": "noreply"}],
            }
        )
    )
    return path


@pytest.fixture
def mock_connection():
    """Patch the HTTP connection the commands build."""
    with patch("nylas_events.cli._cli_utils.HTTPConnection") as mock_cls:
        yield mock_cls.from_config.return_value


# ============================================================================
# validate
# ============================================================================


def test_validate_prints_body(event_file) -> None:
    """Test that validate reports a valid event and prints its body."""
    result = runner.invoke(app, ["validate", str(event_file)])

    assert result.exit_code == 0
    assert "Event is valid (create)" in result.output
    assert '"start_time": 1409594400' in result.output


def test_validate_no_show_body(event_file) -> None:
    """Test that --no-show-body skips the body."""
    result = runner.invoke(app, ["validate", str(event_file), "--no-show-body"])

    assert result.exit_code == 0
    assert "start_time" not in result.output


def test_validate_reports_capacity_error(tmp_path) -> None:
    """Test that validate exits non-zero for an over-capacity event."""
    path = tmp_path / "event.json"
    path.write_text(
        json.dumps(
            {
                "capacity": 1,
                "participants": [
                    {"email": "person1@email.com"},
                    {"email": "person2@email.com"},
                ],
            }
        )
    )

    result = runner.invoke(app, ["validate", str(path)])

    assert result.exit_code == 1
    assert "exceeds the set capacity" in result.output


def test_validate_missing_file(tmp_path) -> None:
    """Test that a missing event file is a usage error."""
    result = runner.invoke(app, ["validate", str(tmp_path / "missing.json")])

    assert result.exit_code != 0
    assert "does not exist" in result.output


def test_validate_rejects_non_object(tmp_path) -> None:
    """Test that a JSON file holding a list is rejected."""
    path = tmp_path / "event.json"
    path.write_text("[]")

    result = runner.invoke(app, ["validate", str(path)])

    assert result.exit_code != 0
    assert "Expected a JSON object" in result.output


# ============================================================================
# save
# ============================================================================


def test_save_creates_event(event_file, mock_connection) -> None:
    """Test that save POSTs a new event and prints the assigned id."""
    mock_connection.request = AsyncMock(
        return_value={"id": "evt-1", "calendar_id": "cal-1", "title": "Standup"}
    )

    result = runner.invoke(
        app, ["save", str(event_file), "--param", "notify_participants=true"]
    )

    assert result.exit_code == 0
    assert "Saved event evt-1" in result.output

    args = mock_connection.request.await_args
    assert args.args == ("POST", "/events")
    assert args.kwargs["qs"] == {"notify_participants": "true"}
    assert args.kwargs["body"]["participants"] == [
        {"email": "person1@email.com", "status": "noreply"}
    ]
    mock_connection.close.assert_called_once()


def test_save_updates_event_with_id(tmp_path, mock_connection) -> None:
    """Test that save PUTs an event that already has an id."""
    path = tmp_path / "event.json"
    path.write_text(json.dumps({"id": "evt-1", "title": "Renamed"}))
    mock_connection.request = AsyncMock(return_value={"id": "evt-1", "title": "Renamed"})

    result = runner.invoke(app, ["save", str(path)])

    assert result.exit_code == 0
    assert mock_connection.request.await_args.args == ("PUT", "/events/evt-1")


def test_save_reports_api_error(event_file, mock_connection) -> None:
    """Test that an API failure exits non-zero and still closes the connection."""
    mock_connection.request = AsyncMock(
        side_effect=TransportError("Invalid calendar", status_code=400)
    )

    result = runner.invoke(app, ["save", str(event_file)])

    assert result.exit_code == 1
    assert "Save failed" in result.output
    mock_connection.close.assert_called_once()


def test_save_rejects_bad_param(event_file, mock_connection) -> None:
    """Test that --param without '=' is a usage error."""
    result = runner.invoke(app, ["save", str(event_file), "--param", "oops"])

    assert result.exit_code != 0
    assert "KEY=VALUE" in result.output


# ============================================================================
# rsvp
# ============================================================================


def test_rsvp_sends_answer(mock_connection) -> None:
    """Test that rsvp posts the answer and comment."""
    mock_connection.request = AsyncMock(return_value={"id": "evt-1", "title": "Party"})

    result = runner.invoke(app, ["rsvp", "evt-1", "yes", "--comment", "I will come."])

    assert result.exit_code == 0
    assert "Answered 'yes' to Party" in result.output
    mock_connection.request.assert_awaited_once_with(
        "POST",
        "/send-rsvp",
        body={"event_id": "evt-1", "status": "yes", "comment": "I will come."},
    )


def test_rsvp_rejects_unknown_status(mock_connection) -> None:
    """Test that rsvp only accepts yes, no or maybe."""
    result = runner.invoke(app, ["rsvp", "evt-1", "perhaps"])

    assert result.exit_code != 0


# ============================================================================
# ics
# ============================================================================


def test_ics_prints_file(event_file, mock_connection) -> None:
    """Test that ics prints the generated file."""
    mock_connection.request = AsyncMock(return_value={"ics": "BEGIN:VCALENDAR"})

    result = runner.invoke(
        app, ["ics", str(event_file), "--method", "request", "--prodid", "prodId"]
    )

    assert result.exit_code == 0
    assert "BEGIN:VCALENDAR" in result.output
    body = mock_connection.request.await_args.kwargs["body"]
    assert body["ics_options"] == {"method": "request", "prodid": "prodId"}


def test_ics_writes_output_file(event_file, mock_connection, tmp_path) -> None:
    """Test that --output writes the file instead of printing it."""
    mock_connection.request = AsyncMock(return_value={"ics": "BEGIN:VCALENDAR"})
    output = tmp_path / "invite.ics"

    result = runner.invoke(app, ["ics", str(event_file), "-o", str(output)])

    assert result.exit_code == 0
    assert output.read_text() == "BEGIN:VCALENDAR"


def test_ics_requires_calendar_id(tmp_path, mock_connection) -> None:
    """Test that ics fails before any request when calendar_id is missing."""
    path = tmp_path / "event.json"
    path.write_text(json.dumps({"when": {"date": "1912-06-23"}}))
    mock_connection.request = AsyncMock()

    result = runner.invoke(app, ["ics", str(path)])

    assert result.exit_code == 1
    assert "ICS generation failed" in result.output
    mock_connection.request.assert_not_awaited()
