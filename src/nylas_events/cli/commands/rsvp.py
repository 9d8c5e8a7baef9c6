# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""nylas-events rsvp command."""

from typing import Optional

import typer

from nylas_events.core import Event, RSVPStatus, TransportError

from .._cli_utils import build_connection, console


def rsvp(
    event_id: str = typer.Argument(..., help="Id of the event to answer"),
    status: RSVPStatus = typer.Argument(..., help="Answer: yes, no or maybe"),
    comment: Optional[str] = typer.Option(None, "--comment", "-c", help="Note for the organizer"),
    api_server: Optional[str] = typer.Option(
        None, "--api-server", help="API root (default: $NYLAS_API_SERVER)"
    ),
    access_token: Optional[str] = typer.Option(
        None, "--access-token", help="Bearer token (default: $NYLAS_ACCESS_TOKEN)"
    ),
) -> None:
    """
    Answer an event invitation.

    Examples:
        $ nylas-events rsvp evt-123 yes --comment "I will come."
    """
    connection = build_connection(api_server, access_token)
    event = Event(id=event_id, connection=connection)

    try:
        updated = event.sync().rsvp(status, comment)
    except TransportError as e:
        console.print(f"[bold red]✗[/bold red] RSVP failed: {e}")
        raise typer.Exit(1) from e
    finally:
        connection.close()

    console.print(
        f"[bold green]✓[/bold green] Answered '{status.value}' to {updated.title or event_id}"
    )
