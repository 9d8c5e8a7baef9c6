# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""nylas-events save command."""

from pathlib import Path
from typing import List, Optional

import typer

from nylas_events.core import EventValidationError, TransportError

from .._cli_utils import build_connection, console, load_event, parse_params


def save(
    event_file: Path = typer.Argument(..., help="JSON file with the event in wire format"),
    param: Optional[List[str]] = typer.Option(
        None, "--param", "-p", help="Query parameter as KEY=VALUE (repeatable)"
    ),
    api_server: Optional[str] = typer.Option(
        None, "--api-server", help="API root (default: $NYLAS_API_SERVER)"
    ),
    access_token: Optional[str] = typer.Option(
        None, "--access-token", help="Bearer token (default: $NYLAS_ACCESS_TOKEN)"
    ),
) -> None:
    """
    Create the event, or update it when the file carries an id.

    Examples:
        $ nylas-events save event.json

        $ nylas-events save event.json --param notify_participants=true
    """
    params = parse_params(param)
    connection = build_connection(api_server, access_token)
    event = load_event(event_file, connection=connection)

    action = "Updating" if event.id else "Creating"
    console.print(f"[bold cyan]{action} event...[/bold cyan]")

    try:
        event.sync().save(params)
    except (EventValidationError, TransportError) as e:
        console.print(f"[bold red]✗[/bold red] Save failed: {e}")
        raise typer.Exit(1) from e
    finally:
        connection.close()

    console.print(f"[bold green]✓[/bold green] Saved event {event.id}")
    console.print_json(event.model_dump_json(exclude_none=True))
