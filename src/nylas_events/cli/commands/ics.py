# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""nylas-events ics command."""

from pathlib import Path
from typing import Optional

import typer

from nylas_events.core import ICSMethod, ICSOptions, PreconditionError, TransportError

from .._cli_utils import build_connection, console, load_event


def ics(
    event_file: Path = typer.Argument(..., help="JSON file with the event in wire format"),
    method: Optional[ICSMethod] = typer.Option(None, "--method", help="iTIP method"),
    ical_uid: Optional[str] = typer.Option(None, "--ical-uid", help="UID for the ICS event"),
    prod_id: Optional[str] = typer.Option(None, "--prodid", help="PRODID for the calendar"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write the ICS file here instead of stdout"
    ),
    api_server: Optional[str] = typer.Option(
        None, "--api-server", help="API root (default: $NYLAS_API_SERVER)"
    ),
    access_token: Optional[str] = typer.Option(
        None, "--access-token", help="Bearer token (default: $NYLAS_ACCESS_TOKEN)"
    ),
) -> None:
    """
    Generate an ICS file for an event.

    Examples:
        $ nylas-events ics event.json --method request -o invite.ics
    """
    connection = build_connection(api_server, access_token)
    event = load_event(event_file, connection=connection)
    options = ICSOptions(ical_uid=ical_uid, method=method, prod_id=prod_id)

    try:
        content = event.sync().generate_ics(options)
    except (PreconditionError, TransportError) as e:
        console.print(f"[bold red]✗[/bold red] ICS generation failed: {e}")
        raise typer.Exit(1) from e
    finally:
        connection.close()

    if output is None:
        typer.echo(content)
        return

    output.write_text(content)
    console.print(f"[bold green]✓[/bold green] Wrote {output}")
