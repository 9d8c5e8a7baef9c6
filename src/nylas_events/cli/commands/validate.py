# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
nylas-events validate command.

Checks an event file against the rules ``save`` enforces and prints the
body that would be sent, without contacting the API.
"""

import json
from pathlib import Path

import typer

from nylas_events.core import EventValidationError

from .._cli_utils import console, load_event


def validate(
    event_file: Path = typer.Argument(..., help="JSON file with the event in wire format"),
    show_body: bool = typer.Option(
        True, "--show-body/--no-show-body", help="Print the request body"
    ),
) -> None:
    """
    Validate an event file and show the request body it produces.

    Examples:
        $ nylas-events validate event.json

        $ nylas-events validate event.json --no-show-body
    """
    event = load_event(event_file)

    try:
        event.validate_event()
    except EventValidationError as e:
        console.print(f"[bold red]✗[/bold red] {e}")
        raise typer.Exit(1) from e

    action = "update" if event.id else "create"
    console.print(f"[bold green]✓[/bold green] Event is valid ({action})")

    if show_body:
        console.print_json(json.dumps(event.to_wire()))
