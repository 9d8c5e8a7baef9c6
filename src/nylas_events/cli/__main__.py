# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
nylas-events CLI entry point.

This module provides the main entry point for the nylas-events command-line
interface.
"""

import logging
import sys

import typer

from nylas_events.cli.commands import ics, rsvp, save, validate

# Create the main CLI app
app = typer.Typer(
    name="nylas-events",
    help="nylas-events - validate, save, answer and export calendar events",
    no_args_is_help=True,
)


@app.callback()
def configure(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log every API request"
    ),
) -> None:
    """Configure logging for all commands."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register commands
app.command(name="validate", help="Validate an event file and show its request body")(
    validate.validate
)
app.command(name="save", help="Create or update an event")(save.save)
app.command(name="rsvp", help="Answer an event invitation")(rsvp.rsvp)
app.command(name="ics", help="Generate an ICS file for an event")(ics.ics)


# Entry point for setuptools
def main() -> None:
    """Main entry point for the CLI."""
    try:
        app()
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        sys.exit(130)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
