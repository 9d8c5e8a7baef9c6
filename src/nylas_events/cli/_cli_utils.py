# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""CLI utilities for the nylas-events command-line interface."""

import json
from pathlib import Path
from typing import Dict, List, Optional

import typer
from rich.console import Console

from nylas_events.core import ClientConfig, Event, HTTPConnection

# Create a console instance for CLI output
console = Console()


def parse_key_value(s: str) -> tuple[str, str]:
    """Parse KEY=VALUE string. Raises BadParameter if no '='."""
    if "=" not in s:
        raise typer.BadParameter(f"Expected KEY=VALUE format, got: {s!r}")
    key, _, value = s.partition("=")
    key = key.strip()
    if not key:
        raise typer.BadParameter(f"Empty key in: {s!r}")
    return key, value.strip()


def parse_params(values: Optional[List[str]]) -> Optional[Dict[str, str]]:
    """Turn repeated --param KEY=VALUE options into a query string dict."""
    if not values:
        return None
    return dict(parse_key_value(v) for v in values)


def build_connection(
    api_server: Optional[str], access_token: Optional[str]
) -> HTTPConnection:
    """Build an HTTP connection from options, falling back to NYLAS_* env vars."""
    config = ClientConfig.from_env(api_server=api_server, access_token=access_token)
    return HTTPConnection.from_config(config)


def load_event(path: Path, connection: Optional[HTTPConnection] = None) -> Event:
    """
    Load an event from a JSON file in wire format.

    Raises:
        typer.BadParameter: If the file is missing or not a JSON object
    """
    if not path.exists():
        raise typer.BadParameter(f"Path does not exist: {path}")

    try:
        data = json.loads(path.read_text())
    except json.JSONDecodeError as e:
        raise typer.BadParameter(f"{path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise typer.BadParameter(f"Expected a JSON object in {path}")

    return Event.from_wire(data, connection=connection)
