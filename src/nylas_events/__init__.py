"""
Calendar event client bundling the core model and the CLI.
"""

from importlib import metadata

from .core import Event, HTTPConnection, SyncEvent, When

__all__ = ["core", "cli", "Event", "HTTPConnection", "SyncEvent", "When"]

try:
    __version__ = metadata.version("nylas-events")  # type: ignore[arg-type]
except metadata.PackageNotFoundError:  # pragma: no cover - local dev
    __version__ = "0.0.0"
