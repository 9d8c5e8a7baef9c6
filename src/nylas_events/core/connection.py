# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Connections issue authenticated requests against the events API.

``Connection`` is the contract an ``Event`` is built on: one awaitable
``request()`` per call that returns the parsed JSON body or raises.
``HTTPConnection`` implements it over a ``requests.Session``; the blocking
call runs in a worker thread so the event loop is never blocked.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import requests

from .config import ClientConfig
from .exceptions import TransportError

logger = logging.getLogger(__name__)

SUPPORTED_METHODS = frozenset(["GET", "POST", "PUT", "DELETE"])


class Connection(ABC):
    """Request primitive consumed by ``Event``."""

    @abstractmethod
    async def request(
        self,
        method: str,
        path: str,
        *,
        body: Optional[Dict[str, Any]] = None,
        qs: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Send one request and return the parsed JSON response.

        Args:
            method: HTTP method (GET, POST, PUT or DELETE)
            path: Path relative to the API root, e.g. "/events"
            body: JSON body to send
            qs: Query string parameters, appended verbatim

        Raises:
            TransportError: On network failure or a non-2xx response
        """
        raise NotImplementedError


class HTTPConnection(Connection):
    """
    Connection backed by ``requests``.

    Example:
        >>> conn = HTTPConnection("https://api.nylas.com", access_token="token")
        >>> event = Event(connection=conn, calendar_id="cal-1", title="Standup")
        >>> await event.save()
    """

    def __init__(
        self,
        api_server: str,
        access_token: Optional[str] = None,
        client_id: Optional[str] = None,
        request_timeout_s: float = 15.0,
        default_headers: Optional[Dict[str, str]] = None,
    ):
        self._base = api_server.rstrip("/")
        self._timeout = float(request_timeout_s)
        self._http = requests.Session()
        self._headers = dict(default_headers or {})

        if access_token:
            self._headers["Authorization"] = f"Bearer {access_token}"
        if client_id:
            self._headers["X-Nylas-Client-Id"] = client_id

    @classmethod
    def from_config(cls, config: ClientConfig) -> "HTTPConnection":
        return cls(
            api_server=config.api_server,
            access_token=config.access_token,
            client_id=config.client_id,
            request_timeout_s=config.request_timeout_s,
        )

    @property
    def base_url(self) -> str:
        return self._base

    async def request(
        self,
        method: str,
        path: str,
        *,
        body: Optional[Dict[str, Any]] = None,
        qs: Optional[Dict[str, Any]] = None,
    ) -> Any:
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        return await asyncio.to_thread(self._send, method, path, body, qs)

    def _send(
        self,
        method: str,
        path: str,
        body: Optional[Dict[str, Any]],
        qs: Optional[Dict[str, Any]],
    ) -> Any:
        url = f"{self._base}/{path.lstrip('/')}"
        logger.debug(f"{method} {url} params={qs}")

        try:
            r = self._http.request(
                method,
                url,
                params=qs,
                json=body,
                headers=self._headers,
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise TransportError(f"Request to {url} failed: {e}") from e

        if not r.ok:
            error_body = _safe_json(r)
            message = r.reason or "Request failed"
            if isinstance(error_body, dict) and error_body.get("message"):
                message = error_body["message"]
            logger.warning(f"{method} {url} returned {r.status_code}: {message}")
            raise TransportError(message, status_code=r.status_code, body=error_body)

        if not r.content:
            return None
        return r.json()

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._http.close()

    def __enter__(self) -> "HTTPConnection":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def _safe_json(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text
