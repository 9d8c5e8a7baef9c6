# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""Client configuration for the events API."""

import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_API_SERVER = "https://api.nylas.com"


class ClientConfig(BaseModel):
    """Where and how to reach the events API."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    api_server: str = Field(
        default=DEFAULT_API_SERVER, description="Root URL every request path is joined to"
    )
    access_token: Optional[str] = Field(
        default=None, description="Bearer token of the account the events belong to"
    )
    client_id: Optional[str] = Field(
        default=None, description="Application client id, sent as a header"
    )
    request_timeout_s: float = Field(
        default=15.0, gt=0, description="Per-request timeout in seconds"
    )

    @classmethod
    def from_env(
        cls,
        api_server: Optional[str] = None,
        access_token: Optional[str] = None,
        client_id: Optional[str] = None,
        request_timeout_s: Optional[float] = None,
    ) -> "ClientConfig":
        """
        Build a config, falling back to environment variables.

        Explicit arguments win over ``NYLAS_API_SERVER``, ``NYLAS_ACCESS_TOKEN``,
        ``NYLAS_CLIENT_ID`` and ``NYLAS_REQUEST_TIMEOUT_S``.
        """
        resolved_timeout = request_timeout_s or os.environ.get("NYLAS_REQUEST_TIMEOUT_S")

        return cls(
            api_server=api_server or os.environ.get("NYLAS_API_SERVER", DEFAULT_API_SERVER),
            access_token=access_token or os.environ.get("NYLAS_ACCESS_TOKEN"),
            client_id=client_id or os.environ.get("NYLAS_CLIENT_ID"),
            request_timeout_s=float(resolved_timeout) if resolved_timeout else 15.0,
        )
