# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""nylas-events CLI commands."""

from . import ics, rsvp, save, validate

__all__ = ["ics", "rsvp", "save", "validate"]
