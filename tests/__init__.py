# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Test suite for nylas-events.

- core/: the event model, wire format, connection and sync wrapper
- test_cli/: the nylas-events command-line interface
"""
