# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Callback-style adapter over the async event operations.

Event operations are coroutines. Code written against a node-style
``callback(error, result)`` contract can wrap any of them::

    await with_callback(event.save(), on_saved)

The callback receives ``(None, result)`` on success and ``(error, None)`` on
failure; the awaitable still returns the result or raises the same error.
"""

import logging
from typing import Any, Awaitable, Callable, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Callback = Callable[[Optional[BaseException], Optional[Any]], Any]


def _invoke(callback: Callback, error: Optional[BaseException], result: Any) -> None:
    # A failing callback must not change the outcome seen by the awaiter
    try:
        callback(error, result)
    except Exception:
        logger.exception(f"Callback {callback!r} raised")


async def with_callback(awaitable: Awaitable[T], callback: Optional[Callback]) -> T:
    """
    Await ``awaitable`` and report its outcome to ``callback`` as well.

    Args:
        awaitable: The operation to run, e.g. ``event.save()``
        callback: Called with ``(error, result)``; skipped when None

    Returns:
        The awaitable's result.

    Raises:
        Exception: Whatever the awaitable raised, after the callback ran.
    """
    try:
        result = await awaitable
    except Exception as e:
        if callback is not None:
            _invoke(callback, e, None)
        raise

    if callback is not None:
        _invoke(callback, None, result)
    return result
