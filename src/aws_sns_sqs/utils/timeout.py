"""
Module: timeout.py
Description: Timeout-scoped execution of transport calls.

Resolves the effective timeout for a call and bounds the awaited
transport operation with asyncio.wait_for. A zero or missing timeout runs
the call unbounded.
"""

import asyncio
from typing import Awaitable, Callable, Optional, TypeVar

from .zero import is_zero

T = TypeVar("T")


def resolve_timeout(*candidates: Optional[float]) -> Optional[float]:
    """
    Pick the first non-zero timeout.

    Candidates are ordered from most to least specific, e.g.
    ``resolve_timeout(options.timeout, state.default_timeout)``.

    Returns:
        Timeout in seconds, or None when every candidate is unset
    """
    for candidate in candidates:
        if not is_zero(candidate):
            return float(candidate)
    return None


async def call_with_timeout(
    transport_call: Callable[[], Awaitable[T]],
    timeout: Optional[float]
) -> T:
    """
    Await a transport call, bounded by timeout when one is set.

    On expiry the in-flight call is cancelled and asyncio.TimeoutError is
    raised to the caller. Without a timeout the call may block for as long
    as the transport does. Cancellation of the calling task propagates to
    the transport call either way.

    Args:
        transport_call: Zero-argument callable returning the awaitable
        timeout: Seconds, or None/0 for no deadline

    Returns:
        Whatever the transport call returns
    """
    if is_zero(timeout):
        return await transport_call()
    return await asyncio.wait_for(transport_call(), timeout=timeout)
