"""
Package: options
Description: Option merging and request building.

Resolves the effective options for a call from the per-call overrides and
the client defaults, and turns them into boto request parameters.
"""

from .merge import merge_options
from .requests import (
    build_publish_request,
    build_receive_message_request,
    build_send_message_request,
)

__all__ = [
    "build_publish_request",
    "build_receive_message_request",
    "build_send_message_request",
    "merge_options",
]
