"""
Module: models
Description: Package initialization for option and state models.

- PublishOptions, SendOptions, ReceiveOptions: Per-call option sets
- MessageAttributeValue: Typed message attribute
- ClientState: Per-client defaults
"""

from .options import MessageAttributeValue, PublishOptions, ReceiveOptions, SendOptions
from .state import ClientState

__all__ = [
    "ClientState",
    "MessageAttributeValue",
    "PublishOptions",
    "ReceiveOptions",
    "SendOptions",
]
