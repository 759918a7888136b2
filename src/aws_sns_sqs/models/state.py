"""
Module: state.py
Description: Per-client default configuration.

ClientState is an immutable value. Clients hold one in a lock-guarded cell
and replace it wholesale when a setter is called, so a call in flight
always works from a single consistent snapshot.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .options import (
    DEFAULT_TIMEOUT,
    PublishOptions,
    ReceiveOptions,
    SendOptions,
    default_publish_options,
    default_receive_options,
    default_send_options,
)


class ClientState(BaseModel):
    """
    Defaults applied to every call made through one client.

    Attributes:
        publish_defaults: Default SNS publish options
        send_defaults: Default SQS send options
        receive_defaults: Default SQS receive options
        default_timeout: Call timeout in seconds when no option sets one
        append_attributes: Merge collection options instead of replacing them
    """

    model_config = ConfigDict(frozen=True)

    publish_defaults: PublishOptions = Field(default_factory=default_publish_options)
    send_defaults: SendOptions = Field(default_factory=default_send_options)
    receive_defaults: ReceiveOptions = Field(default_factory=default_receive_options)
    default_timeout: Optional[float] = Field(default=DEFAULT_TIMEOUT, ge=0)
    append_attributes: bool = False

    @classmethod
    def from_settings(cls, settings) -> "ClientState":
        """Seed client state from library settings."""
        return cls(
            default_timeout=settings.default_timeout,
            append_attributes=settings.append_attributes,
        )
