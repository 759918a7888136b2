"""
Module: options.py
Description: Per-call option models for SNS publish and SQS send/receive.

Each operation kind has its own frozen option model. A field left at its
zero value (None, 0, empty collection) is unset and is filled from the
client defaults during option merging.

Key Components:
- MessageAttributeValue: Typed message attribute in AWS wire shape
- PublishOptions / SendOptions / ReceiveOptions: Option sets per operation
- Library-wide defaults and factory functions

Dependencies: pydantic, typing
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


DEFAULT_TIMEOUT = 5.0
DEFAULT_TIMEOUT_PUBLISH_MESSAGE = 5.0
DEFAULT_TIMEOUT_SEND_MESSAGE = 5.0
DEFAULT_WAIT_TIME_RECEIVE_MESSAGE = 20
DEFAULT_MAX_NUMBER_RECEIVE_MESSAGE = 1
DEFAULT_MESSAGE_SYSTEM_ATTRIBUTE_NAMES = ("All",)
DEFAULT_MESSAGE_ATTRIBUTE_NAMES = ("All",)


class MessageAttributeValue(BaseModel):
    """
    Message attribute value for SNS and SQS.

    Serialises to the structure boto expects
    (``{"DataType": ..., "StringValue": ...}``). The same shape is used for
    SQS message system attributes such as ``AWSTraceHeader``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    data_type: str = Field(..., alias="DataType", min_length=1)
    string_value: Optional[str] = Field(default=None, alias="StringValue")
    binary_value: Optional[bytes] = Field(default=None, alias="BinaryValue")
    string_list_values: Optional[List[str]] = Field(default=None, alias="StringListValues")
    binary_list_values: Optional[List[bytes]] = Field(default=None, alias="BinaryListValues")

    @classmethod
    def string(cls, value: str) -> "MessageAttributeValue":
        return cls(data_type="String", string_value=value)

    @classmethod
    def number(cls, value: Any) -> "MessageAttributeValue":
        return cls(data_type="Number", string_value=str(value))

    @classmethod
    def binary(cls, value: bytes) -> "MessageAttributeValue":
        return cls(data_type="Binary", binary_value=value)

    def to_wire(self) -> Dict[str, Any]:
        """Dump as the request structure, omitting unset members."""
        return self.model_dump(by_alias=True, exclude_none=True)


def _coerce_attributes(value: Any) -> Any:
    """Accept plain strings and numbers as attribute values."""
    if not isinstance(value, dict):
        return value

    coerced = {}
    for name, item in value.items():
        if isinstance(item, str):
            coerced[name] = MessageAttributeValue.string(item)
        elif isinstance(item, (int, float)) and not isinstance(item, bool):
            coerced[name] = MessageAttributeValue.number(item)
        else:
            coerced[name] = item
    return coerced


class PublishOptions(BaseModel):
    """
    Options for SNS Publish.

    Attributes:
        message_attributes: Message attributes keyed by name
        message_deduplication_id: Deduplication id (FIFO topics)
        message_group_id: Message group id (FIFO topics)
        timeout: Call timeout in seconds
    """

    model_config = ConfigDict(frozen=True)

    message_attributes: Optional[Dict[str, MessageAttributeValue]] = None
    message_deduplication_id: Optional[str] = None
    message_group_id: Optional[str] = None
    timeout: Optional[float] = Field(default=None, ge=0)

    @field_validator("message_attributes", mode="before")
    @classmethod
    def coerce_attributes(cls, v: Any) -> Any:
        return _coerce_attributes(v)


class SendOptions(BaseModel):
    """
    Options for SQS SendMessage.

    Attributes:
        delay_seconds: Delivery delay in seconds
        message_attributes: Message attributes keyed by name
        message_system_attributes: System attributes (e.g. AWSTraceHeader)
        message_deduplication_id: Deduplication id (FIFO queues)
        message_group_id: Message group id (FIFO queues)
        timeout: Call timeout in seconds
    """

    model_config = ConfigDict(frozen=True)

    delay_seconds: Optional[int] = Field(default=None, ge=0, le=900)
    message_attributes: Optional[Dict[str, MessageAttributeValue]] = None
    message_system_attributes: Optional[Dict[str, MessageAttributeValue]] = None
    message_deduplication_id: Optional[str] = None
    message_group_id: Optional[str] = None
    timeout: Optional[float] = Field(default=None, ge=0)

    @field_validator("message_attributes", "message_system_attributes", mode="before")
    @classmethod
    def coerce_attributes(cls, v: Any) -> Any:
        return _coerce_attributes(v)


class ReceiveOptions(BaseModel):
    """
    Options for SQS ReceiveMessage.

    Attributes:
        max_number_of_messages: Upper bound on messages returned (1-10)
        message_attribute_names: Message attribute names to return
        message_system_attribute_names: System attribute names to return
        visibility_timeout: Seconds the received messages stay hidden
        wait_time_seconds: Long-poll duration in seconds
        timeout: Call timeout in seconds
    """

    model_config = ConfigDict(frozen=True)

    max_number_of_messages: Optional[int] = Field(default=None, ge=0, le=10)
    message_attribute_names: Optional[List[str]] = None
    message_system_attribute_names: Optional[List[str]] = None
    visibility_timeout: Optional[int] = Field(default=None, ge=0, le=43200)
    wait_time_seconds: Optional[int] = Field(default=None, ge=0, le=20)
    timeout: Optional[float] = Field(default=None, ge=0)


def default_publish_options() -> PublishOptions:
    return PublishOptions(timeout=DEFAULT_TIMEOUT_PUBLISH_MESSAGE)


def default_send_options() -> SendOptions:
    return SendOptions(timeout=DEFAULT_TIMEOUT_SEND_MESSAGE)


def default_receive_options() -> ReceiveOptions:
    return ReceiveOptions(
        max_number_of_messages=DEFAULT_MAX_NUMBER_RECEIVE_MESSAGE,
        message_attribute_names=list(DEFAULT_MESSAGE_ATTRIBUTE_NAMES),
        message_system_attribute_names=list(DEFAULT_MESSAGE_SYSTEM_ATTRIBUTE_NAMES),
        wait_time_seconds=DEFAULT_WAIT_TIME_RECEIVE_MESSAGE,
    )
