"""
Module: requests.py
Description: Build boto request parameters from effective options.

Mandatory fields are always present. Optional fields are copied only when
set, leaving the service to apply its own defaults for the rest. The
call timeout is never part of a request.
"""

from collections.abc import Mapping
from typing import Any, Dict, Optional, Sequence, Tuple

from pydantic import BaseModel

from ..models.options import MessageAttributeValue, PublishOptions, ReceiveOptions, SendOptions
from ..utils.zero import is_zero

# (option field, request parameter)
PUBLISH_FIELDS = (
    ("message_attributes", "MessageAttributes"),
    ("message_group_id", "MessageGroupId"),
    ("message_deduplication_id", "MessageDeduplicationId"),
)

SEND_MESSAGE_FIELDS = (
    ("delay_seconds", "DelaySeconds"),
    ("message_attributes", "MessageAttributes"),
    ("message_system_attributes", "MessageSystemAttributes"),
    ("message_group_id", "MessageGroupId"),
    ("message_deduplication_id", "MessageDeduplicationId"),
)

RECEIVE_MESSAGE_FIELDS = (
    ("max_number_of_messages", "MaxNumberOfMessages"),
    ("message_attribute_names", "MessageAttributeNames"),
    ("message_system_attribute_names", "MessageSystemAttributeNames"),
    ("visibility_timeout", "VisibilityTimeout"),
    ("wait_time_seconds", "WaitTimeSeconds"),
)


def build_publish_request(
    topic_arn: str,
    message: str,
    options: Optional[PublishOptions] = None
) -> Dict[str, Any]:
    """Build SNS Publish parameters."""
    request = {
        'TopicArn': topic_arn,
        'Message': message,
    }
    _copy_set_fields(request, options, PUBLISH_FIELDS)
    return request


def build_send_message_request(
    queue_url: str,
    message: str,
    options: Optional[SendOptions] = None
) -> Dict[str, Any]:
    """
    Build SQS SendMessage parameters.

    Example:
        >>> build_send_message_request(url, "hi", SendOptions(message_deduplication_id="d1"))
        {'QueueUrl': url, 'MessageBody': 'hi', 'MessageDeduplicationId': 'd1'}
    """
    request = {
        'QueueUrl': queue_url,
        'MessageBody': message,
    }
    _copy_set_fields(request, options, SEND_MESSAGE_FIELDS)
    return request


def build_receive_message_request(
    queue_url: str,
    options: Optional[ReceiveOptions] = None
) -> Dict[str, Any]:
    """Build SQS ReceiveMessage parameters."""
    request = {
        'QueueUrl': queue_url,
    }
    _copy_set_fields(request, options, RECEIVE_MESSAGE_FIELDS)
    return request


def _copy_set_fields(
    request: Dict[str, Any],
    options: Optional[BaseModel],
    fields: Sequence[Tuple[str, str]]
) -> None:
    if options is None:
        return

    for field_name, parameter in fields:
        value = getattr(options, field_name)
        if not is_zero(value):
            request[parameter] = _to_wire(value)


def _to_wire(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {
            name: item.to_wire() if isinstance(item, MessageAttributeValue) else item
            for name, item in value.items()
        }
    if isinstance(value, tuple):
        return list(value)
    return value
