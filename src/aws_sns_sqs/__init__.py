"""
Package: aws_sns_sqs
Description: Convenience clients for AWS SNS topics and SQS queues.

Callers supply only the options that differ from the client defaults;
every call is bounded by a timeout resolved from the call options, the
client defaults and the library defaults, in that order.

Logging is left to the host application. Call configure_logging() to use
the bundled JSON pipeline.
"""

from .config.settings import Settings
from .models.options import (
    MessageAttributeValue,
    PublishOptions,
    ReceiveOptions,
    SendOptions,
)
from .models.state import ClientState
from .sns_topic.sns import SNSClient
from .sqs_queue.sqs import SQSClient
from .utils.logger import configure_logging

__all__ = [
    "ClientState",
    "MessageAttributeValue",
    "PublishOptions",
    "ReceiveOptions",
    "SNSClient",
    "SQSClient",
    "SendOptions",
    "Settings",
    "configure_logging",
]
