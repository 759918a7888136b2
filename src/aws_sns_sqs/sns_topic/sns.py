"""
Module: sns.py
Description: SNS client with per-client publish defaults and bounded calls.
"""

from typing import Any, Dict, Optional

from ..base import BaseMessagingClient
from ..models.options import PublishOptions
from ..options.merge import merge_options
from ..options.requests import build_publish_request
from ..utils.logger import get_logger
from ..utils.timeout import resolve_timeout

logger = get_logger(__name__)


def _require_topic_arn(topic_arn: str) -> None:
    if not topic_arn or not isinstance(topic_arn, str):
        raise ValueError("topic_arn must be a non-empty string")


class SNSClient(BaseMessagingClient):
    """SNS client for topic operations."""

    service_name = "sns"

    def set_default_publish_options(self, options: PublishOptions) -> None:
        """Replace the default options merged into every publish call."""
        self._update_state(publish_defaults=options)

    async def publish(
        self,
        topic_arn: str,
        message: str,
        options: Optional[PublishOptions] = None
    ) -> Dict[str, Any]:
        """
        Publish a message to an SNS topic.

        Args:
            topic_arn: ARN of the topic
            message: Message body, sent as-is
            options: Per-call overrides of the default publish options

        Returns:
            Publish response (MessageId, SequenceNumber for FIFO topics)

        Raises:
            ClientError: If SNS rejects the request
            asyncio.TimeoutError: If the call timeout expires
            ValueError: If parameters are invalid
        """
        _require_topic_arn(topic_arn)
        if not isinstance(message, str):
            raise ValueError("message must be a string")

        state = self.state
        effective = merge_options(options, state.publish_defaults, state.append_attributes)
        request = build_publish_request(topic_arn, message, effective)
        timeout = resolve_timeout(
            effective.timeout if effective is not None else None,
            state.default_timeout
        )

        response = await self._call('publish', request, timeout, topic_arn=topic_arn)

        logger.info(
            "Message published to SNS",
            topic_arn=topic_arn,
            message_id=response.get('MessageId')
        )

        return response

    async def get_topic_attributes(self, topic_arn: str) -> Dict[str, str]:
        """
        Look up topic attributes.

        Args:
            topic_arn: ARN of the topic

        Returns:
            Attribute name to value mapping
        """
        _require_topic_arn(topic_arn)

        state = self.state
        response = await self._call(
            'get_topic_attributes',
            {'TopicArn': topic_arn},
            resolve_timeout(state.default_timeout),
            topic_arn=topic_arn
        )
        return response.get('Attributes', {})
