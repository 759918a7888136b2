"""
Module: sqs.py
Description: SQS client with per-client defaults and bounded calls.

Handles resolving queue URLs, sending messages, long-poll receiving,
queue attribute lookups and deleting messages after processing. Send and
receive options are merged with the client defaults before each call.
"""

from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Sequence, Union

from ..base import BaseMessagingClient
from ..models.options import ReceiveOptions, SendOptions
from ..options.merge import merge_options
from ..options.requests import build_receive_message_request, build_send_message_request
from ..utils.logger import get_logger
from ..utils.timeout import resolve_timeout

logger = get_logger(__name__)


def _require_queue_url(queue_url: str) -> None:
    if not queue_url or not isinstance(queue_url, str):
        raise ValueError("queue_url must be a non-empty string")


class SQSClient(BaseMessagingClient):
    """
    SQS client for queue operations.

    Example:
        >>> client = SQSClient.with_region("eu-west-1")
        >>> client.set_default_send_options(SendOptions(message_group_id="orders"))
        >>> await client.send_message(queue_url, "hello")
        >>> messages = await client.receive_messages(queue_url)
    """

    service_name = "sqs"

    def set_default_send_options(self, options: SendOptions) -> None:
        """Replace the default options merged into every send_message call."""
        self._update_state(send_defaults=options)

    def set_default_receive_options(self, options: ReceiveOptions) -> None:
        """Replace the default options merged into every receive_messages call."""
        self._update_state(receive_defaults=options)

    async def get_queue_url(self, queue_name: str, aws_account_id: Optional[str] = None) -> str:
        """
        Resolve a queue name to its URL.

        Args:
            queue_name: Name of the queue
            aws_account_id: Owning account, for queues in another account

        Returns:
            Queue URL
        """
        if not queue_name or not isinstance(queue_name, str):
            raise ValueError("queue_name must be a non-empty string")

        request = {'QueueName': queue_name}
        if aws_account_id:
            request['QueueOwnerAWSAccountId'] = aws_account_id

        state = self.state
        response = await self._call(
            'get_queue_url',
            request,
            resolve_timeout(state.default_timeout),
            queue_name=queue_name
        )
        return response['QueueUrl']

    async def send_message(
        self,
        queue_url: str,
        message: str,
        options: Optional[SendOptions] = None
    ) -> Dict[str, Any]:
        """
        Send a message to an SQS queue.

        Args:
            queue_url: URL of the queue
            message: Message body, sent as-is
            options: Per-call overrides of the default send options

        Returns:
            SendMessage response (MessageId, MD5OfMessageBody, ...)

        Raises:
            ClientError: If SQS rejects the request
            asyncio.TimeoutError: If the call timeout expires
            ValueError: If parameters are invalid
        """
        _require_queue_url(queue_url)
        if not isinstance(message, str):
            raise ValueError("message must be a string")

        state = self.state
        effective = merge_options(options, state.send_defaults, state.append_attributes)
        request = build_send_message_request(queue_url, message, effective)
        timeout = resolve_timeout(
            effective.timeout if effective is not None else None,
            state.default_timeout
        )

        response = await self._call('send_message', request, timeout, queue_url=queue_url)

        logger.info(
            "Message sent to SQS",
            queue_url=queue_url,
            message_id=response.get('MessageId')
        )

        return response

    async def receive_messages(
        self,
        queue_url: str,
        options: Optional[ReceiveOptions] = None
    ) -> List[Dict[str, Any]]:
        """
        Receive messages from an SQS queue.

        The client default timeout is not applied here: a long poll waits up
        to wait_time_seconds, which would outlast it. Only a timeout carried
        by the receive options bounds the call.

        Args:
            queue_url: URL of the queue
            options: Per-call overrides of the default receive options

        Returns:
            Received messages (empty list if none arrived)
        """
        _require_queue_url(queue_url)

        state = self.state
        effective = merge_options(options, state.receive_defaults, state.append_attributes)
        request = build_receive_message_request(queue_url, effective)
        timeout = resolve_timeout(effective.timeout if effective is not None else None)

        response = await self._call('receive_message', request, timeout, queue_url=queue_url)
        messages = response.get('Messages', [])

        logger.info(
            "Messages received from SQS",
            queue_url=queue_url,
            count=len(messages)
        )

        return messages

    async def get_queue_attributes(
        self,
        queue_url: str,
        attribute_names: Optional[Sequence[str]] = None
    ) -> Dict[str, str]:
        """
        Look up queue attributes.

        Args:
            queue_url: URL of the queue
            attribute_names: Attributes to fetch; empty or None means all

        Returns:
            Attribute name to value mapping
        """
        _require_queue_url(queue_url)

        names = list(attribute_names or []) or ['All']

        state = self.state
        response = await self._call(
            'get_queue_attributes',
            {'QueueUrl': queue_url, 'AttributeNames': names},
            resolve_timeout(state.default_timeout),
            queue_url=queue_url
        )
        return response.get('Attributes', {})

    async def delete_message(
        self,
        queue_url: str,
        message: Union[Mapping, str]
    ) -> Dict[str, Any]:
        """
        Delete a received message.

        Args:
            queue_url: URL of the queue
            message: Message as returned by receive_messages, or its receipt handle

        Returns:
            DeleteMessage response
        """
        _require_queue_url(queue_url)

        if isinstance(message, Mapping):
            receipt_handle = message.get('ReceiptHandle')
        else:
            receipt_handle = message
        if not receipt_handle or not isinstance(receipt_handle, str):
            raise ValueError("message must carry a non-empty ReceiptHandle")

        state = self.state
        response = await self._call(
            'delete_message',
            {'QueueUrl': queue_url, 'ReceiptHandle': receipt_handle},
            resolve_timeout(state.default_timeout),
            queue_url=queue_url
        )

        logger.info("Message deleted from SQS", queue_url=queue_url)

        return response
