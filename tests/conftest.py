"""
Module: conftest.py
Description: Shared pytest fixtures for the SNS/SQS client tests.

Provides test settings, a fake aioboto3 session whose service clients
are AsyncMocks, and ready-made SNS and SQS clients wired to it.
"""

import pytest
from unittest.mock import AsyncMock

from aws_sns_sqs.config.settings import Settings
from aws_sns_sqs.sns_topic.sns import SNSClient
from aws_sns_sqs.sqs_queue.sqs import SQSClient

QUEUE_URL = "https://sqs.us-east-1.amazonaws.com/123456789012/test-queue"
TOPIC_ARN = "arn:aws:sns:us-east-1:123456789012:test-topic"


class _FakeClientContext:
    """Async context manager standing in for session.client(...)."""

    def __init__(self, client):
        self.client = client

    async def __aenter__(self):
        return self.client

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSession:
    """
    Minimal aioboto3 Session replacement.

    Each service gets one AsyncMock transport; client() records the
    keyword arguments it was opened with.
    """

    def __init__(self):
        self.transports = {'sns': AsyncMock(), 'sqs': AsyncMock()}
        self.client_calls = []

    def client(self, service_name, **kwargs):
        self.client_calls.append((service_name, kwargs))
        return _FakeClientContext(self.transports[service_name])


@pytest.fixture
def test_settings():
    """
    Provide test configuration settings.

    Disables .env loading so tests do not depend on the environment.
    """
    return Settings(
        _env_file=None,
        log_level="DEBUG",
        aws_region="us-east-1",
        default_timeout=5.0,
        append_attributes=False
    )


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def sqs_transport(fake_session):
    """AsyncMock standing in for the aioboto3 SQS client."""
    transport = fake_session.transports['sqs']
    transport.send_message.return_value = {'MessageId': 'msg-1', 'MD5OfMessageBody': 'abc'}
    transport.receive_message.return_value = {'Messages': []}
    transport.get_queue_url.return_value = {'QueueUrl': QUEUE_URL}
    transport.get_queue_attributes.return_value = {'Attributes': {'ApproximateNumberOfMessages': '0'}}
    transport.delete_message.return_value = {}
    return transport


@pytest.fixture
def sns_transport(fake_session):
    """AsyncMock standing in for the aioboto3 SNS client."""
    transport = fake_session.transports['sns']
    transport.publish.return_value = {'MessageId': 'pub-1'}
    transport.get_topic_attributes.return_value = {'Attributes': {'TopicArn': TOPIC_ARN}}
    return transport


@pytest.fixture
def sqs_client(fake_session, test_settings, sqs_transport):
    return SQSClient(session=fake_session, settings=test_settings)


@pytest.fixture
def sns_client(fake_session, test_settings, sns_transport):
    return SNSClient(session=fake_session, settings=test_settings)
