"""
Module: base.py
Description: Shared plumbing for the SNS and SQS clients.

Holds the aioboto3 session and the client's default configuration. The
configuration is an immutable ClientState kept behind a lock; setters
swap in a new value and every call reads one snapshot up front.
"""

import asyncio
import threading
from typing import Any, Dict, Optional

from aioboto3 import Session
from botocore.exceptions import BotoCoreError, ClientError

from .config.aws import new_session
from .config.settings import Settings
from .models.state import ClientState
from .utils.logger import get_logger
from .utils.timeout import call_with_timeout

logger = get_logger(__name__)


class BaseMessagingClient:
    """
    Base class for clients over one AWS messaging service.

    Attributes:
        service_name: boto service name ('sns' or 'sqs')
        settings: Library settings in effect for this client
        session: aioboto3 session used to open service clients
    """

    service_name = ""

    def __init__(
        self,
        session: Optional[Session] = None,
        settings: Optional[Settings] = None,
        state: Optional[ClientState] = None
    ):
        """
        Initialize the client.

        Args:
            session: aioboto3 session; one is created for the configured region if omitted
            settings: Library settings; loaded from the environment if omitted
            state: Initial defaults; seeded from settings if omitted
        """
        self.settings = settings or Settings()
        self.session = session or new_session(self.settings.aws_region)
        self._state_lock = threading.Lock()
        self._state = state or ClientState.from_settings(self.settings)

        logger.info(
            "Messaging client initialized",
            service=self.service_name,
            region=self.settings.aws_region,
            endpoint_url=self.settings.endpoint_url,
            default_timeout=self._state.default_timeout,
            append_attributes=self._state.append_attributes
        )

    @classmethod
    def with_region(cls, region: str, settings: Optional[Settings] = None):
        """Create a client whose session targets the given region."""
        return cls(session=new_session(region), settings=settings)

    @property
    def state(self) -> ClientState:
        """Current defaults snapshot."""
        with self._state_lock:
            return self._state

    def _update_state(self, **changes: Any) -> None:
        with self._state_lock:
            self._state = self._state.model_copy(update=changes)

        logger.debug(
            "Client defaults updated",
            service=self.service_name,
            fields=sorted(changes)
        )

    def set_default_timeout(self, timeout: Optional[float]) -> None:
        """Set the timeout applied when no option carries one; None or 0 disables it."""
        if timeout is not None and timeout < 0:
            raise ValueError("timeout must be a non-negative number of seconds")
        self._update_state(default_timeout=timeout)

    def set_append_attributes(self, enabled: bool) -> None:
        """Toggle append mode for collection-valued options."""
        self._update_state(append_attributes=bool(enabled))

    def enable_append_attributes(self) -> None:
        """Turn on append mode for collection-valued options."""
        self.set_append_attributes(True)

    def _client_kwargs(self) -> Dict[str, Any]:
        kwargs = {}
        if self.settings.endpoint_url:
            kwargs['endpoint_url'] = self.settings.endpoint_url
        return kwargs

    def _service_client(self):
        """Async context manager yielding the aioboto3 service client."""
        return self.session.client(self.service_name, **self._client_kwargs())

    async def _call(
        self,
        operation: str,
        request: Dict[str, Any],
        timeout: Optional[float],
        **context: Any
    ) -> Dict[str, Any]:
        """
        Invoke one service operation inside a timeout scope.

        Transport errors are logged and re-raised unchanged.

        Args:
            operation: boto operation method name (e.g. 'send_message')
            request: Keyword parameters for the operation
            timeout: Seconds, or None for no deadline
            **context: Extra fields for log entries

        Returns:
            Raw operation response

        Raises:
            ClientError: If the service rejects the request
            BotoCoreError: If the request could not be made
            asyncio.TimeoutError: If the timeout expires
        """
        logger.debug(
            "Calling AWS operation",
            service=self.service_name,
            operation=operation,
            timeout=timeout,
            **context
        )

        async def round_trip():
            # Client setup and teardown count against the deadline
            async with self._service_client() as client:
                return await getattr(client, operation)(**request)

        try:
            return await call_with_timeout(round_trip, timeout)

        except ClientError as e:
            error = e.response.get('Error', {})
            logger.error(
                "AWS operation failed",
                service=self.service_name,
                operation=operation,
                error_code=error.get('Code'),
                error_message=error.get('Message'),
                **context
            )
            raise

        except asyncio.TimeoutError:
            logger.warning(
                "AWS operation timed out",
                service=self.service_name,
                operation=operation,
                timeout=timeout,
                **context
            )
            raise

        except BotoCoreError as e:
            logger.error(
                "AWS transport error",
                service=self.service_name,
                operation=operation,
                error=str(e),
                error_type=type(e).__name__,
                **context
            )
            raise
