"""
Module: aws.py
Description: aioboto3 session construction.

Credentials come from the standard boto chain (environment, shared
config, instance role); only the region is chosen here.
"""

from typing import Optional

from aioboto3 import Session

from ..utils.logger import get_logger

logger = get_logger(__name__)


def new_session(region: Optional[str] = None) -> Session:
    """
    Create an aioboto3 session for the given region.

    Args:
        region: AWS region name; None defers to the boto configuration chain

    Returns:
        aioboto3 Session
    """
    session = Session(region_name=region)

    logger.debug("AWS session created", region=region)

    return session
