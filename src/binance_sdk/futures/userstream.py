"""
userstream.py – Listen-key lifecycle for the USD-M futures user data stream.

A listen key is created with ``start()``, must be refreshed with
``keep_alive()`` at least every 60 minutes, and is invalidated with
``close()``.  Ordering of these calls is the caller's responsibility.
"""

from __future__ import annotations

import logging

from ..api import Futures
from ..rest import AsyncClient
from ..types import Empty, ListenKey

logger = logging.getLogger(__name__)


class FuturesUserStream:
    def __init__(self, client: AsyncClient) -> None:
        self.client = client

    async def start(self) -> str:
        """Create a listen key and return it."""
        key: ListenKey = await self.client.post(Futures.USER_DATA_STREAM, response_type=ListenKey)
        logger.info("User data stream started")
        return key.listen_key

    async def keep_alive(self, listen_key: str) -> None:
        await self.client.put(Futures.USER_DATA_STREAM, listen_key, response_type=Empty)

    async def close(self, listen_key: str) -> None:
        await self.client.delete(Futures.USER_DATA_STREAM, listen_key, response_type=Empty)
        logger.info("User data stream closed")
