"""Bounded store operations."""

import asyncio
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from src.codepad.core.exceptions import StoreTimeoutError


@asynccontextmanager
async def store_timeout(seconds: float) -> AsyncGenerator[None]:
    """Bound the enclosed store work to ``seconds``.

    Raises:
        StoreTimeoutError: If the deadline passes before the block finishes.
    """
    try:
        async with asyncio.timeout(seconds):
            yield
    except TimeoutError as e:
        raise StoreTimeoutError(f"Database operation exceeded {seconds:g}s") from e
