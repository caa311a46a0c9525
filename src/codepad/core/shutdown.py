"""In-flight request accounting for graceful shutdown."""

import asyncio
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from src.codepad.core.logging import get_logger

logger = get_logger(__name__)


class RequestTracker:
    """Counts requests that are still being served.

    A request stays in flight until its response body has been fully sent, so a
    zip download that is still streaming delays shutdown like any other request.
    One tracker is created per application (``app.state.request_tracker``).
    """

    def __init__(self) -> None:
        self._in_flight = 0
        self._shutting_down = False
        self._drained = asyncio.Event()
        self._drained.set()

    @property
    def is_shutting_down(self) -> bool:
        return self._shutting_down

    @property
    def in_flight_count(self) -> int:
        return self._in_flight

    @asynccontextmanager
    async def track_request(self) -> AsyncGenerator[None]:
        """Count the enclosed block as one in-flight request."""
        self._in_flight += 1
        self._drained.clear()
        try:
            yield
        finally:
            self._in_flight -= 1
            if self._in_flight == 0:
                self._drained.set()
                if self._shutting_down:
                    logger.info("All requests drained")

    async def start_shutdown(self) -> None:
        """Enter shutdown mode; /health starts reporting ``draining``."""
        self._shutting_down = True
        logger.info("Request tracker entering shutdown mode", in_flight=self._in_flight)

    async def wait_for_drain(self, timeout: float) -> bool:
        """Wait up to ``timeout`` seconds for in-flight requests to finish.

        Returns:
            True if every request finished in time.
        """
        try:
            await asyncio.wait_for(self._drained.wait(), timeout=timeout)
        except TimeoutError:
            logger.warning(
                "Shutdown grace period elapsed",
                timeout=timeout,
                in_flight=self._in_flight,
            )
            return False
        return True
