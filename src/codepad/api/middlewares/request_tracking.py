"""Request tracking middleware for graceful shutdown."""

from starlette.types import ASGIApp, Receive, Scope, Send

from src.codepad.core.shutdown import RequestTracker

UNTRACKED_PATHS = frozenset({"/health", "/metrics"})


class RequestTrackingMiddleware:
    """Pure ASGI middleware so streamed bodies are counted until the last chunk."""

    def __init__(self, app: ASGIApp, tracker: RequestTracker):
        self.app = app
        self.tracker = tracker

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or scope["path"] in UNTRACKED_PATHS:
            await self.app(scope, receive, send)
            return

        async with self.tracker.track_request():
            await self.app(scope, receive, send)
