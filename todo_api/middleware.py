"""HTTP middleware: declarative path redirects and per-request logging."""

import logging
import re
from dataclasses import dataclass
from datetime import UTC, datetime

from fastapi import Request, Response, status
from fastapi.responses import RedirectResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

request_logger = logging.getLogger("todo_api.requests")


@dataclass(frozen=True)
class RedirectRule:
    """Redirect paths matching ``pattern`` to ``replacement`` (regex groups allowed)."""

    pattern: str
    replacement: str
    status_code: int = status.HTTP_302_FOUND

    def target(self, path: str) -> str | None:
        match = re.match(self.pattern, path)
        if match is None:
            return None
        return match.expand(self.replacement)


# Old /tasks/ URLs are kept working by redirecting clients to /todos/.
DEFAULT_REDIRECTS = (RedirectRule(r"^/tasks/(.*)$", r"/todos/\1"),)


class RedirectMiddleware(BaseHTTPMiddleware):
    """Answer requests matching a redirect rule before they reach any route."""

    def __init__(self, app: ASGIApp, rules: tuple[RedirectRule, ...] = DEFAULT_REDIRECTS) -> None:
        super().__init__(app)
        self.rules = rules

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        for rule in self.rules:
            location = rule.target(request.url.path)
            if location is None:
                continue
            if request.url.query:
                location = f"{location}?{request.url.query}"
            return RedirectResponse(location, status_code=rule.status_code)
        return await call_next(request)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log a start and a finish line around every request, even failing ones."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        method, path = request.method, request.url.path
        request_logger.info("[%s %s %s] Started.", method, path, datetime.now(UTC).isoformat())
        try:
            return await call_next(request)
        except Exception:
            request_logger.exception("Unhandled error in %s %s", method, path)
            raise
        finally:
            request_logger.info("[%s %s %s] Finished.", method, path, datetime.now(UTC).isoformat())
