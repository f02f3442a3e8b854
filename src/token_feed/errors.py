"""Mapping of store and provider exceptions to HTTP responses."""
import asyncio
import logging
from dataclasses import dataclass

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from token_feed.exceptions import FeedError, InternalError, UpstreamError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FeedErrorMapper:
    """Maps exceptions raised under a route to (status_code, message).

    Domain errors keep their own status and message. Upstream httpx failures
    are labelled with ``api_name``. Everything else becomes a generic 500.
    """

    resource_name: str = "Resource"
    api_name: str = "API"

    def to_http(self, exc: Exception, symbol: str | None = None) -> tuple[int, str]:
        """Map an exception to (status_code, message).

        Args:
            exc: The exception raised by the service or provider.
            symbol: Optional identifier (e.g. a mint) to include in 404 messages.
        """
        if isinstance(exc, FeedError):
            return (exc.status_code, exc.message)
        if isinstance(exc, httpx.HTTPStatusError):
            status = exc.response.status_code
            if status == 404:
                detail = (
                    f"{self.resource_name} not found"
                    if symbol is None
                    else f"{self.resource_name} '{symbol}' not found"
                )
                return (404, detail)
            if status >= 500:
                return (502, f"{self.api_name} error")
            return (status, f"{self.api_name} error")
        if isinstance(exc, (httpx.TimeoutException, asyncio.TimeoutError, TimeoutError)):
            detail = "Request timed out"
            if symbol is not None:
                detail = f"Request to {self.api_name} timed out for '{symbol}'"
            return (504, detail)
        if isinstance(exc, httpx.RequestError):
            return (502, f"{self.api_name} unreachable")
        return (500, InternalError.message)

    def raise_http(self, exc: Exception, context: str, symbol: str | None = None) -> None:
        """Re-raise ``exc`` as a FeedError. Never returns.

        Unexpected exceptions are logged with their traceback under ``context``;
        the caller only sees the generic message.
        """
        if isinstance(exc, FeedError):
            raise exc
        status_code, message = self.to_http(exc, symbol=symbol)
        if status_code == 500:
            logger.exception("%s: %s", context, exc)
            raise InternalError() from exc
        logger.warning("%s: %s", context, exc)
        raise UpstreamError(message, status_code=status_code) from exc


async def feed_error_handler(_: Request, exc: FeedError) -> JSONResponse:
    """Render a FeedError as ``{"error": message}``."""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort for exceptions no route mapped: log the cause, return the generic 500."""
    logger.error(
        "Unhandled error on %s %s: %s", request.method, request.url.path, exc, exc_info=exc
    )
    return JSONResponse(status_code=500, content={"error": InternalError.message})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(FeedError, feed_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
