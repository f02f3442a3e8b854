"""Domain exceptions. Each carries the HTTP status and the public message sent to clients."""


class FeedError(Exception):
    """Base error rendered as ``{"error": message}`` with ``status_code``."""

    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: str | None = None, status_code: int | None = None) -> None:
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class UserNotFound(FeedError):
    """Referenced user does not exist."""

    status_code = 404
    message = "User not found"


class ConstraintViolation(FeedError):
    """A unique key is already taken."""

    status_code = 409
    message = "User already exists"


class InvalidAmount(FeedError):
    """An amount is not a non-negative number."""

    status_code = 422
    message = "Invalid amount"


class InternalError(FeedError):
    """Anything unexpected. The cause is logged, never returned."""


class UpstreamError(FeedError):
    """A third-party API call failed; status follows the upstream failure."""

    status_code = 502
    message = "Upstream API error"
