"""Request context management using contextvars.

Provides async-safe storage for request-scoped data (the request ID) so log
records emitted anywhere during a request can carry it.

Usage:
    token = set_request_id("abc123")
    request_id = get_request_id()
    reset_request_id(token)
"""

from contextvars import ContextVar, Token

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)


def set_request_id(request_id: str | None) -> Token[str | None]:
    """Set the request ID for the current async task; return a reset token."""
    return _request_id.set(request_id)


def get_request_id() -> str | None:
    """Return the request ID for the current async task, or None outside a request."""
    return _request_id.get()


def reset_request_id(token: Token[str | None]) -> None:
    """Restore the request ID that was active before set_request_id."""
    _request_id.reset(token)
