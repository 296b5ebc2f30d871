"""Request context carrying the requester's network address.

The host resolves proxies and forwarding headers to one canonical client
address and stores it here for the duration of the authentication attempt.
"""

from __future__ import annotations

from contextvars import ContextVar, Token
from dataclasses import dataclass


@dataclass(frozen=True)
class RequestContext:
    """Metadata of the HTTP request behind an authentication attempt.

    Attributes:
        ip_address: Canonical client IP address, already resolved by the host.
        request_id: Correlation ID of the request, if any.
        user_agent: Client user agent string.
    """

    ip_address: str | None = None
    request_id: str | None = None
    user_agent: str | None = None


_request_context: ContextVar[RequestContext | None] = ContextVar(
    "gateway_request_context", default=None
)


def get_request_context() -> RequestContext | None:
    """Get the current request context, or None if not set."""
    return _request_context.get()


def set_request_context(context: RequestContext) -> Token[RequestContext | None]:
    """Set the request context for the current task.

    Example:
        ```python
        token = set_request_context(RequestContext(ip_address="10.1.2.3"))
        try:
            await gate.authenticate("alice")
        finally:
            reset_request_context(token)
        ```
    """
    return _request_context.set(context)


def reset_request_context(token: Token[RequestContext | None]) -> None:
    """Restore the context that was active before ``set_request_context``."""
    _request_context.reset(token)


def get_client_ip() -> str | None:
    """Get the client IP address of the current request, or None."""
    ctx = get_request_context()
    return ctx.ip_address if ctx else None


__all__: list[str] = [
    "RequestContext",
    "get_request_context",
    "set_request_context",
    "reset_request_context",
    "get_client_ip",
]
