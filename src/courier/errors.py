"""Courier error definitions.

Operation failures are data (see `courier.response`). The exceptions below are
for programming errors: wiring mistakes, malformed features, and handlers that
break the response contract.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from courier.requests import Request


class CourierError(Exception):
    """Base class for courier errors."""


# ============================================================================
#                           Dispatch errors
# ============================================================================


class NoHandlerForRequest(CourierError, LookupError):
    """Raised when no handler is registered for a request type."""

    def __init__(self, request: Request) -> None:
        super().__init__(f"No handler found for request {type(request).__name__}")
        self.request_type = type(request)


class DuplicateHandlerError(CourierError):
    """Raised when a second handler is registered for the same request type."""

    def __init__(self, request_type: type) -> None:
        super().__init__(
            f"A handler is already registered for request {request_type.__name__}"
        )
        self.request_type = request_type


class InvalidHandlerResponse(CourierError, TypeError):
    """Raised when a handler returns something other than a Response."""

    def __init__(self, handler_name: str, returned: object, hint: str = "") -> None:
        message = (
            f"Handler {handler_name} returned {type(returned).__name__}, "
            "expected Response"
        )
        if hint:
            message = f"{message} ({hint})"
        super().__init__(message)
        self.handler_name = handler_name
        self.returned_type = type(returned)


# ============================================================================
#                           Feature errors
# ============================================================================


class InvalidFeatureError(CourierError):
    """Raised when a feature class does not group exactly one request and a handler."""

    def __init__(self, feature: type, reason: str) -> None:
        super().__init__(f"Invalid feature {feature.__name__}: {reason}")
        self.feature = feature
        self.reason = reason


# ============================================================================
#                           Response errors
# ============================================================================


class ResponseFailedError(CourierError):
    """Raised when results are unwrapped from a failed response."""

    def __init__(self, message: str | None) -> None:
        super().__init__(message or "Response failed without a message")
        self.response_message = message


# ============================================================================
#                           Configuration errors
# ============================================================================


class InvalidLogLevelError(CourierError, ValueError):
    """Raised when a log level name or NAME=LEVEL item cannot be parsed."""
