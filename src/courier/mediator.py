"""In-process mediator routing requests to their handlers."""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import TypeAlias

from .errors import DuplicateHandlerError, InvalidHandlerResponse, NoHandlerForRequest
from .requests import Request
from .response import Response

logger = logging.getLogger(__name__)

Handler: TypeAlias = Callable[..., Response | Awaitable[Response]]


class Mediator:
    """Route each request to the single handler registered for its type.

    The mediator decouples callers from handlers: a caller builds a request,
    sends it, and gets back the handler's `Response`. Lookup is by the exact
    type of the request, so a subclass of a registered request needs its own
    handler.

    Args:
        handlers: A mapping of request types to their handlers. Handlers are
            callables accepting the request as their single argument.
            Collaborators (repositories, loggers, ...) should be bound
            beforehand, see `courier.bootstrap.build_mediator`.

    Note:
        Operation failures travel back as failed responses. Exceptions raised
        by a handler are logged and re-raised unchanged.
    """

    def __init__(
        self, handlers: Mapping[type[Request], Handler] | None = None
    ) -> None:
        self._handlers: dict[type[Request], Handler] = dict(handlers or {})

    @property
    def request_types(self) -> tuple[type[Request], ...]:
        """Request types with a registered handler, in registration order."""
        return tuple(self._handlers)

    def handles(self, request_type: type[Request]) -> bool:
        """Return True if a handler is registered for ``request_type``."""
        return request_type in self._handlers

    def register(self, request_type: type[Request], handler: Handler) -> None:
        """Register ``handler`` for ``request_type``.

        Raises:
            DuplicateHandlerError: If the type already has a handler.
        """
        if request_type in self._handlers:
            raise DuplicateHandlerError(request_type)
        logger.debug(
            "Registering handler %s for request %s",
            self._get_handler_name(handler),
            request_type.__name__,
        )
        self._handlers[request_type] = handler

    def send(self, request: Request) -> Response:
        """Dispatch a request to its handler and return the handler's response.

        Args:
            request: The request to handle.

        Raises:
            NoHandlerForRequest: If no handler is found for the request type.
            InvalidHandlerResponse: If the handler does not return a Response.
                Async handlers must be dispatched with `send_async`.
            Exception: If the handler raises an exception.
        """
        handler = self._lookup(request)
        handler_name = self._get_handler_name(handler)
        logger.debug("Handling request %s with handler %s", request, handler_name)
        try:
            response = handler(request)
        except Exception:  # pylint: disable=broad-except
            logger.exception(
                "Exception handling request %s with handler %s", request, handler_name
            )
            raise

        if inspect.isawaitable(response):
            if inspect.iscoroutine(response):
                response.close()
            logger.error("Async handler %s dispatched synchronously", handler_name)
            raise InvalidHandlerResponse(
                handler_name, response, hint="use send_async for async handlers"
            )
        return self._checked(request, response, handler_name)

    async def send_async(self, request: Request) -> Response:
        """Dispatch a request to a sync or async handler and await its response.

        Cancelling the calling task cancels the handler; `asyncio.CancelledError`
        propagates to the caller.

        Raises:
            NoHandlerForRequest: If no handler is found for the request type.
            InvalidHandlerResponse: If the handler does not return a Response.
            Exception: If the handler raises an exception.
        """
        handler = self._lookup(request)
        handler_name = self._get_handler_name(handler)
        logger.debug("Handling request %s with handler %s", request, handler_name)
        try:
            response = handler(request)
            if inspect.isawaitable(response):
                response = await response
        except asyncio.CancelledError:
            logger.debug(
                "Cancelled handling request %s with handler %s", request, handler_name
            )
            raise
        except Exception:  # pylint: disable=broad-except
            logger.exception(
                "Exception handling request %s with handler %s", request, handler_name
            )
            raise
        return self._checked(request, response, handler_name)

    def _lookup(self, request: Request) -> Handler:
        if (handler := self._handlers.get(type(request))) is not None:
            return handler
        logger.error("No handler found for request %s", type(request).__name__)
        raise NoHandlerForRequest(request)

    @staticmethod
    def _checked(request: Request, response: object, handler_name: str) -> Response:
        if not isinstance(response, Response):
            logger.error(
                "Handler %s returned %s instead of a Response",
                handler_name,
                type(response).__name__,
            )
            raise InvalidHandlerResponse(handler_name, response)
        if not response.success:
            logger.info(
                "Request %s failed: %s", type(request).__name__, response.message
            )
        return response

    @staticmethod
    def _get_handler_name(fn: Callable[..., object]) -> str:
        if inspect.ismethod(fn):
            return fn.__qualname__
        if hasattr(fn, "__name__"):
            return fn.__name__
        if hasattr(fn, "func") and hasattr(fn.func, "__name__"):
            return fn.func.__name__
        return repr(fn)
