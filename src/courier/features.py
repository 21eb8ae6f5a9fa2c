"""Features: one request type grouped with its handler.

A feature is a plain class used as a namespace. It holds exactly one nested
request class (a `Command` or `Query` subclass) and a nested ``Handler`` class
with a ``handle`` method:

```py
class GetOrders:
    @dataclass(frozen=True)
    class Query(courier.Query):
        customer_id: int

    class Handler:
        def __init__(self, orders: OrderRepository, logger: logging.Logger):
            self.orders = orders
            self.logger = logger

        def handle(self, query: "GetOrders.Query") -> ResultResponse[list[Order]]:
            return success().with_results(self.orders.for_customer(query.customer_id))
```

The handler's constructor parameters are filled by name from the
dependencies given to `build_handler` (or `courier.bootstrap.build_mediator`).
A ``logger`` parameter with no matching dependency receives a logger named
after the feature.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from .errors import InvalidFeatureError
from .requests import Command, Query, Request
from .response import Response

logger = logging.getLogger(__name__)

HANDLER_ATTR = "Handler"
HANDLE_METHOD = "handle"
LOGGER_PARAM = "logger"

_MARKERS = (Request, Command, Query)


@dataclass(frozen=True, slots=True)
class FeatureParts:
    """The request type and handler class grouped by a feature."""

    request_type: type[Request]
    handler_type: type


def feature_parts(feature: type) -> FeatureParts:
    """Find the request type and handler class nested in ``feature``.

    Raises:
        InvalidFeatureError: If the feature does not hold exactly one request
            class, or has no ``Handler`` class with a callable ``handle``.
    """
    request_types = [
        value
        for value in vars(feature).values()
        if isinstance(value, type)
        and issubclass(value, Request)
        and value not in _MARKERS
    ]
    if not request_types:
        raise InvalidFeatureError(feature, "no nested request class")
    if len(request_types) > 1:
        names = ", ".join(sorted(t.__name__ for t in request_types))
        raise InvalidFeatureError(feature, f"more than one request class ({names})")

    handler_type = vars(feature).get(HANDLER_ATTR)
    if not isinstance(handler_type, type):
        raise InvalidFeatureError(feature, f"no nested {HANDLER_ATTR} class")
    if not callable(getattr(handler_type, HANDLE_METHOD, None)):
        raise InvalidFeatureError(
            feature, f"{HANDLER_ATTR} has no {HANDLE_METHOD}() method"
        )

    return FeatureParts(request_type=request_types[0], handler_type=handler_type)


def dependencies_for(
    parameters: Mapping[str, inspect.Parameter],
    dependencies: Mapping[str, object],
    logger_name: str,
) -> dict[str, Any]:
    """Select the dependencies matching ``parameters`` by name.

    A ``logger`` parameter missing from ``dependencies`` gets
    ``logging.getLogger(logger_name)``.
    """
    deps: dict[str, Any] = {
        name: dependency
        for name, dependency in dependencies.items()
        if name in parameters
    }
    if LOGGER_PARAM in parameters and LOGGER_PARAM not in deps:
        deps[LOGGER_PARAM] = logging.getLogger(logger_name)
    return deps


def build_handler(
    feature: type, dependencies: Mapping[str, object] | None = None
) -> Callable[[Request], Response]:
    """Instantiate the feature's handler and return its bound ``handle`` method.

    Args:
        feature: The feature class.
        dependencies: Collaborators available for injection, by parameter name.

    Raises:
        InvalidFeatureError: If the feature is malformed or the handler needs a
            dependency that is not available.
    """
    parts = feature_parts(feature)
    parameters = inspect.signature(parts.handler_type).parameters
    deps = dependencies_for(
        parameters,
        dependencies or {},
        f"{feature.__module__}.{feature.__qualname__}",
    )

    missing = [
        name
        for name, param in parameters.items()
        if name not in deps
        and param.default is inspect.Parameter.empty
        and param.kind
        not in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
    ]
    if missing:
        raise InvalidFeatureError(
            feature, f"missing dependencies: {', '.join(sorted(missing))}"
        )

    instance = parts.handler_type(**deps)
    logger.debug(
        "Built handler %s for request %s",
        parts.handler_type.__qualname__,
        parts.request_type.__name__,
    )
    return getattr(instance, HANDLE_METHOD)
