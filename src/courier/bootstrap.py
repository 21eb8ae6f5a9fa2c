"""Bootstrap (composition root) for a courier mediator.

Assembles a `Mediator` at start-up: builds feature handlers, binds
collaborators (repositories, loggers, clients) into plain function handlers,
and registers everything under its request type.

No business rules live here; this is assembly only.
"""

from __future__ import annotations

import functools
import inspect
import logging
from collections.abc import Callable, Iterable, Mapping
from typing import TYPE_CHECKING

from .features import build_handler, dependencies_for, feature_parts
from .mediator import Mediator

if TYPE_CHECKING:
    from .mediator import Handler
    from .requests import Request

logger = logging.getLogger(__name__)


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Inject dependencies into a handler function based on its parameters.

    The first parameter receives the request; the others are matched by name
    against ``dependencies``. A ``logger`` parameter with no matching
    dependency gets the logger of the handler's module.
    """
    # the first parameter is the request, never a dependency
    params = dict(list(inspect.signature(handler).parameters.items())[1:])
    deps = dependencies_for(
        params, dependencies, getattr(handler, "__module__", None) or __name__
    )
    if not deps:
        return handler
    return functools.partial(handler, **deps)


def build_mediator(
    *,
    features: Iterable[type] = (),
    handlers: Mapping[type[Request], Callable] | None = None,
    dependencies: Mapping[str, object] | None = None,
) -> Mediator:
    """Build a mediator with injected dependencies.

    Args:
        features: Feature classes, each grouping a request type and a Handler.
        handlers: Plain function handlers keyed by request type.
        dependencies: Collaborators available to handlers, by parameter name.

    Raises:
        DuplicateHandlerError: If two handlers claim the same request type.
        InvalidFeatureError: If a feature is malformed or misses a dependency.
    """
    dependencies = dependencies or {}
    mediator = Mediator()

    for feature in features:
        request_type = feature_parts(feature).request_type
        mediator.register(request_type, build_handler(feature, dependencies))

    for request_type, handler in (handlers or {}).items():
        injected: Handler = inject_dependencies(handler, dependencies)
        mediator.register(request_type, injected)

    logger.debug(
        "Built mediator handling %s",
        [request_type.__name__ for request_type in mediator.request_types],
    )
    return mediator
