"""courier

Command/query mediation for Python applications. Each request type is
handled by exactly one handler, and every handler returns a uniform
`Response`: a success flag, a message on failure, and optional results.
"""

from .bootstrap import build_mediator, inject_dependencies
from .errors import (
    CourierError,
    DuplicateHandlerError,
    InvalidFeatureError,
    InvalidHandlerResponse,
    NoHandlerForRequest,
    ResponseFailedError,
)
from .features import build_handler, feature_parts
from .mediator import Mediator
from .requests import Command, Query, Request, is_command, is_query
from .response import Response, ResultResponse, failure, success

__all__ = [
    "__version__",
    # Responses
    "Response",
    "ResultResponse",
    "failure",
    "success",
    # Requests
    "Command",
    "Query",
    "Request",
    "is_command",
    "is_query",
    # Dispatch
    "Mediator",
    "build_handler",
    "build_mediator",
    "feature_parts",
    "inject_dependencies",
    # Errors
    "CourierError",
    "DuplicateHandlerError",
    "InvalidFeatureError",
    "InvalidHandlerResponse",
    "NoHandlerForRequest",
    "ResponseFailedError",
]
__version__ = "0.1.0"
