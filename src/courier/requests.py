"""Module defining request markers.

Requests are plain frozen dataclasses: they carry the input of one unit of
application logic and have no behaviour of their own. Commands change state,
queries read it.
"""

from dataclasses import dataclass

# pylint: disable=too-few-public-methods


@dataclass(frozen=True)
class Request:
    """Base class for everything sent through the mediator."""


@dataclass(frozen=True)
class Command(Request):
    """Base class for state-mutating requests."""


@dataclass(frozen=True)
class Query(Request):
    """Base class for state-reading requests."""


def is_command(request: Request) -> bool:
    """Return True if ``request`` is a command."""
    return isinstance(request, Command)


def is_query(request: Request) -> bool:
    """Return True if ``request`` is a query."""
    return isinstance(request, Query)
