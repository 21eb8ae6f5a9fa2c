"""Unit tests for courier.requests."""

import dataclasses
from dataclasses import dataclass

import pytest

from courier.requests import Command, Query, Request, is_command, is_query

# pylint: disable=too-few-public-methods


@dataclass(frozen=True)
class PlaceOrder(Command):
    """A fake command."""

    customer_id: int
    items: tuple[str, ...] = ()


@dataclass(frozen=True)
class ListOrders(Query):
    """A fake query."""

    customer_id: int


def test_commands_and_queries_are_requests():
    """Both markers share the Request base."""
    assert isinstance(PlaceOrder(1), Request)
    assert isinstance(ListOrders(1), Request)


def test_is_command_and_is_query():
    """The helpers tell commands from queries."""
    assert is_command(PlaceOrder(1))
    assert not is_query(PlaceOrder(1))
    assert is_query(ListOrders(1))
    assert not is_command(ListOrders(1))


def test_requests_are_frozen():
    """Requests are immutable data holders."""
    cmd = PlaceOrder(1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        cmd.customer_id = 2  # type: ignore[misc]


def test_requests_compare_by_value():
    """Equal fields mean equal requests; they can key dictionaries."""
    assert PlaceOrder(1, ("a",)) == PlaceOrder(1, ("a",))
    assert len({ListOrders(1), ListOrders(1), ListOrders(2)}) == 2
