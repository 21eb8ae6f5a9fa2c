"""Fixtures wiring the order slice into a mediator."""

from __future__ import annotations

import pytest

from courier import Mediator, build_mediator

from .orders import FEATURES, HANDLERS, InMemoryOrderRepository, Order

# pylint: disable=redefined-outer-name


@pytest.fixture
def orders() -> InMemoryOrderRepository:
    """A repository seeded with three orders for two customers."""
    repo = InMemoryOrderRepository()
    repo.add(Order(order_id=1, customer_id=10))
    repo.add(Order(order_id=2, customer_id=10, status="shipped"))
    repo.add(Order(order_id=3, customer_id=20))
    return repo


@pytest.fixture
def mediator(orders: InMemoryOrderRepository) -> Mediator:
    """A mediator handling every request of the order slice."""
    return build_mediator(
        features=FEATURES, handlers=HANDLERS, dependencies={"orders": orders}
    )
