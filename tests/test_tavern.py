import logging
import uuid

import pytest

from taverne.aggregate import new_customer, new_product
from taverne.customer_repository import CustomerNotFoundError
from taverne.order import (
    new_order_service,
    with_memory_customer_repository,
    with_memory_product_repository,
)
from taverne.product_repository import ProductNotFoundError
from taverne.tavern import Tavern, new_tavern, with_order_service


@pytest.fixture
def products():
    return [
        new_product("Beer", "Healthy Beverage", 1.99),
        new_product("Peenuts", "Healthy Snack", 0.99),
        new_product("Wine", "Healthy Snacks", 0.99),
    ]


@pytest.fixture
def order_service(products):
    return new_order_service(
        with_memory_customer_repository(),
        with_memory_product_repository(products),
    )


def test_tavern_order_bills_customer(order_service, products, caplog):
    tavern = new_tavern(with_order_service(order_service))
    customer = new_customer("Donald")
    order_service.customers.add(customer)

    caplog.set_level(logging.INFO, logger="taverne.tavern")
    result = tavern.order(customer.id, [products[0].id])

    assert result is None
    assert "Bill the Customer: 2" in caplog.messages


def test_new_tavern_uses_order_service(order_service):
    tavern = new_tavern(with_order_service(order_service))
    assert tavern.order_service is order_service
    assert tavern.billing_service is None


def test_tavern_order_unknown_customer(order_service, products):
    tavern = new_tavern(with_order_service(order_service))
    with pytest.raises(CustomerNotFoundError):
        tavern.order(uuid.uuid4(), [products[0].id])


def test_tavern_order_unknown_product(order_service):
    tavern = new_tavern(with_order_service(order_service))
    customer = new_customer("Donald")
    order_service.customers.add(customer)
    with pytest.raises(ProductNotFoundError):
        tavern.order(customer.id, [uuid.uuid4()])


def test_tavern_without_order_service_raises():
    with pytest.raises(RuntimeError):
        Tavern().order(uuid.uuid4(), [])


def test_new_tavern_without_configuration():
    assert new_tavern() == Tavern()