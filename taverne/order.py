"""Order service that ties customer and product repositories together."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from taverne.aggregate import Product
from taverne.customer_repository import CustomerRepository, MemoryCustomerRepository
from taverne.product_repository import MemoryProductRepository, ProductRepository

logger = logging.getLogger(__name__)

OrderConfiguration = Callable[["OrderService"], None]


@dataclass
class OrderService:
    """Creates orders by looking up customers and products."""

    customers: CustomerRepository | None = None
    products: ProductRepository | None = None

    def create_order(self, customer_id: uuid.UUID, product_ids: Iterable[uuid.UUID]) -> float:
        """Order the given products for a customer and return the total price."""
        if self.customers is None:
            raise RuntimeError("no customer repository configured")
        if self.products is None:
            raise RuntimeError("no product repository configured")

        customer = self.customers.get(customer_id)
        products = [self.products.get_by_id(product_id) for product_id in product_ids]
        price = sum(product.price for product in products)

        logger.info("Customer: %s has ordered %d products", customer.id, len(products))
        return float(price)


def new_order_service(*configurations: OrderConfiguration) -> OrderService:
    """Build an order service, applying each configuration in order."""
    service = OrderService()
    for configure in configurations:
        configure(service)
    return service


def with_customer_repository(repository: CustomerRepository) -> OrderConfiguration:
    """Configuration that uses the given customer repository."""

    def configure(service: OrderService) -> None:
        service.customers = repository

    return configure


def with_memory_customer_repository() -> OrderConfiguration:
    """Configuration that uses a fresh in-memory customer repository."""
    return with_customer_repository(MemoryCustomerRepository())


def with_memory_product_repository(products: Iterable[Product]) -> OrderConfiguration:
    """Configuration that uses an in-memory product repository holding ``products``."""

    def configure(service: OrderService) -> None:
        repository = MemoryProductRepository()
        for product in products:
            repository.add(product)
        service.products = repository

    return configure