"""The tavern, which takes orders from customers."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from taverne.order import OrderService

logger = logging.getLogger(__name__)

TavernConfiguration = Callable[["Tavern"], None]


@dataclass
class Tavern:
    """A tavern serving orders through its order service."""

    order_service: OrderService | None = None
    billing_service: Any = None

    def order(self, customer_id: uuid.UUID, product_ids: Iterable[uuid.UUID]) -> None:
        """Place an order for a customer and bill them."""
        if self.order_service is None:
            raise RuntimeError("no order service configured")
        price = self.order_service.create_order(customer_id, product_ids)
        logger.info("Bill the Customer: %0.0f", price)


def new_tavern(*configurations: TavernConfiguration) -> Tavern:
    """Build a tavern, applying each configuration in order."""
    tavern = Tavern()
    for configure in configurations:
        configure(tavern)
    return tavern


def with_order_service(order_service: OrderService) -> TavernConfiguration:
    """Configuration that uses the given order service."""

    def configure(tavern: Tavern) -> None:
        tavern.order_service = order_service

    return configure