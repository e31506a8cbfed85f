"""Domain-driven tavern: entities, aggregates, in-memory repositories and order services."""

__version__ = "0.1.0"

__all__ = [
    "aggregate",
    "customer_repository",
    "entity",
    "order",
    "product_repository",
    "tavern",
    "valueobject",
]