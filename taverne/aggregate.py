"""Customer and product aggregates."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field

from taverne.entity import Item, Person
from taverne.valueobject import Transaction


class InvalidPersonError(ValueError):
    """Raised when a customer is created without a valid person."""

    def __init__(self, message: str = "a customer has to have a valid person") -> None:
        super().__init__(message)


class MissingValuesError(ValueError):
    """Raised when a product is created without a name or description."""

    def __init__(self, message: str = "missing value") -> None:
        super().__init__(message)


@dataclass
class Customer:
    """A customer, rooted on a person whose id identifies the aggregate."""

    person: Person = field(default_factory=Person)
    products: list[Item] = field(default_factory=list)
    transactions: list[Transaction] = field(default_factory=list)

    @property
    def id(self) -> uuid.UUID:
        return self.person.id

    @id.setter
    def id(self, value: uuid.UUID) -> None:
        self.person.id = value

    @property
    def name(self) -> str:
        return self.person.name

    @name.setter
    def name(self, value: str) -> None:
        self.person.name = value


@dataclass
class Product:
    """An item combined with a price and a stock quantity."""

    item: Item
    price: float
    quantity: int = 0

    @property
    def id(self) -> uuid.UUID:
        return self.item.id


def new_customer(name: str) -> Customer:
    """Create a customer with a fresh id; the name must not be empty."""
    if not name:
        raise InvalidPersonError()
    return Customer(person=Person(id=uuid.uuid4(), name=name))


def new_product(name: str, description: str, price: float) -> Product:
    """Create a product with a fresh id; name and description are required."""
    if not name or not description:
        raise MissingValuesError()
    item = Item(id=uuid.uuid4(), name=name, description=description)
    return Product(item=item, price=price, quantity=0)