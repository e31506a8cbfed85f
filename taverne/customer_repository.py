"""Customer repository interface and its in-memory implementation."""

from __future__ import annotations

import threading
import uuid
from abc import ABC, abstractmethod

from taverne.aggregate import Customer


class CustomerRepositoryError(Exception):
    """Base class for customer repository errors."""


class CustomerNotFoundError(CustomerRepositoryError, LookupError):
    """Raised when a customer is not in the repository."""

    def __init__(self, message: str = "the customer was not found in the repository") -> None:
        super().__init__(message)


class FailedToAddCustomerError(CustomerRepositoryError):
    """Raised when a customer cannot be added."""

    def __init__(self, message: str = "failed to add the customer to the repository") -> None:
        super().__init__(message)


class UpdateCustomerError(CustomerRepositoryError):
    """Raised when a customer cannot be updated."""

    def __init__(self, message: str = "failed to update the customer in the repository") -> None:
        super().__init__(message)


class CustomerRepository(ABC):
    """What every customer repository must be able to do."""

    @abstractmethod
    def get(self, customer_id: uuid.UUID) -> Customer:
        """Return the customer with the given id."""

    @abstractmethod
    def add(self, customer: Customer) -> None:
        """Store a new customer."""

    @abstractmethod
    def update(self, customer: Customer) -> None:
        """Replace an existing customer."""


class MemoryCustomerRepository(CustomerRepository):
    """Customer repository kept in a dictionary."""

    def __init__(self) -> None:
        self._customers: dict[uuid.UUID, Customer] = {}
        self._lock = threading.Lock()

    def get(self, customer_id: uuid.UUID) -> Customer:
        with self._lock:
            try:
                return self._customers[customer_id]
            except KeyError:
                raise CustomerNotFoundError() from None

    def add(self, customer: Customer) -> None:
        with self._lock:
            if customer.id in self._customers:
                raise FailedToAddCustomerError(
                    "customer already exists: failed to add the customer to the repository"
                )
            self._customers[customer.id] = customer

    def update(self, customer: Customer) -> None:
        with self._lock:
            if customer.id not in self._customers:
                raise UpdateCustomerError(
                    "customer does not exist: failed to update the customer in the repository"
                )
            self._customers[customer.id] = customer

    def __len__(self) -> int:
        return len(self._customers)