"""Product repository interface and its in-memory implementation."""

from __future__ import annotations

import threading
import uuid
from abc import ABC, abstractmethod

from taverne.aggregate import Product


class ProductRepositoryError(Exception):
    """Base class for product repository errors."""


class ProductNotFoundError(ProductRepositoryError, LookupError):
    """Raised when a product is not in the repository."""

    def __init__(self, message: str = "the product was not found") -> None:
        super().__init__(message)


class ProductAlreadyExistsError(ProductRepositoryError):
    """Raised when adding a product whose id is already stored."""

    def __init__(self, message: str = "the product already exists") -> None:
        super().__init__(message)


class ProductRepository(ABC):
    """What every product repository must be able to do."""

    @abstractmethod
    def get_all(self) -> list[Product]:
        """Return every stored product."""

    @abstractmethod
    def get_by_id(self, product_id: uuid.UUID) -> Product:
        """Return the product with the given id."""

    @abstractmethod
    def add(self, product: Product) -> None:
        """Store a new product."""

    @abstractmethod
    def update(self, product: Product) -> None:
        """Replace an existing product."""

    @abstractmethod
    def delete(self, product_id: uuid.UUID) -> None:
        """Remove a product."""


class MemoryProductRepository(ProductRepository):
    """Product repository kept in a dictionary."""

    def __init__(self) -> None:
        self._products: dict[uuid.UUID, Product] = {}
        self._lock = threading.Lock()

    def get_all(self) -> list[Product]:
        with self._lock:
            return list(self._products.values())

    def get_by_id(self, product_id: uuid.UUID) -> Product:
        with self._lock:
            try:
                return self._products[product_id]
            except KeyError:
                raise ProductNotFoundError() from None

    def add(self, product: Product) -> None:
        with self._lock:
            if product.id in self._products:
                raise ProductAlreadyExistsError()
            self._products[product.id] = product

    def update(self, product: Product) -> None:
        with self._lock:
            if product.id not in self._products:
                raise ProductNotFoundError()
            self._products[product.id] = product

    def delete(self, product_id: uuid.UUID) -> None:
        with self._lock:
            try:
                del self._products[product_id]
            except KeyError:
                raise ProductNotFoundError() from None

    def __len__(self) -> int:
        return len(self._products)