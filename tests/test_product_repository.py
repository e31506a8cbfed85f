import uuid

import pytest

from taverne.aggregate import Product, new_product
from taverne.product_repository import (
    MemoryProductRepository,
    ProductAlreadyExistsError,
    ProductNotFoundError,
)


@pytest.fixture
def beer():
    return new_product("Beer", "Good for your health", 1.99)


def test_add(beer):
    repo = MemoryProductRepository()
    repo.add(beer)
    assert len(repo) == 1


def test_get_existing(beer):
    repo = MemoryProductRepository()
    repo.add(beer)
    assert len(repo) == 1
    assert repo.get_by_id(beer.id) is beer


def test_get_non_existing(beer):
    repo = MemoryProductRepository()
    repo.add(beer)
    with pytest.raises(ProductNotFoundError):
        repo.get_by_id(uuid.uuid4())


def test_delete(beer):
    repo = MemoryProductRepository()
    repo.add(beer)
    assert len(repo) == 1
    repo.delete(beer.id)
    assert len(repo) == 0


def test_delete_missing_raises():
    repo = MemoryProductRepository()
    with pytest.raises(ProductNotFoundError):
        repo.delete(uuid.uuid4())


def test_add_duplicate_raises(beer):
    repo = MemoryProductRepository()
    repo.add(beer)
    with pytest.raises(ProductAlreadyExistsError):
        repo.add(beer)
    assert len(repo) == 1


def test_update_replaces(beer):
    repo = MemoryProductRepository()
    repo.add(beer)
    repo.update(Product(item=beer.item, price=2.49, quantity=5))
    stored = repo.get_by_id(beer.id)
    assert stored.price == 2.49
    assert stored.quantity == 5


def test_update_missing_raises(beer):
    repo = MemoryProductRepository()
    with pytest.raises(ProductNotFoundError):
        repo.update(beer)


def test_get_all(beer):
    repo = MemoryProductRepository()
    wine = new_product("Wine", "Healthy Snacks", 0.99)
    repo.add(beer)
    repo.add(wine)
    ids = {p.id for p in repo.get_all()}
    assert ids == {beer.id, wine.id}


def test_get_all_empty():
    assert MemoryProductRepository().get_all() == []