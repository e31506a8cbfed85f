# taverne

A small domain-driven design toolkit that models a tavern. It provides:

- **Entities**: `Item` and `Person` dataclasses (`taverne.entity`). Both carry
  a UUID `id`, which defaults to the nil UUID.
- **Value objects**: `Transaction` (`taverne.valueobject`), a frozen dataclass
  with `amount`, `from_id`, `to_id` and `created_at`. `created_at` defaults to
  the current UTC time.
- **Aggregates**: `Customer` and `Product` (`taverne.aggregate`), made with
  `new_customer(name)` and `new_product(name, description, price)`. Each gets a
  fresh random UUID. `Customer.id` and `Customer.name` read and write the
  underlying `Person`. `Product.id` is the id of its `Item`. A new product has
  a `quantity` of 0.
- **Repositories**: the abstract `CustomerRepository` with its in-memory
  implementation `MemoryCustomerRepository` (`taverne.customer_repository`).
  The abstract `ProductRepository` with `MemoryProductRepository`
  (`taverne.product_repository`). The in-memory repositories are guarded by a
  lock and support `len()`.
- **Services**: `OrderService` (`taverne.order`) and `Tavern`
  (`taverne.tavern`). Both are built from configuration functions.

## Installation

```
pip install .
```

## Usage

```python
from taverne.aggregate import new_customer, new_product
from taverne.order import (
    new_order_service,
    with_memory_customer_repository,
    with_memory_product_repository,
)
from taverne.tavern import new_tavern, with_order_service

beer = new_product("Beer", "Healthy Beverage", 1.99)
peanuts = new_product("Peenuts", "Healthy Snack", 0.99)

order_service = new_order_service(
    with_memory_customer_repository(),
    with_memory_product_repository([beer, peanuts]),
)
tavern = new_tavern(with_order_service(order_service))

donald = new_customer("Donald")
order_service.customers.add(donald)

total = order_service.create_order(donald.id, [beer.id, peanuts.id])
tavern.order(donald.id, [beer.id])
```

`OrderService.create_order` looks up the customer and every product, and
returns the sum of the product prices. `Tavern.order` places the order through
its order service. Both log their progress through the standard `logging`
module, using the `taverne.order` and `taverne.tavern` loggers.

`new_order_service` and `new_tavern` apply their configuration functions in
the order they are given. If one of them raises, construction stops and the
exception propagates. `with_customer_repository(repository)` accepts any
`CustomerRepository`.

## Errors

Failures raise exceptions rather than returning status values:

- `InvalidPersonError` (a `ValueError`): a customer was created with an empty
  name.
- `MissingValuesError` (a `ValueError`): a product was created without a name
  or a description.
- `CustomerNotFoundError`, `FailedToAddCustomerError` (the id is already
  stored) and `UpdateCustomerError` (the id is not stored) are raised by
  customer repositories. All derive from `CustomerRepositoryError`.
- `ProductNotFoundError` and `ProductAlreadyExistsError` are raised by product
  repositories. Both derive from `ProductRepositoryError`.
- The two not-found errors also derive from `LookupError`.
- `RuntimeError` is raised by `create_order` and `order` when the service they
  need has not been configured.

## What it does not do

- Repositories live in memory only. Nothing is stored on disk or in a
  database.
- `Tavern.billing_service` is a placeholder attribute. Ordering computes and
  logs the bill, but nobody is charged, and no `Transaction` is recorded.
- There is no command-line program. The package is used as a library.

## Running the tests

```
pip install ".[test]"
pytest
```