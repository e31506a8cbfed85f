"""Immutable value objects."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Transaction:
    """A payment of ``amount`` from one party to another."""

    amount: int
    from_id: uuid.UUID
    to_id: uuid.UUID
    created_at: datetime = field(default_factory=_now)