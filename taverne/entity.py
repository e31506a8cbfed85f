"""Plain entities shared by the aggregates."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field

NIL_UUID = uuid.UUID(int=0)


@dataclass
class Item:
    """Something that can be sold or owned."""

    id: uuid.UUID = field(default=NIL_UUID)
    name: str = ""
    description: str = ""


@dataclass
class Person:
    """A person identified by a UUID."""

    id: uuid.UUID = field(default=NIL_UUID)
    name: str = ""
    age: int = 0