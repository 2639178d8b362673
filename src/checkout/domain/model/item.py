"""Item value object — something that can be put in a cart."""

from __future__ import annotations

from dataclasses import dataclass

from checkout.domain.model.value_objects import Money


@dataclass(frozen=True)
class Item:
    """A catalog item.

    Immutable, so the same instance can safely occupy several cart slots.
    """

    code: str
    name: str
    price: Money
