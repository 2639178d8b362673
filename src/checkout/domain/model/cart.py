"""ShoppingCart aggregate — an ordered bag of items.

The cart stores one entry per unit: adding 4 x Soap appends the same
Soap item four times.  Insertion order is preserved and is what the
display and invoice lines follow.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from checkout.domain.model.item import Item
from checkout.domain.model.value_objects import Money, Quantity


@dataclass
class ShoppingCart:
    """Aggregate root for the cart.

    Invariants:
    - ``add_item(item, q)`` grows the cart by exactly ``q`` entries
    - entries are never removed or reordered
    """

    _items: list[Item] = field(default_factory=list)

    def add_item(self, item: Item, quantity: int) -> None:
        """Append *quantity* references to *item*.

        Zero is a no-op.  Raises InvalidQuantityError for a negative
        or non-integer quantity, leaving the cart untouched.
        """
        qty = Quantity(quantity)
        self._items.extend([item] * qty.value)

    @property
    def items(self) -> tuple[Item, ...]:
        # Snapshot, so callers cannot mutate the cart through it
        return tuple(self._items)

    @property
    def total(self) -> Money:
        result = Money.zero()
        for item in self._items:
            result = result + item.price
        return result

    def display_items(self) -> Iterator[str]:
        """Yield one ``"<name> - <price>"`` line per entry.

        Each call returns a fresh iterator over the current contents.
        """
        return (f"{item.name} - {item.price.plain()}" for item in self._items)

    def lines(self) -> list[tuple[Item, int]]:
        """Group entries by item code, in order of first appearance."""
        grouped: dict[str, tuple[Item, int]] = {}
        for item in self._items:
            first, count = grouped.get(item.code, (item, 0))
            grouped[item.code] = (first, count + 1)
        return list(grouped.values())

    def __len__(self) -> int:
        return len(self._items)
