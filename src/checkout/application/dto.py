"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry display-ready strings from the application layer to the CLI
without exposing domain internals.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartDTO:
    """Output: the cart as displayed to the user."""

    lines: list[str]  # "<name> - <price>", insertion order
    total: str
    item_count: int


@dataclass(frozen=True)
class CheckoutResultDTO:
    """Output: everything a completed checkout produced."""

    order_id: int
    customer_name: str
    cart: CartDTO
    invoice: str  # e.g. "Generating PDF invoice for order #1..."
    payment: str  # redacted receipt line
    amount_charged: str
