"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from checkout.application.dto import CartDTO
from checkout.domain.model.cart import ShoppingCart


class ShowCartHandler:

    def __init__(self, cart: ShoppingCart) -> None:
        self._cart = cart

    def handle(self) -> CartDTO:
        return self.to_dto(self._cart)

    @staticmethod
    def to_dto(cart: ShoppingCart) -> CartDTO:
        return CartDTO(
            lines=list(cart.display_items()),
            total=str(cart.total),
            item_count=len(cart),
        )
