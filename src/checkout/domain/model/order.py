"""Order aggregate — binds a customer to a cart.

The Order does not copy the cart: totals and items are read live from
it, so anything added to the cart after the order was created is
reflected.  Invoicing and payment are delegated to strategies attached
at runtime.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from datetime import datetime, timezone

from checkout.domain.exceptions import NotConfiguredError
from checkout.domain.model.cart import ShoppingCart
from checkout.domain.model.customer import Customer
from checkout.domain.model.item import Item
from checkout.domain.model.value_objects import Money
from checkout.domain.strategy.invoice import InvoiceRecord, InvoiceStrategy
from checkout.domain.strategy.payment import PaymentReceipt, PaymentStrategy

# Process-wide order numbering, starting at 1
_order_numbers = itertools.count(1)


@dataclass
class Order:
    """Aggregate root for a checkout.

    There is no status tracking: an order may be paid before it is
    invoiced, or paid more than once.
    """

    customer: Customer
    cart: ShoppingCart
    id: int = field(default_factory=lambda: next(_order_numbers), init=False)
    created_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc), init=False
    )
    invoice_strategy: InvoiceStrategy | None = field(default=None, repr=False)
    payment_strategy: PaymentStrategy | None = field(default=None, repr=False)

    # --- Strategy selection ---------------------------------------------------

    def set_invoice_strategy(self, strategy: InvoiceStrategy) -> None:
        self.invoice_strategy = strategy

    def set_payment_strategy(self, strategy: PaymentStrategy) -> None:
        self.payment_strategy = strategy

    # --- Actions --------------------------------------------------------------

    def generate_invoice(self) -> InvoiceRecord:
        """Generate an invoice with the configured strategy.

        Raises NotConfiguredError if no invoice strategy has been set.
        """
        if self.invoice_strategy is None:
            raise NotConfiguredError(
                f"Order #{self.id} has no invoice strategy configured"
            )
        return self.invoice_strategy.generate(self)

    def pay_invoice(self) -> PaymentReceipt:
        """Pay the current order total with the configured strategy.

        Raises NotConfiguredError if no payment strategy has been set.
        """
        if self.payment_strategy is None:
            raise NotConfiguredError(
                f"Order #{self.id} has no payment strategy configured"
            )
        return self.payment_strategy.pay(self.total)

    # --- Computed properties --------------------------------------------------

    @property
    def items(self) -> tuple[Item, ...]:
        return self.cart.items

    @property
    def total(self) -> Money:
        return self.cart.total
