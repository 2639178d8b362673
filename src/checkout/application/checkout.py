"""Application service: Checkout use case.

Builds an order for a customer's cart, attaches the chosen invoice and
payment strategies, and runs invoice-then-pay once.  Every dependency is
passed in, so the whole flow can be driven from tests with any
strategies.
"""

from __future__ import annotations

import structlog

from checkout.application.dto import CheckoutResultDTO
from checkout.application.show_cart import ShowCartHandler
from checkout.domain.model.cart import ShoppingCart
from checkout.domain.model.customer import Customer
from checkout.domain.model.order import Order
from checkout.domain.strategy.invoice import InvoiceStrategy
from checkout.domain.strategy.payment import PaymentStrategy

logger = structlog.get_logger()


class CheckoutHandler:

    def __init__(
        self,
        invoice_strategy: InvoiceStrategy,
        payment_strategy: PaymentStrategy,
    ) -> None:
        self._invoice_strategy = invoice_strategy
        self._payment_strategy = payment_strategy

    def handle(self, customer: Customer, cart: ShoppingCart) -> CheckoutResultDTO:
        """Check out *cart* for *customer*.

        Steps:
        1. Create the Order (assigns the order number).
        2. Attach the invoice and payment strategies.
        3. Generate the invoice, then pay the order total.
        """
        order = Order(customer=customer, cart=cart)
        order.set_invoice_strategy(self._invoice_strategy)
        order.set_payment_strategy(self._payment_strategy)

        invoice = order.generate_invoice()
        receipt = order.pay_invoice()

        logger.info(
            "checkout_completed",
            order_id=order.id,
            invoice_format=invoice.format.value,
            payment_method=receipt.method.value,
            amount=str(receipt.amount),
        )

        return CheckoutResultDTO(
            order_id=order.id,
            customer_name=customer.name,
            cart=ShowCartHandler.to_dto(cart),
            invoice=str(invoice),
            payment=str(receipt),
            amount_charged=str(receipt.amount),
        )
