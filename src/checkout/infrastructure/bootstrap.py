"""Composition root — sample data and strategy factories.

This is the only place that knows which concrete strategies exist and
how the CLI names them.  The sample cart and customer reproduce the
demonstration scenario.
"""

from __future__ import annotations

from checkout.domain.model.cart import ShoppingCart
from checkout.domain.model.customer import Customer
from checkout.domain.model.item import Item
from checkout.domain.model.value_objects import Money
from checkout.domain.strategy.invoice import InvoiceStrategy, PdfInvoice, TextInvoice
from checkout.domain.strategy.payment import (
    CashOnDelivery,
    CreditCardPayment,
    PaymentMethod,
    PaymentStrategy,
    PaypalPayment,
)

INVOICE_CHOICES = ("pdf", "text")
PAYMENT_CHOICES = tuple(method.value for method in PaymentMethod)


def sample_cart() -> ShoppingCart:
    cart = ShoppingCart()
    cart.add_item(Item("123456", "Shampoo", Money.of("9.99")), 2)
    cart.add_item(Item("234567", "Soap", Money.of("4.99")), 4)
    cart.add_item(Item("345678", "Toothpaste", Money.of("2.99")), 1)
    return cart


def sample_customer() -> Customer:
    return Customer("John Doe", "123 Main Street, Anytown, USA", "john@example.com")


def invoice_strategy(name: str) -> InvoiceStrategy:
    if name == "pdf":
        return PdfInvoice()
    if name == "text":
        return TextInvoice()
    raise ValueError(f"Unknown invoice format: {name!r}")


def payment_strategy(name: str, customer: Customer) -> PaymentStrategy:
    method = PaymentMethod(name)
    if method is PaymentMethod.CREDIT_CARD:
        return CreditCardPayment(customer.name, "4111 1111 1111 1111", "123", "01/2025")
    if method is PaymentMethod.PAYPAL:
        return PaypalPayment(customer.email, "hunter2")
    return CashOnDelivery(customer)
