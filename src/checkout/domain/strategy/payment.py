"""Payment strategies.

None of these talk to a real payment provider: ``pay()`` records what
would have been charged and returns a receipt.  Credentials are held
only to describe the payment, and never leave the strategy in clear
text: receipts, reprs and log events carry masked values only.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

import structlog

from checkout.domain.exceptions import ValidationError
from checkout.domain.model.customer import Customer
from checkout.domain.model.value_objects import Money

logger = structlog.get_logger()

# Shortest card number whose last four digits may be shown
MIN_CARD_DIGITS = 12


class PaymentMethod(Enum):
    CREDIT_CARD = "credit-card"
    PAYPAL = "paypal"
    CASH_ON_DELIVERY = "cash-on-delivery"


_RECEIPT_LINES = {
    PaymentMethod.CREDIT_CARD: "Paying {amount} using credit card ({details})...",
    PaymentMethod.PAYPAL: "Paying {amount} using Paypal ({details})...",
    PaymentMethod.CASH_ON_DELIVERY: "Paying {amount} in cash on delivery to customer {details}...",
}


@dataclass(frozen=True)
class PaymentReceipt:
    """Record of a completed payment action."""

    method: PaymentMethod
    amount: Money
    details: str  # already redacted

    def __str__(self) -> str:
        return _RECEIPT_LINES[self.method].format(amount=self.amount, details=self.details)


def mask_card_number(number: str) -> str:
    """Keep only the last four digits: ``**** **** **** 1111``.

    Numbers too short to be a real card are masked entirely.
    """
    digits = "".join(ch for ch in number if ch.isdigit())
    if len(digits) < MIN_CARD_DIGITS:
        return "****"
    return f"**** **** **** {digits[-4:]}"


class PaymentStrategy(ABC):

    @abstractmethod
    def pay(self, amount: Money) -> PaymentReceipt:
        """Charge *amount* and return a receipt."""

    # --- Shared helpers -------------------------------------------------------

    @staticmethod
    def _check_amount(amount: Money) -> None:
        # Money already rejects negatives; zero is accepted
        if not isinstance(amount, Money):
            raise ValidationError(
                f"Payment amount must be Money, got {type(amount).__name__}"
            )

    @staticmethod
    def _receipt(method: PaymentMethod, amount: Money, details: str) -> PaymentReceipt:
        receipt = PaymentReceipt(method=method, amount=amount, details=details)
        logger.info(
            "payment_processed",
            method=method.value,
            amount=str(amount),
            details=details,
        )
        return receipt


@dataclass(frozen=True)
class CreditCardPayment(PaymentStrategy):
    name: str
    number: str = field(repr=False)
    cvv: str = field(repr=False)
    expiry: str

    def pay(self, amount: Money) -> PaymentReceipt:
        self._check_amount(amount)
        details = (
            f"name: {self.name}, number: {mask_card_number(self.number)}, "
            f"expiry: {self.expiry}"
        )
        return self._receipt(PaymentMethod.CREDIT_CARD, amount, details)


@dataclass(frozen=True)
class PaypalPayment(PaymentStrategy):
    email: str
    password: str = field(repr=False)

    def pay(self, amount: Money) -> PaymentReceipt:
        self._check_amount(amount)
        return self._receipt(PaymentMethod.PAYPAL, amount, f"email: {self.email}")


@dataclass(frozen=True)
class CashOnDelivery(PaymentStrategy):
    customer: Customer

    def pay(self, amount: Money) -> PaymentReceipt:
        self._check_amount(amount)
        return self._receipt(PaymentMethod.CASH_ON_DELIVERY, amount, self.customer.name)
