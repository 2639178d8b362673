"""Invoice strategies.

An invoice strategy turns an order into an ``InvoiceRecord``: a
description of what would be rendered, not the rendered document.
The PDF and text variants differ only in the format tag they stamp
on the record.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

import structlog

from checkout.domain.model.value_objects import Money

if TYPE_CHECKING:
    from checkout.domain.model.order import Order

logger = structlog.get_logger()


class InvoiceFormat(Enum):
    PDF = "PDF"
    TEXT = "text"


@dataclass(frozen=True)
class InvoiceLine:
    code: str
    name: str
    quantity: int
    unit_price: Money
    line_total: Money


@dataclass(frozen=True)
class InvoiceRecord:
    """Everything needed to render an invoice for one order."""

    format: InvoiceFormat
    order_id: int
    customer_name: str
    lines: tuple[InvoiceLine, ...]
    total: Money

    def __str__(self) -> str:
        return f"Generating {self.format.value} invoice for order #{self.order_id}..."


class InvoiceStrategy(ABC):

    @abstractmethod
    def generate(self, order: Order) -> InvoiceRecord:
        """Describe the invoice for *order*."""


class _TaggedInvoice(InvoiceStrategy):
    """Shared implementation: build the record and stamp ``FORMAT`` on it."""

    FORMAT: InvoiceFormat

    def generate(self, order: Order) -> InvoiceRecord:
        lines = tuple(
            InvoiceLine(
                code=item.code,
                name=item.name,
                quantity=qty,
                unit_price=item.price,
                line_total=item.price * qty,
            )
            for item, qty in order.cart.lines()
        )
        record = InvoiceRecord(
            format=self.FORMAT,
            order_id=order.id,
            customer_name=order.customer.name,
            lines=lines,
            total=order.total,
        )
        logger.info(
            "invoice_generated",
            format=record.format.value,
            order_id=record.order_id,
            line_count=len(record.lines),
            total=str(record.total),
        )
        return record


class PdfInvoice(_TaggedInvoice):
    FORMAT = InvoiceFormat.PDF


class TextInvoice(_TaggedInvoice):
    FORMAT = InvoiceFormat.TEXT
