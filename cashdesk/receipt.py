"""Receipts: items, payment and printing."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass
from typing import Optional, TextIO

from cashdesk.products import Product


def _format_number(value: float) -> str:
    """Format a number the way a default-configured output stream does."""
    return f"{value:g}"


class PaymentMethod(enum.Enum):
    CASH = "cash"
    CARD = "card"


@dataclass(frozen=True)
class ReceiptItem:
    product: Product
    quantity: int

    @property
    def cost(self) -> float:
        return self.quantity * self.product.price


class PaymentError(Exception):
    """Raised when a receipt cannot be paid."""


class Receipt:
    """A list of purchased items and how they are paid for."""

    def __init__(self) -> None:
        self._items: list[ReceiptItem] = []
        self._payment_method: Optional[PaymentMethod] = None
        self._paid_amount = 0.0
        self._payment_set = False
        self._closed = False

    @property
    def items(self) -> tuple[ReceiptItem, ...]:
        return tuple(self._items)

    def add_item(self, product: Product, quantity: int) -> None:
        self._items.append(ReceiptItem(product, quantity))

    def set_payment_method(self, method: PaymentMethod, paid_amount: float = 0.0) -> None:
        self._payment_method = method
        self._paid_amount = paid_amount
        self._payment_set = True

    def total(self) -> float:
        total = 0.0
        for item in self._items:
            total += item.cost
        return total

    def is_closed(self) -> bool:
        return self._closed

    def payment_method(self) -> Optional[PaymentMethod]:
        return self._payment_method

    def close(self, out: Optional[TextIO] = None) -> None:
        """Take payment and print the receipt.

        Raises PaymentError if no payment method is set or the cash
        handed over does not cover the total.
        """
        out = sys.stdout if out is None else out
        if not self._payment_set:
            raise PaymentError("способ оплаты не задан")

        out.write("Оплата... ")
        total = self.total()
        if self._payment_method is PaymentMethod.CASH:
            if self._paid_amount < total:
                raise PaymentError("недостаточно наличных")
            out.write(f"Сдача: {_format_number(self._paid_amount - total)}\n")
        out.write("Оплачено\n")

        self._closed = True
        self._print(out)

    def _print(self, out: TextIO) -> None:
        out.write("-- Чек --\n")
        for item in self._items:
            out.write(
                f"{item.product.name} | Цена: {_format_number(item.product.price)}"
                f" | Кол-во: {item.quantity}\n"
            )
        total = self.total()
        out.write(f"Итог: {_format_number(total)}\n")
        if self._payment_method is PaymentMethod.CASH:
            out.write(f"Сдача: {_format_number(self._paid_amount - total)}\n")