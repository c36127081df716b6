"""Cashier shift: collects paid receipts and reports a summary."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from cashdesk.receipt import PaymentMethod, Receipt, _format_number


class Shift:
    """A cashier's working shift and the receipts paid during it."""

    def __init__(self) -> None:
        self.cashier_name = ""
        self.cash = 0.0
        self._receipts: list[Receipt] = []

    @property
    def receipts(self) -> tuple[Receipt, ...]:
        return tuple(self._receipts)

    def open(self, cashier_name: str, initial_cash: float) -> None:
        self.cashier_name = cashier_name
        self.cash = float(initial_cash)

    def add_receipt(self, receipt: Receipt) -> None:
        """Record a paid receipt; its total is added to the cash in the till."""
        self._receipts.append(receipt)
        self.cash += receipt.total()

    def sum_by(self, method: PaymentMethod) -> float:
        total = 0.0
        for receipt in self._receipts:
            if receipt.payment_method() is method:
                total += receipt.total()
        return total

    def summary(self) -> str:
        return (
            f"Кассир: {self.cashier_name}\n"
            f"Всего чеков: {len(self._receipts)}\n"
            f"Сумма за наличную оплату : {_format_number(self.sum_by(PaymentMethod.CASH))} рублей\n"
            f"Сумма за оплату картой: {_format_number(self.sum_by(PaymentMethod.CARD))} рублей\n"
            f"Сумма в кассе на окончание смену: {_format_number(self.cash)} рублей\n"
        )

    def close(self, out: Optional[TextIO] = None) -> None:
        """Print the summary and forget the shift's receipts."""
        out = sys.stdout if out is None else out
        out.write(self.summary())
        self._receipts.clear()