import io

import pytest

from cashdesk.products import Product
from cashdesk.receipt import PaymentMethod, Receipt
from cashdesk.shift import Shift

TEA = Product("Чай", "2001", 120.0)
SUGAR = Product("Сахар", "2002", 80.0)


def _paid(product, quantity, method, amount=0.0):
    receipt = Receipt()
    receipt.add_item(product, quantity)
    receipt.set_payment_method(method, amount)
    receipt.close(io.StringIO())
    return receipt


def test_open_sets_cashier_and_cash():
    shift = Shift()
    shift.open("Анна", 1000)
    assert shift.cashier_name == "Анна"
    assert shift.cash == 1000.0
    assert shift.receipts == ()


def test_add_receipt_increases_cash_by_total():
    shift = Shift()
    shift.open("Анна", 500)
    cash_receipt = _paid(TEA, 2, PaymentMethod.CASH, 1000.0)
    card_receipt = _paid(SUGAR, 1, PaymentMethod.CARD)
    shift.add_receipt(cash_receipt)
    shift.add_receipt(card_receipt)
    assert shift.cash == pytest.approx(500 + cash_receipt.total() + card_receipt.total())
    assert shift.receipts == (cash_receipt, card_receipt)


def test_sum_by_splits_payment_methods():
    shift = Shift()
    shift.open("Борис", 0)
    first = _paid(TEA, 1, PaymentMethod.CASH, 200.0)
    second = _paid(TEA, 3, PaymentMethod.CASH, 500.0)
    third = _paid(SUGAR, 2, PaymentMethod.CARD)
    for receipt in (first, second, third):
        shift.add_receipt(receipt)
    assert shift.sum_by(PaymentMethod.CASH) == pytest.approx(first.total() + second.total())
    assert shift.sum_by(PaymentMethod.CARD) == pytest.approx(third.total())
    assert shift.sum_by(PaymentMethod.CASH) + shift.sum_by(PaymentMethod.CARD) == pytest.approx(
        shift.cash
    )


def test_summary_lines():
    shift = Shift()
    shift.open("Анна", 100)
    shift.add_receipt(_paid(TEA, 1, PaymentMethod.CARD))
    lines = shift.summary().splitlines()
    assert lines[0] == "Кассир: Анна"
    assert lines[1] == "Всего чеков: 1"
    assert lines[2] == "Сумма за наличную оплату : 0 рублей"
    assert lines[3] == "Сумма за оплату картой: 120 рублей"
    assert lines[4] == "Сумма в кассе на окончание смену: 220 рублей"


def test_close_writes_summary_and_clears_receipts():
    shift = Shift()
    shift.open("Вера", 0)
    shift.add_receipt(_paid(SUGAR, 1, PaymentMethod.CASH, 80.0))
    expected = shift.summary()
    out = io.StringIO()
    shift.close(out)
    assert out.getvalue() == expected
    assert shift.receipts == ()
    assert shift.sum_by(PaymentMethod.CASH) == 0.0
    assert "Всего чеков: 0\n" in shift.summary()


def test_cash_survives_close():
    shift = Shift()
    shift.open("Вера", 50)
    receipt = _paid(TEA, 1, PaymentMethod.CARD)
    shift.add_receipt(receipt)
    shift.close(io.StringIO())
    assert shift.cash == pytest.approx(50 + receipt.total())