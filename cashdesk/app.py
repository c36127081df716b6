"""Cash desk front end: a command script or an interactive menu."""

from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import Callable, Optional, TextIO, Union

from cashdesk.products import Product, ProductDatabase, ProductDatabaseError
from cashdesk.receipt import PaymentError, PaymentMethod, Receipt, _format_number
from cashdesk.shift import Shift

DEFAULT_DATABASE = "products.csv"

_OPEN_RECEIPT_WARNING = "Внимание: есть открытый чек, который не был оплачен"

_INT_PREFIX = re.compile(r"[+-]?\d+")
_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class _CommandError(ValueError):
    """A command that cannot be carried out; the message is shown as is."""


class _EndOfInput(Exception):
    """The input stream has no more lines."""


def _leading_int(token: str) -> int:
    """Read the integer at the start of ``token``; trailing characters are ignored."""
    match = _INT_PREFIX.match(token.lstrip())
    if match is None:
        raise ValueError(f"not an integer: {token!r}")
    value = int(match.group(0))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {token!r}")
    return value


def _leading_float(token: str) -> float:
    """Read the number at the start of ``token``; trailing characters are ignored."""
    match = _FLOAT_PREFIX.match(token.lstrip())
    if match is None:
        raise ValueError(f"not a number: {token!r}")
    value = float(match.group(0))
    if value in (float("inf"), float("-inf")):
        raise ValueError(f"number out of range: {token!r}")
    return value


class CashDeskApp:
    """A cash desk working against one product catalogue and one shift."""

    def __init__(
        self,
        database_path: Union[str, Path] = DEFAULT_DATABASE,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ) -> None:
        self.stdin = sys.stdin if stdin is None else stdin
        self.stdout = sys.stdout if stdout is None else stdout
        self.stderr = sys.stderr if stderr is None else stderr
        self.db = ProductDatabase(database_path)
        self.db.load()
        self.shift = Shift()
        self.receipt = Receipt()
        self.receipt_open = False

    def _say(self, text: str) -> None:
        self.stdout.write(text + "\n")

    def _complain(self, text: str) -> None:
        self.stderr.write(text + "\n")

    def _announce_added(self, product: Product) -> None:
        self._say(f"Товар добавлен: {product.name} | Цена: {_format_number(product.price)}")

    def init_shift_from_script(self, line: str) -> None:
        """Open the shift from an ``open_shift <cashier> <cash>`` line."""
        tokens = line.split()
        if not tokens or tokens[0] != "open_shift":
            raise _CommandError("Ошибка: смена не открыта")
        try:
            cashier_name = tokens[1]
            initial_cash = _leading_int(tokens[2])
        except (IndexError, ValueError):
            raise _CommandError("Ошибка: некорректные параметры open_shift") from None
        self.shift.open(cashier_name, initial_cash)
        self._say("Смена открыта")

    def open_receipt(self) -> None:
        """Start a new, empty receipt."""
        if self.receipt_open:
            raise _CommandError("Ошибка: чек уже открыт")
        self.receipt = Receipt()
        self.receipt_open = True
        self._say("Чек открыт")

    def _add(
        self,
        args: str,
        command: str,
        find: Callable[[str], Optional[Product]],
        missing: str,
    ) -> Product:
        if not self.receipt_open:
            raise _CommandError("Ошибка: чек не открыт")
        tokens = args.split()
        try:
            key = tokens[0]
            quantity = _leading_int(tokens[1])
        except (IndexError, ValueError):
            raise _CommandError(f"Ошибка: неверный формат команды {command}") from None
        product = find(key)
        if product is None:
            raise _CommandError(f'Ошибка: товар {missing} "{key}" не найден')
        self.receipt.add_item(product, quantity)
        self._announce_added(product)
        return product

    def add_by_barcode(self, args: str) -> Product:
        """Add ``<barcode> <quantity>`` to the open receipt."""
        return self._add(args, "add_by_barcode", self.db.find_by_barcode, "со штрихкодом")

    def add_by_name(self, args: str) -> Product:
        """Add ``<name> <quantity>`` to the open receipt."""
        return self._add(args, "add_by_name", self.db.find_by_name, "с именем")

    def _settle(self, method: PaymentMethod, amount: float = 0.0) -> bool:
        """Pay the current receipt; on success it goes to the shift."""
        self.receipt.set_payment_method(method, amount)
        try:
            self.receipt.close(self.stdout)
        except PaymentError as exc:
            self._complain(f"Ошибка: {exc}")
            return False
        self.shift.add_receipt(self.receipt)
        return True

    def pay(self, args: str) -> bool:
        """Pay with ``cash <amount>`` or ``card``; return whether the receipt was paid."""
        tokens = args.split()
        if not tokens:
            raise _CommandError("Ошибка: метод оплаты не указан")
        method_name = tokens[0]
        if method_name == "cash":
            try:
                amount = _leading_float(tokens[1])
            except (IndexError, ValueError):
                raise _CommandError("Ошибка: сумма оплаты не указана") from None
            paid = self._settle(PaymentMethod.CASH, amount)
        elif method_name == "card":
            paid = self._settle(PaymentMethod.CARD)
        else:
            raise _CommandError("Ошибка: неизвестный метод оплаты")

        if paid:
            self.receipt_open = False
        else:
            self._say("Повторите оплату")
        return paid

    def cancel_receipt(self) -> None:
        self._say("Чек отменён")
        self.receipt_open = False

    def _finish_shift(self) -> None:
        self._say("Итог по смене:")
        self.shift.close(self.stdout)
        self._say("Смена закрыта")

    def close_shift(self) -> None:
        """Print the shift summary and close it; refused while a receipt is open."""
        if self.receipt_open:
            raise _CommandError(_OPEN_RECEIPT_WARNING)
        self._finish_shift()

    def run_script(self) -> None:
        """Execute commands from the input stream, one per line."""
        first = self.stdin.readline()
        if not first:
            return
        try:
            self.init_shift_from_script(first.rstrip("\n"))
        except _CommandError as exc:
            self._complain(str(exc))
            return

        for raw in self.stdin:
            command, _, args = raw.strip().partition(" ")
            command = command.strip()
            if not command:
                command, args = "", ""
            try:
                if self._run_command(command, args):
                    break
            except _CommandError as exc:
                self._complain(str(exc))

    def _run_command(self, command: str, args: str) -> bool:
        """Run one script command; return True when the script should stop."""
        match command:
            case "open_receipt":
                self.open_receipt()
            case "add_by_barcode":
                self.add_by_barcode(args)
            case "add_by_name":
                self.add_by_name(args)
            case "pay":
                self.pay(args)
            case "cancel_receipt":
                self.cancel_receipt()
            case "close_shift":
                self.close_shift()
                return True
            case "exit":
                if not self.receipt_open:
                    return True
                self._complain(_OPEN_RECEIPT_WARNING)
            case "open_shift":
                raise _CommandError("Ошибка: смена уже открыта")
            case _:
                raise _CommandError(f"Ошибка: неизвестная команда '{command}'")
        return False

    def _ask(self, prompt: str = "") -> str:
        if prompt:
            self.stdout.write(prompt)
        line = self.stdin.readline()
        if not line:
            raise _EndOfInput
        return line.rstrip("\n")

    def run_interactive(self) -> None:
        """Drive the cash desk through menus read from the input stream."""
        self._say("=== Открытие смены ===")
        try:
            cashier_name = self._ask("Введите имя кассира: ")
            cash_text = self._ask("Введите начальную сумму в кассе: ")
        except _EndOfInput:
            cashier_name, cash_text = "", ""
        try:
            initial_cash = _leading_int(cash_text)
        except ValueError:
            self._complain("Ошибка: сумма должна быть числом")
            return
        self.shift.open(cashier_name, initial_cash)
        self._say("Смена открыта")

        try:
            running = True
            while running:
                if self.receipt_open:
                    self._receipt_menu()
                else:
                    running = self._main_menu()
        except _EndOfInput:
            pass
        self._say("Программа завершена")

    def _main_menu(self) -> bool:
        """Show the menu without an open receipt; return False to stop."""
        self._say("\nВыберите действие:")
        self._say("1. Открыть чек")
        self._say("2. Закрыть смену")
        self._say("3. Выход")
        choice = self._ask("> ")
        if choice == "1":
            self.open_receipt()
        elif choice == "2":
            self._finish_shift()
            return False
        elif choice == "3":
            return False
        else:
            self._complain("Ошибка: неизвестный выбор")
        return True

    def _interactive_add(
        self, prompt: str, example: str, find: Callable[[str], Optional[Product]]
    ) -> None:
        tokens = self._ask(prompt).split()
        try:
            key = tokens[0]
            quantity = _leading_int(tokens[1])
        except (IndexError, ValueError):
            self._complain(f"Ошибка: введите строку вида {example}")
            return
        product = find(key)
        if product is None:
            self._complain("Ошибка: товар не найден")
            return
        self.receipt.add_item(product, quantity)
        self._announce_added(product)

    def _receipt_menu(self) -> None:
        self._say("\nВыберите действие с чеком:")
        self._say("1. Добавить товар по штрихкоду")
        self._say("2. Добавить товар по имени")
        self._say("3. Оплатить")
        self._say("4. Отменить чек")
        choice = self._ask("> ")
        if choice == "1":
            self._interactive_add(
                "Введите штрихкод и количество: ", "123456 2", self.db.find_by_barcode
            )
        elif choice == "2":
            self._interactive_add(
                "Введите имя товара и количество: ", "молоко 2", self.db.find_by_name
            )
        elif choice == "3":
            self._interactive_pay()
        elif choice == "4":
            self.cancel_receipt()
        else:
            self._complain("Ошибка: неизвестный выбор")

    def _interactive_pay(self) -> None:
        method_choice = self._ask("Выберите метод оплаты:\n1. Наличные\n2. Карта\n> ")
        if method_choice == "1":
            amount_text = self._ask("Введите сумму: ")
            try:
                amount = _leading_float(amount_text)
            except ValueError:
                self._complain("Ошибка: сумма должна быть числом")
                return
            paid = self._settle(PaymentMethod.CASH, amount)
        elif method_choice == "2":
            paid = self._settle(PaymentMethod.CARD)
        else:
            self._complain("Ошибка: неизвестный метод оплаты")
            return

        if paid:
            self._say("Чек оплачен и закрыт")
            self.receipt_open = False
        else:
            self._complain("Повторите оплату")


def main(argv: Optional[list[str]] = None) -> int:
    """Run the cash desk; ``--interactive`` selects the menu mode."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        app = CashDeskApp(DEFAULT_DATABASE)
    except ProductDatabaseError:
        sys.stderr.write("Ошибка: не удалось открыть файл товаров\n")
        return 1
    if args and args[0] == "--interactive":
        app.run_interactive()
    else:
        app.run_script()
    return 0


if __name__ == "__main__":
    sys.exit(main())