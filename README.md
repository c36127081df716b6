# cashdesk

A small console cash register. It loads a product catalogue from a CSV
file, opens a cashier's shift, rings up receipts by barcode or by product
name, takes payment in cash or by card, and prints a summary when the
shift is closed. All messages the program prints are in Russian.

## Installing

    pip install .

This installs the `cashdesk` command. The same program can be started
with `python -m cashdesk.app`.

## The product catalogue

The program reads `products.csv` from the current directory. The first
line is a header and is skipped; every other line holds a name, a barcode
and a price, separated by commas:

    name,barcode,price
    milk,4600001,89.90
    bread,4600002,45.00

- Lines with fewer than three fields, or with an empty price as the last
  field, are ignored.
- The price is read from the start of the field; anything after the
  number is ignored (`12.5abc` gives 12.5).
- A line whose price does not start with a number is logged as a warning
  and skipped.
- If the file cannot be opened, the program writes an error to standard
  error and exits with status 1.

When several lines share a name or a barcode, lookups return the first.

## Script mode

By default `cashdesk` reads commands from standard input, one per line:

    cashdesk < session.txt

The first line must open the shift; otherwise the program reports an
error and stops:

    open_shift <cashier> <initial_cash>

After that these commands are accepted:

| Command | Effect |
| --- | --- |
| `open_receipt` | start a new, empty receipt (refused if one is already open) |
| `add_by_barcode <barcode> <quantity>` | add a product found by barcode |
| `add_by_name <name> <quantity>` | add a product found by name |
| `pay cash <amount>` | pay in cash; the change is printed |
| `pay card` | pay by card |
| `cancel_receipt` | drop the current receipt |
| `close_shift` | print the shift summary and stop |
| `exit` | stop without a summary |

`close_shift` and `exit` refuse to stop while a receipt is still open.
When a cash payment does not cover the total, the receipt stays open and
the program asks for the payment to be repeated. Errors and unknown
commands are reported on standard error and the session carries on.
The session also ends when the input runs out.

A paid receipt is printed with each item's name, price and quantity, the
total and, for cash, the change. The shift summary shows the cashier, the
number of receipts, the sums paid in cash and by card, and the cash in
the till at the end of the shift (the starting cash plus every paid
receipt's total).

Example session:

    open_shift Anna 1000
    open_receipt
    add_by_name milk 2
    add_by_barcode 4600002 1
    pay cash 300
    close_shift

## Interactive mode

    cashdesk --interactive

asks for the cashier's name and the starting cash, then shows numbered
menus: open a receipt, close the shift or quit; and, while a receipt is
open, add a product by barcode or by name, pay (cash or card) or cancel
the receipt.

## Using it as a library

```python
import sys

from cashdesk.products import ProductDatabase
from cashdesk.receipt import PaymentMethod, Receipt
from cashdesk.shift import Shift

db = ProductDatabase("products.csv")
db.load()                       # raises ProductDatabaseError if unreadable

shift = Shift()
shift.open("Anna", 1000)

receipt = Receipt()
receipt.add_item(db.find_by_name("milk"), 2)
receipt.set_payment_method(PaymentMethod.CARD)
receipt.close(sys.stdout)       # prints the payment and the receipt
shift.add_receipt(receipt)

print(shift.summary())
```

- `ProductDatabase` — `load()`, `find_by_name()`, `find_by_barcode()`
  (each returns a `Product` or `None`), `products`, `invalid_lines`;
  it can be iterated and has a length.
- `Product` — `name`, `barcode`, `price`.
- `Receipt` — `add_item()`, `set_payment_method(method, paid_amount=0.0)`,
  `close(out=None)`, `total()`, `is_closed()`, `payment_method()`, `items`.
  `close` raises `PaymentError` when no payment method is set or the cash
  handed over does not cover the total.
- `Shift` — `open()`, `add_receipt()`, `sum_by(method)`, `summary()`,
  `close(out=None)` (prints the summary and forgets the receipts),
  `cashier_name`, `cash`, `receipts`.
- `cashdesk.app.CashDeskApp(database_path, stdin, stdout, stderr)` runs
  either mode against any text streams through `run_script()` or
  `run_interactive()`.

## What it does not do

The catalogue is only read, never edited. Shifts and receipts live in
memory only: nothing is saved when the program ends, and no receipt is
sent to a printer or a fiscal device.