"""Product catalogue loaded from a CSV file."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Union

log = logging.getLogger(__name__)

_NUMBER_PREFIX = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|infinity|inf|nan)",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class Product:
    """A product that can be sold."""

    name: str
    barcode: str
    price: float


class ProductDatabaseError(Exception):
    """Raised when the product file cannot be read."""


def _parse_price(text: str) -> float:
    """Parse the leading number of ``text``; trailing characters are ignored."""
    match = _NUMBER_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    value = float(match.group(0).strip())
    if value in (float("inf"), float("-inf")) and "inf" not in match.group(0).lower():
        raise ValueError(f"number out of range: {text!r}")
    return value


class ProductDatabase:
    """Products read from a CSV file with a header line and ``name,barcode,price`` rows."""

    def __init__(self, filepath: Union[str, Path]) -> None:
        self.filepath = Path(filepath)
        self._products: list[Product] = []
        self.invalid_lines: list[str] = []

    def load(self) -> None:
        """Read the file and append its products to the catalogue.

        Rows with fewer than three fields are skipped; rows whose price is
        not a number are recorded in ``invalid_lines`` and skipped.
        """
        try:
            text = self.filepath.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            raise ProductDatabaseError(
                f"не удалось открыть файл товаров: {self.filepath}"
            ) from exc

        for line in text.split("\n")[1:]:
            fields = line.split(",")
            if len(fields) < 3 or (len(fields) == 3 and not fields[2]):
                continue
            name, barcode, price_text = fields[:3]
            try:
                price = _parse_price(price_text)
            except ValueError:
                log.warning("Ошибка: некорректная цена в строке: %s", line)
                self.invalid_lines.append(line)
                continue
            self._products.append(Product(name, barcode, price))

    @property
    def products(self) -> tuple[Product, ...]:
        return tuple(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def __len__(self) -> int:
        return len(self._products)

    def find_by_name(self, name: str) -> Optional[Product]:
        """Return the first product with this name, or None."""
        return next((p for p in self._products if p.name == name), None)

    def find_by_barcode(self, barcode: str) -> Optional[Product]:
        """Return the first product with this barcode, or None."""
        return next((p for p in self._products if p.barcode == barcode), None)