"""A small shopping cart and a bank account with a transaction history."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import ClassVar, Iterable, Iterator, Optional

CART_CAPACITY = 10
MAX_HISTORY_SIZE = 20
ACCOUNT_NUMBER_LIMIT = 100000
OPENING_MEMO = "account opened"


class CartFullError(OverflowError):
    """Raised when a product is added to a cart that has no room left."""


@dataclass(frozen=True)
class Product:
    pid: int
    price: int


PRODUCTS = (
    Product(1001, 1000),
    Product(2001, 5000),
    Product(2002, 7500),
    Product(3001, 5000),
    Product(3002, 10000),
    Product(3003, 3000),
)


class Cart:
    """Product ids in the order they were added, at most ten of them."""

    def __init__(self, items: Iterable[int] = ()) -> None:
        self._ids: list[int] = []
        for product_id in items:
            self.add(product_id)

    def add(self, product_id: int) -> None:
        if len(self._ids) >= CART_CAPACITY:
            raise CartFullError("the cart has no room left")
        self._ids.append(product_id)

    def remove(self, product_id: int) -> None:
        """Take every entry of ``product_id`` out of the cart."""
        if product_id not in self._ids:
            raise ValueError(f"product {product_id} is not in the cart")
        self._ids = [pid for pid in self._ids if pid != product_id]

    def copy(self) -> "Cart":
        return Cart(self._ids)

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[int]:
        return iter(self._ids)

    def listing(self, products: Iterable[Product] = PRODUCTS) -> list[Product]:
        """Return the known products in the cart, in cart order, with their prices."""
        catalogue = {product.pid: product for product in products}
        return [catalogue[pid] for pid in self._ids if pid in catalogue]


class HistoryFullError(OverflowError):
    """Raised when an account has no room left in its transaction history."""


@dataclass(frozen=True)
class Transaction:
    amount: int
    memo: str


class BankAccount:
    """An account with a random number, a balance and up to twenty transactions.

    Deposits and withdrawals also move the total held by the bank.
    """

    _total: ClassVar[int] = 0

    def __init__(self, opening: Optional[int] = None, rng: Optional[random.Random] = None) -> None:
        source = rng if rng is not None else random
        self.account_no = source.randrange(ACCOUNT_NUMBER_LIMIT)
        self._balance = 0
        self._history: list[Transaction] = []
        if opening is not None:
            self._balance = opening
            self._history.append(Transaction(opening, OPENING_MEMO))

    @property
    def balance(self) -> int:
        return self._balance

    @property
    def history(self) -> tuple[Transaction, ...]:
        return tuple(self._history)

    def _record(self, amount: int, memo: str) -> None:
        if len(self._history) >= MAX_HISTORY_SIZE:
            raise HistoryFullError("the transaction history is full")
        BankAccount._total += amount
        self._balance += amount
        self._history.append(Transaction(amount, memo))

    def deposit(self, amount: int, memo: str) -> None:
        self._record(amount, memo)

    def withdraw(self, amount: int, memo: str) -> None:
        self._record(-amount, memo)

    def statement(self) -> str:
        """Return the account number, balance and every transaction, one per line."""
        lines = [
            "==================",
            f"Account NO.{self.account_no}",
            f"Balance {self._balance}",
            "History",
        ]
        lines += [
            f"{i}:{entry.amount}     {entry.memo}" for i, entry in enumerate(self._history)
        ]
        return "\n".join(lines)

    @classmethod
    def bank_total(cls) -> int:
        """Return the sum of all deposits less all withdrawals over every account."""
        return BankAccount._total