from __future__ import annotations

import logging
from decimal import Decimal
from typing import Protocol

from bankdemo.domain.errors import (
    InvalidAccountOperationError,
    NegativeAmountError,
    OverdraftError,
)
from bankdemo.domain.money import format_amount, parse_amount
from bankdemo.domain.notifier import Notifier, Subscriber


log = logging.getLogger(__name__)

Amount = Decimal | int | float | str


class AccountOperations(Protocol):
    """Capacités communes au compte et à ses wrappers."""

    def deposit(self, amount: Amount) -> None: ...
    def withdraw(self, amount: Amount) -> None: ...
    def get_balance(self) -> Decimal: ...
    def close(self) -> None: ...


class BankAccount:
    """
    Objet métier mutable (sujet observé).
    - identifier : figé à la création
    - balance : signé, jamais borné automatiquement
    - is_open : une fois False, reste False
    Les abonnés sont notifiés après chaque mutation appliquée, jamais sur un refus.
    """

    def __init__(self, identifier: str, opening_balance: Amount) -> None:
        if not isinstance(identifier, str):
            raise TypeError("account identifier must be a str")

        self._identifier = identifier
        self._balance = parse_amount(opening_balance)
        self._is_open = True
        self._notifier = Notifier()

    @property
    def identifier(self) -> str:
        return self._identifier

    @property
    def is_open(self) -> bool:
        return self._is_open

    @property
    def subscribers(self) -> tuple[Subscriber, ...]:
        return self._notifier.subscribers

    def add_subscriber(self, subscriber: Subscriber) -> None:
        self._notifier.subscribe(subscriber)

    def deposit(self, amount: Amount) -> None:
        if not self._is_open:
            raise InvalidAccountOperationError("Cannot deposit, account is closed")

        dec = parse_amount(amount)
        if dec < 0:
            raise NegativeAmountError()

        self._balance += dec
        log.debug("account %s: deposit %s applied", self._identifier, dec)
        self._notifier.notify(f"Deposited: ${format_amount(dec)}")

    def withdraw(self, amount: Amount) -> None:
        if not self._is_open:
            raise InvalidAccountOperationError("Cannot withdraw, account is closed")

        dec = parse_amount(amount)
        # amount == balance autorisé : on peut vider le compte à zéro
        if dec > self._balance:
            raise OverdraftError()

        self._balance -= dec
        log.debug("account %s: withdraw %s applied", self._identifier, dec)
        self._notifier.notify(f"Withdrawn: ${format_amount(dec)}")

    def get_balance(self) -> Decimal:
        return self._balance

    def close(self) -> None:
        if not self._is_open:
            raise InvalidAccountOperationError("Account is already closed")

        self._is_open = False
        log.debug("account %s: closed", self._identifier)
        self._notifier.notify("Account closed")

    def __repr__(self) -> str:
        state = "open" if self._is_open else "closed"
        return f"BankAccount(identifier={self._identifier!r}, balance={self._balance}, {state})"
