from __future__ import annotations

from decimal import Decimal

from bankdemo.domain.account import AccountOperations, Amount
from bankdemo.domain.errors import OverdraftError
from bankdemo.domain.money import parse_amount


DEFAULT_WITHDRAWAL_LIMIT = Decimal("500")


class AccountDecorator:
    """
    Wrapper par composition : garde une référence (pas une copie) vers le compte
    enveloppé et lui délègue les quatre opérations.
    Aucun état de solde n'est dupliqué ici.
    """

    def __init__(self, account: AccountOperations) -> None:
        self._account = account

    @property
    def wrapped(self) -> AccountOperations:
        return self._account

    def deposit(self, amount: Amount) -> None:
        self._account.deposit(amount)

    def withdraw(self, amount: Amount) -> None:
        self._account.withdraw(amount)

    def get_balance(self) -> Decimal:
        return self._account.get_balance()

    def close(self) -> None:
        self._account.close()


class LimitedWithdrawalAccount(AccountDecorator):
    """Refuse tout retrait au-dessus de `limit`, avant délégation."""

    def __init__(self, account: AccountOperations, *, limit: Amount = DEFAULT_WITHDRAWAL_LIMIT) -> None:
        super().__init__(account)
        dec_limit = parse_amount(limit)
        if dec_limit < 0:
            raise ValueError("withdrawal limit cannot be negative")
        self._limit = dec_limit

    @property
    def limit(self) -> Decimal:
        return self._limit

    def withdraw(self, amount: Amount) -> None:
        # le compte enveloppé n'est ni touché ni notifié en cas de dépassement
        if parse_amount(amount) > self._limit:
            raise OverdraftError("Exceeded the limit")
        self._account.withdraw(amount)
