from decimal import Decimal

import pytest

from bankdemo.decorators.limited_withdrawal import LimitedWithdrawalAccount
from bankdemo.domain.account import BankAccount
from bankdemo.domain.errors import InvalidAccountOperationError, OverdraftError


def test_open_deposit_withdraw_reject_close_scenario():
    received: list[str] = []
    account = BankAccount("ACC-001", Decimal("1000"))
    account.add_subscriber(received.append)
    secure = LimitedWithdrawalAccount(account)

    account.deposit(Decimal("200"))
    assert account.get_balance() == Decimal("1200")
    assert received == ["Deposited: $200.0"]

    secure.withdraw(Decimal("300"))
    assert account.get_balance() == Decimal("900")
    assert received[-1] == "Withdrawn: $300.0"

    with pytest.raises(OverdraftError):
        secure.withdraw(Decimal("600"))
    assert account.get_balance() == Decimal("900")
    assert len(received) == 2

    secure.close()
    assert account.get_balance() == Decimal("900")
    assert account.is_open is False
    assert received[-1] == "Account closed"

    with pytest.raises(InvalidAccountOperationError):
        secure.deposit(Decimal("50"))
    assert received == ["Deposited: $200.0", "Withdrawn: $300.0", "Account closed"]
