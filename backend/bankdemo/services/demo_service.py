from __future__ import annotations

import logging
from typing import Callable

from bankdemo.decorators.limited_withdrawal import LimitedWithdrawalAccount
from bankdemo.domain.account import BankAccount
from bankdemo.domain.errors import (
    InvalidAccountOperationError,
    NegativeAmountError,
    OverdraftError,
)
from bankdemo.domain.money import format_amount
from bankdemo.services.schemas import AccountOpenRequest, AmountRequest
from bankdemo.subscribers.transaction_logger import TransactionLogger


log = logging.getLogger(__name__)

CLOSED_ACCOUNT_DEPOSIT = 500


def run_demo(
    *,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """
    Session console complète :
    1) ouverture du compte + abonné console
    2) wrapper à retrait plafonné (500)
    3) dépôt, retrait, solde, clôture
    4) dépôt sur compte clos pour montrer l'erreur
    Toutes les lignes (driver et notifications) passent par `write`.
    La première erreur termine la session ; seule cette fonction attrape.
    """
    try:
        # chaque saisie est validée avant la suivante
        opening = AmountRequest(amount=read("Enter initial balance: "))
        req = AccountOpenRequest(
            opening_balance=opening.amount,
            account_number=read("Enter account number: "),
        )

        account = BankAccount(req.account_number, req.opening_balance)
        write(f"Bank Account Created for Account Number: {account.identifier}")

        account.add_subscriber(TransactionLogger(write=write))
        secure_account = LimitedWithdrawalAccount(account)

        deposit = AmountRequest(amount=read("Enter an amount to deposit: "))
        secure_account.deposit(deposit.amount)

        withdrawal = AmountRequest(amount=read("Enter an amount to withdraw: "))
        secure_account.withdraw(withdrawal.amount)

        write(f"Account Balance: {format_amount(account.get_balance())}")

        secure_account.close()

        write(f"Depositing ${CLOSED_ACCOUNT_DEPOSIT}")
        secure_account.deposit(CLOSED_ACCOUNT_DEPOSIT)

    except InvalidAccountOperationError as e:
        write(f"Invalid operation: {e.message}")
    except (NegativeAmountError, OverdraftError) as e:
        write(f"Transaction failed: {e.message}")
    except Exception as e:
        log.exception("Unexpected error during demo session: %s", e)
        write(f"Unexpected error: {e}")
