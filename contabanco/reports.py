"""Read-only views of accounts and movements drawn on the console screen."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .models import Account, AccountType, Movement, account_type_label
from .screen import Screen

_TABLE_FIRST_ROW = 9
_MOVEMENTS_FIRST_ROW = 10


def format_money(value: float) -> str:
    """Currency text with the amount right-aligned in nine characters."""
    return f"R${value:9.2f}"


def totals(accounts: Iterable[Account]) -> tuple[float, float]:
    """Sum of balances and sum of limits over the given accounts."""
    total_balance = 0.0
    total_limit = 0.0
    for account in accounts:
        total_balance += account.balance
        total_limit += account.limit
    return total_balance, total_limit


def _numbered_type(account: Account) -> str | None:
    label = account_type_label(account.account_type)
    if label is None:
        return None
    return f"{account.account_type[0]}-{label}"


def show_account(screen: Screen, account: Account) -> None:
    """Fill the account form with one account's data and mark it active."""
    screen.write_at(24, 7, str(account.code))
    screen.write_at(24, 9, account.bank)
    screen.write_at(24, 11, account.agency)
    screen.write_at(24, 13, account.number)
    screen.write_at(24, 15, account.account_type)
    numbered = _numbered_type(account)
    if numbered is not None:
        screen.write_at(24, 15, numbered)
    screen.write_at(24, 17, f"{account.balance:.2f}")
    screen.write_at(24, 19, f"{account.limit:.2f}")
    account.status = 1
    screen.write_at(24, 21, str(account.status))


def show_account_table(
    screen: Screen, accounts: Iterable[Account], title: str
) -> tuple[float, float]:
    """Draw the accounts as a table with balance and limit totals.

    Each account is marked active after its row is drawn. Returns the totals.
    """
    screen.frame()
    screen.accounts_header()
    screen.write_at(34, 4, title)

    total_balance = 0.0
    total_limit = 0.0
    row = _TABLE_FIRST_ROW
    for account in accounts:
        screen.write_at(2, row, str(account.code))
        screen.write_at(5, row, account.bank)
        screen.write_at(25, row, account.agency)
        screen.write_at(31, row, account.number)
        screen.write_at(40, row, account.account_type)
        label = account_type_label(account.account_type)
        if label is not None:
            screen.write_at(40, row, label)
        screen.write_at(55, row, f"R$ {account.balance:.2f}")
        screen.write_at(67, row, f"R$ {account.limit:.2f}")
        screen.write_at(78, row, str(account.status))

        total_balance += account.balance
        total_limit += account.limit
        account.status = 1
        row += 1

    screen.write_at(
        43, row + 2, f"Saldo Total: R$ {total_balance:.2f} R$ {total_limit:.2f} "
    )
    return total_balance, total_limit


def show_movements(
    screen: Screen, account: Account, movements: Sequence[Movement]
) -> int:
    """Draw an account's summary line and its movements; return rows drawn.

    Only movements registered against the account are listed.
    """
    screen.write_at(10, 6, str(account.code))
    screen.write_at(13, 6, account.bank)
    screen.write_at(32, 6, f"Agencia: {account.agency}")
    screen.write_at(50, 6, f"Cta: {account.number}")
    screen.write_at(65, 6, f"Tp: {account.account_type}")
    first = account.account_type[:1]
    if first == AccountType.CHECKING.value:
        kind_label = AccountType.CHECKING.label
    elif first == AccountType.SAVINGS.value:
        kind_label = AccountType.SAVINGS.label
    else:
        kind_label = AccountType.CREDIT_CARD.label
    screen.write_at(69, 6, kind_label)

    shown = 0
    for row, movement in enumerate(
        (m for m in movements if m.account_code == account.code),
        start=_MOVEMENTS_FIRST_ROW,
    ):
        screen.write_at(2, row, movement.date)
        screen.write_at(13, row, movement.payee)
        screen.write_at(43, row, str(movement.kind))
        screen.write_at(57, row, format_money(movement.amount))
        screen.write_at(69, row, format_money(movement.balance))
        shown += 1

    if not shown:
        screen.write_at(7, 27, "Nenhuma movimentacao registrada para esta conta.")
    return shown