"""The movement log, single debit/credit entries and transfers between accounts."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .models import Account, Movement, MovementKind


class InsufficientFundsError(Exception):
    """The origin account's balance does not cover the amount to transfer."""

    def __init__(self, account: Account, amount: float) -> None:
        super().__init__(
            f"account {account.code} has balance {account.balance:.2f}, "
            f"cannot transfer {amount:.2f}"
        )
        self.account = account
        self.amount = amount


class MovementLog:
    """Movements kept in the order they were registered."""

    def __init__(self, movements: Iterable[Movement] | None = None) -> None:
        self._movements: list[Movement] = list(movements) if movements is not None else []

    def __len__(self) -> int:
        return len(self._movements)

    def __iter__(self) -> Iterator[Movement]:
        return iter(self._movements)

    def next_sequence(self) -> int:
        """Sequence number for the next movement: one past the last, or 1."""
        if not self._movements:
            return 1
        return self._movements[-1].sequence + 1

    def append(self, movement: Movement) -> None:
        """Add a movement at the end of the log."""
        self._movements.append(movement)

    def for_account(self, code: int) -> list[Movement]:
        """Movements registered against the given account code, in log order."""
        return [movement for movement in self._movements if movement.account_code == code]


def record_movement(
    log: MovementLog,
    account: Account,
    kind: MovementKind | str,
    amount: float,
    date: str,
    payee: str,
) -> Movement:
    """Register a debit or credit against an account and return it.

    The movement carries the balance that results from applying it to the
    account's current balance; the account record itself is left as it is.
    """
    kind = MovementKind(kind)
    if kind is MovementKind.DEBIT:
        new_balance = account.balance - amount
    else:
        new_balance = account.balance + amount
    movement = Movement(
        sequence=log.next_sequence(),
        account_code=account.code,
        date=date,
        kind=kind.value,
        payee=payee,
        amount=amount,
        balance=new_balance,
    )
    log.append(movement)
    return movement


def transfer(
    log: MovementLog,
    origin: Account,
    destination: Account,
    amount: float,
    date: str,
) -> tuple[Movement, Movement]:
    """Move an amount between two accounts and log a debit and a credit.

    Raises InsufficientFundsError, changing nothing, when the origin's balance
    is below the amount. Each movement names the other account's number as payee.
    """
    if origin.balance < amount:
        raise InsufficientFundsError(origin, amount)

    origin.balance -= amount
    destination.balance += amount

    debit = Movement(
        sequence=log.next_sequence(),
        account_code=origin.code,
        date=date,
        kind=MovementKind.DEBIT.value,
        payee=destination.number,
        amount=amount,
        balance=origin.balance,
    )
    log.append(debit)

    credit = Movement(
        sequence=debit.sequence + 1,
        account_code=destination.code,
        date=date,
        kind=MovementKind.CREDIT.value,
        payee=origin.number,
        amount=amount,
        balance=destination.balance,
    )
    log.append(credit)
    return debit, credit