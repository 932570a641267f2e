"""Records kept by the bank control system: accounts and their movements."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class AccountType(str, Enum):
    """Kinds of account, keyed by the digit stored in the account's type field."""

    CHECKING = "1"
    SAVINGS = "2"
    CREDIT_CARD = "3"

    @property
    def label(self) -> str:
        return _TYPE_LABELS[self]


_TYPE_LABELS = {
    AccountType.CHECKING: "Corrente",
    AccountType.SAVINGS: "Poupanca",
    AccountType.CREDIT_CARD: "Cartao Credito",
}


class MovementKind(str, Enum):
    """Direction of a movement, as written into the movement record."""

    DEBIT = "Debito"
    CREDIT = "Credito"


def account_type_label(code: str) -> str | None:
    """Return the description of an account type, judged by its first character.

    Returns None when the code does not start with a known type digit.
    """
    if not code:
        return None
    try:
        return AccountType(code[0]).label
    except ValueError:
        return None


@dataclass
class Account:
    """A bank account record."""

    code: int
    bank: str = ""
    agency: str = ""
    number: str = ""
    account_type: str = ""
    balance: float = 0.0
    limit: float = 0.0
    status: int = 1

    def type_label(self) -> str:
        """Description of the account type, or the raw type text if it is unknown."""
        label = account_type_label(self.account_type)
        return self.account_type if label is None else label

    def available(self) -> float:
        """Balance plus credit limit."""
        return self.balance + self.limit


@dataclass
class Movement:
    """A debit or credit registered against an account."""

    sequence: int
    account_code: int
    date: str = ""
    kind: str = ""
    payee: str = ""
    amount: float = 0.0
    balance: float = 0.0