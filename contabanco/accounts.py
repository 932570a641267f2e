"""The ordered book of bank accounts and the operations kept on it."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .models import Account


class AccountError(Exception):
    """Base class for errors raised by the account book."""


class DuplicateAccountError(AccountError):
    """An account with the same code is already registered."""

    def __init__(self, code: int) -> None:
        super().__init__(f"account code {code} is already registered")
        self.code = code


class EmptyBookError(AccountError):
    """The operation needs at least one account and the book has none."""

    def __init__(self) -> None:
        super().__init__("the account book is empty")


class InvalidPositionError(AccountError):
    """A 1-based position lies outside the book."""

    def __init__(self, position: int) -> None:
        super().__init__(f"invalid position {position}")
        self.position = position


class AccountBook:
    """Accounts kept in insertion order, addressed by code or 1-based position."""

    def __init__(self, accounts: Iterable[Account] | None = None) -> None:
        self._accounts: list[Account] = list(accounts) if accounts is not None else []

    def __len__(self) -> int:
        return len(self._accounts)

    def __iter__(self) -> Iterator[Account]:
        return iter(self._accounts)

    def find(self, code: int) -> Account | None:
        """Return the first account with the given code, or None."""
        return next((account for account in self._accounts if account.code == code), None)

    def _check_new(self, account: Account) -> None:
        if self.find(account.code) is not None:
            raise DuplicateAccountError(account.code)

    def insert_first(self, account: Account) -> None:
        """Register an account at the start of the book."""
        self._check_new(account)
        self._accounts.insert(0, account)

    def insert_last(self, account: Account) -> None:
        """Register an account at the end of the book."""
        self._check_new(account)
        self._accounts.append(account)

    def insert_at(self, account: Account, position: int) -> None:
        """Register an account so that it ends up at the given 1-based position.

        Valid positions run from 1 to one past the current last account.
        """
        if not 1 <= position <= len(self._accounts) + 1:
            raise InvalidPositionError(position)
        self._check_new(account)
        self._accounts.insert(position - 1, account)

    def _require_accounts(self) -> None:
        if not self._accounts:
            raise EmptyBookError()

    def _index(self, position: int) -> int:
        self._require_accounts()
        if not 1 <= position <= len(self._accounts):
            raise InvalidPositionError(position)
        return position - 1

    def first(self) -> Account:
        """The account at the start of the book."""
        self._require_accounts()
        return self._accounts[0]

    def last(self) -> Account:
        """The account at the end of the book."""
        self._require_accounts()
        return self._accounts[-1]

    def at(self, position: int) -> Account:
        """The account at a 1-based position."""
        return self._accounts[self._index(position)]

    def remove_first(self) -> Account:
        """Remove and return the account at the start of the book."""
        self._require_accounts()
        return self._accounts.pop(0)

    def remove_last(self) -> Account:
        """Remove and return the account at the end of the book."""
        self._require_accounts()
        return self._accounts.pop()

    def remove_at(self, position: int) -> Account:
        """Remove and return the account at a 1-based position."""
        return self._accounts.pop(self._index(position))

    def sort_by_code(self) -> None:
        """Order the accounts by ascending code, keeping ties in their order."""
        self._require_accounts()
        self._accounts.sort(key=lambda account: account.code)

    def sort_by_bank(self) -> None:
        """Order the accounts alphabetically by bank name, keeping ties in their order."""
        self._require_accounts()
        self._accounts.sort(key=lambda account: account.bank)