import pytest

from contabanco.accounts import (
    AccountBook,
    AccountError,
    DuplicateAccountError,
    EmptyBookError,
    InvalidPositionError,
)
from contabanco.models import Account


def _book(*codes):
    return AccountBook([Account(code=code, bank=f"Bank{code}") for code in codes])


def _codes(book):
    return [account.code for account in book]


def test_len_counts_accounts():
    assert len(_book()) == 0
    assert len(_book(5, 6, 7)) == 3


def test_iter_keeps_order():
    assert _codes(_book(3, 1, 2)) == [3, 1, 2]


def test_find_returns_matching_account():
    book = _book(10, 20)
    found = book.find(20)
    assert found is not None
    assert found.bank == "Bank20"


def test_find_missing_returns_none():
    assert _book(10).find(99) is None


def test_insert_first_puts_account_at_start():
    book = _book(1, 2)
    book.insert_first(Account(code=9))
    assert _codes(book) == [9, 1, 2]


def test_insert_first_on_empty_book():
    book = AccountBook()
    book.insert_first(Account(code=4))
    assert book.first() is book.last()
    assert book.first().code == 4


def test_insert_last_appends():
    book = _book(1, 2)
    book.insert_last(Account(code=9))
    assert _codes(book) == [1, 2, 9]


@pytest.mark.parametrize("method", ["insert_first", "insert_last"])
def test_duplicate_code_rejected(method):
    book = _book(1, 2)
    with pytest.raises(DuplicateAccountError) as info:
        getattr(book, method)(Account(code=2))
    assert info.value.code == 2
    assert _codes(book) == [1, 2]


def test_insert_at_duplicate_rejected():
    book = _book(1, 2)
    with pytest.raises(DuplicateAccountError):
        book.insert_at(Account(code=1), 2)
    assert len(book) == 2


@pytest.mark.parametrize("position", [1, 2, 3, 4])
def test_insert_at_lands_at_position(position):
    book = _book(1, 2, 3)
    new = Account(code=50)
    book.insert_at(new, position)
    assert book.at(position) is new
    assert len(book) == 4


def test_insert_at_one_past_end_becomes_last():
    book = _book(1, 2)
    book.insert_at(Account(code=7), 3)
    assert book.last().code == 7


def test_insert_at_first_position_on_empty_book():
    book = AccountBook()
    book.insert_at(Account(code=7), 1)
    assert _codes(book) == [7]


@pytest.mark.parametrize("position", [0, -1, 4, 10])
def test_insert_at_invalid_position(position):
    book = _book(1, 2)
    with pytest.raises(InvalidPositionError) as info:
        book.insert_at(Account(code=8), position)
    assert info.value.position == position
    assert _codes(book) == [1, 2]


def test_insert_at_second_position_on_empty_book_is_invalid():
    with pytest.raises(InvalidPositionError):
        AccountBook().insert_at(Account(code=8), 2)


def test_first_last_and_at():
    book = _book(1, 2, 3)
    assert book.first().code == 1
    assert book.last().code == 3
    assert book.at(2).code == 2


@pytest.mark.parametrize("method", ["first", "last", "remove_first", "remove_last"])
def test_empty_book_operations_raise(method):
    with pytest.raises(EmptyBookError):
        getattr(AccountBook(), method)()


def test_empty_check_precedes_position_check():
    with pytest.raises(EmptyBookError):
        AccountBook().remove_at(0)
    with pytest.raises(EmptyBookError):
        AccountBook().at(1)


def test_remove_first_returns_removed():
    book = _book(1, 2, 3)
    removed = book.remove_first()
    assert removed.code == 1
    assert _codes(book) == [2, 3]


def test_remove_last_returns_removed():
    book = _book(1, 2, 3)
    removed = book.remove_last()
    assert removed.code == 3
    assert _codes(book) == [1, 2]


def test_removing_only_account_empties_book():
    book = _book(1)
    book.remove_last()
    assert len(book) == 0
    with pytest.raises(EmptyBookError):
        book.first()


@pytest.mark.parametrize("position", [1, 2, 3])
def test_remove_at_removes_that_account(position):
    book = _book(1, 2, 3)
    expected = book.at(position)
    removed = book.remove_at(position)
    assert removed is expected
    assert len(book) == 2
    assert book.find(removed.code) is None


@pytest.mark.parametrize("position", [0, -2, 4])
def test_remove_at_invalid_position(position):
    book = _book(1, 2, 3)
    with pytest.raises(InvalidPositionError):
        book.remove_at(position)
    assert _codes(book) == [1, 2, 3]


def test_errors_share_base_class():
    with pytest.raises(AccountError):
        AccountBook().remove_first()


def test_sort_by_code_orders_ascending():
    book = _book(30, 10, 20)
    book.sort_by_code()
    assert _codes(book) == [10, 20, 30]


def test_sort_by_bank_orders_alphabetically_and_is_stable():
    book = AccountBook(
        [
            Account(code=1, bank="Zeta"),
            Account(code=2, bank="Alfa"),
            Account(code=3, bank="Zeta"),
            Account(code=4, bank="Beta"),
        ]
    )
    book.sort_by_bank()
    assert [account.bank for account in book] == ["Alfa", "Beta", "Zeta", "Zeta"]
    assert _codes(book) == [2, 4, 1, 3]


def test_sort_by_bank_uses_byte_order():
    book = AccountBook([Account(code=1, bank="b"), Account(code=2, bank="C")])
    book.sort_by_bank()
    assert _codes(book) == [2, 1]


@pytest.mark.parametrize("method", ["sort_by_code", "sort_by_bank"])
def test_sorting_empty_book_raises(method):
    with pytest.raises(EmptyBookError):
        getattr(AccountBook(), method)()