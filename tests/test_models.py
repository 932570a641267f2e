import pytest

from contabanco.models import (
    Account,
    AccountType,
    Movement,
    MovementKind,
    account_type_label,
)


@pytest.mark.parametrize(
    "code, label",
    [
        ("1", "Corrente"),
        ("2", "Poupanca"),
        ("3", "Cartao Credito"),
        ("1\n", "Corrente"),
        ("3-anything", "Cartao Credito"),
    ],
)
def test_account_type_label_known(code, label):
    assert account_type_label(code) == label


@pytest.mark.parametrize("code", ["", "4", "x", " 1"])
def test_account_type_label_unknown(code):
    assert account_type_label(code) is None


def test_account_type_enum_labels_match_function():
    for member in AccountType:
        assert member.label == account_type_label(member.value)


@pytest.mark.parametrize(
    "text, kind",
    [("Debito", MovementKind.DEBIT), ("Credito", MovementKind.CREDIT)],
)
def test_movement_kind_from_stored_text(text, kind):
    assert MovementKind(text) is kind


def test_movement_kind_rejects_unknown_text():
    with pytest.raises(ValueError):
        MovementKind("Saque")


def test_account_type_label_method_known():
    account = Account(code=1, account_type="2")
    assert account.type_label() == "Poupanca"


def test_account_type_label_method_falls_back_to_raw_text():
    account = Account(code=1, account_type="9-outro")
    assert account.type_label() == "9-outro"


def test_account_available_is_balance_plus_limit():
    account = Account(code=5, balance=250.5, limit=100.25)
    assert account.available() == account.balance + account.limit


def test_account_defaults_to_active_status():
    assert Account(code=3).status == 1


def test_movement_holds_fields():
    movement = Movement(
        sequence=4,
        account_code=9,
        date="01/02/2024",
        kind=MovementKind.CREDIT,
        payee="Maria",
        amount=10.0,
        balance=20.0,
    )
    assert movement.kind == "Credito"
    assert (movement.sequence, movement.account_code) == (4, 9)