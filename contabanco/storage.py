"""Binary files holding the account and movement records.

Each file is a plain sequence of fixed-size little-endian records; strings are
NUL-terminated inside fixed-width fields.
"""

from __future__ import annotations

import os
import struct
from collections.abc import Iterable

from .models import Account, Movement

ACCOUNTS_FILE = "contas.dat"
MOVEMENTS_FILE = "movimentacoes.dat"

_ENCODING = "latin-1"

# code, bank[50], agency[10], number[20], type[20], balance, limit, status, padding
_ACCOUNT = struct.Struct("<i50s10s20s20sddi4x")
# sequence, account code, date[11], kind[15], payee[50], amount, balance
_MOVEMENT = struct.Struct("<ii11s15s50sff")

ACCOUNT_RECORD_SIZE = _ACCOUNT.size
MOVEMENT_RECORD_SIZE = _MOVEMENT.size


class StorageError(Exception):
    """A record could not be encoded, decoded, read or written."""


def _encode(text: str, size: int, field: str) -> bytes:
    try:
        raw = text.encode(_ENCODING)
    except UnicodeEncodeError as exc:
        raise StorageError(f"{field}: unsupported characters in {text!r}") from exc
    if b"\0" in raw:
        raise StorageError(f"{field}: text may not contain NUL")
    if len(raw) >= size:
        raise StorageError(f"{field}: {text!r} is longer than {size - 1} bytes")
    return raw


def _decode(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode(_ENCODING)


def pack_account(account: Account) -> bytes:
    """Encode an account as one fixed-size record."""
    try:
        return _ACCOUNT.pack(
            account.code,
            _encode(account.bank, 50, "bank"),
            _encode(account.agency, 10, "agency"),
            _encode(account.number, 20, "number"),
            _encode(account.account_type, 20, "account_type"),
            account.balance,
            account.limit,
            account.status,
        )
    except (struct.error, OverflowError) as exc:
        raise StorageError(f"cannot encode account {account.code!r}: {exc}") from exc


def unpack_account(data: bytes) -> Account:
    """Decode one account record."""
    try:
        code, bank, agency, number, kind, balance, limit, status = _ACCOUNT.unpack(data)
    except struct.error as exc:
        raise StorageError(f"account record must be {_ACCOUNT.size} bytes") from exc
    return Account(
        code=code,
        bank=_decode(bank),
        agency=_decode(agency),
        number=_decode(number),
        account_type=_decode(kind),
        balance=balance,
        limit=limit,
        status=status,
    )


def pack_movement(movement: Movement) -> bytes:
    """Encode a movement as one fixed-size record."""
    try:
        return _MOVEMENT.pack(
            movement.sequence,
            movement.account_code,
            _encode(movement.date, 11, "date"),
            _encode(str(movement.kind.value if hasattr(movement.kind, "value") else movement.kind), 15, "kind"),
            _encode(movement.payee, 50, "payee"),
            movement.amount,
            movement.balance,
        )
    except (struct.error, OverflowError) as exc:
        raise StorageError(
            f"cannot encode movement {movement.sequence!r}: {exc}"
        ) from exc


def unpack_movement(data: bytes) -> Movement:
    """Decode one movement record."""
    try:
        sequence, code, date, kind, payee, amount, balance = _MOVEMENT.unpack(data)
    except struct.error as exc:
        raise StorageError(f"movement record must be {_MOVEMENT.size} bytes") from exc
    return Movement(
        sequence=sequence,
        account_code=code,
        date=_decode(date),
        kind=_decode(kind),
        payee=_decode(payee),
        amount=amount,
        balance=balance,
    )


def _read_records(path: str | os.PathLike[str], size: int) -> list[bytes]:
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except FileNotFoundError:
        return []
    except OSError as exc:
        raise StorageError(f"cannot read {os.fspath(path)}: {exc}") from exc
    complete = len(data) - len(data) % size
    return [data[start:start + size] for start in range(0, complete, size)]


def _write_records(path: str | os.PathLike[str], records: Iterable[bytes]) -> None:
    payload = b"".join(records)
    try:
        with open(path, "wb") as handle:
            handle.write(payload)
    except OSError as exc:
        raise StorageError(f"cannot write {os.fspath(path)}: {exc}") from exc


def load_accounts(path: str | os.PathLike[str] = ACCOUNTS_FILE) -> list[Account]:
    """Read every complete account record; a missing file gives an empty list."""
    return [unpack_account(record) for record in _read_records(path, _ACCOUNT.size)]


def save_accounts(
    accounts: Iterable[Account], path: str | os.PathLike[str] = ACCOUNTS_FILE
) -> None:
    """Overwrite the file with the given accounts, in order."""
    _write_records(path, [pack_account(account) for account in accounts])


def load_movements(path: str | os.PathLike[str] = MOVEMENTS_FILE) -> list[Movement]:
    """Read every complete movement record; a missing file gives an empty list."""
    return [unpack_movement(record) for record in _read_records(path, _MOVEMENT.size)]


def save_movements(
    movements: Iterable[Movement], path: str | os.PathLike[str] = MOVEMENTS_FILE
) -> None:
    """Overwrite the file with the given movements, in order."""
    _write_records(path, [pack_movement(movement) for movement in movements])