# contabanco

A full-screen terminal program for keeping a small book of bank accounts
and the debit, credit and transfer movements made on them. Screens are
drawn with ANSI cursor positioning; all prompts and messages are in
Portuguese.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running

```
contabanco
```

Options:

- `--contas FILE`: account file (default `contas.dat`).
- `--movimentacoes FILE`: movement file (default `movimentacoes.dat`).

Both files are read at start-up if they exist and are rewritten when you
leave through **Sair**.

The main menu has three choices:

1. **Cadastro de Contas**: add accounts at the start of the book or at a
   chosen 1-based position; remove the first account, the last account or
   the account at a position; change an account's fields (each change is
   confirmed, and undone if not); list accounts one screen at a time, look
   one up by code, or show a table ordered by code or by bank name with
   totals of balance and limit. Showing the ordered table leaves the book
   in that order.
2. **Movimentacao Financeira**: record a debit or credit on an account,
   transfer an amount between two accounts, or list the movements of an
   account.
3. **Sair**: save both files and leave.

Each account has a code, bank, agency, account number, type
(1 Corrente, 2 Poupanca, 3 Cartao Credito), balance, limit and status.
Account codes are unique.

A recorded debit or credit carries the balance that results from applying
it, but the account's own balance is left unchanged. A transfer is refused
when the origin balance is lower than the amount; when it is made, both
account balances change and two movements are written: a debit on the
origin and a credit on the destination, with consecutive sequence numbers,
each naming the other account's number as payee.

## What it does not do

The menu entry for adding an account at the end of the book
(**Cadastrar Contas Bancarias no Final**) is shown but only answers
"Opcao indisponivel!". From the library, `AccountBook.insert_last` adds an
account at the end.

## Data files

Each file is a plain sequence of fixed-size little-endian binary records,
with text kept NUL-terminated in fixed-width fields. A missing file is read
as empty, and a trailing partial record is ignored.

## Using it as a library

- `contabanco.models`: `Account`, `Movement`, `AccountType`,
  `MovementKind`, `account_type_label`.
- `contabanco.storage`: `load_accounts`, `save_accounts`,
  `load_movements`, `save_movements`, the record codecs `pack_account`,
  `unpack_account`, `pack_movement` and `unpack_movement`, and
  `StorageError`.
- `contabanco.accounts`: `AccountBook`, an ordered book of accounts with
  lookup by code, insertion and removal at the start, end or a 1-based
  position, and sorting by code or bank; errors `DuplicateAccountError`,
  `EmptyBookError` and `InvalidPositionError`.
- `contabanco.movements`: `MovementLog`, `record_movement`, `transfer` and
  `InsufficientFundsError`.
- `contabanco.screen`, `contabanco.reports`, `contabanco.forms` and
  `contabanco.cli`: the console drawing, views, input forms and menus the
  program is built from. `forms.Console` takes a `Screen` and a function
  that returns typed lines, so the menus can be driven without a terminal.

```python
from contabanco.accounts import AccountBook
from contabanco.models import Account, MovementKind
from contabanco.movements import MovementLog, record_movement, transfer

book = AccountBook([])
book.insert_last(Account(1, "Banco A", "0001", "TEST-001", "1", 500.0, 100.0, 1))
book.insert_last(Account(2, "Banco B", "0002", "TEST-002", "2", 50.0, 0.0, 1))

log = MovementLog([])
record_movement(log, book.find(1), MovementKind.CREDIT, 25.0, "01/12/2024", "Maria")
transfer(log, book.find(1), book.find(2), 100.0, "02/12/2024")
```