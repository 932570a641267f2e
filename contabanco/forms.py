"""Interactive forms that read accounts and movements from the console."""

from __future__ import annotations

from collections.abc import Callable

from .accounts import AccountBook, InvalidPositionError
from .models import Account, MovementKind, account_type_label
from .screen import Screen

_MESSAGE_X = 7
_MESSAGE_Y = 26
_STATUS_Y = 27
_BLANK = " " * 60

# Longest text each field holds (one byte of each record field is its terminator).
BANK_WIDTH = 49
AGENCY_WIDTH = 9
NUMBER_WIDTH = 19
TYPE_WIDTH = 19
DATE_WIDTH = 10
PAYEE_WIDTH = 49

_YES = 1
_NO = 2

Reader = Callable[[], str]


class Console:
    """A screen plus a source of typed lines, used by every form."""

    def __init__(self, screen: Screen | None = None, reader: Reader | None = None) -> None:
        self.screen = screen if screen is not None else Screen()
        self.reader = reader if reader is not None else input

    def ask(self, x: int, y: int) -> str:
        """Place the cursor at (x, y) and read one line, without surrounding blanks."""
        self.screen.move(x, y)
        return self.reader().strip()

    def ask_int(self, x: int, y: int) -> int:
        """Read a whole number at (x, y), asking again until one is typed."""
        while True:
            text = self.ask(x, y)
            try:
                return int(text)
            except ValueError:
                self.message("Valor invalido! Digite um numero inteiro.")

    def ask_float(self, x: int, y: int) -> float:
        """Read a decimal number at (x, y), asking again until one is typed."""
        while True:
            text = self.ask(x, y)
            try:
                return float(text)
            except ValueError:
                self.message("Valor invalido! Digite um numero.")

    def message(self, text: str) -> None:
        """Replace the message line with the given text."""
        self.screen.write_at(_MESSAGE_X, _MESSAGE_Y, _BLANK)
        self.screen.write_at(_MESSAGE_X, _MESSAGE_Y, text)

    def pause(self) -> None:
        """Wait until the user presses Enter."""
        self.reader()


def _prompt_int(console: Console, text: str) -> int:
    console.message(text)
    return console.ask_int(_MESSAGE_X + len(text), _MESSAGE_Y)


def _ask_word(console: Console, x: int, y: int) -> str:
    """First blank-separated word of the next non-empty line."""
    while True:
        words = console.ask(x, y).split()
        if words:
            return words[0]


def _status_line(console: Console, text: str) -> None:
    console.screen.write_at(_MESSAGE_X, _STATUS_Y, _BLANK)
    console.screen.write_at(_MESSAGE_X, _STATUS_Y, text)


def read_movement_date(console: Console) -> str:
    """Read the movement date (DD/MM/YYYY) as a single word."""
    return _ask_word(console, 41, 18)[:DATE_WIDTH]


def read_movement_kind(console: Console) -> MovementKind:
    """Ask for 1 (debit) or 2 (credit) until one of them is chosen."""
    while True:
        console.message("Escolha o tipo de movimentacao: (1-Debito / 2-Credito)")
        choice = console.ask_int(41, 19)
        if choice == 1:
            console.screen.write_at(41, 19, "Debito       ")
            return MovementKind.DEBIT
        if choice == 2:
            console.screen.write_at(41, 19, "Credito      ")
            return MovementKind.CREDIT
        console.message("Opcao invalida! Tente novamente.")
        console.pause()


def read_movement_payee(console: Console) -> str:
    """Read the payee of a movement as a single word."""
    return _ask_word(console, 41, 20)[:PAYEE_WIDTH]


def read_movement_value(console: Console) -> float:
    """Read the amount of a movement."""
    return console.ask_float(41, 21)


def read_account_details(console: Console, code: int) -> Account:
    """Fill the account form for a new account with the given code.

    The account type is asked again until it starts with 1, 2 or 3; the new
    account is active.
    """
    screen = console.screen
    bank = console.ask(24, 9)[:BANK_WIDTH]
    agency = console.ask(24, 11)[:AGENCY_WIDTH]
    number = console.ask(24, 13)[:NUMBER_WIDTH]

    while True:
        console.message("Utilizar: 1=Corrente / 2=Poupanca / 3=Cartao Credito")
        account_type = console.ask(24, 15)[:TYPE_WIDTH]
        label = account_type_label(account_type)
        if label is not None:
            screen.write_at(24, 15, f"{account_type[0]}-{label}")
            break
        console.message("Tipo de Conta invalido")
        console.pause()
        screen.write_at(52, 15, "  ")

    balance = console.ask_float(24, 17)
    limit = console.ask_float(24, 19)
    account = Account(
        code=code,
        bank=bank,
        agency=agency,
        number=number,
        account_type=account_type,
        balance=balance,
        limit=limit,
        status=1,
    )
    screen.write_at(24, 21, str(account.status))
    return account


def _ask_new_code(console: Console, book: AccountBook, title: str) -> int:
    """Ask for an account code not yet in the book; 0 means the user wants out."""
    screen = console.screen
    while True:
        screen.frame()
        screen.account_form()
        screen.write_at(34, 4, title)
        screen.write_at(67, 6, " " * 14)
        console.message("Digite 0 para sair")
        code = console.ask_int(24, 7)
        if code == 0 or book.find(code) is None:
            return code
        console.message("Codigo da conta ja cadastrado!")
        console.pause()


def _register(console: Console, book: AccountBook, title: str, at_position: bool) -> list[Account]:
    registered: list[Account] = []
    while True:
        code = _ask_new_code(console, book, title)
        if code == 0:
            if _prompt_int(console, "Deseja cadastrar outra conta? (1-Sim / 2-Nao): ") != _YES:
                return registered
            continue

        account = read_account_details(console, code)
        position = _prompt_int(console, "Digite qual a posicao: ") if at_position else 1

        if _prompt_int(console, "Deseja gravar os dados? (1-Sim / 2-Nao): ") == _YES:
            try:
                if at_position:
                    book.insert_at(account, position)
                else:
                    book.insert_first(account)
            except InvalidPositionError:
                _status_line(console, "Posicao invalida! A lista nao tem tantas contas.")
                continue
            registered.append(account)
            _status_line(console, "Conta cadastrada com sucesso!")

        if _prompt_int(console, "Deseja cadastrar outra conta? (1-Sim / 2-Nao): ") != _YES:
            return registered


def register_account_first(console: Console, book: AccountBook) -> list[Account]:
    """Register accounts at the start of the book; return those that were saved."""
    return _register(console, book, "CADASTRAR CONTA NO INICIO", at_position=False)


def register_account_at(console: Console, book: AccountBook) -> list[Account]:
    """Register accounts at chosen 1-based positions; return those that were saved."""
    return _register(console, book, "CADASTRAR CONTA EM POSICAO", at_position=True)


def _show_fields(console: Console, account: Account) -> None:
    screen = console.screen
    screen.write_at(24, 7, str(account.code))
    screen.write_at(24, 9, account.bank)
    screen.write_at(24, 11, account.agency)
    screen.write_at(24, 13, account.number)
    screen.write_at(24, 15, account.account_type)
    label = account_type_label(account.account_type)
    if label is not None:
        screen.write_at(24, 15, f"{account.account_type[0]}-{label}")
    screen.write_at(24, 17, f"{account.balance:.2f}")
    screen.write_at(24, 19, f"{account.limit:.2f}")
    screen.write_at(24, 21, str(account.status))


# Field number -> (attribute, form row, longest text or None for numbers).
_EDITABLE = {
    1: ("bank", 9, BANK_WIDTH),
    2: ("agency", 11, AGENCY_WIDTH),
    3: ("number", 13, NUMBER_WIDTH),
    4: ("account_type", 15, TYPE_WIDTH),
    5: ("balance", 17, None),
    6: ("limit", 19, None),
    7: ("status", 21, None),
}


def _read_field(console: Console, attribute: str, row: int, width: int | None) -> object:
    console.screen.write_at(24, row, " " * 18)
    if width is not None:
        return _ask_word(console, 24, row)[:width]
    if attribute == "status":
        return console.ask_int(24, row)
    return console.ask_float(24, row)


def _ask_yes_no(console: Console, question: str) -> int:
    while True:
        answer = _prompt_int(console, question)
        if answer in (_YES, _NO):
            return answer
        console.message("Opcao invalida! Digite 1 para Sim ou 2 para Nao.")
        console.pause()


def alter_account(console: Console, book: AccountBook) -> Account | None:
    """Edit fields of an account chosen by code; return it, or None if none was chosen.

    Each change is confirmed; a change that is not confirmed is undone.
    """
    if len(book) == 0:
        console.message("Lista vazia! Nenhuma conta para alterar.")
        console.pause()
        return None

    screen = console.screen
    screen.frame()
    screen.account_form()
    screen.write_at(39, 4, "ALTERACAO DE CONTA")
    console.message("Digite 0 para sair")
    code = console.ask_int(24, 7)
    if code == 0:
        return None

    account = book.find(code)
    if account is None:
        console.message("Conta nao encontrada!")
        console.pause()
        return None

    _show_fields(console, account)

    while True:
        while True:
            field = _prompt_int(console, "Deseja alterar qual campo? (0-sair): ")
            if 0 <= field <= 7:
                break
            console.message("Campo invalido. Digite um valor entre 0 e 7.")
            console.pause()
        if field == 0:
            break

        attribute, row, width = _EDITABLE[field]
        previous = getattr(account, attribute)
        setattr(account, attribute, _read_field(console, attribute, row, width))

        if _ask_yes_no(console, "Deseja confirmar a alteracao? (1-Sim / 2-Nao): ") == _YES:
            _status_line(console, "Alteracao realizada com sucesso!")
        else:
            setattr(account, attribute, previous)
            _status_line(console, "Alteracao cancelada!")
        console.pause()

        if _prompt_int(console, "Deseja alterar outro campo? (1-Sim / 2-Nao): ") != _YES:
            break
    return account