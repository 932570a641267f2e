"""Menus of the bank control system and the command that starts it."""

from __future__ import annotations

import argparse
import os
from collections.abc import Sequence

from .accounts import AccountBook, EmptyBookError, InvalidPositionError
from .forms import (
    DATE_WIDTH,
    Console,
    alter_account,
    read_movement_date,
    read_movement_kind,
    read_movement_payee,
    read_movement_value,
    register_account_at,
    register_account_first,
)
from .models import Account, Movement
from .movements import InsufficientFundsError, MovementLog, record_movement, transfer
from .reports import format_money, show_account, show_account_table, show_movements
from .storage import (
    ACCOUNTS_FILE,
    MOVEMENTS_FILE,
    StorageError,
    load_accounts,
    load_movements,
    save_accounts,
    save_movements,
)

_MESSAGE_X = 7
_MESSAGE_Y = 26
_STATUS_Y = 27
_BLANK = " " * 60
_YES = 1
_NO = 2
_EMPTY_QUERY = "Lista esta vazia. Nenhuma conta para consultar."
_EMPTY_REMOVE = "Lista vazia! Nenhuma conta para remover."
_PRESS_KEY = "Pressione uma tecla para continuar..."


def _prompt_int(console: Console, text: str) -> int:
    console.message(text)
    return console.ask_int(_MESSAGE_X + len(text), _MESSAGE_Y)


def _status_line(console: Console, text: str) -> None:
    console.screen.write_at(_MESSAGE_X, _STATUS_Y, _BLANK)
    console.screen.write_at(_MESSAGE_X, _STATUS_Y, text)


def _ask_word(console: Console, x: int, y: int) -> str:
    while True:
        words = console.ask(x, y).split()
        if words:
            return words[0]


def _warn(console: Console, text: str) -> None:
    console.message(text)
    console.pause()


def _menu(console: Console, title_at: tuple[int, int], title: str,
          items: Sequence[tuple[int, str]]) -> int:
    screen = console.screen
    screen.frame()
    screen.write_at(*title_at, title)
    for row, text in items:
        screen.write_at(33, row, text)
    return _prompt_int(console, "Escolha uma opcao: ")


def _account_screen(console: Console, title: str, x: int = 34) -> None:
    console.screen.frame()
    console.screen.account_form()
    console.screen.write_at(x, 4, title)


def _remove_loop(console: Console, book: AccountBook, title: str, pick, take) -> list[Account]:
    removed: list[Account] = []
    while True:
        _account_screen(console, title)
        if len(book) == 0:
            _warn(console, _EMPTY_REMOVE)
            return removed
        show_account(console.screen, pick())
        if _prompt_int(console, "Deseja remover esta conta? (1-Sim / 2-Nao): ") == _YES:
            removed.append(take())
            console.message("Conta removida com sucesso!")
        if _prompt_int(console, "Deseja remover outra conta? (1-Sim / 2-Nao): ") != _YES:
            return removed


def remove_first(console: Console, book: AccountBook) -> list[Account]:
    """Offer the first account for removal, repeatedly; return the removed ones."""
    return _remove_loop(console, book, "REMOVER CONTA NO INICIO", book.first, book.remove_first)


def remove_last(console: Console, book: AccountBook) -> list[Account]:
    """Offer the last account for removal, repeatedly; return the removed ones."""
    return _remove_loop(console, book, "REMOVER CONTA NO FINAL", book.last, book.remove_last)


def remove_at(console: Console, book: AccountBook) -> list[Account]:
    """Remove accounts chosen by 1-based position; return the removed ones."""
    removed: list[Account] = []
    while True:
        _account_screen(console, "REMOVER CONTA EM POSICOES")
        if len(book) == 0:
            _warn(console, _EMPTY_REMOVE)
            return removed
        position = _prompt_int(console, "Digite a posicao para remover: ")
        if position < 1:
            _warn(console, "Posicao invalida!")
            return removed
        try:
            account = book.at(position)
        except InvalidPositionError:
            _warn(console, "Posicao Invalida!")
            return removed
        show_account(console.screen, account)
        if _prompt_int(console, "Deseja remover esta conta? (1-Sim / 2-Nao): ") == _YES:
            removed.append(book.remove_at(position))
            console.message("Conta removida com sucesso!")
        else:
            console.message("Remocao cancelada.")
        console.pause()
        if _prompt_int(console, "Deseja remover outra conta? (1-Sim / 2-Nao): ") != _YES:
            return removed


def query_all(console: Console, book: AccountBook) -> int:
    """Show every account, one screen each; return how many were shown."""
    if len(book) == 0:
        _warn(console, _EMPTY_QUERY)
        return 0
    shown = 0
    for account in book:
        _account_screen(console, "CONSULTA DE CONTAS ", x=39)
        show_account(console.screen, account)
        _warn(console, _PRESS_KEY)
        shown += 1
    return shown


def query_by_code(console: Console, book: AccountBook) -> list[Account]:
    """Look accounts up by code until the user stops; return those found."""
    found: list[Account] = []
    while True:
        _account_screen(console, "CONSULTAR CONTAS POR POSICAO")
        console.message("Digite 0 para sair")
        code = console.ask_int(24, 7)
        if code == 0:
            return found
        account = book.find(code)
        if account is not None:
            _account_screen(console, "CONSULTAR CONTAS POR POSICAO")
            show_account(console.screen, account)
            found.append(account)
        else:
            _status_line(console, f"Conta com codigo {code} nao encontrada.")
        question = "Deseja Consultar outra conta? (1-Sim / 2-Nao): "
        answer = _prompt_int(console, question)
        while answer not in (_YES, _NO):
            console.message("Resposta invalida! Digite 1 para Sim ou 2 para Nao.")
            answer = _prompt_int(console, question)
        if answer != _YES:
            return found


def _sorted_table(console: Console, book: AccountBook, sort, title: str) -> None:
    try:
        sort()
    except EmptyBookError:
        _warn(console, _EMPTY_QUERY)
        return
    show_account_table(console.screen, book, title)
    _warn(console, _PRESS_KEY)


def query_menu(console: Console, book: AccountBook) -> None:
    """Menu of the account queries."""
    items = (
        (10, "1. Consulta Geral Contas Bancarias"),
        (12, "2. Consultar por Codigo Contas Bancarias"),
        (14, "3. Consulta Ordem Codigo Contas Bancarias"),
        (16, "4. Consultar Ordem Alfabetica Contas Bancarias"),
        (18, "5. Retornar ao Menu Anterior"),
    )
    while True:
        choice = _menu(console, (35, 4), "CONSULTA DE CONTAS BANCARIAS", items)
        if choice == 1:
            query_all(console, book)
        elif choice == 2:
            query_by_code(console, book)
        elif choice == 3:
            _sorted_table(console, book, book.sort_by_code, "CONTAS ORDENADAS POR CODIGO")
        elif choice == 4:
            _sorted_table(console, book, book.sort_by_bank,
                          "CONTAS ORDENADAS EM ORDEM ALFABETICA")
        elif choice == 5:
            return
        else:
            _warn(console, "Opcao invalida!")


def register_movement(console: Console, book: AccountBook, log: MovementLog) -> list[Movement]:
    """Register debits and credits against accounts; return the new movements."""
    recorded: list[Movement] = []
    screen = console.screen
    while True:
        screen.frame()
        screen.movement_form()
        screen.write_at(40, 8, f" {log.next_sequence()}")
        console.message("Digite 0 para sair.")
        code = console.ask_int(41, 9)
        if code == 0:
            return recorded
        account = book.find(code)
        if account is None:
            _warn(console, "Conta bancaria nao cadastrada!")
            continue

        screen.write_at(41, 10, account.bank)
        screen.write_at(41, 11, account.agency)
        screen.write_at(41, 12, account.number)
        screen.write_at(41, 13, account.type_label())
        screen.write_at(41, 14, format_money(account.balance))
        screen.write_at(41, 15, format_money(account.limit))
        screen.write_at(41, 16, format_money(account.available()))

        console.message("Data da Movimentacao (DD/MM/YYYY) ")
        date = read_movement_date(console)
        kind = read_movement_kind(console)
        payee = read_movement_payee(console)
        amount = read_movement_value(console)
        movement = record_movement(log, account, kind, amount, date, payee)
        recorded.append(movement)
        screen.write_at(41, 22, format_money(movement.balance))

        if _prompt_int(console, "Confirma gravacao do movimento? (1-Sim / 2-Nao): ") == _YES:
            _warn(console, "Movimento gravado com sucesso!")
        if _prompt_int(console, "Cadastrar nova movimentacao? (1-Sim / 2-Nao): ") != _YES:
            return recorded


def _show_transfer_side(console: Console, x: int, account: Account) -> None:
    screen = console.screen
    screen.write_at(x, 11, account.bank)
    screen.write_at(x, 12, account.agency)
    screen.write_at(x, 13, account.number)
    screen.write_at(x, 14, account.type_label())
    screen.write_at(x, 15, format_money(account.balance))
    screen.write_at(x, 16, format_money(account.limit))
    screen.write_at(x, 17, format_money(account.available()))


def transfer_between(
    console: Console, book: AccountBook, log: MovementLog
) -> list[tuple[Movement, Movement]]:
    """Transfer amounts between accounts; return the debit/credit pairs logged."""
    done: list[tuple[Movement, Movement]] = []
    screen = console.screen
    while True:
        screen.frame()
        screen.transfer_form()
        console.message("Digite 0 para sair.")
        screen.write_at(12, 10, "Conta de origem: ")
        origin_code = console.ask_int(29, 10)
        if origin_code == 0:
            return done
        screen.write_at(55, 10, "Conta de destino: ")
        destination_code = console.ask_int(73, 10)
        if destination_code == 0:
            return done

        origin = book.find(origin_code)
        destination = book.find(destination_code)
        if origin is None or destination is None:
            _warn(console, "Uma ou ambas as contas nao foram encontradas!")
            return done

        _show_transfer_side(console, 29, origin)
        _show_transfer_side(console, 73, destination)

        screen.write_at(27, 20, "Valor a ser transferido: ")
        amount = console.ask_float(52, 20)
        screen.write_at(27, 21, "Data Da Transferencia..: ")
        date = _ask_word(console, 52, 21)[:DATE_WIDTH]

        try:
            done.append(transfer(log, origin, destination, amount, date))
        except InsufficientFundsError:
            _warn(console, "Saldo insuficiente na conta de origem!")
            return done

        screen.write_at(29, 18, format_money(origin.balance))
        screen.write_at(73, 18, format_money(destination.balance))
        _warn(console, "Transferencia realizada com sucesso!")
        question = "Deseja fazer uma nova transferencia? (1-Sim / 2-Nao): "
        if _prompt_int(console, question) == _NO:
            return done


def query_movements(console: Console, book: AccountBook, log: MovementLog) -> int | None:
    """List one account's movements; return how many, or None if no account was shown."""
    screen = console.screen
    screen.frame()
    screen.movements_header()
    console.message("Digite 0 para Sair.")
    code = console.ask_int(10, 6)
    if code == 0:
        return None
    account = book.find(code)
    if account is None:
        _warn(console, "Conta nao encontrada. Pressione qualquer tecla para continuar...")
        return None
    shown = show_movements(screen, account, list(log))
    _warn(console, "Pressione qualquer tecla para continuar...")
    return shown


def accounts_menu(console: Console, book: AccountBook) -> None:
    """Menu for registering, removing, altering and querying accounts."""
    items = (
        (11, "1. Cadastrar Contas Bancarias no Final"),
        (12, "2. Cadastrar Contas Bancarias no Inicio"),
        (13, "3. Cadastrar Contas Bancarias na Posicao"),
        (14, "4. Remover Contas Bancarias no Final"),
        (15, "5. Remover Contas Bancarias no Inicio"),
        (16, "6. Remover Contas Bancarias na Posicao"),
        (17, "7. Alteracao de Contas Bancarias"),
        (18, "8. Consultar Contas Bancarias"),
        (19, "9. Retornar ao Menu Anterior"),
    )
    actions = {
        2: register_account_first,
        3: register_account_at,
        4: remove_last,
        5: remove_first,
        6: remove_at,
        7: alter_account,
        8: query_menu,
    }
    while True:
        choice = _menu(console, (35, 6), "CADASTRO DE CONTAS", items)
        if choice == 9:
            return
        action = actions.get(choice)
        if action is not None:
            action(console, book)
        elif choice == 1:
            _warn(console, "Opcao indisponivel!")
        else:
            _warn(console, "Opcao invalida!")


def movements_menu(console: Console, book: AccountBook, log: MovementLog) -> None:
    """Menu for movements, transfers and movement queries."""
    items = (
        (12, "1. Movimentacao de Debito e Credito"),
        (14, "2. Transferencia entre Contas Bancarias"),
        (16, "3. Consulta Movimentacao Bancarias"),
        (18, "4. Retornar ao Menu Anterior"),
    )
    actions = {1: register_movement, 2: transfer_between, 3: query_movements}
    while True:
        choice = _menu(console, (35, 6), "TELA DE MOVIMENTACAO FINANCEIRA:", items)
        if choice == 4:
            return
        action = actions.get(choice)
        if action is None:
            _warn(console, "Opcao invalida!")
        else:
            action(console, book, log)


def run(
    console: Console,
    book: AccountBook,
    log: MovementLog,
    accounts_path: str | os.PathLike[str] = ACCOUNTS_FILE,
    movements_path: str | os.PathLike[str] = MOVEMENTS_FILE,
) -> None:
    """Main menu; on exit both files are rewritten."""
    items = (
        (13, "1. Cadastro de Contas"),
        (15, "2. Movimentacao Financeira"),
        (17, "3. Sair"),
    )
    while True:
        choice = _menu(console, (35, 6), "MENU PRINCIPAL", items)
        if choice == 1:
            accounts_menu(console, book)
        elif choice == 2:
            movements_menu(console, book, log)
        elif choice == 3:
            try:
                save_accounts(book, accounts_path)
                _status_line(console, "Contas salvas com sucesso!")
            except StorageError:
                _status_line(console, "Erro ao abrir arquivo para salvar contas!")
            try:
                save_movements(log, movements_path)
                console.screen.write_at(34, _STATUS_Y, "Movimentacaes salvas com sucesso!")
            except StorageError:
                console.screen.write_at(
                    34, _STATUS_Y, "Erro ao abrir arquivo para salvar movimentacaes!"
                )
            console.message("Saindo do sistema...")
            return
        else:
            _warn(console, "Opcao invalida!")


def main(argv: Sequence[str] | None = None) -> int:
    """Load the data files, run the menus and save on exit."""
    parser = argparse.ArgumentParser(prog="contabanco", description="Controle bancario")
    parser.add_argument("--contas", default=ACCOUNTS_FILE, help="arquivo de contas")
    parser.add_argument(
        "--movimentacoes", default=MOVEMENTS_FILE, help="arquivo de movimentacoes"
    )
    args = parser.parse_args(argv)

    console = Console()
    try:
        console.screen.frame()
        if os.path.exists(args.contas):
            book = AccountBook(load_accounts(args.contas))
            console.message("Contas carregadas com sucesso!")
            console.pause()
        else:
            book = AccountBook()
            console.message("Nenhum arquivo de contas encontrado.")

        console.screen.frame()
        if os.path.exists(args.movimentacoes):
            log = MovementLog(load_movements(args.movimentacoes))
            console.message("Movimentacoes carregadas com sucesso!")
            console.pause()
        else:
            log = MovementLog()
            console.message("Nenhum arquivo de movimentacaes encontrado.")

        run(console, book, log, args.contas, args.movimentacoes)
    except StorageError as exc:
        console.message(str(exc))
        return 1
    except (EOFError, KeyboardInterrupt):
        return 1
    return 0