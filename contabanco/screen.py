"""Fixed-layout console screens drawn with cursor positioning."""

from __future__ import annotations

import sys
from typing import TextIO

_ESC = "\x1b["
_RULE = "-" * 99
_BORDER = "+" + "-" * 99 + "+"


class Screen:
    """Draws text at absolute console positions (0-based column and row)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def _emit(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def move(self, x: int, y: int) -> None:
        """Place the cursor at column x, row y."""
        self._emit(f"{_ESC}{y + 1};{x + 1}H")

    def write_at(self, x: int, y: int, text: str) -> None:
        """Write text starting at column x, row y."""
        self._emit(f"{_ESC}{y + 1};{x + 1}H{text}")

    def clear(self) -> None:
        """Clear the console in light cyan on black and home the cursor."""
        self._emit(f"{_ESC}96;40m{_ESC}2J{_ESC}H")

    def frame(self) -> None:
        """Clear the console and draw the bordered main frame."""
        self.clear()
        for row in range(1, 29):
            self.write_at(1, row, "|")
            self.write_at(101, row, "|")
        for row in (1, 5, 25, 29):
            self.write_at(1, row, _BORDER)
        self.write_at(83, 2, "Estrutura de Dados")
        self.write_at(2, 3, "SISTEMA CONTROLE BANCARIO")
        self.write_at(2, 26, "MSG:")

    def account_form(self) -> None:
        """Labels of the account data form."""
        labels = (
            "Codigo da Conta..: ",
            "Banco............: ",
            "Agencia..........: ",
            "Numero da Conta..: ",
            "Tipo de Conta....: ",
            "Saldo............: ",
            "Limite...........: ",
            "Status...........: ",
        )
        for row, label in zip(range(7, 22, 2), labels):
            self.write_at(5, row, label)

    def accounts_header(self) -> None:
        """Title and column headings of the account table."""
        self.write_at(39, 4, "CONSULTA DE CONTAS")
        self.write_at(2, 7, _RULE)
        for x, heading in (
            (2, "Cd"),
            (5, "Banco"),
            (25, "Agenc"),
            (31, "Conta"),
            (40, "Tipo Conta"),
            (55, "Saldo"),
            (67, "Limite"),
            (78, "St"),
        ):
            self.write_at(x, 6, heading)

    def movements_header(self) -> None:
        """Title and column headings of the movement listing."""
        self.write_at(39, 4, "LISTA MOVIMENTACAOS BANCARIAS")
        self.write_at(2, 7, _RULE)
        self.write_at(2, 6, "Codigo:")
        self.write_at(2, 8, "Dt.Movim")
        self.write_at(2, 9, _RULE)
        for x, heading in (
            (13, "Favorecido"),
            (43, "TpMovim"),
            (57, "Vl.Movim"),
            (69, "Saldo"),
        ):
            self.write_at(x, 8, heading)

    def movement_form(self) -> None:
        """Labels of the movement registration form."""
        self.write_at(39, 4, "CADASTRAR MOVIMENTACAO BANCARIA")
        upper = (
            "Sequencia Movimentacao.:",
            "Codigo da Conta........:",
            "Banco..................:",
            "Agencia................:",
            "Numero da Conta........:",
            "Tipo da Conta..........:",
            "Saldo..................:",
            "Limite.................:",
            "Total Saldo + Limite...:",
        )
        for row, label in enumerate(upper, start=8):
            self.write_at(16, row, label)
        self.write_at(2, 17, _RULE)
        lower = (
            "1-Data Movimentacao....:",
            "2-Tipo Movimentacao....:",
            "3-Favorecido...........:",
            "4-Valor Movimentacao...:",
            "5-Novo Saldo...........:",
        )
        for row, label in enumerate(lower, start=18):
            self.write_at(16, row, label)

    def transfer_form(self) -> None:
        """Two-column form for a transfer between accounts."""
        self.write_at(35, 4, "TRANSFERENCIA ENTRE CONTAS BANCARIAS")
        self.write_at(
            2, 9,
            "-----------C O N T A  O R I G E M------------------+"
            "---------C O N T A  D E S T I N O--------------",
        )
        pairs = (
            ("Conta de origem:", "Conta de destino:"),
            ("Banco..........:", "Banco...........:"),
            ("Agencia........:", "Agencia.........:"),
            ("Numero da conta:", "Numero da conta.:"),
            ("Tipo da Conta..:", "Tipo da Conta...:"),
            ("Saldo..........:", "Saldo...........:"),
            ("Limite.........:", "Limite..........:"),
            ("Saldo + Limite.:", "Saldo + Limite..:"),
            ("Novo Saldo.....:", "Novo Saldo......:"),
        )
        for row, (left, right) in enumerate(pairs, start=10):
            self.write_at(12, row, f"{left:<41}| {right}")
        self.write_at(
            2, 19,
            "---------------------------------------------------+"
            "-----------------------------------------------",
        )
        self.write_at(27, 20, "Valor a Ser Transferido:")
        self.write_at(27, 21, "Data Da Transferencia..:")