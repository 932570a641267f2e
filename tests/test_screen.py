import io
import re

from contabanco.screen import Screen

WIDTH = 130
HEIGHT = 35
_CSI = re.compile(r"\x1b\[([0-9;]*)([A-Za-z])")


def _render(text):
    """Replay the emitted escape sequences onto a character grid."""
    grid = [[" "] * WIDTH for _ in range(HEIGHT)]
    x = y = 0

    def put(chunk):
        nonlocal x, y
        for ch in chunk:
            if ch == "\n":
                y += 1
                x = 0
            else:
                grid[y][x] = ch
                x += 1

    pos = 0
    for match in _CSI.finditer(text):
        put(text[pos:match.start()])
        pos = match.end()
        params, command = match.group(1), match.group(2)
        if command == "H":
            if params:
                row, col = (int(part) for part in params.split(";"))
                y, x = row - 1, col - 1
            else:
                y = x = 0
        elif command == "J" and params == "2":
            grid = [[" "] * WIDTH for _ in range(HEIGHT)]
    put(text[pos:])
    return grid


def _row(grid, y):
    return "".join(grid[y])


def _screen():
    stream = io.StringIO()
    return Screen(stream), stream


def test_write_at_places_text():
    screen, stream = _screen()
    screen.write_at(3, 4, "hello")
    grid = _render(stream.getvalue())
    assert _row(grid, 4)[3:8] == "hello"
    assert _row(grid, 3).strip() == ""


def test_move_then_plain_write():
    screen, stream = _screen()
    screen.move(10, 2)
    stream.write("abc")
    grid = _render(stream.getvalue())
    assert _row(grid, 2)[10:13] == "abc"


def test_clear_wipes_previous_output():
    screen, stream = _screen()
    screen.write_at(0, 0, "old")
    screen.clear()
    grid = _render(stream.getvalue())
    assert all(_row(grid, y).strip() == "" for y in range(HEIGHT))


def test_frame_borders_and_labels():
    screen, stream = _screen()
    screen.frame()
    grid = _render(stream.getvalue())
    for y in (1, 5, 25, 29):
        row = _row(grid, y)
        assert row[1] == "+" and row[101] == "+"
        assert set(row[2:101]) == {"-"}
    for y in range(2, 29):
        if y in (5, 25):
            continue
        row = _row(grid, y)
        assert row[1] == "|" and row[101] == "|"
    assert "SISTEMA CONTROLE BANCARIO" in _row(grid, 3)
    assert _row(grid, 26)[2:6] == "MSG:"
    assert _row(grid, 2)[83:101] == "Estrutura de Dados"


def test_account_form_labels():
    screen, stream = _screen()
    screen.account_form()
    grid = _render(stream.getvalue())
    assert _row(grid, 7)[5:].startswith("Codigo da Conta..: ")
    assert _row(grid, 9)[5:].startswith("Banco............: ")
    assert _row(grid, 21)[5:].startswith("Status...........: ")


def test_accounts_header_columns():
    screen, stream = _screen()
    screen.accounts_header()
    grid = _render(stream.getvalue())
    header = _row(grid, 6)
    assert header[2:4] == "Cd"
    assert header[40:50] == "Tipo Conta"
    assert header[78:80] == "St"
    assert "CONSULTA DE CONTAS" in _row(grid, 4)


def test_movements_header_columns():
    screen, stream = _screen()
    screen.movements_header()
    grid = _render(stream.getvalue())
    assert _row(grid, 6)[2:9] == "Codigo:"
    headings = _row(grid, 8)
    assert headings[2:10] == "Dt.Movim"
    assert headings[13:23] == "Favorecido"
    assert headings[69:74] == "Saldo"


def test_movement_form_labels():
    screen, stream = _screen()
    screen.movement_form()
    grid = _render(stream.getvalue())
    assert _row(grid, 8)[16:].startswith("Sequencia Movimentacao.:")
    assert _row(grid, 16)[16:].startswith("Total Saldo + Limite...:")
    assert _row(grid, 22)[16:].startswith("5-Novo Saldo...........:")


def test_transfer_form_two_columns():
    screen, stream = _screen()
    screen.transfer_form()
    grid = _render(stream.getvalue())
    row = _row(grid, 10)
    assert row[12:].startswith("Conta de origem:")
    assert "| Conta de destino:" in row
    assert "Saldo + Limite..:" in _row(grid, 17)
    assert _row(grid, 21)[27:].startswith("Data Da Transferencia..:")
    assert "TRANSFERENCIA ENTRE CONTAS BANCARIAS" in _row(grid, 4)