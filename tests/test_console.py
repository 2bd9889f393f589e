import io
import sys

import pytest

from bancomat.collection import Collection
from bancomat.console import Console, load_banknotes, main, transaction_less
from bancomat.transaction import Transaction


def make_console(text, banknotes=None):
    out = io.StringIO()
    console = Console(banknotes if banknotes is not None else Collection(), io.StringIO(text), out)
    return console, out


def test_load_banknotes(tmp_path):
    path = tmp_path / "notes.in"
    path.write_text("2 100\n3 50\n")
    notes = load_banknotes(path)
    assert notes.occurrences(100) == 2
    assert notes.occurrences(50) == 3
    assert [e.value for e in notes] == [100, 50]


def test_load_banknotes_stops_at_bad_token(tmp_path):
    path = tmp_path / "notes.in"
    path.write_text("1 10 x 20 4 5")
    notes = load_banknotes(path)
    assert notes.size() == 1
    assert 5 not in notes


def test_load_banknotes_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_banknotes(tmp_path / "absent.in")


def test_transaction_less_orders_by_date_then_amount():
    stock = Collection([10] * 10)
    early = Transaction(0, 10, "2024-01-01", stock)
    late = Transaction(1, 10, "2024-02-01", stock)
    bigger = Transaction(2, 20, "2024-01-01", stock)
    assert transaction_less(early, late) is True
    assert transaction_less(late, early) is False
    assert transaction_less(early, bigger) is True


def test_print_options():
    console, out = make_console("")
    console.print_options()
    assert out.getvalue() == "1. Afisare bancnote\n2. Retragere suma\n3. Afisare tranzactii\n"


def test_withdraw_records_and_prints():
    console, out = make_console("", Collection([100, 50]))
    t = console.withdraw(150, "2024-01-01")
    assert t.valid is True
    assert out.getvalue() == str(t)
    assert len(console.transactions) == 1
    assert console.banknotes.size() == 0


def test_run_session():
    console, out = make_console("1\n2\n150 2024-01-01\n3\n", Collection([100, 50, 50]))
    console.run()
    text = out.getvalue()
    assert "1*100 + 2*50" in text
    assert "Suma: Data: " in text
    assert "Tranzactie in data de 2024-01-01, in valoare de:150" in text
    assert console.banknotes.size() == 1
    assert len(console.transactions) == 1


def test_run_invalid_option():
    console, out = make_console("7\n")
    console.run()
    assert "Optiune invalida\n\n" in out.getvalue()


def test_main_runs_until_end_of_input(tmp_path, monkeypatch, capsys):
    path = tmp_path / "notes.in"
    path.write_text("1 100\n")
    monkeypatch.setattr(sys, "stdin", io.StringIO("1\n"))
    assert main([str(path)]) == 0
    assert "1*100" in capsys.readouterr().out