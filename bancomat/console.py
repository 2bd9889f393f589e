"""Interactive cash-machine console."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterator, TextIO

from bancomat.collection import Collection
from bancomat.sorted_set import SortedSet
from bancomat.transaction import Transaction

OPTIONS = ("Afisare bancnote", "Retragere suma", "Afisare tranzactii")
DEFAULT_BANKNOTES_FILE = "Bancnote.in"


def load_banknotes(path: str | Path) -> Collection[int]:
    """Read "count value" pairs, stopping at the first token that is not an integer."""
    banknotes: Collection[int] = Collection()
    tokens = Path(path).read_text().split()
    for count_text, value_text in zip(tokens[::2], tokens[1::2]):
        try:
            count, value = int(count_text), int(value_text)
        except ValueError:
            break
        for _ in range(count):
            banknotes.add(value)
    return banknotes


def transaction_less(first: Transaction, second: Transaction) -> bool:
    """Order transactions by date, then amount, then number of notes paid."""
    return (
        first.date < second.date
        or (first.date == second.date and first.amount < second.amount)
        or (first.amount == second.amount and first.notes.size() < second.notes.size())
    )


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _to_int(token: str) -> int | None:
    try:
        return int(token)
    except ValueError:
        return None


class Console:
    """Menu-driven front end over a stock of banknotes and a transaction log."""

    def __init__(
        self,
        banknotes: Collection[int] | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.banknotes: Collection[int] = banknotes if banknotes is not None else Collection()
        self.transactions: SortedSet[Transaction] = SortedSet(transaction_less)
        self._stdin = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._input = _tokens(self._stdin)
        self._next_id = 0

    def _write(self, text: str) -> None:
        self._out.write(text)

    def print_options(self) -> None:
        for number, option in enumerate(OPTIONS, start=1):
            self._write(f"{number}. {option}\n")

    def show_banknotes(self) -> None:
        self._write(str(self.banknotes))

    def withdraw(self, amount: int, date: str) -> Transaction:
        """Attempt a withdrawal, record it and print its outcome."""
        transaction = Transaction(self._next_id, amount, date, self.banknotes)
        self._next_id += 1
        self.transactions.add(transaction)
        self._write(str(transaction))
        return transaction

    def show_transactions(self) -> None:
        self._write("\n".join(str(t) for t in self.transactions))

    def run(self) -> None:
        """Serve menu choices until the input runs out."""
        while True:
            self.print_options()
            self._write("Option: ")
            token = next(self._input, None)
            if token is None:
                return
            option = _to_int(token)
            if option == 1:
                self.show_banknotes()
            elif option == 2:
                self._write("Suma: ")
                amount_text = next(self._input, None)
                if amount_text is None:
                    return
                self._write("Data: ")
                date = next(self._input, None)
                if date is None:
                    return
                amount = _to_int(amount_text)
                if amount is None:
                    self._write("Suma invalida")
                else:
                    self.withdraw(amount, date)
            elif option == 3:
                self.show_transactions()
            else:
                self._write("Optiune invalida")
            self._write("\n\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="bancomat", description="Cash machine console.")
    parser.add_argument("banknotes", nargs="?", default=DEFAULT_BANKNOTES_FILE,
                        help="file of 'count value' pairs")
    args = parser.parse_args(argv)
    try:
        banknotes = load_banknotes(args.banknotes)
    except OSError:
        print(f"Error opening file {args.banknotes}", file=sys.stderr)
        banknotes = Collection()
    Console(banknotes).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())