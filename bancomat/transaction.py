"""Cash withdrawals paid out greedily from a stock of banknotes."""

from __future__ import annotations

from bancomat.collection import Collection


def dispense(amount: int, banknotes: Collection[int]) -> Collection[int] | None:
    """Pay ``amount`` greedily, always taking the largest note that still fits.

    On success the taken notes are removed from ``banknotes`` and returned.
    If the amount cannot be paid exactly, ``banknotes`` is left untouched and
    None is returned.
    """
    stock = banknotes.copy()
    taken: Collection[int] = Collection()
    remaining = amount
    while remaining:
        fitting = [e.value for e in stock if e.frequency > 0 and 0 < e.value <= remaining]
        if not fitting:
            return None
        note = max(fitting)
        stock.remove(note)
        taken.add(note)
        remaining -= note

    for entry in taken:
        for _ in range(entry.frequency):
            banknotes.remove(entry.value)
    return taken


class Transaction:
    """A withdrawal request and the notes paid out for it, if it could be paid."""

    def __init__(self, id: int, amount: int, date: str, banknotes: Collection[int]) -> None:
        self.id = id
        self.amount = amount
        self.date = date
        paid = dispense(amount, banknotes)
        self.valid = paid is not None
        self.notes: Collection[int] = paid if paid is not None else Collection()

    def __str__(self) -> str:
        if self.valid:
            return f"Tranzactie in data de {self.date}, in valoare de:{self.amount} \n{self.notes}"
        return f"Tranzactia in valoare de {self.amount} nu se poate realiza\n"