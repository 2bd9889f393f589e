# bancomat

A small cash-machine simulator. It keeps a stock of banknotes, pays out
withdrawals note by note and keeps a log of the withdrawals it has been
asked for, ordered by date, then by amount, then by the number of notes
paid.

## Installing

    pip install .

For the tests:

    pip install .[test]
    pytest

## The banknote file

The stock is read from a plain text file of whitespace-separated pairs: the
number of notes first, then the note's value.

    10 100
    5 50
    20 10

This describes ten notes of 100, five of 50 and twenty of 10. Reading stops
at the first pair that is not made of two integers.

## Running the console

    bancomat Bancnote.in

The file argument is optional and defaults to `Bancnote.in` in the current
directory. If the file cannot be opened, an error is printed and the console
starts with an empty stock.

The console reads whitespace-separated answers from standard input and shows
a menu with three choices:

1. Show the banknotes in stock, in the form `10*100 + 5*50 + 20*10`.
2. Withdraw an amount. You are asked for the amount and then for a date
   (a single word, compared as text). An amount that is not an integer is
   reported as `Suma invalida`.
3. Show the log of withdrawals.

Any other choice is reported as `Optiune invalida`. The console stops when
standard input runs out.

A withdrawal always takes the largest note that still fits in the amount
left to pay. If the amount cannot be paid exactly, nothing is taken from the
stock and the console reports that the withdrawal cannot be made; the failed
attempt is still entered in the log.

## Using it as a library

```python
from bancomat.collection import Collection
from bancomat.transaction import Transaction

stock = Collection([100, 100, 50, 10, 10])
withdrawal = Transaction(0, 160, "2025-03-24", stock)
print(withdrawal)
print(stock)  # 1*100 + 1*10
```

- `bancomat.collection.Collection` is a multiset that keeps each value once,
  with a count (`Entry`), in the order it was first added. `size()` counts
  all occurrences, `len()` and `distinct_count()` count distinct values.
- `bancomat.sorted_set.SortedSet` is a set kept in order by a "less than"
  function you pass in; two items neither of which is less than the other
  count as the same item and only the first is kept.
- `bancomat.transaction.dispense(amount, banknotes)` pays an amount
  greedily. On success it removes the notes from `banknotes` and returns
  them as a `Collection`; if the amount cannot be paid exactly it returns
  `None` and leaves the stock unchanged.
- `bancomat.transaction.Transaction` runs `dispense` and records `id`,
  `amount`, `date`, `valid` and the `notes` paid.
- `bancomat.console.Console` is the interactive menu; it accepts its own
  stock and input and output streams. `load_banknotes` reads a banknote
  file into a `Collection`, and `transaction_less` is the ordering used for
  the log.

## What it does not do

The stock and the transaction log live only in memory: nothing is written
back to the banknote file, and the log is lost when the console exits.
Transactions that the ordering treats as equal appear in the log only once.