"""A cash-machine simulator: a banknote multiset, greedy withdrawals, an ordered log and a console."""

__version__ = "0.1.0"