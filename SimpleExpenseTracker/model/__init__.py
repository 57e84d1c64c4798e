"""
Model package: the transaction record and the observable expense tracker model.

Modules:

- :mod:`SimpleExpenseTracker.model.transaction` – The immutable :class:`Transaction` record.
- :mod:`SimpleExpenseTracker.model.model` – :class:`ExpenseTrackerModel` and its listener protocol.
"""
