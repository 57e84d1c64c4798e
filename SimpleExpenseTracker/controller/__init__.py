"""
Controller package: input validation, transaction filters and the controller.

Modules:

- :mod:`SimpleExpenseTracker.controller.validation` – Amount and category checks (:class:`InputValidation`).
- :mod:`SimpleExpenseTracker.controller.filters` – :class:`TransactionFilter` and the amount and category filters.
- :mod:`SimpleExpenseTracker.controller.controller` – :class:`ExpenseTrackerController`.
"""
