"""
Status package: status codes and status-carrying exceptions.

Modules:

- :mod:`SimpleExpenseTracker.status.status` – Status enum, user-facing messages, and exceptions.
"""
