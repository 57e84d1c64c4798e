"""
Logging subsystem: handlers and views for application logging.

Modules:

- :mod:`SimpleExpenseTracker.log.log` – Log handler integrating with Python logging.
- :mod:`SimpleExpenseTracker.log.view` – Dock widget rendering the in-memory log records.
"""
