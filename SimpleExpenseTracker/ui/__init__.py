"""
UI package: application signals, application setup, and the main window.

This package provides:

- :mod:`SimpleExpenseTracker.ui.actions` – Application-wide Qt signals.
- :mod:`SimpleExpenseTracker.ui.app` – QApplication subclass following the settings metadata.
- :mod:`SimpleExpenseTracker.ui.view` – The transactions table model and the main window.
- :mod:`SimpleExpenseTracker.ui.main` – Wires the model, view and controller together.
"""
