"""
Settings package: settings file management and locale helpers.

Modules:

- :mod:`SimpleExpenseTracker.settings.lib` – Schema validation, loading and saving of settings.json.
- :mod:`SimpleExpenseTracker.settings.locale` – Babel-based number, currency and date formatting.
"""
