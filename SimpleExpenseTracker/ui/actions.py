"""Application-wide Qt signals for SimpleExpenseTracker.

This module provides:
    - Signals: custom Qt signals for configuration changes, errors and UI actions (showLogs).
"""
from PySide6 import QtCore


class Signals(QtCore.QObject):
    """Centralized Qt signals for application config and UI events."""
    configSectionChanged = QtCore.Signal(str)
    metadataChanged = QtCore.Signal(str, object)

    showLogs = QtCore.Signal()

    error = QtCore.Signal(str)


signals = Signals()
