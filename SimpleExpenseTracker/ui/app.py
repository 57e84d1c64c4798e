"""The QApplication instance used by :func:`SimpleExpenseTracker.exec_`.

The application takes its display name and default locale from the settings
metadata and follows later metadata edits.
"""
import logging
import sys
from typing import Any, Optional, Sequence

from PySide6 import QtCore, QtGui, QtWidgets

from .actions import signals
from ..settings import lib


def set_display_name(name: Optional[str]) -> None:
    QtGui.QGuiApplication.setApplicationDisplayName(name or lib.app_name)


def set_default_locale(locale: Optional[str]) -> None:
    """Set the Qt default locale used by the input editors."""
    if not locale:
        return
    QtCore.QLocale.setDefault(QtCore.QLocale(locale))
    logging.debug(f'Default locale set to {locale}')


def apply_settings(settings: Optional[lib.SettingsAPI] = None) -> None:
    """Apply the configured ledger name and locale to the running application."""
    if settings is None:
        settings = lib.get_settings()
    set_display_name(settings['name'])
    set_default_locale(settings['locale'])


def on_metadata_changed(key: str, value: Any) -> None:
    if key == 'name':
        set_display_name(value)
    elif key == 'locale':
        set_default_locale(value)


class Application(QtWidgets.QApplication):
    """QApplication named after the configured ledger.

    Args:
        argv: Command line arguments. Defaults to ``sys.argv``.
    """

    def __init__(self, argv: Optional[Sequence[str]] = None) -> None:
        super().__init__(list(sys.argv if argv is None else argv))

        from .. import __version__
        self.setApplicationName(lib.app_name)
        self.setApplicationVersion(__version__)
        self.setQuitOnLastWindowClosed(True)

        apply_settings()
        signals.metadataChanged.connect(on_metadata_changed)
