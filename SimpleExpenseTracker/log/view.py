"""Log dock widget for displaying the in-memory log records.

This module provides:
    - LogDockWidget: dockable text view with a minimum level filter and a clear action
"""
import logging
from typing import Optional

from PySide6 import QtCore, QtWidgets, QtGui

from . import log
from ..ui.actions import signals

LEVEL_NAMES = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class LogDockWidget(QtWidgets.QDockWidget):
    """Shows the records stored by :class:`~SimpleExpenseTracker.log.log.TankHandler`.

    The tank is polled on a timer; only records at or above the selected level are shown.
    A closed dock reopens itself when an error is logged.
    """

    def __init__(self, parent: Optional[QtWidgets.QWidget] = None, fetch_interval_ms: int = 1000) -> None:
        super().__init__('Logs', parent=parent)
        self.setObjectName('LogDockWidget')
        self.setFeatures(
            QtWidgets.QDockWidget.DockWidgetMovable
            | QtWidgets.QDockWidget.DockWidgetFloatable
            | QtWidgets.QDockWidget.DockWidgetClosable
        )
        self.setAllowedAreas(QtCore.Qt.BottomDockWidgetArea | QtCore.Qt.RightDockWidgetArea)
        self.setMinimumSize(320, 160)

        self.level_combobox: Optional[QtWidgets.QComboBox] = None
        self.clear_button: Optional[QtWidgets.QPushButton] = None
        self.text_view: Optional[QtWidgets.QPlainTextEdit] = None

        self._shown_count = 0
        self._filter_level = logging.NOTSET

        self._timer = QtCore.QTimer(self)
        self._timer.setInterval(fetch_interval_ms)

        self._create_ui()
        self._connect_signals()

        self._timer.start()

    def _create_ui(self) -> None:
        widget = QtWidgets.QWidget(self)
        QtWidgets.QVBoxLayout(widget)

        row = QtWidgets.QWidget(widget)
        QtWidgets.QHBoxLayout(row)
        row.layout().setContentsMargins(0, 0, 0, 0)

        self.level_combobox = QtWidgets.QComboBox(row)
        self.level_combobox.addItem('All', logging.NOTSET)
        for name in LEVEL_NAMES:
            self.level_combobox.addItem(name.title(), getattr(logging, name))

        self.clear_button = QtWidgets.QPushButton('Clear', row)

        row.layout().addWidget(QtWidgets.QLabel('Level:', row))
        row.layout().addWidget(self.level_combobox)
        row.layout().addStretch(1)
        row.layout().addWidget(self.clear_button)

        self.text_view = QtWidgets.QPlainTextEdit(widget)
        self.text_view.setReadOnly(True)
        self.text_view.setLineWrapMode(QtWidgets.QPlainTextEdit.NoWrap)
        self.text_view.setFont(QtGui.QFontDatabase.systemFont(QtGui.QFontDatabase.FixedFont))

        widget.layout().addWidget(row)
        widget.layout().addWidget(self.text_view, 1)
        self.setWidget(widget)

    def sizeHint(self) -> QtCore.QSize:
        return QtCore.QSize(640, 240)

    def _connect_signals(self) -> None:
        self._timer.timeout.connect(self.fetch_new_logs)
        signals.showLogs.connect(self.show_logs)
        self.level_combobox.currentIndexChanged.connect(self.on_level_changed)
        self.clear_button.clicked.connect(self.clear_logs)

    @QtCore.Slot()
    def show_logs(self) -> None:
        """Reopen the dock, fetch pending records and scroll to the newest one."""
        self.show()
        self.raise_()
        self.fetch_new_logs()
        self.text_view.moveCursor(QtGui.QTextCursor.End)

    @QtCore.Slot(int)
    def on_level_changed(self, _index: int) -> None:
        self._filter_level = self.level_combobox.currentData()
        self.reload_logs()

    @QtCore.Slot()
    def fetch_new_logs(self) -> None:
        """Append records added to the tank since the last fetch."""
        handler = log.get_handler()
        if len(handler.tank) < self._shown_count:
            # The tank was cleared elsewhere
            self.reload_logs()
            return

        incoming = handler.tank[self._shown_count:]
        self._shown_count = len(handler.tank)
        for level, message in incoming:
            if level >= self._filter_level:
                self.text_view.appendPlainText(message)

    @QtCore.Slot()
    def reload_logs(self) -> None:
        self.text_view.clear()
        self._shown_count = 0
        self.fetch_new_logs()

    @QtCore.Slot()
    def clear_logs(self) -> None:
        log.get_handler().clear_logs()
        self.reload_logs()
