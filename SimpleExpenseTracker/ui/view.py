"""Transactions table model and the main window.

This module provides:
    - Columns: column indexes of the transactions table
    - TransactionsTableModel: Qt table model registered as an ExpenseTrackerModel listener
    - ExpenseTrackerView: main window with the input, filter and undo controls
"""
import enum
import logging
from typing import Any, Dict, List, Optional

from PySide6 import QtCore, QtGui, QtWidgets

from ..log.view import LogDockWidget
from ..model.model import ExpenseTrackerModel
from ..model.transaction import Transaction
from ..settings import locale as locale_lib
from .actions import signals

MATCHED_ROW_COLOR = QtGui.QColor(173, 255, 168)
DEFAULT_LOCALE: str = 'en_US'


class Columns(enum.IntEnum):
    Serial = 0
    Amount = 1
    Category = 2
    Date = 3


class TransactionsTableModel(QtCore.QAbstractTableModel):
    """
    Displays the transactions of an :class:`ExpenseTrackerModel`.

    The table model is itself a model listener: :meth:`update` copies the
    transactions and the matched filter indices and resets the table.
    Matched rows are highlighted.
    """

    def __init__(
            self,
            locale: str = DEFAULT_LOCALE,
            categories: Optional[Dict[str, Dict[str, Any]]] = None,
            parent: Optional[QtCore.QObject] = None
    ) -> None:
        super().__init__(parent=parent)
        self._locale = locale
        self._categories = categories or {}

        self._data: List[Transaction] = []
        self._matched: set[int] = set()

    def update(self, model: ExpenseTrackerModel) -> None:
        """Refresh the table from the model's current state."""
        self.beginResetModel()
        try:
            self._data = list(model.get_transactions())
            self._matched = set(model.get_matched_filter_indices())
        finally:
            self.endResetModel()

    def set_locale(self, locale: str) -> None:
        self._locale = locale
        if self._data:
            self.dataChanged.emit(
                self.index(0, 0),
                self.index(self.rowCount() - 1, self.columnCount() - 1),
                [QtCore.Qt.DisplayRole]
            )

    def transaction(self, row: int) -> Optional[Transaction]:
        if 0 <= row < len(self._data):
            return self._data[row]
        return None

    def is_matched(self, row: int) -> bool:
        return row in self._matched

    def total(self) -> float:
        """Sum of all displayed amounts."""
        return sum(t.amount for t in self._data)

    def rowCount(self, parent: QtCore.QModelIndex = QtCore.QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return len(self._data)

    def columnCount(self, parent: QtCore.QModelIndex = QtCore.QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return len(Columns)

    def data(self, index: QtCore.QModelIndex, role: int = QtCore.Qt.DisplayRole) -> Any:
        """Returns data for the specified index and role.

        Args:
            index (QtCore.QModelIndex): The model index.
            role (int): The data role.

        Returns:
            Any: Data appropriate for the role, or None.
        """
        if not index.isValid():
            return None
        row = index.row()
        col = index.column()
        if row < 0 or row >= self.rowCount():
            return None

        t = self._data[row]

        if role == QtCore.Qt.BackgroundRole:
            if row in self._matched:
                return MATCHED_ROW_COLOR
            return None

        if role == QtCore.Qt.EditRole:
            if col == Columns.Serial:
                return row + 1
            elif col == Columns.Amount:
                return t.amount
            elif col == Columns.Category:
                return t.category
            elif col == Columns.Date:
                return t.timestamp
            return None

        if col == Columns.Serial:
            if role == QtCore.Qt.DisplayRole:
                return f'{row + 1}'
            elif role == QtCore.Qt.TextAlignmentRole:
                return QtCore.Qt.AlignCenter

        elif col == Columns.Amount:
            if role in (QtCore.Qt.DisplayRole, QtCore.Qt.ToolTipRole):
                return locale_lib.format_currency_value(t.amount, self._locale)
            elif role == QtCore.Qt.TextAlignmentRole:
                return QtCore.Qt.AlignRight | QtCore.Qt.AlignVCenter

        elif col == Columns.Category:
            config = self._categories.get(t.category, {})
            if role == QtCore.Qt.DisplayRole:
                return config.get('display_name') or t.category
            elif role == QtCore.Qt.DecorationRole:
                if 'color' in config:
                    return QtGui.QColor(config['color'])
            elif role == QtCore.Qt.ToolTipRole:
                return config.get('description') or t.category

        elif col == Columns.Date:
            if role in (QtCore.Qt.DisplayRole, QtCore.Qt.ToolTipRole):
                return locale_lib.format_timestamp(t.timestamp, self._locale)

        return None

    def headerData(self, section: int, orientation: QtCore.Qt.Orientation,
                   role: int = QtCore.Qt.DisplayRole) -> Any:
        if role != QtCore.Qt.DisplayRole:
            return None
        if orientation == QtCore.Qt.Horizontal:
            if 0 <= section < self.columnCount():
                return '#' if section == Columns.Serial else Columns(section).name
        return None


class ExpenseTrackerView(QtWidgets.QMainWindow):
    """The main window.

    User actions are exposed as signals; the window never touches the model directly.
    """
    addTransactionRequested = QtCore.Signal(float, str)
    amountFilterRequested = QtCore.Signal(float, float)
    categoryFilterRequested = QtCore.Signal(str)
    clearFilterRequested = QtCore.Signal()
    undoRequested = QtCore.Signal(int)

    def __init__(
            self,
            title: str = 'Expense Tracker',
            locale: str = DEFAULT_LOCALE,
            categories: Optional[Dict[str, Dict[str, Any]]] = None,
            parent: Optional[QtWidgets.QWidget] = None
    ) -> None:
        super().__init__(parent=parent)
        self.setWindowTitle(title)
        self.setObjectName('ExpenseTrackerView')

        self._locale = locale
        self._categories = categories or {}

        self.table_model = TransactionsTableModel(locale=locale, categories=self._categories, parent=self)

        self.amount_editor: Optional[QtWidgets.QLineEdit] = None
        self.category_editor: Optional[QtWidgets.QComboBox] = None
        self.add_button: Optional[QtWidgets.QPushButton] = None

        self.min_amount_editor: Optional[QtWidgets.QLineEdit] = None
        self.max_amount_editor: Optional[QtWidgets.QLineEdit] = None
        self.amount_filter_button: Optional[QtWidgets.QPushButton] = None
        self.category_filter_editor: Optional[QtWidgets.QComboBox] = None
        self.category_filter_button: Optional[QtWidgets.QPushButton] = None
        self.clear_filter_button: Optional[QtWidgets.QPushButton] = None

        self.table_view: Optional[QtWidgets.QTableView] = None
        self.undo_button: Optional[QtWidgets.QPushButton] = None
        self.total_label: Optional[QtWidgets.QLabel] = None
        self.log_dock: Optional[LogDockWidget] = None

        self._create_ui()
        self._connect_signals()
        self.refresh_total()

    def _create_ui(self) -> None:
        central = QtWidgets.QWidget(self)
        QtWidgets.QVBoxLayout(central)

        # Input row
        input_group = QtWidgets.QGroupBox('New transaction', central)
        QtWidgets.QHBoxLayout(input_group)

        self.amount_editor = QtWidgets.QLineEdit(input_group)
        self.amount_editor.setPlaceholderText('Amount')

        self.category_editor = self._create_category_combobox(input_group)

        self.add_button = QtWidgets.QPushButton('Add Transaction', input_group)
        self.add_button.setDefault(True)

        input_group.layout().addWidget(QtWidgets.QLabel('Amount:', input_group))
        input_group.layout().addWidget(self.amount_editor, 1)
        input_group.layout().addWidget(QtWidgets.QLabel('Category:', input_group))
        input_group.layout().addWidget(self.category_editor, 1)
        input_group.layout().addWidget(self.add_button)

        # Filter row
        filter_group = QtWidgets.QGroupBox('Filter', central)
        QtWidgets.QHBoxLayout(filter_group)

        self.min_amount_editor = QtWidgets.QLineEdit(filter_group)
        self.min_amount_editor.setPlaceholderText('Min')
        self.max_amount_editor = QtWidgets.QLineEdit(filter_group)
        self.max_amount_editor.setPlaceholderText('Max')
        self.amount_filter_button = QtWidgets.QPushButton('Filter by Amount', filter_group)

        self.category_filter_editor = self._create_category_combobox(filter_group)
        self.category_filter_button = QtWidgets.QPushButton('Filter by Category', filter_group)

        self.clear_filter_button = QtWidgets.QPushButton('Clear Filter', filter_group)

        filter_group.layout().addWidget(self.min_amount_editor)
        filter_group.layout().addWidget(self.max_amount_editor)
        filter_group.layout().addWidget(self.amount_filter_button)
        filter_group.layout().addSpacing(12)
        filter_group.layout().addWidget(self.category_filter_editor, 1)
        filter_group.layout().addWidget(self.category_filter_button)
        filter_group.layout().addSpacing(12)
        filter_group.layout().addWidget(self.clear_filter_button)

        # Table
        self.table_view = QtWidgets.QTableView(central)
        self.table_view.setModel(self.table_model)
        self.table_view.setEditTriggers(QtWidgets.QAbstractItemView.NoEditTriggers)
        self.table_view.setSelectionBehavior(QtWidgets.QAbstractItemView.SelectRows)
        self.table_view.setSelectionMode(QtWidgets.QAbstractItemView.SingleSelection)
        self.table_view.verticalHeader().setHidden(True)
        header = self.table_view.horizontalHeader()
        header.setSectionResizeMode(QtWidgets.QHeaderView.Interactive)
        header.setSectionResizeMode(Columns.Category.value, QtWidgets.QHeaderView.Stretch)

        # Footer
        footer = QtWidgets.QWidget(central)
        QtWidgets.QHBoxLayout(footer)
        footer.layout().setContentsMargins(0, 0, 0, 0)

        self.undo_button = QtWidgets.QPushButton('Undo', footer)
        self.total_label = QtWidgets.QLabel(footer)

        footer.layout().addWidget(self.undo_button)
        footer.layout().addStretch(1)
        footer.layout().addWidget(self.total_label)

        central.layout().addWidget(input_group)
        central.layout().addWidget(filter_group)
        central.layout().addWidget(self.table_view, 1)
        central.layout().addWidget(footer)
        self.setCentralWidget(central)

        self.log_dock = LogDockWidget(parent=self)
        self.addDockWidget(QtCore.Qt.BottomDockWidgetArea, self.log_dock)
        self.log_dock.hide()

        self.statusBar()

    def _create_category_combobox(self, parent: QtWidgets.QWidget) -> QtWidgets.QComboBox:
        editor = QtWidgets.QComboBox(parent)
        editor.setEditable(True)
        editor.setInsertPolicy(QtWidgets.QComboBox.NoInsert)
        for name, info in self._categories.items():
            display = info.get('display_name') or name
            editor.addItem(display, userData=name)
        return editor

    def _connect_signals(self) -> None:
        self.add_button.clicked.connect(self.on_add_clicked)
        self.amount_editor.returnPressed.connect(self.on_add_clicked)
        self.amount_filter_button.clicked.connect(self.on_amount_filter_clicked)
        self.category_filter_button.clicked.connect(self.on_category_filter_clicked)
        self.clear_filter_button.clicked.connect(self.on_clear_filter_clicked)
        self.undo_button.clicked.connect(self.on_undo_clicked)

        self.table_model.modelReset.connect(self.refresh_total)

        signals.error.connect(self.on_error)

    @staticmethod
    def _combobox_category(editor: QtWidgets.QComboBox) -> str:
        """Return the category key of the combobox, or the typed text."""
        text = editor.currentText().strip()
        index = editor.findText(text, QtCore.Qt.MatchFixedString)
        if index >= 0:
            return editor.itemData(index)
        return text

    def _parse_amount(self, editor: QtWidgets.QLineEdit) -> Optional[float]:
        try:
            return locale_lib.parse_amount(editor.text(), self._locale)
        except ValueError:
            self.display_error(f'"{editor.text()}" is not a valid amount.')
            return None

    @QtCore.Slot()
    def on_add_clicked(self) -> None:
        amount = self._parse_amount(self.amount_editor)
        if amount is None:
            return
        self.addTransactionRequested.emit(amount, self._combobox_category(self.category_editor))

    @QtCore.Slot()
    def on_amount_filter_clicked(self) -> None:
        if not self.min_amount_editor.text().strip():
            min_amount = 0.0
        else:
            min_amount = self._parse_amount(self.min_amount_editor)
        if min_amount is None:
            return
        max_amount = self._parse_amount(self.max_amount_editor)
        if max_amount is None:
            return
        self.amountFilterRequested.emit(min_amount, max_amount)

    @QtCore.Slot()
    def on_category_filter_clicked(self) -> None:
        self.categoryFilterRequested.emit(self._combobox_category(self.category_filter_editor))

    @QtCore.Slot()
    def on_clear_filter_clicked(self) -> None:
        self.clearFilterRequested.emit()

    @QtCore.Slot()
    def on_undo_clicked(self) -> None:
        rows = self.table_view.selectionModel().selectedRows()
        if not rows:
            self.display_message('Select a transaction to undo.')
            return
        self.undoRequested.emit(rows[0].row())

    @QtCore.Slot(str)
    def on_error(self, message: str) -> None:
        self.statusBar().showMessage(message, 5000)

    @QtCore.Slot()
    def refresh_total(self) -> None:
        total = locale_lib.format_currency_value(self.table_model.total(), self._locale)
        self.total_label.setText(f'Total: {total}')

    def set_locale(self, locale: str) -> None:
        self._locale = locale
        self.table_model.set_locale(locale)
        self.refresh_total()

    def clear_inputs(self) -> None:
        self.amount_editor.clear()
        self.amount_editor.setFocus()

    def display_message(self, message: str) -> None:
        logging.info(message)
        QtWidgets.QMessageBox.information(self, self.windowTitle(), message)

    def display_error(self, message: str) -> None:
        logging.warning(message)
        QtWidgets.QMessageBox.warning(self, self.windowTitle(), message)

    def to_front(self) -> None:
        """Raise the window above other windows and give it focus."""
        if self.isMinimized():
            self.showNormal()
        self.raise_()
        self.activateWindow()
