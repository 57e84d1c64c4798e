"""Main window composition.

Builds the model, the view and the controller, registers the view's table
model as a model listener, and routes the view's requests to the controller.
"""
import logging
from typing import Optional, Tuple

from PySide6 import QtCore

from ..controller.controller import ExpenseTrackerController
from ..controller.filters import AmountFilter, CategoryFilter
from ..controller.validation import InputValidation
from ..model.model import ExpenseTrackerModel
from ..settings import lib
from .view import ExpenseTrackerView

widget: Optional[ExpenseTrackerView] = None
controller: Optional[ExpenseTrackerController] = None


def create(
        settings: Optional[lib.SettingsAPI] = None
) -> Tuple[ExpenseTrackerModel, ExpenseTrackerView, ExpenseTrackerController]:
    """Create and connect the model, view and controller.

    Args:
        settings: Settings to configure the view and validation with. Defaults to
            :func:`SimpleExpenseTracker.settings.lib.get_settings`.

    Returns:
        The model, the view and the controller.
    """
    if settings is None:
        settings = lib.get_settings()

    categories = settings.get_section('categories')

    model = ExpenseTrackerModel()
    view = ExpenseTrackerView(
        title=settings['name'] or lib.app_name,
        locale=settings['locale'] or 'en_US',
        categories=categories,
    )
    ctrl = ExpenseTrackerController(
        model,
        view,
        validation=InputValidation(categories=categories.keys()),
    )

    model.register(view.table_model)
    view.table_model.update(model)

    @QtCore.Slot(float, str)
    def add_transaction(amount: float, category: str) -> None:
        if ctrl.add_transaction(amount, category):
            view.clear_inputs()
            return
        view.display_error('Invalid amount or category entered.')

    @QtCore.Slot(float, float)
    def filter_by_amount(min_amount: float, max_amount: float) -> None:
        try:
            ctrl.set_filter(AmountFilter(min_amount, max_amount))
        except ValueError as ex:
            view.display_error(str(ex))
            return
        ctrl.apply_filter()

    @QtCore.Slot(str)
    def filter_by_category(category: str) -> None:
        try:
            ctrl.set_filter(CategoryFilter(category))
        except ValueError as ex:
            view.display_error(str(ex))
            return
        ctrl.apply_filter()

    view.addTransactionRequested.connect(add_transaction)
    view.amountFilterRequested.connect(filter_by_amount)
    view.categoryFilterRequested.connect(filter_by_category)
    view.clearFilterRequested.connect(ctrl.clear_filter)
    view.undoRequested.connect(ctrl.undo_transaction)

    @QtCore.Slot(str, object)
    def metadata_changed(key: str, value: object) -> None:
        if key == 'locale':
            view.set_locale(value)
        elif key == 'name':
            view.setWindowTitle(value)

    from .actions import signals
    signals.metadataChanged.connect(metadata_changed)

    logging.debug('Model, view and controller created')
    return model, view, ctrl


def show() -> None:
    global widget
    global controller

    if widget is None:
        _, widget, controller = create()

    widget.show()
