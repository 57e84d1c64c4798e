"""The controller translating user requests into model operations."""
import logging
from typing import Any, Optional, Protocol

from .filters import TransactionFilter
from .validation import InputValidation
from ..model.model import ExpenseTrackerModel
from ..model.transaction import Transaction


class ExpenseTrackerViewProtocol(Protocol):
    """The part of the view the controller talks to."""

    def display_message(self, message: str) -> None:
        ...

    def to_front(self) -> None:
        ...


class ExpenseTrackerController:
    """Validates input, builds transactions and forwards operations to the model.

    Invalid user input is reported through return values. Errors raised by the
    model itself are not caught here.

    Args:
        model: The model to drive.
        view: The view used for user-facing messages.
        transaction_filter: Optional initial filter.
        validation: Amount and category checks. Defaults to syntax-only checks.
    """

    def __init__(
            self,
            model: ExpenseTrackerModel,
            view: Optional[ExpenseTrackerViewProtocol],
            transaction_filter: Optional[TransactionFilter] = None,
            validation: Optional[InputValidation] = None,
    ) -> None:
        self.model = model
        self.view = view
        self.validation = validation if validation is not None else InputValidation()
        self._filter = transaction_filter

    def set_filter(self, transaction_filter: Optional[TransactionFilter]) -> None:
        """Replace the active filter. The matched indices are only updated by :meth:`apply_filter`."""
        self._filter = transaction_filter
        logging.debug(f'Filter set to {transaction_filter!r}')

    def get_filter(self) -> Optional[TransactionFilter]:
        return self._filter

    def add_transaction(self, amount: Any, category: Any) -> bool:
        """Add a new transaction if the input is valid.

        Args:
            amount: The amount spent.
            category: The category name.

        Returns:
            bool: True if a transaction was added, False if validation failed.
        """
        if not self.validation.is_valid_amount(amount):
            logging.warning(f'Rejected transaction: invalid amount {amount!r}')
            return False
        category_name = self.validation.canonical_category(category)
        if category_name is None:
            logging.warning(f'Rejected transaction: invalid category {category!r}')
            return False

        self.model.add_transaction(Transaction(amount, category_name))
        return True

    def apply_filter(self) -> None:
        """Apply the active filter and push the matched indices to the model.

        Each filtered transaction maps to its first position in the full list,
        so a transaction object added twice reports its first index twice.
        Without a filter the user is told so and the view is raised.
        """
        if self._filter is None:
            logging.info('No filter applied')
            if self.view is not None:
                self.view.display_message('No filter applied')
                self.view.to_front()
            return

        transactions = list(self.model.get_transactions())
        filtered = self._filter.filter(transactions)

        indices = []
        for t in filtered:
            try:
                indices.append(transactions.index(t))
            except ValueError:
                logging.warning(f'Filter returned unknown transaction "{t}", skipping')

        logging.debug(f'{self._filter!r} matched {len(indices)} of {len(transactions)} transactions')
        self.model.set_matched_filter_indices(indices)

    def clear_filter(self) -> None:
        """Drop the active filter and clear the matched indices."""
        self._filter = None
        self.model.set_matched_filter_indices([])

    def undo_transaction(self, row_index: int) -> bool:
        """Remove the transaction shown at `row_index`.

        Args:
            row_index: Position in the transaction list.

        Returns:
            bool: True if a transaction was removed, False if the index is out of range.
        """
        transactions = self.model.get_transactions()
        if isinstance(row_index, bool) or not isinstance(row_index, int):
            logging.warning(f'Cannot undo: invalid row index {row_index!r}')
            return False
        if not 0 <= row_index < len(transactions):
            logging.debug(f'Cannot undo: row {row_index} is out of range')
            return False

        self.model.remove_transaction(transactions[row_index])
        return True
