"""The immutable expense record stored by the model."""
import dataclasses
import datetime
import math
import numbers

from ..status import status


@dataclasses.dataclass(frozen=True, eq=False)
class Transaction:
    """A single expense entry.

    Transactions compare by identity. Two entries with the same amount and
    category are still distinct expenses.

    Attributes:
        amount (float): Positive amount spent.
        category (str): Non-empty category name.
        timestamp (datetime.datetime): Creation time.
    """
    amount: float
    category: str
    timestamp: datetime.datetime = dataclasses.field(default_factory=datetime.datetime.now)

    def __post_init__(self) -> None:
        if (
                isinstance(self.amount, bool)
                or not isinstance(self.amount, numbers.Real)
                or not math.isfinite(self.amount)
                or self.amount <= 0
        ):
            raise status.TransactionInvalidException(
                f'Amount must be a positive number, got {self.amount!r}.'
            )
        if not isinstance(self.category, str) or not self.category.strip():
            raise status.TransactionInvalidException(
                f'Category must be a non-empty string, got {self.category!r}.'
            )

    def __str__(self) -> str:
        return f'{self.category}: {self.amount:.2f}'
