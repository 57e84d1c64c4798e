"""Status definitions and exceptions for SimpleExpenseTracker.

This module provides:
    - Status: enumeration of possible application states
    - STATUS_MESSAGE: user-facing messages for each status
    - get_message: retrieve the message for a status
    - BaseStatusException: base exception carrying a Status
    - Specific exceptions (e.g., TransactionInvalidException) raised at the model and settings boundaries
"""
import enum
import logging
from typing import Dict, Optional


class Status(enum.StrEnum):
    """Enumeration of application status codes."""
    UnknownStatus = enum.auto()
    Okay = enum.auto()

    # Config status
    SettingsNotFound = enum.auto()
    SettingsInvalid = enum.auto()

    # Model status
    TransactionInvalid = enum.auto()
    FilterIndicesInvalid = enum.auto()


STATUS_MESSAGE: Dict[Status, str] = {
    Status.UnknownStatus: 'Unknown status. Please check the settings.',
    Status.Okay: 'Everything is okay.',

    Status.SettingsNotFound: 'Could not find the settings file.',
    Status.SettingsInvalid: 'The settings file seems to be incomplete, or contains invalid values.',

    Status.TransactionInvalid: 'The transaction is invalid.',
    Status.FilterIndicesInvalid: 'The matched filter indices are invalid.',
}


def get_message(status: Status) -> str:
    """
    Get the message for a given status.

    Args:
        status (Status): The status enum.

    Returns:
        str: The message associated with the status.
    """
    return STATUS_MESSAGE.get(status, 'Unknown status')


class BaseStatusException(Exception):
    """Base exception for status-based errors in SimpleExpenseTracker.

    Attributes:
        status (Status): Status code associated with this error.
        status_message (str): User-facing message for the status.

    Args:
        message (str): Optional additional context for the error.
    """
    status = Status.UnknownStatus

    def __init__(self, message: Optional[str] = None):
        self.status_message = get_message(self.status)
        exception_message = f'{self.status_message} {message}' if message else self.status_message
        super().__init__(exception_message)

        logging.error(exception_message)

        from ..ui.actions import signals
        signals.error.emit(message or self.status_message)


class UnknownException(BaseStatusException):
    """Exception for an unknown error during status processing."""
    pass


class SettingsNotFoundException(BaseStatusException, FileNotFoundError):
    status = Status.SettingsNotFound


class SettingsInvalidException(BaseStatusException, ValueError):
    status = Status.SettingsInvalid


class TransactionInvalidException(BaseStatusException, ValueError):
    """Raised when a transaction is absent or holds an invalid amount or category."""
    status = Status.TransactionInvalid


class FilterIndicesInvalidException(BaseStatusException, ValueError):
    """Raised when matched filter indices are absent or out of range."""
    status = Status.FilterIndicesInvalid
