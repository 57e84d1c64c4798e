"""Unittest base class for creating a clean test environment."""
import logging
import os
import shutil
import tempfile
import unittest

# Ensure headless Qt before any QApplication is created
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

from PySide6 import QtCore, QtWidgets

from SimpleExpenseTracker.settings import lib


class MockListener:
    """Model listener recording every notification."""

    def __init__(self) -> None:
        self.calls = []

    def update(self, model) -> None:
        self.calls.append((model.get_transactions(), model.get_matched_filter_indices()))

    @property
    def count(self) -> int:
        return len(self.calls)


class BaseTestCase(unittest.TestCase):
    """Base test case that points the settings at a temporary config directory."""

    config_dir: str

    def setUp(self) -> None:
        """Ensure a QApplication and a fresh settings API."""
        QtCore.QStandardPaths.setTestModeEnabled(True)

        # Ensure a QApplication is available
        if not QtWidgets.QApplication.instance():
            QtWidgets.QApplication([])  # type: ignore
            logging.debug('QtWidgets.QApplication initialized for tests.')

        self.config_dir = tempfile.mkdtemp(prefix='simpleexpensetracker_test_')
        logging.debug(f'Created test config directory at {self.config_dir}')

        lib.settings = lib.SettingsAPI(config_dir=self.config_dir)
        logging.debug('SettingsAPI reinitialized.')

    def tearDown(self) -> None:
        """Drop the settings API and remove the temporary config directory."""
        lib.settings = None
        shutil.rmtree(self.config_dir, ignore_errors=True)
        logging.debug(f'Removed test config directory {self.config_dir}')
