"""
SimpleExpenseTracker: a small desktop application for recording and filtering expenses.

This package provides:

- :mod:`SimpleExpenseTracker.model` – The observable transaction model (:class:`SimpleExpenseTracker.model.model.ExpenseTrackerModel`).
- :mod:`SimpleExpenseTracker.controller` – Input validation, transaction filters and the controller driving the model.
- :mod:`SimpleExpenseTracker.ui` – A PySide6 main window observing the model.
- :mod:`SimpleExpenseTracker.settings` – Settings management and Babel-based locale formatting.
- :mod:`SimpleExpenseTracker.log` – In-app logging with a log viewer.

Use :func:`SimpleExpenseTracker.exec_` to launch the application.
"""

import sys

# Fail on Python < 3.11
if not (sys.version_info.major == 3 and sys.version_info.minor >= 11):
    raise RuntimeError('SimpleExpenseTracker requires Python 3.11 or higher.')

__version__ = '0.1.0'
__author__ = 'Gergely Wootsch'
__license__ = 'GPL-3.0'
__copyright__ = 'Copyright (C) 2025 Gergely Wootsch'
__description__ = 'SimpleExpenseTracker: desktop application for recording and filtering personal expenses.'
__url__ = 'https://github.com/wgergely/SimpleExpenseTracker'
__email__ = 'hello+ExpenseTracker@gergely-wootsch.com'

from .log import log

log.setup_logging()


def exec_() -> None:
    """Launch the SimpleExpenseTracker GUI application and enter its event loop.

    Initializes the QApplication, shows the main window, and starts the Qt event loop.
    """
    from .ui import app
    from .ui import main
    application = app.Application(sys.argv)
    main.show()

    sys.exit(application.exec())


if __name__ == '__main__':
    exec_()
