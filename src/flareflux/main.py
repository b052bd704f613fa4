"""
Application Initialization
==========================
This module constructs the Model-View structure and starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the calculator state (CalculatorState).
2. Instantiates the Main Window (View).
3. Passes the state into the View so they can communicate.
4. Prevents circular import errors by being the orchestrator.
"""
import sys

import pyqtgraph as pg
from PySide6.QtWidgets import QApplication

from flareflux.config import APP_NAME, LOG_FILE, LOG_LEVEL
from flareflux.logging_config import install_qt_message_handler, setup_logging
from flareflux.app.state import CalculatorState
from flareflux.view.main_window import MainWindow


def main() -> None:
    # 1. Setup Logging (FLAREFLUX_LOG_LEVEL=DEBUG shows every recomputation,
    # FLAREFLUX_LOG_FILE=path also writes to a file)
    setup_logging(level=LOG_LEVEL, log_file=LOG_FILE)
    install_qt_message_handler()

    # 2. Create the Qt Application
    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    pg.setConfigOptions(antialias=True)

    # 3. Initialize the state with the default inputs
    state = CalculatorState()

    # 4. Initialize the Main Window, passing the state
    window = MainWindow(state)
    window.show()

    # 5. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
