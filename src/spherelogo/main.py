"""
Application Initialization
==========================
This module sets up logging, creates the Qt application and the main window,
and starts the Qt Event Loop.
"""
import logging
import sys

from PySide6.QtWidgets import QApplication

from spherelogo.config import APP_NAME
from spherelogo.logging_config import setup_logging
from spherelogo.view.main_window import MainWindow


def main() -> None:
    # 1. Setup Logging (Console)
    # Use logging.DEBUG to see every paint skip and save step
    setup_logging(level=logging.INFO)

    # 2. Create the Qt Application
    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName(APP_NAME)

    # 3. Initialize the Main Window
    window = MainWindow()
    window.show()

    # 4. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
