"""
Application Initialization
==========================
This module wires the model, controller and view together and starts the Qt
event loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Sets up logging.
2. Instantiates the Editor State (Model).
3. Instantiates the Main Window (View), which builds the controller around
   the state it is given.
"""
import logging
import sys

from PySide6.QtWidgets import QApplication

from bezierspline.config import APP_NAME
from bezierspline.logging_config import setup_logging
from bezierspline.model.state import EditorState
from bezierspline.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def main() -> int:
    # 1. Setup Logging (use logging.DEBUG to trace knot placement and selection)
    setup_logging(level=logging.INFO)

    # 2. Create the Qt Application
    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)

    # 3. Initialize the Data Model
    state = EditorState()

    # 4. Initialize the Main Window, passing the model
    window = MainWindow(state)
    window.show()
    logger.info("Editor started.")

    # 5. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
