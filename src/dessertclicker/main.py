"""
Application Initialization
==========================
This module constructs the MVC (Model-View-Controller) architecture and starts
the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Loads and validates the dessert catalog (fatal if invalid).
2. Instantiates the Session Controller that owns the game state.
3. Instantiates the Main Window (View) and passes the controller into it.
4. Prevents circular import errors by being the orchestrator.
"""
import logging
import sys

from PySide6.QtWidgets import QMessageBox

from dessertclicker import config
from dessertclicker.application import create_app
from dessertclicker.logging_config import setup_logging
from dessertclicker.model.dessert import Catalog
from dessertclicker.model.errors import InvalidCatalog
from dessertclicker.controller.session import SessionController
from dessertclicker.controller.retention import SessionStore
from dessertclicker.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def main() -> int:
    # 1. Setup Logging (Console + Optional File)
    # Set DESSERTCLICKER_LOG_LEVEL=DEBUG to see lifecycle events
    setup_logging(level=config.get_log_level(), log_file=config.get_log_file())

    # 2. Create the Qt Application
    app = create_app()

    # 3. Load the Catalog; the game cannot run without a valid one
    try:
        catalog = Catalog.from_json(config.get_catalog_path())
    except InvalidCatalog as e:
        logger.critical(f"Invalid dessert catalog: {e}")
        QMessageBox.critical(None, "Dessert Clicker", f"Cannot start, the dessert catalog is invalid:\n{e}")
        return 1

    # 4. Initialize the Controller (owns the session state)
    controller = SessionController(catalog)

    # 5. Initialize the Main Window, passing the controller
    window = MainWindow(controller, SessionStore())
    window.show()

    # 6. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
