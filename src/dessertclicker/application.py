from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication, QSettings

import sys
import os
from typing import Optional, Sequence

ORG_ID = "dizzcode"
APP_ID = "dessert-clicker"
ORG_DOMAIN = "dizzcode.com"

VISIBLE_APP_NAME = "Dessert Clicker"


def configure_identity() -> None:
    """Set the names QSettings uses to locate the settings file."""
    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setOrganizationDomain(ORG_DOMAIN)
    QCoreApplication.setApplicationName(APP_ID)
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)


def create_app(argv: Optional[Sequence[str]] = None) -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    configure_identity()

    app = QApplication(list(argv) if argv is not None else sys.argv)

    # Set the visible, translatable display name
    visible_name = QCoreApplication.translate("App", VISIBLE_APP_NAME)
    app.setApplicationDisplayName(visible_name)

    return app
