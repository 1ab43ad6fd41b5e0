import os

import pytest
from PySide6.QtCore import QSettings
from PySide6.QtWidgets import QApplication

from dessertclicker.model.dessert import Catalog, DessertTier


@pytest.fixture(scope="session")
def qapp():
    """Headless Qt application so signals, QSettings and widgets work."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


@pytest.fixture
def small_catalog() -> Catalog:
    return Catalog([
        DessertTier("cupcake.svg", 5, 0, "Cupcake"),
        DessertTier("donut.svg", 10, 5, "Donut"),
        DessertTier("eclair.svg", 15, 10, "Eclair"),
    ])


@pytest.fixture
def ini_settings(qapp, tmp_path) -> QSettings:
    return QSettings(str(tmp_path / "session.ini"), QSettings.Format.IniFormat)
