# tests/test_main_window.py
import pytest
from PySide6.QtGui import QCloseEvent

from dessertclicker.controller.retention import SessionStore
from dessertclicker.controller.session import SessionController
from dessertclicker.model.state import SessionState
from dessertclicker.view.main_window import MainWindow


@pytest.fixture
def saved_store(ini_settings, small_catalog) -> SessionStore:
    store = SessionStore(ini_settings)
    store.save(SessionState(catalog=small_catalog, desserts_sold=7, revenue=45))
    return store


def _window(small_catalog, store):
    controller = SessionController(small_catalog, share_handler=lambda text: None)
    return MainWindow(controller, store)


def test_new_window_starts_at_defaults_despite_saved_game(qapp, small_catalog, saved_store):
    window = _window(small_catalog, saved_store)

    snapshot = window.controller.snapshot()
    assert (snapshot.desserts_sold, snapshot.revenue, snapshot.current_index) == (0, 0, 0)
    assert window.screen_widget.transaction_info.lbl_sold.text() == "0"
    assert window.screen_widget.transaction_info.lbl_revenue.text() == "$0"
    assert window.act_continue.isEnabled()


def test_continue_last_game_restores_and_clears(qapp, small_catalog, saved_store):
    window = _window(small_catalog, saved_store)

    assert window.on_continue_last_game() is True

    snapshot = window.controller.snapshot()
    assert (snapshot.desserts_sold, snapshot.revenue) == (7, 45)
    assert snapshot.dessert.name == "Donut"
    assert window.screen_widget.transaction_info.lbl_revenue.text() == "$45"
    assert not saved_store.has_saved_session()
    assert not window.act_continue.isEnabled()


def test_closing_untouched_session_keeps_saved_game(qapp, small_catalog, saved_store):
    window = _window(small_catalog, saved_store)
    window.closeEvent(QCloseEvent())
    assert saved_store.load() == (7, 45)


def test_closing_played_session_saves_it(qapp, small_catalog, ini_settings):
    store = SessionStore(ini_settings)
    window = _window(small_catalog, store)
    for _ in range(3):
        window.controller.on_dessert_clicked()

    window.closeEvent(QCloseEvent())

    assert store.load() == (3, 15)


def test_unlocked_dessert_is_announced(qapp, small_catalog):
    window = _window(small_catalog, None)
    for _ in range(5):
        window.screen_widget.dessert_clicked.emit()

    assert "Donut" in window.statusBar().currentMessage()
    assert window.screen_widget.transaction_info.lbl_sold.text() == "5"


def test_new_game_resets_and_drops_saved_game(qapp, small_catalog, saved_store):
    window = _window(small_catalog, saved_store)
    window.controller.on_dessert_clicked()

    window.on_new_game()

    assert window.controller.snapshot().desserts_sold == 0
    assert not saved_store.has_saved_session()
