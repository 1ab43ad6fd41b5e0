"""
Main Application Window
=======================
The primary GUI container that holds the App Bar, Menu and the Dessert Screen.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects user actions (click, Share, New Game) to the
   session controller.
3. Lifecycle: Every launch starts a fresh session. The counters are saved on
   close and only come back through "Continue Last Game". Window lifecycle
   changes are logged.
"""
import logging
from typing import Optional

from PySide6.QtWidgets import QMainWindow, QToolBar, QWidget, QLabel, QSizePolicy
from PySide6.QtCore import Qt, QEvent
from PySide6.QtGui import QAction, QKeySequence

from dessertclicker import config
from dessertclicker.application import VISIBLE_APP_NAME
from dessertclicker.controller.session import SessionController
from dessertclicker.controller.retention import SessionStore
from dessertclicker.controller.sharing import copy_to_clipboard
from dessertclicker.model.dessert import DessertTier
from dessertclicker.model.errors import SharingUnavailable
from dessertclicker.model.state import SessionSnapshot
from dessertclicker.view.widgets.dessert_screen import DessertClickerScreen

logger = logging.getLogger(__name__)

TAG = "MainWindow"


class MainWindow(QMainWindow):
    def __init__(self, controller: SessionController, store: Optional[SessionStore] = None) -> None:
        super().__init__()
        logger.debug(f"{TAG}: created")
        self.controller = controller
        self.store = store

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(420, 640)

        # --- CENTRAL SCREEN ---
        self.screen_widget = DessertClickerScreen()
        self.setCentralWidget(self.screen_widget)

        # --- ACTIONS, APP BAR & MENUS ---
        self._create_actions()
        self._create_app_bar()
        self._create_menus()

        # --- SIGNAL CONNECTIONS ---
        # 1. Dessert click -> Controller (single writer)
        self.screen_widget.dessert_clicked.connect(self.controller.on_dessert_clicked)

        # 2. State changed -> Re-draw
        self.controller.state_changed.connect(self.on_state_changed)

        # 3. Share feedback -> Status bar
        self.controller.share_failed.connect(self.show_notification)

        # 4. New dessert unlocked -> Status bar
        self.controller.dessert_changed.connect(self.on_dessert_changed)

        self._update_continue_action()

        # Initial Render
        self.on_state_changed(self.controller.snapshot())

    def _create_actions(self) -> None:
        self.act_share = QAction("Share", self)
        self.act_share.setShortcut("Ctrl+Shift+S")
        self.act_share.setToolTip("Share how many desserts you sold")
        self.act_share.triggered.connect(self.on_share)

        self.act_copy = QAction("Copy Summary", self)
        self.act_copy.setShortcut(QKeySequence.Copy)
        self.act_copy.triggered.connect(self.on_copy_summary)

        self.act_sell = QAction("Sell Dessert", self)
        self.act_sell.setShortcut(QKeySequence(Qt.Key_Space))
        self.act_sell.triggered.connect(self.controller.on_dessert_clicked)
        # Not in any menu, so it has to be added to the window to fire
        self.addAction(self.act_sell)

        self.act_new = QAction("New Game", self)
        self.act_new.setShortcut(QKeySequence.New)
        self.act_new.triggered.connect(self.on_new_game)

        self.act_continue = QAction("Continue Last Game", self)
        self.act_continue.triggered.connect(self.on_continue_last_game)

        self.act_exit = QAction("Exit", self)
        self.act_exit.triggered.connect(self.close)

    def _create_app_bar(self) -> None:
        app_bar = QToolBar("App Bar")
        app_bar.setMovable(False)
        app_bar.setStyleSheet("QToolBar { background-color: #6D3A4F; } QToolButton, QLabel { color: white; }")

        title = QLabel(VISIBLE_APP_NAME)
        font = title.font()
        font.setPointSize(18)
        title.setFont(font)
        title.setContentsMargins(16, 0, 0, 0)
        app_bar.addWidget(title)

        spacer = QWidget()
        spacer.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        app_bar.addWidget(spacer)

        app_bar.addAction(self.act_share)
        self.addToolBar(Qt.TopToolBarArea, app_bar)

    def _create_menus(self) -> None:
        menu_bar = self.menuBar()

        game_menu = menu_bar.addMenu("&Game")
        game_menu.addAction(self.act_new)
        game_menu.addAction(self.act_continue)
        game_menu.addSeparator()
        game_menu.addAction(self.act_share)
        game_menu.addAction(self.act_copy)
        game_menu.addSeparator()
        game_menu.addAction(self.act_exit)

    # --- HELPER METHODS ---

    def _update_continue_action(self) -> None:
        self.act_continue.setEnabled(self.store is not None and self.store.has_saved_session())

    def _save_session(self) -> None:
        if self.store is None:
            return
        # An untouched session must not overwrite the last saved game
        if self.controller.state.desserts_sold == 0:
            return
        try:
            self.store.save(self.controller.state)
        except Exception as e:
            logger.warning(f"Could not save session: {e}")

    def show_notification(self, message: str) -> None:
        """Transient message, the desktop stand-in for a toast."""
        self.statusBar().showMessage(message, config.NOTIFICATION_DURATION_MS)

    # --- SLOTS ---

    def on_state_changed(self, snapshot: SessionSnapshot) -> None:
        self.screen_widget.set_snapshot(snapshot)

    def on_dessert_changed(self, dessert: DessertTier) -> None:
        self.show_notification(f"Now selling {dessert.label} for ${dessert.price}!")

    def on_share(self) -> None:
        self.controller.on_share_clicked()

    def on_copy_summary(self) -> None:
        try:
            copy_to_clipboard(self.controller.share_summary())
        except SharingUnavailable as e:
            logger.warning(f"Copy failed: {e}")
            self.show_notification("Clipboard Not Available")
            return
        self.show_notification("Summary copied to clipboard")

    def on_continue_last_game(self) -> bool:
        """Load the counters saved when the last game was closed."""
        if self.store is None:
            return False
        values = self.store.load()
        if values is None:
            self.show_notification("No saved game to continue")
            self._update_continue_action()
            return False
        self.controller.restore(*values)
        # The saved game now lives on in this session
        self.store.clear()
        self._update_continue_action()
        return True

    def on_new_game(self) -> None:
        self.controller.reset()
        if self.store is not None:
            self.store.clear()
        self._update_continue_action()

    # --- LIFECYCLE EVENTS ---

    def showEvent(self, event, /) -> None:
        super().showEvent(event)
        logger.debug(f"{TAG}: shown")

    def hideEvent(self, event, /) -> None:
        super().hideEvent(event)
        logger.debug(f"{TAG}: hidden")

    def changeEvent(self, event, /) -> None:
        if event.type() == QEvent.WindowStateChange:
            if self.isMinimized():
                logger.debug(f"{TAG}: paused (minimized)")
            else:
                logger.debug(f"{TAG}: resumed")
        elif event.type() == QEvent.ActivationChange:
            logger.debug(f"{TAG}: {'focused' if self.isActiveWindow() else 'lost focus'}")
        super().changeEvent(event)

    def closeEvent(self, event, /) -> None:
        """Save the session before the window goes away."""
        logger.debug(f"{TAG}: closing")
        self._save_session()
        event.accept()
