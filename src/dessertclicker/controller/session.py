"""
Session Controller
==================
Owns the one ``SessionState`` of the running game and turns UI events into
state changes.

Why is this file needed?
------------------------
1. Single Writer: Every mutation goes through this object, one event at a
   time on the Qt main thread.
2. Signals: Views subscribe to ``state_changed`` and re-draw from the
   snapshot they receive. There is no hidden global state tracking.
3. Sharing: It formats the summary and reports ``SharingUnavailable`` as a
   user-facing message instead of letting it escape.

Classes:
    SessionController: QObject wrapper around SessionState.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from PySide6.QtCore import QObject, Signal

from dessertclicker.model.dessert import Catalog
from dessertclicker.model.errors import SharingUnavailable
from dessertclicker.model.share import SHARE_TEMPLATE, format_share_summary
from dessertclicker.model.state import SessionSnapshot, SessionState, TapResult
from dessertclicker.controller.sharing import share_text

logger = logging.getLogger(__name__)

SHARING_NOT_AVAILABLE = "Sharing Not Available"

ShareHandler = Callable[[str], object]


class SessionController(QObject):
    """Central session store with signals for view sync."""
    state_changed = Signal(object)
    dessert_changed = Signal(object)
    share_failed = Signal(str)
    shared = Signal(str)

    def __init__(
        self,
        catalog: Optional[Catalog] = None,
        share_handler: Optional[ShareHandler] = None,
        share_template: str = SHARE_TEMPLATE,
        parent: Optional[QObject] = None
    ) -> None:
        super().__init__(parent)
        self.state = SessionState(catalog=catalog if catalog is not None else Catalog.default())
        self._share_handler: ShareHandler = share_handler or share_text
        self._share_template = share_template

    @property
    def catalog(self) -> Catalog:
        return self.state.catalog

    def snapshot(self) -> SessionSnapshot:
        return self.state.snapshot()

    def on_dessert_clicked(self) -> TapResult:
        """Slot for a click on the dessert."""
        result = self.state.tap()
        logger.debug(
            f"Sold dessert #{self.state.desserts_sold} for {result.price_charged}, "
            f"revenue {self.state.revenue}."
        )

        snapshot = self.state.snapshot()
        if result.advanced:
            self.dessert_changed.emit(snapshot.dessert)
        self.state_changed.emit(snapshot)
        return result

    def share_summary(self) -> str:
        return format_share_summary(
            self.state.desserts_sold, self.state.revenue, self._share_template
        )

    def on_share_clicked(self) -> bool:
        """
        Slot for the Share action.

        Returns True if the summary was handed off. On failure ``share_failed``
        carries the message to show; the counters are left untouched.
        """
        text = self.share_summary()
        try:
            self._share_handler(text)
        except SharingUnavailable as e:
            logger.warning(f"Sharing failed: {e}")
            self.share_failed.emit(SHARING_NOT_AVAILABLE)
            return False

        self.shared.emit(text)
        return True

    def restore(self, desserts_sold: int, revenue: int) -> None:
        self.state.restore(desserts_sold, revenue)
        self.state_changed.emit(self.state.snapshot())

    def reset(self) -> None:
        self.state.reset()
        snapshot = self.state.snapshot()
        self.dessert_changed.emit(snapshot.dessert)
        self.state_changed.emit(snapshot)
