"""
Session Retention (QSettings)
Saves the session counters when the window goes away and loads them when it
is created again.

Both counters are kept. The dessert on display is not stored; it is derived
from the number sold when the state is restored.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QSettings

from dessertclicker.model.state import SessionState

logger = logging.getLogger(__name__)

KEY_DESSERTS_SOLD = "session/desserts_sold"
KEY_REVENUE = "session/revenue"


class SessionStore:
    def __init__(self, settings: Optional[QSettings] = None) -> None:
        self.settings: QSettings = settings if settings is not None else QSettings()

    def save(self, state: SessionState) -> None:
        # Stored as strings: QSettings integers are limited to 64 bits
        self.settings.setValue(KEY_DESSERTS_SOLD, str(state.desserts_sold))
        self.settings.setValue(KEY_REVENUE, str(state.revenue))
        self.settings.sync()
        logger.info(
            f"Session saved: {state.desserts_sold} sold, revenue {state.revenue} "
            f"({self.settings.fileName()})"
        )

    def has_saved_session(self) -> bool:
        return self.settings.contains(KEY_DESSERTS_SOLD) and self.settings.contains(KEY_REVENUE)

    def load(self) -> Optional[tuple[int, int]]:
        """Stored ``(desserts_sold, revenue)``, or None if missing or unreadable."""
        if not self.has_saved_session():
            logger.debug("No saved session found.")
            return None

        try:
            desserts_sold = int(str(self.settings.value(KEY_DESSERTS_SOLD)))
            revenue = int(str(self.settings.value(KEY_REVENUE)))
        except ValueError as e:
            logger.warning(f"Ignoring unreadable saved session: {e}")
            return None

        if desserts_sold < 0 or revenue < 0:
            logger.warning(
                f"Ignoring saved session with negative values ({desserts_sold}, {revenue})."
            )
            return None

        return desserts_sold, revenue

    def load_into(self, state: SessionState) -> bool:
        """Restore saved counters into ``state``. Returns True if anything was loaded."""
        values = self.load()
        if values is None:
            return False
        state.restore(*values)
        logger.info(f"Session loaded: {values[0]} sold, revenue {values[1]}.")
        return True

    def clear(self) -> None:
        self.settings.remove(KEY_DESSERTS_SOLD)
        self.settings.remove(KEY_REVENUE)
        self.settings.sync()
        logger.info("Saved session cleared.")
