"""
The MODEL layer contains pure data structures and game logic.
It has NO knowledge of the GUI (Qt).
It deals with the dessert catalog, the session counters and the share text.
"""
from dessertclicker.model.errors import DessertClickerError, InvalidCatalog, SharingUnavailable
from dessertclicker.model.dessert import (
    Catalog,
    DessertTier,
    DEFAULT_DESSERTS,
    determine_dessert_to_show,
)
from dessertclicker.model.state import SessionSnapshot, SessionState, TapResult
from dessertclicker.model.share import SHARE_TEMPLATE, ShareRequest, format_share_summary

__all__ = [
    "DessertClickerError",
    "InvalidCatalog",
    "SharingUnavailable",
    "Catalog",
    "DessertTier",
    "DEFAULT_DESSERTS",
    "determine_dessert_to_show",
    "SessionSnapshot",
    "SessionState",
    "TapResult",
    "SHARE_TEMPLATE",
    "ShareRequest",
    "format_share_summary",
]
