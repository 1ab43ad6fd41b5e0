"""
Session State (Data Model)
==========================
This module defines the counters of one running game session.

Why is this file needed?
------------------------
1. State Management: It holds desserts sold, revenue and the dessert on
   display in one place. There is exactly one instance per session.
2. Game Rule: ``tap()`` applies the click rule (charge, count, re-resolve).
3. Decoupling: Views read snapshots; the controller is the only writer.

Classes:
    TapResult: Outcome of a single click.
    SessionSnapshot: Read-only copy of the state for display.
    SessionState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging

from dessertclicker.model.dessert import Catalog, DessertTier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TapResult:
    price_charged: int
    previous_index: int
    current_index: int

    @property
    def advanced(self) -> bool:
        """True if this tap unlocked a new dessert."""
        return self.current_index != self.previous_index


@dataclass(frozen=True)
class SessionSnapshot:
    desserts_sold: int
    revenue: int
    current_index: int
    dessert: DessertTier


@dataclass
class SessionState:
    """
    Counters of the open session.

    ``current_index`` always points at the tier with the largest threshold
    that is <= ``desserts_sold``. Counts are plain Python ints, so they
    grow without bound instead of wrapping.
    """
    catalog: Catalog = field(default_factory=Catalog.default)
    desserts_sold: int = 0
    revenue: int = 0
    current_index: int = 0

    def __post_init__(self) -> None:
        self._check_counts(self.desserts_sold, self.revenue)
        self.current_index = self.catalog.index_for(self.desserts_sold)

    @staticmethod
    def _check_counts(desserts_sold: int, revenue: int) -> None:
        if desserts_sold < 0:
            raise ValueError(f"Desserts sold cannot be negative, got {desserts_sold}.")
        if revenue < 0:
            raise ValueError(f"Revenue cannot be negative, got {revenue}.")

    @property
    def current_dessert(self) -> DessertTier:
        return self.catalog[self.current_index]

    def tap(self) -> TapResult:
        """
        Sell one dessert.

        The price is taken from the dessert shown BEFORE the click, so the
        click that crosses a threshold is still charged at the old price.
        """
        previous_index = self.current_index
        price = self.current_dessert.price

        self.revenue += price
        self.desserts_sold += 1
        self.current_index = self.catalog.index_for(self.desserts_sold)

        result = TapResult(
            price_charged=price,
            previous_index=previous_index,
            current_index=self.current_index
        )
        if result.advanced:
            logger.info(
                f"Unlocked '{self.current_dessert.label}' after {self.desserts_sold} desserts sold."
            )
        return result

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            desserts_sold=self.desserts_sold,
            revenue=self.revenue,
            current_index=self.current_index,
            dessert=self.current_dessert
        )

    def restore(self, desserts_sold: int, revenue: int) -> None:
        """Load retained counters. The dessert on display is derived, never stored."""
        self._check_counts(desserts_sold, revenue)
        self.desserts_sold = desserts_sold
        self.revenue = revenue
        self.current_index = self.catalog.index_for(desserts_sold)
        logger.debug(f"Session restored: {desserts_sold} sold, revenue {revenue}.")

    def reset(self) -> None:
        """Clear all counters for a new game."""
        self.desserts_sold = 0
        self.revenue = 0
        self.current_index = 0
        logger.info("Session state has been reset.")
