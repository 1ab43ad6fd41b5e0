"""
Dessert Screen Widget
=====================
The central game area: bakery background, the clickable dessert, and the
transaction info panel underneath.

The widget never changes the game state itself. It emits ``dessert_clicked``
and re-draws whatever snapshot it is given.
"""
from __future__ import annotations

import logging
import os
from typing import Dict, Optional

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QFrame, QSizePolicy
)
from PySide6.QtCore import Qt, QSize, Signal
from PySide6.QtGui import QIcon, QPainter, QPixmap

from dessertclicker import config
from dessertclicker.model.dessert import DessertTier
from dessertclicker.model.state import SessionSnapshot

logger = logging.getLogger(__name__)


class TransactionInfo(QFrame):
    """Two rows: desserts sold and total revenue."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setObjectName("TransactionInfo")
        self.setStyleSheet("#TransactionInfo { background-color: #F6DDE4; }")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)

        # 1. Desserts Sold
        sold_row = QHBoxLayout()
        sold_row.addWidget(self._caption("Desserts Sold", 16))
        sold_row.addStretch()
        self.lbl_sold = self._caption("0", 16)
        sold_row.addWidget(self.lbl_sold)
        layout.addLayout(sold_row)

        # 2. Total Revenue
        revenue_row = QHBoxLayout()
        revenue_row.addWidget(self._caption("Total Revenue", 22))
        revenue_row.addStretch()
        self.lbl_revenue = self._caption("$0", 22)
        self.lbl_revenue.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        revenue_row.addWidget(self.lbl_revenue)
        layout.addLayout(revenue_row)

    @staticmethod
    def _caption(text: str, point_size: int) -> QLabel:
        label = QLabel(text)
        font = label.font()
        font.setPointSize(point_size)
        label.setFont(font)
        label.setStyleSheet("color: #31111D;")
        return label

    def set_values(self, desserts_sold: int, revenue: int) -> None:
        self.lbl_sold.setText(str(desserts_sold))
        self.lbl_revenue.setText(f"${revenue}")


class DessertClickerScreen(QWidget):
    # Emitted on every click on the dessert image
    dessert_clicked = Signal()

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._pixmaps: Dict[str, QPixmap] = {}
        self._background = QPixmap(config.BACKGROUND_IMAGE_PATH)
        if self._background.isNull():
            logger.warning(f"Background image not found at {config.BACKGROUND_IMAGE_PATH}")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        # --- Dessert (fills the free space, centered) ---
        self.btn_dessert = QPushButton()
        self.btn_dessert.setFlat(True)
        self.btn_dessert.setCursor(Qt.PointingHandCursor)
        self.btn_dessert.setFocusPolicy(Qt.NoFocus)
        self.btn_dessert.setIconSize(QSize(config.IMAGE_SIZE_PX, config.IMAGE_SIZE_PX))
        self.btn_dessert.setFixedSize(config.IMAGE_SIZE_PX + 20, config.IMAGE_SIZE_PX + 20)
        self.btn_dessert.setStyleSheet("QPushButton { border: none; background: transparent; }")
        self.btn_dessert.clicked.connect(self.dessert_clicked)

        dessert_area = QWidget()
        dessert_area.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        dessert_layout = QVBoxLayout(dessert_area)
        dessert_layout.addWidget(self.btn_dessert, alignment=Qt.AlignCenter)
        layout.addWidget(dessert_area, stretch=1)

        # --- Transaction Info ---
        self.transaction_info = TransactionInfo()
        layout.addWidget(self.transaction_info)

    # --- HELPERS ---

    def _pixmap_for(self, dessert: DessertTier) -> QPixmap:
        if dessert.image_ref not in self._pixmaps:
            path = os.path.join(config.DESSERT_IMAGES_PATH, dessert.image_ref)
            pixmap = QPixmap(path)
            if pixmap.isNull():
                logger.warning(f"Could not load image for '{dessert.label}' from {path}")
            self._pixmaps[dessert.image_ref] = pixmap
        return self._pixmaps[dessert.image_ref]

    def show_dessert(self, dessert: DessertTier) -> None:
        pixmap = self._pixmap_for(dessert)
        if pixmap.isNull():
            # Text fallback keeps the game playable without assets
            self.btn_dessert.setIcon(QIcon())
            self.btn_dessert.setText(dessert.label)
        else:
            self.btn_dessert.setText("")
            self.btn_dessert.setIcon(QIcon(pixmap))
        self.btn_dessert.setToolTip(f"{dessert.label} (${dessert.price})")

    def set_snapshot(self, snapshot: SessionSnapshot) -> None:
        """Re-draw the screen from a state snapshot."""
        self.show_dessert(snapshot.dessert)
        self.transaction_info.set_values(snapshot.desserts_sold, snapshot.revenue)

    # --- EVENTS ---

    def paintEvent(self, event, /) -> None:
        if not self._background.isNull():
            painter = QPainter(self)
            # Crop: scale to cover the widget, then center
            scaled = self._background.scaled(
                self.size(), Qt.KeepAspectRatioByExpanding, Qt.SmoothTransformation
            )
            x = (self.width() - scaled.width()) // 2
            y = (self.height() - scaled.height()) // 2
            painter.drawPixmap(x, y, scaled)
            painter.end()
        super().paintEvent(event)
