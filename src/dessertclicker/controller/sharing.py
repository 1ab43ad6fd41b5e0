"""
Desktop Sharing
===============
Hands the share summary to whatever the desktop offers for sending text.

On a desktop there is no share chooser, so the summary is opened as a new
mail message (``mailto:`` URL). If Qt cannot open it, ``SharingUnavailable``
is raised and the caller decides how to tell the user.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from PySide6.QtCore import QUrl
from PySide6.QtGui import QDesktopServices, QGuiApplication

from dessertclicker.model.errors import SharingUnavailable
from dessertclicker.model.share import ShareRequest

logger = logging.getLogger(__name__)

UrlOpener = Callable[[str], bool]


def open_url_with_desktop(url: str) -> bool:
    """Ask the desktop environment to open ``url``. Needs a running QGuiApplication."""
    if not isinstance(QGuiApplication.instance(), QGuiApplication):
        logger.warning("No GUI application running, cannot open share URL.")
        return False
    return QDesktopServices.openUrl(QUrl(url))


def share_text(text: str, opener: Optional[UrlOpener] = None) -> ShareRequest:
    """
    Send ``text`` to the external share mechanism.

    Raises:
        SharingUnavailable: if no handler accepted the request.
    """
    request = ShareRequest(text=text)
    opener = opener or open_url_with_desktop

    url = request.to_mailto_url()
    logger.debug(f"Opening share URL: {url}")
    if not opener(url):
        raise SharingUnavailable("No application is available to share the summary.")

    logger.info("Share summary handed to the desktop.")
    return request


def copy_to_clipboard(text: str) -> None:
    """Put ``text`` on the system clipboard."""
    if not isinstance(QGuiApplication.instance(), QGuiApplication):
        raise SharingUnavailable("Clipboard is not available without a GUI application.")
    QGuiApplication.clipboard().setText(text)
    logger.info("Share summary copied to clipboard.")
