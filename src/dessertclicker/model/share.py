"""
Share summary text.
"""
from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote

SHARE_TEMPLATE = "I've clicked {desserts_sold} desserts for a total of ${revenue}!"
SHARE_SUBJECT = "Dessert Clicker"


def format_share_summary(desserts_sold: int, revenue: int, template: str = SHARE_TEMPLATE) -> str:
    """Fill the share template with the current counters."""
    return template.format(desserts_sold=desserts_sold, revenue=revenue)


@dataclass(frozen=True)
class ShareRequest:
    """Plain-text payload handed to the desktop share mechanism."""
    text: str
    subject: str = SHARE_SUBJECT
    mime_type: str = "text/plain"

    def to_mailto_url(self) -> str:
        return f"mailto:?subject={quote(self.subject)}&body={quote(self.text)}"
