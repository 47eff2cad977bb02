# checkout/services/dispatch.py

"""
ORDER MESSAGE DISPATCH (WHATSAPP)

Fire-and-forget hand-off: we build the wa.me deep link the storefront opens.
`launched` reports whether a hand-off could be produced, never whether the
message was delivered.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from urllib.parse import quote

from django.conf import settings

logger = logging.getLogger(__name__)

WHATSAPP_BASE_URL = "https://wa.me"

# Characters encodeURIComponent leaves alone (besides alphanumerics and "-_.~")
_URI_COMPONENT_SAFE = "!*'()"


@dataclass(frozen=True)
class DispatchResult:
    channel: str
    launched: bool
    url: str

    def to_dict(self) -> dict:
        return asdict(self)


class WhatsAppDispatcher:
    channel = "whatsapp"

    def __init__(self, recipient: str | None = None):
        if recipient is None:
            recipient = getattr(settings, "ORDER_WHATSAPP_RECIPIENT", "")
        self.recipient = (recipient or "").strip()

    def build_url(self, message: str) -> str:
        return f"{WHATSAPP_BASE_URL}/{self.recipient}?text={quote(message, safe=_URI_COMPONENT_SAFE)}"

    def dispatch(self, message: str) -> DispatchResult:
        if not self.recipient:
            logger.warning("Order message not dispatched: no WhatsApp recipient configured")
            return DispatchResult(channel=self.channel, launched=False, url="")

        return DispatchResult(channel=self.channel, launched=True, url=self.build_url(message))
