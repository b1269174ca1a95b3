"""
Visibility of the error and success messages on the services page.

Every message auto-hides after a fixed window.  Each shown message
keeps its own deadline, so dismissing an old message can never hide a
newer one that was shown in the meantime.
"""

import time
from typing import Callable, Dict, List, Optional

from laundry_site.app.core.config import settings

SUCCESS_MESSAGE = "success-msg"

MESSAGE_IDS = (
    "error-msg",
    "error-name",
    "error-email",
    "error-email-invalid",
    "error-phone",
    SUCCESS_MESSAGE,
)


class MessageBoard:
    def __init__(
        self,
        timeout: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.timeout = settings.message_timeout if timeout is None else timeout
        self._clock = clock
        self._deadlines: Dict[str, float] = {}

    def hide_all(self) -> None:
        self._deadlines.clear()

    def show(self, message_id: str) -> None:
        """Hide every message, then show ``message_id`` for the timeout."""
        if message_id not in MESSAGE_IDS:
            raise ValueError(f"Unknown message element: {message_id}")
        self.hide_all()
        self._deadlines[message_id] = self._clock() + self.timeout

    def show_success(self) -> None:
        self._deadlines[SUCCESS_MESSAGE] = self._clock() + self.timeout

    def is_visible(self, message_id: str) -> bool:
        deadline = self._deadlines.get(message_id)
        return deadline is not None and self._clock() < deadline

    def visible(self) -> List[str]:
        return [message_id for message_id in MESSAGE_IDS if self.is_visible(message_id)]
