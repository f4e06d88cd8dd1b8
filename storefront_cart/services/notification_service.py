# storefront_cart/services/notification_service.py
from collections import deque
from threading import Lock
from typing import Protocol

from storefront_cart.utils.logging import get_logger

logger = get_logger(__name__)


class Notifier(Protocol):
    def error(self, message: str) -> None: ...


class ToastNotifier:
    """
    Sink na powiadomienia dla uzytkownika (toasty).
    Fire-and-forget: loguje i buforuje, UI odbiera przez drain().
    """

    def __init__(self, maxlen: int = 50):
        self._pending: deque[str] = deque(maxlen=maxlen)
        self._lock = Lock()

    def error(self, message: str) -> None:
        logger.warning(f"[TOAST] {message}")
        with self._lock:
            self._pending.append(message)

    def drain(self) -> list[str]:
        with self._lock:
            messages = list(self._pending)
            self._pending.clear()
        return messages
