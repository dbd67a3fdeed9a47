# core/settings.py
from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QSettings

ORG_NAME = "PageTitleFetcher"
APP_NAME = "PageTitleFetcher"

DEFAULT_CONNECT_TIMEOUT_MS = 1000
DEFAULT_READ_TIMEOUT_MS = 10000

KEY_CONNECT_TIMEOUT = "net/connect_timeout_ms"
KEY_READ_TIMEOUT = "net/read_timeout_ms"
KEY_LAST_URL = "ui/last_url"


def _to_ms(value, default: int) -> int:
    # QSettings на некоторых платформах отдаёт строки
    try:
        ms = int(value)
    except (TypeError, ValueError):
        return default
    return max(1, ms)


class AppSettings:
    """Тонкая обёртка над QSettings: таймауты и последний URL."""

    def __init__(self, settings: Optional[QSettings] = None):
        self.qs = settings if settings is not None else QSettings(ORG_NAME, APP_NAME)

    # --- timeouts (ms в хранилище, секунды наружу для httpx) ---
    @property
    def connect_timeout_ms(self) -> int:
        return _to_ms(self.qs.value(KEY_CONNECT_TIMEOUT, DEFAULT_CONNECT_TIMEOUT_MS),
                      DEFAULT_CONNECT_TIMEOUT_MS)

    @connect_timeout_ms.setter
    def connect_timeout_ms(self, value: int) -> None:
        self.qs.setValue(KEY_CONNECT_TIMEOUT, _to_ms(value, DEFAULT_CONNECT_TIMEOUT_MS))

    @property
    def read_timeout_ms(self) -> int:
        return _to_ms(self.qs.value(KEY_READ_TIMEOUT, DEFAULT_READ_TIMEOUT_MS),
                      DEFAULT_READ_TIMEOUT_MS)

    @read_timeout_ms.setter
    def read_timeout_ms(self, value: int) -> None:
        self.qs.setValue(KEY_READ_TIMEOUT, _to_ms(value, DEFAULT_READ_TIMEOUT_MS))

    @property
    def connect_timeout(self) -> float:
        return self.connect_timeout_ms / 1000.0

    @property
    def read_timeout(self) -> float:
        return self.read_timeout_ms / 1000.0

    # --- last url ---
    @property
    def last_url(self) -> str:
        value = self.qs.value(KEY_LAST_URL, "")
        return str(value or "")

    @last_url.setter
    def last_url(self, value: str) -> None:
        self.qs.setValue(KEY_LAST_URL, (value or "").strip())

    def sync(self) -> None:
        self.qs.sync()
