# core/fetcher/errors.py
from __future__ import annotations


class FetchError(Exception):
    """Базовая ошибка загрузки страницы."""


class BadStatusError(FetchError):
    """Сервер ответил кодом, отличным от 200."""

    def __init__(self, status_code: int, url: str = ""):
        self.status_code = int(status_code)
        self.url = url
        super().__init__(f"Error Code {self.status_code}" + (f" ({url})" if url else ""))


class FetchIOError(FetchError):
    """Сетевая ошибка: таймаут, DNS, отказ соединения, обрыв потока."""

    def __init__(self, cause: BaseException, url: str = ""):
        self.cause = cause
        self.url = url
        super().__init__(f"{type(cause).__name__}: {cause}")
