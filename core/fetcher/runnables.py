# core/fetcher/runnables.py
from __future__ import annotations

# === SECTION === Imports & Typing
import threading
import time
from typing import Optional

from PySide6.QtCore import QObject, Signal, QRunnable

from .errors import BadStatusError, FetchIOError
from .fetch_types import FetchRequest, FetchResult, FetchStatus
from .fetcher import PageFetcher


# === SECTION === Signals
class FetchSignals(QObject):
    """Thread-safe события из воркера в UI."""
    fetch_log = Signal(str, str, str)       # request_id, level, text
    fetch_status = Signal(str, str)         # request_id, status_str
    fetch_result = Signal(str, object)      # request_id, FetchResult
    fetch_error = Signal(str, str)          # request_id, error_str
    fetch_finished = Signal(str)            # request_id


# === SECTION === Cancel token
class CancelToken:
    """
    Явный флаг отмены. Блокирующий GET он не прерывает:
    результат отменённого запроса просто отбрасывается.
    """

    def __init__(self):
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()


# === SECTION === Fetch Runnable
class FetchRunnable(QRunnable):
    # --- Lifecycle ---
    def __init__(
        self,
        request: FetchRequest,
        signals: FetchSignals,
        token: Optional[CancelToken] = None,
        fetcher: Optional[PageFetcher] = None,
    ):
        super().__init__()
        self.request = request
        self.signals = signals
        self.token = token or CancelToken()
        self.fetcher = fetcher or PageFetcher(request.connect_timeout, request.read_timeout)

    # --- Internal helpers ---
    def _set_status(self, status: FetchStatus) -> None:
        self.request.status = status
        self.signals.fetch_status.emit(self.request.id, status.value)

    def _check_cancel(self) -> bool:
        """True — запрос отменён, результат не публикуем."""
        if self.token.is_cancelled:
            self._set_status(FetchStatus.CANCELLED)
            self.signals.fetch_log.emit(self.request.id, "INFO", "Cancelled, result dropped")
            return True
        return False

    # --- Main entry point ---
    def run(self) -> None:
        rid = self.request.id
        url = self.request.url

        try:
            if self._check_cancel():
                return

            self._set_status(FetchStatus.RUNNING)
            self.signals.fetch_log.emit(
                rid, "INFO",
                f"Request GET {url} (connect timeout {int(self.request.connect_timeout * 1000)} ms)",
            )

            t0 = time.perf_counter()
            body = self.fetcher.fetch(url)
            elapsed_ms = int((time.perf_counter() - t0) * 1000)

            if self._check_cancel():
                return

            result = FetchResult.from_body(rid, url, body, elapsed_ms=elapsed_ms)
            self.signals.fetch_result.emit(rid, result)
            self._set_status(FetchStatus.DONE)
            self.signals.fetch_log.emit(
                rid, "INFO", f"Done {url} (200) [{elapsed_ms} ms] title={result.title!r}",
            )

        except BadStatusError as e:
            if self._check_cancel():
                return
            self._set_status(FetchStatus.FAILED)
            self.signals.fetch_log.emit(rid, "WARN", f"Error Code {e.status_code}")
            self.signals.fetch_error.emit(rid, str(e))
        except FetchIOError as e:
            if self._check_cancel():
                return
            self._set_status(FetchStatus.FAILED)
            self.signals.fetch_log.emit(rid, "ERROR", str(e))
            self.signals.fetch_error.emit(rid, str(e))
        except Exception as e:
            if self._check_cancel():
                return
            msg = f"Unhandled error: {type(e).__name__}: {e}"
            self._set_status(FetchStatus.FAILED)
            self.signals.fetch_log.emit(rid, "ERROR", msg)
            self.signals.fetch_error.emit(rid, msg)
        finally:
            self.signals.fetch_finished.emit(rid)
