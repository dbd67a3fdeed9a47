# core/fetcher/fetch_manager.py
from __future__ import annotations

# === SECTION === Imports & Typing
from typing import Dict, List, Optional

from PySide6.QtCore import QCoreApplication, QObject, Signal, QThreadPool

from .fetch_types import FetchRequest, FetchStatus
from .runnables import CancelToken, FetchRunnable, FetchSignals


# === SECTION === FetchManager (proxy signals → UI, state holder)
class FetchManager(QObject):
    # Сигналы наружу (слушает UI-контроллер)
    fetch_log = Signal(str, str, str)       # (request_id, level, text)
    fetch_status = Signal(str, str)         # (request_id, status)
    fetch_result = Signal(str, object)      # (request_id, FetchResult)
    fetch_error = Signal(str, str)          # (request_id, error_str)
    fetch_started = Signal(str, str)        # (request_id, url)
    fetch_finished = Signal(str)            # (request_id)

    # === SECTION === Init & state
    def __init__(self, settings=None, pool: Optional[QThreadPool] = None, fetcher_factory=None):
        super().__init__()
        self.settings = settings
        self._fetcher_factory = fetcher_factory
        self._requests: Dict[str, FetchRequest] = {}
        self._tokens: Dict[str, CancelToken] = {}
        self._signals: Dict[str, FetchSignals] = {}

        self.pool = pool or QThreadPool.globalInstance()

    # === SECTION === Start/Cancel
    def start_fetch(self, raw_url: str) -> str:
        """
        Запускает загрузку в пуле и сразу возвращает request_id.
        Параллельные запросы не блокируются и не схлопываются.
        """
        request = FetchRequest.new(raw_url, self.settings)
        rid = request.id

        signals = FetchSignals()
        signals.fetch_log.connect(self.fetch_log)
        signals.fetch_status.connect(self._on_worker_status)
        signals.fetch_result.connect(self.fetch_result)
        signals.fetch_error.connect(self.fetch_error)
        signals.fetch_finished.connect(self._on_worker_finished)

        token = CancelToken()
        fetcher = self._fetcher_factory(request) if self._fetcher_factory else None
        runnable = FetchRunnable(request, signals, token=token, fetcher=fetcher)

        self._requests[rid] = request
        self._tokens[rid] = token
        # держим ссылку, иначе QObject сигналов соберёт GC до окончания run()
        self._signals[rid] = signals

        self.fetch_started.emit(rid, request.url)
        self.pool.start(runnable)
        return rid

    def cancel(self, request_id: str) -> bool:
        token = self._tokens.get(request_id)
        if token is None:
            return False
        token.cancel()
        self.fetch_log.emit(request_id, "INFO", "Cancel requested")
        return True

    def cancel_all(self) -> int:
        for token in self._tokens.values():
            token.cancel()
        return len(self._tokens)

    # === SECTION === Worker callbacks
    def _on_worker_status(self, request_id: str, status_str: str) -> None:
        request = self._requests.get(request_id)
        if request is not None:
            try:
                request.status = FetchStatus(status_str)
            except ValueError:
                self.fetch_log.emit(request_id, "WARN", f"Unknown status from worker: {status_str}")
        self.fetch_status.emit(request_id, status_str)

    def _on_worker_finished(self, request_id: str) -> None:
        self._tokens.pop(request_id, None)
        self._signals.pop(request_id, None)
        self._requests.pop(request_id, None)
        self.fetch_finished.emit(request_id)

    # === SECTION === Introspection & shutdown
    def get_request(self, request_id: str) -> Optional[FetchRequest]:
        return self._requests.get(request_id)

    def active_ids(self) -> List[str]:
        return list(self._tokens.keys())

    def is_busy(self) -> bool:
        return bool(self._tokens)

    def shutdown(self, timeout_ms: int = 5000) -> dict:
        """
        Отмена всех запросов и ожидание пула.
        Возвращает summary для логов.
        """
        summary = {"cancelled": self.cancel_all(), "joined": 0, "left": []}
        self.pool.waitForDone(timeout_ms)
        # доставить queued fetch_finished из воркеров
        if QCoreApplication.instance() is not None:
            QCoreApplication.processEvents()
        summary["left"] = self.active_ids()
        summary["joined"] = summary["cancelled"] - len(summary["left"])
        return summary
