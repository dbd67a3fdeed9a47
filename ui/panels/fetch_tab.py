# ui/panels/fetch_tab.py
from __future__ import annotations
from typing import Optional
from PySide6.QtCore import Slot
from PySide6.QtWidgets import QWidget

from core.fetcher.fetch_manager import FetchManager
from core.fetcher.fetch_types import FetchResult, FetchStatus
from core.settings import AppSettings
from ui.log_panel import LogPanel
from .fetch_panel_ui import Ui_fetch_panel


class FetchTabController(QWidget):
    def __init__(self, parent=None, settings: Optional[AppSettings] = None,
                 manager: Optional[FetchManager] = None):
        super().__init__(parent)

        # 1) UI
        self.ui = Ui_fetch_panel()
        self.ui.setupUi(self)

        # 2) Настройки + менеджер
        self.settings = settings or AppSettings()
        self.fetch_manager = manager or FetchManager(settings=self.settings)

        # id последнего запроса: рисуем только его результат
        self._current_id: Optional[str] = None

        self.log = LogPanel(self.ui.logOutput)

        # 3) Сигналы менеджера -> контроллер
        self.fetch_manager.fetch_log.connect(self.on_fetch_log)
        self.fetch_manager.fetch_status.connect(self.on_fetch_status)
        self.fetch_manager.fetch_result.connect(self.on_fetch_result)
        self.fetch_manager.fetch_error.connect(self.on_fetch_error)
        self.fetch_manager.fetch_finished.connect(self.on_fetch_finished)

        # 4) Кнопки
        self.ui.btnConnect.clicked.connect(self.on_connect_clicked)
        self.ui.editUrl.returnPressed.connect(self.on_connect_clicked)
        self.ui.btnCancel.clicked.connect(self.on_cancel_clicked)
        self.ui.btnClearLog.clicked.connect(self.log.clear)
        self.ui.btnInfo.toggled.connect(lambda on: self.log.toggle_level("INFO", on))
        self.ui.btnWarn.toggled.connect(lambda on: self.log.toggle_level("WARN", on))
        self.ui.btnError.toggled.connect(lambda on: self.log.toggle_level("ERROR", on))

        self.ui.editUrl.setText(self.settings.last_url)

    # === SECTION === UI actions
    @Slot()
    def on_connect_clicked(self):
        raw = self.ui.editUrl.text()
        try:
            rid = self.fetch_manager.start_fetch(raw)
        except ValueError as e:
            self.log.append("WARN", f"Bad URL: {e}", tag="UI")
            self.ui.lblStatus.setText("Enter a URL")
            return

        self._current_id = rid
        self.settings.last_url = raw
        request = self.fetch_manager.get_request(rid)
        url = request.url if request else raw
        self.log.append("INFO", f"Connect → {url}", tag="UI")
        self.ui.lblStatus.setText(f"HttpURLConnection.. {url}")
        self._set_busy(True)

    @Slot()
    def on_cancel_clicked(self):
        if self._current_id:
            self.fetch_manager.cancel(self._current_id)

    # === SECTION === Rendering
    def render_result(self, result: FetchResult) -> None:
        # отсутствующее тело = «нечего показывать»
        if not result.has_body:
            return
        self.ui.textTitle.setText(result.title)
        self.ui.textHtml.setPlainText(result.body)
        self.ui.lblStatus.setText(f"{result.status_code} · {result.elapsed_ms} ms · {result.url}")

    def _set_busy(self, busy: bool) -> None:
        self.ui.progressBar.setVisible(busy)
        self.ui.btnCancel.setEnabled(busy)

    def _is_current(self, request_id: str) -> bool:
        return bool(request_id) and request_id == self._current_id

    # === SECTION === Manager callbacks
    @Slot(str, str, str)
    def on_fetch_log(self, request_id: str, level: str, text: str):
        self.log.append(level, text, tag=request_id[:8] if request_id else None)

    @Slot(str, str)
    def on_fetch_status(self, request_id: str, status: str):
        if self._is_current(request_id) and status == FetchStatus.CANCELLED.value:
            self.ui.lblStatus.setText("Cancelled")

    @Slot(str, object)
    def on_fetch_result(self, request_id: str, result: FetchResult):
        if not self._is_current(request_id):
            self.log.append("INFO", "Stale result ignored", tag=request_id[:8])
            return
        self.render_result(result)

    @Slot(str, str)
    def on_fetch_error(self, request_id: str, error_str: str):
        if self._is_current(request_id):
            self.ui.lblStatus.setText(f"Failed: {error_str}")

    @Slot(str)
    def on_fetch_finished(self, request_id: str):
        if self._is_current(request_id):
            self._current_id = None
            self._set_busy(False)

    # === SECTION === Shutdown
    def shutdown(self, timeout_ms: int = 5000) -> dict:
        self.settings.sync()
        return self.fetch_manager.shutdown(timeout_ms=timeout_ms)
