# ui/log_panel.py
from typing import Iterable, List, Optional, Set, Tuple
from PySide6.QtWidgets import QPlainTextEdit
from PySide6.QtGui import QTextCursor
from PySide6.QtCore import QDateTime

from ui.log_highlighter import LogHighlighter

LEVELS = ("INFO", "WARN", "ERROR")


class LogPanel:
    # максимум строк, хранимых в буфере
    MAX_LOG_LINES = 5000

    def __init__(self, text_edit: QPlainTextEdit):
        self.text_edit = text_edit

        self.log_filter: Set[str] = set(LEVELS)                # какие уровни выводим в виджет
        self.log_buffer: List[Tuple[str, str, str]] = []       # (ts, level, msg)

        # виджет режем так же, как буфер
        self.text_edit.setMaximumBlockCount(self.MAX_LOG_LINES)

        self._highlighter = LogHighlighter(self.text_edit.document())

    # --- публичные методы ---
    def clear(self) -> None:
        self.text_edit.clear()
        self.log_buffer.clear()

    def set_filter(self, levels: Iterable[str]) -> None:
        """Уровни, которые показываются в виджете (буфер пишется всегда)."""
        self.log_filter = {str(l).upper() for l in levels}
        self._rerender()

    def toggle_level(self, level: str, enabled: bool) -> None:
        levels = set(self.log_filter)
        if enabled:
            levels.add(level.upper())
        else:
            levels.discard(level.upper())
        self.set_filter(levels)

    def append(self, level: str, text: str, tag: Optional[str] = None) -> None:
        """Формат: [HH:MM:SS] [LEVEL] [tag] message"""
        level = (level or "INFO").upper()
        if level not in LEVELS:
            level = "INFO"
        ts = QDateTime.currentDateTime().toString("HH:mm:ss")
        msg = f"[{tag}] {text}" if tag else str(text)

        self.log_buffer.append((ts, level, msg))
        if len(self.log_buffer) > self.MAX_LOG_LINES:
            del self.log_buffer[:500]

        if level in self.log_filter:
            self._write(self._format(ts, level, msg))

    def lines(self) -> List[str]:
        return [self._format(ts, lvl, msg) for ts, lvl, msg in self.log_buffer]

    # --- internal ---
    @staticmethod
    def _format(ts: str, level: str, msg: str) -> str:
        return f"[{ts}] [{level}] {msg}"

    def _write(self, line: str) -> None:
        cursor = self.text_edit.textCursor()
        cursor.movePosition(QTextCursor.End)
        cursor.insertText(line + "\n")
        self.text_edit.setTextCursor(cursor)
        self.text_edit.ensureCursorVisible()

    def _rerender(self) -> None:
        self.text_edit.clear()
        for ts, level, msg in self.log_buffer:
            if level in self.log_filter:
                self._write(self._format(ts, level, msg))
