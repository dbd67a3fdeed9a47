import os
import threading

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtCore import QSettings
from PySide6.QtWidgets import QApplication

from core.settings import AppSettings


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def settings(tmp_path):
    qs = QSettings(str(tmp_path / "settings.ini"), QSettings.Format.IniFormat)
    return AppSettings(qs)


class StubFetcher:
    """Подменяет PageFetcher: отдаёт заранее заданное тело или бросает ошибку."""

    def __init__(self, body=None, error=None, on_fetch=None):
        self.body = body
        self.error = error
        self.on_fetch = on_fetch
        self.calls = []

    def fetch(self, url):
        self.calls.append(url)
        if self.on_fetch:
            self.on_fetch()
        if self.error is not None:
            raise self.error
        return self.body


@pytest.fixture
def stub_fetcher():
    return StubFetcher


class BlockingFetcher:
    """Висит в fetch(), пока тест не отпустит release; затем отдаёт body или бросает error."""

    def __init__(self, body=None, error=None):
        self.body = body
        self.error = error
        self.entered = threading.Event()
        self.release = threading.Event()

    def fetch(self, url):
        self.entered.set()
        self.release.wait(5)
        if self.error is not None:
            raise self.error
        return self.body


@pytest.fixture
def blocking_fetcher():
    return BlockingFetcher
