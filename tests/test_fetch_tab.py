import time

import pytest
from PySide6.QtCore import QCoreApplication, QThreadPool, Qt

from core.fetcher.errors import BadStatusError
from core.fetcher.fetch_manager import FetchManager
from core.fetcher.fetch_types import FetchResult
from ui.panels.fetch_tab import FetchTabController

PAGE = "<html><title>Hello</title></html>"


def _wait_until(predicate, timeout=5.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        QCoreApplication.processEvents()
        if predicate():
            return True
        time.sleep(0.01)
    return False


@pytest.fixture
def make_tab(qapp, settings):
    pools = []

    def _make(fetcher):
        pool = QThreadPool()
        pools.append(pool)
        manager = FetchManager(settings=settings, pool=pool, fetcher_factory=lambda request: fetcher)
        return FetchTabController(settings=settings, manager=manager)

    yield _make
    for pool in pools:
        pool.waitForDone(5000)


def test_connect_renders_title_and_body(make_tab, settings, stub_fetcher):
    tab = make_tab(stub_fetcher(body=PAGE))
    tab.ui.editUrl.setText("example.com")

    tab.on_connect_clicked()

    assert tab.ui.progressBar.isVisibleTo(tab)
    assert _wait_until(lambda: tab.ui.textTitle.text() == "Hello")
    assert tab.ui.textHtml.toPlainText() == PAGE
    assert _wait_until(lambda: not tab.fetch_manager.is_busy())
    assert not tab.ui.progressBar.isVisibleTo(tab)
    assert settings.last_url == "example.com"


def test_bad_status_leaves_content_untouched(make_tab, stub_fetcher):
    tab = make_tab(stub_fetcher(error=BadStatusError(404)))
    tab.ui.textTitle.setText("old")
    tab.ui.editUrl.setText("example.com")

    tab.on_connect_clicked()

    assert _wait_until(lambda: not tab.fetch_manager.is_busy())
    assert tab.ui.textTitle.text() == "old"
    assert tab.ui.lblStatus.text().startswith("Failed: Error Code 404")
    assert any(level == "WARN" for _, level, _ in tab.log.log_buffer)


def test_empty_url_is_not_sent(make_tab, stub_fetcher):
    fetcher = stub_fetcher(body=PAGE)
    tab = make_tab(fetcher)
    tab.ui.editUrl.setText("   ")

    tab.on_connect_clicked()

    assert not tab.fetch_manager.is_busy()
    assert fetcher.calls == []
    assert tab.log.log_buffer[-1][1] == "WARN"


def test_render_result_without_body_is_noop(make_tab, stub_fetcher):
    tab = make_tab(stub_fetcher(body=PAGE))
    tab.ui.textTitle.setText("kept")

    tab.render_result(FetchResult.empty("rid", "http://example.com", status_code=500))

    assert tab.ui.textTitle.text() == "kept"


def test_stale_result_is_ignored(make_tab, stub_fetcher):
    tab = make_tab(stub_fetcher(body=PAGE))
    tab._current_id = "current"

    tab.on_fetch_result("older", FetchResult.from_body("older", "http://example.com", PAGE))

    assert tab.ui.textTitle.text() == ""


def test_last_url_restored(qapp, settings, stub_fetcher):
    settings.last_url = "example.org"
    manager = FetchManager(settings=settings, pool=QThreadPool(),
                           fetcher_factory=lambda request: stub_fetcher(body=PAGE))

    tab = FetchTabController(settings=settings, manager=manager)

    assert tab.ui.editUrl.text() == "example.org"


def test_cancel_button_shows_cancelled_and_keeps_content(make_tab, blocking_fetcher):
    fetcher = blocking_fetcher(body=PAGE)
    tab = make_tab(fetcher)
    tab.ui.editUrl.setText("example.com")

    tab.on_connect_clicked()
    assert fetcher.entered.wait(5)
    assert tab.ui.btnCancel.isEnabled()

    tab.on_cancel_clicked()
    fetcher.release.set()

    assert _wait_until(lambda: not tab.fetch_manager.is_busy())
    assert tab.ui.lblStatus.text() == "Cancelled"
    assert tab.ui.textTitle.text() == ""
    assert tab.ui.textHtml.toPlainText() == ""
    assert not tab.ui.btnCancel.isEnabled()


def test_title_shown_as_plain_text(make_tab, stub_fetcher):
    tab = make_tab(stub_fetcher(body=PAGE))

    tab.render_result(FetchResult.from_body("rid", "http://example.com", "<title><i>A &amp; B</i></title>"))

    assert tab.ui.textTitle.textFormat() == Qt.TextFormat.PlainText
    assert tab.ui.textTitle.text() == "<i>A &amp; B</i>"


def test_log_widget_is_capped(make_tab, stub_fetcher):
    tab = make_tab(stub_fetcher(body=PAGE))

    assert tab.ui.logOutput.maximumBlockCount() == tab.log.MAX_LOG_LINES
