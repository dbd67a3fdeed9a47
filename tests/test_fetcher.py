import httpx
import pytest
import respx

from core.fetcher.errors import BadStatusError, FetchIOError
from core.fetcher.fetcher import PageFetcher, fetch_page, join_lines
from utils.html_utils import extract_title

URL = "http://example.com/page"
PAGE = "<html><title>Hello</title></html>"


def test_join_lines_drops_breaks_without_separator():
    assert join_lines("a\r\nb\nc\rd\n") == "abcd"


@respx.mock
def test_fetch_200_returns_full_body_and_title():
    respx.get(URL).mock(return_value=httpx.Response(200, text=PAGE))

    body = PageFetcher().fetch(URL)

    assert body == PAGE
    assert extract_title(body) == "Hello"


@respx.mock
def test_fetch_concatenates_lines():
    respx.get(URL).mock(return_value=httpx.Response(
        200, text="<html>\r\n<head><title>Hi</title></head>\n</html>\n"))

    assert PageFetcher().fetch(URL) == "<html><head><title>Hi</title></head></html>"


@respx.mock
def test_fetch_normalizes_missing_scheme():
    route = respx.get(URL).mock(return_value=httpx.Response(200, text=PAGE))

    assert PageFetcher().fetch("example.com/page") == PAGE
    assert route.called


@respx.mock
def test_fetch_keeps_https():
    route = respx.get("https://example.com/page").mock(return_value=httpx.Response(200, text=PAGE))

    PageFetcher().fetch("https://example.com/page")

    assert route.called


@respx.mock
def test_fetch_404_is_bad_status():
    respx.get(URL).mock(return_value=httpx.Response(404, text="not here"))

    with pytest.raises(BadStatusError) as exc:
        PageFetcher().fetch(URL)

    assert exc.value.status_code == 404
    assert exc.value.url == URL


@respx.mock
def test_fetch_does_not_follow_redirects():
    respx.get(URL).mock(return_value=httpx.Response(301, headers={"Location": "http://example.com/new"}))
    target = respx.get("http://example.com/new").mock(return_value=httpx.Response(200, text=PAGE))

    with pytest.raises(BadStatusError) as exc:
        PageFetcher().fetch(URL)

    assert exc.value.status_code == 301
    assert not target.called


@respx.mock
def test_fetch_connect_timeout_is_io_error():
    respx.get(URL).mock(side_effect=httpx.ConnectTimeout("timed out"))

    # таймаут здесь подставлен моком; что connect timeout реально доходит
    # до httpx, проверяет test_fetch_passes_configured_timeouts
    with pytest.raises(FetchIOError) as exc:
        PageFetcher(connect_timeout=0.2).fetch(URL)

    assert isinstance(exc.value.cause, httpx.ConnectTimeout)


@respx.mock
def test_fetch_connection_refused_is_io_error():
    respx.get(URL).mock(side_effect=httpx.ConnectError("refused"))

    with pytest.raises(FetchIOError) as exc:
        PageFetcher().fetch(URL)

    assert isinstance(exc.value.cause, httpx.ConnectError)


@respx.mock
def test_fetch_passes_configured_timeouts():
    route = respx.get(URL).mock(return_value=httpx.Response(200, text=PAGE))

    PageFetcher(connect_timeout=0.5, read_timeout=7.0).fetch(URL)

    timeout = route.calls.last.request.extensions["timeout"]
    assert timeout["connect"] == 0.5
    assert timeout["read"] == 7.0


def test_fetch_unsupported_scheme_is_io_error():
    with pytest.raises(FetchIOError):
        PageFetcher().fetch("ftp://example.com/file")


def test_fetch_with_mock_transport():
    def handler(request):
        assert request.method == "GET"
        return httpx.Response(200, text=PAGE)

    fetcher = PageFetcher(transport=httpx.MockTransport(handler))

    assert fetcher.fetch(URL) == PAGE


@respx.mock
def test_fetch_page_helper():
    respx.get(URL).mock(return_value=httpx.Response(200, text=PAGE))

    assert fetch_page(URL) == PAGE


def test_fetch_empty_url_rejected():
    with pytest.raises(ValueError):
        PageFetcher().fetch("  ")
