# core/fetcher/fetcher.py
from __future__ import annotations

# === SECTION === Imports & Typing
import re
from typing import Optional

import httpx

from .errors import BadStatusError, FetchIOError
from .fetch_types import DEFAULT_CONNECT_TIMEOUT, DEFAULT_READ_TIMEOUT, normalize_url

HTTP_OK = 200

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def join_lines(text: str) -> str:
    """Склеивает строки тела без разделителей (построчное чтение)."""
    return _LINE_BREAK_RE.sub("", text or "")


# === SECTION === PageFetcher
class PageFetcher:
    """
    Один GET-запрос на вызов: без ретраев, без кеша, без редиректов.

    transport — для тестов (httpx.MockTransport и т.п.).
    """

    def __init__(
        self,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
        read_timeout: Optional[float] = DEFAULT_READ_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.connect_timeout = float(connect_timeout)
        self.read_timeout = read_timeout
        self._transport = transport

    # --- HTTP клиент ---
    def _build_client(self) -> httpx.Client:
        timeout = httpx.Timeout(self.read_timeout, connect=self.connect_timeout)
        return httpx.Client(
            timeout=timeout,
            follow_redirects=False,
            transport=self._transport,
        )

    # --- основная логика ---
    def fetch(self, url: str) -> str:
        """
        GET url → тело страницы при 200.
        Иначе BadStatusError(code); сетевые сбои → FetchIOError.
        """
        target = normalize_url(url)
        try:
            with self._build_client() as client:
                resp = client.get(target)
                if resp.status_code != HTTP_OK:
                    raise BadStatusError(resp.status_code, target)
                return join_lines(resp.text)
        except (httpx.HTTPError, OSError) as e:
            raise FetchIOError(e, target) from e


def fetch_page(
    url: str,
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
    read_timeout: Optional[float] = DEFAULT_READ_TIMEOUT,
) -> str:
    return PageFetcher(connect_timeout, read_timeout).fetch(url)
