# core/fetcher/fetch_types.py
from __future__ import annotations

# === SECTION === Imports & Typing
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional
import re
import uuid

from utils.html_utils import extract_title

DEFAULT_SCHEME = "http://"

DEFAULT_CONNECT_TIMEOUT = 1.0   # сек
DEFAULT_READ_TIMEOUT = 10.0     # сек

_HAS_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")


# === SECTION === URL normalization
def normalize_url(raw: str) -> str:
    """
    Приводит ввод пользователя к URL запроса.

    "example.com"         -> "http://example.com"
    "http://example.com"  -> без изменений
    "https://example.com" -> без изменений
    Иные "scheme://..." пропускаются как есть и падают уже на запросе.
    """
    url = (raw or "").strip()
    if not url:
        raise ValueError("url must be non-empty")
    if _HAS_SCHEME_RE.match(url):
        return url
    return DEFAULT_SCHEME + url


# === SECTION === Status Enum
class FetchStatus(str, Enum):
    PENDING = "Pending"
    RUNNING = "Running"
    DONE = "Done"
    FAILED = "Failed"
    CANCELLED = "Cancelled"


# === SECTION === Dataclass: FetchRequest
@dataclass
class FetchRequest:
    id: str
    url: str
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    read_timeout: float = DEFAULT_READ_TIMEOUT
    status: FetchStatus = FetchStatus.PENDING
    created_at: datetime = field(default_factory=datetime.now)

    @staticmethod
    def new(raw_url: str, settings: Optional[Any] = None) -> "FetchRequest":
        """
        Фабрика запроса. settings — любой объект с connect_timeout/read_timeout
        в секундах (обычно core.settings.AppSettings).
        """
        connect_timeout = getattr(settings, "connect_timeout", None) or DEFAULT_CONNECT_TIMEOUT
        read_timeout = getattr(settings, "read_timeout", None) or DEFAULT_READ_TIMEOUT
        return FetchRequest(
            id=uuid.uuid4().hex,
            url=normalize_url(raw_url),
            connect_timeout=float(connect_timeout),
            read_timeout=float(read_timeout),
        )

    def is_terminal(self) -> bool:
        return self.status in (FetchStatus.DONE, FetchStatus.FAILED, FetchStatus.CANCELLED)


# === SECTION === Dataclass: FetchResult
@dataclass(frozen=True)
class FetchResult:
    request_id: str
    url: str
    status_code: Optional[int] = None
    body: Optional[str] = None
    title: str = ""
    elapsed_ms: int = 0

    @staticmethod
    def from_body(request_id: str, url: str, body: Optional[str],
                  status_code: int = 200, elapsed_ms: int = 0) -> "FetchResult":
        return FetchResult(
            request_id=request_id,
            url=url,
            status_code=status_code,
            body=body,
            title=extract_title(body),
            elapsed_ms=elapsed_ms,
        )

    @staticmethod
    def empty(request_id: str, url: str, status_code: Optional[int] = None) -> "FetchResult":
        # «нечего показывать»
        return FetchResult(request_id=request_id, url=url, status_code=status_code)

    @property
    def has_body(self) -> bool:
        return self.body is not None
