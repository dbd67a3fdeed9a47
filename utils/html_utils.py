# utils/html_utils.py
from typing import Optional

TITLE_OPEN = "<title>"
TITLE_CLOSE = "</title>"


def _find(haystack: str, needle: str, start: int = 0) -> Optional[int]:
    pos = haystack.find(needle, start)
    return pos if pos >= 0 else None


def extract_title(body: Optional[str]) -> str:
    """Текст между первым <title> и следующим за ним </title>; иначе ""."""
    if body is None:
        return ""
    opened = _find(body, TITLE_OPEN)
    if opened is None:
        return ""
    start = opened + len(TITLE_OPEN)
    end = _find(body, TITLE_CLOSE, start)
    if end is None:
        return ""
    return body[start:end]
