"""Whitespace normalisation shared by request parsing and page extraction."""

import re
from typing import Optional

_WHITESPACE_RE = re.compile(r"\s+")


def normalize(value: Optional[str]) -> str:
    """앞뒤 공백 제거 + 연속 공백을 한 칸으로 축약. None 은 빈 문자열."""
    if not value:
        return ""
    return _WHITESPACE_RE.sub(" ", value.strip())
