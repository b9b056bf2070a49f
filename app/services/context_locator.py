"""Locate the slice of page text that belongs to a region and then to a trim label.

Both stages are plain substring searches on purpose: the upstream page has no
stable markup, so we only rely on the region and label text being present
near the amount we want.
"""

import re
from typing import Optional, Union

from app.core.config import settings
from app.services.extraction_result import NotFound, NotFoundReason


def _clip(text: str, start: int, end: int) -> str:
    return text[max(0, start):min(len(text), end)]


def locate_window(page_text: str, region: str, radius: Optional[int] = None) -> Union[str, NotFound]:
    """
    지역명이 처음 등장하는 위치를 중심으로 앞뒤 ``radius`` 글자를 잘라 반환합니다.

    대소문자를 구분하는 단순 부분 문자열 검색이며, 유사 매칭은 하지 않습니다.
    지역명이 없으면 ``NotFound(REGION_NOT_FOUND)``.
    """
    idx = page_text.find(region) if (page_text and region) else -1
    if idx < 0:
        return NotFound(NotFoundReason.REGION_NOT_FOUND)
    radius = settings.REGION_WINDOW_RADIUS if radius is None else radius
    return _clip(page_text, idx - radius, idx + radius)


def locate_label(
        region_window: str,
        label: str,
        before: Optional[int] = None,
        after: Optional[int] = None,
) -> Union[str, NotFound]:
    """
    지역 블록 안에서 라벨(트림/모델명)의 첫 위치를 대소문자 무시로 찾아
    라벨 앞 ``before`` 글자, 뒤 ``after`` 글자 범위를 반환합니다.
    """
    m = re.search(re.escape(label), region_window, re.IGNORECASE) if label else None
    if not m:
        return NotFound(NotFoundReason.TRIM_OR_MONEY_NOT_FOUND)
    before = settings.LABEL_WINDOW_BEFORE if before is None else before
    after = settings.LABEL_WINDOW_AFTER if after is None else after
    idx = m.start()
    return _clip(region_window, idx - before, idx + after)
