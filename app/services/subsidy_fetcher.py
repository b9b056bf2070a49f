"""Fetch the upstream subsidy page (ev.or.kr) as text."""

import logging
from typing import Dict, Optional

import httpx

from app.core.config import settings

logger = logging.getLogger(__name__)


class SubsidySourceError(Exception):
    """원본 페이지 조회 실패 (네트워크 오류, 타임아웃, 2xx 이외 응답)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class SubsidyPageFetcher:
    """
    보조금 원본 페이지를 한 번 GET 합니다. 재시도는 하지 않습니다.

    ``transport`` 는 테스트에서 ``httpx.MockTransport`` 를 주입할 때 사용합니다.
    """

    def __init__(
            self,
            url: Optional[str] = None,
            timeout: Optional[float] = None,
            user_agent: Optional[str] = None,
            transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url or settings.SUBSIDY_SOURCE_URL
        self.timeout = settings.SUBSIDY_FETCH_TIMEOUT_SECONDS if timeout is None else timeout
        self.user_agent = user_agent or settings.SUBSIDY_USER_AGENT
        self.transport = transport

    def _build_headers(self) -> Dict[str, str]:
        return {
            "User-Agent": self.user_agent,
            "Accept": settings.SUBSIDY_ACCEPT_HEADER,
        }

    async def fetch(self) -> str:
        try:
            async with httpx.AsyncClient(
                    timeout=self.timeout,
                    transport=self.transport,
                    follow_redirects=True,
            ) as client:
                response = await client.get(self.url, headers=self._build_headers())
        except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError) as e:
            detail = str(e) or type(e).__name__
            logger.warning("Subsidy page request failed (%s): %s", self.url, detail)
            raise SubsidySourceError(detail) from e

        if not response.is_success:
            logger.warning("Subsidy page returned HTTP %s (%s)", response.status_code, self.url)
            raise SubsidySourceError(
                f"{response.url.host} HTTP {response.status_code}",
                status_code=response.status_code,
            )

        logger.debug("Fetched subsidy page: %d chars", len(response.text))
        return response.text
