import asyncio
import logging
from typing import Dict, Optional, Union

from app.core.config import settings
from app.schemas.subsidy import SubsidyFoundResponse, SubsidyManualResponse
from app.services.extraction import extract
from app.services.extraction_result import NotFound
from app.services.subsidy_cache import CacheHit, cache_key
from app.services.subsidy_fetcher import SubsidyPageFetcher, SubsidySourceError

logger = logging.getLogger(__name__)

CACHE_SOURCE = "cache"

EXTRACTION_FAILED_MESSAGE = (
    "자동 조회가 실패했습니다. ev.or.kr에서 해당 지역/차종 보조금(국비+지방비 합계)을 "
    "확인해 수동 입력 후 저장해 주세요."
)
FETCH_FAILED_MESSAGE = (
    "자동 조회 실패(네트워크/차단/구조변경). ev.or.kr에서 수동 확인 후 입력해 주세요."
)

SubsidyResponse = Union[SubsidyFoundResponse, SubsidyManualResponse]


class SubsidyService:
    """
    지역/트림 보조금 조회 흐름을 담당하는 서비스 클래스입니다.

    캐시 확인 -> (miss) 원본 페이지 조회 -> 추출 -> 캐시 저장 순서로 동작하며,
    추출/조회 실패는 예외 대신 수동 입력 안내 응답으로 돌려줍니다.
    실패 결과는 캐시하지 않습니다.
    """

    def __init__(self, cache, fetcher: SubsidyPageFetcher, source_name: Optional[str] = None):
        self.cache = cache
        self.fetcher = fetcher
        self.source_name = source_name or settings.SUBSIDY_SOURCE_NAME
        # 같은 키의 miss 만 묶어서 원본을 한 번만 조회. 다른 키는 병렬로 진행
        self._refresh_locks: Dict[str, asyncio.Lock] = {}
        self._lock_users: Dict[str, int] = {}

    @staticmethod
    def _cached(region: str, trim: str, hit: CacheHit) -> SubsidyFoundResponse:
        return SubsidyFoundResponse(
            source=CACHE_SOURCE,
            updated_at=hit.updated_at,
            region=region,
            trim=trim,
            subsidy_won=hit.won,
        )

    @staticmethod
    def _fetch_failed(region: str, trim: str, e: Exception) -> SubsidyManualResponse:
        return SubsidyManualResponse(
            region=region,
            trim=trim,
            message=FETCH_FAILED_MESSAGE,
            error=str(e) or type(e).__name__,
        )

    async def lookup(self, region: str, trim: str) -> SubsidyResponse:
        """region/trim 은 이미 정규화된 값이어야 합니다."""
        hit = await self.cache.get(region, trim)
        if hit is not None:
            logger.info("Subsidy cache hit: %s / %s", region, trim)
            return self._cached(region, trim, hit)

        key = cache_key(region, trim)
        lock = self._refresh_locks.setdefault(key, asyncio.Lock())
        self._lock_users[key] = self._lock_users.get(key, 0) + 1
        try:
            async with lock:
                # 대기하는 동안 다른 요청이 채웠을 수 있음
                hit = await self.cache.get(region, trim)
                if hit is not None:
                    return self._cached(region, trim, hit)
                logger.info("Subsidy cache miss: %s / %s", region, trim)
                return await self._refresh(region, trim)
        finally:
            self._lock_users[key] -= 1
            if not self._lock_users[key]:
                del self._lock_users[key]
                del self._refresh_locks[key]

    async def _refresh(self, region: str, trim: str) -> SubsidyResponse:
        try:
            page_text = await self.fetcher.fetch()
            result = extract(page_text, region, trim)
            if isinstance(result, NotFound):
                logger.info("Subsidy extraction failed for %s / %s: %s", region, trim, result.reason.value)
                return SubsidyManualResponse(
                    region=region,
                    trim=trim,
                    reason=result.reason,
                    message=EXTRACTION_FAILED_MESSAGE,
                )
            updated_at = await self.cache.put(region, trim, result.amount_won)
        except SubsidySourceError as e:
            return self._fetch_failed(region, trim, e)
        except Exception as e:
            logger.exception("Unexpected error while refreshing subsidy for %s / %s", region, trim)
            return self._fetch_failed(region, trim, e)

        logger.info(
            "Subsidy extracted for %s / %s: %d won (%s)",
            region, trim, result.amount_won, result.matched_alias,
        )
        return SubsidyFoundResponse(
            source=self.source_name,
            method=result.matched_alias,
            updated_at=updated_at,
            region=region,
            trim=trim,
            subsidy_won=result.amount_won,
        )
