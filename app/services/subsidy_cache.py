"""Result cache for extracted subsidy amounts.

All entries share one generation timestamp: a lookup is a hit only while the
last ``put`` (for any key) is within the TTL. A ``put`` after expiry starts a
new generation but keeps older entries, which then become servable again.
"""

import logging
import time
from typing import Callable, Dict, NamedTuple, Optional

from redis.asyncio import Redis
from redis.exceptions import RedisError

logger = logging.getLogger(__name__)


class CacheHit(NamedTuple):
    won: int
    updated_at: int  # epoch ms of the cache generation


def _now_ms(clock: Callable[[], float]) -> int:
    return int(clock() * 1000)


def cache_key(region: str, trim: str) -> str:
    return f"{region}||{trim}"


class SubsidyCache:
    """프로세스 메모리 캐시. 이벤트 루프 안에서만 접근한다."""

    backend = "memory"

    def __init__(self, ttl_seconds: int, clock: Callable[[], float] = time.time):
        self.ttl_ms = ttl_seconds * 1000
        self._clock = clock
        self._entries: Dict[str, int] = {}
        self._generation_ts = 0

    async def get(self, region: str, trim: str) -> Optional[CacheHit]:
        won = self._entries.get(cache_key(region, trim))
        if won is None:
            return None
        if _now_ms(self._clock) - self._generation_ts >= self.ttl_ms:
            return None
        return CacheHit(won=won, updated_at=self._generation_ts)

    async def put(self, region: str, trim: str, won: int) -> int:
        self._generation_ts = _now_ms(self._clock)
        self._entries[cache_key(region, trim)] = won
        return self._generation_ts

    async def clear(self) -> int:
        removed = len(self._entries)
        self._entries.clear()
        self._generation_ts = 0
        return removed

    async def ping(self) -> bool:
        return True


class RedisSubsidyCache:
    """
    같은 세대(generation) 규칙을 Redis 위에서 구현합니다.

    - ``{prefix}:map``: ``region||trim`` -> 금액(원) 해시
    - ``{prefix}:ts``: 마지막 저장 시각 (epoch ms)

    Redis 오류는 로그만 남기고 miss / no-op 으로 처리합니다.
    """

    backend = "redis"

    def __init__(
            self,
            client: Redis,
            ttl_seconds: int,
            prefix: str = "subsidy:cache",
            clock: Callable[[], float] = time.time,
    ):
        self.client = client
        self.ttl_ms = ttl_seconds * 1000
        self.map_key = f"{prefix}:map"
        self.ts_key = f"{prefix}:ts"
        self._clock = clock

    async def get(self, region: str, trim: str) -> Optional[CacheHit]:
        try:
            raw_won = await self.client.hget(self.map_key, cache_key(region, trim))
            raw_ts = await self.client.get(self.ts_key)
        except RedisError as e:
            logger.warning("Redis cache read failed: %s", e)
            return None
        if raw_won is None or raw_ts is None:
            return None
        try:
            generation_ts = int(raw_ts)
            won = int(raw_won)
        except ValueError:
            logger.warning("Corrupt subsidy cache entry (%s, ts=%r, won=%r)", cache_key(region, trim), raw_ts, raw_won)
            return None
        if _now_ms(self._clock) - generation_ts >= self.ttl_ms:
            return None
        return CacheHit(won=won, updated_at=generation_ts)

    async def put(self, region: str, trim: str, won: int) -> int:
        now = _now_ms(self._clock)
        try:
            await self.client.hset(self.map_key, cache_key(region, trim), won)
            await self.client.set(self.ts_key, now)
        except RedisError as e:
            logger.warning("Redis cache write failed: %s", e)
        return now

    async def clear(self) -> int:
        try:
            return await self.client.delete(self.map_key, self.ts_key)
        except RedisError as e:
            logger.warning("Redis cache clear failed: %s", e)
            return 0

    async def ping(self) -> bool:
        try:
            await self.client.ping()
            return True
        except RedisError:
            return False
