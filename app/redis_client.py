from typing import Optional
import logging

from redis.asyncio import Redis
from redis.exceptions import RedisError

from .core.config import settings

logger = logging.getLogger(__name__)


async def init_redis_client() -> Optional[Redis]:
    """
    Redis 연결 초기화
    - settings의 호스트/포트/비밀번호 사용
    - 연결 실패 시 None 반환 (호출 측에서 메모리 캐시로 대체)
    """
    client = Redis(
        host=settings.REDIS_HOST,
        port=settings.REDIS_PORT,
        db=0,
        password=settings.REDIS_PASSWORD or None,
        decode_responses=True,
    )
    try:
        await client.ping()
    except (RedisError, OSError) as e:
        logger.error("Redis connection failed (%s:%s): %s", settings.REDIS_HOST, settings.REDIS_PORT, e)
        await client.aclose()
        return None
    logger.info("Redis connected (%s:%s)", settings.REDIS_HOST, settings.REDIS_PORT)
    return client


async def close_redis_client(client: Optional[Redis]):
    """
    Redis 연결 종료
    """
    if client is not None:
        await client.aclose()
