import contextlib
import logging

from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

# 프로젝트 내부 모듈 임포트
from app.core.config import settings
from app.redis_client import init_redis_client, close_redis_client
from app.api.v1.api import api_router
from app.services.subsidy_cache import SubsidyCache, RedisSubsidyCache
from app.services.subsidy_fetcher import SubsidyPageFetcher
from app.services.subsidy_service import SubsidyService

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger("app.main")


async def build_subsidy_cache():
    """
    설정에 따라 캐시 백엔드를 생성합니다.
    redis 로 설정되었지만 연결에 실패하면 메모리 캐시로 대체합니다.
    Returns (cache, redis_client or None)
    """
    ttl = settings.SUBSIDY_CACHE_TTL_SECONDS
    if settings.SUBSIDY_CACHE_BACKEND == "redis":
        client = await init_redis_client()
        if client is not None:
            return RedisSubsidyCache(client, ttl_seconds=ttl, prefix=settings.REDIS_CACHE_PREFIX), client
        logger.warning("Falling back to in-memory subsidy cache")
    return SubsidyCache(ttl_seconds=ttl), None


# --- Lifespan Context Manager 정의 ---
@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application startup: Initializing resources...")
    cache, redis_client = await build_subsidy_cache()
    app.state.subsidy_service = SubsidyService(cache=cache, fetcher=SubsidyPageFetcher())
    logger.info("Subsidy cache backend: %s (ttl=%ss)", cache.backend, settings.SUBSIDY_CACHE_TTL_SECONDS)
    yield
    logger.info("Application shutdown: Cleaning up resources...")
    await close_redis_client(redis_client)


# --- FastAPI Application 생성 ---
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.API_VERSION,
    description="EV purchase subsidy lookup (ev.or.kr) API",
    lifespan=lifespan,
)

# --- CORS: 기본은 전체 허용, ALLOWED_ORIGINS 로 제한 가능 ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_methods=["GET", "HEAD", "OPTIONS"],
    allow_headers=["*"],
)


# --- 기본 헬스 체크 엔드포인트 ---
@app.get("/", tags=["Infrastructure"])
def read_root():
    return {
        "message": "Server is running successfully!",
        "project": settings.PROJECT_NAME,
        "api_version": settings.API_VERSION
    }


@app.head("/", include_in_schema=False)
def head_root():
    """Explicit HEAD handler to make uptime probes (HEAD) return 200 without body."""
    return Response(status_code=200)


@app.get("/health", tags=["Infrastructure"], summary="Health check (subsidy cache)")
async def health_check(request: Request):
    """Returns 200 when the subsidy cache backend responds, 503 otherwise.

    Response body example:
    {
      "status": "ok",
      "cache": "memory"
    }
    """
    service = getattr(request.app.state, "subsidy_service", None)
    cache_ok = service is not None and await service.cache.ping()
    code = status.HTTP_200_OK if cache_ok else status.HTTP_503_SERVICE_UNAVAILABLE
    return JSONResponse(
        status_code=code,
        content={
            "status": "ok" if cache_ok else "down",
            "cache": service.cache.backend if service is not None else None,
        },
    )


app.include_router(api_router, prefix="/api/v1")
