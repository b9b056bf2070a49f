from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator, model_validator
from typing import List, Optional
from pathlib import Path
from dotenv import load_dotenv

# --------------------------
# .env 파일 로드
# --------------------------
BASE_DIR = Path(__file__).resolve().parent.parent.parent
load_dotenv(dotenv_path=BASE_DIR / ".env", override=False)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file_encoding="utf-8", extra="ignore")

    # --------------------------
    # 기본 정보
    # --------------------------
    PROJECT_NAME: str = "EV Subsidy Lookup API"
    API_VERSION: str = "2.0.0"
    LOG_LEVEL: str = "INFO"

    # --------------------------
    # 보조금 원본 페이지 (ev.or.kr)
    # --------------------------
    SUBSIDY_SOURCE_URL: str = "https://ev.or.kr/nportal/buySupprt/initPsLocalCarPirceAction.do"
    # 응답의 source 필드에 들어가는 식별자
    SUBSIDY_SOURCE_NAME: str = "ev_or_kr"
    SUBSIDY_USER_AGENT: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/124.0 Safari/537.36"
    )
    SUBSIDY_ACCEPT_HEADER: str = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"
    # 원본 페이지 호출 타임아웃(초). 무한 대기 금지.
    SUBSIDY_FETCH_TIMEOUT_SECONDS: float = 10.0

    # --------------------------
    # 텍스트 탐색 범위 (문자 수)
    # --------------------------
    # 지역명 앞뒤로 잘라낼 블록 크기
    REGION_WINDOW_RADIUS: int = 80000
    # 트림/모델 라벨 앞뒤 범위. 총액은 보통 라벨 뒤에 오므로 뒤쪽을 더 크게 잡는다.
    LABEL_WINDOW_BEFORE: int = 2000
    LABEL_WINDOW_AFTER: int = 4000

    # --------------------------
    # 캐시
    # --------------------------
    # 보조금 표는 자주 바뀌지 않으므로 24시간 유지
    SUBSIDY_CACHE_TTL_SECONDS: int = 24 * 60 * 60
    # memory | redis
    SUBSIDY_CACHE_BACKEND: str = "memory"

    # --------------------------
    # Redis 관련 (SUBSIDY_CACHE_BACKEND=redis 일 때만 사용)
    # --------------------------
    REDIS_HOST: str = "localhost"
    REDIS_PORT: int = 6379
    REDIS_PASSWORD: Optional[str] = None
    REDIS_CACHE_PREFIX: str = "subsidy:cache"

    # --------------------------
    # CORS
    # --------------------------
    # 콤마 구분 문자열. 기본은 전체 허용 ("*")
    ALLOWED_ORIGINS: str = "*"

    # --------------------------
    # 실행 환경
    # --------------------------
    ENVIRONMENT: str = "production"   # development / docker / production
    DOCKER_ENV: Optional[bool] = False

    @property
    def allowed_origins(self) -> List[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]

    @field_validator("DOCKER_ENV", mode="before")
    def parse_docker_env(cls, v):
        """DOCKER_ENV 값을 문자열에서 bool로 변환"""
        if isinstance(v, str):
            return v.lower() in ("1", "true", "yes")
        return v

    @field_validator("SUBSIDY_CACHE_BACKEND", mode="before")
    def parse_cache_backend(cls, v):
        backend = (v or "memory").strip().lower()
        if backend not in ("memory", "redis"):
            raise ValueError("SUBSIDY_CACHE_BACKEND must be 'memory' or 'redis'")
        return backend

    @model_validator(mode="after")
    def switch_redis_host(self):
        """
        Docker 환경에서는 내부 서비스 이름으로 Redis를 지정합니다.
        Production 및 Development에서는 환경변수를 그대로 사용합니다.
        """
        env = (self.ENVIRONMENT or "").lower()

        if env == "docker" or self.DOCKER_ENV:
            if self.REDIS_HOST in ("", "localhost"):
                self.REDIS_HOST = "ev_subsidy_redis"

        return self


# --------------------------
# 설정 인스턴스 생성
# --------------------------
settings = Settings()
