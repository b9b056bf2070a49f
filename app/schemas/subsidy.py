# app/schemas/subsidy.py (amounts are in won, not 10k-won units)

from pydantic import BaseModel, ConfigDict, Field, conint
from typing import Literal, Optional

from app.services.extraction_result import NotFoundReason


class _Envelope(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_content(self) -> dict:
        """JSON 응답 본문. 값이 없는 필드는 생략."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


# --- 1. 입력 오류 (400) ---
class SubsidyErrorResponse(_Envelope):
    ok: Literal[False] = False
    error: str


# --- 2. 조회 성공 (캐시 / 원본) ---
class SubsidyFoundResponse(_Envelope):
    ok: Literal[True] = True
    source: str = Field(..., description="'cache' 또는 원본 식별자 (예: ev_or_kr)")
    method: Optional[str] = Field(None, description="매칭된 라벨 (alias:<라벨> / fallback:<라벨>)")
    updated_at: int = Field(..., alias="updatedAt", description="캐시 세대 시각 (epoch ms)")
    region: str
    trim: str
    subsidy_won: conint(ge=0) = Field(..., alias="subsidyWon", description="총 보조금 (단위: 원)")


# --- 3. 자동 조회 실패 -> 수동 입력 안내 ---
class SubsidyManualResponse(_Envelope):
    ok: Literal[False] = False
    mode: Literal["manual"] = "manual"
    region: str
    trim: str
    reason: Optional[NotFoundReason] = None
    message: str
    error: Optional[str] = Field(None, description="네트워크/HTTP 오류 진단 문자열")
