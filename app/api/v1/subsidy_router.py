# app/api/v1/subsidy_router.py

from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from starlette import status

from app.api.deps import get_subsidy_service
from app.schemas.subsidy import SubsidyErrorResponse
from app.services.subsidy_service import SubsidyService
from app.services.text import normalize

NO_STORE_HEADERS = {"Cache-Control": "no-store"}

# ----------------------------------------------------------------
# APIRouter 인스턴스 생성
# ----------------------------------------------------------------
router = APIRouter(
    prefix="/subsidy",
    tags=["Subsidy"]
)


# ----------------------------------------------------------------
# Subsidy Endpoints
# ----------------------------------------------------------------
@router.get(
    "",
    summary="지역/트림별 전기차 구매 보조금 조회",
    description="ev.or.kr 페이지에서 지역·트림 보조금(원)을 자동 추출합니다. "
                "추출에 실패하면 200 응답에 mode='manual' 로 수동 입력을 안내합니다. "
                "(예: region='서울', trim='M3_LR' → subsidyWon=3360000)"
)
async def get_subsidy(
        region: Optional[str] = Query(None, description="지역명 (예: '서울')"),
        trim: Optional[str] = Query(None, description="트림 코드 (M3_STD, M3_LR, M3_PERF, MY_RWD, MY_LR)"),
        service: SubsidyService = Depends(get_subsidy_service),
):
    region = normalize(region)
    trim = (trim or "").strip()

    if not region or not trim:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=SubsidyErrorResponse(error="region and trim are required").to_content(),
            headers=NO_STORE_HEADERS,
        )

    result = await service.lookup(region, trim)
    return JSONResponse(status_code=status.HTTP_200_OK, content=result.to_content(), headers=NO_STORE_HEADERS)
