from fastapi import APIRouter
from app.api.v1.subsidy_router import router as subsidy_router

api_router = APIRouter()

api_router.include_router(subsidy_router)
