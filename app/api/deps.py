from fastapi import Request

from app.services.subsidy_service import SubsidyService


def get_subsidy_service(request: Request) -> SubsidyService:
    # lifespan 에서 생성되어 app.state 에 보관됨
    return request.app.state.subsidy_service
