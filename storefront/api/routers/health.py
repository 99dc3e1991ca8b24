from fastapi import APIRouter, Request

from storefront.domain.schemas import HealthOut

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthOut)
def health_check(request: Request):
    return HealthOut(status="ok", storage=request.app.state.storage_backend)
