from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request

from storefront.domain.errors import NotFoundError
from storefront.domain.schemas import Language
from storefront.services.catalog_service import CatalogService

router = APIRouter(prefix="/api/languages", tags=["languages"])


def get_service(request: Request) -> CatalogService:
    return request.app.state.catalog_service


@router.get("", response_model=List[Language])
def list_languages(svc: CatalogService = Depends(get_service)):
    return svc.list_languages()


@router.get("/{code}", response_model=Language)
def get_language(code: str, svc: CatalogService = Depends(get_service)):
    try:
        return svc.get_language(code)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
