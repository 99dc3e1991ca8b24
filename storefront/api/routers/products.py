# storefront/api/routers/products.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request

from storefront.domain.errors import NotFoundError
from storefront.domain.schemas import Product
from storefront.services.catalog_service import CatalogService

router = APIRouter(prefix="/api/products", tags=["products"])


def get_service(request: Request) -> CatalogService:
    return request.app.state.catalog_service


@router.get("", response_model=List[Product])
def list_products(svc: CatalogService = Depends(get_service)):
    return svc.list_all()


# static paths first, /{slug} would swallow them otherwise
@router.get("/featured", response_model=List[Product])
def list_featured(svc: CatalogService = Depends(get_service)):
    return svc.list_featured()


@router.get("/category/{category}", response_model=List[Product])
def list_by_category(category: str, svc: CatalogService = Depends(get_service)):
    return svc.list_by_category(category)


@router.get("/id/{product_id}", response_model=Product)
def get_product_by_id(product_id: int, svc: CatalogService = Depends(get_service)):
    try:
        return svc.get_by_id(product_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/{slug}", response_model=Product)
def get_product(slug: str, svc: CatalogService = Depends(get_service)):
    try:
        return svc.get_by_slug(slug)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
