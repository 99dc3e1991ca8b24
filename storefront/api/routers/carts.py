# storefront/api/routers/carts.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from storefront.domain.errors import NotFoundError, ValidationError
from storefront.domain.schemas import (
    CartAddIn,
    CartEntryOut,
    CartLine,
    CartUpdateIn,
    SuccessOut,
)
from storefront.services.cart_service import CartService
from storefront.utils.logging import get_logger
from storefront.utils.settings import SESSION_HEADER

logger = get_logger(__name__)

router = APIRouter(prefix="/api/cart", tags=["cart"])


def get_service(request: Request) -> CartService:
    return request.app.state.cart_service


def get_session_id(
    request: Request,
    session_id: str | None = Query(default=None, alias="sessionId"),
) -> str:
    """
    Header first, then the legacy ?sessionId= query param, then the shared fallback.
    Not authenticated in any way.
    """
    sid = request.headers.get(SESSION_HEADER) or session_id
    if sid:
        return sid
    fallback = request.app.state.default_session_id
    logger.debug(f"No session id on {request.method} {request.url.path}, using fallback {fallback!r}")
    return fallback


@router.get("", response_model=List[CartEntryOut])
def get_cart(
    session_id: str = Depends(get_session_id),
    svc: CartService = Depends(get_service),
):
    return [
        CartEntryOut(item=line, product=product)
        for line, product in svc.get_lines_with_products(session_id)
    ]


@router.post("/add", response_model=CartLine, status_code=201)
def add_to_cart(
    payload: CartAddIn,
    session_id: str = Depends(get_session_id),
    svc: CartService = Depends(get_service),
):
    try:
        return svc.add_line(session_id, payload.product_id, payload.quantity)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.as_detail())
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/update/{line_id}", response_model=CartLine)
def update_cart_item(
    line_id: int,
    payload: CartUpdateIn,
    svc: CartService = Depends(get_service),
):
    try:
        return svc.update_quantity(line_id, payload.quantity)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.as_detail())
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/remove/{line_id}", response_model=SuccessOut)
def remove_from_cart(line_id: int, svc: CartService = Depends(get_service)):
    if not svc.remove_line(line_id):
        raise HTTPException(status_code=404, detail="Cart item not found")
    return SuccessOut()


@router.delete("/clear", response_model=SuccessOut)
def clear_cart(
    session_id: str = Depends(get_session_id),
    svc: CartService = Depends(get_service),
):
    svc.clear(session_id)
    return SuccessOut()
