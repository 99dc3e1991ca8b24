# storefront/api/__init__.py
from fastapi import FastAPI

from storefront.api.errors import register_exception_handlers
from storefront.api.routers import carts, health, languages, products


def include_routers(app: FastAPI) -> None:
    app.include_router(health.router)
    app.include_router(products.router)
    app.include_router(languages.router)
    app.include_router(carts.router)
    register_exception_handlers(app)
