# storefront/repos/__init__.py
from typing import Tuple

from storefront.data.database import build_engine, build_session_factory, init_db
from storefront.repos.cart_repo import CartRepo, MemoryCartRepo, SqlCartRepo
from storefront.repos.catalog_repo import CatalogRepo, MemoryCatalogRepo, SqlCatalogRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

STORAGE_BACKENDS = ("memory", "database")


def build_repos(backend: str, database_url: str | None = None) -> Tuple[CatalogRepo, CartRepo]:
    """Pick the storage implementation once, at startup."""
    if backend == "memory":
        logger.info("Using in-memory storage (data is lost on restart)")
        return MemoryCatalogRepo(), MemoryCartRepo()

    if backend == "database":
        if not database_url:
            raise ValueError("DATABASE_URL is required for the database backend")
        engine = build_engine(database_url)
        init_db(engine)
        session_factory = build_session_factory(engine)
        logger.info(f"Using database storage at {engine.url.render_as_string(hide_password=True)}")
        return SqlCatalogRepo(session_factory), SqlCartRepo(session_factory)

    raise ValueError(f"Unknown STORAGE_BACKEND {backend!r}, expected one of {STORAGE_BACKENDS}")


__all__ = [
    "CatalogRepo",
    "CartRepo",
    "MemoryCatalogRepo",
    "MemoryCartRepo",
    "SqlCatalogRepo",
    "SqlCartRepo",
    "build_repos",
]
