# storefront/main.py
from fastapi import FastAPI
import uvicorn

from storefront.api import include_routers
from storefront.data.seed import seed
from storefront.repos import build_repos
from storefront.repos.cart_repo import CartRepo
from storefront.repos.catalog_repo import CatalogRepo
from storefront.services.cart_service import CartService
from storefront.services.catalog_service import CatalogService
from storefront.services.lock_service import build_lock_service
from storefront.utils import settings
from storefront.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


def create_app(
    catalog_repo: CatalogRepo | None = None,
    cart_repo: CartRepo | None = None,
    lock_service=None,
    storage_backend: str = settings.STORAGE_BACKEND,
    database_url: str = settings.DATABASE_URL,
    seed_catalog: bool = settings.SEED_CATALOG,
    default_session_id: str = settings.DEFAULT_SESSION_ID,
) -> FastAPI:
    """
    Builds stores once and hangs them on app.state; routers pick them up per request.
    Passing repos in skips the backend selection (tests do that).
    """
    configure_logging()

    if catalog_repo is None or cart_repo is None:
        catalog_repo, cart_repo = build_repos(storage_backend, database_url)

    catalog_service = CatalogService(catalog_repo)
    cart_service = CartService(
        repo=cart_repo,
        catalog=catalog_repo,
        lock_service=lock_service or build_lock_service(),
    )

    if seed_catalog:
        seed(catalog_service)

    app = FastAPI(
        title="Language Keyboard Store",
        version="1.0.0",
    )
    app.state.catalog_service = catalog_service
    app.state.cart_service = cart_service
    app.state.storage_backend = storage_backend
    app.state.default_session_id = default_session_id

    include_routers(app)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
