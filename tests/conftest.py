import pytest
from fastapi.testclient import TestClient

from storefront.data.database import build_engine, build_session_factory, init_db
from storefront.data.seed import seed
from storefront.domain.schemas import ProductCreate
from storefront.main import create_app
from storefront.repos import MemoryCartRepo, MemoryCatalogRepo, SqlCartRepo, SqlCatalogRepo
from storefront.services.cart_service import CartService
from storefront.services.catalog_service import CatalogService
from storefront.services.lock_service import LocalLockService


@pytest.fixture(params=["memory", "database"])
def backend(request):
    return request.param


@pytest.fixture()
def repos(backend):
    """Fresh (catalog, cart) repos per test, for both storage backends."""
    if backend == "memory":
        yield MemoryCatalogRepo(), MemoryCartRepo()
        return

    engine = build_engine("sqlite://")
    init_db(engine)
    session_factory = build_session_factory(engine)
    yield SqlCatalogRepo(session_factory), SqlCartRepo(session_factory)
    engine.dispose()


@pytest.fixture()
def catalog(repos):
    return CatalogService(repos[0])


@pytest.fixture()
def cart(repos):
    return CartService(repo=repos[1], catalog=repos[0], lock_service=LocalLockService())


@pytest.fixture()
def seeded_catalog(catalog):
    seed(catalog)
    return catalog


@pytest.fixture()
def make_product(catalog):
    def _make(slug="test-keyboard", **overrides):
        data = {
            "slug": slug,
            "name": slug.replace("-", " ").title(),
            "price": 100000,
            "category": "keyboard",
        }
        data.update(overrides)
        return catalog.create(ProductCreate(**data))

    return _make


@pytest.fixture()
def app(repos, backend):
    return create_app(
        catalog_repo=repos[0],
        cart_repo=repos[1],
        lock_service=LocalLockService(),
        storage_backend=backend,
        seed_catalog=True,
        default_session_id="demo-session",
    )


@pytest.fixture()
def client(app):
    return TestClient(app)
