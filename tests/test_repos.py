import pytest

from storefront.repos import (
    MemoryCartRepo,
    MemoryCatalogRepo,
    SqlCartRepo,
    SqlCatalogRepo,
    build_repos,
)


def test_memory_backend():
    catalog, cart = build_repos("memory")

    assert isinstance(catalog, MemoryCatalogRepo)
    assert isinstance(cart, MemoryCartRepo)


def test_database_backend_creates_tables():
    catalog, cart = build_repos("database", "sqlite://")

    assert isinstance(catalog, SqlCatalogRepo)
    assert isinstance(cart, SqlCartRepo)
    assert catalog.count_products() == 0
    assert cart.list_lines("abc") == []


def test_unknown_backend_rejected():
    with pytest.raises(ValueError):
        build_repos("cassandra")


def test_database_backend_requires_url():
    with pytest.raises(ValueError):
        build_repos("database", None)


class TestSqlCartLineUniqueness:
    def test_insert_of_existing_pair_increments(self):
        _, cart = build_repos("database", "sqlite://")

        first = cart.insert_line("abc", 1, 2)
        second = cart.insert_line("abc", 1, 3)

        assert second.id == first.id
        assert second.quantity == 5
        assert len(cart.list_lines("abc")) == 1
