import threading
from contextlib import contextmanager

import pytest

from storefront.domain.errors import NotFoundError, ValidationError
from storefront.domain.schemas import ProductCreate
from storefront.repos import MemoryCartRepo, MemoryCatalogRepo
from storefront.services.cart_service import CartService
from storefront.services.catalog_service import CatalogService
from storefront.services.lock_service import LocalLockService


class TestAddLine:
    def test_adding_same_product_twice_merges(self, cart, make_product):
        product = make_product()

        cart.add_line("s1", product.id, 1)
        cart.add_line("s1", product.id, 1)

        lines = cart.get_lines("s1")
        assert len(lines) == 1
        assert lines[0].quantity == 2

    def test_merge_keeps_line_id(self, cart, make_product):
        product = make_product()

        first = cart.add_line("s1", product.id, 2)
        second = cart.add_line("s1", product.id, 3)

        assert second.id == first.id
        assert second.quantity == 5

    def test_default_quantity_is_one(self, cart, make_product):
        product = make_product()

        line = cart.add_line("s1", product.id)

        assert line.quantity == 1
        assert line.session_id == "s1"
        assert line.product_id == product.id

    def test_different_products_get_separate_lines_in_order(self, cart, make_product):
        a = make_product("a")
        b = make_product("b")

        cart.add_line("s1", a.id)
        cart.add_line("s1", b.id)

        assert [line.product_id for line in cart.get_lines("s1")] == [a.id, b.id]

    def test_same_product_in_other_session_is_separate(self, cart, make_product):
        product = make_product()

        cart.add_line("s1", product.id, 2)
        cart.add_line("s2", product.id, 4)

        assert [line.quantity for line in cart.get_lines("s1")] == [2]
        assert [line.quantity for line in cart.get_lines("s2")] == [4]

    def test_unknown_product_raises_not_found(self, cart):
        with pytest.raises(NotFoundError):
            cart.add_line("s1", 999, 1)

        assert cart.get_lines("s1") == []

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_non_positive_quantity_rejected(self, cart, make_product, quantity):
        product = make_product()

        with pytest.raises(ValidationError) as exc:
            cart.add_line("s1", product.id, quantity)

        assert exc.value.field == "quantity"
        assert cart.get_lines("s1") == []


class TestUpdateQuantity:
    @pytest.mark.parametrize("quantity", [1, 7, 10])
    def test_overwrites_instead_of_adding(self, cart, make_product, quantity):
        product = make_product()
        line = cart.add_line("s1", product.id, 3)

        updated = cart.update_quantity(line.id, quantity)

        assert updated.quantity == quantity
        assert cart.get_lines("s1")[0].quantity == quantity

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_invalid_quantity_leaves_line_untouched(self, cart, make_product, quantity):
        product = make_product()
        line = cart.add_line("s1", product.id, 3)

        with pytest.raises(ValidationError):
            cart.update_quantity(line.id, quantity)

        assert cart.get_lines("s1")[0].quantity == 3

    def test_unknown_line_raises_not_found(self, cart):
        with pytest.raises(NotFoundError):
            cart.update_quantity(12345, 2)


class TestRemoveAndClear:
    def test_remove_returns_whether_something_was_removed(self, cart, make_product):
        product = make_product()
        line = cart.add_line("s1", product.id)

        assert cart.remove_line(line.id) is True
        assert cart.remove_line(line.id) is False
        assert cart.get_lines("s1") == []

    def test_remove_missing_line_does_not_raise(self, cart):
        assert cart.remove_line(424242) is False

    def test_add_after_remove_creates_fresh_line(self, cart, make_product):
        product = make_product()
        line = cart.add_line("s1", product.id, 5)
        cart.remove_line(line.id)

        again = cart.add_line("s1", product.id, 1)

        assert again.quantity == 1

    def test_clear_empties_only_that_session(self, cart, make_product):
        a = make_product("a")
        b = make_product("b")
        cart.add_line("s1", a.id, 2)
        cart.add_line("s1", b.id, 1)
        cart.add_line("s2", a.id, 1)

        assert cart.clear("s1") is True

        assert cart.get_lines("s1") == []
        assert len(cart.get_lines("s2")) == 1

    def test_clear_empty_cart_succeeds(self, cart):
        assert cart.clear("nobody") is True
        assert cart.get_lines("nobody") == []


class TestLinesWithProducts:
    def test_join_returns_line_and_product(self, cart, make_product):
        product = make_product()
        line = cart.add_line("s1", product.id, 2)

        [(joined_line, joined_product)] = cart.get_lines_with_products("s1")

        assert joined_line == line
        assert joined_product == product

    def test_orphaned_lines_are_silently_omitted(self, cart, catalog, make_product):
        keep = make_product("keep")
        gone = make_product("gone")
        cart.add_line("s1", keep.id)
        cart.add_line("s1", gone.id)

        catalog.delete(gone.id)

        joined = cart.get_lines_with_products("s1")
        assert [product.id for _, product in joined] == [keep.id]
        # the raw line is still stored, only the joined read hides it
        assert len(cart.get_lines("s1")) == 2


class RecordingLock:
    def __init__(self):
        self.held = []

    @contextmanager
    def hold(self, session_id):
        self.held.append(session_id)
        yield


def test_add_line_holds_session_lock():
    catalog_repo = MemoryCatalogRepo()
    product = CatalogService(catalog_repo).create(
        ProductCreate(slug="kb", name="KB", price=1, category="keyboard")
    )
    lock = RecordingLock()
    svc = CartService(repo=MemoryCartRepo(), catalog=catalog_repo, lock_service=lock)

    svc.add_line("abc", product.id, 1)

    assert lock.held == ["abc"]


def test_concurrent_adds_do_not_lose_increments():
    catalog_repo = MemoryCatalogRepo()
    catalog = CatalogService(catalog_repo)
    product = catalog.create(ProductCreate(slug="kb", name="KB", price=1, category="keyboard"))
    svc = CartService(repo=MemoryCartRepo(), catalog=catalog_repo, lock_service=LocalLockService())

    threads = [threading.Thread(target=svc.add_line, args=("abc", product.id, 1)) for _ in range(20)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    lines = svc.get_lines("abc")
    assert len(lines) == 1
    assert lines[0].quantity == 20


class TestQuantityCap:
    def test_single_add_above_cap_rejected(self, cart, make_product):
        product = make_product()

        with pytest.raises(ValidationError) as exc:
            cart.add_line("s1", product.id, cart.max_quantity + 1)

        assert exc.value.field == "quantity"
        assert cart.get_lines("s1") == []

    def test_huge_quantity_rejected_without_touching_storage(self, cart, make_product):
        product = make_product()

        with pytest.raises(ValidationError):
            cart.add_line("s1", product.id, 2**63)

        assert cart.get_lines("s1") == []

    def test_add_up_to_cap_is_allowed(self, cart, make_product):
        product = make_product()
        cart.add_line("s1", product.id, cart.max_quantity - 1)

        line = cart.add_line("s1", product.id, 1)

        assert line.quantity == cart.max_quantity

    def test_merged_total_above_cap_rejected(self, cart, make_product):
        product = make_product()
        cart.add_line("s1", product.id, cart.max_quantity)

        with pytest.raises(ValidationError) as exc:
            cart.add_line("s1", product.id, 1)

        assert exc.value.field == "quantity"
        assert cart.get_lines("s1")[0].quantity == cart.max_quantity

    def test_update_above_cap_leaves_line_untouched(self, cart, make_product):
        product = make_product()
        line = cart.add_line("s1", product.id, 3)

        with pytest.raises(ValidationError):
            cart.update_quantity(line.id, cart.max_quantity + 1)

        assert cart.get_lines("s1")[0].quantity == 3

    def test_cap_is_configurable(self, repos, make_product):
        svc = CartService(repo=repos[1], catalog=repos[0], max_quantity=3)
        product = make_product()
        svc.add_line("s1", product.id, 2)

        with pytest.raises(ValidationError):
            svc.add_line("s1", product.id, 2)

        assert svc.get_lines("s1")[0].quantity == 2


class TestOutOfRangeIds:
    def test_unknown_huge_product_id(self, cart):
        with pytest.raises(NotFoundError):
            cart.add_line("s1", 2**63, 1)

    def test_update_huge_line_id(self, cart):
        with pytest.raises(NotFoundError):
            cart.update_quantity(2**63, 1)

    def test_remove_huge_line_id(self, cart):
        assert cart.remove_line(2**63) is False
        assert cart.remove_line(-(2**63) - 1) is False
