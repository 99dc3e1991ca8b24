# storefront/services/cart_service.py
from typing import List, Tuple

from storefront.domain.errors import NotFoundError, ValidationError
from storefront.domain.schemas import CartLine, Product
from storefront.repos.cart_repo import CartRepo
from storefront.repos.catalog_repo import CatalogRepo
from storefront.services.lock_service import LocalLockService
from storefront.utils.logging import get_logger
from storefront.utils.settings import MAX_LINE_QUANTITY

logger = get_logger(__name__)


def _check_quantity(quantity: int, max_quantity: int) -> None:
    # bool is an int subclass, True would sneak in as 1
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
        raise ValidationError("quantity", "Quantity must be a positive integer")
    if quantity > max_quantity:
        raise ValidationError("quantity", f"Quantity cannot exceed {max_quantity}")


class CartService:
    """
    Cart Store: per-session cart lines.
    commands (add, update, remove, clear) modify state
    queries (get_lines, get_lines_with_products) only read

    At most one line per (session, product): adding a product that is
    already in the cart adds to its quantity instead of creating a line.
    """

    def __init__(
        self,
        repo: CartRepo,
        catalog: CatalogRepo,
        lock_service=None,
        max_quantity: int = MAX_LINE_QUANTITY,
    ):
        self.repo = repo
        self.catalog = catalog
        self.lock_service = lock_service or LocalLockService()
        self.max_quantity = max_quantity

    #query
    def get_lines(self, session_id: str) -> List[CartLine]:
        return self.repo.list_lines(session_id)

    def get_lines_with_products(self, session_id: str) -> List[Tuple[CartLine, Product]]:
        """Joins lines with their products; lines whose product is gone are dropped silently."""
        result = []
        for line in self.repo.list_lines(session_id):
            product = self.catalog.get_product(line.product_id)
            if product is None:
                logger.debug(f"Skipping cart line {line.id}, product {line.product_id} no longer exists")
                continue
            result.append((line, product))
        return result

    #commands
    def add_line(self, session_id: str, product_id: int, quantity: int = 1) -> CartLine:
        _check_quantity(quantity, self.max_quantity)

        if self.catalog.get_product(product_id) is None:
            raise NotFoundError("Product not found")

        # read-modify-write below, serialized per session
        with self.lock_service.hold(session_id):
            existing = self.repo.find_line(session_id, product_id)

            if existing:
                if existing.quantity + quantity > self.max_quantity:
                    raise ValidationError(
                        "quantity",
                        f"Cart already holds {existing.quantity}, total cannot exceed {self.max_quantity}",
                    )
                line = self.repo.increment_quantity(existing.id, quantity)
                if line is not None:
                    logger.info(
                        f"Product {product_id} already in cart {session_id}, quantity "
                        f"{existing.quantity} -> {line.quantity}"
                    )
                    return line
                # removed between find and update (lock backend 'none'), start over

            line = self.repo.insert_line(session_id, product_id, quantity)
            logger.info(f"Added product {product_id} x{quantity} to cart {session_id} as line {line.id}")
            return line

    def update_quantity(self, line_id: int, quantity: int) -> CartLine:
        """Overwrites the quantity (no merging). quantity outside 1..max_quantity is rejected and the line left as is."""
        _check_quantity(quantity, self.max_quantity)

        line = self.repo.set_quantity(line_id, quantity)
        if line is None:
            raise NotFoundError("Cart item not found")

        logger.info(f"Cart line {line_id} quantity set to {quantity}")
        return line

    def remove_line(self, line_id: int) -> bool:
        removed = self.repo.delete_line(line_id)
        if removed:
            logger.info(f"Removed cart line {line_id}")
        return removed

    def clear(self, session_id: str) -> bool:
        deleted = self.repo.delete_session_lines(session_id)
        logger.info(f"Cleared cart {session_id} ({deleted} lines)")
        return True
