# storefront/repos/cart_repo.py
from abc import ABC, abstractmethod
from typing import Dict, List

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker

from storefront.data.database import is_row_id
from storefront.data.models.cart_item import CartItemModel
from storefront.domain.schemas import CartLine


class CartRepo(ABC):
    """Storage for cart lines. No validation here, that lives in CartService."""

    @abstractmethod
    def list_lines(self, session_id: str) -> List[CartLine]: ...

    @abstractmethod
    def get_line(self, line_id: int) -> CartLine | None: ...

    @abstractmethod
    def find_line(self, session_id: str, product_id: int) -> CartLine | None: ...

    @abstractmethod
    def insert_line(self, session_id: str, product_id: int, quantity: int) -> CartLine: ...

    @abstractmethod
    def increment_quantity(self, line_id: int, delta: int) -> CartLine | None: ...

    @abstractmethod
    def set_quantity(self, line_id: int, quantity: int) -> CartLine | None: ...

    @abstractmethod
    def delete_line(self, line_id: int) -> bool: ...

    @abstractmethod
    def delete_session_lines(self, session_id: str) -> int: ...


class MemoryCartRepo(CartRepo):
    """Dict of line id -> CartLine. Returned lines are copies."""

    def __init__(self):
        self.lines: Dict[int, CartLine] = {}
        self._next_line_id = 1

    def list_lines(self, session_id: str) -> List[CartLine]:
        return [line.model_copy() for line in self.lines.values() if line.session_id == session_id]

    def get_line(self, line_id: int) -> CartLine | None:
        line = self.lines.get(line_id)
        return line.model_copy() if line else None

    def find_line(self, session_id: str, product_id: int) -> CartLine | None:
        for line in self.lines.values():
            if line.session_id == session_id and line.product_id == product_id:
                return line.model_copy()
        return None

    def insert_line(self, session_id: str, product_id: int, quantity: int) -> CartLine:
        line = CartLine(
            id=self._next_line_id,
            session_id=session_id,
            product_id=product_id,
            quantity=quantity,
        )
        self.lines[line.id] = line
        self._next_line_id += 1
        return line.model_copy()

    def increment_quantity(self, line_id: int, delta: int) -> CartLine | None:
        line = self.lines.get(line_id)
        if not line:
            return None
        return self.set_quantity(line_id, line.quantity + delta)

    def set_quantity(self, line_id: int, quantity: int) -> CartLine | None:
        line = self.lines.get(line_id)
        if not line:
            return None
        updated = line.model_copy(update={"quantity": quantity})
        self.lines[line_id] = updated
        return updated.model_copy()

    def delete_line(self, line_id: int) -> bool:
        return self.lines.pop(line_id, None) is not None

    def delete_session_lines(self, session_id: str) -> int:
        ids = [line_id for line_id, line in self.lines.items() if line.session_id == session_id]
        for line_id in ids:
            del self.lines[line_id]
        return len(ids)


def _to_line(row: CartItemModel) -> CartLine:
    return CartLine(
        id=row.id,
        session_id=row.session_id,
        product_id=row.product_id,
        quantity=row.quantity,
    )


class SqlCartRepo(CartRepo):
    """
    cart_items table.
    - unique (session_id, product_id) keeps one line per product
    - increment_quantity is a single UPDATE quantity = quantity + delta
    """

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def list_lines(self, session_id: str) -> List[CartLine]:
        stmt = (
            select(CartItemModel)
            .where(CartItemModel.session_id == session_id)
            .order_by(CartItemModel.id)
        )
        with self.session_factory() as db:
            return [_to_line(row) for row in db.execute(stmt).scalars().all()]

    def get_line(self, line_id: int) -> CartLine | None:
        if not is_row_id(line_id):
            return None
        with self.session_factory() as db:
            row = db.get(CartItemModel, line_id)
            return _to_line(row) if row else None

    def find_line(self, session_id: str, product_id: int) -> CartLine | None:
        if not is_row_id(product_id):
            return None
        stmt = select(CartItemModel).where(
            CartItemModel.session_id == session_id,
            CartItemModel.product_id == product_id,
        )
        with self.session_factory() as db:
            row = db.execute(stmt).scalar_one_or_none()
            return _to_line(row) if row else None

    def insert_line(self, session_id: str, product_id: int, quantity: int) -> CartLine:
        with self.session_factory() as db:
            row = CartItemModel(session_id=session_id, product_id=product_id, quantity=quantity)
            db.add(row)
            try:
                db.commit()
            except IntegrityError:
                # someone inserted the same (session, product) first - merge into it
                db.rollback()
                existing = self.find_line(session_id, product_id)
                if existing is None:
                    raise
                return self.increment_quantity(existing.id, quantity)
            db.refresh(row)
            return _to_line(row)

    def increment_quantity(self, line_id: int, delta: int) -> CartLine | None:
        return self._update_quantity(line_id, CartItemModel.quantity + delta)

    def set_quantity(self, line_id: int, quantity: int) -> CartLine | None:
        return self._update_quantity(line_id, quantity)

    def _update_quantity(self, line_id: int, value) -> CartLine | None:
        if not is_row_id(line_id):
            return None
        with self.session_factory() as db:
            result = db.execute(
                update(CartItemModel)
                .where(CartItemModel.id == line_id)
                .values(quantity=value)
            )
            db.commit()
            if result.rowcount == 0:
                return None
            row = db.get(CartItemModel, line_id)
            return _to_line(row) if row else None

    def delete_line(self, line_id: int) -> bool:
        if not is_row_id(line_id):
            return False
        with self.session_factory() as db:
            result = db.execute(delete(CartItemModel).where(CartItemModel.id == line_id))
            db.commit()
            return result.rowcount > 0

    def delete_session_lines(self, session_id: str) -> int:
        with self.session_factory() as db:
            result = db.execute(delete(CartItemModel).where(CartItemModel.session_id == session_id))
            db.commit()
            return result.rowcount
