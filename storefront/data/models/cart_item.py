from sqlalchemy import Column, Integer, String, UniqueConstraint

from storefront.data.database import Base


class CartItemModel(Base):
    __tablename__ = "cart_items"

    id = Column(Integer, primary_key=True)
    session_id = Column(String, nullable=False, index=True)
    # plain id, no FK: products may disappear under a cart line
    product_id = Column(Integer, nullable=False)

    quantity = Column(Integer, nullable=False, default=1)

    __table_args__ = (UniqueConstraint("session_id", "product_id", name="u_session_product"),)
