# storefront/data/models/product.py
from sqlalchemy import Column, Integer, String, Text, Float, Boolean, JSON

from storefront.data.database import Base


class ProductModel(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True)
    # no unique constraint: lookups by slug return the oldest row
    slug = Column(String, nullable=False, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False, default="")

    price = Column(Integer, nullable=False)  # paise
    category = Column(String, nullable=False, index=True)
    image_url = Column(String, nullable=False, default="")

    rating = Column(Float, nullable=False, default=5.0)
    review_count = Column(Integer, nullable=False, default=0)
    in_stock = Column(Boolean, nullable=False, default=True)
    is_featured = Column(Boolean, nullable=False, default=False)
    is_new_arrival = Column(Boolean, nullable=False, default=False)

    languages_supported = Column(JSON, nullable=False, default=list)
