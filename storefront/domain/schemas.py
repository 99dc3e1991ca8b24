# storefront/domain/schemas.py
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from storefront.utils.settings import MAX_LINE_QUANTITY

ProductCategory = Literal["keyboard", "display_combo", "accessory"]


class CamelModel(BaseModel):
    """Base for everything on the wire: camelCase JSON, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ProductCreate(CamelModel):
    """Schema for creating a product (catalog seed, admin tooling)."""

    slug: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    description: str = ""
    price: int = Field(..., ge=0, description="Price in paise (minor currency unit)")
    category: ProductCategory
    image_url: str = ""
    rating: float = Field(5.0, ge=0, le=5)
    review_count: int = Field(0, ge=0)
    in_stock: bool = True
    is_featured: bool = False
    is_new_arrival: bool = False
    languages_supported: List[str] = Field(default_factory=list)

    @field_validator("languages_supported")
    @classmethod
    def _dedupe_codes(cls, codes: List[str]) -> List[str]:
        return list(dict.fromkeys(codes))


class Product(ProductCreate):
    id: int


class LanguageCreate(CamelModel):
    code: str = Field(..., min_length=1, max_length=8)
    name: str
    native_name: str
    description: str = ""


class Language(LanguageCreate):
    id: int


class CartLine(CamelModel):
    id: int
    session_id: str
    product_id: int
    quantity: int = Field(..., ge=1)


class CartAddIn(CamelModel):
    """Body for POST /api/cart/add."""

    product_id: int = Field(..., gt=0, description="Product ID (must be > 0)")
    quantity: int = Field(1, ge=1, le=MAX_LINE_QUANTITY, description="Quantity to add")


class CartUpdateIn(CamelModel):
    """Body for PUT /api/cart/update/{id}."""

    quantity: int = Field(
        ..., ge=1, le=MAX_LINE_QUANTITY, description="New quantity, overwrites the stored one"
    )


class CartEntryOut(CamelModel):
    item: CartLine
    product: Product


class SuccessOut(BaseModel):
    success: bool = True


class HealthOut(BaseModel):
    status: str
    storage: str
