# storefront/repos/catalog_repo.py
from abc import ABC, abstractmethod
from typing import Dict, List

from sqlalchemy import delete, func, select
from sqlalchemy.orm import sessionmaker

from storefront.data.database import is_row_id
from storefront.data.models.language import LanguageModel
from storefront.data.models.product import ProductModel
from storefront.domain.schemas import Language, LanguageCreate, Product, ProductCreate


class CatalogRepo(ABC):
    """Storage for products and languages. Every method returns domain schemas, never ORM rows."""

    @abstractmethod
    def list_products(self) -> List[Product]: ...

    @abstractmethod
    def list_products_by_category(self, category: str) -> List[Product]: ...

    @abstractmethod
    def list_featured_products(self) -> List[Product]: ...

    @abstractmethod
    def get_product(self, product_id: int) -> Product | None: ...

    @abstractmethod
    def get_product_by_slug(self, slug: str) -> Product | None: ...

    @abstractmethod
    def create_product(self, data: ProductCreate) -> Product: ...

    @abstractmethod
    def delete_product(self, product_id: int) -> bool: ...

    @abstractmethod
    def count_products(self) -> int: ...

    @abstractmethod
    def list_languages(self) -> List[Language]: ...

    @abstractmethod
    def get_language_by_code(self, code: str) -> Language | None: ...

    @abstractmethod
    def create_language(self, data: LanguageCreate) -> Language: ...


class MemoryCatalogRepo(CatalogRepo):
    """Dict-backed catalog; dicts keep insertion order, which is the listing order."""

    def __init__(self):
        self.products: Dict[int, Product] = {}
        self.languages: Dict[int, Language] = {}
        self._next_product_id = 1
        self._next_language_id = 1

    def list_products(self) -> List[Product]:
        return list(self.products.values())

    def list_products_by_category(self, category: str) -> List[Product]:
        return [p for p in self.products.values() if p.category == category]

    def list_featured_products(self) -> List[Product]:
        return [p for p in self.products.values() if p.is_featured]

    def get_product(self, product_id: int) -> Product | None:
        return self.products.get(product_id)

    def get_product_by_slug(self, slug: str) -> Product | None:
        return next((p for p in self.products.values() if p.slug == slug), None)

    def create_product(self, data: ProductCreate) -> Product:
        product = Product(id=self._next_product_id, **data.model_dump())
        self.products[product.id] = product
        self._next_product_id += 1
        return product

    def delete_product(self, product_id: int) -> bool:
        return self.products.pop(product_id, None) is not None

    def count_products(self) -> int:
        return len(self.products)

    def list_languages(self) -> List[Language]:
        return list(self.languages.values())

    def get_language_by_code(self, code: str) -> Language | None:
        return next((lang for lang in self.languages.values() if lang.code == code), None)

    def create_language(self, data: LanguageCreate) -> Language:
        language = Language(id=self._next_language_id, **data.model_dump())
        self.languages[language.id] = language
        self._next_language_id += 1
        return language


def _to_product(row: ProductModel) -> Product:
    return Product(
        id=row.id,
        slug=row.slug,
        name=row.name,
        description=row.description,
        price=row.price,
        category=row.category,
        image_url=row.image_url,
        rating=row.rating,
        review_count=row.review_count,
        in_stock=row.in_stock,
        is_featured=row.is_featured,
        is_new_arrival=row.is_new_arrival,
        languages_supported=list(row.languages_supported or []),
    )


def _to_language(row: LanguageModel) -> Language:
    return Language(
        id=row.id,
        code=row.code,
        name=row.name,
        native_name=row.native_name,
        description=row.description,
    )


class SqlCatalogRepo(CatalogRepo):
    """SQLAlchemy catalog; one short session per call."""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def _select_products(self, *criteria) -> List[Product]:
        stmt = select(ProductModel).order_by(ProductModel.id)
        if criteria:
            stmt = stmt.where(*criteria)
        with self.session_factory() as db:
            return [_to_product(row) for row in db.execute(stmt).scalars().all()]

    def list_products(self) -> List[Product]:
        return self._select_products()

    def list_products_by_category(self, category: str) -> List[Product]:
        return self._select_products(ProductModel.category == category)

    def list_featured_products(self) -> List[Product]:
        return self._select_products(ProductModel.is_featured.is_(True))

    def get_product(self, product_id: int) -> Product | None:
        if not is_row_id(product_id):
            return None
        with self.session_factory() as db:
            row = db.get(ProductModel, product_id)
            return _to_product(row) if row else None

    def get_product_by_slug(self, slug: str) -> Product | None:
        stmt = (
            select(ProductModel)
            .where(ProductModel.slug == slug)
            .order_by(ProductModel.id)
            .limit(1)
        )
        with self.session_factory() as db:
            row = db.execute(stmt).scalar_one_or_none()
            return _to_product(row) if row else None

    def create_product(self, data: ProductCreate) -> Product:
        with self.session_factory() as db:
            row = ProductModel(**data.model_dump())
            db.add(row)
            db.commit()
            db.refresh(row)
            return _to_product(row)

    def delete_product(self, product_id: int) -> bool:
        if not is_row_id(product_id):
            return False
        with self.session_factory() as db:
            result = db.execute(delete(ProductModel).where(ProductModel.id == product_id))
            db.commit()
            return result.rowcount > 0

    def count_products(self) -> int:
        with self.session_factory() as db:
            return db.execute(select(func.count(ProductModel.id))).scalar_one()

    def list_languages(self) -> List[Language]:
        with self.session_factory() as db:
            rows = db.execute(select(LanguageModel).order_by(LanguageModel.id)).scalars().all()
            return [_to_language(row) for row in rows]

    def get_language_by_code(self, code: str) -> Language | None:
        with self.session_factory() as db:
            row = db.execute(
                select(LanguageModel).where(LanguageModel.code == code)
            ).scalar_one_or_none()
            return _to_language(row) if row else None

    def create_language(self, data: LanguageCreate) -> Language:
        with self.session_factory() as db:
            row = LanguageModel(**data.model_dump())
            db.add(row)
            db.commit()
            db.refresh(row)
            return _to_language(row)
