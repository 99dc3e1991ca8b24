# storefront/services/catalog_service.py
from typing import List

from storefront.domain.errors import NotFoundError
from storefront.domain.schemas import Language, LanguageCreate, Product, ProductCreate
from storefront.repos.catalog_repo import CatalogRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CatalogService:
    """
    Catalog Store: products and languages.
    Read-mostly - written by the seed and by create(), no updates of existing products.
    """

    def __init__(self, repo: CatalogRepo):
        self.repo = repo

    #query - products
    def list_all(self) -> List[Product]:
        return self.repo.list_products()

    def list_featured(self) -> List[Product]:
        return self.repo.list_featured_products()

    def list_by_category(self, category: str) -> List[Product]:
        # unknown category is just an empty list
        return self.repo.list_products_by_category(category)

    def get_by_id(self, product_id: int) -> Product:
        product = self.repo.get_product(product_id)
        if not product:
            logger.debug(f"Product id={product_id} not found")
            raise NotFoundError("Product not found")
        return product

    def get_by_slug(self, slug: str) -> Product:
        product = self.repo.get_product_by_slug(slug)
        if not product:
            logger.debug(f"Product slug={slug!r} not found")
            raise NotFoundError("Product not found")
        return product

    def is_empty(self) -> bool:
        return self.repo.count_products() == 0

    #commands
    def create(self, data: ProductCreate) -> Product:
        """Adds a product with a fresh id. Duplicate slugs are accepted; get_by_slug returns the oldest."""
        product = self.repo.create_product(data)
        logger.info(f"Created product {product.id} ({product.slug})")
        return product

    def delete(self, product_id: int) -> bool:
        """Removes a product. Cart lines pointing at it stay and are skipped by joined reads."""
        removed = self.repo.delete_product(product_id)
        if removed:
            logger.info(f"Deleted product {product_id}")
        return removed

    #query - languages
    def list_languages(self) -> List[Language]:
        return self.repo.list_languages()

    def get_language(self, code: str) -> Language:
        language = self.repo.get_language_by_code(code)
        if not language:
            raise NotFoundError("Language not found")
        return language

    def create_language(self, data: LanguageCreate) -> Language:
        language = self.repo.create_language(data)
        logger.info(f"Created language {language.code}")
        return language
