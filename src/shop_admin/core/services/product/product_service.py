"""Product query and mutation operations."""

from collections.abc import Sequence

from loguru import logger
from sqlmodel import Session

from src.shop_admin.core.errors import (
    ErrorCode,
    InvalidFilterError,
    NotFoundError,
    ReferenceNotFoundError,
    UploadFailedError,
)
from src.shop_admin.core.mappers.product_mapper import (
    apply_product_update,
    to_product,
    to_product_response,
    to_product_table,
)
from src.shop_admin.core.models.page import Page
from src.shop_admin.core.models.product import (
    ProductFilterRequest,
    ProductRequest,
    ProductResponse,
    ProductStatistics,
    ProductUpdateRequest,
)
from src.shop_admin.core.security import Principal, require_admin, require_authenticated
from src.shop_admin.core.services.database.db_utils import transactional
from src.shop_admin.core.services.image_store import (
    ImageStore,
    ImageUploadResult,
    UploadedImage,
)
from src.shop_admin.core.services.product.filters import (
    build_ordering,
    build_predicates,
    parse_status,
)
from src.shop_admin.entities.catalog.brand import BrandRepository, BrandTable
from src.shop_admin.entities.catalog.cart_item import CartItemRepository
from src.shop_admin.entities.catalog.category import CategoryRepository, CategoryTable
from src.shop_admin.entities.catalog.product import (
    Product,
    ProductImageTable,
    ProductRepository,
    ProductTable,
)
from src.shop_admin.entities.enums import ProductStatus
from src.shop_admin.runtime.context import get_config

RELATED_PRODUCTS_LIMIT = 5


class ProductService:
    """Product operations for one request.

    Args:
        session: Database session; every mutation commits or rolls back on it
        image_store: Gateway used to upload and remove product images
        principal: The acting caller, ``None`` for anonymous requests
    """

    def __init__(
        self,
        session: Session,
        image_store: ImageStore,
        principal: Principal | None = None,
    ) -> None:
        self._session = session
        self._image_store = image_store
        self._principal = principal
        self._products = ProductRepository(session)
        self._brands = BrandRepository(session)
        self._categories = CategoryRepository(session)
        self._cart_items = CartItemRepository(session)

    def create(
        self, request: ProductRequest, images: Sequence[UploadedImage] = ()
    ) -> ProductResponse:
        """Create a product and upload its images in order.

        The first image becomes the thumbnail. If any upload fails the product
        is not created and the images already uploaded are removed again.
        """
        require_admin(self._principal)
        brand = self._resolve_brand(request.brand_name)
        category = self._resolve_category(request.category_name)

        uploaded = self._upload_all(images)

        product = to_product_table(request)
        product.brand = brand
        product.category = category
        product.images = [
            ProductImageTable(image_url=result.url, public_id=result.public_id, position=i)
            for i, result in enumerate(uploaded)
        ]
        product.thumbnail_url = uploaded[0].url if uploaded else None

        try:
            with transactional(self._session):
                self._products.add(product)
        except Exception:
            self._discard_uploads(uploaded)
            raise

        logger.info("Created product {} with {} image(s)", product.id, len(uploaded))
        return to_product_response(product)

    def update_product(self, product_id: str, request: ProductUpdateRequest) -> ProductResponse:
        require_admin(self._principal)
        product = self._get(product_id)
        brand = (
            self._resolve_brand(request.brand_name)
            if request.brand_name is not None
            else None
        )
        category = (
            self._resolve_category(request.category_name)
            if request.category_name is not None
            else None
        )

        apply_product_update(product, request)
        if brand is not None:
            product.brand = brand
        if category is not None:
            product.category = category

        with transactional(self._session):
            self._products.add(product)
        return to_product_response(product)

    def get_products(self, request: ProductFilterRequest) -> Page[ProductResponse]:
        predicates = build_predicates(request)
        ordering = build_ordering(request)
        size = self._clamp_size(request.size)
        rows, total = self._products.find_page(
            predicates, ordering, page=request.page, size=size
        )
        return Page[ProductResponse].build(
            rows, total, page=request.page, size=size, mapper=to_product_response
        )

    def search_products(self, keyword: str, page: int, size: int) -> Page[Product]:
        size = self._clamp_size(size)
        page = max(0, page)
        rows, total = self._products.search_by_name(keyword or "", page=page, size=size)
        return Page[Product].build(rows, total, page=page, size=size, mapper=to_product)

    def get_product(self, product_id: str) -> ProductResponse:
        require_authenticated(self._principal)
        return to_product_response(self._get(product_id))

    def delete_product(self, product_id: str) -> None:
        require_admin(self._principal)
        with transactional(self._session):
            self._delete(product_id)

    def delete_products(self, product_ids: Sequence[str]) -> None:
        """Delete products one at a time; each deletion commits on its own.

        The first failure stops the batch and propagates. Deletions committed
        before it stay committed.
        """
        require_admin(self._principal)
        for product_id in product_ids:
            with transactional(self._session):
                self._delete(product_id)

    def get_related_products(self, product_id: str) -> list[ProductResponse]:
        product = self._get(product_id)
        related = self._products.find_related(product, limit=RELATED_PRODUCTS_LIMIT)
        return [to_product_response(row) for row in related]

    def get_product_statistics(self) -> ProductStatistics:
        return ProductStatistics(
            total_products=self._products.count(),
            active_products=self._products.count(ProductStatus.ACTIVE),
            out_of_stock_products=self._products.count(ProductStatus.OUT_OF_STOCK),
            discontinued_products=self._products.count(ProductStatus.DISCONTINUED),
        )

    def change_status(self, product_id: str, status: ProductStatus | str) -> ProductResponse:
        require_admin(self._principal)
        if not isinstance(status, ProductStatus):
            status = parse_status(status)
            if status is None:
                raise InvalidFilterError(ErrorCode.INVALID_STATUS)
        product = self._get(product_id)
        product.status = status
        with transactional(self._session):
            self._products.add(product)
        logger.info("Product {} status changed to {}", product_id, status.value)
        return to_product_response(product)

    def _get(self, product_id: str) -> ProductTable:
        product = self._products.get(product_id)
        if product is None:
            raise NotFoundError(ErrorCode.PRODUCT_NOT_EXISTED)
        return product

    def _resolve_brand(self, name: str) -> BrandTable:
        brand = self._brands.get_by_name(name)
        if brand is None:
            raise ReferenceNotFoundError(
                ErrorCode.BRAND_NOT_EXISTED, f"Brand not found: {name}"
            )
        return brand

    def _resolve_category(self, name: str) -> CategoryTable:
        category = self._categories.get_by_name(name)
        if category is None:
            raise ReferenceNotFoundError(
                ErrorCode.CATEGORY_NOT_EXISTED, f"Category not found: {name}"
            )
        return category

    def _upload_all(self, images: Sequence[UploadedImage]) -> list[ImageUploadResult]:
        uploaded: list[ImageUploadResult] = []
        for image in images:
            try:
                uploaded.append(self._image_store.store(image))
            except UploadFailedError:
                logger.warning(
                    "Upload of {} failed, discarding {} uploaded image(s)",
                    image.filename,
                    len(uploaded),
                )
                self._discard_uploads(uploaded)
                raise
        return uploaded

    def _discard_uploads(self, uploaded: Sequence[ImageUploadResult]) -> None:
        for result in uploaded:
            self._remove_quietly(result.public_id)

    def _remove_quietly(self, public_id: str) -> None:
        try:
            self._image_store.remove(public_id)
        except Exception as e:
            logger.warning("Error deleting image {} from image store: {}", public_id, e)

    def _delete(self, product_id: str) -> None:
        product = self._get(product_id)

        removed = self._cart_items.delete_by_product(product.id)
        if removed:
            logger.debug("Removed {} cart item(s) for product {}", removed, product.id)

        for image in product.images:
            if image.public_id is not None:
                self._remove_quietly(image.public_id)

        self._products.delete_images(product.images)
        self._products.delete(product)
        logger.info("Deleted product {}", product.id)

    @staticmethod
    def _clamp_size(size: int) -> int:
        return max(1, min(size, get_config().pagination.max_size))
