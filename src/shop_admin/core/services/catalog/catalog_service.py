"""Brands, categories and storefront sliders."""

from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from src.shop_admin.core.errors import (
    AlreadyExistsError,
    ErrorCode,
    NotFoundError,
    ReferenceInUseError,
)
from src.shop_admin.core.models.catalog import (
    BrandRequest,
    BrandResponse,
    CategoryRequest,
    CategoryResponse,
    SliderRequest,
    SliderResponse,
)
from src.shop_admin.core.security import Principal, require_admin
from src.shop_admin.core.services.database.db_utils import transactional
from src.shop_admin.core.services.image_store import ImageStore, UploadedImage
from src.shop_admin.entities.catalog.brand import BrandRepository, BrandTable
from src.shop_admin.entities.catalog.category import CategoryRepository, CategoryTable
from src.shop_admin.entities.catalog.product import ProductRepository
from src.shop_admin.entities.catalog.slider import SliderRepository, SliderTable


class CatalogService:
    def __init__(
        self,
        session: Session,
        image_store: ImageStore,
        principal: Principal | None = None,
    ) -> None:
        self._session = session
        self._image_store = image_store
        self._principal = principal
        self._brands = BrandRepository(session)
        self._categories = CategoryRepository(session)
        self._products = ProductRepository(session)
        self._sliders = SliderRepository(session)

    # Brands

    def create_brand(self, request: BrandRequest) -> BrandResponse:
        require_admin(self._principal)
        brand = BrandTable(name=request.name, description=request.description)
        try:
            with transactional(self._session):
                self._brands.add(brand)
        except IntegrityError as e:
            raise AlreadyExistsError(
                ErrorCode.BRAND_EXISTED, f"Brand already exists: {request.name}"
            ) from e
        logger.info("Created brand {}", brand.name)
        return BrandResponse.model_validate(brand)

    def list_brands(self) -> list[BrandResponse]:
        return [BrandResponse.model_validate(row) for row in self._brands.list_all()]

    def get_brand(self, brand_id: str) -> BrandResponse:
        return BrandResponse.model_validate(self._get_brand(brand_id))

    def delete_brand(self, brand_id: str) -> None:
        require_admin(self._principal)
        brand = self._get_brand(brand_id)
        if self._products.count_by_brand(brand.id):
            raise ReferenceInUseError(detail=f"Brand {brand.name} is still used by products")
        with transactional(self._session):
            self._brands.delete(brand)
        logger.info("Deleted brand {}", brand.name)

    # Categories

    def create_category(self, request: CategoryRequest) -> CategoryResponse:
        require_admin(self._principal)
        category = CategoryTable(name=request.name, description=request.description)
        try:
            with transactional(self._session):
                self._categories.add(category)
        except IntegrityError as e:
            raise AlreadyExistsError(
                ErrorCode.CATEGORY_EXISTED, f"Category already exists: {request.name}"
            ) from e
        logger.info("Created category {}", category.name)
        return CategoryResponse.model_validate(category)

    def list_categories(self) -> list[CategoryResponse]:
        return [
            CategoryResponse.model_validate(row) for row in self._categories.list_all()
        ]

    def get_category(self, category_id: str) -> CategoryResponse:
        return CategoryResponse.model_validate(self._get_category(category_id))

    def delete_category(self, category_id: str) -> None:
        require_admin(self._principal)
        category = self._get_category(category_id)
        if self._products.count_by_category(category.id):
            raise ReferenceInUseError(
                detail=f"Category {category.name} is still used by products"
            )
        with transactional(self._session):
            self._categories.delete(category)
        logger.info("Deleted category {}", category.name)

    # Sliders

    def create_slider(
        self, request: SliderRequest, image: UploadedImage | None = None
    ) -> SliderResponse:
        require_admin(self._principal)
        slider = SliderTable(**request.model_dump())
        uploaded = None
        if image is not None:
            uploaded = self._image_store.store(image)
            slider.image_url = uploaded.url
            slider.public_id = uploaded.public_id
        try:
            with transactional(self._session):
                self._sliders.add(slider)
        except Exception:
            if uploaded is not None:
                self._remove_quietly(uploaded.public_id)
            raise
        return SliderResponse.model_validate(slider)

    def list_sliders(self) -> list[SliderResponse]:
        return [SliderResponse.model_validate(row) for row in self._sliders.list_all()]

    def delete_slider(self, slider_id: str) -> None:
        require_admin(self._principal)
        slider = self._sliders.get(slider_id)
        if slider is None:
            raise NotFoundError(ErrorCode.SLIDER_NOT_EXISTED)
        with transactional(self._session):
            if slider.public_id is not None:
                self._remove_quietly(slider.public_id)
            self._sliders.delete(slider)

    def _get_brand(self, brand_id: str) -> BrandTable:
        brand = self._brands.get(brand_id)
        if brand is None:
            raise NotFoundError(ErrorCode.BRAND_NOT_EXISTED)
        return brand

    def _get_category(self, category_id: str) -> CategoryTable:
        category = self._categories.get(category_id)
        if category is None:
            raise NotFoundError(ErrorCode.CATEGORY_NOT_EXISTED)
        return category

    def _remove_quietly(self, public_id: str) -> None:
        try:
            self._image_store.remove(public_id)
        except Exception as e:
            logger.warning("Error deleting slider image {}: {}", public_id, e)
