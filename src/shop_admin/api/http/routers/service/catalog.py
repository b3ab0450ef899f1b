"""Brand, category and slider API routers."""

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi import status as http_status

from src.shop_admin.api.http.deps import get_catalog_service
from src.shop_admin.core.models.catalog import (
    BrandRequest,
    BrandResponse,
    CategoryRequest,
    CategoryResponse,
    SliderRequest,
    SliderResponse,
)
from src.shop_admin.core.services import CatalogService, UploadedImage

brand_router = APIRouter()
category_router = APIRouter()
slider_router = APIRouter()


@brand_router.post("", response_model=BrandResponse, status_code=http_status.HTTP_201_CREATED)
def create_brand(
    request: BrandRequest,
    service: CatalogService = Depends(get_catalog_service),
) -> BrandResponse:
    return service.create_brand(request)


@brand_router.get("", response_model=list[BrandResponse])
def list_brands(service: CatalogService = Depends(get_catalog_service)) -> list[BrandResponse]:
    return service.list_brands()


@brand_router.get("/{brand_id}", response_model=BrandResponse)
def get_brand(
    brand_id: str,
    service: CatalogService = Depends(get_catalog_service),
) -> BrandResponse:
    return service.get_brand(brand_id)


@brand_router.delete("/{brand_id}", status_code=http_status.HTTP_204_NO_CONTENT)
def delete_brand(
    brand_id: str,
    service: CatalogService = Depends(get_catalog_service),
) -> None:
    service.delete_brand(brand_id)


@category_router.post(
    "", response_model=CategoryResponse, status_code=http_status.HTTP_201_CREATED
)
def create_category(
    request: CategoryRequest,
    service: CatalogService = Depends(get_catalog_service),
) -> CategoryResponse:
    return service.create_category(request)


@category_router.get("", response_model=list[CategoryResponse])
def list_categories(
    service: CatalogService = Depends(get_catalog_service),
) -> list[CategoryResponse]:
    return service.list_categories()


@category_router.get("/{category_id}", response_model=CategoryResponse)
def get_category(
    category_id: str,
    service: CatalogService = Depends(get_catalog_service),
) -> CategoryResponse:
    return service.get_category(category_id)


@category_router.delete("/{category_id}", status_code=http_status.HTTP_204_NO_CONTENT)
def delete_category(
    category_id: str,
    service: CatalogService = Depends(get_catalog_service),
) -> None:
    service.delete_category(category_id)


@slider_router.post("", response_model=SliderResponse, status_code=http_status.HTTP_201_CREATED)
def create_slider(
    title: str = Form(..., min_length=1, max_length=255),
    link_url: str | None = Form(default=None),
    position: int = Form(default=0, ge=0),
    active: bool = Form(default=True),
    image: UploadFile | None = File(default=None),
    service: CatalogService = Depends(get_catalog_service),
) -> SliderResponse:
    request = SliderRequest(title=title, link_url=link_url, position=position, active=active)
    upload = None
    if image is not None:
        upload = UploadedImage(
            filename=image.filename or "slider",
            content=image.file.read(),
            content_type=image.content_type,
        )
    return service.create_slider(request, upload)


@slider_router.get("", response_model=list[SliderResponse])
def list_sliders(service: CatalogService = Depends(get_catalog_service)) -> list[SliderResponse]:
    return service.list_sliders()


@slider_router.delete("/{slider_id}", status_code=http_status.HTTP_204_NO_CONTENT)
def delete_slider(
    slider_id: str,
    service: CatalogService = Depends(get_catalog_service),
) -> None:
    service.delete_slider(slider_id)
