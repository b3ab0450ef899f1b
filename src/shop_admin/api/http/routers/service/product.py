"""Product API router."""

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from fastapi import status as http_status
from pydantic import ValidationError

from src.shop_admin.api.http.deps import get_product_service, to_zero_based
from src.shop_admin.core.errors import InvalidPayloadError
from src.shop_admin.core.models.page import Page
from src.shop_admin.core.models.product import (
    ProductFilterRequest,
    ProductRequest,
    ProductResponse,
    ProductStatistics,
    ProductUpdateRequest,
)
from src.shop_admin.core.services import ProductService, UploadedImage
from src.shop_admin.entities.catalog.product import Product

router = APIRouter()


@router.post("", response_model=ProductResponse, status_code=http_status.HTTP_201_CREATED)
def create_product(
    product: str = Form(..., description="ProductRequest as a JSON document"),
    images: list[UploadFile] | None = File(default=None),
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    """Create a product from a multipart form with optional images."""
    try:
        request = ProductRequest.model_validate_json(product)
    except ValidationError as e:
        raise InvalidPayloadError(detail=f"Invalid product payload: {e.error_count()} error(s)") from e

    uploads = [
        UploadedImage(
            filename=image.filename or f"image-{index}",
            content=image.file.read(),
            content_type=image.content_type,
        )
        for index, image in enumerate(images or [])
    ]
    return service.create(request, uploads)


@router.get("", response_model=Page[ProductResponse])
def list_products(
    category_name: str | None = Query(default=None),
    brand_name: str | None = Query(default=None),
    status: str | None = Query(default=None),
    sort_by_price: str | None = Query(default=None),
    sort_by_name: str | None = Query(default=None),
    sort_by_created_at: str | None = Query(default=None),
    page: int = Query(default=1, description="1-based page number"),
    size: int = Query(default=10, ge=1),
    service: ProductService = Depends(get_product_service),
) -> Page[ProductResponse]:
    """List products filtered by category, brand and status."""
    request = ProductFilterRequest(
        category_name=category_name,
        brand_name=brand_name,
        status=status,
        sort_by_price=sort_by_price,
        sort_by_name=sort_by_name,
        sort_by_created_at=sort_by_created_at,
        page=to_zero_based(page),
        size=size,
    )
    return service.get_products(request)


@router.get("/search", response_model=Page[Product])
def search_products(
    keyword: str = Query(default=""),
    page: int = Query(default=1),
    size: int = Query(default=5, ge=1),
    service: ProductService = Depends(get_product_service),
) -> Page[Product]:
    return service.search_products(keyword, to_zero_based(page), size)


@router.get("/statistics", response_model=ProductStatistics)
def product_statistics(
    service: ProductService = Depends(get_product_service),
) -> ProductStatistics:
    return service.get_product_statistics()


@router.delete("/bulk", status_code=http_status.HTTP_204_NO_CONTENT)
def delete_products(
    product_ids: list[str],
    service: ProductService = Depends(get_product_service),
) -> None:
    """Delete several products; each deletion commits on its own."""
    service.delete_products(product_ids)


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    return service.get_product(product_id)


@router.get("/{product_id}/related", response_model=list[ProductResponse])
def related_products(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> list[ProductResponse]:
    """Up to five other products of the same category."""
    return service.get_related_products(product_id)


@router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: str,
    request: ProductUpdateRequest,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    return service.update_product(product_id, request)


@router.patch("/{product_id}", response_model=ProductResponse)
def change_product_status(
    product_id: str,
    status: str = Query(...),
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    return service.change_status(product_id, status)


@router.delete("/{product_id}")
def delete_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> dict[str, str]:
    service.delete_product(product_id)
    return {"message": "Delete successfully"}
