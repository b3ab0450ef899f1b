from src.shop_admin.core.models.product import (
    ProductImageResponse,
    ProductRequest,
    ProductResponse,
    ProductUpdateRequest,
)
from src.shop_admin.entities.catalog.product import (
    Product,
    ProductImageTable,
    ProductTable,
)


def to_product_table(request: ProductRequest) -> ProductTable:
    """Build a product row from a create request; brand and category are resolved by the caller."""
    return ProductTable(
        name=request.name,
        description=request.description,
        price=request.price,
        quantity=request.quantity,
        status=request.status,
    )


def apply_product_update(product: ProductTable, request: ProductUpdateRequest) -> ProductTable:
    """Copy the non-null scalar fields of ``request`` onto ``product``.

    Brand and category names are left to the caller since they need a lookup.
    """
    if request.name is not None:
        product.name = request.name
    if request.description is not None:
        product.description = request.description
    if request.price is not None:
        product.price = request.price
    if request.quantity is not None:
        product.quantity = request.quantity
    if request.status is not None:
        product.status = request.status
    return product


def to_product_image_response(image: ProductImageTable) -> ProductImageResponse:
    return ProductImageResponse(
        id=image.id, image_url=image.image_url, public_id=image.public_id
    )


def to_product_response(product: ProductTable) -> ProductResponse:
    return ProductResponse(
        id=product.id,
        name=product.name,
        description=product.description,
        price=product.price,
        quantity=product.quantity,
        status=product.status,
        brand_name=product.brand.name if product.brand else None,
        category_name=product.category.name if product.category else None,
        thumbnail_url=product.thumbnail_url,
        images=[to_product_image_response(image) for image in product.images],
        created_at=product.created_at,
        updated_at=product.updated_at,
    )


def to_product(product: ProductTable) -> Product:
    return Product.model_validate(product, from_attributes=True)
