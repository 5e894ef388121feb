"""
Product Controller
==================

FastAPI controller for product management endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends, Query, status

from storefront.api.v1.dependencies import (
    get_delete_product_use_case,
    get_get_product_use_case,
    get_product_service,
    get_register_product_use_case,
    get_set_product_stock_use_case,
)
from storefront.api.v1.errors import to_http_exception
from storefront.application.dto.product_dto import (
    DeleteResponse,
    PriceUpdateRequest,
    ProductCreateRequest,
    ProductResponse,
    StockAdjustRequest,
    StockSetRequest,
)
from storefront.application.services.product_service import ProductService
from storefront.application.use_cases.product_use_cases import (
    DeleteProductUseCase,
    GetProductUseCase,
    RegisterProductUseCase,
    SetProductStockUseCase,
)
from storefront.core.exceptions import StorefrontError

router = APIRouter(tags=["products"])


@router.post(
    "/",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a product",
    description="Register a new product. Price must be positive and name non-blank.",
)
async def register_product(
    request: ProductCreateRequest,
    use_case: RegisterProductUseCase = Depends(get_register_product_use_case),
) -> ProductResponse:
    """Register a product."""
    try:
        product = use_case.execute(request.to_entity())
    except StorefrontError as e:
        raise to_http_exception(e)
    return ProductResponse.from_entity(product)


@router.get(
    "/",
    response_model=List[ProductResponse],
    summary="List products",
)
async def list_products(
    service: ProductService = Depends(get_product_service),
) -> List[ProductResponse]:
    """List all products."""
    return [ProductResponse.from_entity(p) for p in service.get_all()]


@router.get(
    "/search/price-range",
    response_model=List[ProductResponse],
    summary="Find products by price range",
    description="Inclusive on both ends. An inverted range returns an empty list.",
)
async def find_by_price_range(
    min_price: float = Query(...),
    max_price: float = Query(...),
    service: ProductService = Depends(get_product_service),
) -> List[ProductResponse]:
    products = service.get_by_price_range(min_price, max_price)
    return [ProductResponse.from_entity(p) for p in products]


@router.get(
    "/search/low-stock",
    response_model=List[ProductResponse],
    summary="Find products with stock below a threshold",
)
async def find_low_stock(
    threshold: int = Query(...),
    service: ProductService = Depends(get_product_service),
) -> List[ProductResponse]:
    return [ProductResponse.from_entity(p) for p in service.get_low_stock(threshold)]


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    summary="Get product by ID",
)
async def get_product(
    product_id: int,
    use_case: GetProductUseCase = Depends(get_get_product_use_case),
) -> ProductResponse:
    """Get a specific product by ID."""
    try:
        product = use_case.execute(product_id)
    except StorefrontError as e:
        raise to_http_exception(e)
    return ProductResponse.from_entity(product)


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    summary="Replace a product",
)
async def replace_product(
    product_id: int,
    request: ProductCreateRequest,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    """Replace all fields of an existing product."""
    try:
        service.get_by_id(product_id)
        product = service.save(request.to_entity(product_id))
    except StorefrontError as e:
        raise to_http_exception(e)
    return ProductResponse.from_entity(product)


@router.patch(
    "/{product_id}/stock",
    response_model=ProductResponse,
    summary="Adjust stock",
    description="Add a (possibly negative) delta to the stock. Rejected if stock would go below zero.",
)
async def adjust_stock(
    product_id: int,
    request: StockAdjustRequest,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    try:
        product = service.adjust_stock(product_id, request.delta)
    except StorefrontError as e:
        raise to_http_exception(e)
    return ProductResponse.from_entity(product)


@router.put(
    "/{product_id}/stock",
    response_model=ProductResponse,
    summary="Set stock",
    description="Overwrite the stock with an absolute, non-negative quantity.",
)
async def set_stock(
    product_id: int,
    request: StockSetRequest,
    use_case: SetProductStockUseCase = Depends(get_set_product_stock_use_case),
) -> ProductResponse:
    try:
        product = use_case.execute(product_id, request.quantity)
    except StorefrontError as e:
        raise to_http_exception(e)
    return ProductResponse.from_entity(product)


@router.patch(
    "/{product_id}/price",
    response_model=ProductResponse,
    summary="Change price",
)
async def set_price(
    product_id: int,
    request: PriceUpdateRequest,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    try:
        product = service.set_price(product_id, request.price)
    except StorefrontError as e:
        raise to_http_exception(e)
    return ProductResponse.from_entity(product)


@router.delete(
    "/{product_id}",
    response_model=DeleteResponse,
    summary="Delete a product",
    description="Always answers 200; ``deleted`` is false when the product could not be deleted.",
)
async def delete_product(
    product_id: int,
    use_case: DeleteProductUseCase = Depends(get_delete_product_use_case),
) -> DeleteResponse:
    return DeleteResponse(id=product_id, deleted=use_case.execute(product_id))
