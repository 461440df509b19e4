"""Product API router."""

from fastapi import APIRouter, Depends, Response
from loguru._logger import Logger
from starlette import status
from starlette.responses import JSONResponse

from src.product_api.api.http.deps import get_logger, get_product_service
from src.product_api.core.results import ErrorKind, StoreError
from src.product_api.core.services import ProductService
from src.product_api.entities.product import Product, ProductCreate

router = APIRouter(prefix="/products", tags=["products"])


def problem_response(status_code: int, title: str, detail: str) -> JSONResponse:
    """RFC 7807 style error body."""
    return JSONResponse(
        status_code=status_code,
        content={"title": title, "status": status_code, "detail": detail},
        media_type="application/problem+json",
    )


def error_response(error: StoreError) -> Response:
    if error.kind is ErrorKind.NOT_FOUND:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    if error.kind is ErrorKind.VALIDATION:
        return problem_response(
            status.HTTP_400_BAD_REQUEST, "Invalid product", error.message
        )
    # Storage details stay in the log
    return problem_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An error occurred while processing your request.",
        "Database error",
    )


@router.get("", response_model=list[Product])
def list_products(
    service: ProductService = Depends(get_product_service),
    log: Logger = Depends(get_logger),
) -> list[Product] | Response:
    """List all products."""
    log.info("GET /products endpoint called")
    result = service.list_products()
    if not result.ok:
        return error_response(result.error)
    log.info("Found {} products", len(result.value))
    return result.value


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
def create_product(
    product: ProductCreate,
    response: Response,
    service: ProductService = Depends(get_product_service),
    log: Logger = Depends(get_logger),
) -> Product | Response:
    """Create a product; the database assigns its id."""
    log.info("POST /products called with: {}", product.name)
    result = service.insert_product(product)
    if not result.ok:
        return error_response(result.error)
    response.headers["Location"] = f"/products/{result.value.id}"
    return result.value


@router.get("/{product_id}", response_model=Product)
def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
    log: Logger = Depends(get_logger),
) -> Product | Response:
    """Get a product by id."""
    log.info("GET /products/{} called", product_id)
    result = service.get_product(product_id)
    if not result.ok:
        return error_response(result.error)
    return result.value
