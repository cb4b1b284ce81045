from typing import Optional

from fastapi import APIRouter, HTTPException, Response

from storefront.errors import InvalidQueryError, ProductNotFoundError, ProductValidationError
from storefront.schemas.products import CatalogPage, ProductCreate, ProductOut
from storefront.services.search import SearchParams, export_catalog, search_catalog
from storefront.state import get_repository

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=CatalogPage)
def list_products(
    search: Optional[str] = None,
    category: Optional[str] = None,
    brand: Optional[str] = None,
    price: Optional[str] = None,
    stock: Optional[str] = None,
    sort: Optional[str] = None,
    page: int = 1,
    page_size: Optional[int] = None,
) -> CatalogPage:
    params = SearchParams(search, category, brand, price, stock, sort, page, page_size)
    try:
        return search_catalog(params)
    except InvalidQueryError as exc:
        raise HTTPException(status_code=400, detail=str(exc))


@router.get("/export")
def export_products(
    search: Optional[str] = None,
    category: Optional[str] = None,
    brand: Optional[str] = None,
    price: Optional[str] = None,
    stock: Optional[str] = None,
    sort: Optional[str] = None,
) -> Response:
    params = SearchParams(search, category, brand, price, stock, sort)
    try:
        filename, content = export_catalog(params)
    except InvalidQueryError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return Response(
        content=content,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/{product_id}", response_model=ProductOut)
def product_detail(product_id: int) -> ProductOut:
    try:
        return ProductOut.from_product(get_repository().get_product(product_id))
    except ProductNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))


@router.post("", response_model=ProductOut, status_code=201)
def add_product(payload: ProductCreate) -> ProductOut:
    try:
        product = get_repository().add_product(payload.model_dump())
    except ProductValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return ProductOut.from_product(product)


@router.delete("/{product_id}", status_code=204)
def remove_product(product_id: int) -> Response:
    try:
        get_repository().remove_product(product_id)
    except ProductNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    return Response(status_code=204)
