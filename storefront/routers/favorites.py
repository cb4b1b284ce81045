from fastapi import APIRouter, HTTPException

from storefront.errors import ProductNotFoundError
from storefront.schemas.favorites import FavoriteToggle, FavoritesOut
from storefront.schemas.products import ProductOut
from storefront.state import get_catalog, get_favorites

router = APIRouter(prefix="/customers/{customer_id}/favorites", tags=["favorites"])


def favorites_payload(customer_id: int) -> FavoritesOut:
    products = get_favorites().products(customer_id, get_catalog())
    return FavoritesOut(
        customer_id=customer_id,
        product_ids=[product.id for product in products],
        products=[ProductOut.from_product(product) for product in products],
    )


@router.get("", response_model=FavoritesOut)
def list_favorites(customer_id: int) -> FavoritesOut:
    return favorites_payload(customer_id)


@router.put("/{product_id}", response_model=FavoritesOut)
def add_favorite(customer_id: int, product_id: int) -> FavoritesOut:
    try:
        get_favorites().add(customer_id, product_id)
    except ProductNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    return favorites_payload(customer_id)


@router.delete("/{product_id}", response_model=FavoritesOut)
def remove_favorite(customer_id: int, product_id: int) -> FavoritesOut:
    get_favorites().remove(customer_id, product_id)
    return favorites_payload(customer_id)


@router.post("/{product_id}/toggle", response_model=FavoriteToggle)
def toggle_favorite(customer_id: int, product_id: int) -> FavoriteToggle:
    try:
        favorited, product_ids = get_favorites().toggle(customer_id, product_id)
    except ProductNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    return FavoriteToggle(
        customer_id=customer_id,
        product_id=product_id,
        favorited=favorited,
        product_ids=product_ids,
    )
