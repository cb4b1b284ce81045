"""Errors raised by the catalog services and translated to HTTP responses by the routers."""


class CatalogError(Exception):
    """Base error for catalog operations."""
    pass


class InvalidQueryError(CatalogError, ValueError):
    """Caller misuse: non-positive page or page size, or a malformed price range."""
    pass


class ProductValidationError(CatalogError, ValueError):
    """Product data missing required fields or carrying bad values."""
    pass


class ProductNotFoundError(CatalogError, LookupError):
    """No product with the requested id exists in the catalog."""

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product not found: {product_id}")
        self.product_id = product_id
