"""Catalog domain exceptions."""

from typing import Optional

from mindstore.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
)


class ProductNotFoundError(EntityNotFoundError):
    """Product not found (by id, title or title search)."""

    def __init__(
        self,
        product_id: Optional[int] = None,
        title: Optional[str] = None,
    ) -> None:
        details: dict = {}
        if product_id is not None:
            details["product_id"] = product_id
        if title is not None:
            details["title"] = title
        super().__init__("Product not found", ErrorCode.PRODUCT_NOT_FOUND, details)


class CategoryNotFoundError(EntityNotFoundError):
    """Category not found (by id or name)."""

    def __init__(
        self,
        category_id: Optional[int] = None,
        name: Optional[str] = None,
    ) -> None:
        details: dict = {}
        if category_id is not None:
            details["category_id"] = category_id
        if name is not None:
            details["name"] = name
        super().__init__(
            "Category not found",
            ErrorCode.CATEGORY_NOT_FOUND,
            details,
        )


class ProductAlreadyExistsError(ConflictError):
    """A product with this title already exists."""

    def __init__(self, title: str) -> None:
        self.title = title
        super().__init__(
            "Product already exists",
            ErrorCode.PRODUCT_ALREADY_EXISTS,
            {"title": title},
        )


class CategoryAlreadyExistsError(ConflictError):
    """A category with this name already exists."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            "Category already exists",
            ErrorCode.CATEGORY_ALREADY_EXISTS,
            {"name": name},
        )
