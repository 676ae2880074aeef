from mindstore.presentation.api.schemas.admin import (
    CategoryResponse,
    CreateCategoryRequest,
    CreatePersonRequest,
    CreateProductRequest,
    PersonResponse,
    ProductResponse,
    RatingResponse,
    UpdatePersonRequest,
    UpdateProductRequest,
)

__all__ = [
    "CategoryResponse",
    "CreateCategoryRequest",
    "CreatePersonRequest",
    "CreateProductRequest",
    "PersonResponse",
    "ProductResponse",
    "RatingResponse",
    "UpdatePersonRequest",
    "UpdateProductRequest",
]
