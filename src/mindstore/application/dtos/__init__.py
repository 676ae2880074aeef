from mindstore.application.dtos.person_dto import (
    AdminDTO,
    PersonCreateDTO,
    PersonDTO,
    PersonUpdateDTO,
    UserDTO,
)
from mindstore.application.dtos.product_dto import (
    CategoryDTO,
    ProductCreateDTO,
    ProductDTO,
    ProductUpdateDTO,
    RatingDTO,
)

__all__ = [
    "AdminDTO",
    "CategoryDTO",
    "PersonCreateDTO",
    "PersonDTO",
    "PersonUpdateDTO",
    "ProductCreateDTO",
    "ProductDTO",
    "ProductUpdateDTO",
    "RatingDTO",
    "UserDTO",
]
