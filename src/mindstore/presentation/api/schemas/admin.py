"""Request and response schemas for the admin API."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

# -----------------------------------------------------------------------------
# Products & Categories
# -----------------------------------------------------------------------------


class RatingResponse(BaseModel):
    id: int
    rate: float
    count: int

    model_config = ConfigDict(from_attributes=True)


class ProductResponse(BaseModel):
    """Response schema for a product; ``category`` is the category name."""

    id: int
    title: str
    price: Decimal
    description: str
    image: Optional[str]
    category: str
    rating: RatingResponse

    model_config = ConfigDict(from_attributes=True)


class CreateProductRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    price: Decimal = Field(..., ge=0)
    category: str = Field(..., min_length=1, description="Existing category name")
    description: str = ""
    image: Optional[str] = None


class UpdateProductRequest(BaseModel):
    """Partial update; omitted fields are left unchanged."""

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    price: Optional[Decimal] = Field(None, ge=0)
    category: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    image: Optional[str] = None


class CategoryResponse(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)


class CreateCategoryRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)


# -----------------------------------------------------------------------------
# Users & Admins
# -----------------------------------------------------------------------------


class PersonResponse(BaseModel):
    """Response schema for a user or admin (never includes the password)."""

    id: int
    name: str
    email: str
    role: str

    model_config = ConfigDict(from_attributes=True)


class CreatePersonRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=72)


class UpdatePersonRequest(BaseModel):
    """Partial update; omitted fields are left unchanged."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=8, max_length=72)
