"""Pydantic models for API request/response.

JSON bodies and query parameters use camelCase; Python attributes stay
snake_case via the alias generator on CamelModel.
"""

from datetime import date, datetime
from typing import Optional, Literal
from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serializing field names as camelCase."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Product Models
class ProductResponse(CamelModel):
    """Response model for a product."""
    id: str = Field(..., description="Product ID")
    name: str
    slug: str = Field(..., description="Unique URL-friendly identifier")
    description: str
    price: float = Field(..., ge=0, description="Unit price")
    images: list[str] = Field(default_factory=list, description="Image URLs")
    sizes: list[str] = Field(default_factory=list, description="Available size labels")
    colors: list[str] = Field(default_factory=list, description="Available color labels")
    stock: int = Field(..., ge=0, description="Units in stock")
    active: bool
    created_at: datetime
    updated_at: datetime


class PageMetaResponse(CamelModel):
    """Pagination metadata for a product listing."""
    total: int = Field(..., description="Total number of products matching filters")
    page: int = Field(..., description="Current page (1-based)")
    limit: int = Field(..., description="Page size")
    total_pages: int = Field(..., description="ceil(total / limit)")


class ProductListResponse(CamelModel):
    """Response model for product list with pagination."""
    items: list[ProductResponse]
    meta: PageMetaResponse


# User / Auth Models
class UserResponse(CamelModel):
    """User model returned by the API. Never carries the password hash."""
    id: str = Field(..., description="User ID")
    email: str = Field(..., description="User email")
    first_name: str
    last_name: Optional[str] = None
    phone: Optional[str] = None
    birth_date: Optional[date] = None
    role: Literal["USER", "ADMIN"] = Field("USER", description="Access role")
    created_at: datetime = Field(..., description="Account creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")


class RegisterRequest(CamelModel):
    """Request model for user registration."""
    email: EmailStr
    password: str = Field(..., min_length=6, description="User password")
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., max_length=100)
    phone: Optional[str] = Field(None, max_length=32)
    birth_date: Optional[date] = Field(None, description="ISO date (YYYY-MM-DD)")


class LoginRequest(CamelModel):
    """Request model for user login."""
    email: EmailStr
    password: str


class AuthResponse(CamelModel):
    """Response model for authentication."""
    token: str = Field(..., description="JWT access token")
    user: UserResponse
