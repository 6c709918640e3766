"""
Pydantic schemas for menu item API requests and responses.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class MenuItemSchema(BaseModel):
    """A menu item as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str
    price: Decimal
    image_url: str
    qr_code_link: str


class MenuItemCreateRequest(BaseModel):
    """Request body for POST /api/menu-items."""

    name: str = Field(..., min_length=1, max_length=200)
    description: str = Field(default="", max_length=2000)
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    image_url: str = Field(default="", max_length=500)
    qr_code_link: str = Field(default="", max_length=500)


class MenuItemUpdateRequest(BaseModel):
    """Request body for PATCH /api/menu-items/{item_id}. All fields optional."""

    name: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=2000)
    price: Decimal | None = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    image_url: str | None = Field(default=None, max_length=500)
    qr_code_link: str | None = Field(default=None, max_length=500)
