"""
Pydantic schemas for the menu API.

Request schemas validate incoming payloads; response schemas define the
public API contract.
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Literal

from pydantic import AfterValidator, ConfigDict, Field

from apps.web.core.validation import APISchema, NonEmptyStr, check_url

ItemTypeValue = Literal["starter", "maindish", "dessert"]

# =============================================================================
# Requests
# =============================================================================


class CategoryRequest(APISchema):
    """Body for POST /api/categories and PUT /api/categories/{id}."""

    name: NonEmptyStr = Field(..., max_length=200)


class MenuItemRequest(APISchema):
    """Body for POST /api/menu-items and PUT /api/menu-items/{id}."""

    name: NonEmptyStr = Field(..., max_length=200)
    description: NonEmptyStr
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    category_id: int
    is_special: bool = False
    is_main_menu: bool = False
    image_url: Annotated[str, AfterValidator(check_url)] = Field(..., max_length=500)
    item_type: ItemTypeValue


class MenuSettingsRequest(APISchema):
    """Body for POST /api/menu-settings."""

    show_price: bool
    show_description: bool


# =============================================================================
# Responses
# =============================================================================


class CategorySchema(APISchema):
    """A menu category."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class MenuItemSchema(APISchema):
    """
    A menu item with its category embedded.

    price and description are None when hidden by the display policy.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None
    price: Decimal | None
    category_id: int
    category: CategorySchema
    is_special: bool
    is_main_menu: bool
    image_url: str
    item_type: ItemTypeValue
    created_at: datetime
    updated_at: datetime


class MenuSettingsSchema(APISchema):
    """The global display policy."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    show_price: bool
    show_description: bool
    updated_at: datetime
